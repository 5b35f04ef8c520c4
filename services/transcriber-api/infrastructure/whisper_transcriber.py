"""Whisper CLI implementation of the SpeechTranscriber interface."""

from pathlib import Path

from transcriber_common.logging import setup_logging

from config import TranscriptionConfig
from domain.artifact_finder import find_transcript_artifact
from domain.models import ExternalTool, LocatedTool, TranscriptionArtifact
from exceptions import TranscriptionError, TranscriptionTimeoutError

from .form_fallback import run_until_artifact
from .interfaces import ProcessRunner, SpeechTranscriber

logger = setup_logging()


class WhisperTranscriber(SpeechTranscriber):
    """Transcribes audio files with the openai-whisper command line."""

    def __init__(
        self,
        runner: ProcessRunner,
        tool: ExternalTool,
        config: TranscriptionConfig,
        work_dir: Path,
    ):
        self._runner = runner
        self._tool = tool
        self._config = config
        self._work_dir = work_dir

    @property
    def tool(self) -> ExternalTool:
        return self._tool

    def transcribe(
        self, audio: TranscriptionArtifact, located: LocatedTool
    ) -> TranscriptionArtifact:
        logger.info(
            "Starting transcription",
            extra={
                "session_id": audio.session_id,
                "path": str(audio.path),
                "model": self._config.model,
            },
        )
        path, attempts = run_until_artifact(
            self._runner,
            located.candidates,
            [
                str(audio.path),
                "--model",
                self._config.model,
                "--output_format",
                self._config.output_format,
                "--output_dir",
                str(self._work_dir),
                "--verbose",
                "True",
            ],
            self._config.timeout_seconds,
            lambda: find_transcript_artifact(self._work_dir, audio.path),
            label=self._tool.name,
        )
        if path is None:
            if any(attempt.timed_out for attempt in attempts):
                raise TranscriptionTimeoutError(
                    str(audio.path), self._config.timeout_seconds, attempts
                )
            raise TranscriptionError(str(audio.path), attempts)

        logger.info(
            "Transcription completed",
            extra={"session_id": audio.session_id, "path": str(path)},
        )
        return TranscriptionArtifact(path=path, session_id=audio.session_id)
