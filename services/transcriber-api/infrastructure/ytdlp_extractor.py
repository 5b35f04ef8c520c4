"""yt-dlp implementation of the AudioExtractor interface."""

from pathlib import Path

from transcriber_common.logging import setup_logging

from config import ExtractionConfig
from domain.artifact_finder import find_audio_artifact
from domain.models import ExternalTool, LocatedTool, Session, TranscriptionArtifact
from exceptions import AudioExtractionError, AudioExtractionTimeoutError

from .form_fallback import run_until_artifact
from .interfaces import AudioExtractor, ProcessRunner

logger = setup_logging()


class YtDlpAudioExtractor(AudioExtractor):
    """Downloads a video's audio track with yt-dlp."""

    def __init__(
        self,
        runner: ProcessRunner,
        tool: ExternalTool,
        config: ExtractionConfig,
        work_dir: Path,
    ):
        self._runner = runner
        self._tool = tool
        self._config = config
        self._work_dir = work_dir

    @property
    def tool(self) -> ExternalTool:
        return self._tool

    def extract(
        self, url: str, session: Session, located: LocatedTool
    ) -> TranscriptionArtifact:
        logger.info(
            "Starting audio extraction",
            extra={"session_id": session.id, "form": located.form.label},
        )
        path, attempts = run_until_artifact(
            self._runner,
            located.candidates,
            self._build_args(url, session),
            self._config.timeout_seconds,
            lambda: find_audio_artifact(
                self._work_dir, session, self._config.allow_loose_match
            ),
            label=self._tool.name,
        )
        if path is None:
            if any(attempt.timed_out for attempt in attempts):
                raise AudioExtractionTimeoutError(
                    url, self._config.timeout_seconds, attempts
                )
            raise AudioExtractionError(url, attempts)

        logger.info(
            "Audio extraction completed",
            extra={"session_id": session.id, "path": str(path)},
        )
        return TranscriptionArtifact(path=path, session_id=session.id)

    def _build_args(self, url: str, session: Session) -> list[str]:
        output_template = self._work_dir / f"{session.audio_stem}.%(ext)s"
        return [
            "--extract-audio",
            "--audio-format",
            self._config.audio_format,
            "--audio-quality",
            self._config.audio_quality,
            "--postprocessor-args",
            f"ffmpeg:-t {self._config.max_duration_seconds}",
            "--output",
            str(output_template),
            "--no-playlist",
            "--format",
            self._config.stream_format,
            url,
        ]
