"""Orchestrates a single URL-to-text transcription request."""

from pathlib import Path

from transcriber_common.logging import setup_logging

from domain.artifact_finder import find_session_files
from domain.models import (
    PipelineState,
    Session,
    TranscriptionArtifact,
    TranscriptionResult,
)
from exceptions import AudioTooLargeError, PipelineError, TranscriptionError
from infrastructure.interfaces import AudioExtractor, SpeechTranscriber
from infrastructure.tool_locator import ToolLocator

logger = setup_logging()

_BYTES_PER_MB = 1024 * 1024


class _PipelineRun:
    """Per-request state: current stage and every file created so far."""

    def __init__(self, session: Session):
        self.session = session
        self.state = PipelineState.INIT
        self.artifacts: list[Path] = []

    def advance(self, state: PipelineState) -> None:
        logger.info(
            "Pipeline state changed",
            extra={
                "session_id": self.session.id,
                "from_state": self.state.value,
                "to_state": state.value,
            },
        )
        self.state = state

    def track(self, artifact: TranscriptionArtifact) -> Path:
        self.artifacts.append(artifact.path)
        return artifact.path


class TranscriptionPipeline:
    """
    Runs locate -> extract audio -> transcribe -> read -> cleanup.

    One instance serves every request. Nothing request-specific is kept on the
    instance; concurrent runs share only the working directory and are kept
    apart by session-qualified file names.
    """

    def __init__(
        self,
        locator: ToolLocator,
        extractor: AudioExtractor,
        transcriber: SpeechTranscriber,
        work_dir: Path,
        max_audio_size_mb: int = 100,
    ):
        self._locator = locator
        self._extractor = extractor
        self._transcriber = transcriber
        self._work_dir = work_dir
        self._max_audio_size_mb = max_audio_size_mb

    def run(self, url: str, session: Session | None = None) -> TranscriptionResult:
        """
        Transcribes the audio track of the video at ``url``.

        Args:
            url: Video URL, already validated by the caller.
            session: Session to scope temporary files with. A fresh one is
                generated when omitted.

        Returns:
            TranscriptionResult with the trimmed transcript text.

        Raises:
            ToolNotAvailableError: If either external tool cannot be located.
            AudioExtractionError: If the audio track could not be extracted.
            AudioTooLargeError: If the extracted audio exceeds the size limit.
            TranscriptionError: If the audio could not be transcribed.
        """
        run = _PipelineRun(session or Session())
        logger.info(
            "Transcription request started",
            extra={"session_id": run.session.id, "url": url},
        )
        try:
            extractor_tool = self._locator.locate(self._extractor.tool)
            transcriber_tool = self._locator.locate(self._transcriber.tool)
            run.advance(PipelineState.TOOLS_CHECKED)

            run.advance(PipelineState.AUDIO_EXTRACTING)
            audio = self._extractor.extract(url, run.session, extractor_tool)
            run.track(audio)
            run.advance(PipelineState.AUDIO_READY)

            self._check_audio_size(audio)

            run.advance(PipelineState.TRANSCRIBING)
            transcript = self._transcriber.transcribe(audio, transcriber_tool)
            transcript_path = run.track(transcript)
            run.advance(PipelineState.TRANSCRIPT_READY)

            text = self._read_transcript(transcript_path)
            run.advance(PipelineState.DONE)
            logger.info(
                "Transcription completed successfully",
                extra={"session_id": run.session.id, "characters": len(text)},
            )
            return TranscriptionResult(session_id=run.session.id, text=text)
        except PipelineError as e:
            logger.error(
                "Transcription request failed",
                extra={
                    "session_id": run.session.id,
                    "state": run.state.value,
                    "stage": e.stage,
                    "error": str(e),
                },
            )
            run.advance(PipelineState.ERROR)
            raise
        finally:
            self._cleanup(run)

    def _check_audio_size(self, audio: TranscriptionArtifact) -> None:
        size_mb = audio.path.stat().st_size // _BYTES_PER_MB
        logger.info(
            "Audio file size",
            extra={"session_id": audio.session_id, "size_mb": size_mb},
        )
        if size_mb > self._max_audio_size_mb:
            raise AudioTooLargeError(str(audio.path), size_mb, self._max_audio_size_mb)

    def _read_transcript(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as e:
            raise TranscriptionError(
                str(path), reason=f"Failed to read transcription file: {e}", cause=e
            ) from e

    def _cleanup(self, run: _PipelineRun) -> None:
        paths = set(run.artifacts)
        paths.update(find_session_files(self._work_dir, run.session))
        for path in sorted(paths):
            try:
                path.unlink(missing_ok=True)
            except OSError as e:
                logger.warning(
                    "Failed to cleanup file",
                    extra={
                        "session_id": run.session.id,
                        "path": str(path),
                        "error": str(e),
                    },
                )
