"""Custom exceptions for the transcriber-api service."""

from collections.abc import Sequence


class ProcessSpawnError(Exception):
    """Raised when an external command cannot be started at all."""

    def __init__(self, command: Sequence[str], cause: Exception | None = None):
        self.command = tuple(command)
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"Failed to start '{' '.join(self.command)}'{detail}")


class PipelineError(Exception):
    """Base class for failures that abort a transcription request."""

    stage = "pipeline"


class ToolNotAvailableError(PipelineError):
    """Raised when no invocation form of a required external tool works."""

    stage = "tools"

    def __init__(self, tool_name: str, install_hint: str):
        self.tool_name = tool_name
        self.install_hint = install_hint
        super().__init__(
            f"{tool_name} is not installed. Please install it with: {install_hint}"
        )


class StageExecutionError(PipelineError):
    """Raised when every invocation form of a stage's tool has failed."""

    def __init__(
        self,
        message: str,
        attempts: Sequence | None = None,
        cause: Exception | None = None,
    ):
        self.attempts = list(attempts or [])
        self.cause = cause
        output = self.output
        super().__init__(f"{message}. Output: {output}" if output else message)

    @property
    def output(self) -> str:
        """Captured output of the most recent attempt that produced any."""
        for attempt in reversed(self.attempts):
            if attempt.output:
                return attempt.output
        return ""

    @property
    def timed_out(self) -> bool:
        return any(attempt.timed_out for attempt in self.attempts)


class AudioExtractionError(StageExecutionError):
    """Raised when audio could not be extracted from the video URL."""

    stage = "extraction"

    def __init__(
        self,
        url: str,
        attempts: Sequence | None = None,
        reason: str = "Failed to extract audio",
        cause: Exception | None = None,
    ):
        self.url = url
        super().__init__(reason, attempts, cause)


class AudioExtractionTimeoutError(AudioExtractionError):
    """Raised when the audio extractor exceeded its deadline."""

    def __init__(
        self, url: str, timeout_seconds: float, attempts: Sequence | None = None
    ):
        self.timeout_seconds = timeout_seconds
        super().__init__(
            url,
            attempts,
            reason=f"Audio extraction timed out after {timeout_seconds:g} seconds",
        )


class TranscriptionError(StageExecutionError):
    """Raised when the extracted audio could not be transcribed."""

    stage = "transcription"

    def __init__(
        self,
        audio_file: str,
        attempts: Sequence | None = None,
        reason: str = "Failed to transcribe audio",
        cause: Exception | None = None,
    ):
        self.audio_file = audio_file
        super().__init__(reason, attempts, cause)


class TranscriptionTimeoutError(TranscriptionError):
    """Raised when the transcriber exceeded its deadline."""

    def __init__(
        self, audio_file: str, timeout_seconds: float, attempts: Sequence | None = None
    ):
        self.timeout_seconds = timeout_seconds
        super().__init__(
            audio_file,
            attempts,
            reason=f"Transcription timed out after {timeout_seconds:g} seconds",
        )


class AudioTooLargeError(PipelineError):
    """Raised before transcription when the audio file exceeds the size limit."""

    stage = "transcription"

    def __init__(self, audio_file: str, size_mb: int, limit_mb: int):
        self.audio_file = audio_file
        self.size_mb = size_mb
        self.limit_mb = limit_mb
        super().__init__(
            f"Audio file too large ({size_mb} MB, limit {limit_mb} MB). "
            "Try a shorter video."
        )
