"""Infrastructure layer exports."""

from .subprocess_runner import SubprocessRunner
from .tool_locator import ToolLocator
from .whisper_transcriber import WhisperTranscriber
from .ytdlp_extractor import YtDlpAudioExtractor

__all__ = [
    "SubprocessRunner",
    "ToolLocator",
    "WhisperTranscriber",
    "YtDlpAudioExtractor",
]
