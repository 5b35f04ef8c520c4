"""Domain layer containing models and file discovery logic."""

from .artifact_finder import (
    AUDIO_EXTENSIONS,
    TRANSCRIPT_EXTENSION,
    find_audio_artifact,
    find_session_files,
    find_transcript_artifact,
)
from .models import (
    ExternalProcessResult,
    ExternalTool,
    InvocationAttempt,
    LocatedTool,
    PipelineState,
    Session,
    ToolInvocationForm,
    TranscriptionArtifact,
    TranscriptionResult,
)
from .tools import whisper_tool, yt_dlp_tool

__all__ = [
    "AUDIO_EXTENSIONS",
    "TRANSCRIPT_EXTENSION",
    "find_audio_artifact",
    "find_session_files",
    "find_transcript_artifact",
    "ExternalProcessResult",
    "ExternalTool",
    "InvocationAttempt",
    "LocatedTool",
    "PipelineState",
    "Session",
    "ToolInvocationForm",
    "TranscriptionArtifact",
    "TranscriptionResult",
    "whisper_tool",
    "yt_dlp_tool",
]
