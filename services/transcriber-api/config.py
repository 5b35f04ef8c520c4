"""Application configuration loaded from environment variables."""

import os
import tempfile
from pathlib import Path

from pydantic import BaseModel, Field


class ExtractionConfig(BaseModel, frozen=True):
    """Audio extractor (yt-dlp) settings."""

    audio_format: str = "wav"
    audio_quality: str = "0"
    stream_format: str = "140"
    max_duration_seconds: int = Field(default=600, gt=0)
    timeout_seconds: float = Field(default=600.0, gt=0)
    allow_loose_match: bool = False


class TranscriptionConfig(BaseModel, frozen=True):
    """Speech transcriber (whisper) settings."""

    model: str = "base"
    output_format: str = "txt"
    timeout_seconds: float = Field(default=1800.0, gt=0)
    max_audio_size_mb: int = Field(default=100, gt=0)


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    work_dir: Path
    probe_timeout_seconds: float = Field(default=10.0, gt=0, le=10)
    extraction: ExtractionConfig = ExtractionConfig()
    transcription: TranscriptionConfig = TranscriptionConfig()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        work_dir=Path(os.getenv("TRANSCRIBER_WORK_DIR", tempfile.gettempdir())),
        probe_timeout_seconds=float(os.getenv("TOOL_PROBE_TIMEOUT_SECONDS", "10")),
        extraction=ExtractionConfig(
            max_duration_seconds=int(os.getenv("MAX_AUDIO_DURATION_SECONDS", "600")),
            timeout_seconds=float(os.getenv("EXTRACTION_TIMEOUT_SECONDS", "600")),
            allow_loose_match=_env_flag("ALLOW_LOOSE_AUDIO_MATCH"),
        ),
        transcription=TranscriptionConfig(
            model=os.getenv("WHISPER_MODEL", "base"),
            timeout_seconds=float(os.getenv("TRANSCRIPTION_TIMEOUT_SECONDS", "1800")),
            max_audio_size_mb=int(os.getenv("MAX_AUDIO_SIZE_MB", "100")),
        ),
    )
