"""FastAPI dependency injection configuration."""

from transcriber_common.logging import setup_logging

from config import load_config
from domain import ExternalTool, whisper_tool, yt_dlp_tool
from handlers import TranscriptionPipeline
from infrastructure import (
    SubprocessRunner,
    ToolLocator,
    WhisperTranscriber,
    YtDlpAudioExtractor,
)

logger = setup_logging()

_config = load_config()
_config.work_dir.mkdir(parents=True, exist_ok=True)

_runner = SubprocessRunner()
_locator = ToolLocator(_runner, _config.probe_timeout_seconds)

_yt_dlp = yt_dlp_tool()
_whisper = whisper_tool()

_extractor = YtDlpAudioExtractor(_runner, _yt_dlp, _config.extraction, _config.work_dir)
_transcriber = WhisperTranscriber(
    _runner, _whisper, _config.transcription, _config.work_dir
)

_pipeline = TranscriptionPipeline(
    _locator,
    _extractor,
    _transcriber,
    _config.work_dir,
    max_audio_size_mb=_config.transcription.max_audio_size_mb,
)

logger.info(
    "Transcription pipeline configured",
    extra={
        "work_dir": str(_config.work_dir),
        "whisper_model": _config.transcription.model,
        "allow_loose_audio_match": _config.extraction.allow_loose_match,
    },
)


def get_pipeline() -> TranscriptionPipeline:
    """Returns the shared transcription pipeline."""
    return _pipeline


def get_locator() -> ToolLocator:
    """Returns the shared tool locator."""
    return _locator


def get_tools() -> list[ExternalTool]:
    """Returns the external tools the pipeline depends on."""
    return [_yt_dlp, _whisper]
