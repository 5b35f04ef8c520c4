import tempfile
from pathlib import Path

import pytest
from pydantic import ValidationError

from config import AppConfig, load_config


def test_defaults(monkeypatch):
    for name in [
        "TRANSCRIBER_WORK_DIR",
        "TOOL_PROBE_TIMEOUT_SECONDS",
        "EXTRACTION_TIMEOUT_SECONDS",
        "MAX_AUDIO_DURATION_SECONDS",
        "TRANSCRIPTION_TIMEOUT_SECONDS",
        "WHISPER_MODEL",
        "MAX_AUDIO_SIZE_MB",
        "ALLOW_LOOSE_AUDIO_MATCH",
    ]:
        monkeypatch.delenv(name, raising=False)

    config = load_config()

    assert config.work_dir == Path(tempfile.gettempdir())
    assert config.probe_timeout_seconds == 10
    assert config.extraction.timeout_seconds == 600
    assert config.extraction.max_duration_seconds == 600
    assert config.extraction.allow_loose_match is False
    assert config.transcription.model == "base"
    assert config.transcription.timeout_seconds == 1800
    assert config.transcription.max_audio_size_mb == 100


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("TRANSCRIBER_WORK_DIR", str(tmp_path))
    monkeypatch.setenv("WHISPER_MODEL", "small")
    monkeypatch.setenv("MAX_AUDIO_SIZE_MB", "25")
    monkeypatch.setenv("ALLOW_LOOSE_AUDIO_MATCH", "true")

    config = load_config()

    assert config.work_dir == tmp_path
    assert config.transcription.model == "small"
    assert config.transcription.max_audio_size_mb == 25
    assert config.extraction.allow_loose_match is True


def test_probe_deadline_is_capped(tmp_path):
    with pytest.raises(ValidationError):
        AppConfig(work_dir=tmp_path, probe_timeout_seconds=30)
