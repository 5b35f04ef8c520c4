"""Infrastructure interface exports."""

from .audio_extractor import AudioExtractor
from .process_runner import ProcessRunner
from .speech_transcriber import SpeechTranscriber

__all__ = ["AudioExtractor", "ProcessRunner", "SpeechTranscriber"]
