"""Request handlers orchestrating the domain and infrastructure layers."""

from .transcription_pipeline import TranscriptionPipeline

__all__ = ["TranscriptionPipeline"]
