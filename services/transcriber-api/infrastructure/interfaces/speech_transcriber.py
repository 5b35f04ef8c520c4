"""Abstract interface for speech-to-text backends."""

from abc import ABC, abstractmethod

from domain.models import ExternalTool, LocatedTool, TranscriptionArtifact


class SpeechTranscriber(ABC):
    """Abstract base class for audio transcription backends."""

    @property
    @abstractmethod
    def tool(self) -> ExternalTool:
        """The external tool this transcriber needs to be locatable."""

    @abstractmethod
    def transcribe(
        self, audio: TranscriptionArtifact, located: LocatedTool
    ) -> TranscriptionArtifact:
        """
        Transcribes an audio file into a plain-text file.

        Args:
            audio: The extracted audio artifact.
            located: The transcriber tool as resolved by the ToolLocator.

        Returns:
            The text artifact written next to the audio file.

        Raises:
            TranscriptionError: If every invocation form failed.
        """
