"""Abstract interface for pulling an audio track out of a video URL."""

from abc import ABC, abstractmethod

from domain.models import ExternalTool, LocatedTool, Session, TranscriptionArtifact


class AudioExtractor(ABC):
    """Abstract base class for audio extraction backends."""

    @property
    @abstractmethod
    def tool(self) -> ExternalTool:
        """The external tool this extractor needs to be locatable."""

    @abstractmethod
    def extract(
        self, url: str, session: Session, located: LocatedTool
    ) -> TranscriptionArtifact:
        """
        Downloads the video's audio track into the working directory.

        Args:
            url: Video URL, already validated by the transport layer.
            session: Session whose id scopes the output file name.
            located: The extractor tool as resolved by the ToolLocator.

        Returns:
            The audio artifact written for the session.

        Raises:
            AudioExtractionError: If every invocation form failed.
        """
