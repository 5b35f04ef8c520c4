"""Abstract interface for running external commands."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from domain.models import ExternalProcessResult


class ProcessRunner(ABC):
    """Abstract base class for external process execution."""

    @abstractmethod
    def run(
        self,
        command: Sequence[str],
        timeout_seconds: float,
        label: str | None = None,
    ) -> ExternalProcessResult:
        """
        Runs a command to completion or until its deadline passes.

        Blocks the calling thread until the process exits or is killed.

        Args:
            command: Fully resolved argv, including paths and flags.
            timeout_seconds: Maximum time to wait before killing the process.
            label: Short name used to tag streamed output in the logs.

        Returns:
            ExternalProcessResult with exit status, combined stdout/stderr
            and whether the deadline was exceeded.

        Raises:
            ProcessSpawnError: If the command cannot be started.
        """
