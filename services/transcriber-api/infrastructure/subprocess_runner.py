"""subprocess implementation of the ProcessRunner interface."""

import os
import signal
import subprocess
import threading
import time
from collections.abc import Sequence
from typing import IO

from transcriber_common.logging import setup_logging

from domain.models import ExternalProcessResult
from exceptions import ProcessSpawnError

from .interfaces import ProcessRunner

logger = setup_logging()


class SubprocessRunner(ProcessRunner):
    """
    Runs external commands with merged output and a hard deadline.

    Output is read on a background thread so the deadline is enforced even
    while the child keeps writing; each line is appended to the result buffer
    and logged as soon as it arrives. Each command runs in its own process
    group, and a timeout kills the whole group.
    """

    def __init__(self, drain_timeout_seconds: float = 5.0):
        self._drain_timeout_seconds = drain_timeout_seconds

    def run(
        self,
        command: Sequence[str],
        timeout_seconds: float,
        label: str | None = None,
    ) -> ExternalProcessResult:
        argv = [str(part) for part in command]
        label = label or os.path.basename(argv[0])
        started = time.monotonic()

        try:
            process = subprocess.Popen(
                argv,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                encoding="utf-8",
                errors="replace",
                bufsize=1,
                start_new_session=True,
            )
        except OSError as e:
            logger.warning(
                "External process could not be started",
                extra={"tool": label, "command": argv, "error": str(e)},
            )
            raise ProcessSpawnError(argv, e) from e

        lines: list[str] = []
        reader = threading.Thread(
            target=self._pump, args=(process.stdout, lines, label), daemon=True
        )
        reader.start()

        timed_out = False
        try:
            process.wait(timeout=timeout_seconds)
        except subprocess.TimeoutExpired:
            timed_out = True
            self._kill_group(process)
            process.wait()
            logger.warning(
                "External process timed out and was killed",
                extra={"tool": label, "timeout_seconds": timeout_seconds},
            )

        # A grandchild still holding the pipe must not block the caller.
        reader.join(timeout=self._drain_timeout_seconds)

        result = ExternalProcessResult(
            command=tuple(argv),
            exit_code=None if timed_out else process.returncode,
            output="\n".join(list(lines)),
            timed_out=timed_out,
            duration_seconds=time.monotonic() - started,
        )
        logger.info(
            "External process finished",
            extra={
                "tool": label,
                "exit_code": result.exit_code,
                "timed_out": result.timed_out,
                "duration_seconds": round(result.duration_seconds, 3),
            },
        )
        return result

    @staticmethod
    def _kill_group(process: subprocess.Popen) -> None:
        # yt-dlp hands conversion to an ffmpeg child; it must die with its parent.
        try:
            os.killpg(process.pid, signal.SIGKILL)
        except ProcessLookupError:
            process.kill()

    @staticmethod
    def _pump(stream: IO[str], lines: list[str], label: str) -> None:
        try:
            for raw_line in stream:
                line = raw_line.rstrip("\r\n")
                lines.append(line)
                logger.info(
                    "External process output", extra={"tool": label, "line": line}
                )
        finally:
            stream.close()
