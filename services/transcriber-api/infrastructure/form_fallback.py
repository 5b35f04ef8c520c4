"""Ordered fallback across the invocation forms of a tool."""

from collections.abc import Callable, Sequence
from pathlib import Path

from transcriber_common.logging import setup_logging

from domain.models import InvocationAttempt, ToolInvocationForm
from exceptions import ProcessSpawnError

from .interfaces import ProcessRunner

logger = setup_logging()


def run_until_artifact(
    runner: ProcessRunner,
    forms: Sequence[ToolInvocationForm],
    args: Sequence[str],
    timeout_seconds: float,
    find_artifact: Callable[[], Path | None],
    label: str,
) -> tuple[Path | None, list[InvocationAttempt]]:
    """
    Tries each form in order until one run leaves its artifact behind.

    A form fails when it cannot be spawned, exits non-zero, times out, or
    exits 0 without writing a file ``find_artifact`` can see.

    Returns:
        Tuple of (artifact path or None, failed attempts in order).
    """
    attempts: list[InvocationAttempt] = []
    for form in forms:
        try:
            result = runner.run(form.build(*args), timeout_seconds, label=label)
        except ProcessSpawnError as e:
            attempts.append(InvocationAttempt(form=form.label, error=str(e)))
            logger.warning(
                "%s failed, trying next...", form.label, extra={"tool": label}
            )
            continue

        if result.succeeded:
            artifact = find_artifact()
            if artifact is not None:
                logger.info(
                    "External tool produced artifact",
                    extra={"tool": label, "form": form.label, "path": str(artifact)},
                )
                return artifact, attempts
            error = "output file not found"
        else:
            error = "timed out" if result.timed_out else "non-zero exit status"

        attempts.append(
            InvocationAttempt(
                form=form.label,
                exit_code=result.exit_code,
                timed_out=result.timed_out,
                output=result.output,
                error=error,
            )
        )
        logger.warning(
            "%s failed, trying next...",
            form.label,
            extra={"tool": label, "error": error, "exit_code": result.exit_code},
        )

    return None, attempts
