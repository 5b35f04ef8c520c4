"""Finds a working invocation form for each external tool."""

from transcriber_common.logging import setup_logging

from domain.models import ExternalTool, LocatedTool, ToolInvocationForm
from exceptions import ProcessSpawnError, ToolNotAvailableError

from .interfaces import ProcessRunner

logger = setup_logging()


class ToolLocator:
    """
    Probes the fixed, ordered invocation forms of a tool.

    The first form whose probe exits 0 within the probe deadline wins and the
    search stops. The winning form is handed back so the stage that runs the
    tool starts from the same form instead of rediscovering one.
    """

    def __init__(self, runner: ProcessRunner, probe_timeout_seconds: float = 10.0):
        self._runner = runner
        self._probe_timeout_seconds = probe_timeout_seconds

    def locate(self, tool: ExternalTool) -> LocatedTool:
        """
        Resolves the first usable invocation form of ``tool``.

        Raises:
            ToolNotAvailableError: If no form and no library import works.
        """
        for index, form in enumerate(tool.forms):
            if self._probe(tool, form.build(*tool.probe_args)):
                logger.info(
                    "External tool located",
                    extra={"tool": tool.name, "form": form.label},
                )
                return LocatedTool(tool=tool, form=form, candidates=tool.forms[index:])

        if tool.import_module:
            for interpreter in tool.import_interpreters:
                script = f"import {tool.import_module}"
                if self._probe(tool, [interpreter, "-c", script]):
                    form = ToolInvocationForm(
                        command=(interpreter, "-m", tool.import_module)
                    )
                    logger.info(
                        "External tool located as library module",
                        extra={"tool": tool.name, "form": form.label},
                    )
                    return LocatedTool(tool=tool, form=form, candidates=(form,))

        logger.error("External tool not available", extra={"tool": tool.name})
        raise ToolNotAvailableError(tool.name, tool.install_hint)

    def is_available(self, tool: ExternalTool) -> bool:
        """Returns whether any invocation form of ``tool`` works."""
        try:
            self.locate(tool)
        except ToolNotAvailableError:
            return False
        return True

    def _probe(self, tool: ExternalTool, command: list[str]) -> bool:
        try:
            result = self._runner.run(
                command, self._probe_timeout_seconds, label=f"{tool.name}-probe"
            )
        except ProcessSpawnError:
            return False
        return result.succeeded
