"""Catalog of the external tools the pipeline shells out to."""

from pathlib import Path

from .models import ExternalTool, ToolInvocationForm


def _forms(
    command: str, module: str, home: Path | None
) -> tuple[ToolInvocationForm, ...]:
    home = home if home is not None else Path.home()
    return (
        ToolInvocationForm(command=(command,)),
        ToolInvocationForm(command=("python", "-m", module)),
        ToolInvocationForm(command=("python3", "-m", module)),
        ToolInvocationForm(command=(f"/usr/local/bin/{command}",)),
        ToolInvocationForm(command=(str(home / ".local" / "bin" / command),)),
    )


def yt_dlp_tool(home: Path | None = None) -> ExternalTool:
    """Returns the audio extractor definition."""
    return ExternalTool(
        name="yt-dlp",
        forms=_forms("yt-dlp", "yt_dlp", home),
        probe_args=("--version",),
        install_hint="pip install yt-dlp",
    )


def whisper_tool(home: Path | None = None) -> ExternalTool:
    """
    Returns the speech transcriber definition.

    The whisper CLI has no ``--version`` flag, so it is probed with ``--help``.
    It may also be present only as an importable library, which the locator
    checks through ``import_module``.
    """
    return ExternalTool(
        name="whisper",
        forms=_forms("whisper", "whisper", home),
        probe_args=("--help",),
        import_module="whisper",
        install_hint="pip install openai-whisper",
    )
