"""Domain models for the transcription pipeline."""

import uuid
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

AUDIO_PREFIX = "audio_"


class Session(BaseModel, frozen=True):
    """Scopes every temporary file created while serving one request."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def audio_stem(self) -> str:
        """File name stem the extractor writes the audio track under."""
        return f"{AUDIO_PREFIX}{self.id}"


class ToolInvocationForm(BaseModel, frozen=True):
    """One way of starting an external tool, stored as an argv prefix."""

    command: tuple[str, ...]

    @property
    def label(self) -> str:
        return " ".join(self.command)

    def build(self, *args: object) -> list[str]:
        """Returns the full argv for this form followed by ``args``."""
        return [*self.command, *(str(arg) for arg in args)]


class ExternalTool(BaseModel, frozen=True):
    """A logical external tool and the ordered forms it can be reached through."""

    name: str
    forms: tuple[ToolInvocationForm, ...]
    probe_args: tuple[str, ...] = ("--version",)
    import_module: str | None = None
    import_interpreters: tuple[str, ...] = ("python", "python3")
    install_hint: str = ""


class LocatedTool(BaseModel, frozen=True):
    """A tool together with the form that answered its probe."""

    tool: ExternalTool
    form: ToolInvocationForm
    candidates: tuple[ToolInvocationForm, ...]


class ExternalProcessResult(BaseModel, frozen=True):
    """Outcome of one external process run."""

    command: tuple[str, ...]
    exit_code: int | None
    output: str = ""
    timed_out: bool = False
    duration_seconds: float = 0.0

    @property
    def succeeded(self) -> bool:
        return not self.timed_out and self.exit_code == 0


class InvocationAttempt(BaseModel, frozen=True):
    """A failed try of one invocation form during a pipeline stage."""

    form: str
    exit_code: int | None = None
    timed_out: bool = False
    output: str = ""
    error: str | None = None


class TranscriptionArtifact(BaseModel, frozen=True):
    """A file written by an external tool on behalf of a session."""

    path: Path
    session_id: str


class PipelineState(str, Enum):
    INIT = "init"
    TOOLS_CHECKED = "tools_checked"
    AUDIO_EXTRACTING = "audio_extracting"
    AUDIO_READY = "audio_ready"
    TRANSCRIBING = "transcribing"
    TRANSCRIPT_READY = "transcript_ready"
    DONE = "done"
    ERROR = "error"


class TranscriptionResult(BaseModel, frozen=True):
    """Final text produced for a request."""

    session_id: str
    text: str
