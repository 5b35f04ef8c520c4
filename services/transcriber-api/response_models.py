"""Response models for the transcriber API."""

from pydantic import BaseModel


class TranscriptionResponse(BaseModel):
    """Body returned by the transcribe endpoint, on success or failure."""

    success: bool
    transcription: str | None = None
    error: str | None = None
    stage: str | None = None


class ToolHealthResponse(BaseModel):
    """Availability of each external tool."""

    tools: dict[str, bool]
