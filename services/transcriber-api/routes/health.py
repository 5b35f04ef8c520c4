"""External tool availability endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from dependencies import get_locator, get_tools
from domain import ExternalTool
from infrastructure import ToolLocator
from response_models import ToolHealthResponse

router = APIRouter(prefix="/health", tags=["health"])

LocatorDep = Annotated[ToolLocator, Depends(get_locator)]
ToolsDep = Annotated[list[ExternalTool], Depends(get_tools)]


@router.get("/tools", response_model=ToolHealthResponse)
def tool_health(locator: LocatorDep, tools: ToolsDep) -> ToolHealthResponse:
    """Reports whether each external tool can currently be invoked."""
    return ToolHealthResponse(
        tools={tool.name: locator.is_available(tool) for tool in tools}
    )
