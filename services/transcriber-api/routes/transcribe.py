"""Video transcription endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, Form
from fastapi.responses import JSONResponse
from transcriber_common.logging import setup_logging

from dependencies import get_pipeline
from exceptions import PipelineError, ToolNotAvailableError
from handlers import TranscriptionPipeline
from response_models import TranscriptionResponse

logger = setup_logging()

router = APIRouter(tags=["transcription"])

PipelineDep = Annotated[TranscriptionPipeline, Depends(get_pipeline)]

_ACCEPTED_URL_SHAPES = ("youtube.com/watch?v=", "youtu.be/", "youtube.com/embed/")


def is_valid_video_url(url: str | None) -> bool:
    """Checks the URL against the video-hosting shapes the service accepts."""
    return bool(url) and any(shape in url for shape in _ACCEPTED_URL_SHAPES)


def _failure(status_code: int, error: str, stage: str | None = None) -> JSONResponse:
    body = TranscriptionResponse(success=False, error=error, stage=stage)
    return JSONResponse(
        status_code=status_code, content=body.model_dump(exclude_none=True)
    )


@router.post(
    "/transcribe", response_model=TranscriptionResponse, response_model_exclude_none=True
)
def transcribe(
    pipeline: PipelineDep,
    youtube_url: Annotated[str, Form(alias="youtubeUrl")],
):
    """
    Transcribes the audio track of a video.

    Runs synchronously; FastAPI serves each request on its own worker thread.
    """
    youtube_url = youtube_url.strip()
    if not is_valid_video_url(youtube_url):
        logger.info("Rejected invalid video URL", extra={"url": youtube_url})
        return _failure(400, "Invalid YouTube URL")

    try:
        result = pipeline.run(youtube_url)
    except ToolNotAvailableError as e:
        return _failure(503, f"Error processing video: {e}", e.stage)
    except PipelineError as e:
        return _failure(500, f"Error processing video: {e}", e.stage)
    except Exception as e:
        logger.exception("Unexpected transcription failure", extra={"url": youtube_url})
        return _failure(500, f"Error processing video: {e}")

    return TranscriptionResponse(success=True, transcription=result.text)
