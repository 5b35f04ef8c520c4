from unittest.mock import Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from dependencies import get_locator, get_pipeline, get_tools
from domain.models import TranscriptionResult
from domain.tools import whisper_tool, yt_dlp_tool
from exceptions import AudioExtractionError, AudioTooLargeError, ToolNotAvailableError
from routes import health_router, transcribe_router
from routes.transcribe import is_valid_video_url

URL = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"


@pytest.fixture
def pipeline():
    return Mock()


@pytest.fixture
def app(pipeline):
    app = FastAPI()
    app.include_router(transcribe_router)
    app.include_router(health_router)
    app.dependency_overrides[get_pipeline] = lambda: pipeline
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.mark.parametrize(
    "url",
    [
        "https://www.youtube.com/watch?v=abc",
        "https://youtu.be/abc",
        "https://www.youtube.com/embed/abc",
    ],
)
def test_accepted_url_shapes(url):
    assert is_valid_video_url(url)


@pytest.mark.parametrize("url", ["", "https://vimeo.com/123", "youtube.com/channel/x"])
def test_rejected_url_shapes(url):
    assert not is_valid_video_url(url)


def test_transcribe_success(client, pipeline):
    pipeline.run.return_value = TranscriptionResult(session_id="s1", text="hello world")

    rv = client.post("/transcribe", data={"youtubeUrl": f"  {URL} "})

    assert rv.status_code == 200
    assert rv.json() == {
        "success": True,
        "transcription": "hello world",
    }
    pipeline.run.assert_called_once_with(URL)


def test_invalid_url_is_rejected_without_running_pipeline(client, pipeline):
    rv = client.post("/transcribe", data={"youtubeUrl": "https://example.com/video"})

    assert rv.status_code == 400
    assert rv.json() == {"success": False, "error": "Invalid YouTube URL"}
    pipeline.run.assert_not_called()


def test_missing_url_field_is_unprocessable(client):
    rv = client.post("/transcribe", data={})

    assert rv.status_code == 422


def test_missing_tool_maps_to_service_unavailable(client, pipeline):
    pipeline.run.side_effect = ToolNotAvailableError("yt-dlp", "pip install yt-dlp")

    rv = client.post("/transcribe", data={"youtubeUrl": URL})

    assert rv.status_code == 503
    body = rv.json()
    assert body["success"] is False
    assert body["stage"] == "tools"
    assert body["error"].startswith("Error processing video: yt-dlp is not installed")


@pytest.mark.parametrize(
    "error, stage",
    [
        (AudioExtractionError(URL), "extraction"),
        (AudioTooLargeError("audio_x.wav", 150, 100), "transcription"),
    ],
)
def test_pipeline_failures_are_structured(client, pipeline, error, stage):
    pipeline.run.side_effect = error

    rv = client.post("/transcribe", data={"youtubeUrl": URL})

    assert rv.status_code == 500
    assert rv.json() == {
        "success": False,
        "error": f"Error processing video: {error}",
        "stage": stage,
    }


def test_unexpected_error_is_reported(client, pipeline):
    pipeline.run.side_effect = RuntimeError("disk full")

    rv = client.post("/transcribe", data={"youtubeUrl": URL})

    assert rv.status_code == 500
    assert rv.json() == {"success": False, "error": "Error processing video: disk full"}


def test_tool_health(app, client, tmp_path):
    locator = Mock()
    locator.is_available.side_effect = lambda tool: tool.name == "yt-dlp"
    app.dependency_overrides[get_locator] = lambda: locator
    app.dependency_overrides[get_tools] = lambda: [
        yt_dlp_tool(home=tmp_path),
        whisper_tool(home=tmp_path),
    ]

    rv = client.get("/health/tools")

    assert rv.status_code == 200
    assert rv.json() == {"tools": {"yt-dlp": True, "whisper": False}}
