"""FastAPI application entry point."""

from ddtrace import patch_all
from fastapi import FastAPI

from routes import health_router, transcribe_router

patch_all()

app = FastAPI(title="Video Transcriber Service")
app.include_router(transcribe_router)
app.include_router(health_router)
