import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from interview_qa.api import routes
from interview_qa.config import Settings, settings

logging.basicConfig(level=settings.log_level_value)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One fetch at startup; requests before it finishes load on demand
    result = await routes.store.ensure_loaded()
    logger.info(
        f"Serving {len(result.toc)} TOC entries and {len(result.questions)} questions "
        f"from {routes.store.fetcher.url}"
    )
    yield


def create_app(app_settings: Settings = settings) -> FastAPI:
    """Build the API app; the static viewer is mounted at /ui when its directory exists."""
    application = FastAPI(
        title="Interview Q&A Viewer API",
        description="Table of contents and click-to-reveal answers for an interview questions README",
        version="1.0.0",
        lifespan=lifespan,
    )

    # The viewer may be served from another origin
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if os.path.isdir(app_settings.frontend_dir):
        application.mount(
            "/ui", StaticFiles(directory=app_settings.frontend_dir, html=True), name="ui"
        )
    else:
        logger.warning(f"Frontend directory {app_settings.frontend_dir!r} not found; /ui disabled")

    application.include_router(routes.router, prefix="/api/v1")

    @application.get("/")
    async def root():
        return {
            "message": "Interview Q&A Viewer API is running. Visit /ui for the viewer.",
            "document_url": app_settings.document_url,
        }

    return application


app = create_app()
