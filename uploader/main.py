from dotenv import find_dotenv, load_dotenv
from fastapi import FastAPI
from uploader.config import Settings
from uploader.routes import health, upload, media


def load_env_file() -> None:
    """Load a .env file from the working directory into os.environ."""
    load_dotenv(find_dotenv(usecwd=True))


def create_app(settings: Settings | None = None) -> FastAPI:
    if settings is None:
        load_env_file()
        settings = Settings.from_env()

    app = FastAPI(title="sharex-drop", docs_url=None, redoc_url=None, openapi_url=None)
    app.state.settings = settings

    app.include_router(health.router)
    app.include_router(upload.router)
    # Catches every single-segment GET, so it goes last.
    app.include_router(media.router)
    return app
