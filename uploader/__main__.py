import logging
import os
import sys

import uvicorn
from uploader.config import Settings
from uploader.main import create_app, load_env_file

logger = logging.getLogger("uploader")


def _configure_logging() -> None:
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def main() -> None:
    load_env_file()
    _configure_logging()

    try:
        settings = Settings.from_env()
    except ValueError as e:
        logger.error("invalid PORT: %s", e)
        sys.exit(1)

    if not settings.media_root.is_dir():
        logger.error("media directory %s does not exist", settings.media_root.resolve())
        sys.exit(1)

    app = create_app(settings)
    logger.info("running upload server on http://localhost:%d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
