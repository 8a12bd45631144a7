"""Run the solapi server: ``python -m solapi``."""

import logging

import uvicorn

from solapi.config import load_settings
from solapi.fastapi.app import create_app

logger = logging.getLogger(__name__)


def main() -> None:
    settings = load_settings()
    logging.basicConfig(level=settings.log_level)
    logger.info("Starting solapi on %s:%s", settings.host, settings.port)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
