"""Run the API with uvicorn: ``python -m stockroom``."""
from __future__ import annotations

import logging

from uvicorn import run

from stockroom.core.config import get_settings
from stockroom.main import create_app

logger = logging.getLogger("stockroom")


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    app = create_app(settings)
    logger.info("Server is running on port %s", settings.port)
    run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
