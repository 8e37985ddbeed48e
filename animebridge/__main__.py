"""Run the bridge with ``python -m animebridge`` or the ``animebridge`` script."""

from __future__ import annotations

import logging

import uvicorn

from app.config import settings

logger = logging.getLogger(__name__)


def main() -> None:
    """Serve ``app.main:app`` on ``HOST``/``PORT``."""

    logger.info("Starting %s on port %s", settings.app_name, settings.server_port)
    uvicorn.run(
        "app.main:app",
        host=settings.server_host,
        port=settings.server_port,
        reload=settings.environment == "development",
    )


if __name__ == "__main__":  # pragma: no cover - runtime entrypoint
    main()
