"""
ASGI entry point.

``ENVIRONMENT`` selects the config file (development.toml by default); PORT
and HOST override where uvicorn listens.
"""
import logging
import os

import uvicorn

from emissions_tracker.create_app import get_app

logger = logging.getLogger(__name__)

config_file = f"{os.getenv('ENVIRONMENT', 'development')}.toml"
app = get_app(config_file)


if __name__ == "__main__":
    logger.info(f"Serving deviation API with {config_file}")
    uvicorn.run(
        "emissions_tracker.main:app",
        host=os.environ.get("HOST", "0.0.0.0"),
        port=int(os.environ.get("PORT", 8000)),
        log_level="debug" if app.debug else "info",
        loop="asyncio",
    )
