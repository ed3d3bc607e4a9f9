"""ASGI entry point: `uvicorn src.main:app`."""

import uvicorn

from src.api.app import configure_logging, create_app
from src.infrastructure.database import settings

configure_logging(settings.log_level)

app = create_app()

if __name__ == "__main__":
    uvicorn.run("src.main:app", host="0.0.0.0", port=8000, reload=True)
