"""
Serve the record form app.
Run: python -m web (from repo root, with .env or env vars set).
"""
import logging

import uvicorn

from web.config import load_settings
from web.main import create_app


def main() -> None:
    settings = load_settings()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, settings.log_level, logging.INFO),
    )
    app = create_app(settings=settings)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
