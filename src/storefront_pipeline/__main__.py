"""Run the storefront API with uvicorn: ``python -m storefront_pipeline``."""

from __future__ import annotations

import uvicorn

from storefront_pipeline.app import create_app
from storefront_pipeline.config import Settings
from storefront_pipeline.log import configure_logging


def main() -> None:
    settings = Settings()
    configure_logging(level=settings.log_level)
    uvicorn.run(create_app(settings), host="0.0.0.0", port=8000, log_config=None)


if __name__ == "__main__":
    main()
