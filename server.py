#!/usr/bin/env python3
"""
Server entry point for the Complexity Analyzer backend.
"""
from dotenv import load_dotenv

load_dotenv()

import uvicorn  # noqa: E402

from app.config import settings, logger  # noqa: E402


def main():
    """Run the server."""
    logger.info(f"Starting Complexity Analyzer on {settings.HOST}:{settings.PORT}")

    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
