# scripts/serve.py
"""
Start the API on the configured host and port.

Usage:
    API_PORT=8080 python -m scripts.serve
"""

import uvicorn

from app.config import configure_logging, get_settings


def main():
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    uvicorn.run(
        "app:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
