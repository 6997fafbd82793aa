"""
Main entrypoint: run the Solkit FastAPI server under uvicorn.

Env: API_HOST (default 0.0.0.0), PORT or API_PORT (default 3000), LOG_LEVEL.
Equivalent: uvicorn backend_solkit.api_server.app:app --host 0.0.0.0 --port 3000
"""

# Configure structured JSON logging before other imports that may log
from backend_solkit.solkit_logging import get_logger

logger = get_logger("main")


def main() -> None:
    """Resolve settings and serve the API in the main thread."""
    from backend_solkit.config import get_settings

    settings = get_settings()

    from backend_solkit.api_server.app import app
    import uvicorn

    logger.info("main_server_starting", host=settings.api_host, port=settings.api_port)
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
