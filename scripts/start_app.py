#!/usr/bin/env python3
"""Start the Conduit API, reporting startup failures to Logfire."""

import sys
import logfire
import uvicorn

from conduit.config import Settings
from conduit.util.logging import setup_logging
from conduit.util.observability import configure_logfire


def main() -> int:
    """Configure logging, then serve the app with uvicorn."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info(
            "Starting Conduit API", host=settings.host, port=settings.port
        )

        # The app module is imported by uvicorn after Logfire is configured
        uvicorn.run(
            "conduit.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
