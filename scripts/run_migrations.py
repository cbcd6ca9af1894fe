#!/usr/bin/env python3
"""Apply pending Alembic migrations."""

import sys
import logfire
from alembic import command
from alembic.config import Config

from conduit.config import Settings
from conduit.util.logging import setup_logging
from conduit.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    """Upgrade the database to ``revision``, logging failures to Logfire."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        with logfire.span("run_migrations", revision=revision):
            alembic_cfg = Config("alembic.ini")
            command.upgrade(alembic_cfg, revision)

        logfire.info("Database migrations applied", revision=revision)
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Fail loudly so the deploy stops before serving a stale schema
        raise


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
