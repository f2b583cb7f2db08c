#!/usr/bin/env python3
"""Apply posts schema migrations.

Usage:
    python scripts/run_migrations.py             # upgrade to head
    python scripts/run_migrations.py <revision>  # upgrade to revision
    python scripts/run_migrations.py base        # drop the posts schema
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config
from sqlalchemy.engine import make_url

from foro.config import Settings
from foro.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main(argv: list[str]) -> int:
    """Run migrations to the requested revision and log failures to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    target = argv[0] if argv else "head"
    database = make_url(settings.database.url).render_as_string(hide_password=True)
    alembic_cfg = Config(str(ALEMBIC_INI))

    with logfire.span(
        "run_migrations",
        target=target,
        database=database,
        environment=settings.environment,
    ):
        try:
            if target == "base":
                command.downgrade(alembic_cfg, target)
            else:
                command.upgrade(alembic_cfg, target)
        except Exception as e:
            logfire.error(
                "Posts schema migration failed",
                target=target,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Re-raise so the container fails and doesn't start with broken schema
            raise

        logfire.info("Posts schema migrated", target=target)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
