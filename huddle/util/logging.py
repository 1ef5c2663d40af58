"""Standard library logging setup.

Application code logs through logfire; this only tunes the stdlib loggers
used by uvicorn, SQLAlchemy and alembic.
"""

import logging
import sys

from huddle.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure the root logger for the environment.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    # Third-party loggers are noisy below WARNING
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("multipart").setLevel(logging.WARNING)

    logging.getLogger("huddle").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
