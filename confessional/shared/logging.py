"""
Logging configuration for the application.

One line per record on stdout. Logging must not change program behavior
and never records confession content; adapters log ids and error causes only.

SQL statements and pool checkouts are silent unless `log_sql` is set,
which is the way to watch connections being borrowed and returned.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# uvicorn logs every request line; the board's own loggers report what matters.
QUIET_LOGGERS = ("uvicorn.access",)
SQL_LOGGERS = {"sqlalchemy.engine": logging.INFO, "sqlalchemy.pool": logging.DEBUG}


def configure_logging(level: str = "INFO", log_sql: bool = False) -> None:
    """Configure application logging.

    Args:
        level: Root log level name. Unknown names fall back to INFO.
        log_sql: Emit SQLAlchemy statement and connection-pool logs.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    for name, verbose_level in SQL_LOGGERS.items():
        logging.getLogger(name).setLevel(verbose_level if log_sql else logging.WARNING)
