"""Delete notifications that are past their retention period."""

from __future__ import annotations

import argparse

from sqlalchemy.exc import SQLAlchemyError

from jobportal.application.use_cases.notifications import purge_notifications
from jobportal.infrastructure.database import SessionLocal, initialize_database
from jobportal.logging_config import setup_logging


def positive_days(value: str) -> int:
    """Parse a day count that must be at least one."""

    days = int(value)
    if days < 1:
        raise argparse.ArgumentTypeError("must be at least 1 day")
    return days


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Purge old notifications from the database.",
    )
    parser.add_argument(
        "--read-days",
        type=positive_days,
        default=None,
        help="Delete read notifications older than this many days (default from settings)",
    )
    parser.add_argument(
        "--max-days",
        type=positive_days,
        default=None,
        help="Delete any notification older than this many days (default from settings)",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    setup_logging()
    initialize_database()

    session = SessionLocal()
    try:
        deleted = purge_notifications(
            session,
            read_retention_days=args.read_days,
            max_retention_days=args.max_days,
        )
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Error purging notifications: {exc}") from exc
    else:
        print(f"Deleted {deleted} notifications.")
    finally:
        session.close()


if __name__ == "__main__":
    main()
