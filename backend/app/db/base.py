from datetime import datetime, timezone

from sqlalchemy.orm import declarative_base

Base = declarative_base()


def utc_now() -> datetime:
    # naive UTC, matching the plain DateTime columns
    return datetime.now(timezone.utc).replace(tzinfo=None)
