"""Base model for all domain entities."""

from datetime import datetime, timedelta, timezone

from pydantic import BaseModel, ConfigDict

_ONE_MILLISECOND = timedelta(milliseconds=1)


def utc_now() -> datetime:
    """Current UTC time truncated to milliseconds.

    Cursors carry millisecond timestamps, so entity timestamps are kept at
    the same precision.
    """
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


class DomainModel(BaseModel):
    """Base class for all domain entities.

    Entities are mutated in place through their business methods; every
    assignment is re-validated so a field can never hold an invalid value.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        arbitrary_types_allowed=True,  # Allow custom value objects
    )


def next_timestamp(previous: datetime) -> datetime:
    """A timestamp for a modification made after ``previous``.

    Always strictly later than ``previous``, even when the clock has not
    advanced since.
    """
    return max(utc_now(), previous + _ONE_MILLISECOND)
