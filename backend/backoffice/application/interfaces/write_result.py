"""Outcome of a single repository write, reported with an HTTP-like status."""

from dataclasses import dataclass
from enum import IntEnum


class WriteStatus(IntEnum):
    """Status codes returned by repository writes.

    ``CREATED`` means a row was written (inserted or changed); it is the
    marker the lifecycle engine waits for before touching the paired slug
    row. ``OK`` means a row was removed. ``NO_CONTENT`` means the statement
    matched nothing and is never a success.
    """

    OK = 200
    CREATED = 201
    NO_CONTENT = 204


def is_written(status: int | None) -> bool:
    """True when ``status`` reports that a row was actually touched."""
    return status in (WriteStatus.OK, WriteStatus.CREATED)


@dataclass(frozen=True)
class WriteResult:
    status: int
    row_id: int | None = None

    @property
    def ok(self) -> bool:
        return is_written(self.status)

    @property
    def created(self) -> bool:
        return self.status == WriteStatus.CREATED

    @property
    def matched_nothing(self) -> bool:
        return self.status == WriteStatus.NO_CONTENT
