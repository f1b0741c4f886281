"""Result variant for membership and edit operations."""

from enum import Enum


class Outcome(Enum):
    """Why a join, leave or update did or did not happen."""

    OK = "OK"
    NOT_FOUND = "NOT_FOUND"
    ALREADY_JOINED = "ALREADY_JOINED"
    NOT_JOINED = "NOT_JOINED"
    FORBIDDEN = "FORBIDDEN"

    @property
    def succeeded(self) -> bool:
        return self is Outcome.OK
