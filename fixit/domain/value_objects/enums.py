"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class Category(str, Enum):
    PLUMBING = "Plumbing"
    ELECTRICAL = "Electrical"
    CIVIL = "Civil"
    HOUSEKEEPING = "Housekeeping"
    IT_INFRASTRUCTURE = "IT Infrastructure"
    FURNITURE = "Furniture"
    OTHERS = "Others"


class Priority(str, Enum):
    CRITICAL = "Critical"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @property
    def rank(self) -> int:
        """Urgency rank: Critical=4 ... Low=1."""
        return _PRIORITY_RANK[self]

    def __lt__(self, other):
        if not isinstance(other, Priority):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, Priority):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, Priority):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, Priority):
            return NotImplemented
        return self.rank >= other.rank


_PRIORITY_RANK = {
    Priority.CRITICAL: 4,
    Priority.HIGH: 3,
    Priority.MEDIUM: 2,
    Priority.LOW: 1,
}


class Provenance(str, Enum):
    REMOTE = "remote"
    LOCAL = "local"


class RemoteFailureReason(str, Enum):
    TIMEOUT = "timeout"
    CONNECTION = "connection"
    HTTP_STATUS = "http_status"
    MALFORMED = "malformed"
    DISABLED = "disabled"
    UNEXPECTED = "unexpected"
