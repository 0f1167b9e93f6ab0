"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
from abc import ABC
from dataclasses import dataclass

MAX_IDENTITY_LENGTH = 256


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.

    Value objects are immutable and compared by value.
    """

    def __eq__(self, other):
        """Compare value objects by their attributes."""
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self):
        """Make value objects hashable."""
        return hash(tuple(sorted(self.__dict__.items())))


@dataclass(frozen=True)
class UserIdentity(ValueObject):
    """
    Identity of a point holder.

    Opaque text (an account address, a user id) that keys balances.
    """

    value: str

    def __post_init__(self):
        """Validate identity format."""
        if not self.value or len(self.value.strip()) == 0:
            raise ValueError("User identity cannot be empty")
        if len(self.value) > MAX_IDENTITY_LENGTH:
            raise ValueError("User identity too long")
        if any(ch.isspace() or not ch.isprintable() for ch in self.value):
            raise ValueError(f"Invalid user identity: {self.value!r}")

    def __str__(self) -> str:
        """Return identity as string."""
        return self.value
