"""
Structured storage keys and retention settings.

Brands, the brand counter and balances share one key-value store.
Each record is addressed by a StorageKey whose tag selects a disjoint
key space, so no two key spaces can ever collide.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class KeyTag(Enum):
    """Key space discriminator."""

    BRAND = "brand"
    BRAND_COUNT = "brand_count"
    BALANCE = "balance"

    def __str__(self) -> str:
        """Return tag as string."""
        return self.value


@dataclass(frozen=True)
class StorageKey:
    """
    Composite key: a tag plus the fields that key space needs.

    Canonical encodings:
        brand:<brand_id>
        brand_count
        balance:<brand_id>:<user>

    The user identity is always the last component, so identities
    containing ":" still decode unambiguously.
    """

    tag: KeyTag
    brand_id: Optional[int] = None
    user: Optional[str] = None

    def __post_init__(self):
        """Validate fields against the tag."""
        if self.tag is KeyTag.BRAND_COUNT:
            if self.brand_id is not None or self.user is not None:
                raise ValueError("Brand counter key takes no fields")
            return
        if self.brand_id is None or self.brand_id < 0:
            raise ValueError(f"{self.tag} key requires a non-negative brand_id")
        if self.tag is KeyTag.BRAND and self.user is not None:
            raise ValueError("Brand key takes no user")
        if self.tag is KeyTag.BALANCE and not self.user:
            raise ValueError("Balance key requires a user")

    @classmethod
    def brand(cls, brand_id: int) -> "StorageKey":
        """Key of one brand record."""
        return cls(tag=KeyTag.BRAND, brand_id=brand_id)

    @classmethod
    def brand_count(cls) -> "StorageKey":
        """Key of the brand id high-water mark."""
        return cls(tag=KeyTag.BRAND_COUNT)

    @classmethod
    def balance(cls, user: str, brand_id: int) -> "StorageKey":
        """Key of one (user, brand) balance entry."""
        return cls(tag=KeyTag.BALANCE, brand_id=brand_id, user=user)

    def encode(self) -> str:
        """Return the canonical text form used as the storage primary key."""
        if self.tag is KeyTag.BRAND_COUNT:
            return self.tag.value
        if self.tag is KeyTag.BRAND:
            return f"{self.tag.value}:{self.brand_id}"
        return f"{self.tag.value}:{self.brand_id}:{self.user}"

    @classmethod
    def decode(cls, raw: str) -> "StorageKey":
        """
        Parse a canonical key.

        Args:
            raw: Encoded key

        Returns:
            StorageKey instance

        Raises:
            ValueError: If the text is not a canonical key
        """
        tag_value, _, rest = raw.partition(":")
        try:
            tag = KeyTag(tag_value)
        except ValueError as e:
            raise ValueError(f"Unknown key tag: {raw}") from e

        if tag is KeyTag.BRAND_COUNT:
            if rest:
                raise ValueError(f"Malformed brand counter key: {raw}")
            return cls.brand_count()
        if tag is KeyTag.BRAND:
            if not rest.isdigit():
                raise ValueError(f"Malformed brand key: {raw}")
            return cls.brand(int(rest))

        brand_part, sep, user = rest.partition(":")
        if not sep or not brand_part.isdigit() or not user:
            raise ValueError(f"Malformed balance key: {raw}")
        return cls.balance(user, int(brand_part))

    def __str__(self) -> str:
        """Return the encoded key."""
        return self.encode()


class StorageScope(Enum):
    """Retention scope a lifetime extension applies to."""

    INSTANCE = "instance"

    def __str__(self) -> str:
        """Return scope as string."""
        return self.value


@dataclass(frozen=True)
class RetentionPolicy:
    """
    Retention hint issued after each successful mutation.

    When the scope's remaining lifetime is below min_ttl_seconds,
    it is extended to extend_to_seconds from now.
    """

    scope: StorageScope
    min_ttl_seconds: int
    extend_to_seconds: int

    def __post_init__(self):
        """Validate retention values."""
        if self.min_ttl_seconds < 0:
            raise ValueError("min_ttl_seconds cannot be negative")
        if self.extend_to_seconds < self.min_ttl_seconds:
            raise ValueError("extend_to_seconds must be at least min_ttl_seconds")
