from dataclasses import asdict, dataclass
from typing import Optional


@dataclass
class Customer:
    """A customer record. ``id`` is None until the store assigns one."""

    id: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Customer":
        """Build a Customer from a database row or decoded JSON, ignoring unknown keys."""
        return cls(
            id=data.get("id"),
            name=data.get("name"),
            email=data.get("email"),
        )

    def to_dict(self) -> dict:
        return asdict(self)
