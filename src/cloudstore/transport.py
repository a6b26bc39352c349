"""HTTP transport selection for storage clients."""

from __future__ import annotations

from enum import Enum


class HttpTransportType(str, Enum):
    """HTTP stack a storage client should send requests through."""

    URLLIB3 = "urllib3"
    CRT = "crt"

    @classmethod
    def parse(cls, name: str) -> HttpTransportType:
        """Resolve a transport from its (case-insensitive) name."""
        normalized = name.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        valid = ", ".join(m.value for m in cls)
        raise ValueError(f"Unknown transport type '{name}'; expected one of: {valid}")


DEFAULT_TRANSPORT_TYPE = HttpTransportType.URLLIB3

__all__ = ["HttpTransportType", "DEFAULT_TRANSPORT_TYPE"]
