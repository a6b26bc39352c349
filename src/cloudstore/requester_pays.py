"""Requester-pays billing options forwarded with storage requests."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar


class RequesterPaysMode(str, Enum):
    """When requests should be billed to the caller instead of the bucket owner.

    ``AUTO`` bills the caller only for buckets that demand it, ``CUSTOM``
    only for the buckets listed in ``RequesterPaysOptions.buckets``.
    """

    DISABLED = "disabled"
    ENABLED = "enabled"
    AUTO = "auto"
    CUSTOM = "custom"


@dataclass(frozen=True)
class RequesterPaysOptions:
    """Billing project and mode for requester-pays buckets."""

    DEFAULT: ClassVar[RequesterPaysOptions]

    mode: RequesterPaysMode = RequesterPaysMode.DISABLED
    project_id: str | None = None
    buckets: frozenset[str] = field(default_factory=frozenset)

    def to_dict(self) -> dict[str, Any]:
        return {
            "mode": self.mode.value,
            "project_id": self.project_id,
            "buckets": sorted(self.buckets),
        }


RequesterPaysOptions.DEFAULT = RequesterPaysOptions()

__all__ = ["RequesterPaysMode", "RequesterPaysOptions"]
