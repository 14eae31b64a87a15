"""Key material held back until a pending self-update is committed."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["PendingUpdate"]


@dataclass
class PendingUpdate:
    """Private keys generated for an update that has not been applied yet."""

    ilum_dk: Any
    x448_dk: Any
    ssk: Any