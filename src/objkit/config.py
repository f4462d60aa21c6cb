from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ObjkitConfig:
    indent: int | None = None  # None renders compact JSON
    log_level: str = "WARNING"
