from __future__ import annotations

from typing import Any
from uuid import uuid4


def generate_id() -> str:
    return str(uuid4())


def normalize_id(value: Any) -> str | None:
    """Stringify a reference id; blank or missing ids become None."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


__all__ = ["generate_id", "normalize_id"]
