"""Domain dataclass for User entities (storage-agnostic)."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True)
class User:
    name: str
    email: str
    created_at: datetime
    updated_at: datetime
    id: int = 0
