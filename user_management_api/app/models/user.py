"""
The ``User`` entity.

A user is identified by a storage-assigned integer ``id`` and a
globally unique ``email``.  ``id`` stays ``None`` until the record has
been persisted.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    name: str
    email: str
    id: Optional[int] = None

    @property
    def is_persisted(self) -> bool:
        return self.id is not None
