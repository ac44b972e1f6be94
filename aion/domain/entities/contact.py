"""Domain entity — a person in the user's network."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Contact:
    """A contact. ``last_contact`` is None when the user never reached out."""

    user_id: int
    name: str
    email: str | None = None
    phone: str | None = None
    avatar_url: str | None = None
    last_contact: datetime | None = None
    relationship: str | None = None
    notes: str | None = None
    id: int | None = None
