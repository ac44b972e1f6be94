"""Contact staleness — how overdue the user is to reach out to someone."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from aion.domain.analytics.common import days_between
from aion.domain.analytics.time_format import format_last_contact
from aion.domain.entities import Contact

WARN_AFTER_DAYS = 21
OVERDUE_AFTER_DAYS = 60


class ContactStatus(str, Enum):
    GOOD = "good"
    WARN = "warn"
    OVERDUE = "overdue"


@dataclass
class ContactView:
    id: int | None
    name: str
    avatar_url: str | None
    last_contact: str
    last_contact_status: ContactStatus


def derive_contact_status(last_contact: datetime | None, now: datetime) -> ContactStatus:
    """Never contacted counts as overdue; thresholds are strictly greater-than."""
    if last_contact is None:
        return ContactStatus.OVERDUE

    days_since = days_between(last_contact, now)
    if days_since > OVERDUE_AFTER_DAYS:
        return ContactStatus.OVERDUE
    if days_since > WARN_AFTER_DAYS:
        return ContactStatus.WARN
    return ContactStatus.GOOD


def summarize_contact(contact: Contact, now: datetime) -> ContactView:
    return ContactView(
        id=contact.id,
        name=contact.name,
        avatar_url=contact.avatar_url,
        last_contact=(
            format_last_contact(contact.last_contact, now)
            if contact.last_contact
            else "Never"
        ),
        last_contact_status=derive_contact_status(contact.last_contact, now),
    )


def priority_contacts(
    contacts: list[Contact], now: datetime, limit: int = 3
) -> list[ContactView]:
    return [summarize_contact(c, now) for c in contacts[:limit]]
