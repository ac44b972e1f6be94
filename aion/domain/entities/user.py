"""Domain entity — a registered person using the dashboard."""

from dataclasses import dataclass


@dataclass
class User:
    """Account record.

    The password is stored as given; username and email uniqueness is
    checked once, at registration time.
    """

    username: str
    password: str
    email: str
    full_name: str
    avatar_url: str | None = None
    id: int | None = None
