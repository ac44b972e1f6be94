"""Query parameters shared by several endpoints."""

from datetime import datetime
from typing import Annotated

from fastapi import Query

from aion.domain.clock import as_utc

UserIdQuery = Annotated[int, Query(alias="userId", description="Owner of the records")]
StartDateQuery = Annotated[
    datetime | None,
    Query(alias="startDate", description="Inclusive lower bound (ISO-8601)"),
]
EndDateQuery = Annotated[
    datetime | None,
    Query(alias="endDate", description="Inclusive upper bound (ISO-8601)"),
]


def utc_or_none(value: datetime | None) -> datetime | None:
    return as_utc(value) if value is not None else None
