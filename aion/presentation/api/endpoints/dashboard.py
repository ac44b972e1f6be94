"""Dashboard endpoints — aggregated, presentation-ready views."""

from collections.abc import Callable
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query, status

from aion.application.schemas import (
    DashboardResponse,
    FinanceSummaryResponse,
    MoodReportResponse,
)
from aion.application.services import DashboardService
from aion.domain.analytics import FinancePeriod
from aion.domain.clock import as_utc
from aion.infrastructure.dependencies import get_clock, get_dashboard_service
from aion.presentation.api.params import UserIdQuery

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    user_id: UserIdQuery,
    service: DashboardService = Depends(get_dashboard_service),
    clock: Callable[[], datetime] = Depends(get_clock),
) -> DashboardResponse:
    """Life balance, today's schedule, the week's moods and money, goals,
    contacts to reach out to and the latest open insight."""
    overview = await service.overview(user_id, clock())
    return DashboardResponse.model_validate(overview, from_attributes=True)


@router.get("/finance", response_model=FinanceSummaryResponse)
async def get_finance_report(
    user_id: UserIdQuery,
    period: FinancePeriod = Query(FinancePeriod.MONTH),
    date: datetime | None = Query(None, description="Any instant inside the period"),
    service: DashboardService = Depends(get_dashboard_service),
    clock: Callable[[], datetime] = Depends(get_clock),
) -> FinanceSummaryResponse:
    try:
        reference = as_utc(date) if date is not None else clock()
    except OverflowError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="date is out of range"
        ) from e
    summary = await service.finance_report(user_id, period, reference)
    return FinanceSummaryResponse.model_validate(summary, from_attributes=True)


@router.get("/moods", response_model=MoodReportResponse)
async def get_mood_report(
    user_id: UserIdQuery,
    service: DashboardService = Depends(get_dashboard_service),
    clock: Callable[[], datetime] = Depends(get_clock),
) -> MoodReportResponse:
    """The last 30 days of moods as history, distribution and weekday averages."""
    report = await service.mood_report(user_id, clock())
    return MoodReportResponse.model_validate(report, from_attributes=True)
