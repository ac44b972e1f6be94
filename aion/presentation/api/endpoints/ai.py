"""AI endpoints — the suggestion bridge and the insight features built on it."""

from collections.abc import Callable
from datetime import datetime, timedelta

from fastapi import APIRouter, Depends, HTTPException, status

from aion.application.schemas import (
    InsightResponse,
    LifeBalanceInsightResponse,
    RecommendationsRequest,
    RecommendationsResponse,
    SuggestionRequest,
    TextInsightResponse,
)
from aion.application.services import (
    EventService,
    LifeDomainService,
    LifeInsightService,
    MoodService,
    SuggestionService,
)
from aion.domain.exceptions import ChatProviderError, ChatProviderTimeoutError
from aion.infrastructure.dependencies import (
    get_clock,
    get_event_service,
    get_life_domain_service,
    get_life_insight_service,
    get_mood_service,
    get_suggestion_service,
)
from aion.presentation.api.params import UserIdQuery

router = APIRouter(prefix="/ai", tags=["AI"])

MOOD_WINDOW = timedelta(days=30)
SCHEDULE_WINDOW = timedelta(days=15)


@router.post("/suggestions", response_model=InsightResponse)
async def create_suggestion(
    request: SuggestionRequest,
    service: SuggestionService = Depends(get_suggestion_service),
) -> InsightResponse:
    """Generate one suggestion from the given data and store it as an insight.

    Returns 504 when the provider never answered in time and 500 for any
    other provider failure; clients are expected to fall back locally.
    """
    try:
        insight = await service.generate_suggestion(request.user_id, request.data)
    except ChatProviderTimeoutError as e:
        raise HTTPException(
            status_code=status.HTTP_504_GATEWAY_TIMEOUT,
            detail=f"Error generating AI suggestion: [{e.provider}] {e.message}",
        )
    except ChatProviderError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error generating AI suggestion: [{e.provider}] {e.message}",
        )
    return InsightResponse.model_validate(insight, from_attributes=True)


@router.get("/life-balance", response_model=LifeBalanceInsightResponse)
async def life_balance_insight(
    user_id: UserIdQuery,
    domains: LifeDomainService = Depends(get_life_domain_service),
    insights: LifeInsightService = Depends(get_life_insight_service),
) -> LifeBalanceInsightResponse:
    analysis = await insights.analyze_life_balance(await domains.list_for_user(user_id))
    return LifeBalanceInsightResponse.model_validate(analysis, from_attributes=True)


@router.get("/mood-analysis", response_model=TextInsightResponse)
async def mood_analysis(
    user_id: UserIdQuery,
    moods: MoodService = Depends(get_mood_service),
    insights: LifeInsightService = Depends(get_life_insight_service),
    clock: Callable[[], datetime] = Depends(get_clock),
) -> TextInsightResponse:
    """Analysis of the last 30 days of moods."""
    now = clock()
    recent = await moods.list_for_user(user_id, start=now - MOOD_WINDOW, end=now)
    return TextInsightResponse(content=await insights.analyze_mood_patterns(recent))


@router.get("/schedule-tip", response_model=TextInsightResponse)
async def schedule_tip(
    user_id: UserIdQuery,
    events: EventService = Depends(get_event_service),
    insights: LifeInsightService = Depends(get_life_insight_service),
    clock: Callable[[], datetime] = Depends(get_clock),
) -> TextInsightResponse:
    """One optimisation tip for the events within 15 days either side of today."""
    now = clock()
    nearby = await events.list_for_user(
        user_id, start=now - SCHEDULE_WINDOW, end=now + SCHEDULE_WINDOW
    )
    return TextInsightResponse(content=await insights.suggest_schedule_optimization(nearby))


@router.post("/recommendations", response_model=RecommendationsResponse)
async def recommendations(
    request: RecommendationsRequest,
    insights: LifeInsightService = Depends(get_life_insight_service),
) -> RecommendationsResponse:
    items = await insights.generate_personalized_recommendations(
        request.user_id, request.context, request.user_data
    )
    return RecommendationsResponse(recommendations=items)
