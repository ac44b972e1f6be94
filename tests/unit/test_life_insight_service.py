"""Unit tests for the LifeInsightService and its local fallbacks."""

from datetime import timedelta

import httpx
import pytest

from aion.application.services import LifeInsightService, SuggestionService
from aion.application.services.life_insight_service import (
    EMPTY_SCHEDULE_MESSAGE,
    NO_DOMAINS_MESSAGE,
    NO_RECOMMENDATIONS_MESSAGE,
    SCHEDULE_FALLBACK,
    TOO_FEW_MOODS_MESSAGE,
    parse_recommendations,
)
from aion.domain.entities import Event, EventType, LifeDomain, Mood, MoodType
from aion.domain.exceptions import ChatProviderError
from aion.infrastructure.llm import OpenAIChatClient

UNAVAILABLE = ChatProviderError("fake", 401, "invalid api key")


@pytest.fixture
def service(chat_provider, store) -> LifeInsightService:
    suggestions = SuggestionService(chat_provider, store.insights, timeout_seconds=0.2, max_retries=0)
    return LifeInsightService(suggestions)


def _domains(*scores) -> list[LifeDomain]:
    names = ["Health", "Career", "Relationships", "Finance"]
    return [
        LifeDomain(user_id=1, name=names[i], score=s, icon="star", color="#4F46E5")
        for i, s in enumerate(scores)
    ]


def _moods(now, *types) -> list[Mood]:
    return [Mood(user_id=1, date=now - timedelta(days=i), mood_type=t) for i, t in enumerate(types)]


def test_parse_recommendations_strips_numbering():
    text = "1. Walk daily\n\n- Sleep 8 hours\n3) Call a friend\n4. Meditate"

    assert parse_recommendations(text) == ["Walk daily", "Sleep 8 hours", ") Call a friend"]


@pytest.mark.asyncio
async def test_life_balance_without_domains(service, chat_provider):
    analysis = await service.analyze_life_balance([])

    assert analysis.overall_score == 0
    assert analysis.insights == NO_DOMAINS_MESSAGE
    assert chat_provider.calls == []


@pytest.mark.asyncio
async def test_life_balance_uses_provider_text(service, chat_provider):
    chat_provider.queue("Protect your weekends.")

    analysis = await service.analyze_life_balance(_domains(70, 85, 60))

    assert analysis.overall_score == 72
    assert analysis.insights == "Protect your weekends."


@pytest.mark.asyncio
async def test_life_balance_fallback_names_weak_domain(service, chat_provider):
    chat_provider.queue(UNAVAILABLE)

    analysis = await service.analyze_life_balance(_domains(70, 85, 60))

    assert analysis.overall_score == 72
    assert analysis.insights == (
        "Your life appears generally balanced. "
        "Consider focusing more on improving your relationships domain."
    )


@pytest.mark.asyncio
async def test_life_balance_fallback_when_all_domains_are_healthy(service, chat_provider):
    chat_provider.queue(UNAVAILABLE)

    analysis = await service.analyze_life_balance(_domains(65, 90))

    assert analysis.insights.endswith("All domains are performing well, keep up the good work!")


@pytest.mark.asyncio
async def test_schedule_tip(service, chat_provider, now):
    assert await service.suggest_schedule_optimization([]) == EMPTY_SCHEDULE_MESSAGE

    events = [Event(user_id=1, title="Standup", start_time=now,
                    end_time=now + timedelta(minutes=15), type=EventType.WORK)]
    chat_provider.queue(UNAVAILABLE)
    assert await service.suggest_schedule_optimization(events) == SCHEDULE_FALLBACK

    chat_provider.queue("Batch your meetings after lunch.")
    assert await service.suggest_schedule_optimization(events) == "Batch your meetings after lunch."
    assert '"productiveTimes":["morning"]' in chat_provider.calls[-1][1].content


@pytest.mark.asyncio
async def test_mood_analysis_needs_three_moods(service, chat_provider, now):
    result = await service.analyze_mood_patterns(_moods(now, MoodType.SAD, MoodType.HAPPY))

    assert result == TOO_FEW_MOODS_MESSAGE
    assert chat_provider.calls == []


@pytest.mark.asyncio
async def test_mood_analysis_fallback(service, chat_provider, now):
    chat_provider.queue(UNAVAILABLE)

    result = await service.analyze_mood_patterns(
        _moods(now, MoodType.TIRED, MoodType.CALM, MoodType.TIRED)
    )

    assert result == (
        "You most frequently record feeling tired. "
        "Consider exploring what factors contribute to this mood."
    )


@pytest.mark.asyncio
async def test_mood_analysis_falls_back_on_malformed_replies(store, now):
    bodies = [
        {"error": "quota exceeded"},
        [],
        {"choices": [{"message": {"content": [{"type": "text", "text": "hi"}]}}]},
    ]
    moods = _moods(now, MoodType.HAPPY, MoodType.HAPPY, MoodType.HAPPY)

    for body in bodies:
        client = OpenAIChatClient(
            api_key="test-key",
            base_url="https://llm.test/v1",
            http_client=httpx.AsyncClient(
                transport=httpx.MockTransport(lambda request, body=body: httpx.Response(200, json=body))
            ),
        )
        suggestions = SuggestionService(client, store.insights, timeout_seconds=1.0, max_retries=0)

        result = await LifeInsightService(suggestions).analyze_mood_patterns(moods)

        assert result == (
            "You most frequently record feeling happy. "
            "Consider exploring what factors contribute to this mood."
        )


@pytest.mark.asyncio
async def test_recommendations_from_provider(service, chat_provider):
    chat_provider.queue("1. Run twice a week\n2. Cook at home\n3. Read before bed\n4. Extra")

    recommendations = await service.generate_personalized_recommendations(1, "fitness", {})

    assert recommendations == ["Run twice a week", "Cook at home", "Read before bed"]


@pytest.mark.asyncio
async def test_recommendations_fallback(service, chat_provider):
    chat_provider.queue(UNAVAILABLE)

    recommendations = await service.generate_personalized_recommendations(1, "fitness", {})

    assert recommendations == [
        "Consider setting specific, measurable goals for your fitness activities.",
        "Track your progress regularly to stay motivated.",
        "Find an accountability partner to help you stay on track.",
    ]


@pytest.mark.asyncio
async def test_recommendations_when_nothing_parses(service, chat_provider):
    chat_provider.queue("1.\n2.\n")

    assert await service.generate_personalized_recommendations(1, "sleep", {}) == [
        NO_RECOMMENDATIONS_MESSAGE
    ]
