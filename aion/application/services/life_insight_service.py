"""AI-backed insights with deterministic local fallbacks.

Every feature here asks the suggestion bridge first and, when the provider
fails for any reason, answers with a fixed local heuristic instead of
raising.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any

from aion.application.services.suggestion_service import SuggestionService
from aion.domain.analytics import lowest_domain, most_common_mood, overall_score
from aion.domain.entities import Event, LifeDomain, Mood
from aion.domain.exceptions import ChatProviderError

logger = logging.getLogger(__name__)

NO_DOMAINS_MESSAGE = "No life domains data available for analysis."
EMPTY_SCHEDULE_MESSAGE = (
    "Consider setting up your schedule to include focused work blocks, "
    "regular breaks, and time for recreation."
)
SCHEDULE_FALLBACK = (
    "Based on your schedule, consider blocking out 2 hours in the morning "
    "for deep work on your most important tasks."
)
TOO_FEW_MOODS_MESSAGE = (
    "Record more moods to receive personalized insights about your emotional patterns."
)
NO_RECOMMENDATIONS_MESSAGE = "No specific recommendations available at this time."

MIN_MOODS_FOR_ANALYSIS = 3
LOW_DOMAIN_SCORE = 65
MAX_RECOMMENDATIONS = 3

DEFAULT_SCHEDULE_PREFERENCES: dict[str, list[str]] = {
    "productiveTimes": ["morning"],
    "focusNeeds": ["deep work", "meetings", "health"],
}

_LIST_MARKER = re.compile(r"^[0-9\-.\s]*")


@dataclass
class LifeBalanceAnalysis:
    overall_score: int
    insights: str


def parse_recommendations(text: str, limit: int = MAX_RECOMMENDATIONS) -> list[str]:
    """Split a completion into list items, dropping numbering and bullets.

    Lines that hold nothing but a marker are skipped.
    """
    items = (_LIST_MARKER.sub("", line).strip() for line in text.split("\n"))
    return [item for item in items if item][:limit]


def fallback_recommendations(context: str) -> list[str]:
    return [
        f"Consider setting specific, measurable goals for your {context} activities.",
        "Track your progress regularly to stay motivated.",
        "Find an accountability partner to help you stay on track.",
    ]


class LifeInsightService:
    def __init__(self, suggestions: SuggestionService):
        self._suggestions = suggestions

    async def generate_life_insight(self, user_id: int, data: Any) -> str:
        """Ask the bridge for one insight; provider errors propagate."""
        insight = await self._suggestions.generate_suggestion(user_id, data)
        return insight.content

    async def analyze_life_balance(self, domains: list[LifeDomain]) -> LifeBalanceAnalysis:
        if not domains:
            return LifeBalanceAnalysis(overall_score=0, insights=NO_DOMAINS_MESSAGE)

        score = overall_score(domains)
        data = {
            "domains": [{"name": d.name, "score": d.score} for d in domains],
            "overallScore": score,
        }
        try:
            text = await self.generate_life_insight(domains[0].user_id, data)
        except ChatProviderError as e:
            logger.warning("Life balance insight unavailable, using local analysis: %s", e)
            text = "Your life appears generally balanced. "
            lowest = lowest_domain(domains)
            if lowest.score < LOW_DOMAIN_SCORE:
                text += f"Consider focusing more on improving your {lowest.name.lower()} domain."
            else:
                text += "All domains are performing well, keep up the good work!"
        return LifeBalanceAnalysis(overall_score=score, insights=text)

    async def suggest_schedule_optimization(
        self,
        events: list[Event],
        preferences: dict[str, list[str]] | None = None,
    ) -> str:
        if not events:
            return EMPTY_SCHEDULE_MESSAGE

        data = {
            "events": [
                {
                    "title": e.title,
                    "startTime": e.start_time,
                    "endTime": e.end_time,
                    "type": e.type,
                }
                for e in events
            ],
            "preferences": preferences or DEFAULT_SCHEDULE_PREFERENCES,
        }
        try:
            return await self.generate_life_insight(events[0].user_id, data)
        except ChatProviderError as e:
            logger.warning("Schedule suggestion unavailable, using default: %s", e)
            return SCHEDULE_FALLBACK

    async def analyze_mood_patterns(self, moods: list[Mood]) -> str:
        if len(moods) < MIN_MOODS_FOR_ANALYSIS:
            return TOO_FEW_MOODS_MESSAGE

        data = {
            "moods": [
                {"moodType": m.mood_type, "date": m.date, "notes": m.notes}
                for m in moods
            ]
        }
        try:
            return await self.generate_life_insight(moods[0].user_id, data)
        except ChatProviderError as e:
            logger.warning("Mood analysis unavailable, using local analysis: %s", e)
            return (
                f"You most frequently record feeling {most_common_mood(moods)}. "
                "Consider exploring what factors contribute to this mood."
            )

    async def generate_personalized_recommendations(
        self, user_id: int, context: str, user_data: Any
    ) -> list[str]:
        data = {"context": context, "userData": user_data}
        try:
            text = await self.generate_life_insight(user_id, data)
        except ChatProviderError as e:
            logger.warning("Recommendations unavailable, using defaults: %s", e)
            return fallback_recommendations(context)

        return parse_recommendations(text) or [NO_RECOMMENDATIONS_MESSAGE]
