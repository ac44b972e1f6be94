from .chat_message import ChatMessage, TokenUsage, ChatCompletionResult
from .user import User
from .life_domain import LifeDomain
from .event import Event, EventType
from .mood import Mood, MoodType
from .transaction import Transaction, TransactionType
from .goal import Goal
from .contact import Contact
from .insight import Insight, InsightType

__all__ = [
    "ChatMessage",
    "TokenUsage",
    "ChatCompletionResult",
    "User",
    "LifeDomain",
    "Event",
    "EventType",
    "Mood",
    "MoodType",
    "Transaction",
    "TransactionType",
    "Goal",
    "Contact",
    "Insight",
    "InsightType",
]
