from .aggregate_result import AggregateResult
from .chat_message import ChatMessage
from .notification_outcome import NotificationOutcome, NotificationStatus

__all__ = ["AggregateResult", "ChatMessage", "NotificationOutcome", "NotificationStatus"]
