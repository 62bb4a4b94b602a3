from dataclasses import dataclass
from enum import StrEnum

from jira_to_hook.core.domain.notification.chat_message import ChatMessage


class NotificationStatus(StrEnum):
    IGNORED = "ignored"
    SKIPPED = "skipped"
    MALFORMED = "malformed"
    DISPATCHED = "dispatched"
    DISPATCH_FAILED = "dispatch_failed"


@dataclass(frozen=True)
class NotificationOutcome:
    status: NotificationStatus
    issue_key: str | None = None
    message: ChatMessage | None = None
    detail: str | None = None
