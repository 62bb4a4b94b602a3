from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ChatMessage:
    text: str
    icon: str | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"text": self.text}
        if self.icon is not None:
            payload["icon_emoji"] = self.icon
        return payload
