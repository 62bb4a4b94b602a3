from jira_to_hook.core.domain.notification.chat_message import ChatMessage

DEFAULT_ICON = ":slinky:"


class DispatchPayloadBuilder:
    def __init__(self, icon: str | None = DEFAULT_ICON):
        self.icon = icon

    def build(self, text: str) -> ChatMessage:
        return ChatMessage(text=text, icon=self.icon)
