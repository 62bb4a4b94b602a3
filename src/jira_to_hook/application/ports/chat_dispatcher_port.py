from abc import ABC, abstractmethod

from jira_to_hook.core.domain.notification.chat_message import ChatMessage


class ChatDispatcherPort(ABC):
    @abstractmethod
    def send(self, message: ChatMessage) -> None:
        """
        Delivers the message to the configured chat hook.
        Raises DispatchError when the hook cannot be reached or rejects it.
        """
        pass
