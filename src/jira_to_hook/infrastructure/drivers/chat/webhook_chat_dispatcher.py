import httpx

from jira_to_hook.application.ports.chat_dispatcher_port import ChatDispatcherPort
from jira_to_hook.core.domain.notification.chat_message import ChatMessage
from jira_to_hook.core.exceptions.dispatch_error import DispatchError
from jira_to_hook.infrastructure.observability.logger_factory_service import (
    LoggerFactoryService,
)

logger = LoggerFactoryService.build_logger(__name__)


class WebhookChatDispatcher(ChatDispatcherPort):
    """POSTs chat messages to an incoming-webhook URL (Slack/Mattermost style). No retries."""

    def __init__(self, hook_url: str, timeout: float = 10.0):
        self.hook_url = hook_url
        self.timeout = timeout

    def send(self, message: ChatMessage) -> None:
        try:
            with httpx.Client() as client:
                response = client.post(
                    self.hook_url,
                    json=message.to_payload(),
                    headers={"Content-Type": "application/json"},
                    timeout=self.timeout,
                )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"Chat hook rejected message: {e.response.text}")
            raise DispatchError("Chat hook rejected message", status_code=e.response.status_code) from e
        except httpx.HTTPError as e:
            raise DispatchError(f"Chat hook unreachable: {e}") from e
