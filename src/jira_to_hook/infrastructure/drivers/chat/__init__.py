from .webhook_chat_dispatcher import WebhookChatDispatcher

__all__ = ["WebhookChatDispatcher"]
