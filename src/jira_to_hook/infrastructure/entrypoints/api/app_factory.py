from fastapi import FastAPI

from jira_to_hook.application.core.services.dispatch_payload_builder import DispatchPayloadBuilder
from jira_to_hook.application.ports.chat_dispatcher_port import ChatDispatcherPort
from jira_to_hook.application.usecases.notification.notify_transition_usecase import (
    NotifyTransitionUseCase,
)
from jira_to_hook.infrastructure.configuration.main_settings import Settings
from jira_to_hook.infrastructure.drivers.chat.webhook_chat_dispatcher import WebhookChatDispatcher
from jira_to_hook.infrastructure.entrypoints.api.health_router import router as health_router
from jira_to_hook.infrastructure.entrypoints.api.jira_webhook_router import (
    root_router as jira_root_router,
)
from jira_to_hook.infrastructure.entrypoints.api.jira_webhook_router import (
    router as jira_router,
)
from jira_to_hook.infrastructure.observability.logger_factory_service import (
    LoggerFactoryService,
    configure_logging,
)
from jira_to_hook.infrastructure.observability.logging.correlation_middleware import (
    CorrelationMiddleware,
)
from jira_to_hook.infrastructure.tools.tracker.jira_link_builder import JiraLinkBuilder

logger = LoggerFactoryService.build_logger(__name__)


def build_usecase(
    settings: Settings, dispatcher: ChatDispatcherPort | None = None
) -> NotifyTransitionUseCase:
    return NotifyTransitionUseCase(
        links=JiraLinkBuilder(settings.jira_base_url),
        dispatcher=dispatcher
        or WebhookChatDispatcher(
            settings.destination_hook_url, timeout=settings.dispatch_timeout_seconds
        ),
        payload_builder=DispatchPayloadBuilder(icon=settings.message_icon),
    )


def create_app(settings: Settings, dispatcher: ChatDispatcherPort | None = None) -> FastAPI:
    configure_logging(settings.log_level, log_format=settings.log_format, env=settings.env)
    logger.info("--- BOOT DIAGNOSTICS ---")
    logger.info(f"App Name: {settings.app_name}")
    logger.info(f"Env: {settings.env}")
    logger.info(f"Jira: {settings.jira_base_url}")
    logger.info(f"Destination hook configured: {bool(settings.destination_hook_url)}")
    logger.info("------------------------")

    app = FastAPI(title=settings.app_name)
    app.state.settings = settings
    app.state.usecase = build_usecase(settings, dispatcher)

    app.add_middleware(CorrelationMiddleware)
    app.include_router(health_router)
    app.include_router(jira_router, prefix="/api/v1")
    app.include_router(jira_root_router)

    return app
