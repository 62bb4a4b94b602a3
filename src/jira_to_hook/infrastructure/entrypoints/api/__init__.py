from .app_factory import build_usecase, create_app
from .health_router import router as health_router
from .jira_webhook_router import router as jira_webhook_router

__all__ = ["build_usecase", "create_app", "health_router", "jira_webhook_router"]
