from fastapi import APIRouter, Depends, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from jira_to_hook.application.usecases.notification.notify_transition_usecase import (
    NotifyTransitionUseCase,
)
from jira_to_hook.infrastructure.entrypoints.api.dtos.jira_webhook_dto import JiraWebhookDTO
from jira_to_hook.infrastructure.entrypoints.api.mappers.jira_event_mapper import JiraEventMapper
from jira_to_hook.infrastructure.observability.logger_factory_service import LoggerFactoryService

logger = LoggerFactoryService.build_logger(__name__)
router = APIRouter()


def get_usecase(request: Request) -> NotifyTransitionUseCase:
    return request.app.state.usecase


async def receive_webhook(
    request: Request,
    usecase: NotifyTransitionUseCase = Depends(get_usecase),
):
    body_bytes = await request.body()
    logger.debug(f"Incoming Jira Payload (Raw): {body_bytes.decode('utf-8', errors='replace')}")

    try:
        payload = JiraWebhookDTO.model_validate_json(body_bytes)
    except ValidationError as e:
        logger.error(f"Failed to parse JiraWebhookDTO: {e}")
        # 200 so Jira does not keep redelivering a payload we will never understand
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content={"status": "ignored", "message": "Malformed JSON", "error": str(e)},
        )

    event = JiraEventMapper.map_to_event(payload)
    outcome = await run_in_threadpool(usecase.execute, event)

    return {
        "status": outcome.status.value,
        "issue_key": outcome.issue_key,
        "detail": outcome.detail,
    }


router.add_api_route("/jira-webhook", receive_webhook, methods=["POST"])

# The listener historically accepted events on any path; keep "/" working.
root_router = APIRouter()
root_router.add_api_route("/", receive_webhook, methods=["POST"])
