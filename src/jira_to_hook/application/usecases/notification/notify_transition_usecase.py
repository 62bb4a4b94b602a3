from dataclasses import dataclass, field

from jira_to_hook.application.core.services.dispatch_payload_builder import DispatchPayloadBuilder
from jira_to_hook.application.core.services.message_composer import MessageComposer
from jira_to_hook.application.core.services.scope_aggregator import ScopeAggregator
from jira_to_hook.application.core.services.transition_gate import TransitionGate
from jira_to_hook.application.ports.chat_dispatcher_port import ChatDispatcherPort
from jira_to_hook.application.ports.tracker_link_port import TrackerLinkPort
from jira_to_hook.core.domain.events.transition_event import IssueRef, TransitionEvent
from jira_to_hook.core.domain.notification.notification_outcome import (
    NotificationOutcome,
    NotificationStatus,
)
from jira_to_hook.core.exceptions.dispatch_error import DispatchError
from jira_to_hook.core.exceptions.malformed_event_error import MalformedEventError
from jira_to_hook.infrastructure.observability.logger_factory_service import LoggerFactoryService

logger = LoggerFactoryService.build_logger(__name__)


@dataclass
class NotifyTransitionUseCase:
    """
    Handles one Jira transition event end to end.
    Holds no per-event state, so a single instance can serve concurrent requests.
    """
    links: TrackerLinkPort
    dispatcher: ChatDispatcherPort
    payload_builder: DispatchPayloadBuilder = field(default_factory=DispatchPayloadBuilder)
    gate: TransitionGate = field(default_factory=TransitionGate)
    aggregator: ScopeAggregator | None = None
    composer: MessageComposer | None = None

    def __post_init__(self) -> None:
        if self.aggregator is None:
            self.aggregator = ScopeAggregator(self.links)
        if self.composer is None:
            self.composer = MessageComposer(self.links)

    def execute(self, event: TransitionEvent) -> NotificationOutcome:
        self._log_event(event)
        issue_key = event.issue_key

        if event.transition is None:
            return NotificationOutcome(NotificationStatus.IGNORED, issue_key=issue_key)

        kind = self.gate.match(event)
        if kind is None:
            try:
                self._require_issue(event)
            except MalformedEventError as e:
                logger.warning(f"Skipping malformed event: {e}")
                return NotificationOutcome(NotificationStatus.MALFORMED, detail=str(e))
            logger.info(f"Transition '{event.transition.name}' on {issue_key} does not qualify")
            return NotificationOutcome(NotificationStatus.SKIPPED, issue_key=issue_key)

        try:
            issue = self._require_fields(event)
        except MalformedEventError as e:
            logger.warning(f"Skipping malformed event: {e}")
            return NotificationOutcome(
                NotificationStatus.MALFORMED, issue_key=issue_key, detail=str(e)
            )

        aggregate = self.aggregator.aggregate(issue.key, issue.fields.issue_links)
        text = self.composer.compose(kind, issue, aggregate)
        message = self.payload_builder.build(text)

        logger.info(f"Sending {message.to_payload()}")
        try:
            self.dispatcher.send(message)
        except DispatchError as e:
            logger.warning(f"Error when posting to webhook for {issue_key}: {e}")
            return NotificationOutcome(
                NotificationStatus.DISPATCH_FAILED,
                issue_key=issue_key,
                message=message,
                detail=str(e),
            )

        logger.info(f"Posted notification for {issue_key} to webhook")
        return NotificationOutcome(NotificationStatus.DISPATCHED, issue_key=issue_key, message=message)

    @staticmethod
    def _require_issue(event: TransitionEvent) -> None:
        if event.issue is None:
            raise MalformedEventError("Transition event carries no issue")

    @staticmethod
    def _require_fields(event: TransitionEvent) -> IssueRef:
        NotifyTransitionUseCase._require_issue(event)
        if event.issue.fields is None:
            raise MalformedEventError("Issue has no fields", issue_key=event.issue.key)
        return event.issue

    @staticmethod
    def _log_event(event: TransitionEvent) -> None:
        logger.info(f"Event {event.webhook_event_name}")
        if event.issue is not None:
            logger.info(f"Issue {event.issue.key}")

        if event.transition is None:
            return

        transition = event.transition
        logger.info(f"{transition.from_status} → {transition.to_status} ({transition.name})")
        if event.issue is None or event.issue.fields is None:
            return

        if not event.issue.fields.issue_links:
            logger.info("No issue links")
        for link in event.issue.fields.issue_links:
            if link.linked_issue is not None:
                logger.info(f"Issue link: {link.linked_issue.key} ({link.linked_issue.summary})")
