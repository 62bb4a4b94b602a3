from jira_to_hook.core.domain.events.transition_event import TransitionEvent
from jira_to_hook.core.domain.notification.value_objects.transition_kind import TransitionKind

QA_PREFIX = "QA-"


class TransitionGate:
    """Lets through Release/Deploy/Rollback transitions of QA issues only."""

    def match(self, event: TransitionEvent) -> TransitionKind | None:
        if event.transition is None:
            return None

        kind = TransitionKind.from_name(event.transition.name)
        if kind is None:
            return None

        if event.issue is None or not event.issue.has_prefix(QA_PREFIX):
            return None

        return kind

    def should_process(self, event: TransitionEvent) -> bool:
        return self.match(event) is not None
