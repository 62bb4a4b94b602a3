from jira_to_hook.core.domain.events.transition_event import (
    IssueFields,
    IssueLink,
    IssueRef,
    Transition,
    TransitionEvent,
)
from jira_to_hook.infrastructure.entrypoints.api.dtos.jira_webhook_dto import (
    JiraIssueDTO,
    JiraIssueLinkDTO,
    JiraTransitionDTO,
    JiraWebhookDTO,
)


class JiraEventMapper:
    """
    Maps the Jira webhook wire shape onto the domain TransitionEvent.
    Absent parts stay absent; nothing is rejected here.
    """

    @classmethod
    def map_to_event(cls, payload: JiraWebhookDTO) -> TransitionEvent:
        return TransitionEvent(
            webhook_event_name=payload.webhook_event or "",
            transition=cls._map_transition(payload.transition),
            issue=cls._map_issue(payload.issue),
        )

    @staticmethod
    def _map_transition(dto: JiraTransitionDTO | None) -> Transition | None:
        if dto is None:
            return None
        return Transition(
            name=dto.name or "",
            from_status=dto.from_status or "",
            to_status=dto.to_status or "",
        )

    @classmethod
    def _map_issue(cls, dto: JiraIssueDTO | None) -> IssueRef | None:
        if dto is None:
            return None
        if dto.fields is None:
            return IssueRef(key=dto.key or "")

        return IssueRef(
            key=dto.key or "",
            fields=IssueFields(
                summary=dto.fields.summary or "",
                issue_links=tuple(cls._map_link(link) for link in dto.fields.issue_links or ()),
            ),
        )

    @classmethod
    def _map_link(cls, dto: JiraIssueLinkDTO) -> IssueLink:
        # Direction is irrelevant here; outward wins if both are set.
        linked = dto.outward_issue if dto.outward_issue is not None else dto.inward_issue
        return IssueLink(
            type_name=dto.link_type.name if dto.link_type else None,
            linked_issue=cls._map_issue(linked),
        )
