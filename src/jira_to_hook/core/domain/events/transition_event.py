from dataclasses import dataclass, field


@dataclass(frozen=True)
class Transition:
    name: str
    from_status: str = ""
    to_status: str = ""


@dataclass(frozen=True)
class IssueLink:
    """
    A relation between the subject issue and another issue.
    - type_name: link type as configured in Jira (e.g. "Release link").
    - linked_issue: the issue on the other end, already resolved from the
      outward/inward pair (outward wins).
    """
    type_name: str | None = None
    linked_issue: "IssueRef | None" = None


@dataclass(frozen=True)
class IssueFields:
    summary: str = ""
    issue_links: tuple[IssueLink, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class IssueRef:
    key: str
    fields: IssueFields | None = None

    @property
    def summary(self) -> str:
        return self.fields.summary if self.fields else ""

    def has_prefix(self, prefix: str) -> bool:
        return self.key.startswith(prefix)


@dataclass(frozen=True)
class TransitionEvent:
    webhook_event_name: str = ""
    transition: Transition | None = None
    issue: IssueRef | None = None

    @property
    def issue_key(self) -> str | None:
        return self.issue.key if self.issue else None
