from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _JiraDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class JiraTransitionDTO(_JiraDTO):
    from_status: str | None = None
    to_status: str | None = None
    name: str | None = Field(None, alias="transitionName")


class JiraIssueLinkTypeDTO(_JiraDTO):
    name: str | None = None


class JiraIssueLinkDTO(_JiraDTO):
    link_type: JiraIssueLinkTypeDTO | None = Field(None, alias="type")
    outward_issue: JiraIssueDTO | None = Field(None, alias="outwardIssue")
    inward_issue: JiraIssueDTO | None = Field(None, alias="inwardIssue")


class JiraIssueFieldsDTO(_JiraDTO):
    summary: str | None = None
    issue_links: list[JiraIssueLinkDTO] | None = Field(None, alias="issuelinks")


class JiraIssueDTO(_JiraDTO):
    key: str | None = None
    fields: JiraIssueFieldsDTO | None = None


class JiraWebhookDTO(_JiraDTO):
    webhook_event: str | None = Field(None, alias="webhookEvent")
    transition: JiraTransitionDTO | None = None
    issue: JiraIssueDTO | None = None


JiraIssueLinkDTO.model_rebuild()
JiraIssueFieldsDTO.model_rebuild()
JiraIssueDTO.model_rebuild()
JiraWebhookDTO.model_rebuild()
