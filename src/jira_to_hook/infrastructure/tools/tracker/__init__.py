from .jira_link_builder import JiraLinkBuilder

__all__ = ["JiraLinkBuilder"]
