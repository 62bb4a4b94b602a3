"""Forwards Jira workflow transitions to a chat incoming webhook."""
