from .transition_event import IssueFields, IssueLink, IssueRef, Transition, TransitionEvent

__all__ = ["IssueFields", "IssueLink", "IssueRef", "Transition", "TransitionEvent"]
