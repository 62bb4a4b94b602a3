from .dispatch_payload_builder import DispatchPayloadBuilder
from .issue_line_renderer import IssueLineRenderer
from .link_classifier import LinkClassifier
from .message_composer import MessageComposer
from .scope_aggregator import RELEASE_CAPACITY, ScopeAggregator
from .transition_gate import TransitionGate

__all__ = [
    "DispatchPayloadBuilder",
    "IssueLineRenderer",
    "LinkClassifier",
    "MessageComposer",
    "RELEASE_CAPACITY",
    "ScopeAggregator",
    "TransitionGate",
]
