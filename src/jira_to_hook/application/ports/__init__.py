from .chat_dispatcher_port import ChatDispatcherPort
from .tracker_link_port import TrackerLinkPort

__all__ = ["ChatDispatcherPort", "TrackerLinkPort"]
