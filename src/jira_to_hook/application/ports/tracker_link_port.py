from abc import ABC, abstractmethod


class TrackerLinkPort(ABC):
    @abstractmethod
    def browse_url(self, issue_key: str) -> str:
        """User-facing URL of a single issue."""
        pass

    @abstractmethod
    def scope_url(self, issue_key: str) -> str:
        """Query URL listing the issues linked to issue_key outside the MD project."""
        pass
