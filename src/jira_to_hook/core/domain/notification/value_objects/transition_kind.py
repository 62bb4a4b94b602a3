from enum import StrEnum


class TransitionKind(StrEnum):
    RELEASE = "Release"
    DEPLOY = "Deploy"
    ROLLBACK = "Rollback"

    @property
    def status_phrase(self) -> str:
        return _STATUS_PHRASES[self]

    @classmethod
    def from_name(cls, name: str) -> "TransitionKind | None":
        """Exact, case-sensitive lookup. Unknown names yield None."""
        for kind in cls:
            if kind.value == name:
                return kind
        return None


_STATUS_PHRASES = {
    TransitionKind.RELEASE: ":slinky: issue released",
    TransitionKind.DEPLOY: ":+1::skin-tone-6: issue deployed",
    TransitionKind.ROLLBACK: ":slinky2: issue rollbacked",
}
