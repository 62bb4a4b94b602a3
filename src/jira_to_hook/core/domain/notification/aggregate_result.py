from dataclasses import dataclass


def _as_block(lines: tuple[str, ...]) -> str:
    return "".join(f"\n{line}" for line in lines)


@dataclass(frozen=True)
class AggregateResult:
    """
    Outcome of walking the linked-issue graph of one event.
    - family_lines: rendered MD- issues, uncapped.
    - release_lines: rendered "Release link" issues, capped (the single
      remembered line of the exactly-one-over case is included here).
    - release_total_count: every release-scoped issue seen, rendered or not.
    - release_overflow_text: summary line for the issues left out, or "".
    """
    family_lines: tuple[str, ...] = ()
    release_lines: tuple[str, ...] = ()
    release_total_count: int = 0
    release_overflow_text: str = ""

    @property
    def family_text(self) -> str:
        return _as_block(self.family_lines)

    @property
    def release_text(self) -> str:
        return _as_block(self.release_lines)
