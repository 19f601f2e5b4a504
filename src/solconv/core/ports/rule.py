from typing import Protocol

from solconv.models import SourceFile, Violation


class Rule(Protocol):
    """A naming or structure convention checked one file at a time."""

    def check(self, source: SourceFile) -> list[Violation]: ...
