"""Single-file injection result model."""

from dataclasses import dataclass
from pathlib import Path

from .InjectionOutcome import InjectionOutcome


@dataclass(frozen=True)
class InjectionResult:
    path: Path
    outcome: InjectionOutcome
    detail: str = ""

    @property
    def injected(self) -> bool:
        return self.outcome is InjectionOutcome.INJECTED
