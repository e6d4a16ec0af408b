"""Injection stats model."""

from dataclasses import asdict, dataclass


@dataclass
class InjectionStats:
    total: int = 0
    injected: int = 0
    skipped: int = 0
    failed: int = 0

    def __add__(self, other: "InjectionStats") -> "InjectionStats":
        return InjectionStats(
            total=self.total + other.total,
            injected=self.injected + other.injected,
            skipped=self.skipped + other.skipped,
            failed=self.failed + other.failed,
        )

    def __iadd__(self, other: "InjectionStats") -> "InjectionStats":
        self.total += other.total
        self.injected += other.injected
        self.skipped += other.skipped
        self.failed += other.failed
        return self

    def as_dict(self) -> dict[str, int]:
        return asdict(self)
