"""God-mode identities - emails that bypass permission resolution."""

from collections.abc import Iterable
from dataclasses import dataclass, field


def _normalize(email: str) -> str:
    return email.strip().lower()


@dataclass(frozen=True)
class GodModePolicy:
    """Set of god-mode emails, compared case-insensitively."""

    emails: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        normalized = frozenset(_normalize(e) for e in self.emails if e and e.strip())
        object.__setattr__(self, "emails", normalized)

    @classmethod
    def of(cls, emails: Iterable[str]) -> "GodModePolicy":
        return cls(emails=frozenset(emails))

    @classmethod
    def from_csv(cls, raw: str | None) -> "GodModePolicy":
        """Build from a comma-separated list, e.g. the GOD_MODE_EMAILS setting."""
        if not raw:
            return cls()
        return cls.of(raw.split(","))

    def matches(self, email: str | None) -> bool:
        if not email:
            return False
        return _normalize(email) in self.emails
