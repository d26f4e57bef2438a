"""Cookie consent service."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol

from macro_swap.domain.consent import ConsentRecord


class ConsentRepository(Protocol):
    """Persistence interface for the consent flag."""

    def get_expiry(self) -> datetime | None:
        """Return when stored consent expires, if any is stored."""

    def set_expiry(self, expires_at: datetime) -> None:
        """Store consent valid until ``expires_at``."""


@dataclass
class ConsentService:
    """Decides whether to show the consent banner and records acceptance."""

    repository: ConsentRepository
    ttl_days: int = 30

    def current(self) -> ConsentRecord | None:
        """Return stored consent if it has not lapsed."""
        expires_at = self.repository.get_expiry()
        if expires_at is None:
            return None
        record = ConsentRecord(expires_at=expires_at)
        if not record.is_active(datetime.now(tz=UTC)):
            return None
        return record

    def is_banner_visible(self) -> bool:
        """Return True when the user still has to accept cookies."""
        return self.current() is None

    def accept(self) -> ConsentRecord:
        """Record consent for the configured number of days."""
        expires_at = datetime.now(tz=UTC) + timedelta(days=self.ttl_days)
        self.repository.set_expiry(expires_at)
        return ConsentRecord(expires_at=expires_at)
