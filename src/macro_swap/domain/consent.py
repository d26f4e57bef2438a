"""Consent domain models."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ConsentRecord:
    """Stored cookie consent and when it lapses."""

    expires_at: datetime

    def is_active(self, now: datetime) -> bool:
        return now < self.expires_at
