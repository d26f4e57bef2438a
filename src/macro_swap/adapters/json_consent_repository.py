"""File-backed repository for the consent flag."""

import json
import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path

from macro_swap.services.consent import ConsentRepository

_CONSENT_KEY = "cookie-consent"

_logger = logging.getLogger(__name__)


@dataclass
class JsonConsentRepository(ConsentRepository):
    """Stores the consent expiry as an ISO timestamp in a JSON file."""

    path: Path

    def get_expiry(self) -> datetime | None:
        """Return the stored expiry, treating unreadable data as absent."""
        if not self.path.exists():
            return None
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
            raw = payload.get(_CONSENT_KEY)
            if raw is None:
                return None
            expires_at = datetime.fromisoformat(raw)
        except (OSError, ValueError, TypeError, AttributeError):
            _logger.warning("Ignoring unreadable consent store: %s", self.path)
            return None
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=UTC)
        return expires_at

    def set_expiry(self, expires_at: datetime) -> None:
        """Write the expiry, creating parent directories as needed."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps({_CONSENT_KEY: expires_at.isoformat()}),
            encoding="utf-8",
        )
