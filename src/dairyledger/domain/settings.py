"""Application settings domain service."""

from decimal import Decimal, InvalidOperation
from typing import Optional

from dairyledger.database.base import Database
from dairyledger.domain.balance import to_cents
from dairyledger.domain.entities import EntryKind, Setting
from dairyledger.domain.errors import ValidationError

DEFAULT_PURCHASE_RATE = "default_purchase_rate"
DEFAULT_SALE_RATE = "default_sale_rate"

RATE_KEYS = {
    DEFAULT_PURCHASE_RATE: "Default milk purchase rate per litre",
    DEFAULT_SALE_RATE: "Default milk sale rate per litre",
}

FALLBACK_RATE = Decimal("50")


class SettingsService:
    """Service for reading and writing persisted settings."""

    def __init__(self, db: Database):
        """Initialize settings service.

        Args:
            db: Database instance
        """
        self.db = db

    def get(self, key: str) -> Optional[str]:
        setting = self.db.get_setting(key)
        return setting.value if setting else None

    def set(self, key: str, value: str, updated_by: Optional[str] = None) -> None:
        """Store a setting, validating rate keys as non-negative decimals.

        Raises:
            ValidationError: If a rate setting is not a valid amount
        """
        key = key.strip()
        if not key:
            raise ValidationError("Setting key is required")
        value = value.strip()
        if key in RATE_KEYS:
            value = str(self._parse_rate(key, value))
        self.db.set_setting(key, value, description=RATE_KEYS.get(key), updated_by=updated_by)

    def list_settings(self) -> list[Setting]:
        return self.db.list_settings()

    def default_rate(self, kind: EntryKind) -> Decimal:
        """Configured default rate for purchases or sales (50 when unset)."""
        key = DEFAULT_PURCHASE_RATE if kind == EntryKind.PURCHASE else DEFAULT_SALE_RATE
        value = self.get(key)
        if value is None:
            return FALLBACK_RATE
        return self._parse_rate(key, value)

    @staticmethod
    def _parse_rate(key: str, value: str) -> Decimal:
        try:
            rate = Decimal(value)
        except InvalidOperation:
            raise ValidationError(f"Setting '{key}' must be a number, got '{value}'") from None
        if not rate.is_finite() or rate < 0:
            raise ValidationError(f"Setting '{key}' must be a non-negative number")
        return to_cents(rate)
