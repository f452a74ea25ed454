"""Domain layer for dairyledger application."""

# Services are resolved lazily: the database layer imports domain entities,
# and the services import the database layer.
_SERVICES = {
    "AccountService": "dairyledger.domain.account",
    "EntryService": "dairyledger.domain.entry",
    "LedgerService": "dairyledger.domain.ledger",
    "MessagingService": "dairyledger.domain.messaging",
    "SettingsService": "dairyledger.domain.settings",
}

__all__ = list(_SERVICES)


def __getattr__(name):
    if name in _SERVICES:
        import importlib

        return getattr(importlib.import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
