"""
Food Ledger World State — Errors
===================================
Store-level failures. Any of these raised during a transaction aborts
it with no writes applied.
"""


class WorldStateError(Exception):
    """Base error for world-state operations."""
    pass


class InvalidKeyError(WorldStateError):
    """Key is not a non-empty string."""

    def __init__(self, key):
        self.key = key
        super().__init__(
            f"World-state key must be a non-empty string, got {key!r}."
        )


class TransactionClosedError(WorldStateError):
    """Transactional view was already committed or discarded."""

    def __init__(self, tx_id: str = ""):
        self.tx_id = tx_id
        super().__init__(
            f"Transaction '{tx_id}' is closed. "
            "A transactional view commits at most once."
        )


def validate_key(key) -> None:
    if not key or not isinstance(key, str):
        raise InvalidKeyError(key)


def validate_value(value) -> None:
    if not isinstance(value, (bytes, bytearray)):
        raise TypeError(
            f"World-state values must be bytes, got {type(value).__name__}."
        )
