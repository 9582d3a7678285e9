"""Exceptions raised by the wallet session."""


class WalletError(Exception):
    """Base class for wallet session errors."""


class ConstructionFailure(WalletError):
    """Session could not be created, e.g. the secret is not key material."""


class TransportFailure(WalletError):
    """A remote ledger read failed.

    Attributes:
        operation: Human-readable name of the failed read.
    """

    def __init__(self, operation: str, cause: BaseException):
        self.operation = operation
        super().__init__(f"Failed to {operation}: {cause}")
