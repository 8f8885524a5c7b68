"""Record store-related domain exceptions."""

from .base import DomainException


class InvalidTransactionRecordException(DomainException):
    """Raised when a bundled record is missing fields or holds bad values."""

    def __init__(self, message: str, index: int | None = None):
        super().__init__(
            message=message,
            code="INVALID_TRANSACTION_RECORD",
        )
        self.index = index


class RecordStoreLoadException(DomainException):
    """Raised when the record store cannot be built from its source."""

    def __init__(self, message: str, source: str | None = None):
        super().__init__(
            message=message,
            code="RECORD_STORE_LOAD_ERROR",
        )
        self.source = source
