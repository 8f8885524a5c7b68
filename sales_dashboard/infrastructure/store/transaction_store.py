"""In-memory, read-only implementation of TransactionRepository."""

import json
from pathlib import Path
from typing import Any, Iterable, Iterator, List, Tuple

import structlog

from sales_dashboard.domain.entities import Transaction
from sales_dashboard.domain.exceptions import (
    InvalidTransactionRecordException,
    RecordStoreLoadException,
)
from sales_dashboard.domain.interfaces import TransactionRepository
from sales_dashboard.infrastructure.parsing import parse_transaction, resolve_timezone

logger = structlog.get_logger(__name__)


class TransactionStore(TransactionRepository):
    """
    Immutable collection of transaction records.

    Built once at startup and shared by every request. Records are
    held in a tuple of frozen dataclasses, so nothing handed out by
    the store can be used to change it.
    """

    def __init__(self, records: Iterable[Transaction], timezone: str = "UTC"):
        self._records: Tuple[Transaction, ...] = tuple(records)
        self._timezone = timezone

        seen = set()
        for record in self._records:
            if record.id in seen:
                raise RecordStoreLoadException(f"Duplicate record id: {record.id}")
            seen.add(record.id)

    @classmethod
    def from_records(cls, items: Iterable[Any], timezone: str = "UTC") -> "TransactionStore":
        """
        Build a store from decoded JSON objects.

        Raises:
            RecordStoreLoadException: If any record is invalid
        """
        try:
            zone = resolve_timezone(timezone)
        except InvalidTransactionRecordException as e:
            raise RecordStoreLoadException(e.message) from e

        records = []
        for index, item in enumerate(items):
            try:
                records.append(parse_transaction(item, zone))
            except InvalidTransactionRecordException as e:
                raise RecordStoreLoadException(
                    f"Invalid record at index {index}: {e.message}"
                ) from e

        return cls(records, timezone=timezone)

    @classmethod
    def from_json_file(cls, path: Path | str, timezone: str = "UTC") -> "TransactionStore":
        """
        Load the store from a JSON array on disk.

        Raises:
            RecordStoreLoadException: If the file is missing, unreadable,
                not a JSON array, or holds an invalid record
        """
        path = Path(path)

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise RecordStoreLoadException(
                f"Data file not found: {path}", source=str(path)
            ) from e
        except (OSError, json.JSONDecodeError) as e:
            raise RecordStoreLoadException(
                f"Unable to read data file {path}: {e}", source=str(path)
            ) from e

        if not isinstance(data, list):
            raise RecordStoreLoadException(
                f"Data file must hold a JSON array, got {type(data).__name__}",
                source=str(path),
            )

        store = cls.from_records(data, timezone=timezone)

        logger.info(
            "record_store_loaded",
            source=str(path),
            records=len(store),
            timezone=timezone,
        )

        return store

    @property
    def timezone(self) -> str:
        return self._timezone

    def all(self) -> Tuple[Transaction, ...]:
        return self._records

    def filter_by_month(self, month: int) -> List[Transaction]:
        return [record for record in self._records if record.sale_month == month]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self._records)
