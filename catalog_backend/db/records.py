"""
Boundary decoding for rows returned by Supabase.

Rows are plain dicts from `result.data`. Every row is validated into a
Category or Settings record here; nothing downstream sees raw rows.
Collections are checked for duplicate identifiers, which are rejected.
"""

import logging
from typing import Any, Dict, Iterable, List, Type, TypeVar

from pydantic import BaseModel, ValidationError

from catalog_backend.exceptions import DuplicateRecordError, RecordValidationError
from catalog_backend.schemas.records import Category, Settings

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


def _format_errors(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or '<row>'}: {err['msg']}"
        for err in exc.errors()
    )


def _decode(model: Type[RecordT], row: Any) -> RecordT:
    if not isinstance(row, dict):
        raise RecordValidationError(model.__name__, f"expected an object, got {type(row).__name__}")
    try:
        return model.model_validate(row)
    except ValidationError as e:
        raise RecordValidationError(model.__name__, _format_errors(e)) from e


def _decode_unique(model: Type[RecordT], rows: Iterable[Any], field: str) -> List[RecordT]:
    records: List[RecordT] = []
    seen: set[str] = set()
    for row in rows:
        record = _decode(model, row)
        identifier = getattr(record, field)
        if identifier in seen:
            logger.warning(f"Rejecting {model.__name__} collection: duplicate {field} {identifier!r}")
            raise DuplicateRecordError(model.__name__, field, identifier)
        seen.add(identifier)
        records.append(record)
    return records


def decode_category(row: Any) -> Category:
    """
    Validate a single `categories` row.

    Raises:
        RecordValidationError: If a field is missing, has the wrong type,
            or min_age is negative.
    """
    return _decode(Category, row)


def decode_categories(rows: Iterable[Any]) -> List[Category]:
    """
    Validate a collection of `categories` rows, preserving order.

    Raises:
        RecordValidationError: If any row is invalid.
        DuplicateRecordError: If two rows share the same id.
    """
    return _decode_unique(Category, rows, "id")


def decode_settings(row: Any) -> Settings:
    """Validate a single `settings` row."""
    return _decode(Settings, row)


def decode_settings_list(rows: Iterable[Any]) -> List[Settings]:
    """
    Validate a collection of `settings` rows, preserving order.

    Raises:
        RecordValidationError: If any row is invalid.
        DuplicateRecordError: If two rows share the same key.
    """
    return _decode_unique(Settings, rows, "key")


def encode_category(category: Category) -> Dict[str, Any]:
    """Row payload for inserting/upserting a category."""
    return category.model_dump()


def encode_settings(settings: Settings) -> Dict[str, Any]:
    """Row payload for inserting/upserting a setting."""
    return settings.model_dump()
