"""Input checks shared by the services. Nothing here touches the store."""

from typing import Any, Iterable, List, Optional
from uuid import UUID

from noteful.exceptions import InvalidIdentifierError, ValidationError


def parse_id(value: Any, field: str = "id") -> UUID:
    """Return `value` as a UUID or raise InvalidIdentifierError."""
    if isinstance(value, UUID):
        return value
    if not isinstance(value, str):
        raise InvalidIdentifierError(field=field)
    try:
        uid = UUID(value)
    except ValueError:
        raise InvalidIdentifierError(field=field)
    # Only the canonical dashed form; UUID() also takes bare hex, braces and urns
    if str(uid) != value.lower():
        raise InvalidIdentifierError(field=field)
    return uid


def parse_optional_id(value: Any, field: str) -> Optional[UUID]:
    """Like parse_id, but None and "" mean "no reference"."""
    if value is None or value == "":
        return None
    return parse_id(value, field=field)


def parse_id_list(values: Optional[Iterable[Any]], field: str = "tags") -> List[UUID]:
    if not values:
        return []
    ids = []
    for value in values:
        try:
            ids.append(parse_id(value, field=field))
        except InvalidIdentifierError:
            raise InvalidIdentifierError(
                field=field,
                message=f"The `{field}` array contains an invalid `id`",
                context={"value": str(value)},
            )
    return ids


def require_text(value: Optional[str], field: str) -> str:
    """Return `value` unless it is missing or empty."""
    if not value:
        raise ValidationError.missing(field)
    return value
