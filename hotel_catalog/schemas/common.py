"""Lenient field types shared by the supplier DTO schemas.

Supplier payloads are not validated: a value of the wrong shape degrades to
the field's default instead of failing the whole record.
"""

from typing import Annotated, Any

from pydantic import (
    BeforeValidator,
    ValidationError,
    ValidatorFunctionWrapHandler,
    WrapValidator,
)


def or_none(value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
    try:
        return handler(value)
    except ValidationError:
        return None


def strings_only(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


def objects_only(value: Any) -> list[dict]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


Text = Annotated[str | None, WrapValidator(or_none)]
Identifier = Annotated[int | str | None, WrapValidator(or_none)]
StrList = Annotated[list[str], BeforeValidator(strings_only)]
