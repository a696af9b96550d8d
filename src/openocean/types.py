"""Permissive numeric field types.

The OpenOcean API emits the same logical amount either as a JSON number or
as a numeric string, depending on magnitude and endpoint version. The
decoders here accept both and normalize to one representation.

Response bodies are tokenized with ``parse_float=Decimal`` and JSON integers
are Python ints, so no value is rounded through a binary float before it
reaches these functions.
"""

import math
import re
from decimal import Decimal, InvalidOperation
from typing import Annotated, Any

from pydantic import AfterValidator, BeforeValidator, PlainSerializer

U128_MAX = 2**128 - 1

_DIGITS = re.compile(r"[0-9]+")


def _to_decimal(value: Any) -> Decimal:
    """Dispatch on the JSON value's concrete type and return an exact Decimal."""
    # bool is an int subclass, check it first
    if isinstance(value, bool) or value is None:
        raise ValueError(f"expected number or numeric string, got {_json_type(value)}")

    if isinstance(value, str):
        try:
            number = Decimal(value.strip())
        except InvalidOperation:
            raise ValueError(f"invalid numeric string: {value!r}") from None
    elif isinstance(value, (int, Decimal)):
        number = Decimal(value)
    elif isinstance(value, float):
        number = Decimal(repr(value))
    else:
        raise ValueError(f"expected number or numeric string, got {_json_type(value)}")

    if not number.is_finite():
        raise ValueError(f"non-finite number: {value!r}")
    return number


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__


def decode_u128(value: Any) -> int:
    """Decode a JSON number or digit string into an unsigned 128-bit int.

    Strings must consist of decimal digits only. Fractional JSON numbers are
    truncated toward zero.

    Raises:
        ValueError: for non-numeric JSON types, malformed strings, negative or
            out-of-range values
    """
    if isinstance(value, str):
        if not _DIGITS.fullmatch(value):
            raise ValueError(f"invalid u128 string: {value!r}")
        number = int(value)
        if number > U128_MAX:
            raise ValueError(f"value exceeds u128 range: {value!r}")
        return number

    number = _to_decimal(value)
    if number < 0:
        raise ValueError(f"negative not allowed: {value!r}")
    if number > U128_MAX:
        raise ValueError(f"value exceeds u128 range: {value!r}")
    return int(number)


def decode_f64(value: Any) -> float:
    """Decode a JSON number or numeral string into a finite float.

    Raises:
        ValueError: for non-numeric JSON types, NaN/infinity or values that
            overflow a double
    """
    number = _to_decimal(value)
    result = float(number)
    if math.isinf(result):
        raise ValueError(f"value out of range for f64: {value!r}")
    return result


def split_comma_ints(value: Any) -> Any:
    """Accept the wire form "1,2,3" for list-of-int fields."""
    if isinstance(value, str):
        return [int(part) for part in value.split(",") if part.strip()]
    return value


def join_comma_ints(values: list[int]) -> str:
    return ",".join(str(v) for v in values)


U128 = Annotated[int, BeforeValidator(decode_u128)]
F64 = Annotated[float, BeforeValidator(decode_f64)]

# Serialized as a single comma-joined value, in query strings and JSON bodies
CommaSeparatedInts = Annotated[
    list[int],
    BeforeValidator(split_comma_ints),
    PlainSerializer(join_comma_ints, return_type=str),
]


def plain_json(value: Any) -> Any:
    """Replace the Decimal values of a decoded JSON tree with floats."""
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, dict):
        return {key: plain_json(item) for key, item in value.items()}
    if isinstance(value, list):
        return [plain_json(item) for item in value]
    return value


# Untyped payload with plain JSON values only
JsonData = Annotated[Any, AfterValidator(plain_json)]
