"""Conversion of Solr's human readable sizes (``"12.5 MB"``) into bytes."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from .errors import InvalidValueError, UnknownUnitError

# Binary shifts, so "1 KB" is 1024 bytes.
UNIT_SHIFTS: dict[str, int] = {"KB": 10, "MB": 20, "GB": 30}


def to_bytes(text: str) -> int:
    """Return the byte count described by ``text``.

    ``text`` must be ``"<number> <unit>"`` with a unit of exactly ``KB``,
    ``MB`` or ``GB``. Fractional byte counts are truncated toward zero, so
    ``"1.0000001 KB"`` yields ``1024``.

    Raises:
        UnknownUnitError: If the unit token is anything else.
        InvalidValueError: If the text is not a number followed by a unit.
    """
    parts = text.split()
    if len(parts) != 2:
        raise InvalidValueError(f"Expected '<number> <unit>', got {text!r}")
    number, unit = parts
    shift = UNIT_SHIFTS.get(unit)
    if shift is None:
        raise UnknownUnitError(f"Unknown unit {unit!r} in {text!r}")
    try:
        amount = Decimal(number)
    except InvalidOperation as exc:
        raise InvalidValueError(f"Invalid size {number!r} in {text!r}") from exc
    if not amount.is_finite():
        raise InvalidValueError(f"Invalid size {number!r} in {text!r}")
    return int(amount * (1 << shift))
