"""Field-specific value annotations applied to parsed entries.

Each decorator takes ``(key, value)`` and returns either ``None`` (not its
field) or a patch of :class:`~klvscope.entries.Entry` attributes. The parser
applies :data:`DECORATORS` in order, so a later decorator overwrites the
``annotated_value`` of an earlier one.
"""
from __future__ import annotations

from typing import Any, Callable, Final, Mapping

from .directory import CURRENCY_FIELD_KEY, MCC_FIELD_KEY, lookup_currency, lookup_mcc
from .entries import MccDetail

Decoration = Mapping[str, Any]
Decorator = Callable[[str, str], Decoration | None]


def decorate_currency(key: str, value: str) -> Decoration | None:
    if key != CURRENCY_FIELD_KEY:
        return None

    currency = lookup_currency(value)
    if currency is None:
        # Unknown codes echo the raw value, not the padded one.
        return {"annotated_value": f"{value} (Unknown Currency Code)", "currency_detail": None}
    return {
        "annotated_value": f"{currency.flag_glyph} {currency.iso_code} - {currency.display_name}",
        "currency_detail": currency,
    }


def decorate_mcc(key: str, value: str) -> Decoration | None:
    if key != MCC_FIELD_KEY:
        return None

    code = value.rjust(4, "0")
    description = lookup_mcc(code)
    if description is None:
        return {"annotated_value": f"{code} (Unknown MCC)", "mcc_detail": None}
    return {
        "annotated_value": f"{code} - {description}",
        "mcc_detail": MccDetail(code=code, description=description),
    }


DECORATORS: Final[tuple[Decorator, ...]] = (decorate_currency, decorate_mcc)
