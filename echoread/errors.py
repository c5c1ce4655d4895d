"""Field-level shape for rejected writes."""

from collections.abc import Iterable
from typing import Any

_LOCATIONS = {"body", "query", "path"}


def _reason(error_type: str) -> str:
    if error_type == "missing":
        return "missing"
    if error_type.endswith("_type") or "_parsing" in error_type:
        return "invalid_type"
    return "constraint_violated"


def field_errors(errors: Iterable[dict[str, Any]]) -> list[dict[str, str]]:
    """Flatten pydantic errors to ``{field, reason, message}`` records.

    ``reason`` is one of ``missing``, ``invalid_type`` or ``constraint_violated``.
    Model-level validators report an empty field.
    """
    out = []
    for err in errors:
        loc = list(err.get("loc", ()))
        if loc and loc[0] in _LOCATIONS:
            loc = loc[1:]
        out.append(
            {
                "field": ".".join(str(part) for part in loc),
                "reason": _reason(err.get("type", "")),
                "message": err.get("msg", ""),
            }
        )
    return out
