"""
Pydantic models of the serialized result shape.

A result crosses process boundaries as one of two plain mappings::

    {"ok": true,  "value": <A>}
    {"ok": false, "error": <E>}

The models are strict and forbid extra keys, so a mapping whose tag disagrees
with its populated field never validates. The tag must be an actual ``bool``;
``1``, ``0`` or ``1.0`` are rejected. Payloads are typed ``Any`` and pass
through validation untouched.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict, TypeAdapter


def _require_bool(tag: Any) -> Any:
    # Literal[True] alone still matches 1 and 1.0.
    if type(tag) is not bool:
        raise ValueError(f"ok tag must be a bool, got {type(tag).__name__}")
    return tag


class OkState(BaseModel):
    """Serialized form of a successful result."""

    model_config = ConfigDict(strict=True, extra="forbid", frozen=True)

    ok: Annotated[Literal[True], BeforeValidator(_require_bool)]
    value: Any


class ErrState(BaseModel):
    """Serialized form of a failed result."""

    model_config = ConfigDict(strict=True, extra="forbid", frozen=True)

    ok: Annotated[Literal[False], BeforeValidator(_require_bool)]
    error: Any


ResultState = OkState | ErrState

ResultStateAdapter = TypeAdapter(ResultState)


__all__ = ["ErrState", "OkState", "ResultState", "ResultStateAdapter"]
