"""Per-package check outcome and the reason a package failed."""

from __future__ import annotations

import datetime as dt
import json
from enum import StrEnum
from typing import Any

from pydantic import BaseModel


class FailureKind(StrEnum):
    MISSING = "lints_workspace_missing"
    WRONG_VALUE = "lints_workspace_wrong_value"


def format_toml_value(value: Any) -> str:
    """Render a parsed TOML value back in TOML syntax (inline form)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        # JSON string escapes are a subset of TOML basic-string escapes.
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, (dt.datetime, dt.date, dt.time)):
        return value.isoformat()
    if isinstance(value, list):
        return "[" + ", ".join(format_toml_value(item) for item in value) + "]"
    if isinstance(value, dict):
        if not value:
            return "{}"
        pairs = ", ".join(
            f"{_format_key(key)} = {format_toml_value(item)}" for key, item in value.items()
        )
        return "{ " + pairs + " }"
    return str(value)


def _format_key(key: str) -> str:
    if key and all(ch.isalnum() or ch in "-_" for ch in key) and key.isascii():
        return key
    return json.dumps(key, ensure_ascii=False)


class FailureReason(BaseModel):
    """Why a package failed: the field is missing, or holds something other than ``true``."""

    kind: FailureKind
    found: Any = None

    model_config = {"frozen": True}

    @classmethod
    def missing(cls) -> FailureReason:
        return cls(kind=FailureKind.MISSING)

    @classmethod
    def wrong_value(cls, found: Any) -> FailureReason:
        return cls(kind=FailureKind.WRONG_VALUE, found=found)

    # ``1``, ``1.0`` and ``true`` compare equal in Python but are distinct TOML values.
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FailureReason):
            return NotImplemented
        return (
            self.kind is other.kind
            and type(self.found) is type(other.found)
            and self.found == other.found
        )

    def __hash__(self) -> int:
        return hash((self.kind, type(self.found)))

    def __str__(self) -> str:
        if self.kind is FailureKind.MISSING:
            return "No `lints.workspace` field found"
        return f"lints.workspace = {format_toml_value(self.found)}, expected `true`"


class ValidationOutcome(BaseModel):
    """Result of checking one package. ``reason`` is ``None`` when it passes."""

    package_id: str
    reason: FailureReason | None = None

    model_config = {"frozen": True}

    @property
    def passed(self) -> bool:
        return self.reason is None
