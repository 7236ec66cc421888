"""BaseError: root of every error raised by inventory_db.

Subclasses name the attributes that identify the failure in ``context_attrs``
(``operation`` for store failures, ``field`` for rejected sort fields, and so
on). :meth:`BaseError.to_dict` folds those attributes into ``detail`` so a
logged or serialised error always carries them.
"""
from __future__ import annotations

import json
from typing import Any, ClassVar


class BaseError(Exception):
    """Root of the error hierarchy.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Extra serialisable context, merged with ``context_attrs``.
        cause: Driver or library exception that triggered this error.
    """

    default_code: ClassVar[str] = "base_error"
    context_attrs: ClassVar[tuple[str, ...]] = ()

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def context(self) -> dict[str, Any]:
        """``detail`` plus every ``context_attrs`` attribute that is set."""
        merged = dict(self.detail)
        for name in self.context_attrs:
            value = getattr(self, name, None)
            if value is not None:
                merged.setdefault(name, list(value) if isinstance(value, tuple) else value)
        return merged

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message, "detail": self.context()}
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


__all__ = ["BaseError"]
