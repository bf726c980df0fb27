"""Decode response bodies into typed values."""

import json
import logging
from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter, ValidationError

from .errors import DecodeError, JsonParseError, StructuralDecodeError, UnknownVariantError
from .variants import UNKNOWN_VARIANT

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def type_name(target: Any) -> str:
    return getattr(target, "__name__", None) or repr(target)


def diagnostic_dump(body: bytes | str) -> str:
    """Render a body for logs: pretty-printed JSON, or the literal text if it isn't JSON."""
    text = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else body
    try:
        return json.dumps(json.loads(text), indent=2, ensure_ascii=False)
    except ValueError:
        return f"Invalid JSON response: {text}"


def _error_class(exc: ValidationError) -> type[DecodeError]:
    kinds = {err["type"] for err in exc.errors()}
    if "json_invalid" in kinds:
        return JsonParseError
    if UNKNOWN_VARIANT in kinds:
        return UnknownVariantError
    return StructuralDecodeError


def _summary(exc: ValidationError) -> str:
    first = exc.errors()[0]
    loc = ".".join(str(part) for part in first["loc"]) or "<root>"
    more = exc.error_count() - 1
    suffix = f" (+{more} more)" if more else ""
    return f"{loc}: {first['msg']}{suffix}"


def decode(body: bytes | str, target: Any) -> Any:
    """Decode a JSON body into ``target`` (a model class or any type pydantic accepts).

    On failure the body is logged as a diagnostic dump and the failure is
    raised as the matching ``DecodeError`` subclass, chained from the
    pydantic ``ValidationError``.
    """
    try:
        return _adapter(target).validate_json(body)
    except ValidationError as exc:
        name = type_name(target)
        logger.warning("Failed to decode %s from response:\n%s", name, diagnostic_dump(body))
        error_cls = _error_class(exc)
        raise error_cls(
            name,
            errors=exc.errors(include_url=False, include_context=False),
            detail=_summary(exc),
        ) from exc
