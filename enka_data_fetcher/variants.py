"""Discriminator strategies for unions the service tags in non-standard places.

enka.network never sends a literal type tag next to a polymorphic value.
Hoyo accounts are told apart by a numeric ``hoyo_type`` that maps several
values onto one variant, and equipment by ``flat.itemType``, one level below
the union itself. A ``VariantResolver`` reads the raw JSON tree, picks the
concrete type, and hands the *whole* value to that type's validator, so the
chosen model still rejects unknown fields.
"""

import json
from typing import Annotated, Any, Union

from pydantic import Discriminator, Tag, TypeAdapter

UNKNOWN_VARIANT = "unknown_variant"


def _lookup(raw: Any, path: tuple[str, ...]) -> Any:
    """Follow ``path`` through nested dicts, returning None when a step is missing."""
    value = raw
    for key in path:
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    return value


class VariantResolver:
    """Select the concrete type of a polymorphic JSON value.

    Args:
        name: Union name used in error messages, e.g. "Hoyo".
        path: Keys leading from the union's own object to the discriminator.
        variants: Accepted discriminator values mapped to concrete types.
            Several values may share one type.

    ``discriminate`` is the pydantic discriminator, so ``union()`` can
    embed the resolver in models, and ``resolve()`` decodes a raw value directly.
    """

    def __init__(self, name: str, path: tuple[str, ...], variants: dict[Any, type]):
        self.name = name
        self.path = tuple(path)
        self.variants = dict(variants)
        self._adapter: TypeAdapter | None = None

    def __repr__(self):
        return f"VariantResolver({self.name!r}, path={'.'.join(self.path)!r})"

    @property
    def types(self) -> list[type]:
        """Distinct concrete types, in registration order."""
        seen: list[type] = []
        for cls in self.variants.values():
            if cls not in seen:
                seen.append(cls)
        return seen

    @property
    def message(self) -> str:
        return f"unknown {self.name} variant"

    def tag_of(self, raw: Any) -> Any:
        """Return the discriminator value found in ``raw`` (None if absent)."""
        return _lookup(raw, self.path)

    def select(self, raw: Any) -> type | None:
        """Return the concrete type for ``raw``, or None for an unknown tag.

        Matching is exact: ``True`` never selects the variant registered
        for ``1`` and ``0.0`` never selects the one for ``0``.
        """
        tag = self.tag_of(raw)
        for expected, cls in self.variants.items():
            if type(tag) is type(expected) and tag == expected:
                return cls
        return None

    def discriminate(self, value: Any) -> str | None:
        # Raw JSON objects are dispatched on their tag. Already-built
        # instances (during serialization) are dispatched on their type.
        if isinstance(value, dict):
            cls = self.select(value)
            return cls.__name__ if cls is not None else None
        for cls in self.types:
            if isinstance(value, cls):
                return cls.__name__
        return None

    def union(self) -> Any:
        """Build the annotated union type to use as a model field type."""
        members = tuple(Annotated[cls, Tag(cls.__name__)] for cls in self.types)
        return Annotated[
            Union[members],
            Discriminator(
                self.discriminate,
                custom_error_type=UNKNOWN_VARIANT,
                custom_error_message=self.message,
            ),
        ]

    @property
    def adapter(self) -> TypeAdapter:
        if self._adapter is None:
            self._adapter = TypeAdapter(self.union())
        return self._adapter

    def resolve(self, raw: Any) -> Any:
        """Decode a raw JSON value (already parsed) into its concrete variant.

        The value is validated in JSON mode, so enum values and numeric map
        keys are read as they appear on the wire.

        Raises:
            pydantic.ValidationError: The tag is unknown (error type
                ``unknown_variant``) or the chosen variant rejects the value.
        """
        return self.adapter.validate_json(json.dumps(raw))
