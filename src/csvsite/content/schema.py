"""Front matter schemas for the ``docs`` and ``blog`` collections.

Each collection declares its fields once.  The content store validates
front matter against the schema at load time; nothing downstream
re-validates.

Thread Safety:
    Schemas are frozen and shared module-level constants.

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from typing import Any, Literal

from csvsite._errors import ContentError, FrontMatterError

type FieldKind = Literal["str", "number", "date", "str_list"]


@dataclass(frozen=True, slots=True)
class Field:
    """A declared front matter field.

    Attributes:
        name: Front matter key.
        kind: Expected value kind.
        required: Whether the key must be present.

    """

    name: str
    kind: FieldKind
    required: bool = False


@dataclass(frozen=True, slots=True)
class CollectionSchema:
    """Field contract for one content collection."""

    name: str
    fields: tuple[Field, ...]

    def validate(self, front_matter: Mapping[str, Any], *, source: str = "") -> dict[str, Any]:
        """Check presence and type of every declared field.

        Undeclared keys pass through unchanged.  Returns a plain dict copy.

        Raises:
            FrontMatterError: On the first missing or mistyped field.

        """
        where = f"{source}: " if source else ""
        for fld in self.fields:
            value = front_matter.get(fld.name)
            if value is None:
                if fld.required:
                    msg = f"{where}{self.name} front matter requires {fld.name!r}"
                    raise FrontMatterError(msg)
                continue
            if not _matches(fld.kind, value):
                msg = (
                    f"{where}{self.name} field {fld.name!r} must be {fld.kind}, "
                    f"got {type(value).__name__}"
                )
                raise FrontMatterError(msg)
        return dict(front_matter)


def _matches(kind: FieldKind, value: object) -> bool:
    if kind == "str":
        return isinstance(value, str)
    if kind == "number":
        return isinstance(value, int | float) and not isinstance(value, bool)
    if kind == "date":
        # datetime is a date subclass; YAML yields either depending on the literal
        return isinstance(value, date)
    return isinstance(value, list) and all(isinstance(v, str) for v in value)


DOCS_SCHEMA = CollectionSchema(
    name="docs",
    fields=(
        Field("title", "str"),
        Field("description", "str"),
        Field("project", "str"),
        Field("order", "number"),
    ),
)

BLOG_SCHEMA = CollectionSchema(
    name="blog",
    fields=(
        Field("title", "str", required=True),
        Field("description", "str", required=True),
        Field("date", "date", required=True),
        Field("author", "str", required=True),
        Field("tags", "str_list"),
    ),
)

COLLECTIONS: dict[str, CollectionSchema] = {
    DOCS_SCHEMA.name: DOCS_SCHEMA,
    BLOG_SCHEMA.name: BLOG_SCHEMA,
}


def schema_for(collection: str) -> CollectionSchema:
    """Return the schema for a named collection.

    Raises:
        ContentError: If the collection is not one of ``docs`` or ``blog``.

    """
    try:
        return COLLECTIONS[collection]
    except KeyError:
        msg = f"Unknown content collection {collection!r} (expected one of {sorted(COLLECTIONS)})"
        raise ContentError(msg) from None

