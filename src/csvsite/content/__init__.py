"""Content layer — collections, schemas, and routes.

Loads the ``docs`` and ``blog`` collections into typed records, derives
public routes from their identifiers, and exposes content-derived
endpoints as Chirp routes.
"""

from csvsite.content.routes import derive_route, split_identifier
from csvsite.content.schema import BLOG_SCHEMA, DOCS_SCHEMA, CollectionSchema
from csvsite.content.store import ContentRecord, ContentStore

__all__ = [
    "BLOG_SCHEMA",
    "DOCS_SCHEMA",
    "CollectionSchema",
    "ContentRecord",
    "ContentStore",
    "derive_route",
    "split_identifier",
]
