"""Route derivation — content identifiers to public URL paths.

A docs identifier is ``{project}/{slug}.md`` where the slug may itself
contain slashes.  The project's ``overview`` page is its landing page and
takes the bare project path.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from csvsite._errors import MalformedIdentifier

if TYPE_CHECKING:
    from csvsite._types import ContentID, RoutePath

DOCS_PREFIX = "/docs"
LANDING_SLUG = "overview"
_MARKDOWN_SUFFIX = ".md"


def split_identifier(identifier: ContentID) -> tuple[str, str]:
    """Split an identifier into ``(project, slug)``.

    The ``.md`` suffix is stripped from the slug; remaining slug segments
    stay slash-joined.

    Raises:
        MalformedIdentifier: If there is no ``/`` separator, or the project
            or slug is empty.

    """
    project, sep, slug_path = identifier.partition("/")
    if not sep:
        msg = f"Content identifier {identifier!r} has no project segment"
        raise MalformedIdentifier(msg)
    slug = slug_path.removesuffix(_MARKDOWN_SUFFIX)
    if not project or not slug:
        msg = f"Content identifier {identifier!r} is missing a project or slug"
        raise MalformedIdentifier(msg)
    return project, slug


def derive_route(identifier: ContentID) -> RoutePath:
    """Map a docs content identifier to its public path.

    Examples::

        derive_route("demo/overview.md")       # "/docs/demo"
        derive_route("demo/install.md")        # "/docs/demo/install"
        derive_route("acme/guides/setup.md")   # "/docs/acme/guides/setup"

    """
    project, slug = split_identifier(identifier)
    if slug == LANDING_SLUG:
        return f"{DOCS_PREFIX}/{project}"
    return f"{DOCS_PREFIX}/{project}/{slug}"
