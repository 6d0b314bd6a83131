"""csvsite — content routing and sitemap for the csvtoolkit.org site.

Loads the ``docs`` and ``blog`` content collections, derives public routes
from content identifiers, and serves a search-engine sitemap.

Quick start::

    import csvsite

    csvsite.serve("site/")          # Live server with /sitemap.xml
    csvsite.build("site/")          # Write assets and sitemap.xml to dist/
    print(csvsite.sitemap("site/")) # Render the sitemap once

"""

__version__ = "0.1.0"
__all__ = [
    "SiteConfig",
    "__version__",
    "build",
    "create_app",
    "derive_route",
    "serve",
    "sitemap",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import csvsite`` fast while providing a clean top-level API.
    """
    if name == "SiteConfig":
        from csvsite.config import SiteConfig

        return SiteConfig

    if name == "derive_route":
        from csvsite.content.routes import derive_route

        return derive_route

    if name == "build":
        from csvsite.app import build

        return build

    if name == "create_app":
        from csvsite.app import create_app

        return create_app

    if name == "serve":
        from csvsite.app import serve

        return serve

    if name == "sitemap":
        from csvsite.app import sitemap

        return sitemap

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
