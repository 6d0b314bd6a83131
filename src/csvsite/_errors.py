"""csvsite error hierarchy.

All csvsite-specific errors inherit from SiteError for easy catching.
"""


class SiteError(Exception):
    """Base error for all csvsite operations."""


class ConfigError(SiteError):
    """Invalid or missing configuration."""


class ContentError(SiteError):
    """Error in content processing (loading, validation, routing)."""


class FrontMatterError(ContentError):
    """Front matter does not satisfy its collection schema."""


class MalformedIdentifier(ContentError):
    """Content identifier lacks the ``project/slug`` structure."""


class ContentFetchFailure(ContentError):
    """A content collection could not be fetched from the store."""


class ExportError(SiteError):
    """Error during static export."""
