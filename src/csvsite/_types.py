"""Shared type definitions for csvsite."""

from typing import Literal

# Mode of operation
type SiteMode = Literal["serve", "build"]

# Name of a content collection
type CollectionName = Literal["docs", "blog"]

# Path-like content identifier relative to its collection (e.g., "acme/overview.md")
type ContentID = str

# Route URL path (e.g., "", "/projects", "/docs/acme")
type RoutePath = str

# Sitemap protocol <changefreq> values
type ChangeFrequency = Literal[
    "always", "hourly", "daily", "weekly", "monthly", "yearly", "never"
]
