"""
Badge generation pipeline.

cache lookup -> project metadata -> icon -> latest version -> render -> cache store

Only the project metadata fetch can fail the request. Icon and version
lookups are best-effort and fall back to empty values.

Usage:
    generator = BadgeGenerator(ModrinthClient(), BadgeCache())
    svg = generator.generate('sodium')
"""

import logging

from lib.badge import generate_badge
from lib.badge_cache import BadgeCache
from lib.modrinth import ModrinthClient

logger = logging.getLogger(__name__)


class UpstreamError(Exception):
    """Raised when the project cannot be fetched from the registry."""
    def __init__(self, message: str, not_found: bool = False):
        super().__init__(message)
        self.not_found = not_found


class BadgeGenerator:
    """Renders project badges, caching results per slug."""

    def __init__(self, client: ModrinthClient, cache: BadgeCache):
        self.client = client
        self.cache = cache

    def generate(self, slug: str) -> str:
        """
        Return the SVG badge for a project.

        Args:
            slug: Modrinth project slug or ID

        Returns:
            str: SVG document, from cache when a fresh entry exists

        Raises:
            UpstreamError: The project lookup failed or returned a non-success status
        """
        cached = self.cache.get(slug)
        if cached is not None:
            logger.debug(f"Badge cache hit for '{slug}'")
            return cached

        logger.info(f"Badge cache miss for '{slug}', fetching from Modrinth")

        lookup = self.client.fetch_project(slug)
        if not lookup.ok:
            raise UpstreamError(lookup.error, not_found=lookup.not_found)
        project = lookup.project

        icon_data_url = self.client.fetch_icon_data_url(project.icon_url)
        version = self.client.fetch_latest_version(slug)

        svg = generate_badge(
            name=project.title,
            version=version,
            downloads=project.downloads,
            icon_data_url=icon_data_url,
        )

        self.cache.set(slug, svg)
        return svg
