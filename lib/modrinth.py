"""
Client for the Modrinth public API.

Provides the three upstream lookups needed to render a project badge:
- Project metadata (required; failure is reported as a ProjectLookup error)
- Latest version string (best-effort; failures degrade to '')
- Project icon as a data URL (best-effort; failures degrade to '')

No retries are attempted. Every request carries the configured user agent.
"""

import base64
import logging
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urljoin, urlparse

import requests

from lib.config import MODRINTH_API_URL, REQUEST_TIMEOUT, USER_AGENT

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectMetadata:
    """The subset of a Modrinth project that the badge needs."""
    slug: str
    title: str
    icon_url: str = ''
    description: str = ''
    downloads: int = 0

    @classmethod
    def from_json(cls, slug: str, data: dict) -> 'ProjectMetadata':
        """Build from a `project/{slug}` payload, filling defaults for absent fields."""
        downloads = data.get('downloads') or 0
        title = data.get('title')
        icon_url = data.get('icon_url')
        description = data.get('description')
        return cls(
            slug=slug,
            title=str(title) if title else slug,
            icon_url=icon_url if isinstance(icon_url, str) else '',
            description=description if isinstance(description, str) else '',
            downloads=max(0, int(downloads)),
        )


@dataclass(frozen=True)
class ProjectLookup:
    """
    Outcome of a project metadata fetch.

    Exactly one of `project` or `error` is set. `not_found` marks a
    non-success HTTP status, as opposed to a network or payload failure.
    """
    project: Optional[ProjectMetadata] = None
    error: Optional[str] = None
    not_found: bool = False

    @property
    def ok(self) -> bool:
        return self.project is not None


def mime_type_for(url: str) -> str:
    """Guess an icon's MIME type from its URL extension (PNG unless JPEG)."""
    path = urlparse(url).path.lower()
    if path.endswith('.jpg') or path.endswith('.jpeg'):
        return 'image/jpeg'
    return 'image/png'


class ModrinthClient:
    """Thin synchronous wrapper around a requests.Session."""

    def __init__(
        self,
        base_url: str = MODRINTH_API_URL,
        user_agent: str = USER_AGENT,
        timeout: float = REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers['User-Agent'] = user_agent

    def _url(self, path: str) -> str:
        return urljoin(self.base_url, path)

    def fetch_project(self, slug: str) -> ProjectLookup:
        """
        Fetch project metadata from `project/{slug}`.

        Args:
            slug: Project slug or ID, used verbatim as a path segment

        Returns:
            ProjectLookup with either the parsed metadata or an error message
        """
        try:
            response = self.session.get(self._url(f"project/{slug}"), timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning(f"Project request for '{slug}' failed: {e}")
            return ProjectLookup(error=f"Failed to reach Modrinth: {e}")

        if not response.ok:
            logger.info(f"Project '{slug}' lookup returned HTTP {response.status_code}")
            return ProjectLookup(error=f"Project '{slug}' not found", not_found=True)

        try:
            data = response.json()
        except ValueError as e:
            return ProjectLookup(error=f"Invalid project data for '{slug}': {e}")

        if not isinstance(data, dict):
            return ProjectLookup(error=f"Invalid project data for '{slug}'")

        try:
            return ProjectLookup(project=ProjectMetadata.from_json(slug, data))
        except (TypeError, ValueError, OverflowError) as e:
            return ProjectLookup(error=f"Invalid project data for '{slug}': {e}")

    def fetch_latest_version(self, slug: str) -> str:
        """
        Fetch the newest version string from `project/{slug}/version`.

        Modrinth lists versions newest first. Returns '' when the project has
        no versions or the lookup fails for any reason.
        """
        try:
            response = self.session.get(
                self._url(f"project/{slug}/version"), timeout=self.timeout
            )
            if not response.ok:
                logger.warning(f"Version lookup for '{slug}' returned HTTP {response.status_code}")
                return ''
            versions = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"Version lookup for '{slug}' failed: {e}")
            return ''

        if not isinstance(versions, list) or not versions:
            return ''

        first = versions[0]
        if not isinstance(first, dict):
            return ''
        version = first.get('version_number')
        if not isinstance(version, str):
            return ''
        return version

    def fetch_icon_data_url(self, icon_url: str) -> str:
        """
        Download an icon and encode it as a base64 data URL.

        Returns '' if the URL is empty or the download fails.
        """
        if not icon_url:
            return ''

        try:
            response = self.session.get(icon_url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.warning(f"Icon download from {icon_url} failed: {e}")
            return ''

        encoded = base64.b64encode(response.content).decode('ascii')
        return f"data:{mime_type_for(icon_url)};base64,{encoded}"
