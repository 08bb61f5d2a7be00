#!/usr/bin/env python3
"""
Modrinth Badge API - Web service rendering SVG badges for Modrinth projects.

Endpoints:
    GET /badge/{slug} - SVG badge with name, latest version and downloads
    GET /modrinth/badge/{slug} - Same badge, legacy path
    GET /health - Health check

Usage:
    gunicorn api.api:app --bind 0.0.0.0:8000
"""

import falcon
import logging
import os
import sys
from datetime import datetime
from pathlib import Path

# Path resolution - get absolute paths relative to project root
API_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = API_DIR.parent

# Add parent directory to path for lib imports
sys.path.insert(0, str(PROJECT_ROOT))
from lib.badge_cache import BadgeCache  # noqa: E402
from lib.badge_generator import BadgeGenerator, UpstreamError  # noqa: E402
from lib.config import CACHE_CONTROL_HEADER  # noqa: E402
from lib.modrinth import ModrinthClient  # noqa: E402

logger = logging.getLogger(__name__)


class BadgeResource:
    """API endpoint serving project badges."""

    def __init__(self, generator):
        self.generator = generator

    def on_get(self, req, resp, slug):
        """
        Handle GET request to /badge/{slug}

        Returns the SVG with a long browser cache lifetime, or a 500 with a
        plain-text 'Error: <message>' body if the project can't be rendered.
        """
        try:
            svg = self.generator.generate(slug)
        except UpstreamError as e:
            logger.warning(f"Badge for '{slug}' unavailable: {e}")
            self._error(resp, e)
            return
        except Exception as e:
            logger.exception(f"Unexpected error rendering badge for '{slug}'")
            self._error(resp, e)
            return

        resp.status = falcon.HTTP_200
        resp.content_type = 'image/svg+xml'
        resp.cache_control = [CACHE_CONTROL_HEADER]
        resp.text = svg

    @staticmethod
    def _error(resp, error):
        resp.status = falcon.HTTP_500
        resp.content_type = falcon.MEDIA_TEXT
        resp.text = f"Error: {error}"


class HealthResource:
    """Health check endpoint."""

    def on_get(self, req, resp):
        """Handle GET request to /health"""
        resp.status = falcon.HTTP_200
        resp.media = {
            'status': 'ok',
            'service': 'modrinth-badge-api',
            'timestamp': datetime.now().isoformat()
        }


def create_app(generator=None):
    """
    Build the Falcon app.

    Args:
        generator: BadgeGenerator to serve from. A new one with its own
            client and cache is created when omitted.
    """
    if generator is None:
        generator = BadgeGenerator(ModrinthClient(), BadgeCache())

    falcon_app = falcon.App()
    badge = BadgeResource(generator)
    falcon_app.add_route('/badge/{slug}', badge)
    falcon_app.add_route('/modrinth/badge/{slug}', badge)
    falcon_app.add_route('/health', HealthResource())
    return falcon_app


# Create Falcon app
app = create_app()


if __name__ == '__main__':
    # For local testing
    from wsgiref.simple_server import make_server
    logging.basicConfig(
        level=logging.INFO,
        format='%(levelname)s: %(message)s'
    )
    port = int(os.getenv('PORT', '8000'))
    with make_server('', port, app) as httpd:
        logger.info(f'Badge server listening on port {port}...')
        httpd.serve_forever()
