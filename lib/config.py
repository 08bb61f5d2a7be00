"""
Centralized configuration for the Modrinth badge service.

This module contains all configurable constants used throughout the codebase,
organized into logical categories. Import from here instead of hardcoding values.
Values that differ between deployments can be overridden via environment variables.
"""

import os

# =============================================================================
# UPSTREAM REGISTRY
# =============================================================================

# Base URL of the Modrinth public API (trailing slash required for urljoin)
MODRINTH_API_URL = os.getenv('MODRINTH_API_URL', 'https://api.modrinth.com/v2/')

# Modrinth asks every client to identify itself
USER_AGENT = os.getenv('MODRINTH_USER_AGENT', 'LargumaDev/1.0 (contact@larguma.com)')

# Timeout for each outbound request
REQUEST_TIMEOUT = float(os.getenv('MODRINTH_TIMEOUT', '10'))  # seconds


# =============================================================================
# CACHING
# =============================================================================

CACHE_KEY_PREFIX = 'modrinth_badge_'

# Rendered badges live for 7 days, server side and in the browser
BADGE_CACHE_TTL = int(os.getenv('BADGE_CACHE_TTL', str(7 * 24 * 60 * 60)))  # seconds
# Unbounded unless set; TTL is the only expiry policy by default
BADGE_CACHE_MAXSIZE = float(os.getenv('BADGE_CACHE_MAXSIZE', 'inf'))

CACHE_CONTROL_HEADER = f'public, max-age={BADGE_CACHE_TTL}'


# =============================================================================
# BADGE LAYOUT
# =============================================================================

# Approximate glyph width at font size 20 (monospace heuristic, no measurement)
CHAR_WIDTH = 14
ICON_SIZE = 100
ICON_PADDING = 4
BORDER = 4
DOWNLOADS_EXTRA_WIDTH = 30  # room for the arrow glyph
FONT_SIZE = 20
CORNER_RADIUS = 10


# =============================================================================
# BADGE PALETTE (Catppuccin Mocha)
# =============================================================================

COLORS = {
    'background': '#11111b',
    'surface': '#313244',
    'text': '#cdd6f4',
    'mauve': '#cba6f7',
    'green': '#a6e3a1',
}

BAND_OPACITY = 0.3
