"""
SVG badge generator for Modrinth projects.

Renders a card-style badge: project icon on the left, followed by three
colored bands for the project name, latest version and download count.
"""

from dataclasses import dataclass
from xml.sax.saxutils import escape, quoteattr

from lib.config import (
    BAND_OPACITY,
    BORDER,
    CHAR_WIDTH,
    COLORS,
    CORNER_RADIUS,
    DOWNLOADS_EXTRA_WIDTH,
    FONT_SIZE,
    ICON_PADDING,
    ICON_SIZE,
)

DOWNLOADS_ARROW = '↓'


def format_number(num):
    """
    Format a download count compactly.

    Args:
        num: Non-negative count

    Returns:
        str: e.g. '999', '1.0K', '1.5M', '2.3B'
    """
    if num >= 1_000_000_000:
        return f"{num / 1_000_000_000:.1f}B"
    if num >= 1_000_000:
        return f"{num / 1_000_000:.1f}M"
    if num >= 1_000:
        return f"{num / 1_000:.1f}K"
    return str(int(num))


@dataclass(frozen=True)
class BadgeLayout:
    """Pixel geometry of a badge."""
    name_width: int
    version_width: int
    downloads_width: int
    icon_size: int = ICON_SIZE
    icon_padding: int = ICON_PADDING

    @property
    def name_x(self) -> int:
        return self.icon_size + self.icon_padding

    @property
    def version_x(self) -> int:
        return self.name_x + self.name_width

    @property
    def downloads_x(self) -> int:
        return self.version_x + self.version_width

    @property
    def total_width(self) -> int:
        return (self.icon_size + self.icon_padding + self.name_width
                + self.version_width + self.downloads_width)

    @property
    def total_height(self) -> int:
        return self.icon_size + BORDER

    @property
    def text_y(self) -> int:
        return self.total_height // 2 + 4


def compute_layout(name, version, downloads_text):
    """
    Compute band widths from text lengths.

    Uses a fixed per-character width rather than real font metrics, so
    proportional fonts will not fill the bands exactly.
    """
    return BadgeLayout(
        name_width=len(name) * CHAR_WIDTH,
        version_width=len(version) * CHAR_WIDTH,
        downloads_width=len(downloads_text) * CHAR_WIDTH + DOWNLOADS_EXTRA_WIDTH,
    )


def generate_badge(name, version, downloads, icon_data_url=''):
    """
    Generate an SVG badge for a project.

    Args:
        name: Project title
        version: Latest version string, may be empty
        downloads: Total download count
        icon_data_url: Inline data URL for the icon, or '' for no icon

    Returns:
        str: Self-contained SVG document.
    """
    downloads_text = format_number(downloads)
    layout = compute_layout(name, version, downloads_text)
    width = layout.total_width
    height = layout.total_height

    lines = [
        f'<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" width="{width}" height="{height}">',
        f'  <rect width="{width}" height="{height}" fill="{COLORS["background"]}" rx="{CORNER_RADIUS}"/>',
    ]

    if icon_data_url:
        size = layout.icon_size
        lines += [
            '  <clipPath id="iconClip">',
            f'    <rect x="2" y="2" width="{size}" height="{size}" rx="{CORNER_RADIUS}"/>',
            '  </clipPath>',
            f'  <image x="2" y="2" width="{size}" height="{size}" xlink:href={quoteattr(icon_data_url)} clip-path="url(#iconClip)"/>',
        ]

    lines += [
        f'  <rect x="{layout.name_x}" width="{layout.name_width}" height="{height}" fill="{COLORS["surface"]}"/>',
        f'  <rect x="{layout.version_x}" width="{layout.version_width}" height="{height}" fill="{COLORS["mauve"]}" fill-opacity="{BAND_OPACITY}"/>',
        f'  <rect x="{layout.downloads_x}" width="{layout.downloads_width}" height="{height}" fill="{COLORS["green"]}" fill-opacity="{BAND_OPACITY}"/>',
        f'  <g fill="{COLORS["text"]}" text-anchor="middle" font-size="{FONT_SIZE}">',
        f'    <text x="{layout.name_x + layout.name_width // 2}" y="{layout.text_y}" font-weight="600">{escape(name)}</text>',
        f'    <text x="{layout.version_x + layout.version_width // 2}" y="{layout.text_y}" fill="{COLORS["mauve"]}">v{escape(version)}</text>',
        f'    <text x="{layout.downloads_x + layout.downloads_width // 2}" y="{layout.text_y}" fill="{COLORS["green"]}" font-size="{FONT_SIZE}">{downloads_text}{DOWNLOADS_ARROW}</text>',
        '  </g>',
        '</svg>',
    ]

    return '\n'.join(lines) + '\n'
