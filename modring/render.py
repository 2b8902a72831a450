"""
render.py

Pygame drawing of a session Frame.

Coordinate system:
- "world" is the diagram plane, origin at the centre, y pointing up.
- Pygame screen has y pointing down.
So the conversion flips the sign in y.
"""

import math

import pygame

from modring.config import (
    CYCLE_ARROW,
    MARKER_LABEL,
    MARKER_SIZE,
    MARKER_STROKE,
    MAX_SCALE,
    REDUCTION_ARROW,
    RING_COLOR,
    TEXT,
)
from modring.configuration import Mode
from modring.session import ArrowIntent, Frame, MarkerIntent, RingIntent

# ============================================================
# UNICODE-SAFE TEXT RENDERING
# ============================================================

# If a font doesn't cover a character, pygame draws little squares ("tofu").
# Fallback: replace the math symbols with plain ASCII.

def _pick_font_path(preferred_names, bold=False):
    for name in preferred_names:
        path = pygame.font.match_font(name, bold=bold)
        if path:
            return path
    return None


def load_ui_font(size, bold=False):
    """
    Load a font with good Unicode coverage for math-ish symbols.
    Returns (font_obj, unicode_ok_flag).
    """
    preferred = [
        "Segoe UI Symbol", "Segoe UI",
        "DejaVu Sans", "Noto Sans", "Liberation Sans",
        "Arial Unicode MS", "Arial",
    ]
    path = _pick_font_path(preferred, bold=bold)

    unicode_ok = False
    if path:
        low = path.lower()
        unicode_ok = any(k in low for k in ["segoe", "dejavu", "noto", "arialuni", "symbol", "liberation"])
        try:
            return pygame.font.Font(path, size), unicode_ok
        except (OSError, pygame.error):
            pass

    return pygame.font.SysFont(None, size, bold=bold), False


UNICODE_REPLACEMENTS = {
    "→": "->",
    "←": "<-",
    "↑": "up",
    "↓": "down",
    "≡": "==",
    "≠": "!=",
    "≤": "<=",
    "≥": ">=",
    "·": "*",
    "•": "-",
    "–": "-",
}


def sanitize_unicode(text: str) -> str:
    """Replace math Unicode with ASCII so it never renders as tofu."""
    for k, v in UNICODE_REPLACEMENTS.items():
        text = text.replace(k, v)
    return text


def blit_text_safe(surf, font, text, pos, color=TEXT, unicode_ok=True, center=False):
    if not unicode_ok:
        text = sanitize_unicode(text)
    img = font.render(text, True, color)
    if center:
        pos = img.get_rect(center=pos).topleft
    surf.blit(img, pos)

# ============================================================
# GEOMETRY HELPERS
# ============================================================

def world_to_screen(rect, world_pt, world_scale):
    """Convert (x,y) world coords to screen pixel coords inside a panel."""
    x, y = world_pt
    return (int(rect.centerx + x * world_scale),
            int(rect.centery - y * world_scale))


def fit_scale(rect, outer_radius, max_scale=MAX_SCALE):
    """Pixels per world unit so the outer ring and its markers fit in rect."""
    extent = outer_radius + MARKER_SIZE
    if extent <= 0:
        return max_scale
    half = min(rect.width, rect.height) / 2.0
    return max(0.05, min(max_scale, half / extent))


def arrow_head(tip, tail, head_len=12, head_w=7):
    """Triangle (tip, left, right) for an arrow pointing from tail to tip."""
    bx, by = tip
    dx, dy = bx - tail[0], by - tail[1]
    L = math.hypot(dx, dy)
    if L < 1e-6:
        return None
    ux, uy = dx / L, dy / L
    px, py = -uy, ux
    left = (bx - head_len*ux + head_w*px, by - head_len*uy + head_w*py)
    right = (bx - head_len*ux - head_w*px, by - head_len*uy - head_w*py)
    return [tip, left, right]


def draw_arrow(surf, a, b, color, width=3, head_len=12, head_w=7):
    """Draw an arrow between two screen points."""
    pygame.draw.line(surf, color, a, b, width)
    head = arrow_head(b, a, head_len, head_w)
    if head is not None:
        pygame.draw.polygon(surf, color, head)

# ============================================================
# RENDERER
# ============================================================

class Renderer:
    """Paints Frame intents in order (painter's algorithm)."""

    def __init__(self, label_font=None, unicode_ok=True):
        self.label_font = label_font
        self.unicode_ok = unicode_ok

    def draw(self, surf, rect, frame: Frame, world_scale):
        # Alpha needs its own layer: pygame.draw ignores alpha on the display surface.
        overlay = pygame.Surface(surf.get_size(), pygame.SRCALPHA)

        for intent in frame.intents:
            if isinstance(intent, RingIntent):
                self._ring(overlay, rect, intent, world_scale)
            elif isinstance(intent, MarkerIntent):
                self._marker(overlay, rect, intent, world_scale)
            elif isinstance(intent, ArrowIntent):
                self._arrow(surf, overlay, rect, intent, world_scale)

        surf.blit(overlay, (0, 0))

    def _ring(self, layer, rect, ring, world_scale):
        if ring.opacity <= 0.0:
            return
        alpha = int(round(255 * ring.opacity))
        center = world_to_screen(rect, (0.0, 0.0), world_scale)
        radius = max(1, int(ring.radius * world_scale))
        pygame.draw.circle(layer, (*RING_COLOR, alpha), center, radius, 2)

    def _marker(self, layer, rect, marker, world_scale):
        center = world_to_screen(rect, (marker.x, marker.y), world_scale)
        radius = max(2, int(MARKER_SIZE / 2 * world_scale))
        pygame.draw.circle(layer, (255, 255, 255, 255), center, radius)
        pygame.draw.circle(layer, (*MARKER_STROKE, 255), center, radius, 2)
        if self.label_font is not None:
            blit_text_safe(layer, self.label_font, str(marker.label), center,
                           MARKER_LABEL, unicode_ok=self.unicode_ok, center=True)

    def _arrow(self, surf, layer, rect, arrow, world_scale):
        a = world_to_screen(rect, arrow.start, world_scale)
        b = world_to_screen(rect, arrow.end, world_scale)
        if arrow.mode is Mode.CYCLE:
            draw_arrow(layer, a, b, CYCLE_ARROW, width=4, head_len=14, head_w=6)
            return
        # pygame.draw writes RGBA without blending, so the translucent arrow
        # gets its own layer and is blended onto the markers by blit.
        fx = pygame.Surface(surf.get_size(), pygame.SRCALPHA)
        draw_arrow(fx, a, b, REDUCTION_ARROW, width=8, head_len=22, head_w=14)
        layer.blit(fx, (0, 0))
