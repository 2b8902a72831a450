"""
panel.py

Sidebar controls: two sliders (natural, modulus), a Reduction/Cycle radio
pair and an Apply button.

The panel only ever edits its PendingConfiguration. Nothing on screen
changes until Apply (or ENTER) hands that to the session.
"""

import pygame

from modring.config import (
    ACCENT,
    ERROR_TEXT,
    MODULUS_MAX,
    NATURAL_MAX,
    PANEL_BG,
    PANEL_BORDER,
    TEXT,
    TEXT_DIM,
)
from modring.configuration import Mode, PendingConfiguration
from modring.render import blit_text_safe


def clamp(v, a, b):
    return max(a, min(b, v))


def slider_value(rel, vmin, vmax):
    """Integer slider value for a relative position rel in [0, 1]."""
    return int(round(clamp(vmin + rel * (vmax - vmin), vmin, vmax)))


class ControlPanel:
    ROW_H = 30
    GAP = 8
    PAD = 16

    def __init__(self, pending: PendingConfiguration, font=None, small=None, unicode_ok=True):
        self.pending = pending
        self.font = font
        self.small = small
        self.unicode_ok = unicode_ok
        self.error = None
        self._dragging = None
        self.rects = {}

    # -------------------------
    # LAYOUT
    # -------------------------

    def layout_controls(self, rect):
        """Compute control rectangles inside the sidebar rect."""
        x = rect.x + self.PAD
        w = rect.width - 2*self.PAD
        y = rect.y + 48

        rects = {}
        rects["natural"] = pygame.Rect(x, y, w, self.ROW_H)
        y += self.ROW_H + self.GAP
        rects["modulus"] = pygame.Rect(x, y, w, self.ROW_H)
        y += self.ROW_H + 2*self.GAP

        half = (w - self.GAP) // 2
        rects["reduction"] = pygame.Rect(x, y, half, self.ROW_H)
        rects["cycle"] = pygame.Rect(x + half + self.GAP, y, half, self.ROW_H)
        y += self.ROW_H + 2*self.GAP

        rects["apply"] = pygame.Rect(x, y, w, self.ROW_H + 6)
        self.rects = rects
        return rects

    # -------------------------
    # EVENTS
    # -------------------------

    def _set_slider(self, name, pos):
        r = self.rects[name]
        rel = (pos[0] - r.x) / max(1, r.w)
        if name == "natural":
            self.pending.natural = slider_value(rel, 0, NATURAL_MAX)
        else:
            self.pending.modulus = slider_value(rel, 1, MODULUS_MAX)

    def handle_click(self, pos):
        """Route a mouse press. Returns True if Apply was pressed."""
        for name, r in self.rects.items():
            if not r.collidepoint(pos[0], pos[1]):
                continue
            if name in ("natural", "modulus"):
                self._dragging = name
                self._set_slider(name, pos)
            elif name == "reduction":
                self.pending.mode = Mode.REDUCTION
            elif name == "cycle":
                self.pending.mode = Mode.CYCLE
            elif name == "apply":
                return True
            break
        return False

    def handle_drag(self, pos):
        if self._dragging is not None:
            self._set_slider(self._dragging, pos)

    def handle_release(self):
        self._dragging = None

    def nudge(self, name, delta):
        """Keyboard step for a slider."""
        if name == "natural":
            self.pending.natural = clamp(self.pending.natural + delta, 0, NATURAL_MAX)
        else:
            self.pending.modulus = clamp(self.pending.modulus + delta, 1, MODULUS_MAX)

    # -------------------------
    # DRAW
    # -------------------------

    def _text(self, surf, font, text, pos, color=TEXT, center=False):
        blit_text_safe(surf, font, text, pos, color, unicode_ok=self.unicode_ok, center=center)

    def _slider(self, surf, name, label, value, vmin, vmax):
        r = self.rects[name]
        pygame.draw.rect(surf, (50, 50, 58), r, border_radius=10)
        t = (value - vmin) / max(1, vmax - vmin)
        bar = pygame.Rect(r.x, r.y, max(r.h, int(r.w * t)), r.h)
        pygame.draw.rect(surf, ACCENT, bar, border_radius=10)
        self._text(surf, self.small, f"{label}: {value}", (r.x + 10, r.y + 7))

    def _toggle(self, surf, name, label, on):
        r = self.rects[name]
        pygame.draw.rect(surf, ACCENT if on else PANEL_BG, r, border_radius=12)
        pygame.draw.rect(surf, PANEL_BORDER, r, 2, border_radius=12)
        self._text(surf, self.small, label, r.center, (0, 0, 0) if on else TEXT, center=True)

    def draw(self, surf, rect, active=None, frame=None, total=0):
        pygame.draw.rect(surf, PANEL_BG, rect, border_radius=14)
        pygame.draw.rect(surf, PANEL_BORDER, rect, 2, border_radius=14)
        self.layout_controls(rect)

        self._text(surf, self.font, "Modular arithmetic", (rect.x + self.PAD, rect.y + 12))

        p = self.pending
        self._slider(surf, "natural", "natural", p.natural, 0, NATURAL_MAX)
        self._slider(surf, "modulus", "modulus", p.modulus, 1, MODULUS_MAX)
        self._toggle(surf, "reduction", "Reduction", p.mode is Mode.REDUCTION)
        self._toggle(surf, "cycle", "Cycle", p.mode is Mode.CYCLE)

        r = self.rects["apply"]
        pygame.draw.rect(surf, (60, 160, 90), r, border_radius=12)
        self._text(surf, self.small, "Apply  (ENTER)", r.center, center=True)

        y = r.bottom + 24
        if active is not None:
            self._text(surf, self.font, active.describe(), (rect.x + self.PAD, y), ACCENT)
            y += 28
            if frame is not None and frame.reveal is not None:
                shown = frame.reveal.visible_point_count
                what = "points" if active.mode is Mode.REDUCTION else "arrows"
                self._text(surf, self.small, f"t = {frame.elapsed:5.1f} s   {what}: {shown}/{total}",
                           (rect.x + self.PAD, y), TEXT_DIM)
                y += 22

        if self.error:
            self._text(surf, self.small, self.error, (rect.x + self.PAD, y), ERROR_TEXT)
            y += 22

        help_lines = [
            "ENTER apply · SPACE/R replay",
            "arrows: ←/→ natural, ↑/↓ modulus",
            "F11 fullscreen · ESC quit",
        ]
        y = rect.bottom - 18*len(help_lines) - 12
        for line in help_lines:
            self._text(surf, self.small, line, (rect.x + self.PAD, y), TEXT_DIM)
            y += 18
