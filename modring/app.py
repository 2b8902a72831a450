"""
app.py

Pygame window: a diagram panel on the left, the control sidebar on the right.

Controls:
- Mouse       : drag sliders, pick Reduction/Cycle, press Apply
- ENTER       : apply the staged configuration (restarts the animation)
- LEFT/RIGHT  : natural -/+ 1 (staged)
- UP/DOWN     : modulus +/- 1 (staged)
- SPACE, R    : replay the animation
- F11         : toggle fullscreen
- ESC         : quit
"""

import logging

import pygame

from modring.config import BACKGROUND, FPS, MARGIN, MIN_WINDOW_SIZE, SIDEBAR_WIDTH, WINDOW_SIZE
from modring.configuration import ActiveConfiguration, PendingConfiguration
from modring.errors import InvalidConfiguration
from modring.panel import ControlPanel
from modring.render import Renderer, fit_scale, load_ui_font
from modring.session import Session

logger = logging.getLogger(__name__)


def compute_layout(W, H):
    """Diagram and sidebar rectangles for a W x H window."""
    sidebar_w = min(SIDEBAR_WIDTH, max(260, W // 3))
    diagram = pygame.Rect(MARGIN, MARGIN, max(200, W - sidebar_w - 3*MARGIN), max(200, H - 2*MARGIN))
    side = pygame.Rect(diagram.right + MARGIN, MARGIN, sidebar_w, diagram.height)
    return diagram, side


def apply_pending(session: Session, panel: ControlPanel):
    """Commit the panel's staged values. On failure keep the current diagram."""
    try:
        session.commit(panel.pending)
    except InvalidConfiguration as e:
        logger.warning(f"Rejected configuration: {e}")
        panel.error = str(e)
        return False
    panel.error = None
    return True


def run(initial: ActiveConfiguration, window_size=WINDOW_SIZE):
    pygame.init()
    pygame.display.set_caption("Modular arithmetic rings")

    W, H = window_size
    windowed_size = (W, H)
    fullscreen = False
    screen = pygame.display.set_mode((W, H), pygame.RESIZABLE)
    clock = pygame.time.Clock()

    font, ok1 = load_ui_font(20, bold=True)
    small, ok2 = load_ui_font(15)
    label_font, ok3 = load_ui_font(13)
    unicode_ok = ok1 and ok2 and ok3

    session = Session()
    session.commit(initial)
    panel = ControlPanel(PendingConfiguration.from_active(initial), font, small, unicode_ok)
    renderer = Renderer(label_font, unicode_ok)

    running = True
    while running:
        clock.tick(FPS)
        diagram, side = compute_layout(W, H)
        panel.layout_controls(side)

        # -------------------------
        # EVENTS
        # -------------------------
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False

            elif e.type == pygame.VIDEORESIZE and not fullscreen:
                W, H = max(MIN_WINDOW_SIZE[0], e.w), max(MIN_WINDOW_SIZE[1], e.h)
                windowed_size = (W, H)
                screen = pygame.display.set_mode((W, H), pygame.RESIZABLE)

            elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                if panel.handle_click(e.pos):
                    apply_pending(session, panel)

            elif e.type == pygame.MOUSEMOTION and e.buttons[0]:
                panel.handle_drag(e.pos)

            elif e.type == pygame.MOUSEBUTTONUP and e.button == 1:
                panel.handle_release()

            elif e.type == pygame.KEYDOWN:
                if e.key == pygame.K_ESCAPE:
                    running = False

                elif e.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                    apply_pending(session, panel)

                elif e.key in (pygame.K_SPACE, pygame.K_r):
                    session.restart()

                elif e.key == pygame.K_LEFT:
                    panel.nudge("natural", -1)
                elif e.key == pygame.K_RIGHT:
                    panel.nudge("natural", +1)
                elif e.key == pygame.K_UP:
                    panel.nudge("modulus", +1)
                elif e.key == pygame.K_DOWN:
                    panel.nudge("modulus", -1)

                elif e.key == pygame.K_F11:
                    fullscreen = not fullscreen
                    if fullscreen:
                        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
                        W, H = screen.get_size()
                    else:
                        W, H = windowed_size
                        screen = pygame.display.set_mode((W, H), pygame.RESIZABLE)

        # -------------------------
        # DRAW
        # -------------------------
        diagram, side = compute_layout(W, H)
        frame = session.current_frame()
        lay = session.layout

        screen.fill(BACKGROUND)
        renderer.draw(screen, diagram, frame, fit_scale(diagram, lay.outer_radius))
        panel.draw(screen, side, session.config, frame, lay.total)

        pygame.display.flip()

    pygame.quit()
