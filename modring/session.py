"""
session.py

The visualization session: owns the active configuration and its layout,
and turns "seconds since the last commit" into an ordered list of drawing
intents.

Draw order matters (later intents paint over earlier ones):
rings first (outermost at the bottom), then markers, then arrows.
"""

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from modring.arrows import cycle_pairs, reduction_endpoints, shrink
from modring.configuration import ActiveConfiguration, Mode, PendingConfiguration
from modring.errors import EmptyArrowMatch
from modring.layout import Layout, layout
from modring.reveal import RevealState, reveal

logger = logging.getLogger(__name__)


class SessionState(Enum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"


# ============================================================
# DRAWING INTENTS
# ============================================================

@dataclass(frozen=True)
class RingIntent:
    radius: float
    opacity: float


@dataclass(frozen=True)
class MarkerIntent:
    x: float
    y: float
    label: int


@dataclass(frozen=True)
class ArrowIntent:
    start: Tuple[float, float]
    end: Tuple[float, float]
    mode: Mode
    # Labels of the points the arrow connects (before shrinking).
    source: int = 0
    target: int = 0


Intent = Union[RingIntent, MarkerIntent, ArrowIntent]


@dataclass(frozen=True)
class Frame:
    elapsed: float
    intents: Tuple[Intent, ...] = ()
    reveal: Optional[RevealState] = None

    @property
    def arrows(self):
        return [i for i in self.intents if isinstance(i, ArrowIntent)]

    @property
    def markers(self):
        return [i for i in self.intents if isinstance(i, MarkerIntent)]

    @property
    def rings(self):
        return [i for i in self.intents if isinstance(i, RingIntent)]


@dataclass(frozen=True)
class Snapshot:
    """What a commit publishes: always replaced as a whole."""
    config: ActiveConfiguration
    layout: Layout
    started_at: float


# ============================================================
# SESSION
# ============================================================

class Session:
    def __init__(self, clock=time.monotonic):
        self._clock = clock
        self._snapshot: Optional[Snapshot] = None

    @property
    def state(self):
        return SessionState.UNINITIALIZED if self._snapshot is None else SessionState.READY

    @property
    def config(self) -> Optional[ActiveConfiguration]:
        return self._snapshot.config if self._snapshot else None

    @property
    def layout(self) -> Optional[Layout]:
        return self._snapshot.layout if self._snapshot else None

    def commit(self, config: Union[ActiveConfiguration, PendingConfiguration]) -> ActiveConfiguration:
        """
        Make `config` the active configuration and restart the animation.

        Raises InvalidConfiguration and leaves the previous snapshot in place.
        """
        if isinstance(config, PendingConfiguration):
            config = config.freeze()
        new_layout = layout(config.natural, config.modulus, config.mode)
        self._snapshot = Snapshot(config, new_layout, self._clock())
        logger.info(
            f"Committed {config.describe()} [{config.mode.value}]: "
            f"{new_layout.total} points on {new_layout.ring_count} ring(s)"
        )
        return config

    def restart(self):
        """Replay the animation of the current configuration."""
        if self._snapshot is None:
            return
        s = self._snapshot
        self._snapshot = Snapshot(s.config, s.layout, self._clock())
        logger.debug("Animation restarted")

    def elapsed(self):
        if self._snapshot is None:
            return 0.0
        return self._clock() - self._snapshot.started_at

    def current_frame(self) -> Frame:
        return self.frame(self.elapsed())

    def frame(self, elapsed) -> Frame:
        """Drawing intents for `elapsed` seconds after the last commit."""
        snap = self._snapshot
        if snap is None:
            return Frame(elapsed)

        cfg, lay = snap.config, snap.layout
        state = reveal(elapsed, lay, cfg.mode)

        match cfg.mode:
            case Mode.CYCLE:
                intents = self._cycle_intents(cfg, lay, state)
            case _:
                intents = self._reduction_intents(cfg, lay, state)

        return Frame(elapsed, tuple(intents), state)

    # -------------------------
    # per mode
    # -------------------------

    def _markers(self, lay, count):
        return [MarkerIntent(p.x, p.y, p.label) for p in lay.points[:count]]

    def _reduction_intents(self, cfg, lay, state):
        intents = []
        # Largest ring first so it ends up at the bottom.
        for nr in reversed(range(lay.ring_count)):
            intents.append(RingIntent(lay.ring_radius(nr), state.ring_opacities[nr]))

        visible = lay.points[:state.visible_marker_count]
        intents += self._markers(lay, state.visible_marker_count)

        if state.arrow_visible:
            try:
                outer, inner = reduction_endpoints(visible, cfg.natural, cfg.modulus)
            except EmptyArrowMatch as e:
                logger.warning(f"Skipping reduction arrow: {e}")
            else:
                start, end = shrink(outer, inner)
                intents.append(ArrowIntent(start, end, Mode.REDUCTION, outer.label, inner.label))
        return intents

    def _cycle_intents(self, cfg, lay, state):
        intents = [RingIntent(lay.ring_radius(0), state.ring_opacities[0])]
        intents += self._markers(lay, state.visible_marker_count)
        for a, b in cycle_pairs(lay.points, cfg.natural, cfg.modulus, state.visible_arrow_count):
            start, end = shrink(a, b)
            intents.append(ArrowIntent(start, end, Mode.CYCLE, a.label, b.label))
        return intents
