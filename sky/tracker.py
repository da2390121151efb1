"""
PhaseTracker — "current" sun and moon phase for one consumer.

The engine functions are pure; whoever wants a running view of the latest
phase (a HUD label, a lighting controller deciding when to swap skyboxes)
owns a tracker and feeds it snapshots explicitly.

Not synchronised: use one tracker per thread, or lock around update().
"""

from __future__ import annotations
import logging
from typing import Optional

from atmosphere import SunPhase

from .bodies import SkySnapshot
from .moon_phase import MoonPhase

logger = logging.getLogger(__name__)


class PhaseTracker:
    """
    Remembers the last sun/moon phase it was given.

        tracker = PhaseTracker()
        if tracker.update(observe_sky(now, observer)):
            hud.set_text(tracker.sun_label)
    """

    def __init__(self):
        self._sun_phase:  Optional[SunPhase]  = None
        self._moon_phase: Optional[MoonPhase] = None

    # ── Properties ─────────────────────────────────────────────────────────

    @property
    def sun_phase(self) -> Optional[SunPhase]:
        return self._sun_phase

    @property
    def moon_phase(self) -> Optional[MoonPhase]:
        return self._moon_phase

    @property
    def sun_label(self) -> str:
        return self._sun_phase.label if self._sun_phase is not None else ""

    @property
    def moon_label(self) -> str:
        return self._moon_phase.label if self._moon_phase is not None else ""

    # ── Update ─────────────────────────────────────────────────────────────

    def update(self, snapshot: SkySnapshot) -> bool:
        """Record the phases of snapshot. True when either phase changed."""
        return self.record(snapshot.sun.phase, snapshot.moon.phase)

    def record(self, sun_phase: Optional[SunPhase] = None,
               moon_phase: Optional[MoonPhase] = None) -> bool:
        """Record phases classified elsewhere; None leaves that slot unchanged."""
        changed = False
        if sun_phase is not None and sun_phase is not self._sun_phase:
            logger.info("sun phase %s -> %s", self.sun_label or "-", sun_phase.label)
            self._sun_phase = sun_phase
            changed = True
        if moon_phase is not None and moon_phase is not self._moon_phase:
            logger.info("moon phase %s -> %s", self.moon_label or "-", moon_phase.label)
            self._moon_phase = moon_phase
            changed = True
        return changed

    def reset(self) -> None:
        self._sun_phase = None
        self._moon_phase = None

    def __repr__(self) -> str:
        return f"PhaseTracker(sun={self.sun_label or None!r}, moon={self.moon_label or None!r})"
