"""Mutable per-blob animation record."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class BlobAnimationState:
    """Continuous animation channels of one blob.

    Owned by a single :class:`~idle_blob.blob.Blob`; nothing else writes it.
    """

    breathing_phase: float = 0.0
    click_boost: float = 0.0
    click_heat: float = 0.0
    pressure: float = 0.0
    pressed: bool = False
    noise_samples: list[float] = field(default_factory=list)
    last_click_ms: float | None = None
    recent_clicks: list[float] = field(default_factory=list)
    ripple_phase: float = 0.0
    ripple_intensity: float = 0.0
    visual_size: float = 0.0
    rotation_deg: float = 0.0
