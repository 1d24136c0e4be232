"""idle-blob - Click-reactive animation and amoeba silhouette of the central blob."""
from __future__ import annotations

from idle_blob.animation import (
    apply_click,
    approach_size,
    create_animation_state,
    press,
    release,
    spin,
    update_animation,
)
from idle_blob.appearance import (
    CPM_COLORS,
    BlobAppearance,
    blob_appearance,
    clicks_per_minute,
    cpm_color,
    heat_color,
)
from idle_blob.blob import Blob
from idle_blob.config import BlobAnimationConfig, BlobColors
from idle_blob.path import amoeba_contour, contour_radii, nominal_radius, svg_path
from idle_blob.state import BlobAnimationState
from idle_blob.systems import BLOB_ANIMATION_SIGNAL, make_blob_system

__all__ = [
    "BLOB_ANIMATION_SIGNAL",
    "CPM_COLORS",
    "Blob",
    "BlobAnimationConfig",
    "BlobAnimationState",
    "BlobAppearance",
    "BlobColors",
    "amoeba_contour",
    "apply_click",
    "approach_size",
    "blob_appearance",
    "clicks_per_minute",
    "contour_radii",
    "cpm_color",
    "create_animation_state",
    "heat_color",
    "make_blob_system",
    "nominal_radius",
    "press",
    "release",
    "spin",
    "svg_path",
    "update_animation",
]
