"""Per-frame evolution and click impulses of BlobAnimationState."""
from __future__ import annotations

import math

from idle_blob.config import BlobAnimationConfig
from idle_blob.state import BlobAnimationState
from idle_frame.types import RandomSource


def create_animation_state(
    config: BlobAnimationConfig,
    rng: RandomSource | None = None,
    size: float = 0.0,
) -> BlobAnimationState:
    """Fresh state for a newly mounted blob. Noise starts mildly uneven when ``rng`` is given."""
    if rng is None:
        noise = [0.0] * config.lobes
    else:
        noise = [rng.uniform(-0.5, 0.5) for _ in range(config.lobes)]
    return BlobAnimationState(noise_samples=noise, visual_size=size)


def _decay(value: float, rate: float, dt: float, epsilon: float) -> float:
    value *= math.exp(-rate * dt)
    if value < epsilon:
        return 0.0
    return value


def _prune_clicks(state: BlobAnimationState, now_ms: float, config: BlobAnimationConfig) -> None:
    cutoff = now_ms - config.click_window_ms
    recent = [t for t in state.recent_clicks if t > cutoff]
    if len(recent) > config.max_recent_clicks:
        recent = recent[-config.max_recent_clicks:]
    state.recent_clicks[:] = recent


def _walk_noise(
    samples: list[float], dt: float, config: BlobAnimationConfig, rng: RandomSource,
) -> None:
    for i, sample in enumerate(samples):
        sample += rng.uniform(-1.0, 1.0) * config.noise_speed * dt
        sample -= sample * min(config.noise_reversion * dt, 1.0)
        samples[i] = min(max(sample, -1.0), 1.0)


def update_animation(
    state: BlobAnimationState,
    dt: float,
    now_ms: float,
    config: BlobAnimationConfig,
    rng: RandomSource,
) -> None:
    """Advance every channel by ``dt`` seconds, clicked or not."""
    dt = max(dt, 0.0)

    state.breathing_phase += config.breathing_rate * dt

    state.click_boost = _decay(state.click_boost, config.boost_decay, dt, config.epsilon)
    state.click_heat = _decay(state.click_heat, config.heat_decay, dt, config.epsilon)
    state.ripple_intensity = _decay(
        state.ripple_intensity, config.ripple_decay, dt, config.epsilon,
    )
    if state.ripple_intensity > 0.0:
        state.ripple_phase += config.ripple_speed * dt
    else:
        state.ripple_phase = 0.0

    if state.pressed:
        state.pressure += (1.0 - state.pressure) * (1.0 - math.exp(-config.pressure_rise * dt))
    else:
        state.pressure = _decay(state.pressure, config.pressure_relax, dt, config.epsilon)

    if len(state.noise_samples) != config.lobes:
        state.noise_samples[:] = (state.noise_samples + [0.0] * config.lobes)[:config.lobes]
    _walk_noise(state.noise_samples, dt, config, rng)

    _prune_clicks(state, now_ms, config)


def apply_click(state: BlobAnimationState, now_ms: float, config: BlobAnimationConfig) -> None:
    """Impulse boost, heat and ripple to their peaks and record the click."""
    state.click_boost = config.click_boost_peak
    state.click_heat = config.click_heat_peak
    state.ripple_phase = 0.0
    state.ripple_intensity = config.ripple_peak
    state.last_click_ms = now_ms
    state.recent_clicks.append(now_ms)
    _prune_clicks(state, now_ms, config)


def press(state: BlobAnimationState) -> None:
    state.pressed = True


def release(state: BlobAnimationState) -> None:
    state.pressed = False


def approach_size(state: BlobAnimationState, target: float, config: BlobAnimationConfig) -> float:
    """Close a fixed fraction of the gap to ``target``. Frame-rate dependent."""
    state.visual_size += (target - state.visual_size) * config.size_smoothing
    return state.visual_size


def spin(state: BlobAnimationState, config: BlobAnimationConfig) -> float:
    state.rotation_deg = (state.rotation_deg + config.rotation_step_deg) % 360.0
    return state.rotation_deg
