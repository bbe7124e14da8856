"""Frame timing statistics."""
from typing import Dict, Sequence


def compute_frame_stats(durations: Sequence[float]) -> Dict[str, float]:
    """Summarize per-frame render durations in seconds.

    `render_fps` is the rate rendering alone could sustain; it is 0.0 when
    every frame took no measurable time. Empty input gives an empty dict.
    """
    if not durations:
        return {}
    mean = sum(durations) / len(durations)
    return {
        "frames": len(durations),
        "min": min(durations),
        "max": max(durations),
        "mean": mean,
        "render_fps": 1.0 / mean if mean > 0 else 0.0,
    }

__all__ = ["compute_frame_stats"]
