"""Tolerances and defaults for brepkernel.

All values are plain module-level constants. Import them where needed,
e.g. ``from brepkernel.config import EPSILON``.  Redefine these at your
peril.

``DEFAULT_TOLERANCE`` may be overridden with the ``BREPKERNEL_TOLERANCE``
environment variable.
"""

import os

# general floating point comparison tolerance
EPSILON = 5e-6

# vertices closer than this are reported as likely duplicates
MIN_VERTEX_DISTANCE = 5e-7

# RGBA
DEFAULT_COLOR = (255, 0, 0, 255)


def _env_float(name, default):
    raw = os.environ.get(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc
    if value <= 0.0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


# maximum distance between a curve and its polyline approximation
DEFAULT_TOLERANCE = _env_float('BREPKERNEL_TOLERANCE', 0.001)


__all__ = [
    'EPSILON',
    'MIN_VERTEX_DISTANCE',
    'DEFAULT_COLOR',
    'DEFAULT_TOLERANCE',
]
