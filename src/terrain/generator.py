"""
Procedural terrain generation.

Builds smooth height fields from several octaves of value noise. Each
octave doubles the lattice frequency; roughness decides how much the
finer octaves contribute.
"""

import logging
from typing import Optional

import numpy as np

logger = logging.getLogger(__name__)

MAX_ROUGHNESS = 7
OCTAVES = 6
MAX_HEIGHT = 255.0


def _smoothstep(t: np.ndarray) -> np.ndarray:
    return t * t * (3.0 - 2.0 * t)


def _value_noise(rng: np.random.Generator, width: int, height: int, cells: int) -> np.ndarray:
    """One octave: random lattice values blended smoothly across the grid."""
    cells_x = max(1, min(cells, width))
    cells_y = max(1, min(cells, height))
    lattice = rng.random((cells_y + 1, cells_x + 1))

    xs = np.linspace(0.0, cells_x, width, endpoint=False)
    ys = np.linspace(0.0, cells_y, height, endpoint=False)
    x0 = np.floor(xs).astype(int)
    y0 = np.floor(ys).astype(int)
    fx = _smoothstep(xs - x0)[None, :]
    fy = _smoothstep(ys - y0)[:, None]

    top = lattice[y0[:, None], x0[None, :]] * (1 - fx) + lattice[y0[:, None], x0[None, :] + 1] * fx
    bottom = lattice[y0[:, None] + 1, x0[None, :]] * (1 - fx) + lattice[y0[:, None] + 1, x0[None, :] + 1] * fx
    return top * (1 - fy) + bottom * fy


def generate_terrain(
    width: int,
    height: int,
    roughness: int = 3,
    seed: Optional[int] = None,
    max_height: float = MAX_HEIGHT,
) -> np.ndarray:
    """
    Generate a height field.

    Args:
        width: Number of columns
        height: Number of rows
        roughness: 0 (smooth hills) to 7 (jagged)
        seed: Random seed; the same seed always gives the same terrain
        max_height: Highest elevation in the output

    Returns:
        Float array of shape (height, width) with integral values in
        [0, max_height], indexed [y, x]

    Raises:
        ValueError: If dimensions are not positive or roughness is out of range
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Terrain dimensions must be positive, got {width}x{height}")
    if not 0 <= roughness <= MAX_ROUGHNESS:
        raise ValueError(f"Roughness must be between 0 and {MAX_ROUGHNESS}.")

    rng = np.random.default_rng(seed)
    persistence = 0.35 + 0.08 * roughness

    field = np.zeros((height, width), dtype=np.float64)
    for octave in range(OCTAVES):
        field += (persistence ** octave) * _value_noise(rng, width, height, 2 ** (octave + 1))

    low, high = float(field.min()), float(field.max())
    if high - low == 0:
        heights = np.zeros_like(field)
    else:
        heights = np.rint((field - low) / (high - low) * max_height)

    logger.debug(f"Generated {width}x{height} terrain (roughness={roughness}, seed={seed})")
    return heights
