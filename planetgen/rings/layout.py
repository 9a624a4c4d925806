# planetgen/rings/layout.py
"""
Ring geometry: radial bounds, resonance gaps, band intervals.

Bounds
------
    inner = max(1.1 R_p, 0.5 Roche)
    outer = min(2.5 Roche, 0.3 R_Hill)

Roche is evaluated for loose ring particles (1000 kg/m^3). When
inner >= outer there is no room for rings.

Gaps
----
Each gap first draws its width (2-15% of the span), then tries the next
unused resonance slot, placed at f * outer with +-5% jitter, where
f = (q/p)^(2/3) for the 1:2, 2:3, 3:4 and 4:5 resonances. A candidate
is kept when its centre is at least 10% of the span away from every
accepted gap and its whole interval sits strictly inside the bounds
without touching another gap; otherwise the slot is spent. Once the
slots run out, centres are drawn uniformly at random with a bounded
number of retries. If those fail too, the gap goes in the middle of the
widest remaining band, narrowed to at most half of it. Every gap
therefore splits exactly one band in two.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from planetgen.core.constants import roche_limit
from planetgen.core.rng import RandomStream

logger = logging.getLogger(__name__)

RING_PARTICLE_DENSITY_KG_M3 = 1000.0
INNER_PLANET_RADII = 1.1
INNER_ROCHE_FRACTION = 0.5
OUTER_ROCHE_FACTOR = 2.5
OUTER_HILL_FRACTION = 0.3

RESONANCE_FRACTIONS: Tuple[float, ...] = tuple(
    (q / p) ** (2.0 / 3.0) for q, p in ((1, 2), (2, 3), (3, 4), (4, 5))
)
RESONANCE_JITTER = (0.95, 1.05)
MIN_GAP_SEPARATION = 0.10
GAP_WIDTH_FRACTION = (0.02, 0.15)


def ring_roche_limit(planet_radius_m: float, planet_density_kg_m3: float) -> float:
    return roche_limit(planet_radius_m, planet_density_kg_m3, RING_PARTICLE_DENSITY_KG_M3)


def ring_bounds(
    planet_radius_m: float,
    planet_density_kg_m3: float,
    hill_radius_m: float,
) -> Optional[Tuple[float, float]]:
    """(inner, outer) [m], or None when the region is empty."""
    roche = ring_roche_limit(planet_radius_m, planet_density_kg_m3)
    inner = max(INNER_PLANET_RADII * planet_radius_m, INNER_ROCHE_FRACTION * roche)
    outer = min(OUTER_ROCHE_FACTOR * roche, OUTER_HILL_FRACTION * hill_radius_m)
    if inner >= outer:
        logger.debug("no ring region: inner=%.3e m >= outer=%.3e m", inner, outer)
        return None
    return inner, outer


def _separated(center: float, gaps: List[Tuple[float, float]], span: float) -> bool:
    return all(abs(center - c) / span >= MIN_GAP_SEPARATION for c, _ in gaps)


def _fits(center: float, width: float, inner: float, outer: float, gaps: List[Tuple[float, float]]) -> bool:
    """Gap interval lies strictly inside (inner, outer) and clear of every accepted gap."""
    lo, hi = center - 0.5 * width, center + 0.5 * width
    if not (inner < lo and hi < outer):
        return False
    return all(hi < c - 0.5 * w or lo > c + 0.5 * w for c, w in gaps)


def place_gaps(
    n_gaps: int,
    inner: float,
    outer: float,
    rng: RandomStream,
    attempts: int = 10,
) -> List[Tuple[float, float]]:
    """
    (center, width) pairs [m], in placement order. Always returns exactly
    `n_gaps` disjoint gaps, so band_intervals yields n_gaps + 1 bands.
    """
    span = outer - inner
    slots = list(RESONANCE_FRACTIONS)
    gaps: List[Tuple[float, float]] = []

    def acceptable(candidate: float, width: float) -> bool:
        return _separated(candidate, gaps, span) and _fits(candidate, width, inner, outer, gaps)

    for _ in range(n_gaps):
        width = rng.range(*GAP_WIDTH_FRACTION) * span
        center = None
        while slots and center is None:
            candidate = outer * slots.pop(0) * rng.range(*RESONANCE_JITTER)
            if acceptable(candidate, width):
                center = candidate
        if center is None:
            for _ in range(attempts):
                candidate = rng.range(inner, outer)
                if acceptable(candidate, width):
                    center = candidate
                    break
        if center is None:
            lo, hi = max(band_intervals(inner, outer, gaps), key=lambda b: b[1] - b[0])
            center = 0.5 * (lo + hi)
            width = min(width, 0.5 * (hi - lo))
            logger.debug("gap placement fell back to the widest band after %d attempts", attempts)
        gaps.append((center, width))
    return gaps


def band_intervals(inner: float, outer: float, gaps: List[Tuple[float, float]]) -> List[Tuple[float, float]]:
    """
    Complement of the (merged, clipped) gap intervals inside [inner, outer],
    sorted inner -> outer. Intervals never overlap.
    """
    cuts = sorted(
        (max(inner, c - 0.5 * w), min(outer, c + 0.5 * w))
        for c, w in gaps
    )
    merged: List[List[float]] = []
    for lo, hi in cuts:
        if merged and lo <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], hi)
        else:
            merged.append([lo, hi])

    bands: List[Tuple[float, float]] = []
    cursor = inner
    for lo, hi in merged:
        if lo > cursor:
            bands.append((cursor, lo))
        cursor = max(cursor, hi)
    if cursor < outer:
        bands.append((cursor, outer))
    return bands


__all__ = [
    "RING_PARTICLE_DENSITY_KG_M3",
    "RESONANCE_FRACTIONS",
    "ring_roche_limit",
    "ring_bounds",
    "place_gaps",
    "band_intervals",
]
