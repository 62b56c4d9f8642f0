"""
Palette Quality Module

Scores a palette by its pairwise RGB distances and flags pairs of colors that
are too similar to be told apart.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from loguru import logger

from .color import Color, ColorLike, as_color, round_half_up
from .perceptual import pairwise_distances


@dataclass
class QualityPolicy:
    """Tunable thresholds for palette quality scoring."""

    # Pairs closer than this are "poor"
    poor_threshold: float = 50.0

    # Good quality needs both a high composite score and a minimum separation
    min_good_score: float = 60.0
    min_good_distance: float = 40.0

    # Composite score normalizers (each half contributes up to 50 points)
    min_distance_scale: float = 100.0
    avg_distance_scale: float = 150.0


@dataclass(frozen=True)
class PoorPair:
    """Two palette colors closer than the poor threshold."""
    color1: Color
    color2: Color
    distance: float


@dataclass(frozen=True)
class PaletteQualityScore:
    """Pairwise distance statistics for a palette."""
    score: int
    min_distance: float
    avg_distance: float
    poor_pairs: List[PoorPair] = field(default_factory=list)
    is_good_quality: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "min_distance": round(self.min_distance, 2),
            "avg_distance": round(self.avg_distance, 2),
            "poor_pairs": [
                {"color1": p.color1.hex, "color2": p.color2.hex, "distance": round(p.distance, 2)}
                for p in self.poor_pairs
            ],
            "is_good_quality": self.is_good_quality,
        }


def calculate_quality(palette: Sequence[ColorLike],
                      policy: Optional[QualityPolicy] = None) -> PaletteQualityScore:
    """
    Compute the quality score of a palette.

    score = min(100, min_distance / 100 * 50 + avg_distance / 150 * 50), rounded.
    A palette is good when the unrounded score is at least 60 and the closest
    pair is at least 40 apart.

    Args:
        palette: Colors to score
        policy: Threshold overrides

    Returns:
        PaletteQualityScore with poor pairs sorted worst (closest) first
    """
    policy = policy or QualityPolicy()
    colors = [as_color(c) for c in palette]

    if len(colors) < 2:
        return PaletteQualityScore(score=100, min_distance=0.0, avg_distance=0.0,
                                   poor_pairs=[], is_good_quality=True)

    matrix = pairwise_distances(colors)

    distances = []
    poor_pairs = []
    n = len(colors)
    for i in range(n):
        for j in range(i + 1, n):
            dist = float(matrix[i, j])
            distances.append(dist)
            if dist < policy.poor_threshold:
                poor_pairs.append(PoorPair(colors[i], colors[j], dist))

    min_distance = min(distances)
    avg_distance = sum(distances) / len(distances)

    raw_score = min(
        100.0,
        (min_distance / policy.min_distance_scale) * 50
        + (avg_distance / policy.avg_distance_scale) * 50,
    )

    is_good = raw_score >= policy.min_good_score and min_distance >= policy.min_good_distance

    logger.debug(f"Palette quality: n={n} score={raw_score:.1f} min={min_distance:.1f} "
                 f"avg={avg_distance:.1f} poor_pairs={len(poor_pairs)}")

    return PaletteQualityScore(
        score=round_half_up(raw_score),
        min_distance=min_distance,
        avg_distance=avg_distance,
        poor_pairs=sorted(poor_pairs, key=lambda p: p.distance),
        is_good_quality=is_good,
    )
