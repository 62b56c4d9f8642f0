"""
Diversity Selection Module

Greedy farthest-point sampling: picks colors that maximize their minimum
RGB distance to the colors already chosen.
"""

from typing import List, Sequence

import numpy as np
from loguru import logger

from .color import Color, ColorLike, as_color
from .perceptual import pairwise_distances


def select_diverse(candidates: Sequence[ColorLike], count: int) -> List[Color]:
    """
    Select up to `count` maximally separated colors.

    The first candidate seeds the selection. Each step adds the candidate whose
    minimum distance to the selection is largest; the earliest candidate wins
    ties. Candidates equal to an already selected color are never picked, so
    the loop stops early when only duplicates remain.

    Args:
        candidates: Ordered candidate palette
        count: Number of colors wanted

    Returns:
        Selected colors in selection order. If there are no more candidates
        than `count`, the candidates are returned unchanged.
    """
    colors = [as_color(c) for c in candidates]

    if not colors:
        return []

    if len(colors) <= count:
        return colors

    if count <= 0:
        return []

    distances = pairwise_distances(colors)

    selected = [0]
    # Minimum distance from every candidate to the current selection
    min_distance = distances[0].copy()
    max_iterations = count * len(colors)
    iterations = 0

    while len(selected) < count and iterations < max_iterations:
        iterations += 1

        # Zero distance means the candidate is (a copy of) a selected color
        eligible = min_distance > 0
        if not eligible.any():
            break

        best = int(np.argmax(np.where(eligible, min_distance, -1.0)))
        selected.append(best)
        min_distance = np.minimum(min_distance, distances[best])

    logger.debug(f"Selected {len(selected)} diverse colors from {len(colors)} candidates "
                 f"in {iterations} iterations")

    return [colors[i] for i in selected]
