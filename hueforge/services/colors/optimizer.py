"""
HueForge Palette Optimizer

Turns an arbitrary (possibly tiny, redundant or oversized) list of colors into
a palette of up to `target_count` well separated colors. Composes diversity
selection, quality scoring and harmony generation. Never raises on a
well-formed palette; it returns fewer colors than requested when nothing
better can be built.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from loguru import logger

from .color import Color, ColorLike, as_color
from .diversity import select_diverse
from .harmony import HarmonyScheme, generate_harmony
from .quality import QualityPolicy, calculate_quality


@dataclass
class OptimizerPolicy:
    """Bounds for the optimization pipeline."""

    # Working set cap applied before any O(n^2) step
    max_working_size: int = 50

    # Hard ceiling on the candidate pool during harmonic fill
    max_pool_size: int = 200

    # Number of diverse bases used per harmonic fill round
    harmony_bases: int = 2

    # Number of worst poor pairs that lose a color
    worst_pairs_removed: int = 2

    quality: QualityPolicy = field(default_factory=QualityPolicy)


def dedupe(colors: Iterable[Color]) -> List[Color]:
    """Exact-value dedup preserving first occurrence order."""
    return list(dict.fromkeys(colors))


def _harmonic_fill(pool: List[Color],
                   target_count: int,
                   scheme: HarmonyScheme,
                   policy: OptimizerPolicy) -> List[Color]:
    """Grow the pool with harmony companions of its most diverse members."""
    pool = list(pool)
    seen = set(pool)
    rounds = 0

    while pool and len(pool) < target_count * 2 and len(pool) < policy.max_pool_size:
        rounds += 1
        bases = select_diverse(pool, min(policy.harmony_bases, len(pool)))
        added = 0

        for base in bases:
            if len(pool) >= target_count * 2:
                break

            companions = dedupe(c for c in generate_harmony(base, scheme)[1:] if c not in seen)
            if companions and len(pool) + len(companions) < policy.max_pool_size:
                pool.extend(companions)
                seen.update(companions)
                added += len(companions)

        if added == 0:
            break

    logger.debug(f"Harmonic fill ({scheme.value}): {len(pool)} colors after {rounds} rounds")
    return pool


def improve_quality(colors: Sequence[ColorLike],
                    target_count: int = 12,
                    scheme: HarmonyScheme = HarmonyScheme.TRIADIC,
                    policy: Optional[OptimizerPolicy] = None) -> List[Color]:
    """
    Build a diverse, quality-checked palette of up to `target_count` colors.

    Args:
        colors: Raw colors (hex strings or Color values)
        target_count: Desired palette size
        scheme: Harmony rule used to synthesize extra colors
        policy: Pipeline bounds and quality thresholds

    Returns:
        Optimized palette; empty only when the input is empty. When the
        deduped input already fits `target_count` and scores higher than the
        rebuilt palette, the deduped input is returned even if it is shorter.

    Raises:
        FormatError: if an input string is not a valid hex color
    """
    policy = policy or OptimizerPolicy()
    scheme = HarmonyScheme(scheme)
    palette = [as_color(c) for c in colors]

    if target_count <= 0 or not palette:
        return []

    # Step 1: cap the working set
    if len(palette) > policy.max_working_size:
        working = select_diverse(palette, policy.max_working_size)
        logger.debug(f"Working set capped from {len(palette)} to {len(working)} colors")
    else:
        working = palette

    # Step 2: early exit for palettes that are already good and large enough
    quality = calculate_quality(working, policy.quality)
    if quality.is_good_quality and len(working) >= target_count:
        return select_diverse(working, target_count)

    # Step 3: exact dedup
    unique = dedupe(working)
    if len(unique) >= target_count:
        return select_diverse(unique, target_count)

    improved = list(unique)

    # Step 4: drop one color from each of the worst offending pairs
    if quality.poor_pairs:
        problematic = {pair.color1 for pair in quality.poor_pairs[:policy.worst_pairs_removed]}
        improved = [c for c in improved if c not in problematic]
        if not improved:
            improved = list(unique)
        logger.debug(f"Removed {len(unique) - len(improved)} colors from poor pairs")

    # Step 5: synthesize companions
    improved = _harmonic_fill(improved, target_count, scheme, policy)

    # Step 6: top up from the most diverse original colors
    if len(improved) < target_count:
        most_diverse = select_diverse(unique, min(target_count, len(unique)))
        missing = [c for c in most_diverse if c not in improved]
        improved.extend(missing)

    # Step 7: final dedup and trim
    improved = dedupe(improved)
    if not improved:
        return unique[:target_count]

    result = select_diverse(improved, min(target_count, len(improved)))

    # Step 8: never hand back something worse than the deduped input itself
    if 2 <= len(unique) <= target_count:
        input_score = calculate_quality(unique, policy.quality).score
        result_score = calculate_quality(result, policy.quality).score
        if input_score > result_score:
            logger.debug(f"Kept input palette (score {input_score} > {result_score})")
            return unique

    logger.debug(f"Optimized {len(palette)} input colors into {len(result)} "
                 f"(target {target_count}, scheme {scheme.value})")
    return result
