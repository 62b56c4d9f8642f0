"""
HueForge Palette Orchestrator
Chains parsing, optimization, scoring and theme mapping for the /v1 endpoints.
"""
import time
from typing import Any, Dict, List, Optional, Sequence, Union

from hueforge.config import config
from hueforge.errors import HueForgeError
from hueforge.services.colors import (
    Color, ColorLike, HarmonyScheme, OptimizerPolicy, as_color, calculate_quality,
    improve_quality,
)
from hueforge.services.colors.swatches import render_swatch_strip
from hueforge.services.theme import SERIALIZERS, ThemeConfig, ThemeSchema, derive_roles
from hueforge.utils.ids import generate_request_id
from hueforge.utils.logging import get_logger
from hueforge.utils.metrics import get_metrics

structured_logger = get_logger()


class PaletteOrchestrator:
    """Runs palette and theme requests with request ids, timings and metrics."""

    def __init__(self, theme_config: Optional[ThemeConfig] = None,
                 policy: Optional[OptimizerPolicy] = None):
        self.theme_config = theme_config or ThemeConfig.from_env()
        self.policy = policy or OptimizerPolicy(
            max_working_size=config.MAX_WORKING_SIZE,
            max_pool_size=config.MAX_POOL_SIZE,
        )

    @staticmethod
    def _parse(colors: Sequence[ColorLike]) -> List[Color]:
        return [as_color(c) for c in colors]

    @staticmethod
    def _elapsed_ms(start: float) -> float:
        return round((time.time() - start) * 1000, 2)

    def _record_failure(self, request_id: str, operation: str, error: HueForgeError):
        error_type = type(error).__name__
        get_metrics().increment_failure_count(error_type)
        structured_logger.warning(f"[{request_id}] {operation} rejected", extra={
            "request_id": request_id,
            "error_type": error_type,
            "error": str(error),
        })

    def optimize(self,
                 colors: Sequence[ColorLike],
                 target_count: Optional[int] = None,
                 scheme: Union[HarmonyScheme, str, None] = None,
                 include_swatch: bool = False) -> Dict[str, Any]:
        """
        Optimize a palette and report quality before and after.

        Args:
            colors: Input colors (hex strings or Color)
            target_count: Desired palette size, defaults to the theme config
            scheme: Harmony rule, defaults to the theme config
            include_swatch: Attach a base64 PNG swatch strip of the result

        Returns:
            Response dict with the optimized colors, quality scores and timings

        Raises:
            FormatError: an input color is not valid hex
        """
        start_time = time.time()
        request_id = generate_request_id("pal")
        metrics = get_metrics()
        metrics.increment_request_count("optimize")

        target = self.theme_config.target_count if target_count is None else target_count
        harmony = self.theme_config.harmony_scheme if scheme is None else HarmonyScheme(scheme)

        try:
            palette = self._parse(colors)
        except HueForgeError as e:
            self._record_failure(request_id, "optimize", e)
            raise

        structured_logger.info(f"[{request_id}] Optimizing palette", extra={
            "request_id": request_id,
            "input_count": len(palette),
            "target_count": target,
            "scheme": harmony.value,
        })

        before = calculate_quality(palette, self.policy.quality)
        optimized = improve_quality(palette, target, harmony, self.policy)
        after = calculate_quality(optimized, self.policy.quality)
        metrics.record_quality_score(after.score)

        timings = {"optimize_ms": self._elapsed_ms(start_time)}

        response: Dict[str, Any] = {
            "request_id": request_id,
            "colors": [c.hex for c in optimized],
            "count": len(optimized),
            "target_count": target,
            "scheme": harmony.value,
            "quality_before": before.to_dict(),
            "quality": after.to_dict(),
            "swatch_png_b64": None,
        }

        if include_swatch and optimized:
            swatch_start = time.time()
            response["swatch_png_b64"] = render_swatch_strip(optimized, highlight_index=0)
            timings["swatch_ms"] = self._elapsed_ms(swatch_start)

        timings["total_ms"] = self._elapsed_ms(start_time)
        response["timings_ms"] = timings
        metrics.record_timing("optimize", timings["total_ms"])

        structured_logger.info(f"[{request_id}] Palette optimized", extra={
            "request_id": request_id,
            "count": len(optimized),
            "score_before": before.score,
            "score_after": after.score,
            "total_ms": timings["total_ms"],
        })
        return response

    def theme(self,
              colors: Sequence[ColorLike],
              schema: Union[ThemeSchema, str] = ThemeSchema.VSCODE,
              strict: Optional[bool] = None,
              scheme: Union[HarmonyScheme, str, None] = None) -> Dict[str, Any]:
        """
        Generate a theme document for the requested schema.

        Raises:
            FormatError: an input color is not valid hex
            InsufficientPaletteError: fewer than 8 usable colors
        """
        start_time = time.time()
        request_id = generate_request_id("thm")
        schema = ThemeSchema(schema)
        metrics = get_metrics()
        metrics.increment_request_count("theme")
        metrics.increment_schema_count(schema.value)

        harmony = None if scheme is None else HarmonyScheme(scheme)

        try:
            palette = self._parse(colors)
            roles = derive_roles(palette, strict, harmony, self.theme_config, self.policy)
        except HueForgeError as e:
            self._record_failure(request_id, "theme", e)
            raise

        document = SERIALIZERS[schema](roles, self.theme_config)
        total_ms = self._elapsed_ms(start_time)
        metrics.record_timing("theme", total_ms)

        structured_logger.info(f"[{request_id}] Theme generated", extra={
            "request_id": request_id,
            "schema": schema.value,
            "appearance": roles.appearance,
            "input_count": len(palette),
            "total_ms": total_ms,
        })

        return {
            "request_id": request_id,
            "theme_schema": schema.value,
            "appearance": roles.appearance,
            "theme": document,
            "timings_ms": {"total_ms": total_ms},
        }
