"""
HueForge API Schemas
Pydantic models for palette and theme request/response validation.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from hueforge.config import config

HEX_PATTERN = r"^#?[0-9A-Fa-f]{6}$"
SCHEME_PATTERN = "^(complementary|triadic|analogous|split-complementary)$"


class PaletteRequest(BaseModel):
    """A list of hex colors."""
    colors: List[str] = Field(
        ...,
        max_length=config.MAX_INPUT_COLORS,
        description="Hex colors in format #RRGGBB (leading '#' optional)"
    )


class OptimizeRequest(PaletteRequest):
    """Request body for palette optimization."""
    target_count: int = Field(
        config.TARGET_COUNT,
        ge=1,
        le=config.MAX_POOL_SIZE,
        description="Desired number of colors in the optimized palette"
    )
    scheme: str = Field(
        config.HARMONY_SCHEME,
        pattern=SCHEME_PATTERN,
        description="Harmony rule used to fill gaps in the palette"
    )
    include_swatch: bool = Field(False, description="Attach a PNG swatch strip of the result")


class HarmonyRequest(BaseModel):
    """Request body for harmony generation."""
    base: str = Field(..., pattern=HEX_PATTERN, description="Base color")
    scheme: str = Field(config.HARMONY_SCHEME, pattern=SCHEME_PATTERN)


class SortRequest(PaletteRequest):
    """Request body for palette sorting."""
    method: str = Field(
        "hue",
        pattern="^(hue|saturation|lightness|luminance|none)$",
        description="Sort key; saturation sorts descending, the others ascending"
    )


class ThemeRequest(PaletteRequest):
    """Request body for theme generation."""
    strict: Optional[bool] = Field(
        None,
        description="Use the palette as-is instead of optimizing it (defaults to HUEFORGE_STRICT_MODE)"
    )
    scheme: Optional[str] = Field(None, pattern=SCHEME_PATTERN)


class PoorPairModel(BaseModel):
    """A pair of colors closer than the poor-pair threshold."""
    color1: str
    color2: str
    distance: float = Field(..., ge=0.0)


class QualityModel(BaseModel):
    """Palette quality score."""
    score: int = Field(..., ge=0, le=100)
    min_distance: float
    avg_distance: float
    poor_pairs: List[PoorPairModel]
    is_good_quality: bool


class OptimizeResponse(BaseModel):
    """Palette optimization response."""
    request_id: str
    colors: List[str]
    count: int
    target_count: int
    scheme: str
    quality_before: QualityModel
    quality: QualityModel
    swatch_png_b64: Optional[str] = Field(None, description="Base64-encoded PNG swatch strip")
    timings_ms: Dict[str, float]


class HarmonyResponse(BaseModel):
    """Harmony generation response."""
    base: str
    scheme: str
    colors: List[str] = Field(..., description="Base color followed by its companions")


class SortResponse(BaseModel):
    """Palette sort response."""
    method: str
    colors: List[str]
    unchanged: bool = Field(..., description="True when the sorted order equals the input order")


class ThemeResponse(BaseModel):
    """Theme generation response."""
    request_id: str
    theme_schema: str
    appearance: str
    theme: Dict[str, Any]
    timings_ms: Dict[str, float]


class InsufficientPaletteResponse(BaseModel):
    """Returned when too few colors reach the theme mapper."""
    detail: str
    actual: int
    required: int


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "ok"
    service: str = "hueforge"
    version: str = Field(..., description="Service version")
    timestamp: int


class ErrorResponse(BaseModel):
    """Error response."""
    detail: str = Field(..., description="Error message")
