"""
HueForge v1 API Routes
Palette optimization, scoring, harmony, sorting and theme generation.
"""
import time
from typing import Any, Dict

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from hueforge.config import config
from hueforge.errors import FormatError, InsufficientPaletteError
from hueforge.schemas import (
    ErrorResponse, HarmonyRequest, HarmonyResponse, HealthResponse, InsufficientPaletteResponse,
    OptimizeRequest, OptimizeResponse, PaletteRequest, QualityModel, SortRequest,
    SortResponse, ThemeRequest, ThemeResponse,
)
from hueforge.services.colors import (
    SortMethod, as_color, calculate_quality, generate_harmony, sort_colors,
)
from hueforge.services.orchestrator import PaletteOrchestrator
from hueforge.utils.logging import get_logger
from hueforge.utils.metrics import get_metrics

router = APIRouter(prefix="/v1", tags=["Palette & Theme"])
structured_logger = get_logger()

# Initialize orchestrator
orchestrator = PaletteOrchestrator()


def _format_error(e: FormatError) -> HTTPException:
    return HTTPException(status_code=422, detail=str(e))


def _internal_error(operation: str, e: Exception) -> HTTPException:
    get_metrics().increment_failure_count("internal")
    structured_logger.error(f"{operation} failed", extra={"error": str(e), "error_type": type(e).__name__})
    return HTTPException(status_code=500, detail=f"Internal error during {operation}")


@router.post("/palette/optimize",
             response_model=OptimizeResponse,
             responses={422: {"model": ErrorResponse}},
             summary="Optimize Palette",
             description="Deduplicate, diversify and harmonically fill a palette")
async def optimize_palette(request: OptimizeRequest) -> Dict[str, Any]:
    """Optimize a palette toward `target_count` well-separated colors."""
    try:
        return orchestrator.optimize(
            request.colors,
            target_count=request.target_count,
            scheme=request.scheme,
            include_swatch=request.include_swatch,
        )
    except FormatError as e:
        raise _format_error(e)
    except HTTPException:
        raise
    except Exception as e:
        raise _internal_error("palette optimization", e)


@router.post("/palette/quality",
             response_model=QualityModel,
             responses={422: {"model": ErrorResponse}},
             summary="Score Palette",
             description="Score how perceptually distinct the colors of a palette are")
async def score_palette(request: PaletteRequest) -> Dict[str, Any]:
    """Return the 0-100 quality score, distance stats and poor pairs."""
    metrics = get_metrics()
    metrics.increment_request_count("quality")
    try:
        with metrics.timed("quality"):
            quality = calculate_quality(request.colors)
        return quality.to_dict()
    except FormatError as e:
        raise _format_error(e)
    except HTTPException:
        raise
    except Exception as e:
        raise _internal_error("quality scoring", e)


@router.post("/palette/harmony",
             response_model=HarmonyResponse,
             responses={422: {"model": ErrorResponse}},
             summary="Harmony Colors",
             description="Generate harmonic companions for a base color")
async def harmony_colors(request: HarmonyRequest) -> Dict[str, Any]:
    """Return the base color followed by its companions for the scheme."""
    get_metrics().increment_request_count("harmony")
    try:
        base = as_color(request.base)
        colors = generate_harmony(base, request.scheme)
        return {
            "base": base.hex,
            "scheme": request.scheme,
            "colors": [c.hex for c in colors],
        }
    except FormatError as e:
        raise _format_error(e)
    except HTTPException:
        raise
    except Exception as e:
        raise _internal_error("harmony generation", e)


@router.post("/palette/sort",
             response_model=SortResponse,
             responses={422: {"model": ErrorResponse}},
             summary="Sort Palette",
             description="Sort colors by hue, saturation, lightness or luminance")
async def sort_palette(request: SortRequest) -> Dict[str, Any]:
    """Sort a palette and report whether the order changed."""
    metrics = get_metrics()
    metrics.increment_request_count("sort")
    try:
        with metrics.timed("sort"):
            result = sort_colors(request.colors, SortMethod(request.method))
        return {
            "method": request.method,
            "colors": [c.hex for c in result.colors],
            "unchanged": result.unchanged,
        }
    except FormatError as e:
        raise _format_error(e)
    except HTTPException:
        raise
    except Exception as e:
        raise _internal_error("palette sort", e)


@router.post("/theme/{schema}",
             response_model=ThemeResponse,
             responses={404: {"model": ErrorResponse}, 422: {"model": InsufficientPaletteResponse}},
             summary="Generate Theme",
             description="Generate a VS Code or Zed editor theme from a palette")
async def generate_theme(schema: str, request: ThemeRequest):
    """
    Generate an editor theme.

    Needs at least 8 usable colors; with `strict=false` the palette is
    optimized first, which may add harmonic companions.
    """
    if schema not in config.SUPPORTED_THEME_SCHEMAS:
        raise HTTPException(
            status_code=404,
            detail=f"Unsupported theme schema: {schema}. Use one of {config.SUPPORTED_THEME_SCHEMAS}"
        )

    try:
        return orchestrator.theme(
            request.colors,
            schema=schema,
            strict=request.strict,
            scheme=request.scheme,
        )
    except InsufficientPaletteError as e:
        return JSONResponse(
            status_code=422,
            content={"detail": str(e), "actual": e.actual, "required": e.required}
        )
    except FormatError as e:
        raise _format_error(e)
    except HTTPException:
        raise
    except Exception as e:
        raise _internal_error("theme generation", e)


@router.get("/healthz",
            response_model=HealthResponse,
            summary="Health Check",
            description="Liveness probe")
async def health_check() -> Dict[str, Any]:
    """Health check endpoint."""
    return {
        "status": "ok",
        "service": "hueforge",
        "version": config.API_VERSION,
        "timestamp": int(time.time())
    }


@router.get("/metrics",
            summary="Metrics",
            description="In-process request counters, timings and quality stats")
async def metrics_summary() -> Dict[str, Any]:
    """Get metrics summary."""
    return get_metrics().get_summary()
