"""
HueForge Configuration
Manages environment variables and defaults for the palette and theme services.
"""
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


class Config:
    """Configuration class for HueForge services."""

    # Logging
    LOG_LEVEL: str = os.environ.get("HUEFORGE_LOG_LEVEL", "INFO")
    LOG_JSON: bool = bool(int(os.environ.get("HUEFORGE_LOG_JSON", "0")))

    # Palette optimization defaults
    TARGET_COUNT: int = int(os.environ.get("HUEFORGE_TARGET_COUNT", "12"))
    HARMONY_SCHEME: str = os.environ.get("HUEFORGE_HARMONY_SCHEME", "triadic")
    MAX_WORKING_SIZE: int = int(os.environ.get("HUEFORGE_MAX_WORKING_SIZE", "50"))
    MAX_POOL_SIZE: int = int(os.environ.get("HUEFORGE_MAX_POOL_SIZE", "200"))
    MAX_INPUT_COLORS: int = int(os.environ.get("HUEFORGE_MAX_INPUT_COLORS", "4096"))

    # Theme generation defaults
    STRICT_MODE: bool = bool(int(os.environ.get("HUEFORGE_STRICT_MODE", "0")))
    MIN_THEME_COLORS: int = int(os.environ.get("HUEFORGE_MIN_THEME_COLORS", "8"))
    FOREGROUND_CONTRAST: float = float(os.environ.get("HUEFORGE_FOREGROUND_CONTRAST", "7.0"))
    ACCENT_CONTRAST: float = float(os.environ.get("HUEFORGE_ACCENT_CONTRAST", "4.5"))
    SEMANTIC_CONTRAST: float = float(os.environ.get("HUEFORGE_SEMANTIC_CONTRAST", "3.5"))
    ACCENT_FOREGROUND_MIN_DISTANCE: float = float(os.environ.get("HUEFORGE_ACCENT_FOREGROUND_MIN_DISTANCE", "60"))
    ACCENT_PAIR_MIN_DISTANCE: float = float(os.environ.get("HUEFORGE_ACCENT_PAIR_MIN_DISTANCE", "50"))
    ACCENT_NUDGE: float = float(os.environ.get("HUEFORGE_ACCENT_NUDGE", "0.15"))
    THEME_NAME: str = os.environ.get("HUEFORGE_THEME_NAME", "Custom Palette Theme")
    THEME_AUTHOR: str = os.environ.get("HUEFORGE_THEME_AUTHOR", "Image to Palette Generator")

    # CORS settings
    ALLOWED_ORIGINS: str = os.environ.get("HUEFORGE_ALLOWED_ORIGINS", "")
    API_VERSION: str = "1.0.0"

    SUPPORTED_SCHEMES = ["complementary", "triadic", "analogous", "split-complementary"]
    SUPPORTED_THEME_SCHEMAS = ["vscode", "zed"]

    @classmethod
    def validate_scheme(cls, scheme: str) -> bool:
        """Validate harmony scheme parameter."""
        return scheme in cls.SUPPORTED_SCHEMES

    @classmethod
    def validate_target_count(cls, target_count: int) -> bool:
        """Validate palette target count."""
        return 1 <= target_count <= cls.MAX_POOL_SIZE

    @classmethod
    def validate_contrast(cls, ratio: float) -> bool:
        """Validate a WCAG contrast target (1:1 up to 21:1)."""
        return 1.0 <= ratio <= 21.0

    @classmethod
    def validate_accent_nudge(cls, nudge: float) -> bool:
        """Validate the lighten/darken fraction used to separate accents."""
        return 0.0 < nudge < 1.0

    @classmethod
    def allowed_origins(cls) -> Optional[list]:
        """Parse the comma separated CORS origin list."""
        origins = [o.strip() for o in cls.ALLOWED_ORIGINS.split(",") if o.strip()]
        return origins or None


# Global config instance
config = Config()
