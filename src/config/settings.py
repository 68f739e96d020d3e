"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use BOOTWIND_ prefix (e.g., BOOTWIND_BREAKPOINT_STRATEGY=exact).

Settings can also be loaded from a .env file in the project root.
"""

from typing import Dict, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..models.breakpoints import BreakpointStrategy
from ..models.rules import SpacingStrictness


class ColorOverride(BaseModel):
    """Tailwind color assigned to a Bootstrap semantic color name"""

    color: str
    shade: Optional[int] = None
    contrast: Optional[str] = None

    def as_table(self) -> Dict[str, object]:
        """Entry in the shape MappingTables.colors_override() accepts"""
        return self.model_dump(exclude_none=True)


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use BOOTWIND_ prefix. Mapping-valued settings are
    given as JSON.

    Examples:
        BOOTWIND_BREAKPOINT_STRATEGY=exact
        BOOTWIND_SPACING_STRICTNESS=strict
        BOOTWIND_COLOR_OVERRIDES='{"primary": {"color": "indigo", "shade": 500}}'
        BOOTWIND_TABLES_FILE=tables/bootstrap4.yaml
    """

    model_config = SettingsConfigDict(
        env_prefix="BOOTWIND_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Conversion configuration
    breakpoint_strategy: BreakpointStrategy = Field(
        default=BreakpointStrategy.NEAREST,
        description="Breakpoint remapping: 'nearest' (Tailwind screens) or 'exact' (custom screens)",
    )

    spacing_strictness: SpacingStrictness = Field(
        default=SpacingStrictness.APPROXIMATE,
        description="'strict' reports scale values without an exact Tailwind equivalent",
    )

    color_overrides: Dict[str, ColorOverride] = Field(
        default_factory=dict,
        description="Semantic color name -> Tailwind color and shade",
    )

    # Table configuration
    tables_file: Optional[str] = Field(
        default=None,
        description="YAML mapping tables replacing the built-in Bootstrap 5.3 tables",
    )

    # Logging configuration
    verbosity: int = Field(
        default=1,
        ge=0,
        le=3,
        description="Logging verbosity (0 silent, 1 normal, 2 verbose, 3 debug)",
    )

    def colorOverrides_get(self) -> Dict[str, Dict[str, object]]:
        """
        Color overrides as plain table entries.

        Example:
            >>> settings = AppSettings(color_overrides={"primary": {"color": "indigo", "shade": 500}})
            >>> settings.colorOverrides_get()
            {'primary': {'color': 'indigo', 'shade': 500}}
        """
        return {name: override.as_table() for name, override in self.color_overrides.items()}


# Singleton instance - import this in your code
appsettings = AppSettings()
