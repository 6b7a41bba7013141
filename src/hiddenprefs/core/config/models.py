"""
Configuration Models

Pydantic models for type-safe configuration management with validation,
defaults, and field documentation.
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hiddenprefs.flags import SFW_BROWSING_LEVELS, from_names
from hiddenprefs.preferences import FilterOptions, ViewerContext


class ViewerConfig(BaseModel):
    """Default viewer identity used when none is given on the command line."""

    user_id: Optional[int] = Field(
        default=None,
        ge=1,
        description="Current viewer's user id (unset for anonymous viewers)"
    )
    is_moderator: bool = Field(
        default=False,
        description="Whether the viewer is a moderator"
    )
    browsing_level: Union[int, str] = Field(
        default=SFW_BROWSING_LEVELS,
        description="Permitted NSFW levels as a bitmask, a preset (public, sfw, nsfw, all) or names like 'PG,PG13'"
    )

    @field_validator('browsing_level')
    @classmethod
    def validate_browsing_level(cls, v):
        """Normalize level names to a bitmask."""
        mask = from_names(v)
        if mask < 0:
            raise ValueError("Browsing level must not be negative")
        return mask

    def to_context(self) -> ViewerContext:
        return ViewerContext(
            current_user_id=self.user_id,
            is_moderator=self.is_moderator,
            browsing_level=self.browsing_level,
        )


class FilterConfig(BaseModel):
    """Default switches for visibility filtering."""

    show_hidden: bool = Field(
        default=False,
        description="Reveal self-hidden models and images (owner and tag hiding still apply)"
    )
    disabled: bool = Field(
        default=False,
        description="Bypass hidden preferences entirely"
    )

    def to_options(self) -> FilterOptions:
        return FilterOptions(show_hidden=self.show_hidden, disabled=self.disabled)


class LoggingConfig(BaseModel):
    """Logging output settings."""

    level: str = Field(
        default="WARNING",
        description="Log level: DEBUG, INFO, WARNING, ERROR"
    )
    rich_tracebacks: bool = Field(
        default=True,
        description="Render exception tracebacks with rich"
    )

    @field_validator('level')
    @classmethod
    def validate_level(cls, v):
        """Validate the log level name."""
        valid_levels = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(sorted(valid_levels))}")
        return v.upper()


class AppConfig(BaseModel):
    """Root application configuration model."""

    version: str = Field(default="0.2.0", description="Configuration version")

    viewer: ViewerConfig = Field(default_factory=ViewerConfig, description="Viewer configuration")
    filters: FilterConfig = Field(default_factory=FilterConfig, description="Filter configuration")
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="Logging configuration")

    verbose: bool = Field(
        default=False,
        description="Enable verbose logging output"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode with detailed logging"
    )

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
    )

    def get_effective_log_level(self) -> str:
        """Debug and verbose flags take precedence over the configured level."""
        if self.debug:
            return "DEBUG"
        if self.verbose:
            return "INFO"
        return self.logging.level
