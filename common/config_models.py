"""
Pydantic models for global configuration structure.
This module defines the nested configuration models used by the Config class.
Each model corresponds to a section in the global_config.yaml file and provides
type validation and structure for the configuration data.
"""

from typing import Union

from pydantic import BaseModel, Field


class LoggingLocationConfig(BaseModel):
    """Location information display configuration for logging."""

    enabled: bool
    show_file: bool
    show_function: bool
    show_line: bool
    show_for_info: bool
    show_for_debug: bool
    show_for_warning: bool
    show_for_error: bool


class LoggingFormatConfig(BaseModel):
    """Logging format configuration."""

    show_time: bool
    show_session_id: bool
    location: LoggingLocationConfig


class LoggingLevelsConfig(BaseModel):
    """Logging level configuration."""

    debug: bool
    info: bool
    warning: bool
    error: bool
    critical: bool


class LoggingConfig(BaseModel):
    """Complete logging configuration."""

    verbose: bool
    format: LoggingFormatConfig
    levels: LoggingLevelsConfig


class InsetConfig(BaseModel):
    """Defaults used when a meme inset is requested without explicit templates."""

    default_position: str
    default_background: str
    default_size: Union[float, list[float]]
    default_margin: Union[float, list[float]]
    warn_out_of_bounds: bool


class ThemeConfig(BaseModel):
    """Base settings of the plot theme applied to inset graphics."""

    base_size: float = Field(gt=0)
    base_family: str
    base_col: str
