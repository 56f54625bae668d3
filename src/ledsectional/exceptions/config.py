"""Configuration-related exceptions.

This module defines exceptions for configuration errors:
- ConfigurationError: Base class for configuration errors
- ConfigFileNotFoundError: Config file does not exist
- ConfigParseError: Config file has invalid TOML syntax
- ConfigValidationError: Config values have the wrong type
"""

from typing import Any, Optional

from .base import LedSectionalError


class ConfigurationError(LedSectionalError):
    """Configuration is invalid or cannot be loaded."""
    pass


class ConfigFileNotFoundError(ConfigurationError):
    """Configuration file does not exist."""

    def __init__(self, file_path: str):
        super().__init__(
            user_message=f"Configuration file not found: {file_path}",
            technical_message=f"No such config file: {file_path}",
            recoverable=True,
            recovery_hint=(
                "Copy cfg.toml.example to the path above, or pass --config "
                "with the path of an existing file"
            ),
        )
        self.file_path = file_path


class ConfigParseError(ConfigurationError):
    """Configuration text is not well-formed TOML.

    Fatal to boot: there is no safe way to guess the airport layout from
    a broken file. The caller may fall back to the built-in default.
    """

    def __init__(self, parse_error: str, file_path: Optional[str] = None, **kwargs):
        """
        Initialize config parse error.

        Args:
            parse_error: The parsing error message
            file_path: Path to the invalid config file (optional)
        """
        source = file_path or "<config text>"
        recovery = "Check for common TOML errors:\n"
        recovery += "  - Strings must be quoted (code = \"KSFO\")\n"
        recovery += "  - Each airport needs its own [[airports]] header\n"
        recovery += "  - Booleans are lower-case (true / false)"
        if file_path:
            recovery += f"\n  - Edit: {file_path}"

        kwargs.setdefault("user_message", "Configuration file has invalid syntax")
        kwargs.setdefault("technical_message", f"TOML parse error in {source}: {parse_error}")
        kwargs.setdefault("recovery_hint", recovery)
        super().__init__(recoverable=False, **kwargs)
        self.parse_error = parse_error
        self.file_path = file_path


class ConfigValidationError(ConfigParseError):
    """Configuration values have the wrong type.

    Out-of-range numbers are clamped, not reported; this error only covers
    values that cannot be interpreted at all (e.g. brightness = "bright").
    """

    def __init__(self, field: str, value: Any, error_msg: str, file_path: Optional[str] = None):
        """
        Initialize config validation error.

        Args:
            field: The configuration field that failed validation
            value: The invalid value
            error_msg: Why the value is invalid
            file_path: Path to the config file (optional)
        """
        recovery = f"Update the '{field}' value in your configuration"
        if file_path:
            recovery += f"\nConfig file: {file_path}"

        if "airports" in field:
            recovery += "\nEach [[airports]] entry needs a quoted code, e.g. code = \"KSFO\""
        elif "brightness" in field:
            recovery += "\nBrightness is a whole number from 0 to 255"

        super().__init__(
            parse_error=error_msg,
            file_path=file_path,
            user_message=f"Invalid configuration value for '{field}': {error_msg}",
            technical_message=f"Config validation failed for {field}={value!r}: {error_msg}",
            recovery_hint=recovery,
        )
        self.field = field
        self.value = value
