"""
Centralized error handling utilities.

Each layer translates errors to be more useful at the next level up:

```
┌─────────────────────────────────────────┐
│  USER LAYER (CLI)                   │
│  - Formats error.user_message       │
│  - Shows error.recovery_hint        │
└─────────────────────────────────────────┘
                  ↑
                  │ LedSectionalError
                  │
┌─────────────────────────────────────────┐
│  APPLICATION LAYER (models, client) │
│  - Catches low-level exceptions     │
│  - Converts to LedSectionalError    │
└─────────────────────────────────────────┘
                  ↑
                  │ tomllib, json, requests, pydantic
                  │
┌─────────────────────────────────────────┐
│  LOW LEVEL (parsers, HTTP)          │
└─────────────────────────────────────────┘
```

## Handling Patterns

| Pattern | Code |
|---------|------|
| Convert pydantic errors | `raise wrap_pydantic_error(e, path) from e` |
| Show error to user | `message, hint = format_error_for_display(e)` |
| Log in the run loop | `logger.error(e.log_line())` |
| Fault display | `getattr(COLORS, e.fault_status)` |
"""

from typing import Optional

from .base import LedSectionalError
from .config import ConfigValidationError


def wrap_pydantic_error(error: Exception, file_path: Optional[str] = None) -> LedSectionalError:
    """
    Convert Pydantic validation errors to LED sectional exceptions.

    Args:
        error: The Pydantic ValidationError
        file_path: Path to the config file that failed validation

    Returns:
        A ConfigValidationError naming the offending field(s)
    """
    from pydantic import ValidationError

    if isinstance(error, ValidationError):
        errors = error.errors()
        if len(errors) == 1:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error.get('loc', ('unknown',)))
            return ConfigValidationError(
                field=field,
                value=first_error.get('input', None),
                error_msg=first_error.get('msg', 'validation failed'),
                file_path=file_path
            )
        if errors:
            error_lines = []
            for err in errors:
                field = ".".join(str(loc) for loc in err.get('loc', ('unknown',)))
                msg = err.get('msg', 'validation failed')
                error_lines.append(f"  - {field}: {msg}")

            combined_msg = f"{len(errors)} validation errors:\n" + "\n".join(error_lines)
            return ConfigValidationError(
                field="multiple fields",
                value=None,
                error_msg=combined_msg,
                file_path=file_path
            )

    return ConfigValidationError(
        field="unknown",
        value=None,
        error_msg=str(error),
        file_path=file_path
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Args:
        error: The exception to format

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, LedSectionalError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None
