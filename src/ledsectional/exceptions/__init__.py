"""
Custom exception hierarchy for the LED sectional.

## Exception Hierarchy

```
LedSectionalError (base)
├── ConfigurationError
│   ├── ConfigFileNotFoundError
│   └── ConfigParseError
│       └── ConfigValidationError
├── WeatherDataError
│   ├── ReportParseError
│   └── MetarFetchError
└── DisplayError
    ├── LedIndexOutOfBoundsError
    └── BufferSizeMismatchError
```

## Usage

All custom exceptions inherit from `LedSectionalError`, which provides:

- `user_message`: Human-friendly message for display to users
- `technical_message`: Detailed message for logging
- `recoverable`: Whether the error can be recovered from
- `recovery_hint`: Optional suggestion for how to fix the issue
- `fault_status`: Status color the run loop shows while the error holds
- `log_line()`: One-line summary for the log

### Example: Bad weather payload

```python
from ledsectional.exceptions import ReportParseError

try:
    reports = parse_metars(payload)
except ReportParseError as e:
    logger.error(e.log_line())
    # Keep the previous display; show the fetch-error color
```

Missing fields never raise: configuration values are defaulted and
clamped, report fields are defaulted. Only a payload or config file that
cannot be parsed at all is an error.
"""

from .base import LedSectionalError
from .config import (
    ConfigFileNotFoundError,
    ConfigParseError,
    ConfigurationError,
    ConfigValidationError,
)
from .display import BufferSizeMismatchError, DisplayError, LedIndexOutOfBoundsError
from .handlers import format_error_for_display, wrap_pydantic_error
from .weather import MetarFetchError, ReportParseError, WeatherDataError

__all__ = [
    # Display
    "BufferSizeMismatchError",
    # Config
    "ConfigFileNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "ConfigurationError",
    "DisplayError",
    # Base
    "LedSectionalError",
    "LedIndexOutOfBoundsError",
    # Weather
    "MetarFetchError",
    "ReportParseError",
    "WeatherDataError",
    "format_error_for_display",
    "wrap_pydantic_error",
]
