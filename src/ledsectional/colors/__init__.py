"""Color palette for the LED sectional.

Single source of truth for every color the strip shows. Colors are
8-bit RGB at full intensity; brightness is applied when a frame is
written to the strip, never here.

## Color Scheme

```
Flight categories          Overlays                Status (whole strip)
-----------------          --------                --------------------
VFR   green                windy VFR  yellow       connecting   orange
MVFR  blue                 lightning  white        connected    purple
IFR   red                  unknown    off          fetch error  cyan
LIFR  magenta
```

## Usage

```python
from ledsectional.colors import COLORS

state.set(index, COLORS.LIGHTNING)
```
"""

from ledsectional.models import Color


class COLORS:
    """Standard color constants - 8-bit RGB (0-255)."""

    # ============================================================================
    # FLIGHT CATEGORIES
    # ============================================================================

    VFR: Color = Color(r=0, g=255, b=0)
    """Green - visual flight rules"""

    MVFR: Color = Color(r=0, g=0, b=255)
    """Blue - marginal VFR"""

    IFR: Color = Color(r=255, g=0, b=0)
    """Red - instrument flight rules"""

    LIFR: Color = Color(r=255, g=0, b=255)
    """Magenta - low IFR"""

    WIND: Color = Color(r=255, g=255, b=0)
    """Yellow - VFR with wind or gust at or above the threshold"""

    UNKNOWN: Color = Color(r=0, g=0, b=0)
    """Off - no report or unrecognized category"""

    LIGHTNING: Color = Color(r=255, g=255, b=255)
    """White - lightning flash"""

    # ============================================================================
    # STATUS
    # ============================================================================

    CONNECTING: Color = Color(r=255, g=165, b=0)
    """Orange - booting or waiting for the network"""

    CONNECTED: Color = Color(r=128, g=0, b=128)
    """Purple - network is up, first fetch pending"""

    FETCH_ERROR: Color = Color(r=0, g=255, b=255)
    """Cyan - weather fetch or parse failed"""

    # ============================================================================
    # ALIASES
    # ============================================================================

    OFF: Color = UNKNOWN
    BLACK: Color = UNKNOWN
    WHITE: Color = LIGHTNING


__all__ = ["COLORS"]
