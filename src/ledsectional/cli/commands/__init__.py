"""CLI commands for ledsectional."""

from .codes import codes, url
from .config import config
from .render import render
from .run import run

__all__ = ["codes", "config", "render", "run", "url"]
