from .ansi import AnsiTarget, PlainTextTarget, buffer_to_ansi
from .base import RenderTarget

__all__ = ["AnsiTarget", "PlainTextTarget", "RenderTarget", "buffer_to_ansi"]
