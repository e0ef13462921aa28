"""Report renderers."""

from passpal.services.rendering.text import TextRenderer

__all__ = ["TextRenderer"]
