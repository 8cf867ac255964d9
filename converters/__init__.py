"""Converters package turning raw WordPress post HTML into Markdown."""

import logging
from typing import Any, Dict, Optional

from .content_normalizer import LINE_BREAK_TAG, normalize_line_breaks
from .markdown_converter import MarkdownConverter, render_markdown

logger = logging.getLogger('wordpress_to_zola.converters')


def convert_content(raw_html: str, converter: Optional[MarkdownConverter] = None,
                    config: Optional[Dict[str, Any]] = None) -> str:
    """
    Convenience function to turn a post body into Markdown.

    This runs the two conversion steps:
    1. Line-break normalization (literal newlines to ``<br>``)
    2. Markdown generation using markdownify

    Args:
        raw_html: Post body as stored in the export
        converter: Optional converter to reuse across posts
        config: Configuration used when a converter has to be created

    Returns:
        Markdown text

    Raises:
        RenderError: If the converter fails
    """
    if converter is None:
        converter = MarkdownConverter(config=config)
    return converter.render(normalize_line_breaks(raw_html))


__all__ = [
    'convert_content',
    'normalize_line_breaks',
    'render_markdown',
    'LINE_BREAK_TAG',
    'MarkdownConverter',
]
