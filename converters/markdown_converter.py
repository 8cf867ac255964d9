"""HTML to Markdown rendering of WordPress post bodies."""

import logging
import re
from typing import Any, Dict, Optional

from bs4 import BeautifulSoup
from markdownify import MarkdownConverter as MarkdownifyConverter

from errors import RenderError

logger = logging.getLogger('wordpress_to_zola.converters.markdown_converter')


class MarkdownConverter(MarkdownifyConverter):
    """
    Renders post HTML to Markdown.

    This class extends markdownify.MarkdownConverter to provide:
    - Options driven by the ``markdown`` config section
    - ``<br>`` rendered as a hard line break that survives cleanup
    - Image alt text falling back to the title attribute
    - Whitespace cleanup of the generated markdown
    """

    def __init__(self, logger: logging.Logger = None, config: Dict[str, Any] = None, **kwargs):
        """Initialize markdown converter with logger and configuration."""
        self.config = config or {}
        markdown_config = self.config.get('markdown', {})

        markdownify_options = {
            'heading_style': markdown_config.get('heading_style', 'ATX').lower(),
            'bullets': markdown_config.get('bullets', '-'),
            'newline_style': markdown_config.get('newline_style', 'backslash').lower(),
            'escape_asterisks': False,
            'escape_underscores': False,
        }
        markdownify_options.update(kwargs)

        super().__init__(**markdownify_options)

        self.logger = logger or logging.getLogger('wordpress_to_zola.converters.markdown_converter')

    def render(self, html_content: str) -> str:
        """
        Convert normalized post HTML to Markdown.

        Args:
            html_content: HTML with explicit ``<br>`` line breaks

        Returns:
            Markdown text without trailing newline

        Raises:
            RenderError: If parsing or conversion fails
        """
        try:
            soup = self._parse_html(html_content)
            raw_markdown = self.convert_soup(soup)
        except Exception as e:
            raise RenderError(f"Markdown conversion failed: {e}") from e

        return self._clean_markdown(raw_markdown)

    def _parse_html(self, html_content: str) -> BeautifulSoup:
        """Parse HTML content with BeautifulSoup."""
        return BeautifulSoup(html_content, 'lxml')

    def _clean_markdown(self, markdown: str) -> str:
        """Clean up markdown formatting issues."""
        keep_space_breaks = self.options['newline_style'] == 'spaces'
        break_marker = '  ' if keep_space_breaks else '\\'

        lines = []
        for line in markdown.split('\n'):
            # Two trailing spaces are a hard line break in spaces style
            if keep_space_breaks and line.strip() and line.endswith('  '):
                lines.append(line.rstrip() + '  ')
            elif line.strip() == break_marker:
                # <br> between blocks, nothing to break
                lines.append('')
            else:
                lines.append(line.rstrip())

        # A hard break ending a block renders as a literal backslash
        for index, line in enumerate(lines):
            is_block_end = index + 1 == len(lines) or not lines[index + 1].strip()
            if is_block_end and line.strip() and line.endswith(break_marker):
                lines[index] = line[:-len(break_marker)].rstrip()
        markdown = '\n'.join(lines)

        markdown = re.sub(r'\n{3,}', '\n\n', markdown)

        return markdown.strip('\n')

    def convert_img(self, el, text, parent_tags=None, **kwargs):
        """Handle images."""
        src = el.get('src', '')
        alt = el.get('alt', '')
        title = el.get('title', '')

        # Use title as alt if alt is missing
        if not alt and title:
            alt = title

        if title:
            return f'![{alt}]({src} "{title}")'
        return f'![{alt}]({src})'


def render_markdown(html_content: str, config: Optional[Dict[str, Any]] = None) -> str:
    """Render a single HTML fragment with a throwaway converter."""
    return MarkdownConverter(config=config).render(html_content)


__all__ = ['MarkdownConverter', 'render_markdown']
