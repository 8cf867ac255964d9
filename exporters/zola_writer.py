"""Writer for Zola section index files and post pages."""

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Union

from config_loader import get_nested
from errors import OutputWriteError
from models import Page

FRONT_MATTER_DELIMITER = '+++'
DEFAULT_PAGINATE_BY = 5
DEFAULT_SECTION_FILENAME = '_index.md'


class ZolaWriter:
    """
    Writes Zola content files with TOML front matter.

    Two kinds of files are produced:
    1. Section index files, front matter only, one per directory
    2. Post pages: front matter followed by the markdown body

    Directories are created on demand. Any OSError is raised as
    OutputWriteError and is not retried.
    """

    def __init__(
        self,
        paginate_by: int = DEFAULT_PAGINATE_BY,
        section_filename: str = DEFAULT_SECTION_FILENAME,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the writer.

        Args:
            paginate_by: Number of posts per page in section listings
            section_filename: File name of the section index in each directory
            logger: Logger instance
        """
        self.paginate_by = paginate_by
        self.section_filename = section_filename
        self.logger = logger or logging.getLogger('wordpress_to_zola.exporters.zola_writer')

    @classmethod
    def from_config(cls, config: Dict[str, Any], logger: Optional[logging.Logger] = None) -> 'ZolaWriter':
        """Create a writer from the ``export`` config section."""
        return cls(
            paginate_by=get_nested(config, 'export.paginate_by', DEFAULT_PAGINATE_BY),
            section_filename=get_nested(config, 'export.section_filename', DEFAULT_SECTION_FILENAME),
            logger=logger
        )

    def write_section_index(self, directory: Union[str, Path]) -> Path:
        """
        Create ``directory`` if needed and write its section index.

        Returns:
            Path of the written index file
        """
        directory = Path(directory)
        self._make_dirs(directory)

        index_path = directory / self.section_filename
        self._write(index_path, self.render_section_index())
        self.logger.debug(f"Created section index {index_path}")
        return index_path

    def write_page(self, page: Page) -> Path:
        """
        Write a post page with its front matter.

        Returns:
            Path of the written page
        """
        path = Path(page.path)
        self._make_dirs(path.parent)

        content = self.render_front_matter(page) + page.markdown_body + '\n'
        self._write(path, content)
        self.logger.debug(f"Wrote {len(content)} characters to {path}")
        return path

    def render_section_index(self) -> str:
        """Front matter of a section index file."""
        lines = [
            FRONT_MATTER_DELIMITER,
            # show pages from this section in the parent listing
            'transparent = true',
            'sort_by = "date"',
            f'paginate_by = {self.paginate_by}',
            FRONT_MATTER_DELIMITER,
        ]
        return '\n'.join(lines) + '\n'

    def render_front_matter(self, page: Page) -> str:
        """Front matter block of a post page, closing delimiter included."""
        lines = [
            FRONT_MATTER_DELIMITER,
            f'title = "{escape_title(page.title)}"',
            f'date = {page.date.isoformat()}',
            '[taxonomies]',
            f'categories = {format_terms(page.categories)}',
            f'tags = {format_terms(page.tags)}',
            FRONT_MATTER_DELIMITER,
        ]
        return '\n'.join(lines) + '\n'

    def _make_dirs(self, directory: Path) -> None:
        """Create a directory tree, wrapping failures."""
        self.logger.debug(f"Creating directory {directory}")
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            self.logger.error(f"Failed to create directory {directory}: {e}")
            raise OutputWriteError(directory, e) from e

    def _write(self, path: Path, content: str) -> None:
        """Write a file as UTF-8, wrapping failures."""
        try:
            path.write_text(content, encoding='utf-8')
        except OSError as e:
            self.logger.error(f"Failed to write {path}: {e}")
            raise OutputWriteError(path, e) from e


def escape_title(title: str) -> str:
    """Escape double quotes for a TOML basic string; nothing else is touched."""
    return title.replace('"', '\\"')


def format_terms(terms: Iterable[str]) -> str:
    """Render taxonomy terms as an inline array: ``["a", "b"]``."""
    return '[' + ', '.join(f'"{term}"' for term in terms) + ']'


__all__ = [
    'DEFAULT_PAGINATE_BY',
    'DEFAULT_SECTION_FILENAME',
    'FRONT_MATTER_DELIMITER',
    'ZolaWriter',
    'escape_title',
    'format_terms',
]
