"""Zola content export package for the WordPress to Zola pipeline.

This package turns rendered posts into a Zola content tree on disk.

Package Structure:
- path_resolver: Maps post permalinks to page paths under the output root
- section_tracker: Remembers directories that already have a section index
- zola_writer: Writes section index files and pages with TOML front matter

Configuration Referenced:
- export.paginate_by: paginate_by value of every section index
- export.section_filename: Name of the section index file (_index.md)
- export.confine_to_output_root: Reject page paths escaping the output root
"""

from .path_resolver import is_within, resolve, resolve_under
from .section_tracker import SectionTracker
from .zola_writer import ZolaWriter, escape_title, format_terms

__all__ = [
    'SectionTracker',
    'ZolaWriter',
    'escape_title',
    'format_terms',
    'is_within',
    'resolve',
    'resolve_under',
]
