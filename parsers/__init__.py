"""Parsers package for reading WordPress export documents.

Package Structure:
- export_parser: WXR XML document to Channel/Item/Category models
- item_filter: publishable-post classification and taxonomy split
- pub_date: RFC 2822 publish date parsing
"""

from .export_parser import ExportParser
from .item_filter import Keep, Skip, SkipReason, classify, extract_taxonomy
from .pub_date import parse_pub_date

__all__ = [
    'ExportParser',
    'Keep',
    'Skip',
    'SkipReason',
    'classify',
    'extract_taxonomy',
    'parse_pub_date',
]
