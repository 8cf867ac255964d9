"""Data models for the WordPress to Zola conversion pipeline."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Dict, List

logger = logging.getLogger('wordpress_to_zola')


class PostType(Enum):
    """Kinds of export items the converter understands."""
    POST = "post"
    ATTACHMENT = "attachment"


class Status(Enum):
    """Publication status of an export item."""
    PUBLISH = "publish"
    DRAFT = "draft"
    INHERIT = "inherit"
    PRIVATE = "private"


# Taxonomy domains routed into front matter; anything else is ignored.
CATEGORY_DOMAIN = "category"
TAG_DOMAIN = "post_tag"


@dataclass(frozen=True)
class Category:
    """A taxonomy term attached to an item."""

    domain: str
    name: str  # nicename, the slug form of the term


@dataclass(frozen=True)
class Item:
    """A single post or attachment from the export channel.

    ``raw_content`` holds the first ``encoded`` field of the item. WXR repeats
    that local name (``content:encoded`` then ``excerpt:encoded``); only the
    first occurrence is the post body, later ones are not data.
    """

    title: str
    link: str
    pub_date: str
    post_type: PostType
    status: Status
    raw_content: str
    categories: List[Category] = field(default_factory=list)


@dataclass(frozen=True)
class Channel:
    """The whole export: site base URL and items in document order."""

    base_site_url: str
    items: List[Item] = field(default_factory=list)

    def count_by_type(self) -> Dict[str, int]:
        """Count items per post type."""
        counts = {t.value: 0 for t in PostType}
        for item in self.items:
            counts[item.post_type.value] += 1
        return counts


@dataclass
class Taxonomy:
    """Category and tag slugs extracted from an item, in source order."""

    categories: List[str] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)


@dataclass
class Page:
    """A rendered post ready to be written to disk."""

    path: Path
    title: str
    date: datetime
    markdown_body: str
    categories: List[str] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)


__all__ = [
    'CATEGORY_DOMAIN',
    'TAG_DOMAIN',
    'Category',
    'Channel',
    'Item',
    'Page',
    'PostType',
    'Status',
    'Taxonomy',
]
