"""Classification of export items into publishable posts and skipped items."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Union

from models import CATEGORY_DOMAIN, TAG_DOMAIN, Category, Item, PostType, Status, Taxonomy

logger = logging.getLogger('wordpress_to_zola.parsers.item_filter')


class SkipReason(Enum):
    """Why an item produces no output."""
    UNPUBLISHED = "unpublished"
    ATTACHMENT = "attachment"


@dataclass(frozen=True)
class Keep:
    """Item is a published post; carries its taxonomy."""
    taxonomy: Taxonomy


@dataclass(frozen=True)
class Skip:
    """Item is dropped."""
    reason: SkipReason


def classify(item: Item) -> Union[Keep, Skip]:
    """
    Decide whether an item becomes a page.

    Only published posts are kept. Published attachments are logged and
    dropped; everything unpublished is dropped silently.
    """
    if item.status is not Status.PUBLISH:
        return Skip(SkipReason.UNPUBLISHED)
    if item.post_type is PostType.ATTACHMENT:
        logger.debug(f"Ignoring attachment {item.title}")
        return Skip(SkipReason.ATTACHMENT)
    return Keep(extract_taxonomy(item.categories))


def extract_taxonomy(categories: Iterable[Category]) -> Taxonomy:
    """Split categories into category and tag slugs by taxonomy domain."""
    taxonomy = Taxonomy()
    for category in categories:
        if category.domain == TAG_DOMAIN:
            taxonomy.tags.append(category.name)
        elif category.domain == CATEGORY_DOMAIN:
            taxonomy.categories.append(category.name)
    return taxonomy


__all__ = ['Keep', 'Skip', 'SkipReason', 'classify', 'extract_taxonomy']
