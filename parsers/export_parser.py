"""WordPress export (WXR) document parser."""

import logging
from pathlib import Path
from typing import BinaryIO, List, Optional, Union

from lxml import etree

from errors import MalformedDocumentError
from models import Category, Channel, Item, PostType, Status


class ExportParser:
    """
    Deserializes a WordPress export document into a Channel.

    Namespaced WXR fields are matched by local name so exports of any WXR
    version are accepted. Parsing is all-or-nothing: the first schema
    violation raises MalformedDocumentError and no partial Channel is returned.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger('wordpress_to_zola.parsers.export_parser')
        self._parser = etree.XMLParser(
            resolve_entities=False,
            no_network=True,
            huge_tree=True
        )

    def parse_file(self, path: Union[str, Path]) -> Channel:
        """
        Parse the export document stored at ``path``.

        Raises:
            OSError: If the file cannot be opened
            MalformedDocumentError: If the document does not match the schema
        """
        self.logger.debug(f"Reading export document {path}")
        with open(path, 'rb') as f:
            return self.parse(f)

    def parse(self, stream: BinaryIO) -> Channel:
        """
        Parse an export document from a binary stream.

        Args:
            stream: File-like object yielding the XML bytes

        Returns:
            Channel with items in document order
        """
        try:
            tree = etree.parse(stream, self._parser)
        except etree.XMLSyntaxError as e:
            raise MalformedDocumentError(f"Export document is not well-formed XML: {e}") from e

        root = tree.getroot()
        channel_el = root.find('channel')
        if channel_el is None:
            raise MalformedDocumentError(f"Missing <channel> inside <{root.tag}>")

        base_site_url = _required_text(channel_el, 'base_site_url', 'channel')

        items = []
        for index, item_el in enumerate(channel_el.findall('item')):
            items.append(self._parse_item(item_el, index))

        channel = Channel(base_site_url=base_site_url, items=items)
        self.logger.debug(
            f"Parsed {len(items)} items from channel {base_site_url} "
            f"({channel.count_by_type()})"
        )
        return channel

    def _parse_item(self, item_el, index: int) -> Item:
        """Build an Item from an <item> element."""
        context = f"item #{index + 1}"

        title_el = item_el.find('title')
        if title_el is None:
            raise MalformedDocumentError(f"Missing <title> in {context}")
        title = (title_el.text or '').strip()
        context = f"item #{index + 1} '{title}'"

        post_type_value = _required_text(item_el, 'post_type', context)
        status_value = _required_text(item_el, 'status', context)
        try:
            post_type = PostType(post_type_value)
        except ValueError:
            raise MalformedDocumentError(
                f"Unknown post_type '{post_type_value}' in {context}; "
                f"expected one of {[t.value for t in PostType]}"
            )
        try:
            status = Status(status_value)
        except ValueError:
            raise MalformedDocumentError(
                f"Unknown status '{status_value}' in {context}; "
                f"expected one of {[s.value for s in Status]}"
            )

        return Item(
            title=title,
            link=_required_text(item_el, 'link', context),
            pub_date=_required_text(item_el, 'pubDate', context),
            post_type=post_type,
            status=status,
            raw_content=_first_encoded(item_el, context),
            categories=_parse_categories(item_el, context),
        )


def _children_named(parent, local_name: str) -> List:
    """Child elements whose local name matches, whatever their namespace."""
    return [
        child for child in parent.iterchildren()
        if isinstance(child.tag, str) and etree.QName(child).localname == local_name
    ]


def _required_text(parent, local_name: str, context: str) -> str:
    """Return stripped text of a required child element."""
    matches = _children_named(parent, local_name)
    if not matches:
        raise MalformedDocumentError(f"Missing <{local_name}> in {context}")
    return (matches[0].text or '').strip()


def _first_encoded(item_el, context: str) -> str:
    """Return the body: the first child whose local name is ``encoded``."""
    encoded = _children_named(item_el, 'encoded')
    if not encoded:
        raise MalformedDocumentError(f"Missing <content:encoded> in {context}")
    return encoded[0].text or ''


def _parse_categories(item_el, context: str) -> List[Category]:
    """Collect item-level <category> elements in source order."""
    categories = []
    for cat_el in item_el.findall('category'):
        domain = cat_el.get('domain')
        nicename = cat_el.get('nicename')
        if domain is None or nicename is None:
            raise MalformedDocumentError(
                f"<category> without domain/nicename attributes in {context}"
            )
        categories.append(Category(domain=domain, name=nicename))
    return categories


__all__ = ['ExportParser']
