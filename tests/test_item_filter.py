"""Tests for item classification and taxonomy extraction."""

import logging

import pytest

from models import Category, Item, PostType, Status, Taxonomy
from parsers.item_filter import Keep, Skip, SkipReason, classify, extract_taxonomy


def make_item(post_type=PostType.POST, status=Status.PUBLISH, categories=None):
    return Item(
        title='Hello world',
        link='https://example.com/2020/01/hello-world/',
        pub_date='Mon, 01 Jan 2020 00:00:00 +0000',
        post_type=post_type,
        status=status,
        raw_content='<p>Hello</p>',
        categories=categories or [],
    )


class TestClassify:
    """Test which items become pages."""

    def test_published_post_is_kept(self):
        decision = classify(make_item())

        assert isinstance(decision, Keep)
        assert decision.taxonomy == Taxonomy()

    @pytest.mark.parametrize('status', [Status.DRAFT, Status.INHERIT, Status.PRIVATE])
    def test_unpublished_post_is_skipped(self, status):
        assert classify(make_item(status=status)) == Skip(SkipReason.UNPUBLISHED)

    def test_unpublished_attachment_is_skipped_as_unpublished(self):
        decision = classify(make_item(post_type=PostType.ATTACHMENT, status=Status.INHERIT))

        assert decision == Skip(SkipReason.UNPUBLISHED)

    def test_published_attachment_is_skipped_and_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger='wordpress_to_zola.parsers.item_filter')

        decision = classify(make_item(post_type=PostType.ATTACHMENT))

        assert decision == Skip(SkipReason.ATTACHMENT)
        assert 'Ignoring attachment Hello world' in caplog.text

    def test_kept_post_carries_taxonomy(self):
        item = make_item(categories=[
            Category('category', 'news'),
            Category('post_tag', 'rust'),
            Category('post_tag', 'zola'),
        ])

        decision = classify(item)

        assert decision.taxonomy.categories == ['news']
        assert decision.taxonomy.tags == ['rust', 'zola']


class TestExtractTaxonomy:
    """Test routing of terms by domain."""

    def test_empty(self):
        taxonomy = extract_taxonomy([])

        assert taxonomy.categories == []
        assert taxonomy.tags == []

    def test_order_and_duplicates_preserved(self):
        taxonomy = extract_taxonomy([
            Category('post_tag', 'b'),
            Category('post_tag', 'a'),
            Category('post_tag', 'b'),
        ])

        assert taxonomy.tags == ['b', 'a', 'b']

    def test_other_domains_ignored(self):
        taxonomy = extract_taxonomy([
            Category('post_format', 'post-format-aside'),
            Category('category', 'news'),
            Category('series', 'intro'),
        ])

        assert taxonomy.categories == ['news']
        assert taxonomy.tags == []

    def test_categories_and_tags_interleaved(self):
        taxonomy = extract_taxonomy([
            Category('post_tag', 'rust'),
            Category('category', 'news'),
            Category('post_tag', 'zola'),
            Category('category', 'blog'),
        ])

        assert taxonomy.categories == ['news', 'blog']
        assert taxonomy.tags == ['rust', 'zola']
