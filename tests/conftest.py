"""Shared fixtures: builders for small WordPress export documents."""

import pytest

WXR_TEMPLATE = '''<?xml version="1.0" encoding="UTF-8" ?>
<rss version="2.0"
    xmlns:excerpt="http://wordpress.org/export/1.2/excerpt/"
    xmlns:content="http://purl.org/rss/1.0/modules/content/"
    xmlns:dc="http://purl.org/dc/elements/1.1/"
    xmlns:wp="http://wordpress.org/export/1.2/">
<channel>
    <title>Example Blog</title>
    <link>{base_url}</link>
    <wp:wxr_version>1.2</wp:wxr_version>
    <wp:base_site_url>{base_url}</wp:base_site_url>
    <wp:base_blog_url>{base_url}</wp:base_blog_url>
    <wp:category>
        <wp:term_id>1</wp:term_id>
        <wp:category_nicename><![CDATA[news]]></wp:category_nicename>
        <wp:cat_name><![CDATA[News]]></wp:cat_name>
    </wp:category>
{items}
</channel>
</rss>
'''

ITEM_TEMPLATE = '''    <item>
        <title><![CDATA[{title}]]></title>
        <link>{link}</link>
        <pubDate>{pub_date}</pubDate>
        <dc:creator><![CDATA[admin]]></dc:creator>
        <content:encoded><![CDATA[{content}]]></content:encoded>
        <excerpt:encoded><![CDATA[{excerpt}]]></excerpt:encoded>
        <wp:post_id>{post_id}</wp:post_id>
        <wp:status><![CDATA[{status}]]></wp:status>
        <wp:post_type><![CDATA[{post_type}]]></wp:post_type>
{categories}
    </item>'''


def build_item(
    title='Hello world',
    link='https://example.com/2020/01/hello-world/',
    pub_date='Mon, 01 Jan 2020 00:00:00 +0000',
    content='<p>Hello</p>',
    excerpt='',
    status='publish',
    post_type='post',
    categories=(),
    post_id=1,
):
    """Render one <item>; ``categories`` is a sequence of (domain, nicename)."""
    category_xml = '\n'.join(
        f'        <category domain="{domain}" nicename="{nicename}"><![CDATA[{nicename.title()}]]></category>'
        for domain, nicename in categories
    )
    return ITEM_TEMPLATE.format(
        title=title,
        link=link,
        pub_date=pub_date,
        content=content,
        excerpt=excerpt,
        status=status,
        post_type=post_type,
        categories=category_xml,
        post_id=post_id,
    )


def build_wxr(items=(), base_url='https://example.com'):
    """Render a full export document around pre-rendered items."""
    return WXR_TEMPLATE.format(base_url=base_url, items='\n'.join(items))


@pytest.fixture
def item_xml():
    """Factory for <item> snippets."""
    return build_item


@pytest.fixture
def wxr_bytes():
    """Factory for complete export documents as bytes."""
    def _build(items=(), base_url='https://example.com'):
        return build_wxr(items, base_url).encode('utf-8')
    return _build


@pytest.fixture
def wxr_file(tmp_path):
    """Factory writing an export document to disk and returning its path."""
    def _write(items=(), base_url='https://example.com', name='export.xml'):
        path = tmp_path / name
        path.write_text(build_wxr(items, base_url), encoding='utf-8')
        return path
    return _write
