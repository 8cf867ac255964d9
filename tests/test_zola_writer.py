"""Tests for section index and page emission."""

from datetime import datetime, timedelta, timezone

import pytest

from errors import OutputWriteError
from exporters.zola_writer import ZolaWriter, escape_title, format_terms
from models import Page

SECTION_INDEX = (
    '+++\n'
    'transparent = true\n'
    'sort_by = "date"\n'
    'paginate_by = 5\n'
    '+++\n'
)


def make_page(path, **overrides):
    values = {
        'path': path,
        'title': 'Hello world',
        'date': datetime(2020, 1, 1, tzinfo=timezone.utc),
        'markdown_body': 'Hello',
        'categories': ['news'],
        'tags': ['rust', 'zola'],
    }
    values.update(overrides)
    return Page(**values)


class TestSectionIndex:

    def test_exact_content(self, tmp_path):
        writer = ZolaWriter()

        index_path = writer.write_section_index(tmp_path / '2020' / '01')

        assert index_path == tmp_path / '2020' / '01' / '_index.md'
        assert index_path.read_text(encoding='utf-8') == SECTION_INDEX

    def test_paginate_by_and_filename_from_config(self, tmp_path):
        writer = ZolaWriter.from_config({
            'export': {'paginate_by': 10, 'section_filename': 'index.md'}
        })

        index_path = writer.write_section_index(tmp_path)

        assert index_path.name == 'index.md'
        assert 'paginate_by = 10\n' in index_path.read_text(encoding='utf-8')

    def test_defaults_without_config(self):
        writer = ZolaWriter.from_config({})

        assert writer.paginate_by == 5
        assert writer.section_filename == '_index.md'


class TestPage:

    def test_exact_content(self, tmp_path):
        writer = ZolaWriter()
        page = make_page(tmp_path / '2020' / '01' / 'hello-world.md')

        path = writer.write_page(page)

        assert path.read_text(encoding='utf-8') == (
            '+++\n'
            'title = "Hello world"\n'
            'date = 2020-01-01T00:00:00+00:00\n'
            '[taxonomies]\n'
            'categories = ["news"]\n'
            'tags = ["rust", "zola"]\n'
            '+++\n'
            'Hello\n'
        )

    def test_quotes_in_title_escaped(self, tmp_path):
        writer = ZolaWriter()
        page = make_page(tmp_path / 'p.md', title='Hi "there"')

        text = writer.write_page(page).read_text(encoding='utf-8')

        assert 'title = "Hi \\"there\\""\n' in text

    def test_empty_taxonomies(self, tmp_path):
        writer = ZolaWriter()
        page = make_page(tmp_path / 'p.md', categories=[], tags=[])

        text = writer.write_page(page).read_text(encoding='utf-8')

        assert 'categories = []\n' in text
        assert 'tags = []\n' in text

    def test_date_offset_kept(self):
        writer = ZolaWriter()
        date = datetime(2015, 7, 15, 18, 30, 5, tzinfo=timezone(timedelta(hours=2)))

        front_matter = writer.render_front_matter(make_page('p.md', date=date))

        assert 'date = 2015-07-15T18:30:05+02:00\n' in front_matter

    def test_existing_file_overwritten(self, tmp_path):
        writer = ZolaWriter()
        path = tmp_path / 'p.md'
        path.write_text('old', encoding='utf-8')

        writer.write_page(make_page(path, markdown_body='new'))

        assert path.read_text(encoding='utf-8').endswith('+++\nnew\n')

    def test_unicode_body(self, tmp_path):
        writer = ZolaWriter()

        path = writer.write_page(make_page(tmp_path / 'p.md', title='Grüße', markdown_body='日本語'))

        text = path.read_text(encoding='utf-8')
        assert 'title = "Grüße"' in text
        assert text.endswith('日本語\n')


class TestWriteFailures:

    def test_directory_blocked_by_file(self, tmp_path):
        blocker = tmp_path / 'blocker'
        blocker.write_text('', encoding='utf-8')
        writer = ZolaWriter()

        with pytest.raises(OutputWriteError) as exc_info:
            writer.write_section_index(blocker / 'section')

        assert isinstance(exc_info.value.cause, OSError)

    def test_page_path_is_a_directory(self, tmp_path):
        (tmp_path / 'p.md').mkdir()
        writer = ZolaWriter()

        with pytest.raises(OutputWriteError) as exc_info:
            writer.write_page(make_page(tmp_path / 'p.md'))

        assert exc_info.value.path == tmp_path / 'p.md'


class TestHelpers:

    def test_escape_title_only_touches_quotes(self):
        assert escape_title('a "b" \\ c') == 'a \\"b\\" \\ c'

    def test_format_terms(self):
        assert format_terms(['a', 'b']) == '["a", "b"]'
        assert format_terms([]) == '[]'
