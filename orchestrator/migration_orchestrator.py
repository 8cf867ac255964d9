"""
Migration orchestrator for coordinating the conversion pipeline.

This module provides the central coordinator that sequences the conversion
phases: Parse → Iterate → Done. Items are processed strictly in document
order; the first fatal error aborts the run and leaves already written files
in place.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from tqdm import tqdm

from config_loader import get_nested
from converters import MarkdownConverter, convert_content
from errors import RenderError
from exporters import SectionTracker, ZolaWriter, resolve_under
from logger import ProgressTracker, log_section
from models import Channel, Item, Page
from parsers import ExportParser, Skip, SkipReason, classify, parse_pub_date


class MigrationOrchestrator:
    """Central coordinator sequencing the conversion phases: Parse → Iterate → Done."""

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        logger: Optional[logging.Logger] = None,
        parser: Optional[ExportParser] = None,
        converter: Optional[MarkdownConverter] = None
    ):
        """
        Initialize migration orchestrator.

        Args:
            config: Configuration dictionary
            logger: Optional logger instance
            parser: Optional export parser (created on demand)
            converter: Optional markdown converter (created from config)
        """
        self.config = config or {}
        self.logger = logger or logging.getLogger('wordpress_to_zola.orchestrator')

        self.parser = parser or ExportParser()
        self.converter = converter or MarkdownConverter(config=self.config)

        self.confine = get_nested(self.config, 'export.confine_to_output_root', False)
        self.show_progress = get_nested(self.config, 'logging.show_progress', False)

    def run(self, input_path: Union[str, Path], output_dir: Union[str, Path, None] = None) -> Dict[str, Any]:
        """
        Convert the export document at ``input_path`` into a Zola content tree.

        Args:
            input_path: Path of the WordPress export XML
            output_dir: Output root; defaults to export.output_directory

        Returns:
            Statistics dictionary with conversion results

        Raises:
            MigrationError: On the first fatal error
            OSError: If the input document cannot be read
        """
        if output_dir is None:
            output_dir = get_nested(self.config, 'export.output_directory', './content')

        log_section("Parse")
        self.logger.info(f"Reading export document {input_path}")
        channel = self.parser.parse_file(input_path)
        self.logger.info(f"Found {len(channel.items)} items ({channel.count_by_type()})")

        return self.convert_channel(channel, output_dir)

    def convert_channel(self, channel: Channel, output_dir: Union[str, Path]) -> Dict[str, Any]:
        """
        Write pages and section indexes for every publishable post of ``channel``.

        A fresh SectionTracker and ZolaWriter are used for each call, so
        section indexes are written once per directory per run.
        """
        output_dir = Path(output_dir)
        sections = SectionTracker()
        writer = ZolaWriter.from_config(self.config)

        stats = {
            'items_total': len(channel.items),
            'pages_written': 0,
            'sections_created': 0,
            'skipped_unpublished': 0,
            'skipped_attachments': 0,
            'render_failures': 0,
        }

        log_section("Convert")
        self.logger.info(f"Writing content to {output_dir}")

        with ProgressTracker(total_items=len(channel.items), item_type='items') as progress:
            for item in tqdm(channel.items, desc='Converting', unit='item', disable=not self.show_progress):
                self._process_item(item, channel.base_site_url, output_dir, sections, writer, stats, progress)

        stats['sections'] = list(sections.sections)
        self._log_summary(stats)
        return stats

    def _process_item(
        self,
        item: Item,
        base_url: str,
        output_dir: Path,
        sections: SectionTracker,
        writer: ZolaWriter,
        stats: Dict[str, Any],
        progress: ProgressTracker
    ) -> None:
        """Run filter, resolve, section, render and write for one item."""
        decision = classify(item)
        if isinstance(decision, Skip):
            if decision.reason is SkipReason.ATTACHMENT:
                stats['skipped_attachments'] += 1
            else:
                stats['skipped_unpublished'] += 1
            progress.increment(skipped=True)
            return

        path = resolve_under(output_dir, base_url, item.link, confine=self.confine)
        self.logger.info(f"Post [{item.status.name.capitalize()}] {item.title} -> {path}")

        # First post under a directory creates its section index
        section = path.parent
        if sections.ensure(section):
            writer.write_section_index(section)
            stats['sections_created'] += 1

        date = parse_pub_date(item.pub_date, item.title)

        try:
            markdown = convert_content(item.raw_content, self.converter)
        except RenderError as e:
            self.logger.error(f"Skipping '{item.title}': {e}")
            stats['render_failures'] += 1
            progress.increment(success=False)
            return
        self.logger.debug(markdown)

        page = Page(
            path=path,
            title=item.title,
            date=date,
            markdown_body=markdown,
            categories=decision.taxonomy.categories,
            tags=decision.taxonomy.tags,
        )
        writer.write_page(page)
        stats['pages_written'] += 1
        progress.increment(success=True)

    def _log_summary(self, stats: Dict[str, Any]) -> None:
        """Log the conversion summary."""
        log_method = self.logger.warning if stats['render_failures'] else self.logger.info
        log_method(
            f"Conversion complete: {stats['pages_written']} pages, "
            f"{stats['sections_created']} sections, "
            f"{stats['skipped_unpublished']} unpublished and "
            f"{stats['skipped_attachments']} attachments skipped, "
            f"{stats['render_failures']} render failures"
        )


__all__ = ['MigrationOrchestrator']
