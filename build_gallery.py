#!/usr/bin/env python3
"""
Project Showcase Gallery Builder

Reads the published project sheet, enriches each project with YouTube channel
data and writes one static gallery page per filter (all / video / shorts /
thumbnail). Supports configuration via config.yaml and environment variables.
"""

import logging
import sys
from pathlib import Path

from showcase.config import Config, ConfigurationError, is_placeholder
from showcase.gallery_renderer import render_gallery, render_message, write_pages
from showcase.logger_config import setup_logging
from showcase.models import FILTER_CATEGORIES
from showcase.pipeline import GalleryPipeline
from showcase.sheet_source import SourceFetchError

logger = logging.getLogger(__name__)


def main(config_file: str = None) -> int:
    # Load configuration
    config = Config(config_file)

    # Setup logging
    log_level = config.get('logging.level', 'INFO')
    log_file = config.get('logging.log_file', '')
    verbose = config.get_bool('logging.verbose', False)
    setup_logging(log_level=log_level, log_file=log_file if log_file else None, verbose=verbose)

    output_dir = Path(config.get('gallery.output_dir', 'site'))
    title = config.get('gallery.title', 'Projects')
    admin_url = config.get('admin_url', '') or ''

    logger.info("=" * 80)
    logger.info("🖼️  Project Showcase Gallery Builder")
    logger.info("=" * 80)
    logger.info(f"Output directory: {output_dir}")
    logger.info(f"YouTube enrichment: {'disabled' if is_placeholder(config.youtube_api_key) else 'enabled'}")
    logger.info("=" * 80)

    try:
        pipeline = GalleryPipeline.from_config(config)
        records = pipeline.load_and_process()

        pages = {
            category: render_gallery(pipeline.filter(category), category, title=title, admin_url=admin_url)
            for category in FILTER_CATEGORIES
        }
        for path in write_pages(pages, output_dir):
            logger.info(f"💾 Wrote {path}")

        _print_summary(pipeline, records)
        return 0

    except ConfigurationError as e:
        logger.error(f"❌ Configuration error: {e}")
        logger.error("   Set SHEET_CSV_URL or sheet.csv_url in config.yaml")
        _write_message_pages("Please configure the Sheet URL in config.yaml", title, output_dir)
        return 1
    except SourceFetchError as e:
        logger.error(f"❌ Could not load projects: {e}")
        _write_message_pages("Error loading projects.", title, output_dir)
        return 1
    except KeyboardInterrupt:
        logger.warning("\n\n⚠️  Interrupted by user")
        return 130
    except Exception as e:
        logger.error(f"\n❌ Fatal error: {e}", exc_info=True)
        return 1


def _write_message_pages(message: str, title: str, output_dir: Path) -> None:
    page = render_message(message, title=title)
    write_pages({category: page for category in FILTER_CATEGORIES}, output_dir)


def _print_summary(pipeline: GalleryPipeline, records) -> None:
    logger.info("\n" + "=" * 80)
    logger.info("📊 GALLERY SUMMARY")
    logger.info("=" * 80)
    for category in FILTER_CATEGORIES:
        logger.info(f"   {category:<10} {len(pipeline.filter(category))}")
    enriched = sum(1 for r in records if r.channel_id)
    logger.info(f"   🔗 With channel data: {enriched}/{len(records)}")
    logger.info(f"   📺 Channels cached: {len(pipeline.cache)}")
    logger.info("=" * 80)


if __name__ == '__main__':
    sys.exit(main(sys.argv[1] if len(sys.argv) > 1 else None))
