"""Gallery pipeline: sheet -> normalized records -> channel enrichment -> filtered display records"""

import logging
from typing import List, Optional

from .config import Config, is_placeholder
from .enrichment import ChannelCache, EnrichmentClient
from .models import ClickAction, DisplayRecord, ProjectRecord
from .normalizer import normalize_rows
from .projection import filter_records, resolve_click_action
from .sheet_source import SheetSource
from .youtube_client import YouTubeDataClient

logger = logging.getLogger(__name__)


class GalleryPipeline:
    def __init__(self, sheet_source: SheetSource, enrichment_client: EnrichmentClient):
        self.sheet_source = sheet_source
        self.enrichment_client = enrichment_client
        self.records: List[ProjectRecord] = []

    @classmethod
    def from_config(cls, config: Config, cache: Optional[ChannelCache] = None) -> 'GalleryPipeline':
        sheet_source = SheetSource(
            csv_url=config.sheet_csv_url,
            timeout=config.get_int('sheet.timeout', 30),
        )

        api_key = config.youtube_api_key
        youtube_client = None
        if not is_placeholder(api_key):
            youtube_client = YouTubeDataClient(
                api_key=api_key.strip(),
                api_base=config.get('youtube.api_base', None),
                timeout=config.get_float('youtube.timeout', 10.0),
                max_retries=config.get_int('youtube.max_retries', 2),
            )

        return cls(sheet_source, EnrichmentClient(youtube_client, cache=cache))

    @property
    def cache(self) -> ChannelCache:
        return self.enrichment_client.cache

    def load_and_process(self) -> List[ProjectRecord]:
        """Fetch the sheet and rebuild all records. Raises ConfigurationError / SourceFetchError."""
        rows = self.sheet_source.load_rows()

        logger.info("[Step 1/2] Normalizing sheet rows...")
        records = normalize_rows(rows)

        logger.info("[Step 2/2] Enriching with channel data...")
        self.records = self.enrichment_client.enrich(records)

        logger.info(f"✅ {len(self.records)} project(s) ready")
        return self.records

    def filter(self, category: str = 'all') -> List[DisplayRecord]:
        return filter_records(self.records, category, self.cache)

    @staticmethod
    def resolve_click_action(record: ProjectRecord) -> ClickAction:
        return resolve_click_action(record)
