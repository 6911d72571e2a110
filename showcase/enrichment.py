"""
Channel enrichment for project records.

Two dependent YouTube lookups run in order:

    Stage A  videos.list    video id   -> channel id + channel title
    Stage B  channels.list  channel id -> title, avatar, subscriber count

Stage B results land in a ChannelCache that outlives individual loads, so a
reload only asks the API about channels it has not seen yet. A failed batch
is logged and skipped; enrichment never aborts the pipeline.
"""

import logging
import threading
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, TypeVar

from .models import PLACEHOLDER_AVATAR, ChannelInfo, ProjectRecord
from .video_id import channel_url
from .youtube_client import EnrichmentChunkError, YouTubeDataClient

logger = logging.getLogger(__name__)

T = TypeVar('T')

CHUNK_SIZE = YouTubeDataClient.MAX_BATCH_SIZE


def format_subscriber_count(count) -> str:
    """1234 -> '1.2K', 2500000 -> '2.5M', missing/zero/garbage -> '0'."""
    if not count:
        return '0'
    try:
        num = int(str(count).strip())
    except ValueError:
        return '0'

    if num >= 1_000_000:
        return f"{_one_decimal(num / 1_000_000)}M"
    if num >= 1_000:
        return f"{_one_decimal(num / 1_000)}K"
    return str(num)


def _one_decimal(value: float) -> str:
    # ties round away from zero on the exact binary value: 1.25 -> 1.3, 1.15 -> 1.1
    return str(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def chunked(items: Sequence[T], size: int = CHUNK_SIZE) -> Iterator[List[T]]:
    if size < 1:
        raise ValueError("chunk size must be positive")
    for start in range(0, len(items), size):
        yield list(items[start:start + size])


def unique_values(values: Iterable[Optional[str]]) -> List[str]:
    """Non-empty values, duplicates removed, first-seen order kept."""
    seen = set()
    result = []
    for value in values:
        if value and value not in seen:
            seen.add(value)
            result.append(value)
    return result


class ChannelCache:
    """
    Channel details keyed by bare channel id and by channel profile URL.

    Written only by EnrichmentClient; read by the projection at render time.
    Both keys of a channel are stored under one lock acquisition so readers
    never see a half-written channel. Entries are never evicted.
    """

    def __init__(self):
        self._entries: Dict[str, ChannelInfo] = {}
        self._channel_ids = set()
        self._lock = threading.Lock()

    def get(self, key: Optional[str]) -> Optional[ChannelInfo]:
        if not key:
            return None
        with self._lock:
            return self._entries.get(key)

    def contains(self, channel_id: str) -> bool:
        with self._lock:
            return channel_id in self._entries or channel_url(channel_id) in self._entries

    def put(self, channel_id: str, info: ChannelInfo):
        with self._lock:
            self._entries[channel_id] = info
            self._entries[channel_url(channel_id)] = info
            self._channel_ids.add(channel_id)

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._channel_ids)


class EnrichmentClient:
    def __init__(self, client: Optional[YouTubeDataClient], cache: Optional[ChannelCache] = None,
                 chunk_size: int = CHUNK_SIZE):
        if chunk_size < 1 or chunk_size > YouTubeDataClient.MAX_BATCH_SIZE:
            raise ValueError(f"chunk_size must be between 1 and {YouTubeDataClient.MAX_BATCH_SIZE}")
        self.client = client
        self.cache = cache if cache is not None else ChannelCache()
        self.chunk_size = chunk_size

    @property
    def has_credentials(self) -> bool:
        return self.client is not None and bool(self.client.api_key)

    def resolve_video_channels(self, video_ids: Iterable[Optional[str]]) -> Dict[str, Dict[str, str]]:
        """Stage A: {video_id: {'channel_id', 'channel_title'}} for every id the API found."""
        ids = unique_values(video_ids)
        if not self.has_credentials or not ids:
            return {}

        resolved: Dict[str, Dict[str, str]] = {}
        chunks = list(chunked(ids, self.chunk_size))
        for idx, chunk in enumerate(chunks, 1):
            try:
                resolved.update(self.client.fetch_video_snippets(chunk))
            except EnrichmentChunkError as e:
                logger.error(f"Video batch {idx}/{len(chunks)} ({len(chunk)} ids) failed: {e}")
            except Exception as e:
                logger.error(f"Video batch {idx}/{len(chunks)} ({len(chunk)} ids) failed unexpectedly: {e}",
                             exc_info=True)

        logger.info(f"🎬 Resolved channels for {len(resolved)}/{len(ids)} video(s)")
        return resolved

    def resolve_channel_details(self, channel_ids: Iterable[Optional[str]]) -> int:
        """Stage B: look up channels not yet cached and store them. Returns how many were added."""
        ids = unique_values(channel_ids)
        if not self.has_credentials or not ids:
            return 0

        needed = [channel_id for channel_id in ids if not self.cache.contains(channel_id)]
        if not needed:
            logger.debug("All channels already cached")
            return 0

        added = 0
        chunks = list(chunked(needed, self.chunk_size))
        for idx, chunk in enumerate(chunks, 1):
            try:
                channels = self.client.fetch_channel_details(chunk)
            except EnrichmentChunkError as e:
                logger.error(f"Channel batch {idx}/{len(chunks)} ({len(chunk)} ids) failed: {e}")
                continue
            except Exception as e:
                logger.error(f"Channel batch {idx}/{len(chunks)} ({len(chunk)} ids) failed unexpectedly: {e}",
                             exc_info=True)
                continue

            for channel in channels:
                info = ChannelInfo(
                    title=channel.get('title') or '',
                    avatar_url=channel.get('avatar_url') or PLACEHOLDER_AVATAR,
                    subscriber_count=format_subscriber_count(channel.get('subscriber_count')),
                )
                self.cache.put(channel['channel_id'], info)
                added += 1

        logger.info(f"📺 Cached {added} new channel(s) ({len(self.cache)} total)")
        return added

    def enrich(self, records: List[ProjectRecord]) -> List[ProjectRecord]:
        """Fill channel_id / channel_title / channel_link on records, then cache channel details."""
        if not self.has_credentials:
            logger.warning("⚠️  YouTube API key not configured, skipping channel enrichment")
            return records

        video_channels = self.resolve_video_channels(record.video_id for record in records)

        channel_ids = []
        for record in records:
            resolved = video_channels.get(record.video_id) if record.video_id else None
            if not resolved:
                continue
            record.channel_id = resolved['channel_id']
            record.channel_title = resolved['channel_title']
            if not record.channel_link:
                record.channel_link = channel_url(record.channel_id)
            channel_ids.append(record.channel_id)

        self.resolve_channel_details(channel_ids)
        return records
