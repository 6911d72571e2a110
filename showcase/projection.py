"""Filtering and display projection of enriched project records"""

from typing import Iterable, List, Optional

from .enrichment import ChannelCache
from .models import (
    FILTER_CATEGORIES,
    PLACEHOLDER_AVATAR,
    PLACEHOLDER_IMAGE,
    UNKNOWN_CHANNEL,
    ChannelInfo,
    ClickAction,
    DisplayRecord,
    ProjectRecord,
)
from .video_id import embed_url, extract_video_id, thumbnail_url


def resolve_thumbnail(record: ProjectRecord) -> Optional[str]:
    if record.thumb_link:
        return record.thumb_link
    if record.video_id:
        return thumbnail_url(record.video_id)
    return None


def resolve_channel(record: ProjectRecord, cache: ChannelCache) -> ChannelInfo:
    """Cache by channel id, then by channel link, then the provisional title, then Unknown."""
    channel = cache.get(record.channel_id) or cache.get(record.channel_link)
    if channel is not None:
        return channel
    if record.channel_title:
        return ChannelInfo(title=record.channel_title, avatar_url=PLACEHOLDER_AVATAR, subscriber_count='')
    return UNKNOWN_CHANNEL


def filter_records(records: Iterable[ProjectRecord], category: str, cache: ChannelCache) -> List[DisplayRecord]:
    category = (category or '').strip().lower()
    if category not in FILTER_CATEGORIES:
        raise ValueError(f"Unknown filter category '{category}', expected one of {', '.join(FILTER_CATEGORIES)}")

    return [
        DisplayRecord(
            record=record,
            thumbnail_url=resolve_thumbnail(record),
            channel=resolve_channel(record, cache),
        )
        for record in records
        if category == 'all' or record.type == category
    ]


def resolve_click_action(record: ProjectRecord) -> ClickAction:
    """
    thumbnail -> image view; video/shorts -> embedded player, or the raw link
    when no video id can be read from it; anything else -> image view.
    """
    if record.is_playable:
        video_id = extract_video_id(record.video_link)
        if video_id:
            return ClickAction(kind='video', target=embed_url(video_id))
        return ClickAction(kind='link', target=record.video_link)

    return ClickAction(kind='image', target=resolve_thumbnail(record) or PLACEHOLDER_IMAGE)
