"""Spreadsheet row normalization into ProjectRecords"""

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from .models import PROJECT_TYPES, ProjectRecord
from .video_id import extract_video_id

logger = logging.getLogger(__name__)

VIDEO_LINK_ALIASES = ('video_link', 'videolink', 'video link')
SHORTS_LINK_ALIASES = ('shorts_link', 'shortslink', 'shorts link')
THUMB_LINK_ALIASES = ('thumbnail_link', 'thumbnaillink', 'thumbnail link')
THUMB_KEY_FRAGMENT = 'thumbnail'
TYPE_KEY = 'type'
DEFAULT_TYPE = 'video'


def normalize_keys(row: Mapping[Optional[str], object]) -> Dict[str, str]:
    """Lowercase and trim every column name; None values read as empty strings."""
    normalized = {}
    for key, value in row.items():
        # csv.DictReader files surplus cells under a None key
        if key is None:
            continue
        normalized[str(key).strip().lower()] = '' if value is None else str(value).strip()
    return normalized


def _first_value(row: Dict[str, str], aliases: Sequence[str]) -> str:
    for alias in aliases:
        value = row.get(alias)
        if value:
            return value
    return ''


def _resolve_thumb_link(row: Dict[str, str]) -> str:
    thumb_link = _first_value(row, THUMB_LINK_ALIASES)
    if thumb_link:
        return thumb_link
    for key, value in row.items():
        if THUMB_KEY_FRAGMENT in key:
            return value
    return ''


def infer_type(video_link: str, shorts_link: str, thumb_link: str) -> str:
    if shorts_link:
        return 'shorts'
    if '/shorts/' in video_link:
        return 'shorts'
    if video_link:
        return 'video'
    if thumb_link:
        return 'thumbnail'
    return DEFAULT_TYPE


def normalize_row(row: Mapping[Optional[str], object]) -> Optional[ProjectRecord]:
    """Build a ProjectRecord from one raw row, or None if it has neither link."""
    fields = normalize_keys(row)

    video_link = _first_value(fields, VIDEO_LINK_ALIASES)
    shorts_link = _first_value(fields, SHORTS_LINK_ALIASES)
    if not video_link and shorts_link:
        video_link = shorts_link

    thumb_link = _resolve_thumb_link(fields)

    if not video_link and not thumb_link:
        return None

    project_type = fields.get(TYPE_KEY, '').strip().lower()
    if project_type and project_type not in PROJECT_TYPES:
        logger.debug(f"Unrecognised type '{project_type}', inferring from links")
        project_type = ''
    if not project_type:
        project_type = infer_type(video_link, shorts_link, thumb_link)

    return ProjectRecord(
        video_link=video_link,
        thumb_link=thumb_link,
        type=project_type,
        video_id=extract_video_id(video_link),
    )


def normalize_rows(rows: Iterable[Mapping[Optional[str], object]]) -> List[ProjectRecord]:
    """Normalize raw rows in order, dropping rows without any link."""
    records = []
    dropped = 0

    for row_num, row in enumerate(rows, 1):
        record = normalize_row(row)
        if record is None:
            dropped += 1
            logger.debug(f"Row {row_num}: no video or thumbnail link, skipping")
            continue
        records.append(record)

    logger.info(f"📋 Normalized {len(records)} project(s), dropped {dropped} empty row(s)")
    return records
