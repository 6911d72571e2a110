"""
Gallery domain models.

ProjectRecord is created by the normalizer and filled in once by enrichment.
ChannelInfo is what the channel cache hands out. DisplayRecord and ClickAction
are read-time projections handed to the renderer.
"""

from dataclasses import dataclass
from typing import Dict, Optional

PROJECT_TYPES = ('video', 'shorts', 'thumbnail')
FILTER_CATEGORIES = ('all',) + PROJECT_TYPES

PLACEHOLDER_AVATAR = 'https://cdn-icons-png.flaticon.com/512/847/847969.png'
PLACEHOLDER_IMAGE = 'https://placehold.co/600x400/000/FFF?text=No+Image'


@dataclass
class ProjectRecord:
    """One spreadsheet row that carries a video link, a thumbnail link, or both."""
    video_link: str = ''
    thumb_link: str = ''
    type: str = 'video'
    video_id: Optional[str] = None
    channel_id: Optional[str] = None
    channel_link: str = ''
    channel_title: Optional[str] = None

    @property
    def is_playable(self) -> bool:
        return self.type in ('video', 'shorts')

    def to_row(self) -> Dict[str, str]:
        """Raw spreadsheet row that normalizes back to this record."""
        return {
            'video_link': self.video_link,
            'thumbnail_link': self.thumb_link,
            'type': self.type,
        }


@dataclass(frozen=True)
class ChannelInfo:
    title: str
    avatar_url: str
    subscriber_count: str


UNKNOWN_CHANNEL = ChannelInfo(title='Unknown', avatar_url=PLACEHOLDER_AVATAR, subscriber_count='')


@dataclass(frozen=True)
class DisplayRecord:
    record: ProjectRecord
    thumbnail_url: Optional[str]
    channel: ChannelInfo

    @property
    def playable(self) -> bool:
        return self.record.is_playable


@dataclass(frozen=True)
class ClickAction:
    """What activating a card opens: an image view, an embedded video, or an external link."""
    kind: str
    target: str
