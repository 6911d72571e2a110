"""Shared pytest fixtures for gallery tests."""

from typing import Dict, List, Optional
from unittest.mock import MagicMock

import pytest

from showcase.enrichment import ChannelCache
from showcase.youtube_client import YouTubeDataClient


def make_response(status_code: int = 200, payload=None, text: str = '', content: Optional[bytes] = None):
    """Build a requests.Response stand-in."""
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    response.content = content if content is not None else text.encode('utf-8')
    if isinstance(payload, Exception):
        response.json.side_effect = payload
    else:
        response.json.return_value = payload
    return response


def video_item(video_id: str, channel_id: str, channel_title: str = 'Channel') -> Dict:
    return {
        'id': video_id,
        'snippet': {'channelId': channel_id, 'channelTitle': channel_title},
    }


def channel_item(channel_id: str, title: str = 'Channel', subscribers: Optional[str] = '1500') -> Dict:
    item = {
        'id': channel_id,
        'snippet': {
            'title': title,
            'thumbnails': {'default': {'url': f'https://yt3.ggpht.com/{channel_id}.jpg'}},
        },
        'statistics': {},
    }
    if subscribers is not None:
        item['statistics']['subscriberCount'] = subscribers
    return item


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep real credentials in the shell from leaking into config tests."""
    for name in ('SHEET_CSV_URL', 'YOUTUBE_API_KEY', 'SHEET_TIMEOUT', 'YOUTUBE_TIMEOUT',
                 'YOUTUBE_MAX_RETRIES', 'YOUTUBE_API_BASE', 'GALLERY_OUTPUT_DIR', 'GALLERY_TITLE',
                 'ADMIN_URL', 'LOGGING_LEVEL', 'LOGGING_LOG_FILE', 'LOGGING_VERBOSE'):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def mock_session():
    return MagicMock()


@pytest.fixture
def youtube_client(mock_session) -> YouTubeDataClient:
    return YouTubeDataClient(api_key='test_key', session=mock_session, max_retries=0, retry_delay=0)


@pytest.fixture
def channel_cache() -> ChannelCache:
    return ChannelCache()


@pytest.fixture
def sample_rows() -> List[Dict[str, str]]:
    return [
        {'Video_Link ': 'https://youtu.be/dQw4w9WgXcQ', 'Thumbnail_Link': '', 'Type': ''},
        {'Video_Link ': '', 'Shorts_Link': 'https://youtube.com/shorts/abcdefghijk', 'Type': ''},
        {'Video_Link ': '', 'Thumbnail_Link': 'https://example.com/thumb.png', 'Type': ''},
        {'Video_Link ': '', 'Thumbnail_Link': '', 'Type': 'video'},
    ]
