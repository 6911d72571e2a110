"""YouTube video identifier extraction and derived URLs"""

import re
from typing import Optional

YOUTUBE_BASE = 'https://www.youtube.com'
YOUTUBE_IMAGE_BASE = 'https://img.youtube.com'

VIDEO_ID_LENGTH = 11

# youtu.be/<id>, /v/<id>, /u/<x>/<id>, /embed/<id>, watch?v=<id>, /shorts/<id>
# The leading greedy .* makes the last recognised marker in the URL win.
_VIDEO_ID_PATTERN = re.compile(
    r'^.*((youtu\.be/)|(v/)|(/u/\w/)|(embed/)|(watch\?)|(shorts/))\??v?=?([^#&?]*).*'
)


def extract_video_id(url: Optional[str]) -> Optional[str]:
    """
    Parse a YouTube URL into its 11-character video id.

    Returns None for anything that is not a recognised URL shape or whose id
    has the wrong length. Never raises.
    """
    if not url or not isinstance(url, str):
        return None

    match = _VIDEO_ID_PATTERN.match(url.strip())
    if not match:
        return None

    video_id = match.group(8)
    if len(video_id) != VIDEO_ID_LENGTH:
        return None
    return video_id


def channel_url(channel_id: str) -> str:
    return f"{YOUTUBE_BASE}/channel/{channel_id}"


def thumbnail_url(video_id: str) -> str:
    return f"{YOUTUBE_IMAGE_BASE}/vi/{video_id}/maxresdefault.jpg"


def embed_url(video_id: str) -> str:
    return f"{YOUTUBE_BASE}/embed/{video_id}?autoplay=1"
