"""YouTube Data API v3 batch lookups (videos.list / channels.list)"""

import logging
from typing import Dict, List, Optional, Sequence

import requests

from .retry import retry_with_backoff

logger = logging.getLogger(__name__)


class EnrichmentChunkError(Exception):
    pass


class YouTubeDataClient:
    API_BASE = "https://www.googleapis.com/youtube/v3"
    MAX_BATCH_SIZE = 50  # videos.list / channels.list id limit

    def __init__(
        self,
        api_key: str,
        api_base: Optional[str] = None,
        timeout: float = 10,
        max_retries: int = 2,
        retry_delay: float = 1.0,
        session: Optional[requests.Session] = None,
    ):
        self.api_key = api_key
        self.api_base = (api_base or self.API_BASE).rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()
        self.requests_made = 0

        self._send = retry_with_backoff(
            max_retries=max_retries,
            initial_delay=retry_delay,
            exceptions=(requests.ConnectionError, requests.Timeout),
        )(self._send_once)

    def _send_once(self, url: str, params: Dict[str, str]) -> requests.Response:
        self.requests_made += 1
        return self.session.get(url, params=params, timeout=self.timeout)

    def _get_items(self, endpoint: str, part: str, ids: Sequence[str]) -> List[Dict]:
        if len(ids) > self.MAX_BATCH_SIZE:
            raise ValueError(f"At most {self.MAX_BATCH_SIZE} ids per request, got {len(ids)}")

        params = {
            'part': part,
            'id': ','.join(ids),
            'key': self.api_key,
        }

        try:
            response = self._send(f"{self.api_base}/{endpoint}", params)
        except requests.RequestException as exc:
            raise EnrichmentChunkError(f"{endpoint} request failed: {exc}") from exc

        if response.status_code != 200:
            raise EnrichmentChunkError(
                f"{endpoint} request failed: HTTP {response.status_code} {self._extract_error(response)}"
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise EnrichmentChunkError(f"{endpoint} returned malformed JSON: {exc}") from exc

        if not isinstance(data, dict):
            raise EnrichmentChunkError(f"{endpoint} returned unexpected payload type {type(data).__name__}")

        items = data.get('items') or []
        if not isinstance(items, list):
            raise EnrichmentChunkError(f"{endpoint} returned malformed 'items'")
        return items

    def fetch_video_snippets(self, video_ids: Sequence[str]) -> Dict[str, Dict[str, str]]:
        """Map each found video id to its channel id and channel title."""
        result = {}
        for item in self._get_items('videos', 'snippet', video_ids):
            snippet = item.get('snippet') or {}
            video_id = item.get('id')
            channel_id = snippet.get('channelId')
            if not video_id or not channel_id:
                logger.warning(f"Skipping video item without id/channelId: {item.get('id')!r}")
                continue
            result[video_id] = {
                'channel_id': channel_id,
                'channel_title': snippet.get('channelTitle', ''),
            }
        return result

    def fetch_channel_details(self, channel_ids: Sequence[str]) -> List[Dict[str, object]]:
        """Title, default avatar URL and raw subscriber count per found channel."""
        channels = []
        for item in self._get_items('channels', 'snippet,statistics', channel_ids):
            channel_id = item.get('id')
            if not channel_id:
                logger.warning("Skipping channel item without id")
                continue
            snippet = item.get('snippet') or {}
            statistics = item.get('statistics') or {}
            avatar = ((snippet.get('thumbnails') or {}).get('default') or {}).get('url', '')
            channels.append({
                'channel_id': channel_id,
                'title': snippet.get('title', ''),
                'avatar_url': avatar,
                'subscriber_count': statistics.get('subscriberCount'),
            })
        return channels

    @staticmethod
    def _extract_error(response: requests.Response) -> str:
        try:
            data = response.json()
            message = data.get('error', {}).get('message')
            return message or response.text[:200]
        except (ValueError, AttributeError):
            return response.text[:200]
