"""Published Google Sheet (CSV) source"""

import csv
import io
import logging
from typing import Dict, List, Optional

import requests

from .config import ConfigurationError, is_placeholder

logger = logging.getLogger(__name__)


class SourceFetchError(Exception):
    pass


class SheetSource:
    def __init__(self, csv_url: str, timeout: int = 30, session: Optional[requests.Session] = None):
        self.csv_url = (csv_url or '').strip()
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch_csv(self) -> str:
        if is_placeholder(self.csv_url):
            raise ConfigurationError("Sheet CSV URL not set. Please configure the sheet URL in config.yaml")

        logger.info("📥 Fetching project sheet...")
        try:
            response = self.session.get(self.csv_url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise SourceFetchError(f"Failed to connect to spreadsheet: {exc}") from exc

        if response.status_code != 200:
            raise SourceFetchError(f"Spreadsheet request failed: HTTP {response.status_code}")

        try:
            return response.content.decode('utf-8-sig')
        except UnicodeDecodeError as exc:
            raise SourceFetchError(f"Spreadsheet is not valid UTF-8: {exc}") from exc

    @staticmethod
    def parse_csv(text: str) -> List[Dict[Optional[str], object]]:
        try:
            reader = csv.DictReader(io.StringIO(text))
            rows = list(reader)
        except csv.Error as exc:
            raise SourceFetchError(f"CSV parse error: {exc}") from exc

        if not rows:
            raise SourceFetchError("CSV is empty or could not be read")

        logger.info(f"📋 Parsed {len(rows)} row(s) from sheet (columns: {', '.join(reader.fieldnames or [])})")
        return rows

    def load_rows(self) -> List[Dict[Optional[str], object]]:
        return self.parse_csv(self.fetch_csv())
