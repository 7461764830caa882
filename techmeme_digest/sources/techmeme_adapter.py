from typing import Callable, List, Optional, Tuple

import requests
from bs4 import BeautifulSoup
from pydantic import ValidationError

from techmeme_digest.config.constants import (
    DEFAULT_HTTP_TIMEOUT,
    FALLBACK_MIN_TEXT_LEN,
    MAX_ITEMS,
    TECHMEME_ORIGIN,
    TECHMEME_URL,
)
from techmeme_digest.errors import EmptyResultError, FetchError
from techmeme_digest.models import HeadlineItem
from techmeme_digest.utils import get_logger

logger = get_logger(__name__)

Strategy = Callable[[BeautifulSoup, str, int], List[HeadlineItem]]


def absolutize(href: str, origin: str = TECHMEME_ORIGIN) -> str:
    if href.startswith("/"):
        return origin + href
    return href


def _accept(items: List[HeadlineItem], text: str, href: Optional[str], origin: str) -> None:
    url = absolutize(href, origin)
    try:
        items.append(HeadlineItem(text=text, url=url))
    except ValidationError:
        logger.warning("techmeme_adapter: drop item %r due to invalid url %r", text[:60], url)


def primary_strategy(soup: BeautifulSoup, origin: str, limit: int) -> List[HeadlineItem]:
    """Headline entries marked with the site's ``ii`` class."""
    items: List[HeadlineItem] = []
    for el in soup.select(".ii"):
        if len(items) >= limit:
            break
        link = el.find("a")
        href = link.get("href") if link else None
        text = el.get_text().strip()
        if text and href:
            _accept(items, text, href, origin)
    return items


def emphasis_fallback_strategy(soup: BeautifulSoup, origin: str, limit: int) -> List[HeadlineItem]:
    """Long ``<strong>`` runs with their own or an enclosing link."""
    items: List[HeadlineItem] = []
    for el in soup.find_all("strong"):
        if len(items) >= limit:
            break
        link = el.find("a") or el.find_parent("a")
        href = link.get("href") if link else None
        text = el.get_text().strip()
        if len(text) > FALLBACK_MIN_TEXT_LEN and href:
            _accept(items, text, href, origin)
    return items


STRATEGIES: Tuple[Tuple[str, Strategy], ...] = (
    ("primary", primary_strategy),
    ("emphasis_fallback", emphasis_fallback_strategy),
)


def extract(html: str, origin: str = TECHMEME_ORIGIN, limit: int = MAX_ITEMS,
            strategies: Tuple[Tuple[str, Strategy], ...] = STRATEGIES) -> List[HeadlineItem]:
    """Run the strategies in order and return the first non-empty result."""
    soup = BeautifulSoup(html or "", "html.parser")
    for name, strategy in strategies:
        items = strategy(soup, origin, limit)
        if items:
            logger.info("techmeme_adapter strategy=%s items=%d", name, len(items))
            return items
        logger.warning("techmeme_adapter strategy=%s found no items", name)
    return []


class HeadlineExtractor:
    def __init__(self, session: requests.Session, url: str = TECHMEME_URL,
                 origin: str = TECHMEME_ORIGIN, limit: int = MAX_ITEMS,
                 timeout: float = DEFAULT_HTTP_TIMEOUT):
        self.session = session
        self.url = url
        self.origin = origin
        self.limit = limit
        self.timeout = timeout

    def _get_html(self) -> str:
        try:
            r = self.session.get(self.url, timeout=self.timeout)
            r.raise_for_status()
        except requests.RequestException as e:
            logger.error("techmeme_adapter fetch failed url=%s error=%s", self.url, e)
            raise FetchError(f"Failed to fetch {self.url}: {e}", cause=e) from e
        return r.text

    def fetch(self) -> List[HeadlineItem]:
        items = extract(self._get_html(), self.origin, self.limit)
        if not items:
            logger.error("techmeme_adapter: no headlines found by any strategy")
            raise EmptyResultError(f"No headlines extracted from {self.url}")
        logger.info("techmeme_adapter fetched_items=%d", len(items))
        return items
