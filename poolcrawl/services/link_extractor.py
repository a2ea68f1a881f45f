import logging
from typing import Callable, Optional, Protocol
from urllib.parse import urljoin

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)


class LinkExtractor(Protocol):
    def extract(self, content: str, scope: str, page_url: Optional[str] = None) -> set[str]: ...


class HtmlLinkExtractor:
    """Collect `<a href>` targets that fall inside the crawl scope.

    Relative hrefs are resolved against `page_url` (or `scope` when no page
    URL is given). A link is in scope when it starts with the scope prefix.
    Never raises: unparseable content yields an empty set.
    """

    def __init__(
        self,
        soup_factory: Optional[Callable[[str], BeautifulSoup]] = None,
    ):
        self._soup_factory = soup_factory or (lambda html: BeautifulSoup(html, "html.parser"))

    def extract(self, content: str, scope: str, page_url: Optional[str] = None) -> set[str]:
        if not content:
            return set()

        try:
            soup = self._soup_factory(content)
        except Exception:
            logger.exception("Error parsing content from %s", page_url or scope)
            return set()

        base = page_url or scope
        urls = set()
        for a in soup.find_all("a", href=True):
            href = a.get("href")
            try:
                abs_url = urljoin(base, href)
            except ValueError:
                logger.debug("Skipping (malformed href) %r on %s", href, base)
                continue
            if not abs_url.startswith(scope):
                logger.debug("Skipping (out of scope) %s -> not under %s", abs_url, scope)
                continue
            urls.add(abs_url)
        return urls
