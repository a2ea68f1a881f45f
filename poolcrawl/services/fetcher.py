from __future__ import annotations

from typing import Callable, Protocol

import requests

from poolcrawl.domain.http_response import HttpResponse
from poolcrawl.exceptions import HttpFetchError, HttpStatusError


class Fetcher(Protocol):
    """Fetch a URL and return its response, raising on failure.

    Workers treat any exception from `fetch` as a failed page, so
    implementations are free to raise whatever fits their transport.
    """

    def fetch(self, url: str) -> HttpResponse: ...


class HttpFetcher:
    """Default fetcher: one GET per page, anything but 2xx is a failure.

    `http_client` defaults to `requests.get`; tests hand in a mock with the
    same call signature.
    """

    def __init__(self, user_agent: str, http_client: Callable = requests.get, timeout: int = 10):
        self.user_agent = user_agent
        self.http_client = http_client
        self.timeout = timeout

    def fetch(self, url: str) -> HttpResponse:
        try:
            resp = self.http_client(url, headers={"User-Agent": self.user_agent}, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise HttpFetchError(url, e) from e

        if resp.status_code < 200 or resp.status_code >= 300:
            raise HttpStatusError(url, resp.status_code)

        headers = getattr(resp, "headers", None)
        content_type = headers.get("Content-Type") if headers is not None else None
        return HttpResponse(resp.status_code, resp.text, content_type)
