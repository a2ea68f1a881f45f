"""Dependency injection container for the application."""
from dependency_injector import containers, providers
import requests

from poolcrawl.services.crawler import Crawler
from poolcrawl.services.fetcher import HttpFetcher
from poolcrawl.services.link_extractor import HtmlLinkExtractor
from poolcrawl import config as env


# Environment variables used by the container (read via `poolcrawl.config` helpers).
#
# USER_AGENT (str, default: "poolcrawl/0.1")
#   User-Agent header for outbound HTTP requests.
#
# HTTP_TIMEOUT (int seconds, default: 10)
#   Timeout for outbound HTTP requests.
#
# POOLCRAWL_BUDGET (int, default: 10)
#   Default cap on pages claimed per crawl when the caller does not pass one.
#
# POOLCRAWL_WORKERS (int, default: 4)
#   Default worker pool size.
#
# POOLCRAWL_IDLE_WAIT_SECONDS (float seconds, default: 0.1)
#   Longest an idle worker waits before re-checking the frontier and stop_event.
ENV = {
    "USER_AGENT": env.get_str_env("USER_AGENT", "poolcrawl/0.1"),
    "HTTP_TIMEOUT": env.get_int_env("HTTP_TIMEOUT", 10),
    "POOLCRAWL_BUDGET": env.get_int_env("POOLCRAWL_BUDGET", 10),
    "POOLCRAWL_WORKERS": env.get_int_env("POOLCRAWL_WORKERS", 4),
    "POOLCRAWL_IDLE_WAIT_SECONDS": env.get_float_env("POOLCRAWL_IDLE_WAIT_SECONDS", 0.1),
}


class Container(containers.DeclarativeContainer):
    """Dependency injection container for poolcrawl."""

    config = providers.Configuration(default=ENV)

    page_fetcher = providers.Singleton(
        HttpFetcher,
        user_agent=config.USER_AGENT.as_(str),
        http_client=providers.Object(requests.get),
        timeout=config.HTTP_TIMEOUT.as_(int),
    )

    link_extractor = providers.Singleton(
        HtmlLinkExtractor
    )

    crawler = providers.Factory(
        Crawler,
        fetcher=page_fetcher,
        link_extractor=link_extractor,
        idle_wait_seconds=config.POOLCRAWL_IDLE_WAIT_SECONDS.as_(float),
    )
