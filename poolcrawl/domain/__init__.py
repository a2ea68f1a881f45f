"""Domain objects for poolcrawl - explicit re-exports to satisfy linters."""
from .http_response import HttpResponse as HttpResponse
from .page_result import PageResult as PageResult
from .crawl_report import CrawlReport as CrawlReport
from .visited_set import VisitedSet as VisitedSet
from .frontier import Frontier as Frontier
from .result_aggregator import ResultAggregator as ResultAggregator
from .work_tracker import WorkTracker as WorkTracker

__all__ = [
    "HttpResponse",
    "PageResult",
    "CrawlReport",
    "VisitedSet",
    "Frontier",
    "ResultAggregator",
    "WorkTracker",
]
