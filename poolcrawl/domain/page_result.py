from dataclasses import dataclass


@dataclass(frozen=True)
class PageResult:
    """Outcome of one claimed URL.

    Exactly one is recorded per URL a worker claims, whether or not the
    fetch succeeded.
    """

    url: str
    links_found: int
    success: bool

    @classmethod
    def failed(cls, url: str) -> "PageResult":
        return cls(url=url, links_found=0, success=False)
