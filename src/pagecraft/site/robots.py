"""
robots.txt generation.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from pydantic import BaseModel, Field, field_validator


class RobotsRule(BaseModel):
    """
    One ``User-agent`` block.

    Attributes:
        user_agent: Crawler the block applies to (``*`` for all).
        disallow: Paths the crawler must not fetch.
        allow: Paths explicitly allowed.
        crawl_delay: Seconds between requests.
    """
    user_agent: str = "*"
    disallow: List[str] = Field(default_factory=list)
    allow: List[str] = Field(default_factory=list)
    crawl_delay: Optional[float] = None

    model_config = {"extra": "forbid"}

    @field_validator("crawl_delay")
    @classmethod
    def _non_negative(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and value < 0:
            raise ValueError("crawl_delay must be >= 0")
        return value

    def lines(self) -> List[str]:
        lines = [f"User-agent: {self.user_agent}"]
        lines.extend(f"Disallow: {path}" for path in self.disallow)
        lines.extend(f"Allow: {path}" for path in self.allow)
        if self.crawl_delay is not None:
            delay = int(self.crawl_delay) if float(self.crawl_delay).is_integer() else self.crawl_delay
            lines.append(f"Crawl-delay: {delay}")
        return lines


DEFAULT_RULES = (RobotsRule(user_agent="*", allow=["/"]),)


def render_robots(rules: Optional[Iterable[RobotsRule]] = None, sitemap_url: Optional[str] = None) -> str:
    """
    robots.txt body: one block per rule separated by blank lines, allow-all by default.
    """
    blocks = ["\n".join(rule.lines()) for rule in (list(rules or ()) or DEFAULT_RULES)]
    body = "\n\n".join(blocks)
    if sitemap_url:
        body += f"\n\nSitemap: {sitemap_url}"
    return body + "\n"
