from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlparse

from bs4 import BeautifulSoup

from jobtracker.types import JobPosting


@dataclass(frozen=True, slots=True)
class ElementMatch:
    tag: str
    css_class: str

    def extract(self, soup: BeautifulSoup) -> str:
        element = soup.find(self.tag, class_=self.css_class)
        if element is None:
            return ""
        return element.get_text(" ", strip=True)


@dataclass(frozen=True, slots=True)
class PostingExtractor:
    name: str
    host_marker: str
    title: ElementMatch
    company: ElementMatch
    location: ElementMatch

    def matches(self, url: str) -> bool:
        return self.host_marker in urlparse(url).netloc.lower()

    def extract(self, url: str, html: str) -> JobPosting:
        soup = BeautifulSoup(html, "html.parser")
        return JobPosting(
            url=url,
            title=self.title.extract(soup),
            company=self.company.extract(soup),
            location=self.location.extract(soup),
        )


LINKEDIN = PostingExtractor(
    name="linkedin",
    host_marker="linkedin.com",
    title=ElementMatch("h1", "top-card-layout__title"),
    company=ElementMatch("a", "topcard__org-name-link"),
    location=ElementMatch("span", "topcard__flavor--bullet"),
)

EXTRACTORS: tuple[PostingExtractor, ...] = (LINKEDIN,)


def detect_extractor(url: str) -> PostingExtractor | None:
    for extractor in EXTRACTORS:
        if extractor.matches(url):
            return extractor
    return None
