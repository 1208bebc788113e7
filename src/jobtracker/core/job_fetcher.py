from __future__ import annotations

import logging

import requests

from jobtracker.core.extractors import detect_extractor
from jobtracker.types import JobPosting

logger = logging.getLogger(__name__)


USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
)


class JobFetchError(Exception):
    status_code = 400


class JobFetchRateLimitedError(JobFetchError):
    status_code = 429


def fetch_job_html(url: str, timeout_sec: int = 30) -> str:
    try:
        response = requests.get(url, timeout=timeout_sec, headers={"User-Agent": USER_AGENT})
    except requests.RequestException as exc:
        logger.warning("Failed to fetch job URL %s: %s", url, exc)
        raise JobFetchError("Failed to fetch job posting") from exc

    if response.status_code == 429:
        logger.warning("Rate limited while fetching job URL %s", url)
        raise JobFetchRateLimitedError("Too many requests to LinkedIn, try again later")
    if not response.ok:
        logger.warning("Job URL %s returned HTTP %s", url, response.status_code)
        raise JobFetchError("Failed to fetch job posting")
    return response.text


def fetch_job_posting(url: str, timeout_sec: int = 30) -> JobPosting:
    extractor = detect_extractor(url)
    if extractor is None:
        raise JobFetchError(f"No extractor for {url}")

    html = fetch_job_html(url, timeout_sec=timeout_sec)
    posting = extractor.extract(url, html)
    logger.info(
        "Extracted %s posting: title=%r company=%r location=%r",
        extractor.name,
        posting.title,
        posting.company,
        posting.location,
    )
    return posting
