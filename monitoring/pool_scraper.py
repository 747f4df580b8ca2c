"""
Pool Usage Scraper

Fetches the Lazdynai swimming pool home page and extracts the current
occupancy percentage from the usage banner.
"""

import re
import logging

import requests

from utils.exceptions import FetchError, ReadError, ParseError

logger = logging.getLogger(__name__)

# The page renders the value as e.g. 'užimtumas: <span style="font-size:1.5rem;">42%</span>'.
# Any change to that markup makes extraction fail.
USAGE_PATTERN = re.compile(
    r'Šiuo metu esantis Lazdynų baseino ir sporto klubo užimtumas: '
    r'<span style="font-size:\d+\.\d+rem;">(\d+)%</span>',
    re.ASCII,
)

MAX_PERCENTAGE = 100


def parse_pool_usage(html_content, pattern=USAGE_PATTERN):
    """
    Extract the usage percentage from the page HTML.

    Args:
        html_content (str): Raw page HTML
        pattern (re.Pattern): Pattern whose first group captures the percentage

    Returns:
        int: Usage percentage

    Raises:
        ParseError: If the banner is missing or the value is not a valid percentage
    """
    match = pattern.search(html_content)
    if match is None:
        raise ParseError("could not find usage percentage")

    raw_value = match.group(1)
    try:
        usage = int(raw_value)
    except ValueError as e:
        raise ParseError(f"error converting percentage {raw_value!r}: {e}") from e

    if not 0 <= usage <= MAX_PERCENTAGE:
        raise ParseError(f"usage percentage out of range: {usage}")
    return usage


def _read_body(response):
    # Without a charset header requests falls back to ISO-8859-1,
    # which mangles the Lithuanian banner text.
    content_type = response.headers.get("Content-Type", "")
    if "charset" not in content_type.lower():
        response.encoding = "utf-8"
    return response.text


def fetch_pool_usage(url, timeout=None, session=None):
    """
    Download the pool page once and return the current usage percentage.

    Args:
        url (str): Page URL
        timeout (float, optional): Request timeout in seconds
        session (requests.Session, optional): Session to issue the request with

    Returns:
        int: Usage percentage

    Raises:
        FetchError: If the request fails or returns a non-success status
        ReadError: If the response body cannot be read
        ParseError: If the percentage cannot be extracted
    """
    http = session or requests

    logger.info(f"Fetching pool usage from {url}")
    try:
        response = http.get(url, timeout=timeout, stream=True)
    except requests.RequestException as e:
        raise FetchError(f"error fetching the URL: {e}") from e

    with response:
        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            raise FetchError(f"error fetching the URL: {e}") from e

        try:
            html_content = _read_body(response)
        except requests.RequestException as e:
            raise ReadError(f"error reading the response body: {e}") from e

    return parse_pool_usage(html_content)
