#!/usr/bin/env python3
"""
Save the pool home page HTML to a file and report whether the usage
banner can still be parsed. Handy when the page markup changes.

Usage:
    python scripts/save_html.py [filename]
"""

import os
import sys
from pathlib import Path

import requests
from dotenv import load_dotenv

# Add project root to path
sys.path.append(str(Path(__file__).parent.parent))

from config.settings import DEFAULT_POOL_USAGE_URL, DEFAULT_REQUEST_TIMEOUT
from monitoring.pool_scraper import parse_pool_usage
from utils.exceptions import ParseError

def fetch_html(url):
    try:
        response = requests.get(url, timeout=DEFAULT_REQUEST_TIMEOUT)
        response.raise_for_status()  # Raise an error for bad HTTP responses
        if "charset" not in response.headers.get("Content-Type", "").lower():
            response.encoding = "utf-8"
        return response.text
    except requests.RequestException as e:
        print(f"Error fetching the page: {e}")
        return None

def save_html(html_content, filename="pool_page.html"):
    if html_content:
        with open(filename, "w", encoding="utf-8") as file:
            file.write(html_content)
        print(f"HTML content saved to {filename}")

def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    filename = argv[0] if argv else "pool_page.html"

    load_dotenv()
    url = os.getenv("POOL_USAGE_URL") or DEFAULT_POOL_USAGE_URL

    html = fetch_html(url)
    if not html:
        return 1

    save_html(html, filename)
    try:
        print(f"Usage banner parsed: {parse_pool_usage(html)}%")
    except ParseError as e:
        print(f"Usage banner NOT parsed: {e}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
