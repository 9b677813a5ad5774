"""Collects a site's description and icon from its home page."""

import argparse
import json
import sys

import requests
from bs4 import BeautifulSoup

_DEFAULT_URLS = ("http://360.cn", "http://99bill.com", "http://baidu.com")


def _attr(element, name):
    value = element.get(name)
    if value is None:
        return None
    if isinstance(value, list):
        return " ".join(value)
    return value


def extract_site_info(html) -> dict[str, str]:
    """Return the "description" and "icon" fields found in the page, where present."""
    soup = BeautifulSoup(html, "html.parser")
    fields: dict[str, str] = {}
    for meta in soup.select("head meta"):
        if (_attr(meta, "name") or "").lower() == "description":
            content = _attr(meta, "content")
            if content is not None:
                fields["description"] = content
    for link in soup.select("head link"):
        if (_attr(link, "rel") or "").lower() == "icon":
            href = _attr(link, "href")
            if href is not None:
                fields["icon"] = href
    if "description" not in fields:
        title = "".join(t.get_text() for t in soup.select("head title"))
        if title:
            fields["description"] = title
    for img in soup.select("div[class='logo'] img"):
        fields["icon"] = _attr(img, "src") or ""
    return fields


def crawl(urls, fetch) -> dict[str, dict[str, str]]:
    """Fetch each URL with fetch(url) and extract its info; failed fetches are reported and skipped."""
    result = {}
    for url in urls:
        try:
            html = fetch(url)
        except (OSError, ValueError) as exc:
            print(str(exc))
            continue
        result[url] = extract_site_info(html)
    return result


def _fetch(url: str) -> str:
    response = requests.get(url, timeout=30)
    response.raise_for_status()
    return response.text


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Print the description and icon of web sites.")
    parser.add_argument("urls", nargs="*", default=list(_DEFAULT_URLS))
    args = parser.parse_args(argv)
    result = crawl(args.urls, _fetch)
    for url, fields in result.items():
        for name, value in fields.items():
            print(f"{url}\t\t{name}\t:\t{value}")
    print("--------------------------------------- Reuslt -------------------------------")
    print(json.dumps(result, ensure_ascii=False, indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":
    sys.exit(main())