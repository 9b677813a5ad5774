"""Crawls the housing authority pages and stores the parsed counts as JSON."""

import argparse
import logging
import os
import platform
import sys

import requests

from hellokit.housing import BeijingHouseParser, last_day

logger = logging.getLogger(__name__)

_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 6.1; WOW64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/42.0.2311.152 Safari/537.36"
)

if platform.system().lower() == "windows":
    _DEFAULT_OUTPUT = "e:/1"
    _DEFAULT_LOG_FILE = "e:/1/crawling.log"
else:
    _DEFAULT_OUTPUT = "/var/mysql_backups"
    _DEFAULT_LOG_FILE = "/var/mysql_backups/crawling.log"


class HousePageProcessor:
    """Holds one parser per crawled URL and feeds each page to its parser."""

    def __init__(self):
        beijing = BeijingHouseParser()
        self.parsers = {beijing.url: beijing}

    def process(self, url, html):
        """Parse the page fetched from url; return its readable JSON, or None on failure."""
        parser = self.parsers.get(url)
        if parser is None:
            logger.info("Cannot find HTML parser for url : %s", url)
            return None
        try:
            parser.parse(html)
        except ValueError as exc:
            logger.info("parse url : %s failed: %s", url, exc)
            return None
        text = parser.to_json(True)
        print(text)
        return text

    def save_data(self, output_dir, now=None) -> list[str]:
        """Write each parser's compact JSON under output_dir; return the paths written."""
        written = []
        output_dir = os.fspath(output_dir)
        for parser in self.parsers.values():
            output_dir = os.path.join(output_dir, parser.name())
            try:
                os.makedirs(output_dir, mode=0o755, exist_ok=True)
                logger.info("os.MkdirAll <%s> OK", output_dir)
            except OSError as exc:
                logger.info("os.MkdirAll <%s> failed: %s", output_dir, exc)
            path = os.path.join(output_dir, last_day(now) + ".json")
            try:
                with open(path, "w", encoding="utf-8") as fp:
                    fp.write(parser.to_json(False, now))
            except OSError as exc:
                logger.info("writer JSON data to <%s> failed: %s", path, exc)
                continue
            logger.info("WriteFile to <%s> OK", path)
            written.append(path)
        return written


def _fetch(url: str) -> str:
    response = requests.get(url, headers={"User-Agent": _USER_AGENT}, timeout=30)
    response.raise_for_status()
    return response.text


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Crawl housing statistics pages.")
    parser.add_argument("-output", "--output", default=_DEFAULT_OUTPUT,
                        help="The dir where to store the crawled output data")
    parser.add_argument("-logfile", "--logfile", default=_DEFAULT_LOG_FILE, help="The log file")
    args = parser.parse_args(argv)

    log_format = "%(asctime)s %(filename)s:%(lineno)d: %(message)s"
    try:
        logging.basicConfig(filename=args.logfile, level=logging.INFO, format=log_format,
                            datefmt="%Y/%m/%d %H:%M:%S")
    except OSError as exc:
        logging.basicConfig(level=logging.INFO, format=log_format, datefmt="%Y/%m/%d %H:%M:%S")
        logger.info("os.OpenFile <%s> failed : %s", args.logfile, exc)

    try:
        os.makedirs(args.output, mode=0o755, exist_ok=True)
    except OSError as exc:
        logger.info("mkdir <%s> failed : %s", args.output, exc)
        return 255

    processor = HousePageProcessor()
    for url in processor.parsers:
        try:
            html = _fetch(url)
        except (OSError, ValueError) as exc:
            print(str(exc))
            continue
        processor.process(url, html)
    processor.save_data(args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())