"""A multi-threaded crawler that reports links which cannot be fetched."""

from __future__ import annotations

import argparse
import ipaddress
import queue
import threading
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urljoin, urlsplit, urlunsplit

import requests
from bs4 import BeautifulSoup


class BadResponseError(Exception):
    """Raised when a page answers with a non-success HTTP status."""

    def __init__(self, status: str) -> None:
        super().__init__(f"bad http response: {status}")
        self.status = status


@dataclass(frozen=True)
class CrawlCommand:
    """A page to visit, and whether to collect the links on it."""

    url: str
    extract_links: bool


def _normalize(url: str) -> str:
    parts = urlsplit(url)
    if parts.netloc and not parts.path:
        parts = parts._replace(path="/")
    return urlunsplit(parts)


def _domain(url: str) -> Optional[str]:
    """Return the host name of ``url``, or None if it has none or is an IP."""
    host = urlsplit(url).hostname
    if not host:
        return None
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return host
    return None


def visit_page(session: requests.Session, command: CrawlCommand) -> list[str]:
    """Fetch a page and return the absolute URLs of its links.

    Links are only collected when ``command.extract_links`` is set.
    """
    print(f"Checking {command.url}")
    response = session.get(command.url)
    if not 200 <= response.status_code < 300:
        raise BadResponseError(f"{response.status_code} {response.reason}".strip())
    if not command.extract_links:
        return []

    base_url = response.url
    document = BeautifulSoup(response.text, "html.parser")
    links = []
    for anchor in document.find_all("a", href=True):
        href = anchor["href"]
        try:
            links.append(_normalize(urljoin(base_url, href)))
        except ValueError as err:
            print(f"On {base_url}: ignored unparsable {href!r}: {err}")
    return links


class CrawlState:
    """Tracks the crawl's home domain and the pages already seen."""

    def __init__(self, start_url: str) -> None:
        start_url = _normalize(start_url)
        domain = _domain(start_url)
        if domain is None:
            raise ValueError(f"start URL has no domain: {start_url!r}")
        self.domain = domain
        self.visited_pages = {start_url}

    def should_extract_links(self, url: str) -> bool:
        """Return whether links on ``url`` should be followed."""
        url_domain = _domain(url)
        return url_domain is not None and url_domain == self.domain

    def mark_visited(self, url: str) -> bool:
        """Mark ``url`` visited; return False if it had been visited before."""
        url = _normalize(url)
        if url in self.visited_pages:
            return False
        self.visited_pages.add(url)
        return True


_Result = tuple[str, Optional[list[str]], Optional[Exception]]


def _crawl_worker(commands: queue.Queue, results: queue.Queue) -> None:
    with requests.Session() as session:
        while True:
            command = commands.get()
            if command is None:
                return
            try:
                links = visit_page(session, command)
            except Exception as err:  # reported to the controller
                results.put((command.url, None, err))
            else:
                results.put((command.url, links, None))


def check_links(start_url: str, thread_count: int = 16) -> list[str]:
    """Crawl from ``start_url`` and return the URLs that could not be fetched.

    Pages on the start URL's domain have their links followed; other pages are
    only checked.
    """
    state = CrawlState(start_url)
    commands: queue.Queue = queue.Queue()
    results: queue.Queue = queue.Queue()
    workers = [
        threading.Thread(target=_crawl_worker, args=(commands, results), daemon=True)
        for _ in range(thread_count)
    ]
    for worker in workers:
        worker.start()

    bad_urls: list[str] = []
    try:
        commands.put(CrawlCommand(_normalize(start_url), extract_links=True))
        pending = 1
        while pending > 0:
            url, links, error = results.get()
            pending -= 1
            if error is not None:
                bad_urls.append(url)
                print(f"Got crawling error: {error}")
                continue
            for link in links or []:
                if state.mark_visited(link):
                    commands.put(
                        CrawlCommand(link, extract_links=state.should_extract_links(link))
                    )
                    pending += 1
    finally:
        for _ in workers:
            commands.put(None)
    return bad_urls


def main(argv: list[str] | None = None) -> int:
    """Check the links reachable from a start URL and list the bad ones."""
    parser = argparse.ArgumentParser(description="Find links that cannot be fetched.")
    parser.add_argument("url", help="page to start crawling from")
    parser.add_argument("--threads", type=int, default=16, help="number of workers")
    args = parser.parse_args(argv)
    bad_urls = check_links(args.url, args.threads)
    print("Bad URLs:")
    for url in bad_urls:
        print(f"    {url}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())