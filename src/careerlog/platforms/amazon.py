"""Amazon Music fetcher.

Amazon Music has no public podcast API, so the show page is rendered in
headless Chromium (Playwright) and episode links are read from the DOM.
This is the fragile platform: it breaks when the markup changes or when
Amazon puts the page behind a sign-in wall.
"""

import logging
import re
from typing import Any

from careerlog.config.schema import AmazonConfig
from careerlog.episodes.models import Platform
from careerlog.matching import PlatformCandidate
from careerlog.utils.errors import (
    AutomationError,
    BrowserUnavailableError,
    PageTimeoutError,
)

logger = logging.getLogger(__name__)

EPISODE_LINK_SELECTOR = 'a[href*="/episodes/"]'
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
LAUNCH_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-gpu",
]

# Raw link data; choosing a title happens in Python (select_title)
COLLECT_LINKS_JS = """
(selector) => Array.from(document.querySelectorAll(selector)).map((link) => {
  const ancestorTexts = [];
  let current = link;
  for (let i = 0; i < 3 && current.parentElement; i++) {
    current = current.parentElement;
    const level = [];
    current.querySelectorAll('div, span, p, h1, h2, h3, h4').forEach((el) => {
      level.push((el.textContent || '').trim());
    });
    ancestorTexts.push(level);
  }
  return {
    href: link.getAttribute('href') || '',
    ariaLabel: link.getAttribute('aria-label') || '',
    ancestorTexts: ancestorTexts,
    text: (link.textContent || '').trim(),
  };
})
"""

_SHOW_ID = re.compile(r"podcasts/([a-zA-Z0-9-]+)")
_EPISODE_ID = re.compile(r"/episodes/([a-zA-Z0-9-]+)")
_WHITESPACE = re.compile(r"\s+")
_NON_NUMERIC = re.compile(r"[^\d\s]")


def extract_show_id_from_url(url: str) -> str | None:
    match = _SHOW_ID.search(url)
    return match.group(1) if match else None


def _utf16_length(text: str) -> int:
    return len(text.encode("utf-16-le")) // 2


def _looks_like_title(text: str) -> bool:
    # Skip durations, dates and other purely numeric labels.
    # Bounds are in UTF-16 code units, as measured in the page.
    return 5 < _utf16_length(text) < 200 and bool(_NON_NUMERIC.search(text))


def select_title(link: dict[str, Any]) -> str:
    """Pick a title for one episode link.

    Order: the link's aria-label, then the first title-like text in up to
    three ancestor levels, then the link's own text. Whitespace is
    collapsed. Returns "" when nothing usable is found.
    """
    title = link.get("ariaLabel") or ""

    if not title:
        for level in link.get("ancestorTexts") or []:
            title = next((text for text in level if text and _looks_like_title(text)), "")
            if title:
                break

    if not title:
        title = link.get("text") or ""

    return _WHITESPACE.sub(" ", title).strip()


def links_to_candidates(
    links: list[dict[str, Any]], show_id: str, region: str
) -> list[PlatformCandidate]:
    """Convert raw DOM link data into candidates, one per episode ID."""
    show_path = f"/podcasts/{show_id}/episodes/"
    seen: set[str] = set()
    candidates = []

    for link in links:
        href = link.get("href") or ""
        if show_path not in href:
            continue

        match = _EPISODE_ID.search(href)
        if not match:
            continue

        episode_id = match.group(1)
        if episode_id in seen:
            continue
        seen.add(episode_id)

        url = href if href.startswith("http") else f"https://music.amazon.{region}{href}"
        candidates.append(
            PlatformCandidate(title=select_title(link) or f"Episode {episode_id}", url=url)
        )

    return candidates


class AmazonMusicFetcher:
    """Scrapes a show's episode list from the Amazon Music web player."""

    platform = Platform.AMAZON

    def __init__(self, settings: AmazonConfig) -> None:
        self.settings = settings

    @property
    def show_url(self) -> str:
        return f"https://music.amazon.{self.settings.region}/podcasts/{self.settings.show_id}"

    async def fetch_candidates(self) -> list[PlatformCandidate]:
        """Render the show page and collect its episodes.

        Raises:
            BrowserUnavailableError: If Playwright or Chromium is missing
            PageTimeoutError: If the page does not load in time
            AutomationError: If no episodes could be found on the page
        """
        links = await self._collect_links()
        candidates = links_to_candidates(links, self.settings.show_id, self.settings.region)

        if not candidates:
            raise AutomationError(
                "Could not find any episodes. The page might require authentication "
                "or have a different structure.",
                self.platform.value,
            )

        logger.info(f"Found {len(candidates)} episodes on Amazon Music")
        return candidates

    async def _collect_links(self) -> list[dict[str, Any]]:
        try:
            from playwright.async_api import Error as PlaywrightError
            from playwright.async_api import TimeoutError as PlaywrightTimeoutError
            from playwright.async_api import async_playwright
        except ImportError as e:
            raise BrowserUnavailableError(
                "Playwright is not installed. Install with: "
                "pip install playwright && playwright install chromium",
                self.platform.value,
            ) from e

        settings = self.settings
        logger.info(f"Opening {self.show_url}")

        async with async_playwright() as p:
            try:
                browser = await p.chromium.launch(
                    headless=settings.headless, args=LAUNCH_ARGS
                )
            except PlaywrightError as e:
                raise BrowserUnavailableError(
                    f"Could not launch Chromium ({e}). Run: playwright install chromium",
                    self.platform.value,
                ) from e

            try:
                context = await browser.new_context(
                    viewport={"width": 1280, "height": 800}, user_agent=USER_AGENT
                )
                page = await context.new_page()
                await page.goto(
                    self.show_url,
                    wait_until="networkidle",
                    timeout=settings.navigation_timeout_ms,
                )

                try:
                    await page.wait_for_selector(
                        EPISODE_LINK_SELECTOR, timeout=settings.selector_timeout_ms
                    )
                except PlaywrightTimeoutError:
                    logger.debug("Episode links did not appear; extracting anyway")

                # Let late-rendering list items settle
                await page.wait_for_timeout(settings.settle_delay_ms)

                return await page.evaluate(COLLECT_LINKS_JS, EPISODE_LINK_SELECTOR)

            except PlaywrightTimeoutError as e:
                raise PageTimeoutError(
                    "Page loading timed out. Amazon Music might require "
                    "authentication or be unavailable.",
                    self.platform.value,
                ) from e
            except PlaywrightError as e:
                raise AutomationError(
                    f"Browser automation failed: {e}", self.platform.value
                ) from e
            finally:
                await browser.close()
