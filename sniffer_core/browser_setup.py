#!/usr/bin/env python3
import logging
from typing import AsyncIterator, Dict, List, Optional, Sequence

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from playwright.async_api import async_playwright

from .config import Config, config as default_config
from .errors import ExtractionError, NavigationError
from .styles import STYLE_PROPERTIES

logger = logging.getLogger(__name__)

COMPUTED_STYLE_JS = """
(el, props) => {
    const computed = window.getComputedStyle(el);
    const result = {};
    for (const prop of props) {
        result[prop] = computed.getPropertyValue(prop);
    }
    return result;
}
"""


class RenderingSession:
    """
    One browser page loaded with the target URL.

    Usage:
        async with RenderingSession("https://example.com") as session:
            if await session.wait_for_rule("button"):
                async for styles in session.iter_styles("button"):
                    ...

    Entering the session launches Chromium and navigates; any failure there
    raises NavigationError. Leaving it always releases the page, context,
    browser and Playwright driver.
    """

    def __init__(self, url: str, config: Optional[Config] = None):
        self.url = url
        self.config = config or default_config
        self._playwright = None
        self._browser = None
        self._context = None
        self.page = None

    async def __aenter__(self) -> "RenderingSession":
        try:
            await self.open()
        except BaseException:
            await self.close()
            raise
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def open(self) -> None:
        cfg = self.config
        logger.info(f"🚀 Launching browser (headless={cfg.headless})...")
        try:
            self._playwright = await async_playwright().start()
            self._browser = await self._playwright.chromium.launch(
                headless=bool(cfg.headless),
                args=[
                    "--no-sandbox",
                    "--disable-setuid-sandbox",
                    "--disable-dev-shm-usage",
                ],
            )
            self._context = await self._browser.new_context(
                viewport={"width": cfg.viewport_width, "height": cfg.viewport_height},
                user_agent=cfg.user_agent,
                java_script_enabled=True,
            )
            self.page = await self._context.new_page()
            self.page.set_default_navigation_timeout(cfg.navigation_timeout_ms)
        except PlaywrightError as e:
            raise NavigationError(f"Browser launch failed: {e}", url=self.url) from e

        logger.info(f"🌐 Loading {self.url}")
        try:
            response = await self.page.goto(
                self.url, wait_until="load", timeout=cfg.navigation_timeout_ms
            )
        except PlaywrightTimeoutError as e:
            raise NavigationError(
                f"Navigation timed out after {cfg.navigation_timeout_ms}ms: {self.url}",
                url=self.url,
            ) from e
        except PlaywrightError as e:
            raise NavigationError(f"Navigation failed: {e}", url=self.url) from e

        if response is not None and response.status >= 400:
            logger.warning(f"⚠️ {self.url} answered with HTTP {response.status}")

        try:
            try:
                await self.page.wait_for_load_state(
                    "networkidle", timeout=cfg.navigation_timeout_ms
                )
            except PlaywrightTimeoutError:
                logger.debug("networkidle not reached, continuing with loaded page")

            if cfg.settle_delay_ms > 0:
                await self.page.wait_for_timeout(cfg.settle_delay_ms)
        except PlaywrightError as e:
            raise NavigationError(f"Page failed after loading: {e}", url=self.url) from e

    async def wait_for_rule(self, rule: str) -> bool:
        """
        Wait for at least one element matching ``rule``. False on timeout.

        Raises:
            ExtractionError: if the engine rejects the rule or the page goes away
        """
        try:
            await self.page.wait_for_selector(
                rule, state="attached", timeout=self.config.selector_timeout_ms
            )
            return True
        except PlaywrightTimeoutError:
            return False
        except PlaywrightError as e:
            raise ExtractionError(f"Waiting for {rule} failed: {e}", rule=rule) from e

    async def capture_styles(
        self, handle, properties: Sequence[str] = STYLE_PROPERTIES
    ) -> Dict[str, str]:
        return await handle.evaluate(COMPUTED_STYLE_JS, list(properties))

    async def iter_styles(
        self, rule: str, properties: Sequence[str] = STYLE_PROPERTIES
    ) -> AsyncIterator[Dict[str, str]]:
        """
        Yield the computed styles of every element matching ``rule``.

        Elements are enumerated once, in document order, and captured one at a
        time; an engine error on one element ends the iteration with an
        ExtractionError.
        """
        try:
            handles = await self.page.query_selector_all(rule)
        except PlaywrightError as e:
            raise ExtractionError(f"Querying {rule} failed: {e}", rule=rule) from e
        logger.debug(f"{rule}: {len(handles)} element(s)")
        try:
            for handle in handles:
                try:
                    styles = await self.capture_styles(handle, properties)
                except PlaywrightError as e:
                    raise ExtractionError(
                        f"Reading styles for {rule} failed: {e}", rule=rule
                    ) from e
                yield styles
        finally:
            for handle in handles:
                try:
                    await handle.dispose()
                except PlaywrightError:
                    pass

    async def query_styles(
        self, rule: str, properties: Sequence[str] = STYLE_PROPERTIES
    ) -> List[Dict[str, str]]:
        return [styles async for styles in self.iter_styles(rule, properties)]

    async def close(self) -> None:
        for name in ("_context", "_browser"):
            resource = getattr(self, name)
            if resource is None:
                continue
            try:
                await resource.close()
            except Exception as e:
                logger.warning(f"Failed to close {name.strip('_')}: {e}")
            setattr(self, name, None)
        if self._playwright is not None:
            try:
                await self._playwright.stop()
            except Exception as e:
                logger.warning(f"Failed to stop Playwright: {e}")
            self._playwright = None
        self.page = None
