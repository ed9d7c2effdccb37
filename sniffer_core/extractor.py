"""
Computed style extraction.

For each category, every selection rule is tried in order against the loaded
page. Each matched element's computed styles are compared with the
representatives already accepted for that category (whatever rule found them)
and kept only if no equal representative exists.

A rule that matches nothing, or fails while matching or reading styles, adds
nothing and never stops the run. Only a page that cannot be loaded at all
(NavigationError, raised by the rendering session) is fatal.
"""

import logging
from typing import Iterable, Optional

from .browser_setup import RenderingSession
from .config import Config
from .models import AnalysisResult, CategoryResult, ExtractionStats, RepresentativeElement
from .styles import STYLE_PROPERTIES, identity_key
from .taxonomy import DEFAULT_CATEGORIES, Category

logger = logging.getLogger(__name__)


async def extract_category(
    session,
    category: Category,
    stats: Optional[ExtractionStats] = None,
    run_logger=None,
) -> CategoryResult:
    """Run every rule of one category and return its deduplicated elements."""
    stats = stats if stats is not None else ExtractionStats()
    result = CategoryResult(category.name)

    for rule in category.rules:
        stats.rules_tried += 1
        logger.info(f"  🔎 Checking selector: {rule}")
        try:
            if not await session.wait_for_rule(rule):
                stats.rules_without_match += 1
                logger.warning(f"    ⚠️ Selector not found: {rule} ({category.name})")
                if run_logger:
                    run_logger.log_kv(f"{category.name} {rule}", "no match")
                continue

            found = added = 0
            try:
                async for raw in session.iter_styles(rule, STYLE_PROPERTIES):
                    found += 1
                    element = RepresentativeElement(rule, raw)
                    if result.add(element):
                        added += 1
                    else:
                        stats.duplicates_discarded += 1
                        logger.debug(f"    duplicate of {identity_key(element.styles)}")
            finally:
                stats.elements_seen += found

            logger.info(f"    ✅ Found {found} elements, {added} new")
            if run_logger:
                run_logger.log_kv(f"{category.name} {rule}", f"{found} found, {added} new")
        except Exception as e:
            # ExtractionError from the session, or anything else a rule trips over
            stats.rules_failed += 1
            logger.error(f"    ❌ Error analyzing selector {rule} ({category.name}): {e}")
            if run_logger:
                run_logger.log_kv(f"{category.name} {rule}", f"error: {e}")

    return result


async def extract(
    session,
    categories: Iterable[Category] = DEFAULT_CATEGORIES,
    run_logger=None,
) -> AnalysisResult:
    """
    Extract deduplicated representatives for every category.

    Args:
        session: an opened rendering session (see RenderingSession)
        categories: taxonomy to evaluate, in output order
        run_logger: optional RunLogger receiving one entry per rule

    Returns:
        AnalysisResult holding only the categories with at least one element
    """
    result = AnalysisResult()
    logger.info("🔍 Analyzing components...")

    for category in categories:
        logger.info(f"📦 Analyzing {category.name}...")
        if run_logger:
            run_logger.log_heading(category.name)
        category_result = await extract_category(
            session, category, stats=result.stats, run_logger=run_logger
        )
        if result.append(category_result):
            if run_logger:
                run_logger.log_category_summary(category_result)
        else:
            logger.info(f"  {category.name}: no elements, omitted")

    logger.info(
        f"Extraction finished: {len(result)} categories, stats={result.stats.to_dict()}"
    )
    return result


async def analyze_url(
    url: str,
    categories: Iterable[Category] = DEFAULT_CATEGORIES,
    config: Optional[Config] = None,
    run_logger=None,
) -> AnalysisResult:
    """
    Load ``url`` in a fresh rendering session and extract its components.

    The session is closed on every exit path.

    Raises:
        NavigationError: if the page cannot be loaded
    """
    async with RenderingSession(url, config=config) as session:
        return await extract(session, categories, run_logger=run_logger)
