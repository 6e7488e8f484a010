"""Smoke tests for a locally served web app."""

import logging
import time
from collections.abc import Iterable, Sequence

import aiohttp

from smoke_harness.assertions import assert_contains, assert_true
from smoke_harness.collaborators.browser import render_page
from smoke_harness.collaborators.http import fetch_page, fetch_status, resolve_asset
from smoke_harness.collaborators.markup import parse_page, query_selectors
from smoke_harness.config import RunnerConfig
from smoke_harness.runner import TestRunner

log = logging.getLogger(__name__)

BUILD_FAILURE_MARKER = "Build Failed"


async def find_broken_assets(
    session: aiohttp.ClientSession, base_url: str, references: Iterable[str]
) -> Sequence[str]:
    """Fetch every asset and describe the ones that do not return 200."""
    broken: list[str] = []
    for reference in references:
        try:
            status = await fetch_status(session, resolve_asset(base_url, reference))
        except aiohttp.ClientError as exc:
            log.debug("Asset %s failed: %s", reference, exc)
            broken.append(f"{reference} (error)")
            continue
        if status != 200:
            broken.append(f"{reference} ({status})")
    return broken


def register_app_smoke_tests(
    runner: TestRunner, session: aiohttp.ClientSession, config: RunnerConfig
) -> None:
    """Register the app smoke checks on ``runner`` in their fixed order."""
    app_url = config.app_url

    async def app_responds() -> None:
        page = await fetch_page(session, app_url)
        assert_true(page.status == 200, "App should return 200 status")

    async def content_type_is_html() -> None:
        page = await fetch_page(session, app_url)
        assert_contains(page.content_type, "text/html", "Should be HTML")

    async def has_root_div() -> None:
        page = await fetch_page(session, app_url)
        assert_true(parse_page(page.html).has_id("root"), "Should have root div")

    async def has_expected_title() -> None:
        page = await fetch_page(session, app_url)
        assert_contains(
            page.html,
            f"<title>{config.expected_title}</title>",
            "Should have correct title",
        )

    async def has_required_elements() -> None:
        page = await fetch_page(session, app_url)
        matches = query_selectors(page.html, config.required_selectors)
        missing = [selector for selector, match in matches.items() if not match.found]
        assert_true(not missing, f"Missing elements: {', '.join(missing)}")

    async def css_assets_load() -> None:
        page = await fetch_page(session, app_url)
        stylesheets = parse_page(page.html).stylesheets
        assert_true(stylesheets, "Should have CSS link")

        broken = await find_broken_assets(session, app_url, stylesheets)
        assert_true(not broken, f"CSS should load successfully: {', '.join(broken)}")

    async def js_assets_load() -> None:
        page = await fetch_page(session, app_url)
        scripts = parse_page(page.html).scripts
        assert_true(scripts, "Should have JS script")

        broken = await find_broken_assets(session, app_url, scripts)
        assert_true(not broken, f"JS should load successfully: {', '.join(broken)}")

    async def image_assets_load() -> None:
        page = await fetch_page(session, app_url)
        broken = await find_broken_assets(
            session, app_url, parse_page(page.html).images
        )
        assert_true(
            not broken, f"Images should load successfully: {', '.join(broken)}"
        )

    async def response_time_acceptable() -> None:
        start = time.perf_counter()
        await fetch_status(session, app_url)
        duration_ms = (time.perf_counter() - start) * 1000
        assert_true(
            duration_ms < config.max_response_ms,
            f"Response time {duration_ms:.2f}ms should be under "
            f"{config.max_response_ms:g}ms",
        )

    async def no_build_errors() -> None:
        page = await fetch_page(session, app_url)
        errors = []
        if BUILD_FAILURE_MARKER in page.html:
            errors.append("Build failure detected in HTML")
        if BUILD_FAILURE_MARKER in parse_page(page.html).noscript_text:
            errors.append("Build error in noscript tag")
        assert_true(
            not errors, f"Page should not show build errors: {'; '.join(errors)}"
        )

    runner.test("App is running and responding", app_responds)
    runner.test("Page has correct content type", content_type_is_html)
    runner.test("Page has root div", has_root_div)
    runner.test("Page has correct title", has_expected_title)
    runner.test("Page has required elements", has_required_elements)
    runner.test("CSS assets load", css_assets_load)
    runner.test("JavaScript assets load", js_assets_load)
    runner.test("Image assets load", image_assets_load)
    runner.test("Response time is acceptable", response_time_acceptable)
    runner.test("Page is not showing build errors", no_build_errors)

    if config.browser:

        async def renders_in_browser() -> None:
            rendered = await render_page(app_url, config.browser_executable)
            assert_true(rendered.title, "Rendered page should have a title")

        runner.test("Page renders in headless browser", renders_in_browser)

    log.info("Registered app smoke tests for %s", app_url)
