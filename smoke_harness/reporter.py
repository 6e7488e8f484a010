"""Human-readable run report and process exit status."""

import sys
from collections.abc import Sequence
from typing import TextIO

from smoke_harness.models.result import RunSummary

RULE = "=" * 70

STATUS_SYMBOLS = {
    "passed": "✅",
    "failed": "❌",
}


def format_report(summary: RunSummary) -> Sequence[str]:
    """Render the summary as report lines: header, one line per test, footer."""
    lines = [
        "",
        RULE,
        f"🧪 Running {summary.total_count} test(s)",
        RULE,
        "",
    ]

    for result in summary.results:
        lines.append(f"{STATUS_SYMBOLS[result.status]} {result.name}")
        if result.error is not None:
            lines.append(f"   Error: {result.error.message}")

    lines.extend(
        [
            "",
            RULE,
            "📊 Test Summary",
            RULE,
            f"Total: {summary.total_count}",
            f"✅ Passed: {summary.passed_count}",
            f"❌ Failed: {summary.failed_count}",
            f"⏱️  Total time: {summary.total_duration_ms:.2f}ms",
            RULE,
            "",
        ]
    )
    return lines


def print_report(summary: RunSummary, stream: TextIO | None = None) -> None:
    """Write the report to ``stream`` (stdout by default)."""
    out = stream if stream is not None else sys.stdout
    for line in format_report(summary):
        print(line, file=out)


def exit_code(summary: RunSummary) -> int:
    """Return 1 if any test failed, 0 otherwise."""
    return 1 if summary.failed_count > 0 else 0
