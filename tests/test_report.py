"""Tests for report rendering."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest
from rich.console import Console

from linkgate.models import CheckReport, LinkError, LinkErrorKind, LoadError, ResolveFailure
from linkgate.ui.core import LINKGATE_THEME
from linkgate.ui.report import OutputFormat, print_report, render_github_annotations, render_json
from tests.conftest import make_document


@pytest.fixture
def report() -> CheckReport:
    source = make_document("/guides/intro")
    return CheckReport(
        documents=3,
        link_errors=(
            LinkError(LinkErrorKind.LINK, "/docs/api/missing", source),
            LinkError(LinkErrorKind.HASH, "#nope", source),
        ),
        load_errors=(LoadError(Path("docs/bad.mdx"), "Invalid frontmatter", "FrontmatterError"),),
        resolve_failures=(ResolveFailure("/odd", Path("docs/odd.mdx"), "Cannot render: boom"),),
    )


def _capture() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, theme=LINKGATE_THEME, width=200, color_system=None), buffer


class TestCheckReport:
    """Tests for the failure policy."""

    def test_link_errors_always_fail(self, report: CheckReport) -> None:
        lenient = CheckReport(
            link_errors=report.link_errors, fail_on_load_error=False, fail_on_resolve_error=False
        )
        assert lenient.failed

    @pytest.mark.parametrize(
        ("fail_on_load", "fail_on_resolve", "expected"),
        [(True, True, True), (True, False, True), (False, True, True), (False, False, False)],
    )
    def test_policy(
        self, report: CheckReport, fail_on_load: bool, fail_on_resolve: bool, expected: bool
    ) -> None:
        candidate = CheckReport(
            load_errors=report.load_errors,
            resolve_failures=report.resolve_failures,
            fail_on_load_error=fail_on_load,
            fail_on_resolve_error=fail_on_resolve,
        )
        assert candidate.failed is expected
        assert candidate.has_problems

    def test_describe(self, report: CheckReport) -> None:
        link, anchor = report.link_errors
        assert link.describe() == "Broken link to /docs/api/missing"
        assert anchor.describe() == "Missing heading anchor in #nope"


class TestRenderJson:
    """Tests for render_json."""

    def test_structure(self, report: CheckReport) -> None:
        data = json.loads(render_json(report))
        assert data["documents"] == 3
        assert data["failed"] is True
        assert data["link_errors"][0] == {
            "kind": "link",
            "href": "/docs/api/missing",
            "source": "/guides/intro",
            "path": "docs/guides/intro.mdx",
        }
        assert data["load_errors"] == [
            {
                "path": "docs/bad.mdx",
                "message": "Invalid frontmatter",
                "error_type": "FrontmatterError",
            }
        ]
        assert data["resolve_failures"][0]["key"] == "/odd"

    def test_empty(self) -> None:
        data = json.loads(render_json(CheckReport()))
        assert data == {
            "documents": 0,
            "failed": False,
            "link_errors": [],
            "load_errors": [],
            "resolve_failures": [],
        }


class TestRenderGithubAnnotations:
    """Tests for render_github_annotations."""

    def test_lines(self, report: CheckReport) -> None:
        assert render_github_annotations(report) == [
            "::error file=docs/guides/intro.mdx,title=Broken link::"
            "Broken link to /docs/api/missing",
            "::error file=docs/guides/intro.mdx,title=Broken link::"
            "Missing heading anchor in #nope",
            "::error file=docs/bad.mdx,title=Unreadable document::Invalid frontmatter",
            "::error file=docs/odd.mdx,title=Unchecked document::Cannot render: boom",
        ]

    def test_warnings_when_not_failing(self, report: CheckReport) -> None:
        lenient = CheckReport(
            load_errors=report.load_errors,
            resolve_failures=report.resolve_failures,
            fail_on_load_error=False,
            fail_on_resolve_error=False,
        )
        lines = render_github_annotations(lenient)
        assert [line.split(" ", 1)[0] for line in lines] == ["::warning", "::warning"]

    def test_escaping(self) -> None:
        report = CheckReport(
            load_errors=(LoadError(Path("docs/a,b:c.mdx"), "50% bad\nsecond line"),),
        )
        assert render_github_annotations(report) == [
            "::error file=docs/a%2Cb%3Ac.mdx,title=Unreadable document::50%25 bad%0Asecond line"
        ]


class TestPrintReport:
    """Tests for print_report."""

    def test_table(self, report: CheckReport) -> None:
        console, buffer = _capture()
        print_report(report, OutputFormat.table, console)
        output = buffer.getvalue()
        assert "Broken links (2)" in output
        assert "/docs/api/missing" in output
        assert "Unreadable documents (1)" in output
        assert "Unchecked documents (1)" in output
        assert "Link check failed" in output

    def test_table_clean(self) -> None:
        console, buffer = _capture()
        print_report(CheckReport(documents=4), OutputFormat.table, console)
        output = buffer.getvalue()
        assert "All links valid" in output
        assert "Broken links" not in output

    def test_table_warnings_only(self, report: CheckReport) -> None:
        lenient = CheckReport(load_errors=report.load_errors, fail_on_load_error=False)
        console, buffer = _capture()
        print_report(lenient, OutputFormat.table, console)
        assert "passed with warnings" in buffer.getvalue()

    def test_json(self, report: CheckReport) -> None:
        console, buffer = _capture()
        print_report(report, OutputFormat.json, console)
        assert json.loads(buffer.getvalue())["documents"] == 3

    def test_github(self, report: CheckReport) -> None:
        console, buffer = _capture()
        print_report(report, OutputFormat.github, console)
        lines = buffer.getvalue().splitlines()
        assert len(lines) == 4
        assert all(line.startswith("::error ") for line in lines)
