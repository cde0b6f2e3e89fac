"""Tests for link result models."""

from pathlib import Path

from bsv_agents.models.link import COPY_WARNING, InstallReport, LinkResult


def make_result(name: str, status: str, error: str | None = None) -> LinkResult:
    return LinkResult(
        name=name,
        source=Path("/cache/agents") / name,
        target=Path("/home/user/.claude/agents") / name,
        status=status,
        link_kind="symbolic link",
        error=error,
    )


class TestLinkResult:
    """Test cases for LinkResult."""

    def test_to_dict_serializes_paths(self):
        result = make_result("bsv-x.md", "linked")

        assert result.to_dict() == {
            "name": "bsv-x.md",
            "source": "/cache/agents/bsv-x.md",
            "target": "/home/user/.claude/agents/bsv-x.md",
            "status": "linked",
            "link_kind": "symbolic link",
            "error": None,
        }

    def test_to_dict_exclude(self):
        data = make_result("bsv-x.md", "linked").to_dict(exclude=["source", "target"])
        assert "source" not in data and "target" not in data

    def test_defaults_to_failed(self):
        result = LinkResult(name="bsv-x.md")
        assert result.is_failed
        assert repr(result) == "<LinkResult name=bsv-x.md>"

    def test_keyword_values_override_defaults(self):
        result = LinkResult(name="bsv-x.md", status="linked")
        assert result.status == "linked"
        assert result.error is None
        assert LinkResult().name == ""


class TestInstallReport:
    """Test cases for InstallReport."""

    def test_summary(self):
        report = InstallReport()
        report.add(make_result("bsv-a.md", "linked"))
        report.add(make_result("bsv-b.md", "copied", "Operation not permitted"))
        report.add(make_result("bsv-c.md", "failed", "No space left on device"))

        assert len(report) == 3
        assert [r.name for r in report.linked] == ["bsv-a.md"]
        assert [r.name for r in report.copied] == ["bsv-b.md"]
        assert [r.name for r in report.failed] == ["bsv-c.md"]
        assert report.warnings == [f"bsv-b.md: {COPY_WARNING}"]
        assert report.ok is False

        data = report.to_dict()
        assert (data["linked"], data["copied"], data["failed"]) == (1, 1, 1)

    def test_empty_report_is_ok(self):
        report = InstallReport()
        assert report.ok
        assert report.to_dict()["results"] == []
