"""CLI tests via click's CliRunner.

Windows Command Prompt uses CP1252, so report output must stay ASCII.
"""

import json

import click
import pytest

from logstrip import discovery
from logstrip.cli import cli
from logstrip.utils.error_handler import handle_exceptions
from logstrip.utils.exit_codes import ExitCodes


def _scan(runner, project, *args):
    return runner.invoke(cli, ["scan", str(project), "--root", str(project), *args])


class TestScanCommand:
    def test_reports_matches(self, runner, sample_project):
        result = _scan(runner, sample_project)
        assert result.exit_code == 0, result.output
        assert "3 statements found across 2 files" in result.stdout
        assert "app.js" in result.stdout
        assert "util.ts" in result.stdout
        assert "index.js" not in result.stdout

    def test_ci_mode_fails_on_matches(self, runner, sample_project):
        result = _scan(runner, sample_project, "--ci")
        assert result.exit_code == ExitCodes.STATEMENTS_FOUND

    def test_ci_mode_passes_when_clean(self, runner, tmp_path):
        (tmp_path / "ok.js").write_text("export default 1;\n")
        result = _scan(runner, tmp_path, "--ci")
        assert result.exit_code == 0
        assert "No debug statements found" in result.stdout

    def test_keep_excludes_methods(self, runner, sample_project):
        result = _scan(runner, sample_project, "--keep", "error,warn", "--json")
        data = json.loads(result.stdout)
        assert data["total"] == 2
        types = {m["type"] for f in data["files"] for m in f["matches"]}
        assert types == {"console.log", "debugger"}

    def test_unknown_keep_name_warns(self, runner, sample_project):
        result = _scan(runner, sample_project, "--keep", "error,prnt")
        assert result.exit_code == 0
        assert "prnt" in result.stdout

    def test_json_output(self, runner, sample_project):
        result = _scan(runner, sample_project, "--json")
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["total"] == 3
        assert [f["matches"][0]["type"] for f in data["files"]] == ["console.log", "console.error"]
        assert all(f["fixed"] is False for f in data["files"])

    def test_fix_rewrites_files(self, runner, sample_project):
        result = _scan(runner, sample_project, "--fix")
        assert result.exit_code == 0
        assert "3 statements removed across 2 files" in result.stdout
        util = (sample_project / "src" / "util.ts").read_text()
        assert "console.error" not in util
        assert "return a + b;" in util

        rerun = _scan(runner, sample_project, "--ci")
        assert rerun.exit_code == 0

    def test_dry_run_leaves_files(self, runner, sample_project):
        before = (sample_project / "src" / "app.js").read_text()
        result = _scan(runner, sample_project, "--fix", "--dry-run", "--json")
        data = json.loads(result.stdout)
        assert data["total"] == 3
        assert all(f["fixed"] is False for f in data["files"])
        assert (sample_project / "src" / "app.js").read_text() == before

    def test_extension_filter(self, runner, sample_project):
        result = _scan(runner, sample_project, "--ext", "ts", "--json")
        data = json.loads(result.stdout)
        assert data["total"] == 1

    def test_verbose_shows_snippet(self, runner, sample_project):
        result = _scan(runner, sample_project, "--verbose")
        assert 'console.log("starting");' in result.stdout

    def test_jobs(self, runner, sample_project):
        result = _scan(runner, sample_project, "--jobs", "4", "--json")
        assert json.loads(result.stdout)["total"] == 3

    def test_config_file_keep(self, runner, sample_project):
        config_dir = sample_project / ".logstrip"
        config_dir.mkdir()
        (config_dir / "config.json").write_text(json.dumps({"scan": {"keep": ["error"]}}))
        result = _scan(runner, sample_project, "--json")
        assert json.loads(result.stdout)["total"] == 2

    def test_staged_uses_git(self, runner, sample_project, monkeypatch):
        staged = [sample_project / "src" / "util.ts"]
        monkeypatch.setattr("logstrip.commands.scan.get_staged_files", lambda *a, **k: staged)
        result = runner.invoke(cli, ["scan", "--staged", "--root", str(sample_project), "--json"])
        data = json.loads(result.stdout)
        assert data["total"] == 1

    def test_staged_without_git_is_clean(self, runner, tmp_path, monkeypatch):
        def missing(*args, **kwargs):
            raise FileNotFoundError("git")

        monkeypatch.setattr(discovery.subprocess, "run", missing)
        result = runner.invoke(cli, ["scan", "--staged", "--ci", "--root", str(tmp_path)])
        assert result.exit_code == 0
        assert "Scanning 0 staged files" in result.stdout

    def test_output_is_ascii(self, runner, sample_project):
        result = _scan(runner, sample_project, "--verbose", "--keep", "warn")
        result.stdout.encode("ascii")


class TestKindsCommand:
    def test_lists_all_kinds(self, runner):
        result = runner.invoke(cli, ["kinds", "--json"])
        assert result.exit_code == 0
        rows = json.loads(result.stdout)
        assert len(rows) == 22
        assert {r["status"] for r in rows} == {"detect"}

    def test_keep_marks_kept(self, runner):
        result = runner.invoke(cli, ["kinds", "--keep", "error", "--json"])
        rows = {r["kind"]: r for r in json.loads(result.stdout)}
        assert rows["console.error"]["status"] == "keep"
        assert rows["debugger"]["status"] == "detect"
        assert rows["debugger"]["keepable"] is False

    def test_unknown_keep_name_warns(self, runner):
        result = runner.invoke(cli, ["kinds", "--keep", "error,prnt"])
        assert result.exit_code == 0
        assert "prnt" in result.stdout
        assert "21 of 22 kinds detected" in result.stdout

    def test_unknown_keep_name_keeps_json_clean(self, runner):
        result = runner.invoke(cli, ["kinds", "--keep", "prnt", "--json"])
        rows = json.loads(result.stdout)
        assert {r["status"] for r in rows} == {"detect"}

    def test_table(self, runner):
        result = runner.invoke(cli, ["kinds", "-k", "log"])
        assert result.exit_code == 0
        assert "21 of 22 kinds detected" in result.stdout


class TestCliSurface:
    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "log-strip" in result.stdout

    def test_scan_help_ascii(self, runner):
        result = runner.invoke(cli, ["scan", "--help"])
        assert result.exit_code == 0
        try:
            result.stdout.encode("ascii")
        except UnicodeEncodeError as e:
            pytest.fail(f"Non-ASCII character in log-strip scan --help: {e}")

    def test_root_help_lists_commands(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "scan" in result.stdout
        assert "kinds" in result.stdout

    def test_invalid_jobs_is_usage_error(self, runner, tmp_path):
        result = runner.invoke(cli, ["scan", str(tmp_path), "--jobs", "0"])
        assert result.exit_code == ExitCodes.USAGE_ERROR


class TestHandleExceptions:
    def test_wraps_unexpected_errors(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        @handle_exceptions
        def boom():
            raise ValueError("bad input")

        with pytest.raises(click.ClickException) as excinfo:
            boom()
        assert "ValueError: bad input" in excinfo.value.message
        assert (tmp_path / ".logstrip" / "error.log").exists()

    def test_click_exceptions_pass_through(self):
        @handle_exceptions
        def usage():
            raise click.UsageError("nope")

        with pytest.raises(click.UsageError):
            usage()


class TestExitCodes:
    def test_for_scan(self):
        assert ExitCodes.for_scan(0, ci=True) == ExitCodes.SUCCESS
        assert ExitCodes.for_scan(3, ci=False) == ExitCodes.SUCCESS
        assert ExitCodes.for_scan(3, ci=True) == ExitCodes.STATEMENTS_FOUND

    def test_descriptions(self):
        assert "CI" in ExitCodes.get_description(ExitCodes.STATEMENTS_FOUND)
        assert "Unknown" in ExitCodes.get_description(99)
