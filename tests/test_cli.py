"""
Tests for the CLI module.

These tests run the command end to end against throw-away repositories
built with GitPython.
"""

from datetime import datetime, timezone
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from git_bluff import __version__
from git_bluff.cli import cli


def utc(year, month, day, hour=12):
    return datetime(year, month, day, hour, tzinfo=timezone.utc)


@pytest.fixture
def workspace(temp_dir, git_repo, make_commit):
    """Two repositories with activity on 2024-03-01."""
    api = git_repo("billing-api")
    c1 = make_commit(api, "feat: add invoices", utc(2024, 3, 1, 9), author="Alice Smith")
    side = make_commit(api, "side branch work", utc(2024, 3, 1, 10), parents=[c1], head=False)
    c2 = make_commit(api, "fix: rounding\n\ngit-svn-id: svn://host/trunk@7 uuid", utc(2024, 3, 1, 11), author="bob")
    make_commit(api, "Merge branch 'side'", utc(2024, 3, 1, 12), parents=[c2, side])
    make_commit(api, "docs: explain totals", utc(2024, 3, 1, 13), author="alice-bot")
    make_commit(api, "chore: older work", utc(2024, 2, 20, 13))

    web = git_repo("web")
    make_commit(web, "style: tidy css", utc(2024, 3, 1, 15), author="Alice Smith")
    return temp_dir


class TestCLI:
    def test_help(self):
        result = CliRunner().invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "--directory" in result.output
        assert "--keep-going" in result.output

    def test_version(self):
        result = CliRunner().invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_report_without_config(self, workspace):
        result = CliRunner().invoke(cli, ["-d", str(workspace), "--date", "2024-03-01"])

        assert result.exit_code == 0, result.output
        api = (workspace / "billing-api").resolve()
        web = (workspace / "web").resolve()
        assert result.output == (
            f"\nRepository Path: {api}\n"
            "add invoices\n"
            "rounding\n"
            "explain totals\n"
            f"\nRepository Path: {web}\n"
            "tidy css\n"
            "\n"
        )

    def test_merge_and_side_commits_omitted(self, workspace):
        result = CliRunner().invoke(cli, ["-d", str(workspace), "--date", "2024-03-01"])

        assert "Merge branch" not in result.output
        assert "side branch work" not in result.output
        assert "older work" not in result.output

    def test_author_filter(self, workspace):
        result = CliRunner().invoke(
            cli, ["-d", str(workspace / "billing-api"), "--depth", "0", "--date", "2024-03-01", "--author", "alice"]
        )

        assert result.exit_code == 0, result.output
        assert "add invoices" in result.output
        assert "explain totals" in result.output
        assert "rounding" not in result.output

    def test_date_range(self, workspace):
        result = CliRunner().invoke(
            cli, ["-d", str(workspace), "--from", "2024-02-01", "--to", "2024-02-28"]
        )

        assert result.exit_code == 0, result.output
        assert "older work" in result.output
        assert "add invoices" not in result.output

    def test_report_with_config(self, workspace):
        config = workspace / "projects.yaml"
        config.write_text(
            "projects:\n"
            "  - project_name: Billing\n"
            "    project_code: BIL\n"
            "    repositories:\n"
            "      - alias: api\n"
            "        repo_path: billing-api\n"
        )

        result = CliRunner().invoke(
            cli, ["-d", str(workspace), "--date", "2024-03-01", "-c", str(config)]
        )

        assert result.exit_code == 0, result.output
        web = (workspace / "web").resolve()
        assert result.output == (
            "\nBilling BIL\n\n"
            "api\n"
            "1. add invoices\n"
            "2. rounding\n"
            "3. explain totals\n"
            f"{'=' * 71}\n"
            "\nUnknown UNKNOWN\n\n"
            f"{web}\n"
            "1. tidy css\n"
            "\n"
        )

    def test_verbose(self, workspace):
        result = CliRunner().invoke(cli, ["-d", str(workspace), "--date", "2024-03-01", "-v"])

        assert result.exit_code == 0, result.output
        assert "Found 2 git repository(ies)" in result.output
        assert "Found 3 commit(s)" in result.output
        assert "Processed 4 commit(s)" in result.output

    @pytest.mark.parametrize(
        "args,message",
        [
            (["--date", "2024-03-01", "--from", "2024-02-01"], "--date cannot be used"),
            (["--to", "2024-03-01"], "--to must be used with --from"),
            (["--from", "2024-03-09", "--to", "2024-03-01"], "after the end"),
            (["--date", "yesterday"], "yesterday"),
        ],
    )
    def test_invalid_dates_rejected_before_scanning(self, temp_dir, args, message):
        with patch("git_bluff.cli.find_git_repositories") as mock_find:
            result = CliRunner().invoke(cli, ["-d", str(temp_dir)] + args)

        assert result.exit_code == 2
        assert message in result.output
        mock_find.assert_not_called()

    def test_bad_config_fails_before_scanning(self, temp_dir):
        config = temp_dir / "projects.yaml"
        config.write_text("projects: [unclosed\n")

        with patch("git_bluff.cli.find_git_repositories") as mock_find:
            result = CliRunner().invoke(cli, ["-d", str(temp_dir), "-c", str(config)])

        assert result.exit_code == 1
        assert "projects.yaml" in result.output
        mock_find.assert_not_called()

    def test_repository_error_aborts(self, workspace):
        broken = workspace / "broken"
        (broken / ".git").mkdir(parents=True)
        (broken / ".git" / "HEAD").write_text("garbage\n")

        result = CliRunner().invoke(cli, ["-d", str(workspace), "--date", "2024-03-01"])

        assert result.exit_code == 1
        assert "Error" in result.output
        assert "broken" in result.output

    def test_keep_going_reports_remaining_repositories(self, workspace):
        broken = workspace / "broken"
        (broken / ".git").mkdir(parents=True)
        (broken / ".git" / "HEAD").write_text("garbage\n")

        result = CliRunner().invoke(
            cli, ["-d", str(workspace), "--date", "2024-03-01", "--keep-going"]
        )

        assert result.exit_code == 1
        assert "add invoices" in result.output
        assert "tidy css" in result.output
        assert "Failed to process 1 repository(ies)" in result.output
