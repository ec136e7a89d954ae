"""
Unit tests for CLI commands.

Tests cover:
- samples / show commands
- recommend command
- batch command
- --log-level option
"""

import textwrap

from typer.testing import CliRunner

from decision_tree.cli.app import app

runner = CliRunner()


class TestSamplesCommand:
    """Tests for samples command."""

    def test_lists_vacation(self):
        result = runner.invoke(app, ["samples"])

        assert result.exit_code == 0
        assert "vacation" in result.stdout


class TestShowCommand:
    """Tests for show command."""

    def test_show_vacation(self):
        """Show renders branch labels and leaf values."""
        result = runner.invoke(app, ["show", "vacation"])

        assert result.exit_code == 0
        assert "Budget check" in result.stdout
        assert "Low budget options" in result.stdout
        assert "Paris" in result.stdout
        assert "Maldives" in result.stdout
        assert "Nodes: 7, Depth: 2" in result.stdout

    def test_show_unknown_tree(self):
        result = runner.invoke(app, ["show", "nonexistent"])

        assert result.exit_code == 2
        assert "Sample tree not found" in result.stdout


class TestRecommendCommand:
    """Tests for recommend command."""

    def test_low_budget_beach(self):
        result = runner.invoke(app, ["recommend", "--budget", "1000", "--beach"])

        assert result.exit_code == 0
        assert "Destination: Thailand" in result.stdout

    def test_high_budget_adventure(self):
        result = runner.invoke(app, ["recommend", "--budget", "3000", "--adventure"])

        assert result.exit_code == 0
        assert "New Zealand" in result.stdout

    def test_defaults_to_paris(self):
        result = runner.invoke(app, ["recommend"])

        assert result.exit_code == 0
        assert "Destination: Paris" in result.stdout

    def test_trace_shows_effects(self):
        result = runner.invoke(app, ["recommend", "-b", "2500", "--trace"])

        assert result.exit_code == 0
        assert "Maldives" in result.stdout
        assert "Effects" in result.stdout
        assert "Budget check" in result.stdout
        assert "High budget options" in result.stdout

    def test_negative_budget_rejected(self):
        result = runner.invoke(app, ["recommend", "--budget", "-1"])

        assert result.exit_code != 0


class TestBatchCommand:
    """Tests for batch command."""

    def test_batch_from_file(self, tmp_path):
        fp = tmp_path / "profiles.yaml"
        fp.write_text(
            textwrap.dedent(
                """
                profiles:
                  - name: alex
                    budget: 1000
                    prefers_beach: true
                  - name: jordan
                    budget: 2500
                """
            ),
            encoding="utf-8",
        )

        result = runner.invoke(app, ["batch", str(fp)])

        assert result.exit_code == 0
        assert "alex" in result.stdout
        assert "Thailand" in result.stdout
        assert "jordan" in result.stdout
        assert "Maldives" in result.stdout
        assert "Evaluated 2 profile(s)" in result.stdout

    def test_batch_missing_path(self, tmp_path):
        result = runner.invoke(app, ["batch", str(tmp_path / "missing.yaml")])

        assert result.exit_code == 1
        assert "Path not found" in result.stdout

    def test_batch_invalid_profiles(self, tmp_path):
        fp = tmp_path / "bad.yaml"
        fp.write_text("profiles:\n  - name: x\n    budget: -3\n", encoding="utf-8")

        result = runner.invoke(app, ["batch", str(fp)])

        assert result.exit_code == 1
        assert "Failed to load data" in result.stdout

    def test_batch_empty_folder(self, tmp_path):
        result = runner.invoke(app, ["batch", str(tmp_path)])

        assert result.exit_code == 0
        assert "No profiles found" in result.stdout


class TestLogLevelOption:
    """Tests for the global --log-level option."""

    def test_valid_level(self):
        result = runner.invoke(app, ["--log-level", "debug", "samples"])

        assert result.exit_code == 0

    def test_invalid_level(self):
        result = runner.invoke(app, ["--log-level", "chatty", "samples"])

        assert result.exit_code == 2
        assert "Unknown log level" in result.stdout
