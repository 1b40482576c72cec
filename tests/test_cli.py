"""Tests for the Tarot Timer CLI."""

from datetime import datetime

import pytest
from click.testing import CliRunner

from tarot_timer.cli import _common
from tarot_timer.cli.main import cli
from tarot_timer.clock import ManualClock

SYSTEM_CLOCK_FACTORY = _common._get_clock


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep config and database inside tmp_path with a fixed clock."""
    monkeypatch.setenv("TAROT_TIMER_HOME", str(tmp_path))
    monkeypatch.setattr(
        "tarot_timer.cli._common._get_clock",
        lambda config: ManualClock(datetime(2025, 1, 15, 9, 30)),
    )
    return tmp_path


class TestCardCommands:
    """Test the catalog commands."""

    def test_cards(self, runner):
        result = runner.invoke(cli, ["cards"])
        assert result.exit_code == 0
        assert "Total: 78 cards" in result.output

    def test_cards_by_suit(self, runner):
        result = runner.invoke(cli, ["cards", "--suit", "cups"])
        assert result.exit_code == 0
        assert "Total: 14 cards" in result.output

    def test_card(self, runner):
        result = runner.invoke(cli, ["card", "the-fool"])
        assert result.exit_code == 0
        assert "바보" in result.output

    def test_card_position(self, runner):
        result = runner.invoke(cli, ["card", "the-fool"])
        assert "Card 1 of 78" in result.output

    def test_unknown_card(self, runner):
        result = runner.invoke(cli, ["card", "the-jester"])
        assert result.exit_code == 1


class TestTimelineCommands:
    """Test drawing, memos and saving."""

    def test_save_before_draw(self, runner):
        result = runner.invoke(cli, ["save"])
        assert result.exit_code == 1
        assert "draw first" in result.output

    def test_draw_then_save(self, runner):
        result = runner.invoke(cli, ["draw"])
        assert result.exit_code == 0
        assert "Drew 24 cards for 2025-01-15" in result.output

        result = runner.invoke(cli, ["save"])
        assert result.exit_code == 0
        assert "2025-01-15" in result.output

        result = runner.invoke(cli, ["save"])
        assert result.exit_code == 1
        assert "Already saved" in result.output

    def test_memo_before_draw(self, runner):
        result = runner.invoke(cli, ["memo", "9", "too early"])
        assert result.exit_code == 1

    def test_memo_after_draw(self, runner):
        runner.invoke(cli, ["draw"])

        result = runner.invoke(cli, ["memo", "9", "new job"])
        assert result.exit_code == 0
        assert "Saved memo for 09:00" in result.output

        result = runner.invoke(cli, ["today"])
        assert result.exit_code == 0
        assert "new job" in result.output

    def test_memo_requires_text(self, runner):
        result = runner.invoke(cli, ["memo", "9"])
        assert result.exit_code == 2

    def test_memo_hour_range(self, runner):
        result = runner.invoke(cli, ["memo", "24", "late"])
        assert result.exit_code == 2

    def test_blank_memo_is_usage_error(self, runner):
        runner.invoke(cli, ["draw"])
        runner.invoke(cli, ["memo", "9", "new job"])

        result = runner.invoke(cli, ["memo", "9", "   "])
        assert result.exit_code == 2
        assert "Saved memo" not in result.output

        result = runner.invoke(cli, ["today"])
        assert "new job" in result.output

    def test_now_shows_progress(self, runner):
        result = runner.invoke(cli, ["now"])
        assert "Hour progress: 50%" in result.output
        assert "Day progress: 40%" in result.output

    def test_unknown_timezone_in_config(self, runner, isolated_home, monkeypatch):
        monkeypatch.setattr(_common, "_get_clock", SYSTEM_CLOCK_FACTORY)
        (isolated_home / "config.toml").write_text(
            '[clock]\ntimezone = "Mars/Olympus"\n', encoding="utf-8"
        )

        result = runner.invoke(cli, ["today"])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Unknown timezone" in result.output

    def test_now_before_draw(self, runner):
        result = runner.invoke(cli, ["now"])
        assert result.exit_code == 0
        assert "Good Morning" in result.output
        assert "No card drawn" in result.output

    def test_now_after_draw(self, runner):
        runner.invoke(cli, ["draw"])

        result = runner.invoke(cli, ["now"])
        assert result.exit_code == 0
        assert "Next card in 30 minutes" in result.output


class TestJournalCommands:
    """Test journal listing and deletion."""

    def test_empty_list(self, runner):
        result = runner.invoke(cli, ["journal", "list"])
        assert result.exit_code == 0
        assert "No journal entries" in result.output

    def test_list_after_save(self, runner):
        runner.invoke(cli, ["draw"])
        runner.invoke(cli, ["save"])

        result = runner.invoke(cli, ["journal", "list"])
        assert result.exit_code == 0
        assert "Total: 1 entries" in result.output

    def test_show(self, runner):
        runner.invoke(cli, ["draw"])
        runner.invoke(cli, ["save"])

        result = runner.invoke(cli, ["journal", "show", "2025-01-15"])
        assert result.exit_code == 0

        result = runner.invoke(cli, ["journal", "show", "2025-01-14"])
        assert result.exit_code == 1

    def test_memos(self, runner):
        runner.invoke(cli, ["draw"])
        runner.invoke(cli, ["memo", "9", "new job"])
        runner.invoke(cli, ["save"])

        result = runner.invoke(cli, ["journal", "memos", "2025-01-15"])
        assert result.exit_code == 0
        assert "new job" in result.output
        assert "Total: 1 memos" in result.output

        result = runner.invoke(cli, ["journal", "memos", "2025-01-01", "2025-01-14"])
        assert result.exit_code == 0
        assert "No memos saved" in result.output

    def test_memos_bad_date(self, runner):
        result = runner.invoke(cli, ["journal", "memos", "yesterday"])
        assert result.exit_code == 1

    def test_delete_unknown(self, runner):
        result = runner.invoke(cli, ["journal", "delete", "unknown", "--yes"])
        assert result.exit_code == 1
        assert "Nothing to delete" in result.output


class TestInit:
    """Test config template creation."""

    def test_init_creates_config(self, runner, isolated_home):
        result = runner.invoke(cli, ["init"])
        assert result.exit_code == 0
        assert (isolated_home / "config.toml").exists()

    def test_init_keeps_existing(self, runner, isolated_home):
        runner.invoke(cli, ["init"])

        result = runner.invoke(cli, ["init"])
        assert result.exit_code == 0
        assert "already exists" in result.output
