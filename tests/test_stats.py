import json

import pytest

from console_wordle.game import Round
from console_wordle.stats import AggregateStats, load_stats, save_stats


def finished_round(won):
    game_round = Round("crane", max_guesses=1)
    game_round.submit_guess("crane" if won else "stare")
    return game_round


def test_win_updates_counters():
    stats = AggregateStats(attempts=2, wins=1, losses=1, winstreak=1)
    assert stats.record(finished_round(won=True)) == AggregateStats(3, 2, 1, 2)


def test_loss_resets_winstreak():
    stats = AggregateStats(attempts=3, wins=3, losses=0, winstreak=3)
    assert stats.record(finished_round(won=False)) == AggregateStats(4, 3, 1, 0)


def test_unfinished_round_changes_nothing():
    stats = AggregateStats(attempts=1)
    assert stats.record(Round("crane")) is stats


def test_record_does_not_mutate():
    stats = AggregateStats()
    stats.record(finished_round(won=True))
    assert stats == AggregateStats()


def test_summary():
    assert AggregateStats(4, 3, 1, 0).summary() == (
        "Current game stats:\nAttempts: 4\nWins: 3\nLosses: 1\nWinstreak: 0"
    )


def test_save_and_load(tmp_path):
    path = tmp_path / "data.json"
    save_stats(AggregateStats(5, 3, 2, 1), path)
    assert json.loads(path.read_text()) == {
        "current_attempts": 5,
        "current_wins": 3,
        "current_losses": 2,
        "current_winstreak": 1,
    }
    assert load_stats(path) == AggregateStats(5, 3, 2, 1)


def test_load_creates_missing_file(tmp_path):
    path = tmp_path / "data.json"
    assert load_stats(path) == AggregateStats()
    assert path.exists()


@pytest.mark.parametrize("content", ["not json", "[]", '{"current_attempts": "x"}', "{}"])
def test_load_malformed_file_falls_back(tmp_path, capsys, content):
    path = tmp_path / "data.json"
    path.write_text(content)
    assert load_stats(path) == AggregateStats()
    assert "Warning" in capsys.readouterr().out


def test_load_into_missing_directory_warns(tmp_path, capsys):
    path = tmp_path / "nodir" / "data.json"
    assert load_stats(path) == AggregateStats()
    assert "Warning" in capsys.readouterr().out
    assert not path.exists()


def test_load_unreadable_path_warns(tmp_path, capsys):
    # a directory exists but cannot be read as a file
    assert load_stats(tmp_path) == AggregateStats()
    assert "Warning" in capsys.readouterr().out
