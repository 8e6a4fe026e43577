"""Tests for the command-line entry point."""
from camel_cards.cli import main


def test_both_modes(example_file, capsys):
    assert main([str(example_file)]) == 0
    out = capsys.readouterr().out
    assert "Standard total: 6440" in out
    assert "Wildcard total: 5905" in out


def test_single_mode_with_report(example_file, capsys):
    assert main([str(example_file), "--mode", "wildcard", "--report"]) == 0
    out = capsys.readouterr().out
    assert "Wildcard total: 5905" in out
    assert "Standard total" not in out
    assert "FourOfAKind" in out


def test_debug_log(example_file, tmp_path):
    log = tmp_path / "debug.ndjson"
    assert main([str(example_file), "--mode", "standard", "--debug-log", str(log)]) == 0
    assert len(log.read_text().splitlines()) == 5


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.txt")]) == 1
    assert "not found" in capsys.readouterr().out


def test_domain_error_exits_nonzero(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("AKQT9 1\nAKQT9 2\n")
    assert main([str(path)]) == 1
    assert "tie" in capsys.readouterr().out
    assert main([str(path), "--ties", "stable"]) == 0


def test_cli_total_matches_score_for_huge_bids(tmp_path, capsys):
    path = tmp_path / "big.txt"
    path.write_text("23456 4000000000000000000\nAKQT9 4000000000000000000\n")
    assert main([str(path), "--mode", "standard"]) == 0
    assert "Standard total: 12000000000000000000" in capsys.readouterr().out
