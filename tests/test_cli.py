"""Tests for the rps-shoot command line."""

import re

from typer.testing import CliRunner

from rps_shoot.main import app
from rps_shoot.utils.commit_reveal import compute_commitment, generate_key, verify_commitment

runner = CliRunner()


class TestPlayCommand:
    """Test argument validation and the interactive loop."""

    def test_even_number_of_moves(self):
        result = runner.invoke(app, ["play", "Rock", "Paper"])
        assert result.exit_code == 1
        assert "odd number of moves" in result.output
        assert "Example usage" in result.output

    def test_duplicate_moves(self):
        result = runner.invoke(app, ["play", "Rock", "Paper", "Rock"])
        assert result.exit_code == 1
        assert "unique" in result.output

    def test_one_round_then_exit(self):
        result = runner.invoke(app, ["play", "Rock", "Paper", "Scissors"], input="2\n0\n")
        assert result.exit_code == 0, result.output
        assert "1 - Rock" in result.output
        assert "Your move: Paper" in result.output
        assert "Rounds: 1" in result.output

        commitment = re.search(r"HMAC: ([0-9a-f]{64})", result.output).group(1)
        key = re.search(r"HMAC key: ([0-9a-f]{64})", result.output).group(1)
        computer = re.search(r"Computer move: (\w+)", result.output).group(1)
        assert verify_commitment(key, computer, commitment)

    def test_help_then_move(self):
        result = runner.invoke(app, ["play", "A", "B", "C"], input="?\n1\n", catch_exceptions=False)
        assert result.exit_code == 0
        assert "v PC\\User >" in result.output
        assert "Your move: A" in result.output

    def test_bad_input_reprompts(self):
        result = runner.invoke(app, ["play", "A", "B", "C", "--rounds", "1"], input="9\nB\n")
        assert result.exit_code == 0
        assert "Unknown move: '9'" in result.output
        assert "Your move: B" in result.output

    def test_round_limit(self):
        result = runner.invoke(app, ["play", "A", "B", "C", "-n", "2"], input="1\n2\n")
        assert result.exit_code == 0
        assert "Rounds: 2" in result.output

    def test_end_of_input_exits_cleanly(self):
        result = runner.invoke(app, ["play", "A", "B", "C"], input="")
        assert result.exit_code == 0
        assert "Rounds: 0" in result.output

    def test_moves_named_exit_and_help_are_playable(self):
        result = runner.invoke(app, ["play", "exit", "help", "C", "--rounds", "1"], input="1\n")
        assert result.exit_code == 0, result.output
        assert "Your move: exit" in result.output
        assert "Rounds: 1" in result.output

        result = runner.invoke(app, ["play", "exit", "help", "C", "--rounds", "1"], input="2\n")
        assert result.exit_code == 0, result.output
        assert "Your move: help" in result.output
        assert "v PC" not in result.output

    def test_zero_still_exits_with_reserved_names(self):
        result = runner.invoke(app, ["play", "exit", "help", "C"], input="0\n")
        assert result.exit_code == 0
        assert "Rounds: 0" in result.output


class TestVerifyCommand:
    """Test offline verification."""

    def test_matching(self):
        key = generate_key()
        commitment = compute_commitment(key, "Spock")
        result = runner.invoke(app, ["verify", key.hex(), "Spock", commitment])
        assert result.exit_code == 0
        assert "OK" in result.output

    def test_mismatch(self):
        key = generate_key()
        commitment = compute_commitment(key, "Spock")
        result = runner.invoke(app, ["verify", key.hex(), "Rock", commitment])
        assert result.exit_code == 1
        assert "MISMATCH" in result.output
