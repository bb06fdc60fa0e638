"""
Tests for the CLI, configuration and pipeline.
"""

import sys
from unittest.mock import patch

import pytest

from number_labeler.cli import args_to_config, create_parser, main, parse_args
from number_labeler.config import Config, create_default_config
from number_labeler.core.replacements import ReplacementPreset
from number_labeler.main import GenerationResult, LabelingPipeline, write_sequence


class TestConfig:
    """Tests for Config dataclass."""

    def test_create_default_config(self):
        config = create_default_config()
        assert config.upper_bound == sys.maxsize
        assert config.replacements == {}
        assert config.preset is ReplacementPreset.NONE
        assert config.is_valid()

    def test_config_to_dict(self):
        config = Config(upper_bound=10, preset=ReplacementPreset.FIZZBUZZ)
        data = config.to_dict()
        assert data["upper_bound"] == 10
        assert data["preset"] == "fizzbuzz"

    def test_config_from_dict(self):
        data = {
            "upper_bound": 20,
            "replacements": {"4": "A", "7": "B"},
            "preset": "fizzbuzz",
            "unknown": True,
        }
        config = Config.from_dict(data)
        assert config.upper_bound == 20
        assert config.replacements == {4: "A", 7: "B"}
        assert config.preset is ReplacementPreset.FIZZBUZZ

    def test_effective_replacements_layer_over_preset(self):
        config = Config(preset=ReplacementPreset.FIZZBUZZ, replacements={5: "Bazz", 7: "Bang"})
        assert config.effective_replacements() == {3: "Fizz", 5: "Bazz", 7: "Bang"}

    def test_validate_bad_divisor(self):
        errors = Config(replacements={0: "Zero"}).validate()
        assert any("positive integer" in e for e in errors)

    def test_validate_negative_limit(self):
        errors = Config(limit=-1).validate()
        assert any("Limit" in e for e in errors)

    def test_validate_line_ending(self):
        assert not Config(line_ending="\r").is_valid()

    def test_validate_log_level(self):
        errors = Config(log_level="LOUD").validate()
        assert any("Invalid log level" in e for e in errors)


class TestArgParser:
    """Tests for argument parser."""

    def test_defaults(self):
        args = parse_args([])
        assert args.upper_bound == sys.maxsize
        assert args.replace == []
        assert args.preset == "none"
        assert args.limit is None

    def test_positional_bound(self):
        assert parse_args(["15"]).upper_bound == 15

    def test_negative_bound_accepted(self):
        assert parse_args(["--", "-5"]).upper_bound == -5

    def test_repeated_replace(self):
        args = parse_args(["-r", "4=A", "--replace", "7=B"])
        assert args.replace == [(4, "A"), (7, "B")]

    def test_bad_replace_exits(self):
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["-r", "four=A"])
        assert exc_info.value.code == 2

    def test_zero_divisor_replace_exits(self):
        with pytest.raises(SystemExit):
            parse_args(["-r", "0=Zero"])

    def test_unknown_preset_exits(self):
        with pytest.raises(SystemExit):
            parse_args(["--preset", "unknown"])

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args(["--version"])
        assert exc_info.value.code == 0
        assert "number-labeler" in capsys.readouterr().out

    def test_args_to_config(self):
        config = args_to_config(parse_args(["30", "-p", "fizzbuzz", "-r", "7=Bang", "-n", "5", "--crlf", "-v"]))
        assert config.upper_bound == 30
        assert config.preset is ReplacementPreset.FIZZBUZZ
        assert config.replacements == {7: "Bang"}
        assert config.limit == 5
        assert config.line_ending == "\r\n"
        assert config.log_level == "DEBUG"

    def test_quiet_sets_error_level(self):
        assert args_to_config(parse_args(["-q"])).log_level == "ERROR"


class TestPipeline:
    """Tests for LabelingPipeline."""

    def test_run_writes_sequence(self, output_stream):
        config = Config(upper_bound=15, preset=ReplacementPreset.FIZZBUZZ)
        result = LabelingPipeline(config).run(output_stream)
        assert result.success
        assert result.lines_written == 15
        assert output_stream.getvalue().splitlines()[-1] == "Fizz Buzz"

    def test_invalid_config_reported(self, output_stream):
        result = LabelingPipeline(Config(upper_bound=5, replacements={0: "Zero"})).run(output_stream)
        assert not result.success
        assert result.errors
        assert output_stream.getvalue() == ""

    def test_on_complete_callback(self, output_stream):
        seen = []
        LabelingPipeline(Config(upper_bound=3)).run(output_stream, on_complete=seen.append)
        assert len(seen) == 1
        assert isinstance(seen[0], GenerationResult)
        assert seen[0].lines_written == 3

    def test_limit_applied(self, output_stream):
        result = LabelingPipeline(Config(limit=4)).run(output_stream)
        assert result.lines_written == 4
        assert output_stream.getvalue() == "1\n2\n3\n4\n"

    def test_write_sequence(self, output_stream, fizzbuzz_replacements):
        result = write_sequence(output_stream, 10, fizzbuzz_replacements)
        assert result.success
        assert output_stream.getvalue().splitlines() == [
            "1", "2", "Fizz", "4", "Buzz", "Fizz", "7", "8", "Fizz", "Buzz",
        ]

    def test_write_sequence_negative_bound(self, output_stream):
        result = write_sequence(output_stream, -3)
        assert result.success
        assert result.lines_written == 0


class TestMain:
    """Tests for the main entry point."""

    def test_main_prints_sequence(self, capsys):
        assert main(["5", "--preset", "fizzbuzz"]) == 0
        assert capsys.readouterr().out == "1\n2\nFizz\n4\nBuzz\n"

    def test_main_custom_replacements(self, capsys):
        assert main(["28", "-r", "7=B", "-r", "4=A"]) == 0
        assert capsys.readouterr().out.splitlines()[-1] == "A B"

    def test_main_default_bound_with_limit(self, capsys):
        """Default bound is effectively endless; the limit ends output."""
        assert main(["--limit", "3"]) == 0
        assert capsys.readouterr().out == "1\n2\n3\n"

    def test_main_negative_bound_prints_nothing(self, capsys):
        assert main(["--", "-1"]) == 0
        assert capsys.readouterr().out == ""

    def test_main_invalid_config(self, capsys):
        assert main(["5", "--log-level", "LOUD"]) == 1
        assert "Configuration error" in capsys.readouterr().err

    def test_main_pipeline_failure(self, capsys):
        failed = GenerationResult(success=False, errors=["boom"])
        with patch("number_labeler.cli.LabelingPipeline.run", return_value=failed):
            assert main(["5"]) == 1
        assert "Error: boom" in capsys.readouterr().err

    def test_main_broken_pipe(self):
        interrupted = GenerationResult(success=True, lines_written=2, interrupted=True)
        with patch("number_labeler.cli.LabelingPipeline.run", return_value=interrupted), \
                patch("number_labeler.cli._silence_stdout") as silence:
            assert main(["5"]) == 0
        silence.assert_called_once()
