"""CLI parser and entrypoint behaviour tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from jshint_runner.cli import EXIT_FATAL, EXIT_OK, EXIT_PROBLEMS, _build_parser, _to_run_config, main
from jshint_runner.models import RunConfig
from jshint_runner.runner import Runner
from tests._fixtures.fake_engine import FakeEngine


def test_cli_defaults() -> None:
    config = _to_run_config(_build_parser().parse_intermixed_args(["app.js"]))

    assert config == RunConfig(input_paths=("app.js",))
    assert config.charset == "UTF-8"


def test_cli_accepts_options_intermixed_with_inputs() -> None:
    parser = _build_parser()
    args = parser.parse_intermixed_args(
        [
            "src",
            "--charset",
            "ISO-8859-1",
            "lib/app.js",
            "--custom",
            "vendor/jshint.js",
            "--config",
            "jshint.properties",
            "--output",
            "report.html",
            "test",
        ]
    )
    config = _to_run_config(args)

    assert config.input_paths == ("src", "lib/app.js", "test")
    assert config.charset == "ISO-8859-1"
    assert config.custom_engine == Path("vendor/jshint.js")
    assert config.config_file == Path("jshint.properties")
    assert config.output_file == Path("report.html")


def test_cli_accepts_verbose_flag() -> None:
    args = _build_parser().parse_intermixed_args(["--verbose", "app.js"])

    assert args.verbose is True


def test_cli_rejects_option_without_value(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _build_parser().parse_intermixed_args(["app.js", "--output"])

    assert excinfo.value.code == 2
    assert "--output" in capsys.readouterr().err


def test_cli_rejects_option_name_as_value() -> None:
    with pytest.raises(SystemExit):
        _build_parser().parse_intermixed_args(["--output", "--config", "jshint.properties", "app.js"])


def test_main_returns_zero_for_clean_run(tmp_path: Path, capsys) -> None:
    source = tmp_path / "clean.js"
    source.write_text("var ok = true;\n", encoding="utf-8")

    status = main([str(source)], runner=Runner(engine=FakeEngine()))

    assert status == EXIT_OK
    assert capsys.readouterr().out == ""


def test_main_returns_one_when_problems_found(tmp_path: Path, capsys) -> None:
    source = tmp_path / "app.js"
    source.write_text("BAD\n", encoding="utf-8")
    report = tmp_path / "report.txt"

    status = main([str(source), "--output", str(report)], runner=Runner(engine=FakeEngine()))

    assert status == EXIT_PROBLEMS
    assert capsys.readouterr().out == "app.js:1:1: warning [W033] Missing semicolon.\n"
    assert report.read_text(encoding="utf-8").startswith("app.js\n")


def test_main_prints_error_and_usage_on_fatal_error(tmp_path: Path, capsys) -> None:
    missing = tmp_path / "missing.js"

    with pytest.raises(SystemExit) as excinfo:
        main([str(missing)], runner=Runner(engine=FakeEngine()))

    assert excinfo.value.code == EXIT_FATAL
    err = capsys.readouterr().err
    assert f"No such file: {missing}" in err
    assert "usage: jshint-runner" in err
    assert "--custom <custom-jshint-file>" in err


def test_main_reports_unsupported_charset(tmp_path: Path, capsys) -> None:
    source = tmp_path / "app.js"
    source.write_text("var a;\n", encoding="utf-8")
    engine = FakeEngine()

    with pytest.raises(SystemExit) as excinfo:
        main(["--charset", "no-such-charset", str(source)], runner=Runner(engine=engine))

    assert excinfo.value.code == EXIT_FATAL
    assert "Unknown or unsupported charset: no-such-charset" in capsys.readouterr().err
    assert engine.checked == []


def test_main_reports_missing_inputs(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([], runner=Runner(engine=FakeEngine()))

    assert excinfo.value.code == EXIT_FATAL
    assert "No input files" in capsys.readouterr().err
