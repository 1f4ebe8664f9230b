import importlib
from pathlib import Path

import pytest
from loguru import logger
from typer.testing import CliRunner

import simpl.logging_utils as logging_utils

cli_app_module = importlib.import_module("simpl.cli.app")


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    for name in ("SIMPL_STRATEGY", "SIMPL_TYPECHECK", "SIMPL_TRACE_WIDTH", "SIMPL_LOG_FILTER"):
        monkeypatch.delenv(name, raising=False)
    yield
    logger.remove()
    logger.disable("simpl")
    logging_utils._CONFIGURED_PROFILE = None


def invoke(*args: str):
    return CliRunner().invoke(cli_app_module.app, list(args))


def test_eval_prints_value() -> None:
    result = invoke("eval", "let x = 5 in x + 1")
    assert result.exit_code == 0
    assert result.output.strip() == "6"


def test_eval_big_step_strategy() -> None:
    result = invoke("eval", "--strategy", "big", "if 2 <= 3 then true else false")
    assert result.exit_code == 0
    assert result.output.strip() == "true"


def test_eval_strategy_from_env(monkeypatch) -> None:
    captured: dict[str, object] = {}

    def _fake_interpret(text, strategy, *, typecheck=False):
        captured["strategy"] = strategy
        captured["typecheck"] = typecheck
        from simpl.core.ast import IntLit

        return IntLit(1)

    monkeypatch.setenv("SIMPL_STRATEGY", "big")
    monkeypatch.setenv("SIMPL_TYPECHECK", "true")
    monkeypatch.setattr(cli_app_module, "interpret", _fake_interpret)
    result = invoke("eval", "1")
    assert result.exit_code == 0
    assert captured == {"strategy": "big", "typecheck": True}


def test_eval_reads_file(tmp_path: Path) -> None:
    program = tmp_path / "prog.simpl"
    program.write_text("(* square *)\nlet n = 7 in n * n\n", encoding="utf-8")
    result = invoke("eval", "--file", str(program))
    assert result.exit_code == 0
    assert result.output.strip() == "49"


def test_eval_requires_exactly_one_source(tmp_path: Path) -> None:
    program = tmp_path / "prog.simpl"
    program.write_text("1", encoding="utf-8")
    assert invoke("eval").exit_code != 0
    assert invoke("eval", "1", "--file", str(program)).exit_code != 0


def test_eval_reports_runtime_error() -> None:
    result = invoke("eval", "true + 1")
    assert result.exit_code == 1
    assert "error: Operator and operand type mismatch" in result.output


def test_eval_typecheck_flag() -> None:
    source = "if true then 1 else false"
    assert invoke("eval", source).exit_code == 0
    result = invoke("eval", "--typecheck", source)
    assert result.exit_code == 1
    assert "Branches of if must have same type" in result.output


def test_eval_reports_syntax_error() -> None:
    result = invoke("eval", "let x = in 1")
    assert result.exit_code == 1
    assert "error:" in result.output


def test_trace_numbers_each_reduct() -> None:
    result = invoke("trace", "(1 + 2) * (3 + 4)")
    assert result.exit_code == 0
    lines = [line.strip() for line in result.output.strip().splitlines()]
    assert lines == [
        "0  (1 + 2) * (3 + 4)",
        "1  3 * (3 + 4)",
        "2  3 * 7",
        "3  21",
    ]


def test_trace_truncates_to_width(monkeypatch) -> None:
    monkeypatch.setenv("SIMPL_TRACE_WIDTH", "8")
    result = invoke("trace", "let x = 100 in x")
    assert result.exit_code == 0
    assert result.output.splitlines()[0].strip() == "0  let x..."


def test_trace_stops_at_failing_step() -> None:
    result = invoke("trace", "(1 + 1) + true")
    assert result.exit_code == 1
    assert "1  2 + true" in result.output
    assert "error: Operator and operand type mismatch" in result.output


def test_compare_agree() -> None:
    result = invoke("compare", "let x = 2 in x * x")
    assert result.exit_code == 0
    assert "small  4" in result.output
    assert "big    4" in result.output
    assert "agree" in result.output


def test_compare_agrees_on_failures() -> None:
    result = invoke("compare", "if 1 then 2 else 3")
    assert result.exit_code == 0
    assert "GuardTypeMismatch" in result.output


def test_compare_reports_disagreement(monkeypatch) -> None:
    from simpl.core.ast import IntLit

    monkeypatch.setitem(cli_app_module.EVALUATORS, "big", lambda _expr: IntLit(0))
    result = invoke("compare", "1 + 1")
    assert result.exit_code == 1
    assert "disagree" in result.output


def test_check_prints_type() -> None:
    result = invoke("check", "let b = 1 <= 2 in if b then 1 else 2")
    assert result.exit_code == 0
    assert result.output.strip() == "int"


def test_check_reports_error() -> None:
    result = invoke("check", "x")
    assert result.exit_code == 1
    assert "error: Unbound variable: x" in result.output


def test_parse_prints_tree() -> None:
    result = invoke("parse", "x + 1")
    assert result.exit_code == 0
    assert "Binop(" in result.output
    assert "Var(name='x')" in result.output


def test_unknown_command() -> None:
    result = invoke("run", "1")
    assert result.exit_code != 0
    assert "No such command 'run'" in result.output


def test_eval_long_sum_with_default_logging() -> None:
    result = invoke("eval", " + ".join(["1"] * 400))
    assert result.exit_code == 0
    assert result.output.strip() == "400"


@pytest.mark.parametrize("command", ["eval", "trace", "compare"])
def test_deep_nesting_reports_error(command: str) -> None:
    result = invoke(command, " + ".join(["1"] * 5000))
    assert result.exit_code == 1
    assert "error: expression nested too deeply" in result.output


@pytest.mark.parametrize(
    ("width", "expected"),
    [(0, "let x = 100 in x"), (2, "le"), (3, "let"), (4, "l..."), (16, "let x = 100 in x")],
)
def test_truncate_never_exceeds_width(width: int, expected: str) -> None:
    assert cli_app_module._truncate("let x = 100 in x", width) == expected


def test_trace_narrow_width(monkeypatch) -> None:
    monkeypatch.setenv("SIMPL_TRACE_WIDTH", "2")
    result = invoke("trace", "1 + 2")
    assert result.exit_code == 0
    assert [line.strip() for line in result.output.strip().splitlines()] == ["0  1", "1  3"]
