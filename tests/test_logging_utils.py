import logging

from loguru import logger

import simpl.logging_utils as logging_utils
from simpl.eval.small_step import evaluate_small_step
from simpl.surface.parser import parse_expr


def test_parse_log_filter_global_level() -> None:
    assert logging_utils.parse_log_filter("info") == {"": "INFO"}


def test_parse_log_filter_modules() -> None:
    assert logging_utils.parse_log_filter("debug, simpl.eval=trace, simpl.core=false") == {
        "": "DEBUG",
        "simpl.eval": "TRACE",
        "simpl.core": False,
    }


def test_parse_log_filter_reads_env(monkeypatch) -> None:
    monkeypatch.setenv("SIMPL_LOG_FILTER", "error")
    assert logging_utils.parse_log_filter() == {"": "ERROR"}


def test_configure_logging_emits_evaluation_steps(monkeypatch, capsys) -> None:
    logging_utils._CONFIGURED_PROFILE = None
    logging_utils.configure_logging(log_filter="warning,simpl.eval=trace")
    try:
        evaluate_small_step(parse_expr("1 + 2"))
        err = capsys.readouterr().err
        assert "eval.small.start" in err
        assert "eval.small.step n=1 expr=3" in err
    finally:
        logger.remove()
        logger.disable("simpl")
        logging_utils._CONFIGURED_PROFILE = None


def test_configure_logging_is_idempotent(monkeypatch) -> None:
    logging_utils._CONFIGURED_PROFILE = None
    try:
        logging_utils.configure_logging()
        logging_utils.configure_logging()
        intercepts = [h for h in logging.getLogger().handlers if isinstance(h, logging_utils.InterceptHandler)]
        assert len(intercepts) == 1
    finally:
        logger.remove()
        logger.disable("simpl")
        logging_utils._CONFIGURED_PROFILE = None


def test_sink_level_is_lowest_filter_level() -> None:
    assert logging_utils.sink_level({"": "WARNING"}) == "WARNING"
    assert logging_utils.sink_level({"": "WARNING", "simpl.eval": "TRACE", "simpl.core": False}) == "TRACE"


def test_records_below_filter_are_not_formatted() -> None:
    rendered: list[str] = []

    class Rendered:
        def __str__(self) -> str:
            rendered.append("str")
            return "rendered"

    logging_utils._CONFIGURED_PROFILE = None
    logging_utils.configure_logging(log_filter="warning")
    try:
        logger.trace("eval.small.step expr={}", Rendered())
        assert rendered == []
    finally:
        logger.remove()
        logger.disable("simpl")
        logging_utils._CONFIGURED_PROFILE = None
