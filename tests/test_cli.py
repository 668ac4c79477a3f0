import pytest

from symdiff import Mul, Variable, differentiate
from symdiff.cli import main, sample_expressions
from symdiff.config import EngineConfig, parse_bindings
from symdiff.logging_system import LogLevel, configure_logging, get_logger, set_log_level
from symdiff.expression_tree.utils.simplifier import RuleSet


def test_prints_each_sample_derivative(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == len(sample_expressions())
    assert lines[0] == "(x * y)'(x) = y"
    assert lines[1] == "(x / y)'(x) = (y / (y * y))"
    assert lines[2] == "exp((x * y))'(x) = (y * exp((x * y)))"
    assert lines[3] == "log((x * (y / 2.0)))'(x) = (1.0 / (x * (y / 2.0)))"
    assert lines[4] == "((3.0 * y) * x)'(x) = (3.0 * y)"


def test_other_variable(capsys):
    assert main(["--variable", "y"]) == 0
    assert capsys.readouterr().out.splitlines()[0] == "(x * y)'(y) = x"


def test_evaluates_at_a_point(capsys):
    assert main(["--at", "x=2", "y=3"]) == 0
    out = capsys.readouterr().out
    assert "at {'x': 2.0, 'y': 3.0}: 3.0" in out


def test_unbound_variable_exits_with_error(capsys):
    assert main(["--at", "x=2"]) == 1
    assert "(x * y)'(x) = y" in capsys.readouterr().out


def test_bad_binding_is_a_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        main(["--at", "x"])
    assert excinfo.value.code == 2


def test_latex_and_extended_rules(capsys):
    assert main(["--rule-set", "extended", "--latex"]) == 0
    out = capsys.readouterr().out
    assert "latex:" in out


def test_parse_bindings():
    assert parse_bindings(["x=2", " y = -1.5"]) == {'x': 2.0, 'y': -1.5}
    with pytest.raises(ValueError):
        parse_bindings(["=1"])
    with pytest.raises(ValueError):
        parse_bindings(["x=abc"])


def test_config_defaults():
    config = EngineConfig()
    assert config.rule_set is RuleSet.MINIMAL
    assert config.variable == 'x'
    assert config.log_level is LogLevel.MINIMAL
    assert config.evaluation_point == {}


def test_verbose_logging_traces_rules(tmp_path):
    log_file = tmp_path / "engine.log"
    configure_logging(LogLevel.VERBOSE, log_to_file=True, log_file_path=str(log_file))
    differentiate(Mul(Variable('x'), Variable('y')), 'x')
    for handler in get_logger().logger.handlers:
        handler.flush()
    text = log_file.read_text()
    assert "DEBUG: d/dx (x * y) = y" in text
    assert "DEBUG: simplify" in text
    assert "d/dx of 3 nodes -> 1 nodes (minimal rules)" in text


def test_default_level_keeps_engine_quiet(tmp_path):
    log_file = tmp_path / "engine.log"
    configure_logging(LogLevel.MINIMAL, log_to_file=True, log_file_path=str(log_file))
    differentiate(Mul(Variable('x'), Variable('y')), 'x')
    for handler in get_logger().logger.handlers:
        handler.flush()
    assert log_file.read_text() == ""


def test_raising_log_level_enables_engine_trace(tmp_path):
    log_file = tmp_path / "engine.log"
    configure_logging(LogLevel.MINIMAL, log_to_file=True, log_file_path=str(log_file))
    set_log_level(LogLevel.VERBOSE)
    assert get_logger().log_level is LogLevel.VERBOSE
    differentiate(Mul(Variable('x'), Variable('y')), 'x')
    for handler in get_logger().logger.handlers:
        handler.flush()
    assert "DEBUG: d/dx (x * y) = y" in log_file.read_text()


def test_log_level_from_name():
    assert LogLevel.from_name("verbose") is LogLevel.VERBOSE
    with pytest.raises(ValueError):
        LogLevel.from_name("loud")
