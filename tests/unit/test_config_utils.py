from datetime import timedelta

import pytest

import envcfg
from envcfg import EnvReader, ErrorCode, MissingVariableError, ParseError


def test_env_reader_parsers(monkeypatch):
    monkeypatch.setenv("X_STR", "hello")
    monkeypatch.setenv("X_BOOL_F", "False")
    monkeypatch.setenv("X_BOOL_UPPER", "FALSE")
    monkeypatch.setenv("X_INT", "42")
    monkeypatch.setenv("X_UINT", "7")
    monkeypatch.setenv("X_FLOAT", "3.14")
    monkeypatch.setenv("X_DUR", "2h45m")

    cfg = EnvReader()

    assert cfg.get_str("X_STR", "d", "a string") == "hello"
    assert cfg.get_bool("X_BOOL_F", True) is False
    assert cfg.get_bool("X_BOOL_UPPER", False) is True
    assert cfg.get_int("X_INT", 0) == 42
    assert cfg.get_int64("X_INT", 0) == 42
    assert cfg.get_uint("X_UINT", 0) == 7
    assert cfg.get_uint64("X_UINT", 0) == 7
    assert cfg.get_float("X_FLOAT", 0.0) == 3.14
    assert cfg.get_duration("X_DUR", timedelta(0)) == timedelta(hours=2, minutes=45)


def test_absent_returns_default_without_observer():
    seen = []
    cfg = EnvReader(environ={}, on_parse_error=seen.append)

    assert cfg.get_str("A", "x") == "x"
    assert cfg.get_int("A", 5) == 5
    assert cfg.get_uint64("A", 6) == 6
    assert cfg.get_bool("A", False) is False
    assert cfg.get_bool("A", True) is True
    assert cfg.get_duration("A", timedelta(seconds=3)) == timedelta(seconds=3)
    assert seen == []


def test_present_value_wins_over_default():
    cfg = EnvReader(environ={"N": "10", "S": ""})
    assert cfg.get_int("N", 99) == 10
    assert cfg.get_str("S", "fallback") == ""
    assert cfg.get_bool("S", False) is True


@pytest.mark.parametrize(
    "method,raw,default",
    [
        ("get_int", "abc", 1),
        ("get_int64", "9223372036854775808", 2),
        ("get_uint", "+3", 5),
        ("get_uint", "-3", 5),
        ("get_uint64", "", 4),
        ("get_float", "x", 1.5),
        ("get_duration", "1x", timedelta(seconds=1)),
    ],
)
def test_unparseable_reports_once_and_returns_default(method, raw, default):
    seen = []
    cfg = EnvReader(environ={"K": raw}, on_parse_error=seen.append)

    assert getattr(cfg, method)("K", default) == default
    assert len(seen) == 1
    err = seen[0]
    assert isinstance(err, ParseError)
    assert err.key == "K" and err.value == raw
    assert err.code is ErrorCode.PARSE
    assert str(err).startswith("env: K parse error: ")


def test_must_raises_typed_errors():
    cfg = EnvReader(environ={"BAD": "x", "GOOD": "300ms"})

    with pytest.raises(MissingVariableError) as e:
        cfg.must_str("MISSING")
    assert str(e.value) == "env: MISSING not set"

    with pytest.raises(ParseError) as e2:
        cfg.must_int("BAD")
    assert str(e2.value) == 'env: BAD parse error: parsing "x": invalid syntax'

    assert cfg.must_duration("GOOD") == timedelta(milliseconds=300)
    assert cfg.must_bool("BAD") is True


def test_describe_records_first_use():
    cfg = EnvReader(environ={})
    cfg.get_int("PORT", 8080, "listen port")
    cfg.get_int("PORT", 1, "ignored")
    with pytest.raises(MissingVariableError):
        cfg.must_str("TOKEN", "api token")

    specs = cfg.describe()
    assert [(s.name, s.kind, s.description, s.required) for s in specs] == [
        ("PORT", "int", "listen port", False),
        ("TOKEN", "string", "api token", True),
    ]


def test_module_level_uses_parse_log(monkeypatch):
    seen = []
    assert envcfg.set_parse_log(seen.append) is None
    monkeypatch.setenv("MOD_INT", "nope")
    monkeypatch.setenv("MOD_DUR", "-1.5h")

    assert envcfg.get_int("MOD_INT", 3) == 3
    assert envcfg.get_duration("MOD_DUR", timedelta(0)) == -timedelta(hours=1, minutes=30)
    assert len(seen) == 1 and seen[0].key == "MOD_INT"


def test_set_parse_log_last_writer_wins(monkeypatch):
    first, second = [], []
    envcfg.set_parse_log(first.append)
    envcfg.set_parse_log(second.append)
    monkeypatch.setenv("MOD_UINT", "-1")

    assert envcfg.get_uint("MOD_UINT", 9) == 9
    assert first == [] and len(second) == 1


def test_module_level_must_exits_on_missing(monkeypatch, capsys):
    monkeypatch.delenv("MISSING_ENV_VAR_FOR_TEST", raising=False)
    with pytest.raises(SystemExit) as e:
        envcfg.must_str("MISSING_ENV_VAR_FOR_TEST", "needed")
    assert e.value.code == 1
    assert "env: MISSING_ENV_VAR_FOR_TEST not set" in capsys.readouterr().err


def test_module_level_must_exits_on_parse_error(monkeypatch, capsys):
    monkeypatch.setenv("MUST_INT_BAD", "1.5")
    with pytest.raises(SystemExit):
        envcfg.must_int("MUST_INT_BAD")
    assert 'env: MUST_INT_BAD parse error: parsing "1.5": invalid syntax' in capsys.readouterr().err


def test_module_level_must_returns_value(monkeypatch):
    monkeypatch.setenv("NEEDED", "ok")
    monkeypatch.setenv("NEEDED_N", "18446744073709551615")
    assert envcfg.must_str("NEEDED") == "ok"
    assert envcfg.must_uint64("NEEDED_N") == 2**64 - 1


def test_describe_marks_required_on_later_must():
    cfg = EnvReader(environ={"X": "1"})
    cfg.get_int("X", 0, "optional first")
    assert cfg.must_int("X", "then required") == 1

    (spec,) = cfg.describe()
    assert spec.required is True
    assert spec.description == "optional first"
