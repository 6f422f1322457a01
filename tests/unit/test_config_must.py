import pytest

from cenv import ErrorCode, FatalEnvError, InvalidEnvError, MissingEnvError, ParseError

MUST_GETTERS = [
    "must_get_bool",
    "must_get_float32",
    "must_get_float64",
    "must_get_int",
    "must_get_int32",
    "must_get_int64",
    "must_get_string",
    "must_get_uint",
    "must_get_uint32",
    "must_get_uint64",
]


@pytest.mark.parametrize("getter", MUST_GETTERS)
def test_unset_variable_is_fatal(cfg, getter):
    with pytest.raises(MissingEnvError) as ei:
        getattr(cfg, getter)("noenv")
    assert str(ei.value) == "NOENV must be set"
    assert ei.value.key == "NOENV"
    assert ei.value.code is ErrorCode.MISSING


def test_must_get_int_unset_scenario(cfg):
    with pytest.raises(FatalEnvError, match="ENV_KEY must be set"):
        cfg.must_get_int("ENV_KEY")


def test_must_get_int_unparsable_scenario(cfg, env):
    env["ENV_KEY"] = "foo"
    with pytest.raises(InvalidEnvError) as ei:
        cfg.must_get_int("ENV_KEY")
    err = ei.value
    assert str(err) == 'ENV_KEY can\'t be got by the error: parse_int: parsing "foo": invalid syntax'
    assert err.code is ErrorCode.SYNTAX
    assert isinstance(err.__cause__, ParseError)
    assert err.cause is err.__cause__


def test_must_get_range_error(cfg, env):
    env["APP_WORKERS"] = "4294967296"
    with pytest.raises(InvalidEnvError) as ei:
        cfg.must_get_uint32("app.workers")
    assert ei.value.code is ErrorCode.RANGE
    assert "APP_WORKERS" in str(ei.value)
    assert "value out of range" in str(ei.value)


def test_set_but_empty_differs_from_unset(cfg, env):
    env["ENV_KEY"] = ""
    assert cfg.must_get_string("ENV_KEY") == ""
    with pytest.raises(InvalidEnvError):
        cfg.must_get_int("ENV_KEY")


@pytest.mark.parametrize("fragments", [("ENV_KEY",), ("env.key",), ("env", "key")])
def test_must_agrees_with_fallible(cfg, env, fragments):
    env["ENV_KEY"] = "-2147483648"
    value, err = cfg.get_int32(*fragments)
    assert err is None
    assert cfg.must_get_int32(*fragments) == value

    env["ENV_KEY"] = "True"
    assert cfg.must_get_bool(*fragments) is cfg.get_bool(*fragments).value is True

    env["ENV_KEY"] = "+3.14e10"
    assert cfg.must_get_float64(*fragments) == cfg.get_float64(*fragments).value == 3.14e10
    assert cfg.must_get_float32(*fragments) == cfg.get_float32(*fragments).value


def test_must_values(cfg, env):
    env.update({
        "A_STR": "hello",
        "A_INT": "-1",
        "A_INT64": "9223372036854775807",
        "A_UINT": "0",
        "A_UINT64": "18446744073709551615",
    })
    assert cfg.must_get_string("a.str") == "hello"
    assert cfg.must_get_int("a.int") == -1
    assert cfg.must_get_int64("a", "int64") == 9223372036854775807
    assert cfg.must_get_uint("A_UINT") == 0
    assert cfg.must_get_uint64("a.uint64") == 18446744073709551615


def test_fatal_errors_are_not_value_errors(cfg):
    with pytest.raises(MissingEnvError) as ei:
        cfg.must_get_bool("noenv")
    assert isinstance(ei.value, RuntimeError)
    assert not isinstance(ei.value, ValueError)


@pytest.mark.parametrize("getter", ["must_get_int", "must_get_int64", "must_get_uint", "must_get_uint32"])
def test_must_get_huge_integer_is_invalid(cfg, env, getter):
    env["ENV_KEY"] = "9" * 5000
    with pytest.raises(InvalidEnvError) as ei:
        getattr(cfg, getter)("ENV_KEY")
    assert ei.value.code is ErrorCode.RANGE


def test_must_get_uint_native_boundary(cfg, env):
    from cenv import NATIVE_BITS

    env["ENV_KEY"] = str(2**NATIVE_BITS - 1)
    assert cfg.must_get_uint("ENV_KEY") == 2**NATIVE_BITS - 1
    env["ENV_KEY"] = str(2**NATIVE_BITS)
    with pytest.raises(InvalidEnvError):
        cfg.must_get_uint("ENV_KEY")


def test_must_get_float32_rounds_once(cfg, env):
    env["ENV_KEY"] = "1.0000000596046447753906250001"
    assert cfg.must_get_float32("env.key") == 1 + 2**-23
