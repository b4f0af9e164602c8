"""Tests for environment based parameter configuration."""

import pytest

from model import ParameterSet
import params.text as params


def test_defaults_without_environment():
    group = params.ParameterGroup.for_model(environ={})
    assert group.parameterSet() == ParameterSet()


def test_values_from_environment():
    group = params.ParameterGroup.for_model(environ={
        "SINMOD_AMPLITUDE": "1.5",
        "SINMOD_PHASE": " 3.1 ",
        "SINMOD_HARMONIC_COUNT": "7",
    })
    values = group.getValues()
    assert values["amplitude"] == 1.5
    assert values["phase"] == 3.1
    assert values["harmonic_count"] == 7
    assert values["period"] == 2.0
    assert list(values) == [
        "amplitude", "phase", "angular_frequency", "period", "harmonic_count"]


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("SINMOD_PERIOD", "4.5")
    assert params.ParameterGroup.for_model().parameterSet().period == 4.5


def test_custom_prefix():
    group = params.ParameterGroup.for_model(
        prefix="SM_", environ={"SM_ANGULAR_FREQUENCY": "2.5"})
    assert group.variable("angular_frequency") == "SM_ANGULAR_FREQUENCY"
    assert group.parameterSet().angular_frequency == 2.5


@pytest.mark.parametrize("name, text", [
    ("SINMOD_AMPLITUDE", "2.5"),
    ("SINMOD_AMPLITUDE", "0"),
    ("SINMOD_PERIOD", "5.5"),
    ("SINMOD_HARMONIC_COUNT", "11"),
    ("SINMOD_HARMONIC_COUNT", "2.5"),
    ("SINMOD_PHASE", "seven"),
])
def test_rejects_invalid_values(name, text):
    group = params.ParameterGroup.for_model(environ={name: text})
    with pytest.raises(ValueError):
        group.getValues()


def test_numeric_parameter_parse():
    p = params.NumericParameter(0.5, 5, 0.5, 2.0)
    assert p.parse("0.5") == 0.5
    assert p.parse("5") == 5.0
    with pytest.raises(ValueError):
        p.parse("0.4")


def test_require_rejects_wrong_types():
    with pytest.raises(TypeError):
        params.NumericParameter("0", 1)
    with pytest.raises(TypeError):
        params.NumericParameter(0, 1, default=None)


def test_define_twice():
    group = params.ParameterGroup(environ={})
    group.define("amplitude", params.NumericParameter(0.1, 2, 0.1, 1.0))
    with pytest.raises(ValueError):
        group.define("amplitude", params.NumericParameter(0.1, 2, 0.1, 1.0))
