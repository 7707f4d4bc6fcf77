import json
import sys

import pytest
import yaml

from paramobject.cli import cli, main, validate_config
from paramobject.core.exceptions import ConfigurationError, CyclicParameterObjectError
from paramobject.types.registry import SimpleTypeRegistry


def setup_function() -> None:
    SimpleTypeRegistry.reset()


ORDER_QUERY_NAMES = [
    "status",
    "customer.email",
    "customer.country",
    "price.amount",
    "price.currency",
    "tags",
]


def test_main_returns_parameter_summaries():
    result = main("sample_params:OrderQuery")

    assert result["status"] == "success"
    assert result["target"] == "sample_params:OrderQuery"
    assert [p["name"] for p in result["parameters"]] == ORDER_QUERY_NAMES

    email = result["parameters"][1]
    assert email["required"] is True
    assert email["nullable"] is False
    assert email["description"] == "Customer e-mail"
    assert email["accessor"] == "Customer.email"


def test_main_applies_config_dict():
    result = main(
        "sample_params:OrderQuery",
        config_dict={"simple_types": ["sample_params:Money"]},
    )

    names = [p["name"] for p in result["parameters"]]
    assert "price" in names
    assert "price.amount" not in names


def test_main_reads_config_file(tmp_path):
    path = tmp_path / "paramobject.yaml"
    path.write_text("simple_types:\n  - sample_params:Customer\n")

    result = main("sample_params:OrderQuery", config_path=str(path))

    assert [p["name"] for p in result["parameters"]][:2] == ["status", "customer"]


def test_main_rejects_non_class_target():
    with pytest.raises(ConfigurationError, match="Target must be a class"):
        main("sample_params:NOT_A_CLASS")


def test_main_propagates_cycles():
    with pytest.raises(CyclicParameterObjectError):
        main("sample_params:Node")


def test_validate_config(tmp_path):
    path = tmp_path / "paramobject.json"
    path.write_text(json.dumps({"plugins": ["sample_plugin"]}))

    assert validate_config(str(path)) is True


def test_validate_config_unresolvable_type(tmp_path):
    path = tmp_path / "paramobject.json"
    path.write_text(json.dumps({"simple_types": ["sample_params:Missing"]}))

    with pytest.raises(ConfigurationError):
        validate_config(str(path))


def _run_cli(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["paramobject", *argv])
    with pytest.raises(SystemExit) as exc:
        cli()
    return exc.value.code


def test_cli_extract_prints_json(monkeypatch, capsys):
    code = _run_cli(monkeypatch, "extract", "sample_params:OrderQuery")

    assert code == 0
    out = json.loads(capsys.readouterr().out)
    assert [p["name"] for p in out["parameters"]] == ORDER_QUERY_NAMES


def test_cli_extract_prints_yaml(monkeypatch, capsys):
    code = _run_cli(monkeypatch, "extract", "sample_params:OrderQuery", "--format", "yaml")

    assert code == 0
    out = yaml.safe_load(capsys.readouterr().out)
    assert out["target"] == "sample_params:OrderQuery"


def test_cli_extract_failure_exits_with_1(monkeypatch):
    assert _run_cli(monkeypatch, "extract", "sample_params:Node") == 1


def test_cli_validate(monkeypatch, tmp_path):
    good = tmp_path / "good.json"
    good.write_text(json.dumps({"simple_types": ["sample_params:Money"]}))
    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps({"simple_types": ["Money"]}))

    assert _run_cli(monkeypatch, "validate", str(good)) == 0
    assert _run_cli(monkeypatch, "validate", str(bad)) == 1


def test_cli_without_command_prints_help(monkeypatch, capsys):
    assert _run_cli(monkeypatch) == 0
    assert "usage" in capsys.readouterr().out.lower()
