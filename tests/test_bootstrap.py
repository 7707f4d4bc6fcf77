import importlib
import json

import pytest

from paramobject.bootstrap import apply_config, load_config, load_plugins
from paramobject.core.exceptions import ConfigurationError
from paramobject.core.imports import import_string
from paramobject.models.extractor_config import ExtractorConfig
from paramobject.types.registry import SimpleTypeRegistry

import sample_params


def setup_function() -> None:
    SimpleTypeRegistry.reset()


def test_import_string_supports_colon_and_dotted_forms():
    assert import_string("sample_params:Money") is sample_params.Money
    assert import_string("sample_params.Money") is sample_params.Money
    assert import_string("sample_params:Outer.Inner") is sample_params.Outer.Inner


@pytest.mark.parametrize(
    "path, message",
    [
        ("not a path", "Invalid import path"),
        ("Money", "must name an attribute"),
        ("sample_params:Missing", "has no attribute"),
        ("no_such_module_xyz:Thing", "Cannot import module"),
    ],
)
def test_import_string_errors(path, message):
    with pytest.raises(ConfigurationError, match=message):
        import_string(path)


def test_apply_config_adds_and_removes_simple_types():
    SimpleTypeRegistry.add_simple_types(sample_params.Customer)

    apply_config(
        ExtractorConfig(
            simple_types=["sample_params:Money"],
            excluded_simple_types=["sample_params:Customer"],
        )
    )

    assert SimpleTypeRegistry.is_simple(sample_params.Money) is True
    assert SimpleTypeRegistry.is_simple(sample_params.Customer) is False


def test_apply_config_rejects_non_class_simple_type():
    with pytest.raises(ConfigurationError, match="must be a class"):
        apply_config(ExtractorConfig(simple_types=["sample_params:NOT_A_CLASS"]))


def test_load_plugins_runs_registration_decorators():
    load_plugins(["sample_plugin"], reload=True)

    plugin = importlib.import_module("sample_plugin")
    assert SimpleTypeRegistry.is_simple(plugin.Coordinates) is True


def test_load_plugins_reload_re_registers_after_reset():
    load_plugins(["sample_plugin"])
    SimpleTypeRegistry.reset()

    load_plugins(["sample_plugin"], reload=True)

    plugin = importlib.import_module("sample_plugin")
    assert SimpleTypeRegistry.is_simple(plugin.Coordinates) is True


def test_load_plugins_missing_module_raises():
    with pytest.raises(ConfigurationError, match="Cannot import plugin module"):
        load_plugins(["no_such_plugin_xyz"])


def test_load_config_reads_json(tmp_path):
    path = tmp_path / "paramobject.json"
    path.write_text(json.dumps({"simple_types": ["sample_params:Money"], "log_level": "debug"}))

    cfg = load_config(path)

    assert cfg.simple_types == ["sample_params:Money"]
    assert cfg.log_level == "DEBUG"


def test_load_config_reads_yaml(tmp_path):
    path = tmp_path / "paramobject.yaml"
    path.write_text("plugins:\n  - sample_plugin\nexcluded_simple_types:\n  - sample_params.Money\n")

    cfg = load_config(str(path))

    assert cfg.plugins == ["sample_plugin"]
    assert cfg.excluded_simple_types == ["sample_params.Money"]


def test_load_config_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("")

    assert load_config(path) == ExtractorConfig()


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.json")


def test_load_config_unsupported_suffix(tmp_path):
    path = tmp_path / "paramobject.toml"
    path.write_text("")

    with pytest.raises(ConfigurationError, match="Unsupported config format"):
        load_config(path)


def test_load_config_invalid_content(tmp_path):
    path = tmp_path / "paramobject.json"
    path.write_text(json.dumps({"simple_types": ["Money"]}))

    with pytest.raises(ConfigurationError, match="Invalid config"):
        load_config(path)
