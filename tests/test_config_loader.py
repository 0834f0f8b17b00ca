"""
Tests for loading rule sets from YAML configuration.
"""

import pytest
import yaml

from fieldrules import ConfigurationError, RuleSetConfigLoader, Validator


RULES_YAML = """
global:
  required_default: false

rule_sets:
  signup:
    rules:
      name: required
      zip: ["digits:4"]
    messages:
      zip: ["digits:Zip must be 4 digits"]
  address:
    required_default: true
    rules:
      street: ["between:3,128"]
  broken:
    rules:
      zip: [4]
"""


@pytest.fixture
def loader(tmp_path):
    config_file = tmp_path / "rules.yaml"
    config_file.write_text(RULES_YAML)
    return RuleSetConfigLoader(str(config_file))


def test_list_rule_sets(loader):
    assert loader.list_rule_sets() == ["signup", "address", "broken"]


def test_get_rule_set(loader):
    rule_set = loader.get_rule_set("signup")

    assert rule_set.name == "signup"
    assert rule_set.rules == {"name": ["required"], "zip": ["digits:4"]}
    assert rule_set.messages == {"zip": ["digits:Zip must be 4 digits"]}
    assert rule_set.required_default is False


def test_rule_set_overrides_global_required_default(loader):
    assert loader.get_rule_set("address").required_default is True


def test_unknown_rule_set(loader):
    with pytest.raises(ConfigurationError):
        loader.get_rule_set("missing")


def test_malformed_rule_set(loader):
    with pytest.raises(ConfigurationError):
        loader.get_rule_set("broken")


def test_missing_file_uses_empty_config(tmp_path):
    loader = RuleSetConfigLoader(str(tmp_path / "absent.yaml"))

    assert loader.list_rule_sets() == []
    assert loader.get_global_settings()["required_default"] is False


def test_invalid_yaml_raises(tmp_path):
    config_file = tmp_path / "rules.yaml"
    config_file.write_text("rule_sets: [unclosed")

    with pytest.raises(yaml.YAMLError):
        RuleSetConfigLoader(str(config_file)).load()


def test_reload_picks_up_changes(tmp_path):
    config_file = tmp_path / "rules.yaml"
    config_file.write_text("rule_sets: {}")
    loader = RuleSetConfigLoader(str(config_file))
    assert loader.list_rule_sets() == []

    config_file.write_text(RULES_YAML)
    loader.reload()

    assert "signup" in loader.list_rule_sets()


def test_validator_from_rule_set(loader):
    v = Validator.from_rule_set("signup", {"name": "John", "zip": "12"}, loader=loader)

    assert v.validate() == {"zip": ["Zip must be 4 digits"]}


def test_validator_from_required_rule_set(loader):
    v = Validator.from_rule_set("address", {}, loader=loader)

    assert v.validate() == {"street": ["The street field must be between 3 and 128"]}


def test_bundled_rule_sets_load():
    loader = RuleSetConfigLoader()

    assert {"signup", "address"} <= set(loader.list_rule_sets())
