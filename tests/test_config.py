"""Tests for configuration files."""

import logging

import pytest

from pluralizer.core import Configurator, Inflector
from pluralizer.exceptions import ConfigurationError, InvalidPatternError


CONFIG = """
[global]
defaults = False

[irregular]
Person = people

[uncountable]
words = ('cash', 'Sugar')
patterns = ('deer$',)

[plural]
rules = [('s?$', 's'), ('^(ox)$', '$1en')]

[singular]
rules = [('s$', ''), ('^(ox)en$', '$1')]
"""


class TestConfigurator:
    def test_data(self, write_config):
        log_config, defaults, irregular, plural, singular, uncountable = \
            Configurator(write_config(CONFIG)).data
        assert log_config == {}
        assert defaults is False
        assert irregular == [("person", "people")]
        assert plural == [("s?$", "s"), ("^(ox)$", "$1en")]
        assert singular == [("s$", ""), ("^(ox)en$", "$1")]
        assert list(uncountable["words"]) == ["cash", "Sugar"]
        assert list(uncountable["patterns"]) == ["deer$"]

    def test_single_string_value(self, write_config):
        path = write_config("[uncountable]\nwords = cash\n")
        *_, uncountable = Configurator(path).data
        assert list(uncountable["words"]) == ["cash"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            Configurator(str(tmp_path / "missing.cfg"))

    def test_unparsable_file(self, write_config):
        with pytest.raises(ConfigurationError):
            Configurator(write_config("no section header\n"))

    def test_broken_rule_entry(self, write_config):
        with pytest.raises(ConfigurationError):
            Configurator(write_config("[plural]\nrules = [('s?$',)]\n"))

    def test_wrong_sequence_value(self, write_config):
        with pytest.raises(ConfigurationError):
            Configurator(write_config("[uncountable]\nwords = 42\n"))

    def test_log_config(self, write_config):
        path = write_config("[global]\nlog_level = debug\ncolored_output = True\n")
        log_config, *_ = Configurator(path).data
        assert log_config == {"level": "debug", "colored": True}

    def test_lowercase_booleans(self, write_config):
        path = write_config("[global]\ndefaults = false\nlog_level = info\ncolored_output = false\n")
        log_config, defaults, *_ = Configurator(path).data
        assert defaults is False
        assert log_config == {"level": "info", "colored": False}

    def test_word_booleans(self, write_config):
        path = write_config("[global]\ndefaults = no\nlog_level = info\ncolored_output = on\n")
        log_config, defaults, *_ = Configurator(path).data
        assert defaults is False
        assert log_config["colored"] is True

    def test_wrong_boolean(self, write_config):
        with pytest.raises(ConfigurationError):
            Configurator(write_config("[global]\ndefaults = maybe\n"))


class TestFromConfig:
    def test_rules_applied(self, write_config):
        inflector = Inflector.from_config(write_config(CONFIG))
        assert not inflector.seeded
        assert inflector.pluralize("Person", 2) == "People"
        assert inflector.pluralize("ox", 2) == "oxen"
        assert inflector.pluralize("oxen", 1) == "ox"
        assert inflector.pluralize("cat", 2) == "cats"
        assert inflector.pluralize("sugar", 2) == "sugar"
        assert inflector.pluralize("reindeer", 2) == "reindeer"

    def test_defaults_loaded(self, write_config):
        inflector = Inflector.from_config(write_config("[plural]\nrules = [('^(ox)$', '$1es')]\n"))
        assert inflector.seeded
        assert inflector.pluralize("child", 2) == "children"

    def test_malformed_pattern(self, write_config):
        with pytest.raises(InvalidPatternError):
            Inflector.from_config(write_config("[plural]\nrules = [('(ox', '$1en')]\n"))

    def test_configures_logging(self, write_config, logger):
        path = write_config("[global]\ndefaults = False\nlog_level = warning\n")
        Inflector.from_config(path)
        assert logger.level == logging.WARNING

    def test_lowercase_false_skips_defaults(self, write_config):
        inflector = Inflector.from_config(write_config("[global]\ndefaults = false\n"))
        assert not inflector.seeded
        assert inflector.pluralize("child", 2) == "child"
