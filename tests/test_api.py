"""Tests for the module level API bound to the default inflector."""

import pytest

import pluralizer
from pluralizer import core


class TestModuleFunctions:
    def test_default_is_seeded_at_import(self):
        assert core.default.seeded

    def test_pluralize(self, default):
        assert pluralizer.pluralize("House", 2, True) == "2 Houses"
        assert pluralizer.pluralize("Houses", 1, True) == "1 House"
        assert pluralizer.pluralize("House", 1) == "House"
        assert pluralizer.pluralize("Houses", 2) == "Houses"

    def test_plural_and_singular(self, default):
        assert pluralizer.plural("Tooth") == "Teeth"
        assert pluralizer.singular("Teeth") == "Tooth"

    def test_checks(self, default):
        assert pluralizer.is_plural("teeth")
        assert pluralizer.is_singular("tooth")

    def test_add_irregular_rule(self, default):
        pluralizer.add_irregular_rule("I", "we")
        assert pluralizer.pluralize("i", 2) == "we"
        assert default.singular("we") == "i"

    def test_add_plural_rule(self, default):
        pluralizer.add_plural_rule("(?i)(matr|cod|mur|sil|vert|ind|append)(?:ix|ex)$", "$1ices")
        assert pluralizer.pluralize("Vertex", 2) == "Vertices"

    def test_add_singular_rule(self, default):
        pluralizer.add_singular_rule("^(dat)a$", "$1um")
        assert pluralizer.pluralize("data", 1) == "datum"

    def test_add_uncountable_rule(self, default):
        pluralizer.add_uncountable_rule("cash")
        assert pluralizer.pluralize("Cash", 2) == "Cash"

    def test_add_uncountable_pattern(self, default):
        pluralizer.add_uncountable_rule("^pok[eé]mon$", True)
        assert pluralizer.pluralize("Pokémon", 3) == "Pokémon"

    def test_invalid_pattern(self, default):
        with pytest.raises(pluralizer.InvalidPatternError):
            pluralizer.add_plural_rule("[", "s")

    def test_registration_does_not_leak(self, default):
        other = core.Inflector()
        pluralizer.add_irregular_rule("regex", "regexen")
        assert pluralizer.plural("regex") == "regexen"
        assert other.plural("regex") == "regexes"

    def test_errors_share_base(self):
        assert issubclass(pluralizer.InvalidPatternError, pluralizer.PluralizerError)
        assert issubclass(pluralizer.ConfigurationError, pluralizer.PluralizerError)
