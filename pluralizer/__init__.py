'''
pluralizer - pluralize or singularize English words based on a count.

    >>> from pluralizer import pluralize
    >>> pluralize('House', 2, True)
    '2 Houses'
    >>> pluralize('Houses', 1)
    'House'

Module level functions work with the inflector built at import time, create
your own Inflector to keep rules apart.
'''

version = '0.1.0'

from .core import (
    Configurator,
    Inflector,
    add_irregular_rule,
    add_plural_rule,
    add_singular_rule,
    add_uncountable_rule,
    is_plural,
    is_singular,
    plural,
    pluralize,
    singular,
)
from .exceptions import ConfigurationError, InvalidPatternError, PluralizerError
from .helpers.strings import restore_case
from .store import PLURAL, SINGULAR

__all__ = [
    'version',
    'Configurator',
    'Inflector',
    'PLURAL',
    'SINGULAR',
    'ConfigurationError',
    'InvalidPatternError',
    'PluralizerError',
    'add_irregular_rule',
    'add_plural_rule',
    'add_singular_rule',
    'add_uncountable_rule',
    'is_plural',
    'is_singular',
    'plural',
    'pluralize',
    'restore_case',
    'singular',
]
