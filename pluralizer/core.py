import ast
import configparser
import logging
import os
import re
import threading

from . import tables
from .exceptions import ConfigurationError, InvalidPatternError
from .helpers import log
from .helpers.strings import restore_case
from .store import PLURAL, SINGULAR, RuleStore, compile_pattern, strip_escapes

logger = logging.getLogger('pluralizer')


class Inflector(object):
    '''
    Inflector converts English words between singular and plural form keeping
    the letter case of the given word.

    Every inflector owns its rules, so differently configured inflectors
    may live side by side. Built-in tables are loaded at construction
    unless "defaults" is False, later they can be loaded by load_defaults()
    which does nothing when tables already loaded.

    Lookup order for a word: irregular words, uncountable words, pattern
    rules from the last registered to the first one. Unknown words are
    returned unchanged.

    >>> inflector = Inflector()
    >>> inflector.pluralize('House', 2, True)
    '2 Houses'
    >>> inflector.add_irregular_rule('cow', 'kine')
    >>> inflector.pluralize('Cow', 3)
    'Kine'
    '''

    def __init__(self, defaults=True):
        self.store = RuleStore()
        self._seed_lock = threading.Lock()
        self._seeded = False
        if defaults:
            self.load_defaults()

    @classmethod
    def from_config(cls, path):
        ''' Create inflector by the rules of configuration file '''

        log_config, defaults, irregular, plural, singular, uncountable = \
            Configurator(path).data

        if log_config:
            log.configure(**log_config)

        inflector = cls(defaults=defaults)
        for single, plural_word in irregular:
            inflector.add_irregular_rule(single, plural_word)
        for pattern, template in plural:
            inflector.add_plural_rule(pattern, template)
        for pattern, template in singular:
            inflector.add_singular_rule(pattern, template)
        for word in uncountable['words']:
            inflector.add_uncountable_rule(word)
        for pattern in uncountable['patterns']:
            inflector.add_uncountable_rule(pattern, regex=True)

        logger.debug('Inflector configured by "%s"', path)
        return inflector

    @property
    def seeded(self):
        return self._seeded

    def load_defaults(self):
        '''
        Load built-in tables once, concurrent calls wait for the first.
        Built-ins go under rules registered before, so those still win
        '''

        with self._seed_lock:
            if self._seeded:
                return False

            table = 'plural'
            try:
                plural = [(compile_pattern(pattern), template)
                    for pattern, template in tables.plural_rules]
                table = 'singular'
                singular = [(compile_pattern(pattern), template)
                    for pattern, template in tables.singular_rules]
                table = 'uncountable'
                patterns = [compile_pattern(pattern)
                    for pattern in tables.uncountable_patterns]
            except InvalidPatternError as error:
                logger.critical('Default %s table is broken: %s', table, error)
                raise ConfigurationError.default_table_exc(
                    error.pattern, table) from error

            self.store.seed(tables.irregular_rules, plural, singular,
                tables.uncountable_words, patterns)
            self._seeded = True
            logger.debug('Default tables loaded: %d plural rules, '
                '%d singular rules, %d irregular words',
                len(self.store.rules(PLURAL)), len(self.store.rules(SINGULAR)),
                len(self.store.snapshot().singles))
            return True

    # rules registration

    def add_irregular_rule(self, singular, plural):
        self.store.add_irregular(singular, plural)
        logger.debug('Irregular rule added: "%s" <-> "%s"', singular, plural)

    def add_plural_rule(self, pattern, template):
        self._add_rule(PLURAL, pattern, template)

    def add_singular_rule(self, pattern, template):
        self._add_rule(SINGULAR, pattern, template)

    def add_uncountable_rule(self, rule, regex=False):
        '''
        Literal words are stored lower cased, patterns (compiled ones or any
        string when "regex" is True) are registered as identity rules of
        both plural and singular directions
        '''

        if regex or isinstance(rule, re.Pattern):
            try:
                self.store.add_uncountable_pattern(rule)
            except InvalidPatternError as error:
                logger.warning('Uncountable rule rejected: %s', error)
                raise
            logger.debug('Uncountable pattern added: "%s"',
                getattr(rule, 'pattern', rule))
        else:
            self.store.add_uncountable(rule)
            logger.debug('Uncountable word added: "%s"', rule)

    def _add_rule(self, direction, pattern, template):
        try:
            rule = self.store.add_rule(direction, pattern, template)
        except InvalidPatternError as error:
            logger.warning('%s rule rejected: %s', direction.capitalize(), error)
            raise
        logger.debug('%s rule added: %r', direction.capitalize(), rule)

    # inflection

    def pluralize(self, word, count, include_count=False):
        ''' Singular form for count 1, plural one for any other count '''

        if count == 1:
            result = self.singular(word)
        else:
            result = self.plural(word)

        if include_count:
            return '{0} {1}'.format(count, result)
        return result

    def plural(self, word):
        return self.inflect(PLURAL, word)

    def singular(self, word):
        return self.inflect(SINGULAR, word)

    def is_plural(self, word):
        return self._check(PLURAL, word)

    def is_singular(self, word):
        return self._check(SINGULAR, word)

    def inflect(self, direction, word):
        replace_map, keep_map, rules, uncountables = \
            self._tables(direction)
        token = word.lower()

        # word is already in the target form
        if token in keep_map:
            return restore_case(word, token)

        if token in replace_map:
            return restore_case(word, replace_map[token])

        return self._sanitize(token, word, rules, uncountables)

    def _check(self, direction, word):
        replace_map, keep_map, rules, uncountables = \
            self._tables(direction)
        token = word.lower()

        if token in keep_map:
            return True
        if token in replace_map:
            return False
        return self._sanitize(token, token, rules, uncountables) == token

    def _tables(self, direction):
        snapshot = self.store.snapshot()
        if direction == PLURAL:
            return (snapshot.singles, snapshot.plurals,
                snapshot.plural_rules, snapshot.uncountables)
        if direction == SINGULAR:
            return (snapshot.plurals, snapshot.singles,
                snapshot.singular_rules, snapshot.uncountables)
        raise ValueError('Unknown inflection direction "{0}"'.format(direction))

    def _sanitize(self, token, word, rules, uncountables):
        if not token or token in uncountables:
            return word

        for rule in reversed(rules):
            match = rule.search(word)
            if match:
                return self._replace(word, rule, match)
        return word

    def _replace(self, word, rule, match):
        '''
        Render rule template for the match and put it in place of the
        matched text. Every piece takes the case of the whole word, only the
        piece starting the word is capitalized for title cased words.
        Any "$" left in the rendered text goes away with the next character
        '''

        pieces = []
        for segment in rule.segments:
            if isinstance(segment, int):
                text = rule.group(match, segment)
            else:
                text = segment
            if not text:
                continue

            leading = match.start() == 0 and not pieces
            pieces.append(restore_case(word, text, capitalize=leading))

        return word[:match.start()] + strip_escapes(''.join(pieces)) + \
            word[match.end():]

    def __repr__(self):
        snapshot = self.store.snapshot()
        return '<Inflector irregular={0} plural={1} singular={2} ' \
            'uncountable={3}>'.format(len(snapshot.singles),
            len(snapshot.plural_rules), len(snapshot.singular_rules),
            len(snapshot.uncountables))


class Configurator(object):
    ''' Parse inflector configuration file '''

    sequence_options = (
        ('uncountable', 'words'), ('uncountable', 'patterns'),
        ('plural', 'rules'), ('singular', 'rules')
    )

    def __init__(self, path):
        if not os.path.isfile(path):
            raise ConfigurationError.missing_file_exc(path)

        # parse config
        config = configparser.ConfigParser(interpolation=None)
        config.optionxform = str
        try:
            config.read(path, encoding='utf-8')
        except configparser.Error as error:
            raise ConfigurationError(
                'Configuration file "{0}" can not be parsed. Details: {1}'
                .format(path, error)) from error

        # define default values
        log_config = {}
        defaults = True
        irregular = []
        rules = {'plural': [], 'singular': []}
        uncountable = {'words': [], 'patterns': []}

        for k, v in config.items():
            # transform incoming options
            opts = {k:self.transform_str(v) for k,v in dict(v).items()}

            if k == 'global':
                defaults = self.boolean(v, 'defaults', True)
                if 'log_level' in opts:
                    log_config['level'] = opts['log_level']
                    log_config['colored'] = self.boolean(
                        v, 'colored_output', False)
            elif k == 'irregular':
                irregular.extend((single.lower(), str(plural))
                    for single, plural in opts.items())
            elif k == 'uncountable':
                for name in uncountable:
                    uncountable[name].extend(
                        self.sequence(k, name, opts.get(name, ())))
            elif k in rules:
                for rule in self.sequence(k, 'rules', opts.get('rules', ())):
                    if not isinstance(rule, (list, tuple)) or len(rule) != 2:
                        raise ConfigurationError.option_exc(k, 'rules', rule)
                    rules[k].append(tuple(rule))

        self._data = (log_config, defaults, irregular, rules['plural'],
            rules['singular'], uncountable)

    @property
    def data(self):
        for item in self._data:
            yield item

    def boolean(self, section, option, fallback):
        try:
            return section.getboolean(option, fallback)
        except ValueError as error:
            raise ConfigurationError.boolean_exc(
                section.name, option, section[option]) from error

    def sequence(self, section, option, value):
        if isinstance(value, str):
            return (value, )
        if not isinstance(value, (list, tuple, set)):
            raise ConfigurationError.option_exc(section, option, value)
        return value

    def transform_str(self, string):
        try:
            return ast.literal_eval(string)
        except (ValueError, SyntaxError):
            return string


# default inflector shared by module level functions
default = Inflector()


def pluralize(word, count, include_count=False):
    '''
    Pluralize or singularize the word based on count

    >>> pluralize('House', 2, True)
    '2 Houses'
    >>> pluralize('Houses', 1)
    'House'
    '''
    return default.pluralize(word, count, include_count)

def plural(word):
    return default.plural(word)

def singular(word):
    return default.singular(word)

def is_plural(word):
    return default.is_plural(word)

def is_singular(word):
    return default.is_singular(word)

def add_irregular_rule(singular, plural):
    default.add_irregular_rule(singular, plural)

def add_plural_rule(pattern, template):
    default.add_plural_rule(pattern, template)

def add_singular_rule(pattern, template):
    default.add_singular_rule(pattern, template)

def add_uncountable_rule(rule, regex=False):
    default.add_uncountable_rule(rule, regex)
