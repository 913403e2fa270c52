import logging
import re
import threading

from collections import namedtuple

from .exceptions import InvalidPatternError

PLURAL = 'plural'
SINGULAR = 'singular'

logger = logging.getLogger('pluralizer')

marker_re = re.compile(r'\$(\d+)')
escape_re = re.compile(r'\$.?', re.DOTALL)


def compile_pattern(pattern):
    '''
    Compile string pattern case insensitive, compiled patterns are taken
    as is. Raises InvalidPatternError for malformed or non-pattern values
    '''

    if isinstance(pattern, re.Pattern):
        return pattern
    if not isinstance(pattern, str):
        raise InvalidPatternError.type_exc(pattern)
    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error as error:
        raise InvalidPatternError.malformed_exc(pattern, error)


def parse_template(template):
    ''' Split replacement template into literal strings and group indexes '''

    segments = []
    for i, part in enumerate(marker_re.split(template)):
        if i % 2:
            segments.append(int(part))
        elif part:
            segments.append(part)
    return tuple(segments)


def strip_escapes(text):
    ''' Drop every "$" of rendered replacement with the character after it '''
    return escape_re.sub('', text)


def link_irregular(singles, plurals, singular, plural):
    '''
    Put irregular pair into both maps. Reverse entry left by the previous
    plural of the same singular is removed, while other singulars sharing
    one plural ("he", "she" -> "they") keep their forward entries
    '''

    previous = singles.get(singular)
    if previous is not None and previous != plural and \
            plurals.get(previous) == singular:
        del plurals[previous]
    singles[singular] = plural
    plurals[plural] = singular


class PatternRule(object):
    ''' Compiled pattern with its replacement template '''

    def __init__(self, pattern, template):
        self.pattern = compile_pattern(pattern)
        self.template = template
        self.segments = parse_template(template)

    def search(self, word):
        return self.pattern.search(word)

    def group(self, match, index):
        if index > self.pattern.groups:
            return ''
        return match.group(index) or ''

    def __repr__(self):
        return '<PatternRule {0!r} -> {1!r}>'.format(
            self.pattern.pattern, self.template)


Snapshot = namedtuple('Snapshot', [
    'singles', 'plurals', 'plural_rules', 'singular_rules', 'uncountables'
])
Snapshot.__doc__ = '''
Point-in-time view of the rule store. Nothing inside a published snapshot is
ever mutated, writers publish a new one instead
'''


class RuleStore(object):
    '''
    Irregular words (singular -> plural map and its exact inverse), ordered
    plural and singular pattern rules and uncountable words.

    Readers take the current snapshot without locking, writers serialize on
    the lock, build the next snapshot and swap the reference, so an
    inflection never sees a half-applied insert.
    '''

    def __init__(self):
        self._lock = threading.Lock()
        self._snapshot = Snapshot({}, {}, (), (), frozenset())

    def snapshot(self):
        return self._snapshot

    def add_irregular(self, singular, plural):
        singular, plural = singular.lower(), plural.lower()
        with self._lock:
            current = self._snapshot
            singles = dict(current.singles)
            plurals = dict(current.plurals)
            link_irregular(singles, plurals, singular, plural)
            self._snapshot = current._replace(singles=singles, plurals=plurals)

    def seed(self, irregular=(), plural_rules=(), singular_rules=(),
            uncountables=(), uncountable_patterns=()):
        '''
        Put base tables under everything already registered, in one swap.
        Rules land in front of existing ones so earlier registered rules
        keep their priority, existing irregular pairs win over base ones.
        Patterns are compiled before the store is touched
        '''

        plural_rules = tuple(PatternRule(p, t) for p, t in plural_rules)
        singular_rules = tuple(PatternRule(p, t) for p, t in singular_rules)
        identities = [PatternRule(p, '$0') for p in uncountable_patterns]
        plural_rules += tuple(identities)
        singular_rules += tuple(PatternRule(rule.pattern, '$0')
            for rule in identities)
        words = frozenset(word.lower() for word in uncountables)

        with self._lock:
            current = self._snapshot
            singles, plurals = {}, {}
            for singular, plural in irregular:
                link_irregular(singles, plurals, singular.lower(), plural.lower())
            for singular, plural in current.singles.items():
                link_irregular(singles, plurals, singular, plural)
            plurals.update(current.plurals)

            self._snapshot = Snapshot(
                singles, plurals,
                plural_rules + current.plural_rules,
                singular_rules + current.singular_rules,
                words | current.uncountables
            )

    def add_rule(self, direction, pattern, template):
        ''' Append rule to the tail of the direction list (highest priority) '''

        rule = PatternRule(pattern, template)
        field = self._rules_field(direction)
        with self._lock:
            rules = getattr(self._snapshot, field) + (rule,)
            self._snapshot = self._snapshot._replace(**{field: rules})
        return rule

    def add_uncountable(self, word):
        with self._lock:
            uncountables = self._snapshot.uncountables | {word.lower()}
            self._snapshot = self._snapshot._replace(uncountables=uncountables)

    def add_uncountable_pattern(self, pattern):
        ''' Register pattern as identity rule of both directions at once '''

        plural_rule = PatternRule(pattern, '$0')
        singular_rule = PatternRule(plural_rule.pattern, '$0')
        with self._lock:
            current = self._snapshot
            self._snapshot = current._replace(
                plural_rules=current.plural_rules + (plural_rule,),
                singular_rules=current.singular_rules + (singular_rule,)
            )

    def rules(self, direction):
        return getattr(self._snapshot, self._rules_field(direction))

    def _rules_field(self, direction):
        if direction == PLURAL:
            return 'plural_rules'
        if direction == SINGULAR:
            return 'singular_rules'
        raise ValueError('Unknown inflection direction "{0}"'.format(direction))

    def __len__(self):
        current = self._snapshot
        return len(current.singles) + len(current.plural_rules) + \
            len(current.singular_rules) + len(current.uncountables)
