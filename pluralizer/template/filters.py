from copy import copy

from tornado.template import Template

from .. import core


class TemplateFilter(object):
    '''
    Pipe-like template filter: "value | filter" or "value | filter(args)".
    Calling a filter returns a configured copy, the shared one is untouched
    '''

    def __init__(self, inflector=None):
        self.inflector = inflector

    @property
    def engine(self):
        return self.inflector or core.default

    def __ror__(self, string):
        return self.transform(string)

    def __call__(self, *args, **kwargs):
        clone = copy(self)
        clone.configure(*args, **kwargs)
        return clone

    def configure(self):
        pass

    def transform(self, string):
        raise NotImplementedError


class Pluralize(TemplateFilter):
    count = 2
    include_count = False

    def configure(self, count, include_count=False):
        self.count = count
        self.include_count = include_count

    def transform(self, string):
        return self.engine.pluralize(string, self.count, self.include_count)


class Inflect(TemplateFilter):
    ''' Filter calling "plural" or "singular" method of the inflector '''

    def __init__(self, method, inflector=None):
        super(Inflect, self).__init__(inflector)
        self.method = method

    def transform(self, string):
        return getattr(self.engine, self.method)(string)


pluralize = Pluralize()
plural = Inflect('plural')
singular = Inflect('singular')


def namespace(inflector=None):
    if inflector is None:
        return {'pluralize': pluralize, 'plural': plural, 'singular': singular}
    return {
        'pluralize': Pluralize(inflector),
        'plural': Inflect('plural', inflector),
        'singular': Inflect('singular', inflector)
    }


def render(source, inflector=None, **kwargs):
    '''
    Render tornado template string with inflection filters available

    >>> render('{{ "box" | pluralize(count, True) }}', count=3)
    '3 boxes'
    '''
    kwargs.update(namespace(inflector))
    return Template(source).generate(**kwargs).decode('utf-8')
