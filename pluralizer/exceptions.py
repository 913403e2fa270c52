from .helpers.strings import trim


class PluralizerError(Exception):
    ''' Basically exception class. '''

    def __init__(self, msg):
        super(PluralizerError, self).__init__(trim(msg))


class InvalidPatternError(PluralizerError):
    ''' Rule pattern can not be compiled. The rule store stays untouched. '''

    def __init__(self, msg, pattern=None):
        super(InvalidPatternError, self).__init__(msg)
        self.pattern = pattern

    @classmethod
    def malformed_exc(self, pattern, error):
        return self(
            'Pattern "{0}" is not a valid regular expression. \
            Details: {1}'.format(pattern, error), pattern
        )

    @classmethod
    def type_exc(self, pattern):
        return self(
            '''Pattern must be a string or a compiled regular expression, \
            not "{0}"'''.format(type(pattern).__name__), pattern
        )


class ConfigurationError(PluralizerError):
    @classmethod
    def default_table_exc(self, pattern, table):
        return self(
            '''Built-in {0} table contains the broken pattern "{1}". \
            Default tables are corrupted, inflector can not be \
            initialized.'''.format(table, pattern)
        )

    @classmethod
    def missing_file_exc(self, path):
        return self('Configuration file "{0}" does not exist'.format(path))

    @classmethod
    def option_exc(self, section, option, value):
        return self(
            '''Option "{1}" of section "{0}" has the wrong value "{2}". \
            Expected a sequence.'''.format(section, option, value)
        )

    @classmethod
    def boolean_exc(self, section, option, value):
        return self(
            '''Option "{1}" of section "{0}" has the wrong value "{2}". \
            Expected a boolean.'''.format(section, option, value)
        )
