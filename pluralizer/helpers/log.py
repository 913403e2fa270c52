import logging

LOGGER_NAME = 'pluralizer'


class ColoredFormatter(logging.Formatter):
    ''' Formatter which marks every record by the color of its level '''

    # define const
    set_color = '\033[{0}m'
    black, red, green, yellow, blue, magenta, cyan, white = range(8)

    colors = {
        'INFO': green,
        'DEBUG': cyan,
        'ERROR': red,
        'WARNING': yellow,
        'CRITICAL': magenta,
        'NOTSET': blue
    }

    def format(self, record):
        color = 30 + self.colors.get(record.levelname, self.white)
        record.color = self.set_color.format(color)
        return super(ColoredFormatter, self).format(record)


def configure(level='info', colored=False):
    '''
    Configure "pluralizer" logger with custom format and optionally colorize
    it by special ANSI escape sequences. Repeated calls replace the handler
    installed before instead of adding one more
    '''

    reset = '\033[0m'
    set_bold = '\033[1m'
    datefmt = '%m-%d-%Y %H:%M:%S'

    # change format
    if colored:
        fmt = '{0}{1}[{2} {3}]{4}{0} {5}{4}'.format(
            '%(color)s', set_bold, '%(asctime)-15s',
            '%(levelname)s', reset, '%(message)s'
        )
        formatter = ColoredFormatter(fmt, datefmt)
    else:
        fmt = '[%(asctime)-15s %(levelname)s] %(message)s'
        formatter = logging.Formatter(fmt, datefmt)

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, 'pluralizer_handler', False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.pluralizer_handler = True
    handler.setFormatter(formatter)

    # configure
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper()))
    return logger
