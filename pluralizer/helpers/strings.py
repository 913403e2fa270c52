import re

def capfirst(string):
    return string[:1].upper() + string[1:]

def trim(string, char=' ', replace=None, repeat=2):
    replace = replace if replace is not None else char
    return re.sub(char + '{%d,}' % repeat, replace, string.strip(char))

def restore_case(word, token, capitalize=True):
    '''
    Apply letter case of the word to the token: exact match is kept as is,
    lower and upper cased words force the same case, title cased words
    get the first token letter capitalized (unless "capitalize" is False)
    and the rest untouched, anything else becomes lower case
    '''

    if word == token:
        return token
    if word == word.lower():
        return token.lower()
    if word == word.upper():
        return token.upper()
    if word[:1].isupper():
        return capfirst(token) if capitalize else token
    return token.lower()
