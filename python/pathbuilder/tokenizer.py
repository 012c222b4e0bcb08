import logging

from pathbuilder import constants
from pathbuilder.exceptions import MalformedPatternError
from pathbuilder.token import Literal, NamedParameter

logger = logging.getLogger(__name__)


def parse(pattern):
    """
    Splits a pattern into the ordered literal and named parameter tokens it is
    made of, eg, '/users/:id' becomes (Literal('/users'), NamedParameter('id', '/')).

    A delimiter character directly preceding a parameter marker is captured as
    the parameter's delimiter rather than as part of the literal. A backslash
    escapes the following character.

    :raise MalformedPatternError: if the pattern is empty, contains a marker or
        escape with nothing following it, or declares a parameter twice
    :param str  pattern:
    :rtype: tuple[pathbuilder.token.Token, ...]
    """
    if not pattern:
        raise MalformedPatternError('Pattern cannot be empty')

    tokens = []
    names = set()
    literal = []
    last_idx = 0
    for match in constants.PATTERN_PARAMETER.finditer(pattern):
        escaped, delimiter, name = match.groups()
        start, end = match.span()
        literal.append(pattern[last_idx:start])
        last_idx = end

        # The escape alternative always matches the backslash, group is only
        # None when the marker alternative matched instead
        if escaped is not None:
            if not escaped:
                raise MalformedPatternError(
                    'Unterminated escape at index {} in pattern: {!r}'.format(start, pattern)
                )
            literal.append(escaped)
            continue

        if not name:
            raise MalformedPatternError(
                'Missing parameter name at index {} in pattern: {!r}'.format(
                    end - 1, pattern
                )
            )
        if name in names:
            raise MalformedPatternError(
                'Duplicate parameter {!r} in pattern: {!r}'.format(name, pattern)
            )
        names.add(name)

        _flush(literal, tokens)
        tokens.append(NamedParameter(name, delimiter=delimiter or ''))

    literal.append(pattern[last_idx:])
    _flush(literal, tokens)

    logger.debug('Parsed pattern %r into %d tokens', pattern, len(tokens))
    return tuple(tokens)


def parameter_names(tokens):
    """
    Names of the parameters in the order they appear in the pattern

    :param Iterable[pathbuilder.token.Token]   tokens:
    :rtype: tuple[str]
    """
    return tuple(t.name for t in tokens if t.kind == constants.KIND_PARAMETER)


def compile_placeholder_path(tokens):
    """
    Rebuilds a pattern string from tokens, with every parameter written as its
    delimiter and placeholder. Parsing the result gives back the same tokens.

    :param Iterable[pathbuilder.token.Token]   tokens:
    :rtype: str
    """
    segments = []
    previous = None
    for token in tokens:
        # An undelimited parameter after a literal ending in a delimiter would
        # otherwise claim that character on the next parse
        if (previous is not None and previous.kind == constants.KIND_LITERAL
                and token.kind == constants.KIND_PARAMETER and not token.delimiter
                and segments[-1] and segments[-1][-1] in constants.DELIMITERS):
            segments[-1] = segments[-1][:-1] + constants.ESCAPE + segments[-1][-1]
        source = token.source
        # Likewise a literal starting with a word character would extend the
        # preceding parameter's name
        if (previous is not None and previous.kind == constants.KIND_PARAMETER
                and token.kind == constants.KIND_LITERAL
                and constants.PATTERN_NAME_CHAR.match(source)):
            source = constants.ESCAPE + source
        segments.append(source)
        previous = token
    return ''.join(segments)


def _flush(literal, tokens):
    """ Merges pending literal text into a single Literal token """
    text = ''.join(literal)
    if text:
        tokens.append(Literal(text))
    del literal[:]
