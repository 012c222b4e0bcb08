from collections import namedtuple

from pathbuilder import constants

ReconstructionResult = namedtuple('ReconstructionResult', 'path is_complete')


def assemble(tokens, values):
    """
    Rebuilds a path from the tokens, substituting each parameter's value.

    Parameters without a value, or with an empty one, are rendered as their
    placeholder, eg, '/:id', and mark the result as incomplete. This is never
    an error so that partially filled values still give a readable path.

    :param Iterable[pathbuilder.token.Token]   tokens:
    :param Mapping[str, str]                    values:
    :rtype: ReconstructionResult
    """
    is_complete = True
    segments = []
    for token in tokens:
        if token.kind == constants.KIND_PARAMETER:
            value = values.get(token.name)
            if not value:
                is_complete = False
            segments.append(token.format(value))
        else:
            segments.append(token.format(None))
    return ReconstructionResult(''.join(segments), is_complete)


def missing(tokens, values):
    """
    Names of the parameters with no usable value, in pattern order

    :param Iterable[pathbuilder.token.Token]   tokens:
    :param Mapping[str, str]                    values:
    :rtype: tuple[str]
    """
    return tuple(t.name for t in tokens
                 if t.kind == constants.KIND_PARAMETER and not values.get(t.name))
