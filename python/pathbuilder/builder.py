import logging
from types import MappingProxyType

from pathbuilder.exceptions import UnknownParameterError
from pathbuilder.pattern import PathPattern

logger = logging.getLogger(__name__)


class PathBuilder:
    """
    Editing session for a single pattern. Holds the current parameter values
    and reports the rebuilt path after every edit.

    Values are never modified in place, each edit swaps in a new read-only
    mapping so that anything holding a previous snapshot can compare it to the
    current one.
    """

    def __init__(self, pattern, example_params=None, on_change=None):
        """
        :raise MalformedPatternError: if the pattern cannot be tokenized

        :param str|PathPattern  pattern:
        :param dict[str, str]   example_params:  Ignored if pattern is already
                                                 a PathPattern
        :param callable         on_change: Called with the ReconstructionResult
                                           after every edit
        """
        if not isinstance(pattern, PathPattern):
            pattern = PathPattern(pattern, pattern, examples=example_params)
        self._pattern = pattern
        self._on_change = on_change
        self._values = self._blank_values()

    def __repr__(self):
        return 'PathBuilder({!r}, values={!r})'.format(self._pattern, dict(self._values))

    @property
    def is_complete(self):
        """
        :rtype: bool
        """
        return self.result.is_complete

    @property
    def path(self):
        """
        :rtype: str
        """
        return self.result.path

    @property
    def pattern(self):
        """
        :rtype: PathPattern
        """
        return self._pattern

    @property
    def result(self):
        """
        :rtype: pathbuilder.assembler.ReconstructionResult
        """
        return self._pattern.assemble(self._values)

    @property
    def tokens(self):
        """
        :rtype: tuple[pathbuilder.token.Token, ...]
        """
        return self._pattern.tokens

    @property
    def values(self):
        """
        Current snapshot of the parameter values

        :rtype: Mapping[str, str]
        """
        return self._values

    def example(self, name):
        """
        :param str  name:
        :rtype: str|None
        """
        return self._pattern.example(name)

    def reset(self):
        """
        Clears every parameter value

        :rtype: pathbuilder.assembler.ReconstructionResult
        """
        return self._replace(self._blank_values())

    def set_value(self, name, value):
        """
        :raise UnknownParameterError: if the pattern has no parameter by that name
        :param str  name:
        :param str  value: None is treated as an empty value, any other value is
                           stored as its string
        :rtype: pathbuilder.assembler.ReconstructionResult
        """
        return self.update({name: value})

    def update(self, values):
        """
        Applies several edits as a single change

        :raise UnknownParameterError: if any name is not a parameter of the
            pattern, in which case no value is changed
        :param Mapping[str, str]    values:
        :rtype: pathbuilder.assembler.ReconstructionResult
        """
        unknown = [name for name in values if name not in self._values]
        if unknown:
            raise UnknownParameterError('Unknown parameters for pattern {}: {}'.format(
                self._pattern, unknown
            ))

        new_values = dict(self._values)
        for name, value in values.items():
            new_values[name] = str(value) if value else ''
        return self._replace(MappingProxyType(new_values))

    def _blank_values(self):
        # type: () -> MappingProxyType
        return MappingProxyType({name: '' for name in self._pattern.parameters})

    def _replace(self, values):
        """ Swaps in the new snapshot and notifies the listener """
        self._values = values
        result = self._pattern.assemble(values)
        logger.debug('Path for %s is now %r (complete=%s)',
                     self._pattern, result.path, result.is_complete)
        if self._on_change is not None:
            self._on_change(result)
        return result
