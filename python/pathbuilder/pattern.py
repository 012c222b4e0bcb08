from pathbuilder import assembler
from pathbuilder import tokenizer
from pathbuilder.exceptions import ConfigError, FormatError


class PathPattern:
    def __init__(self, name, pattern, examples=None):
        """
        :raise MalformedPatternError: if the pattern cannot be tokenized
        :raise ConfigError: if an example is given for an unknown parameter

        :param str              name:
        :param str              pattern:
        :param dict[str, str]   examples: Example value per parameter, only
                                          used for display hints
        """
        self._name = name
        self._pattern = pattern
        self._examples = dict(examples or {})

        self._tokens = None         # type: tuple
        self._parameters = None     # type: tuple

        # Tokenize up front so that a malformed pattern fails on creation
        unknown = set(self._examples).difference(self.parameters)
        if unknown:
            raise ConfigError('Examples given for unknown parameters of {}: {}'.format(
                self, sorted(unknown)
            ))

    def __repr__(self):
        return 'PathPattern({!r}, {!r}, examples={!r})'.format(
            self._name, self._pattern, self._examples
        )

    def __str__(self):
        return '{}({})'.format(self._name, self._pattern)

    @property
    def examples(self):
        """
        :rtype: dict[str, str]
        """
        return self._examples.copy()

    @property
    def name(self):
        """
        :rtype: str
        """
        return self._name

    @property
    def parameters(self):
        """
        Names of the parameters in the order they appear in the pattern

        :rtype: tuple[str]
        """
        if self._parameters is None:
            self._parameters = tokenizer.parameter_names(self.tokens)
        return self._parameters

    @property
    def pattern(self):
        """
        :rtype: str
        """
        return self._pattern

    @property
    def placeholder_path(self):
        """
        :rtype: str
        """
        return tokenizer.compile_placeholder_path(self.tokens)

    @property
    def tokens(self):
        """
        :rtype: tuple[pathbuilder.token.Token, ...]
        """
        if self._tokens is None:
            self._tokens = tokenizer.parse(self._pattern)
        return self._tokens

    def assemble(self, values):
        """
        :param Mapping[str, str]    values:
        :rtype: pathbuilder.assembler.ReconstructionResult
        """
        return assembler.assemble(self.tokens, values)

    def example(self, name):
        """
        :param str  name:
        :rtype: str|None
        """
        return self._examples.get(name)

    def format(self, values):
        """
        Formats the pattern using the given values, requiring every parameter
        to be filled.

        :raise FormatError: if any parameter is missing or empty
        :param Mapping[str, str]    values:
        :rtype: str
        """
        result = self.assemble(values)
        if not result.is_complete:
            raise FormatError('Missing required parameters for pattern {}: {}'.format(
                self, list(self.missing(values))
            ))
        return result.path

    def missing(self, values):
        """
        :param Mapping[str, str]    values:
        :rtype: tuple[str]
        """
        return assembler.missing(self.tokens, values)
