from pathbuilder import constants


class Token:
    kind = None  # type: str

    def __eq__(self, other):
        return type(self) is type(other) and self._key() == other._key()

    def __hash__(self):
        return hash((type(self).__name__,) + self._key())

    @property
    def source(self):
        """
        Pattern text that produces this token, with any escapes restored

        :rtype: str
        """
        raise NotImplementedError

    def format(self, value):
        """
        Converts a value to the string this token contributes to a path.

        :param str  value:
        :rtype: str
        """
        raise NotImplementedError

    def _key(self):
        # type: () -> tuple
        raise NotImplementedError


class Literal(Token):
    kind = constants.KIND_LITERAL

    def __init__(self, text):
        """
        :param str  text: Unescaped literal text
        """
        self._text = text

    def __repr__(self):
        return 'Literal({!r})'.format(self._text)

    def __str__(self):
        return self._text

    @property
    def source(self):
        """
        :rtype: str
        """
        return escape(self._text)

    @property
    def text(self):
        """
        :rtype: str
        """
        return self._text

    def format(self, value=None):
        """
        Literals are emitted verbatim, the value is ignored.

        :rtype: str
        """
        return self._text

    def _key(self):
        return (self._text,)


class NamedParameter(Token):
    kind = constants.KIND_PARAMETER

    def __init__(self, name, delimiter=''):
        """
        :param str  name:
        :param str  delimiter: Separator emitted immediately before the value
        """
        self._name = name
        self._delimiter = delimiter

    def __repr__(self):
        return 'NamedParameter({self._name!r}, delimiter={self._delimiter!r})'.format(self=self)

    def __str__(self):
        return self.source

    @property
    def delimiter(self):
        """
        :rtype: str
        """
        return self._delimiter

    @property
    def name(self):
        """
        :rtype: str
        """
        return self._name

    @property
    def placeholder(self):
        """
        Colon prefixed identifier used in place of a missing value

        :rtype: str
        """
        return constants.PARAMETER_MARKER + self._name

    @property
    def source(self):
        """
        :rtype: str
        """
        return self._delimiter + self.placeholder

    def format(self, value):
        """
        Prefixes the value with the delimiter. Any falsy value, ie, None or an
        empty string, renders the placeholder instead.

        :param str  value:
        :rtype: str
        """
        return self._delimiter + (value if value else self.placeholder)

    def _key(self):
        return self._name, self._delimiter


def escape(text):
    """
    Escapes any characters in a literal that the tokenizer would otherwise
    treat as grammar.

    :param str  text:
    :rtype: str
    """
    for char in (constants.ESCAPE, constants.PARAMETER_MARKER):
        text = text.replace(char, constants.ESCAPE + char)
    return text
