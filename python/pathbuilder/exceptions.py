class PathBuilderError(Exception):
    """ Generic base exception for all pathbuilder errors """


class MalformedPatternError(PathBuilderError, ValueError):
    """ Pattern string violates the parameter grammar """


class FormatError(PathBuilderError):
    """ Failure to format a complete path """


class UnknownParameterError(PathBuilderError, KeyError):
    """ Edit targets a parameter the pattern does not declare """


class ConfigError(PathBuilderError):
    """ Any errors raised from reading a pattern configuration """


class MissingPatternError(ConfigError, KeyError):
    """ Requested pattern is not configured """
