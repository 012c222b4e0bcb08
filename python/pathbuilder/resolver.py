import logging
import os

import yaml

from pathbuilder import constants
from pathbuilder import exceptions
from pathbuilder.builder import PathBuilder
from pathbuilder.pattern import PathPattern

logger = logging.getLogger(__name__)


class PatternResolver:
    @classmethod
    def from_environment(cls, env_var=constants.ENV_VAR):
        """
        Loads the configuration file named by an environment variable

        :raise ConfigError: if the variable is unset or does not name a file
        :param str  env_var: Defaults to PATHBUILDER_CONFIG
        :rtype: PatternResolver
        """
        filepath = os.environ.get(env_var)
        if not filepath:
            raise exceptions.ConfigError(
                'No pathbuilder configuration set in ${}'.format(env_var)
            )
        if not os.path.isfile(filepath):
            raise exceptions.ConfigError(
                'Pathbuilder configuration from ${} is not a file: {}'.format(
                    env_var, filepath
                )
            )
        logger.debug('Using pathbuilder configuration from $%s', env_var)
        return cls.from_file(filepath)

    @classmethod
    def from_file(cls, filepath):
        """
        :raise ConfigError: if the file cannot be read or is not valid YAML
        :param str  filepath:
        :rtype: PatternResolver
        """
        try:
            with open(filepath) as f:
                config = yaml.safe_load(f)
        except (IOError, yaml.YAMLError) as e:
            raise exceptions.ConfigError(
                'Unable to load pathbuilder configuration {}: {}'.format(filepath, e)
            )
        logger.debug('Read pathbuilder configuration from %s', filepath)
        return cls(config)

    def __init__(self, config):
        """
        :raise ConfigError: if the configuration is not a mapping of patterns
        :raise MalformedPatternError: if any configured pattern is malformed

        :param dict[str, dict]  config:
        """
        try:
            pattern_config = config[constants.KEY_PATTERNS]
        except (KeyError, TypeError):
            raise exceptions.ConfigError(
                'Configuration requires a {!r} mapping'.format(constants.KEY_PATTERNS)
            )
        if not isinstance(pattern_config, dict):
            raise exceptions.ConfigError(
                'Invalid {!r} configuration, expected a mapping: {!r}'.format(
                    constants.KEY_PATTERNS, pattern_config
                )
            )

        # Load every pattern up front so that malformed patterns fail early
        self._patterns = {}
        for name in pattern_config:
            self._load_pattern(name, pattern_config[name])

    @property
    def patterns(self):
        """
        :rtype: dict[str, PathPattern]
        """
        return self._patterns.copy()

    def get_builder(self, pattern_name, on_change=None):
        """
        Starts a new editing session for the named pattern

        :param str      pattern_name:
        :param callable on_change:
        :rtype: PathBuilder
        """
        return PathBuilder(self.get_pattern(pattern_name), on_change=on_change)

    def get_pattern(self, pattern_name):
        """
        :raise MissingPatternError: if no pattern exists with the name
        :param str  pattern_name:
        :rtype: PathPattern
        """
        try:
            return self._patterns[pattern_name]
        except KeyError:
            raise exceptions.MissingPatternError(
                'Pattern {!r} does not exist'.format(pattern_name)
            )

    def _load_pattern(self, pattern_name, pattern_config):
        """
        :param str          pattern_name:
        :param dict|str     pattern_config:
        :rtype: PathPattern
        """
        # Config is allowed to define a shorthand {name: pattern}, ensure it's
        # in dictionary format
        if not isinstance(pattern_config, dict):
            pattern_config = {constants.KEY_PATTERN: pattern_config}

        pattern_string = pattern_config.get(constants.KEY_PATTERN)
        if not isinstance(pattern_string, str):
            raise exceptions.ConfigError(
                'Missing pattern string for pattern: {}'.format(pattern_name)
            )

        examples = pattern_config.get(constants.KEY_EXAMPLES) or {}
        if not isinstance(examples, dict):
            raise exceptions.ConfigError(
                'Examples for pattern {!r} must be a mapping: {!r}'.format(
                    pattern_name, examples
                )
            )
        # YAML may load example values as ints, they are only ever displayed.
        # A null example is the same as leaving it out
        examples = {str(k): str(v) for k, v in examples.items() if v is not None}

        pattern = PathPattern(pattern_name, pattern_string, examples=examples)
        self._patterns[pattern_name] = pattern
        return pattern
