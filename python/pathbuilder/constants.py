import re

# Characters that may precede a named parameter and are captured as its delimiter
DELIMITERS = '/.'
ESCAPE = '\\'
PARAMETER_MARKER = ':'
# Either an escaped character or an optionally delimited parameter marker. Empty
# groups are matched so that the tokenizer can report unterminated markers
PATTERN_PARAMETER = re.compile(
    r'\\(.?)|([{}])?:(\w*)'.format(re.escape(DELIMITERS)), re.DOTALL | re.ASCII
)

# Characters that would extend a parameter name if written straight after it
PATTERN_NAME_CHAR = re.compile(r'\w', re.ASCII)

ENV_VAR = 'PATHBUILDER_CONFIG'

KEY_PATTERNS = 'patterns'
KEY_PATTERN = 'pattern'
KEY_EXAMPLES = 'examples'

KIND_LITERAL = 'literal'
KIND_PARAMETER = 'parameter'
