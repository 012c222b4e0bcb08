import pytest

from pathbuilder import tokenizer
from pathbuilder.exceptions import MalformedPatternError
from pathbuilder.token import Literal, NamedParameter


@pytest.mark.parametrize('pattern, expected', (
    ('/health', (Literal('/health'),)),
    ('/users/:id', (Literal('/users'), NamedParameter('id', '/'))),
    ('/users/:id/posts/:postId', (
        Literal('/users'),
        NamedParameter('id', '/'),
        Literal('/posts'),
        NamedParameter('postId', '/'),
    )),
    ('/:a/:b', (NamedParameter('a', '/'), NamedParameter('b', '/'))),
    ('/files/:name.:ext', (
        Literal('/files'),
        NamedParameter('name', '/'),
        NamedParameter('ext', '.'),
    )),
    ('/users/:id/', (Literal('/users'), NamedParameter('id', '/'), Literal('/'))),
    (':id', (NamedParameter('id', ''),)),
    ('/v:version', (Literal('/v'), NamedParameter('version', ''))),
    ('/:from-:to', (
        NamedParameter('from', '/'),
        Literal('-'),
        NamedParameter('to', ''),
    )),
    ('/time\\:now', (Literal('/time:now'),)),
    ('/a\\/:id', (Literal('/a/'), NamedParameter('id', ''))),
    ('/user_:user_id2', (Literal('/user_'), NamedParameter('user_id2', ''))),
    ('/:café', (NamedParameter('caf', '/'), Literal('é'))),
    ('/:id\\x', (NamedParameter('id', '/'), Literal('x'))),
    ('/:ab名/:cd', (NamedParameter('ab', '/'), Literal('名'), NamedParameter('cd', '/'))),
))
def test_parse(pattern, expected):
    assert tokenizer.parse(pattern) == expected


def test_parse_returns_tuple():
    assert isinstance(tokenizer.parse('/users/:id'), tuple)


@pytest.mark.parametrize('pattern', (
    '',
    '/users/:',
    '/users/:/posts',
    '/users/:id/:',
    ':',
    '/users/:-id',
    '/trailing\\',
    '/users/:id/friends/:id',
))
def test_parse_fail(pattern):
    with pytest.raises(MalformedPatternError):
        tokenizer.parse(pattern)


def test_malformed_is_value_error():
    with pytest.raises(ValueError):
        tokenizer.parse('/users/:')


@pytest.mark.parametrize('pattern, names', (
    ('/health', ()),
    ('/users/:id', ('id',)),
    ('/users/:id/posts/:postId', ('id', 'postId')),
    ('/files/:name.:ext', ('name', 'ext')),
))
def test_parameter_names(pattern, names):
    assert tokenizer.parameter_names(tokenizer.parse(pattern)) == names


@pytest.mark.parametrize('pattern', (
    '/health',
    '/users/:id',
    '/users/:id/posts/:postId/',
    '/files/:name.:ext',
    '/:from-:to',
    '/v:version',
))
def test_compile_placeholder_path(pattern):
    tokens = tokenizer.parse(pattern)
    assert tokenizer.compile_placeholder_path(tokens) == pattern


@pytest.mark.parametrize('pattern', (
    '/time\\:now/:id',
    '/a\\/:id',
    '/a\\.:id',
    '/:id\\x',
    '/:from\\_to/:id\\9',
    '/:café',
))
def test_compile_placeholder_path_escapes(pattern):
    tokens = tokenizer.parse(pattern)
    compiled = tokenizer.compile_placeholder_path(tokens)
    assert compiled == pattern
    assert tokenizer.parse(compiled) == tokens
