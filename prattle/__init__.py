# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
prattle is a small lexing and parsing engine:
a regex-driven Tokenizer, a buffered Scanner with unbounded lookahead,
and a generic operator precedence ExpressionParser for use inside hand-written recursive descent grammars.
'''

from .error import LexError, ParseError, SemanticError, UnexpectedEOF, UnexpectedToken
from .expr import ExpressionParser, Infix, InfixRight, Prefix, Suffix
from .lex import Tokenizer
from .scanner import Scanner
from .source import Source
from .token import Position, Token


__all__ = [
  'ExpressionParser',
  'Infix',
  'InfixRight',
  'LexError',
  'ParseError',
  'Position',
  'Prefix',
  'Scanner',
  'SemanticError',
  'Source',
  'Suffix',
  'Token',
  'Tokenizer',
  'UnexpectedEOF',
  'UnexpectedToken',
]
