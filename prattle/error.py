# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
The parse error family.
Lexical, syntactic and semantic failures all share one shape: a position, a message, and the offending text.
'''

from typing import NoReturn

from .source import Source
from .token import Position, Token


class ParseError(Exception):
  error_prefix = 'parse'

  def __init__(self, position:Position, msg:str, text:str=''):
    self.position = position
    self.msg = msg
    self.text = text
    super().__init__(position, msg)

  def __str__(self) -> str:
    return f'{self.position}: {self.msg}'

  @classmethod
  def for_token(cls, token:Token, msg:str) -> 'ParseError':
    return cls(token.position, msg, token.text)

  def diagnostic(self, source:Source) -> str:
    pos = self.position.pos
    return source.diagnostic(pos, end=pos+len(self.text), msg=f'{self.error_prefix} error: {self.msg}')

  def fail(self, source:Source) -> NoReturn:
    exit(self.diagnostic(source))


class LexError(ParseError):
  'Raised by Tokenizer when no rule matches at the current offset.'
  error_prefix = 'lex'


class UnexpectedToken(ParseError):
  'Raised by Scanner when the current token does not have the expected kind or text.'


class UnexpectedEOF(ParseError):
  'Raised by Scanner when consumption is attempted at the end of input.'


class SemanticError(ParseError):
  'Raised by grammar code for checks beyond syntax, e.g. references to undefined symbols.'
  error_prefix = 'semantic'
