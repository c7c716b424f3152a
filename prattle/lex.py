# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Simple lexing using python regular expressions.

A Tokenizer is defined by an ordered list of (pattern, kind) rules.
At each offset the rules are tried in declaration order and the first match wins;
there is no longest-match arbitration, so a grammar must list e.g. a keyword pattern before a general identifier pattern.
A rule whose kind is None is a skip rule: its matches (typically whitespace or comments) advance the position silently.
'''

import re
from typing import Generic, Iterator, Pattern, TypeVar

from .error import LexError
from .scanner import Scanner
from .token import Position, Token


_K = TypeVar('_K')

TokenRule = tuple[str|Pattern[str], _K|None]


class Tokenizer(Generic[_K]):

  class DefinitionError(Exception): pass

  def __init__(self, *rules:TokenRule, eof_kind:_K, bof_kind:_K|None=None, flags:str='') -> None:

    # Validate flags.
    for flag in flags:
      if flag not in 'aiLmsux':
        raise Tokenizer.DefinitionError(f'invalid global regex flag: {flag}')
    flags_pattern = f'(?{flags})' if flags else ''

    if not rules: raise Tokenizer.DefinitionError('Tokenizer instance must define at least one rule')

    self.rules:tuple[tuple[Pattern[str],_K|None],...] = tuple(
      (self._compile_rule(i, pattern, flags_pattern), kind) for i, (pattern, kind) in enumerate(rules))
    self.eof_kind = eof_kind
    self.bof_kind = bof_kind


  @staticmethod
  def _compile_rule(idx:int, pattern:str|Pattern[str], flags_pattern:str) -> Pattern[str]:
    if isinstance(pattern, re.Pattern):
      if flags_pattern:
        raise Tokenizer.DefinitionError(f'rule {idx} pattern is precompiled; global flags cannot be applied: {pattern.pattern!r}')
      regex = pattern
    elif isinstance(pattern, str):
      try: regex = re.compile(flags_pattern + pattern) # Compile each expression by itself to improve error clarity.
      except re.error as e:
        raise Tokenizer.DefinitionError(f'rule {idx} pattern is invalid: {pattern!r}') from e
    else:
      raise Tokenizer.DefinitionError(f'rule {idx} pattern must be a string or compiled regex; found {pattern!r}')
    if regex.fullmatch(''):
      raise Tokenizer.DefinitionError(f'rule {idx} pattern matches the empty string: {regex.pattern!r}')
    return regex


  def __repr__(self) -> str:
    return f'{type(self).__name__}(<{len(self.rules)} rules>, eof_kind={self.eof_kind!r}, bof_kind={self.bof_kind!r})'


  def tokenize(self, text:str) -> Iterator[Token[_K]]:
    '''
    Lazily lex `text`, yielding an optional BOF token, the matched tokens, and a final EOF token.
    Each call returns an independent generator; the scan cursor is local to it.
    '''
    if not isinstance(text, str): raise TypeError(text)
    rules = self.rules
    end = len(text)
    position = Position(0, 0, 0)
    if self.bof_kind is not None:
      yield Token(pos=0, line=0, col=0, kind=self.bof_kind, text='')
    while position.pos < end:
      pos = position.pos
      for regex, kind in rules:
        m = regex.match(text, pos)
        if m: break
      else:
        char = text[pos]
        raise LexError(position, f'unexpected character: {char!r}', char)
      match_text = m[0]
      if not match_text:
        raise Tokenizer.DefinitionError(f'Zero-length patterns are disallowed.\n  pattern: {regex.pattern!r}; match: {m}')
      if kind is not None:
        yield Token(pos=pos, line=position.line, col=position.col, kind=kind, text=match_text)
      position = position.advanced(match_text)
    yield Token(pos=position.pos, line=position.line, col=position.col, kind=self.eof_kind, text='')


  def scan(self, text:str, *, dbg:bool=False) -> Scanner[_K]:
    'Return a Scanner over the lazy token stream for `text`.'
    return Scanner(self.tokenize(text), eof_kind=self.eof_kind, dbg=dbg)
