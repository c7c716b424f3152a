# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Immutable Position and Token classes shared by the tokenizer, scanner and parsers.
'''

from dataclasses import dataclass
from typing import Generic, NamedTuple, TypeVar


_K = TypeVar('_K')


class Position(NamedTuple):
  'A source position: character offset plus zero-based line and column indices.'
  pos:int
  line:int
  col:int

  def __str__(self) -> str:
    return f'{self.line+1}:{self.col+1}'

  def advanced(self, text:str) -> 'Position':
    'Return the position immediately after `text`, which starts at this position.'
    newlines = text.count('\n')
    if newlines:
      return Position(self.pos + len(text), self.line + newlines, len(text) - text.rfind('\n') - 1)
    return Position(self.pos + len(text), self.line, self.col + len(text))


@dataclass(frozen=True)
class Token(Generic[_K]):
  '''
  A single lexical unit.
  `kind` is the grammar-defined classification; the engine only ever compares kinds for equality.
  '''
  pos:int
  line:int
  col:int
  kind:_K
  text:str

  def __str__(self) -> str:
    return f'{self.position}:{self.kind_desc}:{self.text!r}'

  @property
  def kind_desc(self) -> str: return kind_desc(self.kind)

  @property
  def position(self) -> Position:
    return Position(self.pos, self.line, self.col)

  @property
  def end(self) -> int: return self.pos + len(self.text)

  @property
  def end_position(self) -> Position:
    return self.position.advanced(self.text)

  def end_token(self, kind:_K, text:str='') -> 'Token[_K]':
    'Create a new token positioned immediately after this one.'
    pos, line, col = self.end_position
    return Token(pos=pos, line=line, col=col, kind=kind, text=text)


def kind_desc(kind:object) -> str:
  'Describe a token kind: the member name for enums, otherwise the string form.'
  name = getattr(kind, 'name', None)
  return name if isinstance(name, str) else str(kind)
