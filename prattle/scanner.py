# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Scanner presents a single-pass token iterable as a buffered stream with unbounded lookahead.
It provides the consumption primitives used by recursive descent and precedence parsing code.
'''

from typing import Generic, Iterable, TypeVar

from .error import ParseError, UnexpectedEOF, UnexpectedToken
from .io import errL
from .token import kind_desc, Token


_K = TypeVar('_K')
_E = TypeVar('_E', bound=ParseError)


class Scanner(Generic[_K]):
  '''
  Scanner wraps a lazy token source.
  Tokens are pulled from the source only when `current` or `look_ahead` needs them,
  and are held in a FIFO buffer until consumed. Consumption is destructive.

  When the source is exhausted, the scanner synthesizes EOF tokens positioned immediately after the last real token.
  A source that yields its own EOF token (as Tokenizer does) therefore produces a stable EOF.
  '''

  def __init__(self, tokens:Iterable[Token[_K]], eof_kind:_K, eof_text:str='', *, dbg:bool=False) -> None:
    self.source = iter(tokens)
    self.eof_kind = eof_kind
    self.eof_text = eof_text
    self.dbg = dbg
    self.buffer:list[Token[_K]] = []
    # The last token pulled from the source; anchors the synthetic EOF and errors raised while the buffer is empty.
    self.last = Token(pos=0, line=0, col=0, kind=eof_kind, text='')
    self.exhausted = False
    self.source_error:Exception|None = None # Raised again on every later pull.


  def __repr__(self) -> str:
    return f'{type(self).__name__}(last={self.last}, buffer={[str(t) for t in self.buffer]})'


  @property
  def current(self) -> Token[_K]:
    return self.look_ahead(0)


  @property
  def eof(self) -> bool:
    current = self.current
    return current.kind == self.eof_kind and current.text == self.eof_text


  def look_ahead(self, idx:int) -> Token[_K]:
    'Return the token at buffer offset `idx`, pulling from the source as necessary. Never consumes.'
    if idx < 0: raise IndexError(idx)
    buffer = self.buffer
    while len(buffer) <= idx:
      if self.exhausted: return self.last.end_token(kind=self.eof_kind, text=self.eof_text)
      if self.source_error is not None: raise self.source_error
      try: token = next(self.source)
      except StopIteration:
        self.exhausted = True
        continue
      except Exception as e:
        self.source_error = e
        raise
      self.last = token
      buffer.append(token)
    return buffer[idx]


  def consume_token(self) -> Token[_K]:
    'Remove and return the current token. Raises UnexpectedEOF at the end of input.'
    if self.eof:
      raise self.error('read past EOF', UnexpectedEOF)
    token = self.buffer.pop(0) # `eof` materialized the current token.
    if self.dbg: errL(f'Scanner consumed: {token}')
    return token


  def consume(self) -> str:
    'Remove the current token and return its text. Raises UnexpectedEOF at the end of input.'
    return self.consume_token().text


  def consume_kind(self, kind:_K, msg:str='') -> str:
    'Consume the current token and return its text, verifying that it has the expected kind.'
    current = self.current
    if current.kind != kind:
      raise self.error(msg or f'expected {kind_desc(kind)}; received {current.kind_desc} {current.text!r}.', UnexpectedToken)
    return self.consume()


  def consume_text(self, text:str, msg:str='') -> str:
    'Consume the current token and return its text, verifying that the text matches `text`.'
    if not self.try_consume(text):
      current = self.current
      raise self.error(msg or f'expected {text!r}; received {current.kind_desc} {current.text!r}.', UnexpectedToken)
    return text


  def try_consume(self, text:str) -> bool:
    '''
    If the current token text matches `text`, consume it and return True.
    Otherwise leave the scanner unchanged and return False.
    '''
    if self.current.text == text:
      self.consume()
      return True
    return False


  def error(self, msg:str, error_type:type[_E]=ParseError) -> _E: # type: ignore[assignment]
    '''
    Create (but do not raise) an error positioned at the current token, fetching it if necessary.
    If fetching the current token fails, the error is positioned at the last token successfully pulled from the source.
    '''
    if self.buffer: token = self.buffer[0]
    elif self.source_error is not None: token = self.last
    else:
      try: token = self.look_ahead(0)
      except Exception: token = self.last # The failure is stored in `source_error` and raised by the next pull.
    return error_type(token.position, msg, token.text)
