# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Source text with diagnostic rendering.
'''

from typing import Any, NoReturn

from .token import Position, Token


class Source:

  def __init__(self, name:str, text:str, *, show_missing_newline:bool=True) -> None:
    assert isinstance(text, str)
    self.name = name
    self.text = text
    self.show_missing_newline = show_missing_newline


  def __repr__(self) -> str:
    return f'{self.__class__.__name__}({self.name!r}, text=<str[{len(self.text)}]>)'


  def __getitem__(self, token:Token[Any]) -> str:
    return self.text[token.pos:token.end]


  def get_line_start(self, pos:int) -> int:
    'Return the character index for the start of the line containing `pos`.'
    text = self.text
    if pos == len(text) and text.endswith('\n'): pos -= 1
    return text.rfind('\n', 0, pos) + 1 # rfind returns -1 for no match, so just add one.


  def get_line_end(self, pos:int) -> int:
    '''
    Return the character index for the end of the line containing `pos`;
    a newline is considered the final character of a line.
    '''
    newline_pos = self.text.find('\n', pos)
    return len(self.text) if newline_pos == -1 else newline_pos + 1


  def position(self, pos:int) -> Position:
    'Compute the line and column indices for a character offset, consistent with Tokenizer positions.'
    if not (0 <= pos <= len(self.text)): raise IndexError(pos)
    line_start = self.text.rfind('\n', 0, pos) + 1
    return Position(pos, self.text.count('\n', 0, pos), pos - line_start)


  def diagnostic_for_token(self, token:Token[Any], msg:str='', *, prefix:str='') -> str:
    return self.diagnostic(token.pos, end=token.end, msg=msg, prefix=prefix)


  def fail(self, pos:int, *, end:int|None=None, msg:str='', prefix:str='') -> NoReturn:
    exit(self.diagnostic(pos, end=end, msg=msg, prefix=prefix))


  def diagnostic(self, pos:int, *, end:int|None=None, msg:str='', prefix:str='') -> str:
    if end is None: end = pos
    assert 0 <= pos <= end, (pos, end)
    line_pos = self.get_line_start(pos)
    line_end = self.get_line_end(pos)
    end = min(end, line_end) # Multiline spans are clipped to the first line.
    line_idx = self.text.count('\n', 0, line_pos)

    line_str = self.text[line_pos:line_end]
    src_line:str
    if line_str and line_str[-1] == '\n':
      s = line_str[:-1]
      if pos == len(line_str) - 1 + line_pos or end == line_end:
        src_line = s + '\u23CE' # RETURN SYMBOL.
      else:
        src_line = s
    elif self.show_missing_newline:
      src_line = line_str + '\u23CE\u0353' # RETURN SYMBOL, COMBINING X BELOW.
    else:
      src_line = line_str

    src_bar = '| ' if src_line else '|'

    under_chars = ['\t' if char == '\t' else ' ' for char in line_str[:(pos - line_pos)]]
    if pos >= end:
      under_chars.append('^')
    else:
      under_chars.extend('~' for _ in range(pos, end))
    underline = ''.join(under_chars)

    def col_str(p:int) -> str: return str((p - line_pos) + 1)

    pre = (prefix + ': ') if prefix else ''
    col = f'{col_str(pos)}-{col_str(end)}' if pos < end else col_str(pos)
    msg_space = '' if (not msg or msg.startswith('\n')) else ' '
    name_colon = (self.name + ':') if self.name else ''
    return f'{pre}{name_colon}{line_idx+1}:{col}:{msg_space}{msg}\n{src_bar}{src_line}\n  {underline}\n'
