# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from enum import Enum

from .. import patterns
from ..lex import Tokenizer


class Pl0Kind(Enum):
  BOF = 'bof'
  IDENT = 'ident'
  KEYWORD = 'keyword'
  NUMBER = 'number'
  COMPARISON = 'comparison'
  SYMBOL = 'symbol'
  EOF = 'eof'


keywords = ('BEGIN', 'CALL', 'CONST', 'DO', 'END', 'IF', 'ODD', 'PROCEDURE', 'THEN', 'VAR', 'WHILE')

# Rules are tried in order, so the keyword set must precede identifiers.
# `=` is a symbol rather than a comparison because it also binds constants in CONST declarations.
tokenizer = Tokenizer(
  (patterns.whitespace, None),
  ('|'.join(keywords), Pl0Kind.KEYWORD),
  (r'[0-9]+', Pl0Kind.NUMBER),
  (r'[a-zA-Z]+', Pl0Kind.IDENT),
  (r'<=|>=|<|>|\#', Pl0Kind.COMPARISON),
  (r'\(|\)|:=|;|\.|,|!|\?|\+|-|\*|/|=', Pl0Kind.SYMBOL),
  bof_kind=Pl0Kind.BOF,
  eof_kind=Pl0Kind.EOF,
)
