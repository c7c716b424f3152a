# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
A generic operator precedence ("Pratt") expression parser.

The grammar author supplies operator definitions and a primary callback;
ExpressionParser resolves precedence and associativity over a Scanner,
so that the grammar does not need a recursive descent function per precedence level.

Operators are triggered by token text. Precedence is numeric, and a smaller number binds tighter:
with `*` at 1 and `+` at 2, `1 + 2 * 3` parses as `1 + (2 * 3)`.
Operators of equal precedence associate to the left, except for InfixRight operators.

Prefix operators live in one table; infix and suffix operators share a second "tail" table,
because both are recognized after a left operand. The same symbol may appear in both tables, e.g. `-`.

Symbols that are not in the tail table (or that bind more loosely than the current bound) end the expression;
they are left for the enclosing grammar rule to consume.
'''

from math import inf
from types import MappingProxyType
from typing import Any, Callable, Generic, Mapping, TypeVar

from .scanner import Scanner


_Ctx = TypeVar('_Ctx')
_R = TypeVar('_R')

Primary = Callable[[Scanner, Any], Any]
UnaryCombine = Callable[[Scanner, Any, str, Any], Any] # (scanner, ctx, symbol, operand).
BinaryCombine = Callable[[Scanner, Any, str, Any, Any], Any] # (scanner, ctx, symbol, left, right).


class Operator:
  'An operator definition: a precedence, trigger symbols, and a combine callback.'
  desc = 'operator'

  def __init__(self, precedence:int, *symbols:str, combine:Callable[...,Any]) -> None:
    if not isinstance(precedence, int) or isinstance(precedence, bool):
      raise ExpressionParser.DefinitionError(f'{self.desc} precedence must be an integer; received {precedence!r}')
    if not symbols:
      raise ExpressionParser.DefinitionError(f'{self.desc} at precedence {precedence} must have at least one symbol')
    for symbol in symbols:
      if not isinstance(symbol, str) or not symbol:
        raise ExpressionParser.DefinitionError(f'{self.desc} symbol must be a nonempty string; received {symbol!r}')
    self.precedence = precedence
    self.symbols = symbols
    self.combine = combine

  def __repr__(self) -> str:
    syms = ', '.join(repr(s) for s in self.symbols)
    return f'{type(self).__name__}({self.precedence}, {syms})'



class Prefix(Operator):
  '''
  A prefix operator, e.g. unary minus.
  The operand is parsed admitting operators up to and including this operator's precedence.
  '''
  desc = 'prefix operator'

  def __init__(self, precedence:int, *symbols:str, combine:UnaryCombine) -> None:
    super().__init__(precedence, *symbols, combine=combine)



class Infix(Operator):
  'A left-associative binary operator: `8 - 3 - 2` is `(8 - 3) - 2`.'
  desc = 'infix operator'
  right_assoc = False

  def __init__(self, precedence:int, *symbols:str, combine:BinaryCombine) -> None:
    super().__init__(precedence, *symbols, combine=combine)



class InfixRight(Infix):
  'A right-associative binary operator: `2 ^ 3 ^ 2` is `2 ^ (3 ^ 2)`.'
  right_assoc = True



class Suffix(Operator):
  'A suffix/postfix operator, e.g. `!` in `n!`. The combine callback receives the left operand.'
  desc = 'suffix operator'

  def __init__(self, precedence:int, *symbols:str, combine:UnaryCombine) -> None:
    super().__init__(precedence, *symbols, combine=combine)



class ExpressionParser(Generic[_Ctx,_R]):
  '''
  The operator tables are built once at construction and are read-only afterwards,
  so a single parser can be shared by any number of concurrent parses, each with its own Scanner.
  Recursion depth follows expression nesting depth; there is no explicit guard.
  '''

  class DefinitionError(Exception): pass

  def __init__(self, *operators:Operator, primary:Callable[[Scanner,_Ctx],_R]) -> None:
    prefix_table:dict[str,Prefix] = {}
    tail_table:dict[str,Infix|Suffix] = {}
    for op in operators:
      if isinstance(op, Prefix): table:dict[str,Any] = prefix_table
      elif isinstance(op, (Infix, Suffix)): table = tail_table
      else: raise ExpressionParser.DefinitionError(f'expected Prefix, Infix or Suffix; received {op!r}')
      for symbol in op.symbols:
        try: existing = table[symbol]
        except KeyError: pass
        else: raise ExpressionParser.DefinitionError(f'ambiguous operators for symbol {symbol!r}:\n  {existing}\n  {op}')
        table[symbol] = op
    self.prefix_table:Mapping[str,Prefix] = MappingProxyType(prefix_table)
    self.tail_table:Mapping[str,Infix|Suffix] = MappingProxyType(tail_table)
    self.primary = primary


  def __repr__(self) -> str:
    return f'{type(self).__name__}(prefix={list(self.prefix_table)}, tail={list(self.tail_table)})'


  def parse(self, scanner:Scanner, ctx:_Ctx, max_precedence:float=inf) -> _R:
    '''
    Parse an expression, admitting operators whose precedence is at most `max_precedence`.
    Errors raised by the scanner or by the callbacks propagate unchanged.
    '''
    return self._parse(scanner, ctx, max_precedence, inclusive=True)


  def _parse(self, scanner:Scanner, ctx:_Ctx, bound:float, inclusive:bool) -> _R:
    prefix = self.prefix_table.get(scanner.current.text)
    if prefix is None:
      left = self.primary(scanner, ctx)
    else:
      symbol = scanner.consume()
      operand = self._parse(scanner, ctx, prefix.precedence, inclusive=True)
      left = prefix.combine(scanner, ctx, symbol, operand)

    tail_table = self.tail_table
    while True:
      op = tail_table.get(scanner.current.text)
      if op is None: break # Not an operator that this parser owns.
      precedence = op.precedence
      if precedence > bound or (precedence == bound and not inclusive): break # Binds more loosely than the bound.
      symbol = scanner.consume()
      if isinstance(op, Suffix):
        left = op.combine(scanner, ctx, symbol, left)
      else:
        right = self._parse(scanner, ctx, precedence, inclusive=op.right_assoc)
        left = op.combine(scanner, ctx, symbol, left, right)
    return left
