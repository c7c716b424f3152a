# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
PL/0 syntax tree and tree-walking interpreter.
The parser guarantees that every referenced name is declared in an enclosing block,
so the interpreter only has to resolve names along the static chain.
'''

from dataclasses import dataclass, field
from typing import Callable


class Pl0RuntimeError(Exception): pass


ReadFn = Callable[[], int]
WriteFn = Callable[[int], None]


class Frame:
  'An activation record for a block. `parent` is the frame of the lexically enclosing block.'

  def __init__(self, block:'Block', parent:'Frame|None', read:ReadFn, write:WriteFn) -> None:
    self.block = block
    self.parent = parent
    self.read = read
    self.write = write
    self.values:dict[str,int] = dict(block.constants)
    for name in block.variables: self.values[name] = 0

  def frame_for(self, name:str) -> 'Frame':
    frame:Frame|None = self
    while frame is not None:
      if name in frame.values: return frame
      frame = frame.parent
    raise Pl0RuntimeError(f'undefined symbol: {name}')

  def get(self, name:str) -> int:
    return self.frame_for(name).values[name]

  def set(self, name:str, value:int) -> None:
    self.frame_for(name).values[name] = value

  def call(self, name:str) -> None:
    frame:Frame|None = self
    while frame is not None:
      try: proc = frame.block.procedures[name]
      except KeyError: frame = frame.parent
      else:
        proc.run(Frame(proc, parent=frame, read=self.read, write=self.write))
        return
    raise Pl0RuntimeError(f'undefined procedure: {name}')


# Expressions.

class Expression:
  def eval(self, frame:Frame) -> int: raise NotImplementedError(self)


@dataclass(frozen=True)
class Number(Expression):
  value:int

  def __str__(self) -> str: return str(self.value)

  def eval(self, frame:Frame) -> int: return self.value


@dataclass(frozen=True)
class Symbol(Expression):
  name:str

  def __str__(self) -> str: return self.name

  def eval(self, frame:Frame) -> int: return frame.get(self.name)


@dataclass(frozen=True)
class Negate(Expression):
  operand:Expression

  def __str__(self) -> str: return f'(-{self.operand})'

  def eval(self, frame:Frame) -> int: return -self.operand.eval(frame)


@dataclass(frozen=True)
class BinaryOperation(Expression):
  op:str
  left:Expression
  right:Expression

  def __str__(self) -> str: return f'({self.left} {self.op} {self.right})'

  def eval(self, frame:Frame) -> int:
    l = self.left.eval(frame)
    r = self.right.eval(frame)
    match self.op:
      case '+': return l + r
      case '-': return l - r
      case '*': return l * r
      case '/': return divide(l, r)
    raise ValueError(self.op)


def divide(l:int, r:int) -> int:
  'Integer division truncating toward zero.'
  if r == 0: raise Pl0RuntimeError('division by zero')
  q = abs(l) // abs(r)
  return q if (l < 0) == (r < 0) else -q


# Conditions.

class Condition:
  def eval(self, frame:Frame) -> bool: raise NotImplementedError(self)


@dataclass(frozen=True)
class Odd(Condition):
  expr:Expression

  def __str__(self) -> str: return f'ODD {self.expr}'

  def eval(self, frame:Frame) -> bool: return self.expr.eval(frame) % 2 != 0


@dataclass(frozen=True)
class Relation(Condition):
  op:str
  left:Expression
  right:Expression

  def __str__(self) -> str: return f'{self.left} {self.op} {self.right}'

  def eval(self, frame:Frame) -> bool:
    l = self.left.eval(frame)
    r = self.right.eval(frame)
    match self.op:
      case '=': return l == r
      case '#': return l != r
      case '<': return l < r
      case '<=': return l <= r
      case '>': return l > r
      case '>=': return l >= r
    raise ValueError(self.op)


# Statements.

class Statement:
  def exec(self, frame:Frame) -> None: raise NotImplementedError(self)


@dataclass(frozen=True)
class Assignment(Statement):
  name:str
  expr:Expression

  def exec(self, frame:Frame) -> None: frame.set(self.name, self.expr.eval(frame))


@dataclass(frozen=True)
class Call(Statement):
  name:str

  def exec(self, frame:Frame) -> None: frame.call(self.name)


@dataclass(frozen=True)
class Read(Statement):
  name:str

  def exec(self, frame:Frame) -> None: frame.set(self.name, frame.read())


@dataclass(frozen=True)
class Write(Statement):
  expr:Expression

  def exec(self, frame:Frame) -> None: frame.write(self.expr.eval(frame))


@dataclass(frozen=True)
class BeginEnd(Statement):
  statements:tuple[Statement,...]

  def exec(self, frame:Frame) -> None:
    for statement in self.statements: statement.exec(frame)


@dataclass(frozen=True)
class If(Statement):
  condition:Condition
  statement:Statement

  def exec(self, frame:Frame) -> None:
    if self.condition.eval(frame): self.statement.exec(frame)


@dataclass(frozen=True)
class While(Statement):
  condition:Condition
  statement:Statement

  def exec(self, frame:Frame) -> None:
    while self.condition.eval(frame): self.statement.exec(frame)


@dataclass(frozen=True)
class EmptyStatement(Statement):
  def exec(self, frame:Frame) -> None: pass


# Blocks.

@dataclass(frozen=True)
class Block:
  constants:dict[str,int] = field(default_factory=dict)
  variables:tuple[str,...] = ()
  procedures:dict[str,'Block'] = field(default_factory=dict)
  statement:Statement = EmptyStatement()

  def run(self, frame:Frame) -> None:
    self.statement.exec(frame)


@dataclass(frozen=True)
class Program:
  block:Block

  def run(self, read:ReadFn, write:WriteFn) -> None:
    'Execute the program; `?` statements call `read` and `!` statements call `write`.'
    self.block.run(Frame(self.block, parent=None, read=read, write=write))
