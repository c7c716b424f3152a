# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Recursive descent parser for PL/0.

program = block "." .

block = [ "CONST" ident "=" number { "," ident "=" number } ";" ]
        [ "VAR" ident { "," ident } ";" ]
        { "PROCEDURE" ident ";" block ";" }
        statement .

statement = [ ident ":=" expression
            | "CALL" ident
            | "?" ident
            | "!" expression
            | "BEGIN" statement { ";" statement } "END"
            | "IF" condition "THEN" statement
            | "WHILE" condition "DO" statement ] .

condition = "ODD" expression | expression ("="|"#"|"<"|"<="|">"|">=") expression .

expression = [ "+"|"-" ] term { ("+"|"-") term } .
term = factor { ("*"|"/") factor } .
factor = ident | number | "(" expression ")" .

The expression levels are handled by a shared ExpressionParser rather than one function per level.
'''

from collections import ChainMap
from dataclasses import dataclass

from ..error import SemanticError, UnexpectedToken
from ..expr import ExpressionParser, Infix, Prefix
from ..scanner import Scanner
from ..token import Token
from .lex import Pl0Kind, tokenizer
from .syntax import (Assignment, BeginEnd, BinaryOperation, Block, Call, Condition, EmptyStatement, Expression, If,
  Negate, Number, Odd, Program, Read, Relation, Statement, Symbol, While, Write)


Pl0Scanner = Scanner[Pl0Kind]

relation_ops = frozenset({'=', '#', '<', '<=', '>', '>='})


@dataclass(frozen=True)
class Scope:
  '''
  The names visible while parsing a block.
  `symbols` maps constants to their values and variables to None.
  Each nested scope is a ChainMap child: it stores only its own declarations plus a reference to its parent.
  '''
  symbols:ChainMap[str,int|None]
  procedures:ChainMap[str,bool]

  @staticmethod
  def root() -> 'Scope':
    return Scope(ChainMap(), ChainMap())

  def child(self) -> 'Scope':
    return Scope(self.symbols.new_child(), self.procedures.new_child())

  def declare_symbol(self, token:Token[Pl0Kind], value:int|None) -> None:
    name = token.text
    if name in self.symbols.maps[0]:
      raise SemanticError.for_token(token, f'duplicate symbol: {name}')
    self.symbols[name] = value

  def declare_procedure(self, token:Token[Pl0Kind]) -> None:
    name = token.text
    if name in self.procedures.maps[0]:
      raise SemanticError.for_token(token, f'duplicate procedure: {name}')
    self.procedures[name] = True


def parse_program(text:str, *, dbg:bool=False) -> Program:
  scanner = tokenizer.scan(text, dbg=dbg)
  scanner.consume_kind(Pl0Kind.BOF)
  program = Program(parse_block(scanner, Scope.root()))
  scanner.consume_text('.')
  if not scanner.eof: raise scanner.error('expected end of program.', UnexpectedToken)
  return program


def parse_block(scanner:Pl0Scanner, scope:Scope) -> Block:
  constants:dict[str,int] = {}
  variables:list[str] = []
  if scanner.try_consume('CONST'):
    while True:
      name_token = scanner.current
      name = scanner.consume_kind(Pl0Kind.IDENT)
      scanner.consume_text('=')
      value = int(scanner.consume_kind(Pl0Kind.NUMBER))
      scope.declare_symbol(name_token, value)
      constants[name] = value
      if not scanner.try_consume(','): break
    scanner.consume_text(';')

  if scanner.try_consume('VAR'):
    while True:
      name_token = scanner.current
      name = scanner.consume_kind(Pl0Kind.IDENT)
      scope.declare_symbol(name_token, None)
      variables.append(name)
      if not scanner.try_consume(','): break
    scanner.consume_text(';')

  procedures:dict[str,Block] = {}
  while scanner.try_consume('PROCEDURE'):
    name_token = scanner.current
    name = scanner.consume_kind(Pl0Kind.IDENT)
    scanner.consume_text(';')
    scope.declare_procedure(name_token) # Declared before the body to permit recursion.
    procedures[name] = parse_block(scanner, scope.child())
    scanner.consume_text(';')

  statement = parse_statement(scanner, scope)
  return Block(constants=constants, variables=tuple(variables), procedures=procedures, statement=statement)


def parse_statement(scanner:Pl0Scanner, scope:Scope) -> Statement:
  if scanner.current.kind == Pl0Kind.IDENT:
    name = check_variable(scanner, scope, scanner.current.text, 'assign to')
    scanner.consume()
    scanner.consume_text(':=')
    return Assignment(name, parse_expression(scanner, scope))

  if scanner.try_consume('CALL'):
    if scanner.current.kind == Pl0Kind.IDENT and scanner.current.text not in scope.procedures:
      raise scanner.error(f'undefined procedure: {scanner.current.text}', SemanticError)
    return Call(scanner.consume_kind(Pl0Kind.IDENT))

  if scanner.try_consume('?'):
    if scanner.current.kind == Pl0Kind.IDENT: check_variable(scanner, scope, scanner.current.text, 'read into')
    return Read(scanner.consume_kind(Pl0Kind.IDENT))

  if scanner.try_consume('!'):
    return Write(parse_expression(scanner, scope))

  if scanner.try_consume('BEGIN'):
    statements = [parse_statement(scanner, scope)]
    while scanner.try_consume(';'):
      statements.append(parse_statement(scanner, scope))
    scanner.consume_text('END')
    return BeginEnd(tuple(statements))

  if scanner.try_consume('IF'):
    condition = parse_condition(scanner, scope)
    scanner.consume_text('THEN')
    return If(condition, parse_statement(scanner, scope))

  if scanner.try_consume('WHILE'):
    condition = parse_condition(scanner, scope)
    scanner.consume_text('DO')
    return While(condition, parse_statement(scanner, scope))

  return EmptyStatement()


def check_variable(scanner:Pl0Scanner, scope:Scope, name:str, action:str) -> str:
  'Verify that `name`, the text of the current token, refers to a variable; `action` describes the use in errors.'
  try: value = scope.symbols[name]
  except KeyError: raise scanner.error(f'undefined variable: {name}', SemanticError) from None
  if value is not None: raise scanner.error(f'cannot {action} constant: {name}', SemanticError)
  return name


def parse_condition(scanner:Pl0Scanner, scope:Scope) -> Condition:
  if scanner.try_consume('ODD'):
    return Odd(parse_expression(scanner, scope))
  left = parse_expression(scanner, scope)
  op = scanner.current.text
  if op not in relation_ops:
    raise scanner.error(f'expected relational operator; received {op!r}.')
  scanner.consume()
  return Relation(op, left, parse_expression(scanner, scope))


def parse_expression(scanner:Pl0Scanner, scope:Scope) -> Expression:
  return expression_parser.parse(scanner, scope)


def parse_factor(scanner:Pl0Scanner, scope:Scope) -> Expression:
  match scanner.current.kind:
    case Pl0Kind.NUMBER:
      return Number(int(scanner.consume()))
    case Pl0Kind.IDENT:
      name = scanner.current.text
      if name not in scope.symbols:
        raise scanner.error(f'undefined symbol: {name}', SemanticError)
      scanner.consume()
      return Symbol(name)
  scanner.consume_text('(', f'expected factor; received {scanner.current.kind_desc} {scanner.current.text!r}.')
  expr = parse_expression(scanner, scope)
  scanner.consume_text(')')
  return expr


expression_parser:ExpressionParser[Scope,Expression] = ExpressionParser(
  Prefix(0, '+', combine=lambda scanner, scope, symbol, operand: operand),
  Prefix(0, '-', combine=lambda scanner, scope, symbol, operand: Negate(operand)),
  Infix(1, '*', '/', combine=lambda scanner, scope, symbol, left, right: BinaryOperation(symbol, left, right)),
  Infix(2, '+', '-', combine=lambda scanner, scope, symbol, left, right: BinaryOperation(symbol, left, right)),
  primary=parse_factor)
