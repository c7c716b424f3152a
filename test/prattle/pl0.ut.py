# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from typing import Iterable

from prattle.error import LexError, ParseError, SemanticError, UnexpectedToken
from prattle.pl0 import parse_program, Pl0Kind, Pl0RuntimeError, tokenizer
from prattle.pl0.syntax import BeginEnd, Write
from prattle.token import Position, Token
from utest import utest, utest_call, utest_exc, utest_seq, utest_val


def kinds_and_texts(text:str) -> list[tuple[Pl0Kind,str]]:
  return [(token.kind, token.text) for token in tokenizer.tokenize(text)]


K = Pl0Kind

utest_seq([
  (K.BOF, ''),
  (K.KEYWORD, 'CONST'), (K.IDENT, 'x'), (K.SYMBOL, '='), (K.NUMBER, '5'), (K.SYMBOL, ';'),
  (K.KEYWORD, 'VAR'), (K.IDENT, 'y'), (K.SYMBOL, ';'),
  (K.KEYWORD, 'BEGIN'), (K.IDENT, 'y'), (K.SYMBOL, ':='), (K.IDENT, 'x'), (K.SYMBOL, '*'), (K.NUMBER, '2'),
  (K.KEYWORD, 'END'), (K.SYMBOL, '.'),
  (K.EOF, ''),
], kinds_and_texts, 'CONST x = 5; VAR y; BEGIN y := x * 2 END.')

utest_seq([
  (K.BOF, ''), (K.NUMBER, '1'), (K.COMPARISON, '<='), (K.NUMBER, '2'), (K.COMPARISON, '#'), (K.COMPARISON, '>'),
  (K.SYMBOL, '?'), (K.SYMBOL, '!'), (K.EOF, ''),
], kinds_and_texts, '1<=2 # >?!')

# Keywords are matched before identifiers, so a keyword prefix splits an identifier.
utest_seq([(K.BOF, ''), (K.KEYWORD, 'END'), (K.IDENT, 'X'), (K.EOF, '')], kinds_and_texts, 'ENDX')

@utest_call
def test_token_positions() -> None:
  tokens = list(tokenizer.tokenize('VAR x;\n  x := 1.'))
  utest_val(Token(pos=0, line=0, col=0, kind=K.BOF, text=''), tokens[0], 'BOF')
  utest_val(Token(pos=9, line=1, col=2, kind=K.IDENT, text='x'), tokens[4], 'assigned variable')
  utest_val(Token(pos=16, line=1, col=9, kind=K.EOF, text=''), tokens[-1], 'EOF')


def run_program(text:str, inputs:Iterable[int]=()) -> list[int]:
  program = parse_program(text)
  input_iter = iter(inputs)
  output:list[int] = []
  program.run(read=lambda: next(input_iter), write=output.append)
  return output


utest([10], run_program, 'CONST x = 5; VAR y; BEGIN y := x * 2; ! y END.')
utest([49], run_program, 'VAR n; BEGIN ? n; ! n * n END.', inputs=[7])
utest([-3], run_program, '! -7 / 2.')
utest([3], run_program, '! 7 / 2.')
utest([-3], run_program, '! 7 / -2.')
utest([-1], run_program, '! 1 - 2.')
utest([14], run_program, '! 2 + 3 * 4.')
utest([20], run_program, '! (2 + 3) * 4.')
utest([5], run_program, '! 10 - 3 - 2.')
utest([], run_program, '.')
utest([1], run_program, '! 1.\n') # The program ends at the final period; trailing whitespace is skipped.
utest([1, 3, 5], run_program, 'VAR i; BEGIN i := 0; WHILE i < 6 DO BEGIN IF ODD i THEN ! i; i := i + 1 END END.')
utest([1, 3], run_program, 'BEGIN IF 1 # 2 THEN ! 1; IF 1 = 2 THEN ! 2; IF 2 >= 2 THEN ! 3; IF 2 > 2 THEN ! 4 END.')

squares = '''
VAR x, squ;

PROCEDURE square;
BEGIN
  squ := x * x
END;

BEGIN
  x := 1;
  WHILE x <= 5 DO
  BEGIN
    CALL square;
    ! squ;
    x := x + 1
  END
END.
'''
utest([1, 4, 9, 16, 25], run_program, squares)

factorial = '''
VAR n, f;
PROCEDURE fact;
BEGIN
  IF n > 1 THEN BEGIN f := f * n; n := n - 1; CALL fact END
END;
BEGIN ? n; f := 1; CALL fact; ! f END.
'''
utest([120], run_program, factorial, inputs=[5])
utest([1], run_program, factorial, inputs=[0])

# Inner declarations shadow outer ones; the outer variable is untouched.
shadowing = '''
CONST k = 10;
VAR x;
PROCEDURE p;
  VAR x;
  PROCEDURE q;
    BEGIN x := x + k; ! x END;
  BEGIN x := 2; CALL q END;
BEGIN x := 1; CALL p; ! x END.
'''
utest([12, 1], run_program, shadowing)

utest_exc(Pl0RuntimeError('division by zero'), run_program, 'VAR z; ! 1 / z.')


@utest_call
def test_syntax_tree() -> None:
  program = parse_program('VAR x; BEGIN ! 1 + 2 * -x; ! -x * 2 - 3 - 4 END.')
  statement = program.block.statement
  assert isinstance(statement, BeginEnd)
  first, second = statement.statements
  assert isinstance(first, Write) and isinstance(second, Write)
  utest_val('(1 + (2 * (-x)))', str(first.expr), 'precedence')
  utest_val('((((-x) * 2) - 3) - 4)', str(second.expr), 'left associativity')
  utest_val(('x',), program.block.variables, 'variables')


# Semantic errors.
utest_exc(SemanticError(Position(7, 0, 7), 'undefined variable: y'), parse_program, 'VAR x; y := 1.')
utest_exc(SemanticError(Position(9, 0, 9), 'undefined variable: y'), parse_program, 'VAR x; ? y.')
utest_exc(SemanticError(Position(13, 0, 13), 'cannot assign to constant: c'), parse_program, 'CONST c = 1; c := 2.')
utest_exc(SemanticError(Position(15, 0, 15), 'cannot read into constant: c'), parse_program, 'CONST c = 1; ? c.')
utest_exc(SemanticError(Position(7, 0, 7), 'duplicate symbol: x'), parse_program, 'VAR x, x; x := 1.')
utest_exc(SemanticError(Position(17, 0, 17), 'duplicate symbol: x'), parse_program, 'CONST x = 1; VAR x; x := 1.')
utest_exc(SemanticError(Position(25, 0, 25), 'duplicate procedure: p'),
  parse_program, 'PROCEDURE p; ; PROCEDURE p; ; .')
utest_exc(SemanticError(Position(5, 0, 5), 'undefined procedure: p'), parse_program, 'CALL p.')
utest_exc(SemanticError(Position(2, 0, 2), 'undefined symbol: y'), parse_program, '! y.')
utest_exc(SemanticError(Position(31, 0, 31), 'undefined symbol: y'),
  parse_program, 'VAR x; PROCEDURE p; VAR y; ; ! y.')

# Syntax errors.
utest_exc(UnexpectedToken(Position(9, 0, 9), "expected ':='; received SYMBOL '='."), parse_program, 'VAR x; x = 1.')
utest_exc(UnexpectedToken(Position(13, 0, 13), "expected '.'; received EOF ''."), parse_program, 'VAR x; x := 1')
utest_exc(UnexpectedToken(Position(15, 0, 15), 'expected end of program.'), parse_program, 'VAR x; x := 1. x')
utest_exc(UnexpectedToken(Position(4, 0, 4), "expected IDENT; received KEYWORD 'BEGIN'."), parse_program, 'VAR BEGIN END.')
utest_exc(ParseError(Position(5, 0, 5), "expected relational operator; received 'THEN'."), parse_program, 'IF 1 THEN ! 1.')
utest_exc(UnexpectedToken(Position(2, 0, 2), "expected factor; received SYMBOL ';'."), parse_program, '! ;.')
utest_exc(LexError(Position(14, 0, 14), "unexpected character: '%'"), parse_program, 'VAR x; x := 1 % 2.')
