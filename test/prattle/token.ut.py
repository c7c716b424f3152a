# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from enum import Enum

from prattle.token import kind_desc, Position, Token
from utest import utest, utest_val


class K(Enum):
  word = 1


utest('1:1', str, Position(0, 0, 0))
utest('3:5', str, Position(20, 2, 4))

utest(Position(3, 0, 3), Position(0, 0, 0).advanced, 'abc')
utest(Position(4, 1, 0), Position(0, 0, 0).advanced, 'abc\n')
utest(Position(9, 2, 2), Position(2, 0, 2).advanced, 'a\nbc\nde')
utest(Position(5, 1, 5), Position(5, 1, 5).advanced, '')

token = Token(pos=4, line=1, col=2, kind=K.word, text='hello')
utest_val(Position(4, 1, 2), token.position, 'token.position')
utest_val(9, token.end, 'token.end')
utest_val(Position(9, 1, 7), token.end_position, 'token.end_position')
utest_val('2:3:word:\'hello\'', str(token), 'str(token)')

utest(Token(pos=9, line=1, col=7, kind='eof', text=''), token.end_token, 'eof')

multiline = Token(pos=0, line=0, col=0, kind='str', text='"a\nbc"')
utest(Token(pos=6, line=1, col=3, kind='eof', text=''), multiline.end_token, 'eof')

utest('word', kind_desc, K.word)
utest('ident', kind_desc, 'ident')
utest('7', kind_desc, 7)

# Tokens are immutable values.
utest_val(Token(0, 0, 0, 'a', 'x'), Token(0, 0, 0, 'a', 'x'), 'token equality')
utest_val(True, Token(0, 0, 0, 'a', 'x') != Token(1, 0, 1, 'a', 'x'), 'token inequality')
