# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
PL/0, the small teaching language from Wirth's "Algorithms + Data Structures = Programs",
implemented as a sample grammar on top of prattle's Tokenizer, Scanner and ExpressionParser.
'''

from .lex import Pl0Kind, tokenizer
from .parse import parse_program
from .syntax import Pl0RuntimeError, Program
