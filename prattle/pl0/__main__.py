# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import ArgumentParser
from sys import stdin

from ..error import ParseError
from ..io import errL, outL
from ..source import Source
from . import parse_program, Pl0RuntimeError, tokenizer


def main() -> None:
  arg_parser = ArgumentParser(prog='pl0', description='Parse and run PL/0 programs.')
  arg_parser.add_argument('paths', nargs='+', help='PL/0 source files; program input for `?` is read from stdin.')
  arg_parser.add_argument('-tokens', action='store_true', help='print the token stream instead of running.')
  arg_parser.add_argument('-ast', action='store_true', help='print the syntax tree instead of running.')
  arg_parser.add_argument('-dbg', action='store_true', help='trace consumed tokens to stderr.')
  args = arg_parser.parse_args()

  for path in args.paths:
    with open(path) as f:
      text = f.read()
    source = Source(name=path, text=text)
    try:
      if args.tokens:
        for token in tokenizer.tokenize(text):
          outL(token)
        continue
      program = parse_program(text, dbg=args.dbg)
    except ParseError as e: e.fail(source)

    if args.ast:
      outL(program)
      continue
    try: program.run(read=read_int, write=outL)
    except Pl0RuntimeError as e: exit(f'{path}: runtime error: {e}')


def read_int() -> int:
  while True:
    line = stdin.readline()
    if not line: raise Pl0RuntimeError('read past end of input')
    try: return int(line.strip())
    except ValueError: errL(f'not an integer: {line.strip()!r}')


if __name__ == '__main__': main()
