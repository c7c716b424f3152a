# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import ArgumentParser
from os import environ, getcwd
from pathlib import Path
from subprocess import run
from sys import executable


def main() -> None:
  arg_parser = ArgumentParser(description='Find and run utest unit tests with the extension ".ut.py", defaulting to "test/".')
  arg_parser.add_argument('paths', nargs='*', default=['test'])
  args = arg_parser.parse_args()

  env = dict(environ)
  work_dir = getcwd()
  env['PYTHONPATH'] = ':'.join(p for p in (work_dir, env.get('PYTHONPATH')) if p)

  failed:list[str] = []
  count = 0
  for path in sorted(walk_ut_files(args.paths)):
    print(path)
    count += 1
    c = run([executable, str(path)], env=env).returncode
    if c != 0:
      failed.append(str(path))
      print()

  print(f'utest files: {count}; failed: {len(failed)}')
  for path in failed: print(f'  {path}')
  exit(1 if failed else 0)


def walk_ut_files(paths:list[str]) -> list[Path]:
  files:list[Path] = []
  for p in map(Path, paths):
    if p.is_dir(): files.extend(p.rglob('*.ut.py'))
    elif p.name.endswith('.ut.py'): files.append(p)
    else: exit(f'not a utest file or directory: {p}')
  return files


if __name__ == '__main__': main()
