#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import ArgumentParser
from os import environ, getcwd, pathsep, walk
from os.path import isfile, join as path_join
from subprocess import run
from sys import executable
from typing import Iterator


def main() -> None:
  arg_parser = ArgumentParser(description='Find and run utest unit tests with the extension ".ut.py", defaulting to "test/".')
  arg_parser.add_argument('paths', nargs='*', default=['test'])
  args = arg_parser.parse_args()

  env = utest_env()
  ok = True
  for path in walk_tests(*args.paths):
    print(path)
    c = run([executable, path], env=env).returncode
    if c != 0:
      ok = False
      print()

  exit(0 if ok else 1)


def walk_tests(*paths:str) -> Iterator[str]:
  'Yield the paths of utest scripts under `paths`, in sorted order.'
  for root_path in paths:
    if isfile(root_path):
      yield root_path
      continue
    for dir_path, dir_names, file_names in walk(root_path):
      dir_names.sort()
      for name in sorted(file_names):
        if name.endswith('.ut.py'): yield path_join(dir_path, name)


def utest_env() -> dict[str,str]:
  'The environment for test subprocesses: the working directory is prepended to the module search path.'
  env = dict(environ)
  cwd = getcwd()
  env['PYTHONPATH'] = pathsep.join(filter(None, [cwd, env.get('PYTHONPATH', '')]))
  return env


if __name__ == '__main__': main()
