# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Lets pytest collect each utest script (`*.ut.py`) as a single test item, run in a subprocess.
A script fails if it exits with a nonzero status; its stderr holds the utest failure report.
'''

from subprocess import run
from sys import executable

import pytest

from utest.__main__ import utest_env


def pytest_collect_file(parent:pytest.Collector, file_path):
  if file_path.name.endswith('.ut.py'):
    return UTestFile.from_parent(parent, path=file_path)
  return None


class UTestFile(pytest.File):

  def collect(self):
    yield UTestItem.from_parent(self, name=self.path.name)


class UTestItem(pytest.Item):

  def runtest(self) -> None:
    c = run([executable, str(self.path)], env=utest_env(), capture_output=True, text=True)
    if c.returncode != 0: raise UTestFailure(c.stdout + c.stderr)

  def repr_failure(self, excinfo, style=None):
    if isinstance(excinfo.value, UTestFailure): return str(excinfo.value)
    return super().repr_failure(excinfo, style=style)

  def reportinfo(self):
    return self.path, 0, f'utest: {self.name}'


class UTestFailure(Exception):
  'A utest script exited with a nonzero status.'
