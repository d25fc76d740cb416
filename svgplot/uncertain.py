# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Uncertain values, and the classification of values into plottable ("normal") and limit values.
'''

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from math import isfinite, isnan
from typing import Iterable

from .exceptions import DataError


class Distribution(Enum):
  'The distribution of an uncertain value; determines its confidence interval.'
  gaussian = 'gaussian'
  uniform = 'uniform'
  triangular = 'triangular'


@dataclass(frozen=True)
class Unc:
  '''
  A measured value with optional metadata.
  `sd` is the standard deviation (0 means unknown); `df` is the degrees of freedom (-1 means unknown);
  `order` is a sequence number (-1 means unset).
  '''
  value:float
  sd:float = 0.0
  df:int = -1
  id:str = ''
  timestamp:datetime|None = None
  order:int = -1
  distribution:Distribution = Distribution.gaussian

  def __post_init__(self) -> None:
    if self.sd < 0 or isnan(self.sd): raise DataError(f'standard deviation must be non-negative: {self.sd!r}')

  def __float__(self) -> float: return float(self.value)

  @property
  def has_sd(self) -> bool: return self.sd > 0

  @property
  def has_df(self) -> bool: return self.df >= 0


UncLike = Unc|float|int


def to_unc(v:UncLike) -> Unc:
  'Promote a plain number to an `Unc` with no uncertainty.'
  if isinstance(v, Unc): return v
  return Unc(float(v))


class Category(Enum):
  'Classification of a value at ingestion.'
  normal = 'normal'
  nan = 'nan'
  pos_inf = '+inf'
  neg_inf = '-inf'


def classify(v:UncLike) -> Category:
  x = float(v)
  if isfinite(x): return Category.normal
  if isnan(x): return Category.nan
  return Category.pos_inf if x > 0 else Category.neg_inf


def is_limit(v:UncLike) -> bool:
  'True for NaN and infinite values, which are drawn with limit markers instead of normal markers.'
  return not isfinite(float(v))


def partition(values:Iterable[UncLike]) -> tuple[list[Unc],list[Unc]]:
  'Split values into normal and limit lists, preserving order. Every value lands in exactly one list.'
  normal:list[Unc] = []
  limit:list[Unc] = []
  for v in values:
    u = to_unc(v)
    (limit if is_limit(u) else normal).append(u)
  return normal, limit


def partition_points(points:Iterable[tuple[UncLike,UncLike]]) -> tuple[list[tuple[Unc,Unc]],list[tuple[Unc,Unc]]]:
  'Split (x, y) points into normal and limit lists. A point is a limit point if either coordinate is not finite.'
  normal:list[tuple[Unc,Unc]] = []
  limit:list[tuple[Unc,Unc]] = []
  for x, y in points:
    p = (to_unc(x), to_unc(y))
    (limit if is_limit(p[0]) or is_limit(p[1]) else normal).append(p)
  return normal, limit
