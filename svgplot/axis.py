# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Axis ranges, tick styles and tick placement.
'''

from dataclasses import dataclass
from enum import Enum
from math import ceil, floor
from typing import Iterator

from .autoscale import range_epsilon
from .color import black, Color, rgb
from .exceptions import ConfigError, RangeError
from .style import TextStyle
from .text import estimate_width, fmt_value, NumFormat, Rotation


grid_blue = rgb(200, 220, 255)
tick_tolerance = 1e-9 # Fraction of an interval by which a tick may lie beyond the axis range and still be drawn.


@dataclass(frozen=True)
class AxisRange:
  'The data limits of an axis. Construction fails unless `max` exceeds `min` by a representable margin.'
  min:float
  max:float

  def __post_init__(self) -> None:
    if not self.max > self.min: raise RangeError('axis max must be greater than min', min=self.min, max=self.max)
    if self.max - self.min < range_epsilon(self.min, self.max):
      raise RangeError('axis range is too small to display', min=self.min, max=self.max)

  @property
  def span(self) -> float: return self.max - self.min

  def __contains__(self, v:float) -> bool: return self.min <= v <= self.max


class Side(Enum):
  'Which side of an axis its tick value labels are written on.'
  bottom_left = -1 # Below a horizontal axis, left of a vertical one.
  none = 0
  top_right = 1


class TicksPosition(Enum):
  'Where ticks and their value labels are drawn.'
  bottom_left = -1 # On the bottom (X) or left (Y) edge of the plot window.
  on_axis = 0
  top_right = 1 # On the top (X) or right (Y) edge of the plot window.


class AxisPosition(Enum):
  'Where an axis line is drawn, depending on whether the orthogonal range includes zero.'
  crosses = 0 # At zero of the orthogonal axis.
  bottom_left = -1 # On the bottom or left window edge, because the orthogonal range is all positive.
  top_right = 1 # On the top or right window edge, because the orthogonal range is all negative.


def axis_position(orthogonal:AxisRange) -> AxisPosition:
  if orthogonal.min > 0: return AxisPosition.bottom_left
  if orthogonal.max < 0: return AxisPosition.top_right
  return AxisPosition.crosses


@dataclass(frozen=True)
class TicksStyle:
  '''
  Major and minor ticks, grid lines and tick value labels of one axis.
  `outward_ticks_on` draws ticks down from an X axis or left from a Y axis; `inward_ticks_on` up or right.
  '''
  major_interval:float = 2
  num_minor:int = 4
  major_tick_color:Color = black
  major_tick_width:float = 2
  major_tick_length:float = 5
  minor_tick_color:Color = black
  minor_tick_width:float = 1
  minor_tick_length:float = 2
  major_grid_color:Color = grid_blue
  major_grid_width:float = 1
  minor_grid_color:Color = grid_blue
  minor_grid_width:float = 0.5
  major_grid_on:bool = False
  minor_grid_on:bool = False
  outward_ticks_on:bool = True
  inward_ticks_on:bool = False
  label_side:Side = Side.bottom_left
  label_rotation:Rotation = Rotation.horizontal
  label_color:Color = black
  label_style:TextStyle = TextStyle(font_size=10)
  precision:int = 3
  num_format:NumFormat = NumFormat.general
  strip_e0s:bool = True
  position:TicksPosition = TicksPosition.bottom_left

  def __post_init__(self) -> None:
    if not self.major_interval > 0: raise ConfigError(f'major tick interval must be positive: {self.major_interval!r}')
    if self.num_minor < 0: raise ConfigError(f'minor tick count must not be negative: {self.num_minor!r}')
    if self.major_tick_length < 0 or self.minor_tick_length < 0:
      raise ConfigError(f'tick lengths must not be negative: {self.major_tick_length!r}, {self.minor_tick_length!r}')
    if self.precision < 0: raise ConfigError(f'negative precision: {self.precision!r}')

  @property
  def labels_on(self) -> bool: return self.label_side != Side.none

  @property
  def max_tick_length(self) -> float:
    'Length of the longest tick, or zero if no ticks are drawn.'
    if not (self.outward_ticks_on or self.inward_ticks_on): return 0
    return max(self.major_tick_length, self.minor_tick_length if self.num_minor else 0)

  @property
  def minor_interval(self) -> float: return self.major_interval / (self.num_minor + 1)


def major_tick_values(min_val:float, max_val:float, interval:float) -> list[float]:
  'The multiples of `interval` within [min_val, max_val], ascending. Zero is exact when it is in range.'
  k_lo = ceil(min_val / interval - tick_tolerance)
  k_hi = floor(max_val / interval + tick_tolerance)
  return [k * interval for k in range(k_lo, k_hi + 1)]


def minor_tick_values(min_val:float, max_val:float, interval:float, num_minor:int) -> list[float]:
  'The minor tick values within [min_val, max_val], ascending, excluding the major tick values.'
  if num_minor <= 0: return []
  jump = interval / (num_minor + 1)
  tol = jump * tick_tolerance
  k_lo = floor(min_val / interval) # Start from the major tick at or below the range.
  k_hi = ceil(max_val / interval)
  values:list[float] = []
  for k in range(k_lo, k_hi):
    major = k * interval
    for j in range(1, num_minor + 1):
      v = major + j * jump
      if min_val - tol <= v <= max_val + tol: values.append(v)
  return values


def iter_ticks(min_val:float, max_val:float, ticks:TicksStyle) -> Iterator[tuple[float,bool]]:
  'Yield (value, is_major) for all ticks of an axis, majors first.'
  for v in major_tick_values(min_val, max_val, ticks.major_interval): yield v, True
  for v in minor_tick_values(min_val, max_val, ticks.major_interval, ticks.num_minor): yield v, False


def fmt_tick_label(value:float, ticks:TicksStyle) -> str:
  if value == 0: value = 0.0 # Avoid "-0".
  return fmt_value(value, ticks.precision, ticks.num_format, strip=ticks.strip_e0s)


def longest_tick_label(min_val:float, max_val:float, ticks:TicksStyle, *, skip_zero:bool=False) -> float:
  '''
  The estimated width of the widest major tick value label, or zero if labels are off.
  `skip_zero` omits the zero label, which is not drawn where the orthogonal axis line crosses.
  '''
  if not ticks.labels_on: return 0
  longest = 0.0
  for v in major_tick_values(min_val, max_val, ticks.major_interval):
    if skip_zero and v == 0: continue
    longest = max(longest, estimate_width(fmt_tick_label(v, ticks), ticks.label_style))
  return longest
