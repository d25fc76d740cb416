# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Automatic axis scaling: choose a "nice" axis range and major tick interval for a range of values.

The tick interval is a decimal power, halved until there are at least `min_ticks` major ticks.
Both axis limits are major tick values.
'''

import logging
from enum import Enum
from math import ceil, floor, isfinite, log10
from sys import float_info
from typing import Iterable, NamedTuple

from .exceptions import ConfigError, DegenerateRangeError
from .uncertain import Unc, UncLike, to_unc


logger = logging.getLogger(__name__)

smallest_range = 1000 * float_info.min
near_zero = 100 * float_info.min
relative_range_eps = 100 * float_info.epsilon
near_zero_tick = 1e-14 # Computed minimum ticks smaller than this are snapped to zero.


class Steps(Enum):
  'Optional pre-rounding of the data limits to a family of steps.'
  none = 0
  base2 = 2 # 2, 4, 6, 8, 10.
  base5 = 5 # 1, 5, 10.
  base10 = 10 # 1, 2, 5, 10.


class AutoScale(NamedTuple):
  'Axis limits (both major tick values), the major tick interval, and the number of major ticks.'
  axis_min:float
  axis_max:float
  tick_interval:float
  tick_count:int


def range_epsilon(min_val:float, max_val:float) -> float:
  'The narrowest usable axis range for the given limits: a hundred epsilons of the larger magnitude, or an absolute floor.'
  return max(smallest_range, relative_range_eps * max(abs(min_val), abs(max_val)))


def scale_axis(min_val:float, max_val:float, *, include_zero:bool=False, tight:float=0.0, min_ticks:int=6,
 steps:Steps=Steps.none) -> AutoScale:
  '''
  Choose axis limits and a tick interval for the range [min_val, max_val].
  `tight` is the fraction of a tick interval that the data may overrun the outermost ticks by,
  before another tick is added; it must be in [0, 1].
  Raises `DegenerateRangeError` for a range too narrow to scale, and `ConfigError` for other bad arguments.
  '''
  if not 0 <= tight <= 1: raise ConfigError(f'tight must be in the range 0 to 1: {tight!r}')
  if min_ticks < 2: raise ConfigError(f'min_ticks must be at least 2: {min_ticks!r}')
  if not isfinite(min_val) or not isfinite(max_val):
    raise DegenerateRangeError('axis limits must be finite', min=min_val, max=max_val)

  if steps == Steps.base10:
    max_val = roundup10(max_val)
    min_val = rounddown10(min_val)
  elif steps == Steps.base5:
    max_val = roundup5(max_val)
    min_val = rounddown5(min_val)
  elif steps == Steps.base2:
    max_val = roundup2(max_val)
    min_val = rounddown2(min_val)

  if include_zero:
    if min_val > 0: min_val = 0.0
    elif max_val < 0: max_val = 0.0

  if min_val > max_val: raise DegenerateRangeError('axis min is greater than max', min=min_val, max=max_val)
  span = max_val - min_val
  if span < range_epsilon(min_val, max_val):
    raise DegenerateRangeError('axis range is too narrow to scale', min=min_val, max=max_val)

  interval = 10.0 ** ceil(log10(span / 10))
  top = int(max_val / interval) * interval
  if top < max_val: top += interval
  ticks = 1
  bottom = top
  while True:
    ticks += 1
    bottom -= interval
    if bottom <= min_val: break
  if abs(bottom) < near_zero_tick: bottom = 0.0

  while ticks < min_ticks:
    interval /= 2
    ticks = int(round((top - bottom) / interval)) + 1
    if steps == Steps.none: # Drop ticks lying entirely beyond the data.
      while bottom + interval <= min_val:
        bottom += interval
        ticks -= 1
      while top - interval >= max_val:
        top -= interval
        ticks -= 1

  if tight > 0:
    for _ in range(2):
      if ticks > min_ticks and max_val < top - interval + interval * tight:
        top -= interval
        ticks -= 1
      if ticks > min_ticks and min_val > bottom + interval - interval * tight:
        bottom += interval
        ticks -= 1

  scale = AutoScale(bottom, top, interval, ticks)
  logger.debug('scale_axis(%r, %r): %r', min_val, max_val, scale)
  return scale


def mnmx(values:Iterable[float]) -> tuple[float,float]:
  '''
  Return the minimum and maximum of the finite values, ignoring NaN and infinities.
  Raises `DegenerateRangeError` if there are fewer than two finite values.
  '''
  lo = float('nan')
  hi = float('nan')
  goods = 0
  for v in values:
    if not isfinite(v): continue
    if goods == 0: lo = hi = v
    elif v < lo: lo = v
    elif v > hi: hi = v
    goods += 1
  if goods < 2: raise DegenerateRangeError(f'found {goods} finite value(s); at least two are required', min=lo, max=hi)
  return lo, hi


def unc_limits(values:Iterable[UncLike], *, check_limits:bool=True, plusminus:float=3.0) -> tuple[float,float]:
  '''
  Return the extent of `values`, each widened to `value ± plusminus * sd`.
  With `check_limits`, NaN and infinite values are skipped; otherwise they propagate into the result.
  '''
  widened:list[float] = []
  for v in values:
    u = to_unc(v)
    if check_limits and not isfinite(u.value): continue
    widened.append(u.value - plusminus * u.sd)
    widened.append(u.value + plusminus * u.sd)
  if check_limits: return mnmx(widened)
  if len(widened) < 4: raise DegenerateRangeError('at least two values are required', min=float('nan'), max=float('nan'))
  return min(widened), max(widened)


def scale_values(values:Iterable[UncLike], *, check_limits:bool=True, plusminus:float=3.0, include_zero:bool=False,
 tight:float=0.0, min_ticks:int=6, steps:Steps=Steps.none) -> AutoScale:
  'Scale an axis to fit a series of plain or uncertain values.'
  lo, hi = unc_limits(values, check_limits=check_limits, plusminus=plusminus)
  return scale_axis(lo, hi, include_zero=include_zero, tight=tight, min_ticks=min_ticks, steps=steps)


def scale_points(points:Iterable[tuple[UncLike,UncLike]], *, check_limits:bool=True, plusminus:float=3.0,
 x_include_zero:bool=False, x_tight:float=0.0, x_min_ticks:int=6, x_steps:Steps=Steps.none,
 y_include_zero:bool=False, y_tight:float=0.0, y_min_ticks:int=6, y_steps:Steps=Steps.none) -> tuple[AutoScale,AutoScale]:
  '''
  Scale both axes to fit a series of (x, y) points.
  With `check_limits`, a point is skipped if either coordinate is not finite.
  '''
  xs:list[Unc] = []
  ys:list[Unc] = []
  for x, y in points:
    ux = to_unc(x)
    uy = to_unc(y)
    if check_limits and not (isfinite(ux.value) and isfinite(uy.value)): continue
    xs.append(ux)
    ys.append(uy)
  x_scale = scale_values(xs, check_limits=check_limits, plusminus=plusminus, include_zero=x_include_zero, tight=x_tight,
    min_ticks=x_min_ticks, steps=x_steps)
  y_scale = scale_values(ys, check_limits=check_limits, plusminus=plusminus, include_zero=y_include_zero, tight=y_tight,
    min_ticks=y_min_ticks, steps=y_steps)
  return x_scale, y_scale


# Rounding to step families.
# Each pair rounds away from (`roundup*`) or towards (`rounddown*`) positive infinity; values near zero become zero.

def _decompose(value:float) -> tuple[float,float]:
  'Return the mantissa in [1, 10) and the power of ten of the magnitude of `value`.'
  magnitude = abs(value)
  order = floor(log10(magnitude))
  p = 10.0 ** order
  return magnitude / p, p


def _round_magnitude(value:float, up:bool, family:Steps) -> float:
  if abs(value) < near_zero: return 0.0
  m, p = _decompose(value)
  if value < 0: up = not up # Rounding a negative value up shrinks its magnitude.
  step = (_step_up if up else _step_down)[family](m)
  return step * p if value > 0 else -step * p


def _up10(m:float) -> float:
  if m > 5: return 10
  if m > 2: return 5
  if m > 1: return 2
  return 1

def _down10(m:float) -> float:
  if m < 2: return 1
  if m < 5: return 2
  return 5

def _up5(m:float) -> float:
  if m > 5: return 10
  if m > 1: return 5
  return 1

def _down5(m:float) -> float:
  if m < 5: return 1
  return 5

def _up2(m:float) -> float:
  if m > 8: return 10
  if m > 6: return 8
  if m > 4: return 6
  if m > 2: return 4
  return 2

def _down2(m:float) -> float:
  if m < 2: return 1
  if m < 4: return 2
  if m < 6: return 4
  if m < 8: return 6
  return 8


_step_up = {Steps.base10: _up10, Steps.base5: _up5, Steps.base2: _up2}
_step_down = {Steps.base10: _down10, Steps.base5: _down5, Steps.base2: _down2}


def roundup10(value:float) -> float: return _round_magnitude(value, True, Steps.base10)

def rounddown10(value:float) -> float: return _round_magnitude(value, False, Steps.base10)

def roundup5(value:float) -> float: return _round_magnitude(value, True, Steps.base5)

def rounddown5(value:float) -> float: return _round_magnitude(value, False, Steps.base5)

def roundup2(value:float) -> float: return _round_magnitude(value, True, Steps.base2)

def rounddown2(value:float) -> float: return _round_magnitude(value, False, Steps.base2)
