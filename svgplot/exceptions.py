# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Exception and warning classes for svgplot.
'''

from typing import Any


class SvgPlotError(Exception):
  'Base class for svgplot errors.'


class ConfigError(SvgPlotError, ValueError):
  '''
  Raised when a plot is configured with an invalid value.
  Configuration errors abort the current render; no default is substituted for the rejected value.
  '''


class RangeError(ConfigError):
  'Raised when an axis range has `max <= min`, or is too narrow to be represented.'

  def __init__(self, msg:str, *, min:float, max:float) -> None:
    self.min = min
    self.max = max
    super().__init__(f'{msg}: min={min!r}; max={max!r}')


class DegenerateRangeError(RangeError):
  'Raised when autoscaling finds no usable values, or the values span a degenerate range.'


class LayoutError(ConfigError):
  'Raised when the reserved margins leave a plot window with non-positive width or height.'


class DataError(SvgPlotError, ValueError):
  'Raised when a data series cannot be plotted, e.g. a boxplot series with too few values.'


class ConflictingValues(KeyError):
  '''
  Raised when an incoming value collides with an existing value.
  Since it arises from a key lookup, it subclasses KeyError.
  '''
  def __init__(self, *, key:Any, existing:Any, incoming:Any) -> None:
    self.key = key
    self.existing = existing
    self.incoming = incoming
    super().__init__(key) # Initialized like a KeyError.


class MultipleMatchesError(KeyError):
  'Raised when a query matches multiple children.'


class NoMatchError(KeyError):
  'Raised when a query matches no children.'


class SvgPlotWarning(UserWarning):
  '''
  Category for soft diagnostics: the plot is still produced, possibly imperfect.
  Examples: a legend box that falls outside the image, or text too long for its allotted width.
  '''
