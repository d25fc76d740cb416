# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Rectangles and the linear transform from data coordinates to output (pixel) coordinates.
'''

from dataclasses import dataclass, replace
from typing import Self

from .axis import AxisRange
from .exceptions import LayoutError


@dataclass(frozen=True)
class Box:
  'A rectangle in output coordinates; y increases downwards.'
  left:float
  top:float
  right:float
  bottom:float

  @property
  def width(self) -> float: return self.right - self.left

  @property
  def height(self) -> float: return self.bottom - self.top

  @property
  def center_x(self) -> float: return (self.left + self.right) / 2

  def inset(self, d:float) -> Self:
    return replace(self, left=self.left + d, top=self.top + d, right=self.right - d, bottom=self.bottom - d)

  def contains_x(self, x:float) -> bool: return self.left <= x <= self.right

  def contains_y(self, y:float) -> bool: return self.top <= y <= self.bottom

  def contains(self, x:float, y:float) -> bool: return self.contains_x(x) and self.contains_y(y)

  def clamp_x(self, x:float) -> float: return min(max(x, self.left), self.right)

  def clamp_y(self, y:float) -> float: return min(max(y, self.top), self.bottom)

  def check_positive(self, what:str='plot window') -> Self:
    'Raise `LayoutError` unless the box has positive width and height.'
    if not (self.width > 0 and self.height > 0):
      raise LayoutError(f'{what} has non-positive size: {self.width:.4g} x {self.height:.4g}; '
        'reduce the margins, fonts or legend, or enlarge the image')
    return self


@dataclass(frozen=True)
class Transform:
  'Per axis `pixel = data * scale + shift`. The y scale is negative, because output y increases downwards.'
  x_scale:float = 1
  x_shift:float = 0
  y_scale:float = -1
  y_shift:float = 0

  @classmethod
  def for_box(cls, box:Box, x_range:AxisRange, y_range:AxisRange|None=None) -> 'Transform':
    '''
    Map `x_range` onto the box width and `y_range` (inverted) onto its height.
    Without a `y_range` the y transform is the identity, as for 1D plots.
    '''
    x_scale = box.width / x_range.span
    x_shift = box.left - x_range.min * x_scale
    if y_range is None: return cls(x_scale, x_shift, 1, 0)
    y_scale = -box.height / y_range.span
    y_shift = box.bottom - y_range.min * y_scale
    return cls(x_scale, x_shift, y_scale, y_shift)

  def x(self, v:float) -> float: return v * self.x_scale + self.x_shift

  def y(self, v:float) -> float: return v * self.y_scale + self.y_shift

  def xy(self, x:float, y:float) -> tuple[float,float]: return self.x(x), self.y(y)
