# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Immutable style value types.
Each style renders to a dictionary of SVG presentation attributes.
An attribute is emitted only when it is switched on (or not None), so default values are not repeated in the output.
Use `dataclasses.replace` to derive a modified style.
'''

from dataclasses import dataclass
from typing import Any

from .color import black, Color, white, yellow
from .exceptions import ConfigError


@dataclass(frozen=True)
class SvgStyle:
  'Stroke color, fill color and stroke width of a group or element. None means "not set".'
  stroke:Color|None = None
  fill:Color|None = None
  width:float|None = None

  def __post_init__(self) -> None:
    if self.width is not None and self.width < 0: raise ConfigError(f'negative stroke width: {self.width!r}')

  def attrs(self) -> dict[str,Any]:
    attrs:dict[str,Any] = {}
    if self.stroke is not None: attrs['stroke'] = str(self.stroke)
    if self.fill is not None: attrs['fill'] = str(self.fill)
    if self.width is not None: attrs['stroke-width'] = self.width
    return attrs


@dataclass(frozen=True)
class TextStyle:
  'Font descriptor. Empty strings mean "not set" and are not emitted.'
  font_size:float = 12
  font_family:str = 'Verdana'
  font_style:str = '' # 'normal', 'italic' or 'oblique'.
  font_weight:str = '' # 'normal', 'bold', 'lighter', 'bolder' or a numeric weight.
  font_stretch:str = ''
  font_decoration:str = '' # 'underline', 'overline', 'line-through'.

  def __post_init__(self) -> None:
    if self.font_size <= 0: raise ConfigError(f'font size must be positive: {self.font_size!r}')

  def attrs(self) -> dict[str,Any]:
    attrs:dict[str,Any] = {'font-size': self.font_size}
    if self.font_family: attrs['font-family'] = self.font_family
    if self.font_style: attrs['font-style'] = self.font_style
    if self.font_weight: attrs['font-weight'] = self.font_weight
    if self.font_stretch: attrs['font-stretch'] = self.font_stretch
    if self.font_decoration: attrs['text-decoration'] = self.font_decoration
    return attrs


@dataclass(frozen=True)
class BoxStyle:
  '''
  Border and background of a rectangular region: the whole image, the plot window, or the legend box.
  `margin` is the space kept clear inside the border.
  '''
  stroke:Color = yellow
  fill:Color = white
  width:float = 1
  margin:float = 0
  border_on:bool = True
  fill_on:bool = True

  def svg_style(self) -> SvgStyle:
    return SvgStyle(
      stroke=self.stroke if self.border_on else None,
      fill=self.fill if self.fill_on else None,
      width=self.width if self.border_on else None)

  @property
  def border_width(self) -> float:
    'Width of the border if it is drawn, otherwise zero.'
    return self.width if self.border_on else 0


@dataclass(frozen=True)
class LineStyle:
  'Style of the line joining the points of a data series.'
  color:Color = black
  width:float = 2
  line_on:bool = True
  bezier_on:bool = False # Smooth cubic curve instead of straight segments.
  area_fill:Color|None = None # Fill between the line and y=0.

  @property
  def drawn(self) -> bool: return self.line_on or self.bezier_on


@dataclass(frozen=True)
class AxisLineStyle:
  'Style of an axis line and its label.'
  color:Color = black
  width:float = 1
  axis_line_on:bool = True
  label:str = ''
  units:str = ''
  label_units_on:bool = False

  @property
  def label_on(self) -> bool:
    'The label is shown when it has text; setting an empty label is how it is turned off.'
    return bool(self.label)

  def label_text(self) -> str:
    if self.label_units_on and self.units: return f'{self.label} {self.units}'
    return self.label
