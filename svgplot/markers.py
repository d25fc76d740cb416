# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Data point markers.

A marker is drawn into a group whose stroke and fill are the marker colors,
so the individual shapes carry only geometry.
'''

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from .color import black, blank, Color
from .exceptions import ConfigError
from .style import SvgStyle, TextStyle
from .svg import G, SvgBranch


class PointShape(Enum):
  none = 'none'
  circlet = 'circlet'
  square = 'square'
  point = 'point' # Small solid dot of fixed size.
  egg = 'egg' # Tall ellipse.
  unc_ellipse = 'unc_ellipse' # Ellipses at one, two and three standard deviations, and a center dot.
  vertical_line = 'vertical_line'
  horizontal_line = 'horizontal_line'
  vertical_tick = 'vertical_tick'
  horizontal_tick = 'horizontal_tick'
  cone = 'cone' # Downward pointing triangle, with its tip on the point.
  cone_point_up = 'cone_point_up'
  cone_point_down = 'cone_point_down'
  cone_point_left = 'cone_point_left'
  cone_point_right = 'cone_point_right'
  triangle = 'triangle'
  star = 'star'
  lozenge = 'lozenge'
  diamond = 'diamond'
  heart = 'heart'
  club = 'club'
  spade = 'spade'
  asterisk = 'asterisk'
  cross = 'cross'
  outside_window = 'outside_window' # Diagonal cross, for points that lie outside the plot window.


class CustomGlyph(str):
  '''
  A marker drawn as text, usually a single numeric character reference such as `&#x3A9;` (omega).
  The text is centered on the point in the marker's symbol font.
  '''
  __slots__ = ()


Marker = PointShape|CustomGlyph


# Glyph markers: character reference and vertical offset as a fraction of the marker size.
glyphs:dict[PointShape,tuple[str,float]] = {
  PointShape.triangle: ('&#x25B2;', 0),
  PointShape.star: ('&#x2605;', 0),
  PointShape.lozenge: ('&#x25CA;', -1/3),
  PointShape.diamond: ('&#x2666;', 0),
  PointShape.heart: ('&#x2665;', 0),
  PointShape.club: ('&#x2663;', 0),
  PointShape.spade: ('&#x2660;', 0),
  PointShape.asterisk: ('&#x2217;', -1/3),
}


@dataclass(frozen=True)
class PointStyle:
  'Marker shape, size and colors. `size` is the diameter of a circlet, the side of a square, or the font size of a glyph.'
  shape:Marker = PointShape.circlet
  size:float = 5
  stroke:Color = black
  fill:Color = blank
  font_family:str = 'Lucida Sans Unicode'

  def __post_init__(self) -> None:
    if self.size < 0: raise ConfigError(f'marker size must not be negative: {self.size!r}')
    if isinstance(self.shape, str) and not isinstance(self.shape, CustomGlyph):
      raise ConfigError(f'marker shape must be a PointShape or CustomGlyph: {self.shape!r}')

  @property
  def is_drawn(self) -> bool: return self.shape is not PointShape.none

  def svg_style(self) -> SvgStyle: return SvgStyle(stroke=self.stroke, fill=self.fill)

  def symbol_style(self) -> TextStyle: return TextStyle(font_size=self.size or 1, font_family=self.font_family)


def unc_radius(transform:Callable[[float],float], value:float, sd:float) -> float:
  'The one standard deviation radius, in output units, of a value; at least 1 so that it is visible.'
  if sd <= 0: return 1.0
  r = abs(transform(value + sd) - transform(value))
  return r if r > 0 else 1.0


def draw_point(g:SvgBranch, x:float, y:float, style:PointStyle, *, unc_groups:tuple[G,G,G]|None=None,
 x_radius:float=1, y_radius:float=1) -> None:
  '''
  Draw one marker centered at (x, y) in output coordinates.
  For `unc_ellipse`, `unc_groups` holds the three-, two- and one-standard-deviation layers,
  and the radii are one standard deviation; the one standard deviation ellipse is emitted last.
  '''
  shape = style.shape
  size = style.size
  half = size / 2

  if isinstance(shape, CustomGlyph):
    g.add_text(x, y + half, shape, anchor='middle', **style.symbol_style().attrs())
    return

  match shape:
    case PointShape.none: pass
    case PointShape.circlet: g.circle(x, y, half)
    case PointShape.point: g.circle(x, y, 1)
    case PointShape.square: g.rect(x - half, y - half, size, size)
    case PointShape.egg: g.ellipse(x, y, half, size * 2)
    case PointShape.unc_ellipse:
      if unc_groups is None: raise ValueError('unc_ellipse markers require the uncertainty layer groups')
      for group, k in zip(unc_groups, (3, 2, 1)):
        group.ellipse(x, y, x_radius * k, y_radius * k)
      g.circle(x, y, 1)
    case PointShape.vertical_tick: g.line(x, y, x, y - size)
    case PointShape.vertical_line: g.line(x, y + size, x, y - size)
    case PointShape.horizontal_tick: g.line(x, y, x + size, y)
    case PointShape.horizontal_line: g.line(x - size, y, x + size, y)
    case PointShape.cone | PointShape.cone_point_down:
      g.polygon([(x - half, y - size), (x + half, y - size), (x, y)])
    case PointShape.cone_point_up:
      g.polygon([(x - half, y + size), (x + half, y + size), (x, y)])
    case PointShape.cone_point_right:
      g.polygon([(x - size, y - half), (x - size, y + half), (x, y)])
    case PointShape.cone_point_left:
      g.polygon([(x + size, y - half), (x + size, y + half), (x, y)])
    case PointShape.cross:
      g.line(x, y + size, x, y - size)
      g.line(x - size, y, x + size, y)
    case PointShape.outside_window:
      g.line(x - half, y - half, x + half, y + half)
      g.line(x - half, y + half, x + half, y - half)
    case _:
      glyph, dy = glyphs[shape]
      g.add_text(x, y + dy * size, glyph, anchor='middle', **style.symbol_style().attrs())


def draw_legend_marker(g:SvgBranch, x:float, y:float, style:PointStyle) -> None:
  'Draw the legend sample of a marker; uncertainty ellipses are shown as circlets.'
  if style.shape is PointShape.unc_ellipse:
    g.circle(x, y, style.size / 2)
  else:
    draw_point(g, x, y, style)
