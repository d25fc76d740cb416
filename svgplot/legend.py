# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Legend box sizing, placement and drawing.

Each legend row shows the series marker, optionally a short sample of the series line, and the series title.
Rows are two `spacing` units apart, where the spacing is the larger of the legend font size and the largest marker size.
'''

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Sequence
from warnings import warn

from .color import white, yellow
from .exceptions import ConfigError, SvgPlotWarning
from .geometry import Box
from .markers import draw_legend_marker, PointShape, PointStyle
from .style import BoxStyle, LineStyle, SvgStyle, TextStyle
from .svg.document import Layer, SvgDocument
from .text import estimate_width


logger = logging.getLogger(__name__)


class LegendPlace(Enum):
  inside = 'inside' # At `position` if given, otherwise at the left image edge, pushing the plot window right.
  outside_left = 'outside_left'
  outside_right = 'outside_right'
  outside_top = 'outside_top'
  outside_bottom = 'outside_bottom'
  somewhere = 'somewhere' # At `position`, overlaying the plot.
  nowhere = 'nowhere'


@dataclass(frozen=True)
class LegendStyle:
  '''
  Legend configuration. `position` is the top left corner, for the `somewhere` and `inside` placements.
  `lines_on` adds a line sample to the rows of series that draw lines.
  '''
  on:bool = False
  place:LegendPlace = LegendPlace.outside_right
  header:str = ''
  text_style:TextStyle = TextStyle(font_size=14)
  box:BoxStyle = BoxStyle(stroke=yellow, fill=white, width=1, margin=2)
  lines_on:bool = True
  position:tuple[float,float]|None = None


@dataclass(frozen=True)
class LegendEntry:
  'The legend row of one series.'
  title:str
  point:PointStyle
  line:LineStyle|None = None

  @property
  def draws_line(self) -> bool: return self.line is not None and self.line.drawn


@dataclass(frozen=True)
class LegendSize:
  width:float
  height:float
  spacing:float
  marker_on:bool
  lines_on:bool


def legend_spacing(entries:Sequence[LegendEntry], text_style:TextStyle) -> float:
  return max([text_style.font_size] + [e.point.size for e in entries])


def size_legend(entries:Sequence[LegendEntry], header:str, text_style:TextStyle, box:BoxStyle, lines_on:bool=True) -> LegendSize:
  '''
  Compute the legend box size.
  Width: box margins and border, plus the wider of the header and the widest row
  (marker swatch, line swatch, and the longest series title, padded by one spacing each side).
  Height: one spacing, two font sizes for the header, and two spacings per series.
  '''
  spacing = legend_spacing(entries, text_style)
  marker_on = any(e.point.is_drawn for e in entries)
  lines_on = lines_on and any(e.draws_line for e in entries)
  longest_title = max((estimate_width(e.title, text_style) for e in entries), default=0.0)
  row = spacing + longest_title + spacing
  if marker_on: row += 1.5 * spacing
  if lines_on: row += 1.5 * spacing
  header_width = estimate_width(header, text_style) + 2 * spacing if header else 0.0
  frame = 2 * (box.margin + box.border_width)
  width = frame + max(row, header_width)
  height = spacing + (2 * text_style.font_size if header else 0) + 2 * spacing * len(entries)
  size = LegendSize(width=width, height=height, spacing=spacing, marker_on=marker_on, lines_on=lines_on)
  logger.debug('legend size: %s', size)
  return size


def place_legend(place:LegendPlace, plot:Box, size:LegendSize, *, image_width:float, image_height:float,
 spacing:float, border_inset:float, title_bottom:float, position:tuple[float,float]|None=None) -> tuple[Box|None,Box]:
  '''
  Place the legend box and return it with the plot window adjusted to make room.
  `spacing` is the gap between the legend and the plot window; `border_inset` is the image border width plus margin;
  `title_bottom` is the lowest extent of the title, below which an `outside_top` legend goes.
  An explicit `position` outside the image is a `ConfigError`;
  a computed legend box that extends outside the image only produces a `SvgPlotWarning`.
  '''
  w = size.width
  h = size.height
  if place is LegendPlace.nowhere: return None, plot

  if position is not None and place in (LegendPlace.somewhere, LegendPlace.inside):
    x, y = position
    if not (0 <= x <= image_width and 0 <= y <= image_height):
      raise ConfigError(f'legend position {position!r} is outside the image ({image_width} x {image_height})')
    legend = Box(x, y, x + w, y + h)

  else:
    match place:
      case LegendPlace.somewhere:
        raise ConfigError('legend placement `somewhere` requires a position')
      case LegendPlace.inside:
        left = border_inset
        legend = Box(left, plot.top, left + w, plot.top + h)
        plot = replace(plot, left=plot.left + w + spacing)
      case LegendPlace.outside_right:
        plot = replace(plot, right=plot.right - (w + spacing))
        left = plot.right + spacing
        legend = Box(left, plot.top, left + w, plot.top + h)
      case LegendPlace.outside_left:
        plot = replace(plot, left=plot.left + w + spacing / 2)
        left = border_inset
        legend = Box(left, plot.top, left + w, plot.top + h)
      case LegendPlace.outside_top:
        left = image_width / 2 - w / 2
        top = title_bottom + spacing
        legend = Box(left, top, left + w, top + h)
        plot = replace(plot, top=plot.top + h + spacing)
      case LegendPlace.outside_bottom:
        bottom = image_height - border_inset
        left = image_width / 2 - w / 2
        legend = Box(left, bottom - h, left + w, bottom)
        plot = replace(plot, bottom=legend.top - 2 * spacing)
      case _: raise ValueError(place)

  for name, v, limit in (('left', legend.left, image_width), ('right', legend.right, image_width),
   ('top', legend.top, image_height), ('bottom', legend.bottom, image_height)):
    if not 0 <= v <= limit:
      warn(f'legend {name} edge {v:.4g} is outside the image (0 to {limit})', SvgPlotWarning, stacklevel=2)
  logger.debug('legend placed %s: %s; plot window: %s', place.name, legend, plot)
  return legend, plot


def draw_legend(doc:SvgDocument, legend:Box, size:LegendSize, entries:Sequence[LegendEntry], style:LegendStyle,
 text_margin:float) -> None:
  '''
  Draw the legend: the background box, the header, and one row per series.
  Each row's marker and line sample form one group in the legend points layer; titles go in the legend text layer.
  '''
  spacing = size.spacing
  inset = style.box.margin + style.box.border_width
  doc.set_layer_style(Layer.legend_background, style.box.svg_style())
  doc.layer(Layer.legend_background).rect(legend.left, legend.top, legend.width, legend.height)
  texts = doc.set_layer_style(Layer.legend_text, text_style=style.text_style)
  points = doc.layer(Layer.legend_points)

  y = legend.top + text_margin * spacing
  if style.header:
    texts.add_text(legend.center_x, y, style.header, anchor='middle')
    y += 2 * spacing

  for e in entries:
    x = legend.left + inset + spacing
    line_drawn = size.lines_on and e.draws_line
    stroke = e.line.color if line_drawn and e.line is not None else e.point.stroke
    g = points.g(**SvgStyle(stroke=stroke, fill=e.point.fill, width=e.line.width if e.line else None).attrs())
    if size.marker_on:
      if e.point.shape is not PointShape.none: draw_legend_marker(g, x, y, e.point)
      x += 1.5 * spacing
    if size.lines_on:
      if line_drawn: g.line(x, y, x + spacing, y)
      x += 1.5 * spacing
    texts.add_text(x, y, e.title, anchor='start')
    y += 2 * spacing
