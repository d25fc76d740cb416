# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
2D plots: series of (x, y) points, with optional connecting lines, area fill, bars and histograms.

Points with a non-finite coordinate are drawn as limit markers: a NaN coordinate is placed at zero,
and an infinite one at the plot window edge.
Lines and points are clipped to the plot window.
'''

import logging
from dataclasses import dataclass, replace
from enum import Enum
from math import isnan
from os import PathLike
from typing import Iterable, Mapping, TextIO
from warnings import warn

from .autoscale import AutoScale, scale_points, Steps
from .axis import AxisPosition, AxisRange, TicksStyle
from .color import antiquewhite, black, blank, Color, grey, lightgoldenrodyellow, lightslategray, peachpuff, pink, white, yellow
from .exceptions import SvgPlotWarning
from .frame import draw_backgrounds, draw_title, draw_x_axis, draw_x_label, draw_y_axis, draw_y_label, style_axis
from .geometry import Box, Transform
from .layout import compute_layout_2d, LayoutResult
from .legend import draw_legend, LegendEntry, LegendStyle
from .markers import draw_point, PointShape, PointStyle, unc_radius
from .style import AxisLineStyle, BoxStyle, LineStyle, SvgStyle, TextStyle
from .svg import G, PathData
from .svg.document import Layer, License, SvgDocument
from .text import Rotation
from .uncertain import partition_points, Unc, UncLike
from .values import draw_point_value, ValueStyle


logger = logging.getLogger(__name__)

bezier_control = 0.1 # Length of the bezier control vectors, as a fraction of the distance between the neighboring points.

plot_window_clip_id = 'plot_window'

Vec = tuple[float,float]


class BarOption(Enum):
  'Bars from each point to an axis. Sticks are lines; blocks are rectangles as wide as the bar width.'
  none = 'none'
  x_stick = 'x_stick' # Vertical line down (or up) to the X axis.
  x_block = 'x_block'
  y_stick = 'y_stick' # Horizontal line across to the Y axis.
  y_block = 'y_block'
  histogram = 'histogram' # Each point is the left edge and area of a column reaching to the next point.


@dataclass(frozen=True)
class BarStyle:
  option:BarOption = BarOption.none
  color:Color = black
  width:float = 3
  area_fill:Color = blank


class Series2D:
  '''
  A titled series of (x, y) points for a 2D plot.
  Points are held in ascending order of x, and are classified on construction:
  points with a non-finite coordinate are drawn with the `limit_point` style.
  '''

  def __init__(self, points:Iterable[tuple[UncLike,UncLike]]|Mapping[UncLike,UncLike], title:str='', *,
   point:PointStyle=PointStyle(shape=PointShape.circlet, size=5, stroke=black, fill=white),
   limit_point:PointStyle=PointStyle(shape=PointShape.cone, size=10, stroke=grey, fill=blank),
   line:LineStyle=LineStyle(color=black, width=2, line_on=False),
   bar:BarStyle=BarStyle()) -> None:
    if isinstance(points, Mapping): points = points.items()
    self.title = title
    normal, self.limits = partition_points(points)
    self.points = sorted(normal, key=lambda p: p[0].value)
    self.point = point
    self.limit_point = limit_point
    self.line = line
    self.bar = bar

  def __repr__(self) -> str:
    return f'{type(self).__name__}({self.title!r}, points={len(self.points)}, limits={len(self.limits)})'

  def legend_entry(self) -> LegendEntry:
    return LegendEntry(title=self.title, point=self.point, line=self.line)


class Plot2D:
  '''
  A 2D plot. Configuration is held in plain attributes, initialized from keyword arguments;
  styles are immutable values, altered with `dataclasses.replace`.
  Each call to `render` redraws the document from scratch.
  '''

  def __init__(self, *,
   width:float=500,
   height:float=400,
   title:str='',
   title_style:TextStyle=TextStyle(font_size=18),
   text_margin:float=2,
   image_border:BoxStyle=BoxStyle(stroke=yellow, fill=white, width=2, margin=3),
   plot_window_on:bool=True,
   plot_window_border:BoxStyle=BoxStyle(stroke=lightslategray, fill=white, width=2, margin=3, fill_on=False),
   x_min:float=-10,
   x_max:float=10,
   y_min:float=-10,
   y_max:float=10,
   x_axis:AxisLineStyle=AxisLineStyle(),
   y_axis:AxisLineStyle=AxisLineStyle(),
   x_label_style:TextStyle=TextStyle(font_size=14),
   y_label_style:TextStyle=TextStyle(font_size=14),
   x_ticks:TicksStyle=TicksStyle(label_style=TextStyle(font_size=12)),
   y_ticks:TicksStyle=TicksStyle(label_style=TextStyle(font_size=12)),
   x_autoscale:bool=False,
   y_autoscale:bool=False,
   x_include_zero:bool=False,
   y_include_zero:bool=False,
   x_min_ticks:int=6,
   y_min_ticks:int=6,
   x_steps:Steps=Steps.none,
   y_steps:Steps=Steps.none,
   x_tight:float=1e-6,
   y_tight:float=1e-6,
   autoscale_check_limits:bool=True,
   autoscale_plusminus:float=3.0,
   legend:LegendStyle=LegendStyle(),
   limit_points_style:SvgStyle=SvgStyle(stroke=lightslategray, fill=antiquewhite),
   x_values_on:bool=False,
   y_values_on:bool=False,
   x_values_style:ValueStyle=ValueStyle(),
   y_values_style:ValueStyle=ValueStyle(rotation=Rotation.downward),
   unc_styles:tuple[SvgStyle,SvgStyle,SvgStyle]=(
     SvgStyle(stroke=blank, fill=lightgoldenrodyellow, width=1),
     SvgStyle(stroke=peachpuff, fill=peachpuff, width=1),
     SvgStyle(stroke=pink, fill=pink, width=1)),
   alpha:float=0.05,
   unc_sig_digits:int=2,
   text_plusminus:float=1.0,
   precision:int=3,
   description:str='',
   author:str='',
   copyright_holder:str='',
   copyright_date:str='',
   license:License|None=None) -> None:

    self.width = width
    self.height = height
    self.title = title
    self.title_style = title_style
    self.text_margin = text_margin
    self.image_border = image_border
    self.plot_window_on = plot_window_on
    self.plot_window_border = plot_window_border
    self.x_min = x_min
    self.x_max = x_max
    self.y_min = y_min
    self.y_max = y_max
    self.x_axis = x_axis
    self.y_axis = y_axis
    self.x_label_style = x_label_style
    self.y_label_style = y_label_style
    self.x_ticks = x_ticks
    self.y_ticks = y_ticks
    self.x_autoscale = x_autoscale
    self.y_autoscale = y_autoscale
    self.x_include_zero = x_include_zero
    self.y_include_zero = y_include_zero
    self.x_min_ticks = x_min_ticks
    self.y_min_ticks = y_min_ticks
    self.x_steps = x_steps
    self.y_steps = y_steps
    self.x_tight = x_tight
    self.y_tight = y_tight
    self.autoscale_check_limits = autoscale_check_limits
    self.autoscale_plusminus = autoscale_plusminus
    self.legend = legend
    self.limit_points_style = limit_points_style
    self.x_values_on = x_values_on
    self.y_values_on = y_values_on
    self.x_values_style = x_values_style
    self.y_values_style = y_values_style
    self.unc_styles = unc_styles
    self.alpha = alpha
    self.unc_sig_digits = unc_sig_digits
    self.text_plusminus = text_plusminus
    self.series:list[Series2D] = []
    self.doc = SvgDocument(width, height, precision=precision, description=description, author=author,
      copyright_holder=copyright_holder, copyright_date=copyright_date, license=license)
    AxisRange(x_min, x_max)
    AxisRange(y_min, y_max)


  def plot(self, points:Iterable[tuple[UncLike,UncLike]]|Mapping[UncLike,UncLike], title:str='', **kwargs) -> Series2D:
    'Add a data series; keyword arguments are passed to `Series2D`.'
    series = Series2D(points, title, **kwargs)
    self.series.append(series)
    logger.debug('added %r', series)
    return series


  def set_x_range(self, min:float, max:float) -> None:
    'Set the X axis range, turning X autoscaling off.'
    AxisRange(min, max)
    self.x_min = min
    self.x_max = max
    self.x_autoscale = False


  def set_y_range(self, min:float, max:float) -> None:
    'Set the Y axis range, turning Y autoscaling off.'
    AxisRange(min, max)
    self.y_min = min
    self.y_max = max
    self.y_autoscale = False


  def x_range(self) -> AxisRange: return AxisRange(self.x_min, self.x_max)

  def y_range(self) -> AxisRange: return AxisRange(self.y_min, self.y_max)


  def autoscale(self, points:Iterable[tuple[UncLike,UncLike]]|None=None, *, x:bool=True, y:bool=True) -> tuple[AutoScale,AutoScale]:
    '''
    Scale the axes to fit `points`, or the points of all series if omitted.
    Only the axes selected by `x` and `y` are changed; both scales are returned.
    '''
    if points is None: points = [p for s in self.series for p in s.points + s.limits]
    x_scale, y_scale = scale_points(points, check_limits=self.autoscale_check_limits, plusminus=self.autoscale_plusminus,
      x_include_zero=self.x_include_zero, x_tight=self.x_tight, x_min_ticks=self.x_min_ticks, x_steps=self.x_steps,
      y_include_zero=self.y_include_zero, y_tight=self.y_tight, y_min_ticks=self.y_min_ticks, y_steps=self.y_steps)
    if x:
      self.x_min = x_scale.axis_min
      self.x_max = x_scale.axis_max
      self.x_ticks = replace(self.x_ticks, major_interval=x_scale.tick_interval)
      logger.debug('autoscaled X axis: %s', x_scale)
    if y:
      self.y_min = y_scale.axis_min
      self.y_max = y_scale.axis_max
      self.y_ticks = replace(self.y_ticks, major_interval=y_scale.tick_interval)
      logger.debug('autoscaled Y axis: %s', y_scale)
    return x_scale, y_scale


  def legend_entries(self) -> list[LegendEntry]:
    return [s.legend_entry() for s in self.series]


  def render(self) -> SvgDocument:
    'Compute the layout and redraw every layer of the document.'
    if self.x_autoscale or self.y_autoscale: self.autoscale(x=self.x_autoscale, y=self.y_autoscale)
    doc = self.doc
    doc.width = self.width
    doc.height = self.height
    doc.title = self.title
    doc.clear()
    layout = compute_layout_2d(self)
    draw_backgrounds(doc, self, layout, image=Layer.image_background, window=Layer.plot_background)
    draw_title(doc, self, layout, layer=Layer.title)
    self.draw_axes(layout)
    if self.legend.on and layout.legend is not None and layout.legend_size is not None:
      draw_legend(doc, layout.legend, layout.legend_size, self.legend_entries(), self.legend, self.text_margin)
    draw_x_label(doc, self, layout, layer=Layer.x_label)
    draw_y_label(doc, self, layout, layer=Layer.y_label)
    box = layout.plot
    clip = doc.add_clip_rect(plot_window_clip_id, box.left + 1, box.top + 1, box.width - 2, box.height - 2)
    self.draw_lines(layout, clip)
    self.draw_points(layout, clip)
    self.draw_limit_points(layout)
    self.draw_bars(layout)
    return doc


  def draw_axes(self, layout:LayoutResult) -> None:
    doc = self.doc
    y_layers = style_axis(doc, self.y_axis, self.y_ticks, line=Layer.y_axis, major_ticks=Layer.y_major_ticks,
      minor_ticks=Layer.y_minor_ticks, major_grid=Layer.y_major_grid, minor_grid=Layer.y_minor_grid,
      values=Layer.y_ticks_values)
    x_layers = style_axis(doc, self.x_axis, self.x_ticks, line=Layer.x_axis, major_ticks=Layer.x_major_ticks,
      minor_ticks=Layer.x_minor_ticks, major_grid=Layer.x_major_grid, minor_grid=Layer.x_minor_grid,
      values=Layer.x_ticks_values)
    x_crosses = self.x_axis.axis_line_on and layout.x_axis_position is AxisPosition.crosses
    y_crosses = self.y_axis.axis_line_on and layout.y_axis_position is AxisPosition.crosses
    draw_y_axis(y_layers, self, layout, self.y_range(), orthogonal_line_on=x_crosses)
    draw_x_axis(x_layers, self, layout, self.x_range(), orthogonal_line_on=y_crosses)


  def _y0(self, layout:LayoutResult) -> float:
    'The output y of data y=0, clamped to the plot window; the base of area fills, sticks and histogram columns.'
    return layout.plot.clamp_y(layout.transform.y(0))


  def draw_lines(self, layout:LayoutResult, clip:str) -> None:
    '''
    Draw the connecting line of every series that has one, straight or bezier, with optional area fill down to y=0.
    Only points inside the plot window are connected.
    '''
    lines = self.doc.layer(Layer.data_lines)
    y0 = self._y0(layout)
    for series in self.series:
      style = series.line
      if not style.drawn: continue
      pts = _window_points(series.points, layout.transform, layout.plot)
      fill = style.area_fill is not None and not style.area_fill.is_blank
      if style.bezier_on and len(pts) > 2: d = bezier_path(pts, y0 if fill else None)
      else: d = straight_path(pts, y0 if fill else None)
      if not d: continue
      lines.g(clip_path=clip,
        **SvgStyle(stroke=style.color, fill=style.area_fill if fill else blank, width=style.width).attrs()).path(d)


  def draw_points(self, layout:LayoutResult, clip:str) -> None:
    'Draw the markers of every series that lie strictly inside the plot window, with their value labels.'
    doc = self.doc
    box = layout.plot
    transform = layout.transform
    points = doc.layer(Layer.data_points)
    x_values = doc.layer(Layer.x_point_values)
    y_values = doc.layer(Layer.y_point_values)
    unc_groups = (
      doc.set_layer_style(Layer.unc3, self.unc_styles[0]),
      doc.set_layer_style(Layer.unc2, self.unc_styles[1]),
      doc.set_layer_style(Layer.unc1, self.unc_styles[2]))
    for series in self.series:
      if not series.point.is_drawn and not (self.x_values_on or self.y_values_on): continue
      g:G|None = None # Created on the first visible point.
      for ux, uy in series.points:
        x, y = transform.xy(ux.value, uy.value)
        if not (box.left < x < box.right and box.top < y < box.bottom): continue
        if g is None: g = points.g(clip_path=clip, **series.point.svg_style().attrs())
        draw_point(g, x, y, series.point, unc_groups=unc_groups,
          x_radius=unc_radius(transform.x, ux.value, ux.sd), y_radius=unc_radius(transform.y, uy.value, uy.sd))
        if self.x_values_on: self._draw_value(x_values.g(), x, y, self.x_values_style, series.point, ux)
        if self.y_values_on: self._draw_value(y_values.g(), x, y, self.y_values_style, series.point, uy)


  def _draw_value(self, g:G, x:float, y:float, vs:ValueStyle, ps:PointStyle, u:Unc) -> None:
    draw_point_value(g, x, y, vs, ps, u, alpha=self.alpha, unc_sig_digits=self.unc_sig_digits,
      text_plusminus=self.text_plusminus)


  def draw_limit_points(self, layout:LayoutResult) -> None:
    '''
    Draw the points that have a non-finite coordinate.
    A NaN coordinate is drawn at zero, clamped to the plot window; an infinite coordinate at the window edge.
    '''
    box = layout.plot
    transform = layout.transform
    limits = self.doc.set_layer_style(Layer.limit_points, self.limit_points_style)
    for series in self.series:
      if not series.limits: continue
      g = limits.g(**series.limit_point.svg_style().attrs())
      for ux, uy in series.limits:
        x = box.clamp_x(transform.x(_limit_coord(ux.value)))
        y = box.clamp_y(transform.y(_limit_coord(uy.value)))
        draw_point(g, x, y, series.limit_point)


  def draw_bars(self, layout:LayoutResult) -> None:
    'Draw the sticks, blocks or histogram columns of every series that has a bar option.'
    box = layout.plot
    transform = layout.transform
    y0 = self._y0(layout)
    x0 = box.clamp_x(transform.x(0))
    points = self.doc.layer(Layer.data_points)
    for series in self.series:
      bar = series.bar
      if bar.option is BarOption.none: continue
      if bar.option is BarOption.histogram:
        self.draw_histogram(series, layout)
        continue
      g:G|None = None
      half = bar.width / 2
      for ux, uy in series.points:
        x, y = transform.xy(ux.value, uy.value)
        if not box.contains(x, y): continue
        if g is None: g = points.g(**SvgStyle(stroke=bar.color, fill=bar.area_fill, width=bar.width).attrs())
        match bar.option:
          case BarOption.x_stick: g.line(x, y, x, y0)
          case BarOption.x_block: g.rect(x - half, min(y, y0), bar.width, abs(y0 - y))
          case BarOption.y_stick: g.line(x, y, x0, y)
          case BarOption.y_block: g.rect(min(x, x0), y - half, abs(x - x0), bar.width)
          case _: raise ValueError(bar.option)


  def draw_histogram(self, series:Series2D, layout:LayoutResult) -> None:
    '''
    Draw a histogram: each point gives the left edge of a column and its area,
    so the column height is `y / (next_x - x)`. The last point only closes the previous column.
    '''
    transform = layout.transform
    line = series.line
    fill = line.area_fill if line.area_fill is not None else blank
    y0 = transform.y(0)
    d = PathData()
    for (ux, uy), (nx, _) in zip(series.points, series.points[1:]):
      w = nx.value - ux.value
      if w <= 0:
        warn(f'histogram {series.title!r}: zero width column at x={ux.value!r}', SvgPlotWarning, stacklevel=2)
        continue
      h = transform.y(uy.value / w)
      left = transform.x(ux.value)
      right = transform.x(nx.value)
      d.M(left, y0).L(left, h).L(right, h).L(right, y0).Z()
    if d: self.doc.layer(Layer.data_points).g(**SvgStyle(stroke=line.color, fill=fill, width=line.width).attrs()).path(d)


  def render_str(self) -> str:
    'Render the plot and return the complete SVG text.'
    self.render()
    return self.doc.render_str()


  def write(self, dst:str|PathLike|TextIO) -> None:
    'Render the plot and write it to a path (".svg" is appended if missing) or a text stream.'
    self.render()
    self.doc.write(dst)


def _limit_coord(v:float) -> float:
  'NaN is placed at zero; infinities are left to be clamped to the window edge.'
  return 0.0 if isnan(v) else v


def _window_points(points:Iterable[tuple[Unc,Unc]], transform:Transform, box:Box) -> list[Vec]:
  'Transform the points, keeping those inside the plot window.'
  pts = []
  for ux, uy in points:
    x, y = transform.xy(ux.value, uy.value)
    if box.contains(x, y): pts.append((x, y))
  return pts


def straight_path(pts:list[Vec], y0:float|None=None) -> PathData:
  '''
  Straight line segments through `pts`.
  With `y0`, the path starts and ends on the horizontal line y0 and is closed, so that its fill covers the area
  between the line and y0.
  '''
  d = PathData()
  if not pts: return d
  x, y = pts[0]
  if y0 is None: d.M(x, y)
  else: d.M(x, y0).L(x, y)
  for x, y in pts[1:]: d.L(x, y)
  if y0 is not None: d.L(pts[-1][0], y0).Z()
  return d


def bezier_path(pts:list[Vec], y0:float|None=None) -> PathData:
  '''
  A smooth curve through `pts`, made of cubic `S` segments.
  The end control point of each segment lies on the line through the neighbors of its end point,
  at `bezier_control` times their distance.
  With fewer than three points no curve is possible, and the result is straight.
  '''
  if len(pts) < 3: return straight_path(pts, y0)
  d = PathData()
  x, y = pts[0]
  if y0 is None: d.M(x, y)
  else: d.M(x, y0).L(x, y)
  for (x2, y2), (x1, y1), (x, y) in zip(pts, pts[1:], pts[2:]):
    back_x = ((x1 - x) + (x2 - x1)) * bezier_control
    back_y = ((y1 - y) + (y2 - y1)) * bezier_control
    d.S(x1 + back_x, y1 + back_y, x1, y1)
  (_, y1), (x, y) = pts[-2], pts[-1]
  d.S(x, y + (y - y1) * bezier_control, x, y)
  if y0 is not None: d.L(x, y0).Z()
  return d
