# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
1D plots: one or more series of values marked along a single horizontal axis.

Non-finite values are not errors: NaN is marked at the position of zero (clamped to the plot window),
and infinities are marked just beyond the left or right edge of the plot window.
'''

import logging
from dataclasses import replace
from os import PathLike
from typing import Iterable, TextIO

from .autoscale import AutoScale, scale_values, Steps
from .axis import AxisRange, TicksPosition, TicksStyle
from .color import antiquewhite, black, blank, blue, green, lightgoldenrodyellow, lightslategray, magenta, peachpuff, pink, red, white, yellow
from .exceptions import LayoutError
from .frame import draw_backgrounds, draw_title, draw_x_axis, draw_x_label, style_axis
from .layout import compute_layout_1d, LayoutResult
from .legend import draw_legend, LegendEntry, LegendStyle
from .markers import draw_point, PointShape, PointStyle, unc_radius
from .style import AxisLineStyle, BoxStyle, LineStyle, SvgStyle, TextStyle
from .svg.document import Layer, License, SvgDocument
from .uncertain import Category, classify, partition, UncLike
from .values import draw_point_value, ValueStyle


logger = logging.getLogger(__name__)

marker_lift = 3 # Normal markers are drawn this far above the axis line, and limit markers this far below it.


class Series1D:
  '''
  A titled series of values for a 1D plot.
  The values are classified on construction: finite values are plotted normally,
  and NaN and infinite values are drawn as limit markers.
  '''

  def __init__(self, values:Iterable[UncLike], title:str='', *,
   point:PointStyle=PointStyle(shape=PointShape.vertical_line, size=5, stroke=black, fill=blank),
   line:LineStyle=LineStyle(line_on=False)) -> None:
    self.title = title
    self.values, self.limits = partition(values)
    self.point = point
    self.line = line

  def __repr__(self) -> str:
    return f'{type(self).__name__}({self.title!r}, values={len(self.values)}, limits={len(self.limits)})'

  def legend_entry(self) -> LegendEntry:
    return LegendEntry(title=self.title, point=self.point, line=self.line)


class Plot1D:
  '''
  A 1D plot. Configuration is held in plain attributes, initialized from keyword arguments;
  styles are immutable values, altered with `dataclasses.replace`.
  Each call to `render` redraws the document from scratch.
  '''

  def __init__(self, *,
   width:float=500,
   height:float=200,
   title:str='',
   title_style:TextStyle=TextStyle(font_size=18),
   text_margin:float=1.25,
   image_border:BoxStyle=BoxStyle(stroke=yellow, fill=white, width=1, margin=10),
   plot_window_on:bool=True,
   plot_window_border:BoxStyle=BoxStyle(stroke=lightgoldenrodyellow, fill=white, width=1, margin=3, fill_on=False),
   x_min:float=-10,
   x_max:float=10,
   x_axis:AxisLineStyle=AxisLineStyle(),
   x_label_style:TextStyle=TextStyle(font_size=10),
   x_ticks:TicksStyle=TicksStyle(position=TicksPosition.on_axis),
   x_axis_vertical:float=0.5,
   x_autoscale:bool=False,
   x_include_zero:bool=False,
   x_min_ticks:int=6,
   x_steps:Steps=Steps.none,
   x_tight:float=1e-6,
   autoscale_check_limits:bool=True,
   autoscale_plusminus:float=3.0,
   legend:LegendStyle=LegendStyle(text_style=TextStyle(font_size=10), box=BoxStyle(stroke=yellow, fill=white, width=1, margin=1),
     lines_on=False),
   nan_style:PointStyle=PointStyle(shape=PointShape.cone_point_down, size=20, stroke=green, fill=white),
   pos_inf_style:PointStyle=PointStyle(shape=PointShape.cone_point_right, size=10, stroke=red, fill=white),
   neg_inf_style:PointStyle=PointStyle(shape=PointShape.cone_point_left, size=10, stroke=blue, fill=white),
   limit_points_style:SvgStyle=SvgStyle(stroke=lightslategray, fill=antiquewhite),
   x_values_on:bool=False,
   x_values_style:ValueStyle=ValueStyle(),
   unc_styles:tuple[SvgStyle,SvgStyle,SvgStyle]=(
     SvgStyle(stroke=lightgoldenrodyellow, fill=lightgoldenrodyellow, width=1),
     SvgStyle(stroke=peachpuff, fill=peachpuff, width=1),
     SvgStyle(stroke=magenta, fill=pink, width=1)),
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
    self.x_axis = x_axis
    self.x_label_style = x_label_style
    self.x_ticks = x_ticks
    self.x_axis_vertical = x_axis_vertical
    self.x_autoscale = x_autoscale
    self.x_include_zero = x_include_zero
    self.x_min_ticks = x_min_ticks
    self.x_steps = x_steps
    self.x_tight = x_tight
    self.autoscale_check_limits = autoscale_check_limits
    self.autoscale_plusminus = autoscale_plusminus
    self.legend = legend
    self.nan_style = nan_style
    self.pos_inf_style = pos_inf_style
    self.neg_inf_style = neg_inf_style
    self.limit_points_style = limit_points_style
    self.x_values_on = x_values_on
    self.x_values_style = x_values_style
    self.unc_styles = unc_styles
    self.alpha = alpha
    self.unc_sig_digits = unc_sig_digits
    self.text_plusminus = text_plusminus
    self.series:list[Series1D] = []
    self.doc = SvgDocument(width, height, precision=precision, description=description, author=author,
      copyright_holder=copyright_holder, copyright_date=copyright_date, license=license)
    AxisRange(x_min, x_max) # Validate the initial range.


  def plot(self, values:Iterable[UncLike], title:str='', **kwargs) -> Series1D:
    'Add a data series; keyword arguments are passed to `Series1D`.'
    series = Series1D(values, title, **kwargs)
    self.series.append(series)
    logger.debug('added %r', series)
    return series


  def set_x_range(self, min:float, max:float) -> None:
    'Set the axis range, turning autoscaling off. Raises `RangeError` unless `max` exceeds `min` by a representable margin.'
    AxisRange(min, max)
    self.x_min = min
    self.x_max = max
    self.x_autoscale = False


  def x_range(self) -> AxisRange:
    return AxisRange(self.x_min, self.x_max)


  def autoscale(self, values:Iterable[UncLike]|None=None) -> AutoScale:
    '''
    Scale the axis to fit `values`, or the values of all series if omitted,
    setting the axis range and major tick interval.
    '''
    if values is None: values = [u for s in self.series for u in s.values + s.limits]
    scale = scale_values(values, check_limits=self.autoscale_check_limits, plusminus=self.autoscale_plusminus,
      include_zero=self.x_include_zero, tight=self.x_tight, min_ticks=self.x_min_ticks, steps=self.x_steps)
    self.x_min = scale.axis_min
    self.x_max = scale.axis_max
    self.x_ticks = replace(self.x_ticks, major_interval=scale.tick_interval)
    logger.debug('autoscaled X axis: %s', scale)
    return scale


  def legend_entries(self) -> list[LegendEntry]:
    return [s.legend_entry() for s in self.series]


  def render(self) -> SvgDocument:
    'Compute the layout and redraw every layer of the document.'
    if self.x_autoscale: self.autoscale()
    doc = self.doc
    doc.width = self.width
    doc.height = self.height
    doc.title = self.title
    doc.clear()
    layout = compute_layout_1d(self)
    draw_backgrounds(doc, self, layout, image=Layer.image_background, window=Layer.plot_background)
    draw_title(doc, self, layout, layer=Layer.title)
    self.draw_axes(layout)
    if self.legend.on and layout.legend is not None and layout.legend_size is not None:
      draw_legend(doc, layout.legend, layout.legend_size, self.legend_entries(), self.legend, self.text_margin)
    draw_x_label(doc, self, layout, layer=Layer.x_label)
    self.draw_points(layout)
    return doc


  def draw_axes(self, layout:LayoutResult) -> None:
    '''
    Draw the horizontal axis with its ticks, and a vertical line at zero if zero is in range.
    '''
    doc = self.doc
    box = layout.plot
    layers = style_axis(doc, self.x_axis, self.x_ticks, line=Layer.x_axis, major_ticks=Layer.x_major_ticks,
      minor_ticks=Layer.x_minor_ticks, major_grid=Layer.x_major_grid, minor_grid=Layer.x_minor_grid,
      values=Layer.x_ticks_values)
    if self.x_axis.axis_line_on and layout.y_axis_x is not None:
      g = doc.set_layer_style(Layer.y_axis, SvgStyle(stroke=self.x_axis.color, width=self.x_axis.width))
      g.line(layout.y_axis_x, box.top, layout.y_axis_x, box.bottom)
    draw_x_axis(layers, self, layout, self.x_range(), orthogonal_line_on=self.x_axis.axis_line_on and layout.y_axis_x is not None)


  def draw_points(self, layout:LayoutResult) -> None:
    '''
    Draw the markers of every series just above the axis line, with their value labels and uncertainty ellipses,
    then the limit markers just below it.
    '''
    doc = self.doc
    box = layout.plot
    transform = layout.transform
    y = layout.x_axis_y
    if not box.contains_y(y):
      raise LayoutError(f'axis line y={y:.4g} lies outside the plot window ({box.top:.4g} to {box.bottom:.4g})')
    y -= marker_lift

    points = doc.layer(Layer.data_points)
    values = doc.layer(Layer.x_point_values)
    unc_groups = (
      doc.set_layer_style(Layer.unc3, self.unc_styles[0]),
      doc.set_layer_style(Layer.unc2, self.unc_styles[1]),
      doc.set_layer_style(Layer.unc1, self.unc_styles[2]))
    for series in self.series:
      visible = [(u, x) for u in series.values if box.contains_x(x := transform.x(u.value))]
      if not visible: continue
      g = points.g(**series.point.svg_style().attrs())
      for u, x in visible:
        draw_point(g, x, y, series.point, unc_groups=unc_groups, x_radius=unc_radius(transform.x, u.value, u.sd))
        if self.x_values_on:
          draw_point_value(values.g(), x, y, self.x_values_style, series.point, u, alpha=self.alpha,
            unc_sig_digits=self.unc_sig_digits, text_plusminus=self.text_plusminus)

    limits = doc.set_layer_style(Layer.limit_points, self.limit_points_style)
    y += 2 * marker_lift
    for series in self.series:
      for u in series.limits:
        match classify(u):
          case Category.nan:
            style = self.nan_style
            x = box.clamp_x(transform.x(0))
          case Category.neg_inf:
            style = self.neg_inf_style
            x = box.left - style.size / 2
          case Category.pos_inf:
            style = self.pos_inf_style
            x = box.right + style.size / 2
          case _: raise ValueError(u) # Limits are never normal values.
        draw_point(limits.g(**style.svg_style().attrs()), x, y, style)


  def render_str(self) -> str:
    'Render the plot and return the complete SVG text.'
    self.render()
    return self.doc.render_str()


  def write(self, dst:str|PathLike|TextIO) -> None:
    'Render the plot and write it to a path (".svg" is appended if missing) or a text stream.'
    self.render()
    self.doc.write(dst)
