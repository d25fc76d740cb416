# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Box plots: one box per data series, spaced evenly along a categorical X axis.

Each box spans the first to the third quartile, with a line at the median.
Whiskers reach the most extreme values within 1.5 interquartile ranges of the box;
values beyond are drawn as mild outliers, and beyond 3 interquartile ranges as extreme outliers.
'''

import logging
from dataclasses import replace
from os import PathLike
from typing import Iterable, TextIO

from .autoscale import AutoScale, scale_values, Steps
from .axis import AxisRange, TicksStyle
from .color import azure, black, blank, blue, brown, cyan, green, lightslategray, magenta, red, white, yellow
from .frame import draw_backgrounds, draw_title, draw_x_label, draw_y_axis, draw_y_label, style_axis
from .layout import compute_layout_boxplot, LayoutResult
from .legend import LegendEntry, LegendStyle
from .markers import draw_point, PointShape, PointStyle
from .stats import box_stats
from .style import AxisLineStyle, BoxStyle, SvgStyle, TextStyle
from .svg.document import BoxplotLayer, License, SvgDocument
from .text import check_text_length
from .uncertain import Unc
from .values import draw_point_value, ValueStyle


logger = logging.getLogger(__name__)

plot_window_clip_id = 'plot_window'
clip_margin_factor = 5 # The clip rectangle extends beyond the plot window by this many border widths.


class BoxSeries:
  '''
  A titled series of values summarized by a box.
  The statistics are computed on construction; fewer than eight values, or non-finite values, raise `DataError`.
  '''

  def __init__(self, values:Iterable[float], title:str='', *,
   box:SvgStyle=SvgStyle(stroke=green, fill=azure, width=1),
   box_width:float=30,
   median:SvgStyle=SvgStyle(stroke=blue, width=2),
   whisker:SvgStyle=SvgStyle(stroke=magenta, fill=cyan, width=1),
   whisker_length:float=30,
   axis:SvgStyle=SvgStyle(stroke=black, width=1),
   mild_outlier:PointStyle=PointStyle(shape=PointShape.circlet, size=5, stroke=brown, fill=blank),
   extreme_outlier:PointStyle=PointStyle(shape=PointShape.cone, size=5, stroke=red, fill=blank),
   quartile_definition:int=8,
   values_on:bool=False,
   values_style:ValueStyle=ValueStyle()) -> None:
    self.title = title
    self.stats = box_stats(values, quartile_definition)
    self.box = box
    self.box_width = box_width
    self.median = median
    self.whisker = whisker
    self.whisker_length = whisker_length
    self.axis = axis
    self.mild_outlier = mild_outlier
    self.extreme_outlier = extreme_outlier
    self.quartile_definition = quartile_definition
    self.values_on = values_on
    self.values_style = values_style

  def __repr__(self) -> str:
    return f'{type(self).__name__}({self.title!r}, values={len(self.stats.values)})'


class BoxPlot:
  '''
  A box plot. Configuration is held in plain attributes, initialized from keyword arguments.
  The legend attributes exist for the shared frame functions; box plots have no legend.
  '''

  def __init__(self, *,
   width:float=500,
   height:float=350,
   title:str='',
   title_style:TextStyle=TextStyle(font_size=18),
   text_margin:float=2,
   image_border:BoxStyle=BoxStyle(stroke=yellow, fill=white, width=2, margin=10),
   plot_window_on:bool=True,
   plot_window_border:BoxStyle=BoxStyle(stroke=lightslategray, fill=white, width=1, margin=3, fill_on=False),
   y_min:float=-10,
   y_max:float=10,
   x_axis:AxisLineStyle=AxisLineStyle(),
   y_axis:AxisLineStyle=AxisLineStyle(),
   x_label_style:TextStyle=TextStyle(font_size=14),
   y_label_style:TextStyle=TextStyle(font_size=14),
   x_ticks:TicksStyle=TicksStyle(major_interval=1, num_minor=0, label_style=TextStyle(font_size=12)),
   y_ticks:TicksStyle=TicksStyle(label_style=TextStyle(font_size=12)),
   y_autoscale:bool=False,
   y_include_zero:bool=False,
   y_min_ticks:int=6,
   y_steps:Steps=Steps.none,
   y_tight:float=1e-6,
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
    self.y_min = y_min
    self.y_max = y_max
    self.x_axis = x_axis
    self.y_axis = y_axis
    self.x_label_style = x_label_style
    self.y_label_style = y_label_style
    self.x_ticks = x_ticks
    self.y_ticks = y_ticks
    self.y_autoscale = y_autoscale
    self.y_include_zero = y_include_zero
    self.y_min_ticks = y_min_ticks
    self.y_steps = y_steps
    self.y_tight = y_tight
    self.legend = LegendStyle(on=False)
    self.series:list[BoxSeries] = []
    self.doc = SvgDocument(width, height, layers=BoxplotLayer, precision=precision, description=description,
      author=author, copyright_holder=copyright_holder, copyright_date=copyright_date, license=license)
    AxisRange(y_min, y_max)


  def plot(self, values:Iterable[float], title:str='', **kwargs) -> BoxSeries:
    'Add a data series; keyword arguments are passed to `BoxSeries`.'
    series = BoxSeries(values, title, **kwargs)
    self.series.append(series)
    logger.debug('added %r', series)
    return series


  def set_y_range(self, min:float, max:float) -> None:
    AxisRange(min, max)
    self.y_min = min
    self.y_max = max
    self.y_autoscale = False


  def x_range(self) -> AxisRange:
    'Boxes sit at 1 to n, with half a gap of margin at each end.'
    return AxisRange(0, len(self.series) + 1)


  def y_range(self) -> AxisRange: return AxisRange(self.y_min, self.y_max)


  def legend_entries(self) -> list[LegendEntry]: return []


  def autoscale(self, values:Iterable[float]|None=None) -> AutoScale:
    'Scale the Y axis to fit `values`, or the values of all series (outliers included) if omitted.'
    if values is None: values = [v for s in self.series for v in s.stats.values]
    scale = scale_values(values, include_zero=self.y_include_zero, tight=self.y_tight, min_ticks=self.y_min_ticks,
      steps=self.y_steps)
    self.y_min = scale.axis_min
    self.y_max = scale.axis_max
    self.y_ticks = replace(self.y_ticks, major_interval=scale.tick_interval)
    logger.debug('autoscaled Y axis: %s', scale)
    return scale


  def render(self) -> SvgDocument:
    'Compute the layout and redraw every layer of the document.'
    if self.y_autoscale: self.autoscale()
    doc = self.doc
    doc.width = self.width
    doc.height = self.height
    doc.title = self.title
    doc.clear()
    layout = compute_layout_boxplot(self)
    draw_backgrounds(doc, self, layout, image=BoxplotLayer.image_background, window=BoxplotLayer.plot_background)
    draw_title(doc, self, layout, layer=BoxplotLayer.title)
    y_layers = style_axis(doc, self.y_axis, self.y_ticks, line=BoxplotLayer.y_axis,
      major_ticks=BoxplotLayer.y_major_ticks, minor_ticks=BoxplotLayer.y_minor_ticks,
      major_grid=BoxplotLayer.y_major_grid, minor_grid=BoxplotLayer.y_minor_grid, values=BoxplotLayer.value_labels)
    draw_y_axis(y_layers, self, layout, self.y_range())
    self.draw_x_axis(layout)
    draw_x_label(doc, self, layout, layer=BoxplotLayer.x_label)
    draw_y_label(doc, self, layout, layer=BoxplotLayer.y_label)
    box = layout.plot
    m = clip_margin_factor * self.plot_window_border.border_width
    clip = doc.add_clip_rect(plot_window_clip_id, box.left - m, box.top - m, box.width + 2 * m, box.height + 2 * m)
    for i, series in enumerate(self.series):
      self.draw_box(series, layout.transform.x(i + 1), layout, clip)
    return doc


  def draw_x_axis(self, layout:LayoutResult) -> None:
    'Draw the X axis line, a tick at each box, and the series titles below the ticks.'
    doc = self.doc
    box = layout.plot
    ticks = self.x_ticks
    if self.x_axis.axis_line_on:
      g = doc.set_layer_style(BoxplotLayer.x_axis, SvgStyle(stroke=self.x_axis.color, width=self.x_axis.width))
      g.line(box.left, layout.x_axis_y, box.right, layout.x_axis_y)
    tick_g = doc.set_layer_style(BoxplotLayer.x_ticks, SvgStyle(stroke=ticks.major_tick_color, width=ticks.major_tick_width))
    labels = doc.layer(BoxplotLayer.value_labels)
    font = ticks.label_style.font_size
    y_up = box.bottom - ticks.major_tick_length if ticks.inward_ticks_on else box.bottom
    y_down = box.bottom + ticks.major_tick_length if ticks.outward_ticks_on else box.bottom
    spacing = box.width / (len(self.series) + 1)
    for i, series in enumerate(self.series):
      x = layout.transform.x(i + 1)
      if y_up != y_down: tick_g.line(x, y_up, x, y_down)
      if ticks.labels_on and series.title:
        check_text_length(series.title, ticks.label_style, spacing)
        labels.add_text(x, box.bottom + font * self.text_margin * 0.7, series.title, anchor='middle',
          **ticks.label_style.attrs())


  def draw_box(self, series:BoxSeries, x:float, layout:LayoutResult, clip:str) -> None:
    '''
    Draw one series at output x: the axis line from whisker to whisker, the box, the median line,
    the whiskers, the outliers that lie within the Y range, and optionally the values.
    '''
    doc = self.doc
    s = series.stats
    ty = layout.transform.y
    y_range = self.y_range()

    g = doc.layer(BoxplotLayer.box_axis).g(clip_path=clip, **series.axis.attrs())
    g.line(x, ty(s.whisker_min), x, ty(s.whisker_max))

    half = series.box_width / 2
    g = doc.layer(BoxplotLayer.box).g(clip_path=clip, **series.box.attrs())
    g.rect(x - half, ty(s.q3), series.box_width, ty(s.q1) - ty(s.q3))

    median_half = (series.box_width - (series.box.width or 0)) / 2
    g = doc.layer(BoxplotLayer.median).g(clip_path=clip, **series.median.attrs())
    g.line(x - median_half, ty(s.median), x + median_half, ty(s.median))

    whisker_half = series.whisker_length / 2
    g = doc.layer(BoxplotLayer.whisker).g(clip_path=clip, **series.whisker.attrs())
    for v in (s.whisker_min, s.whisker_max):
      g.line(x - whisker_half, ty(v), x + whisker_half, ty(v))

    for layer, values, style in (
     (BoxplotLayer.mild_outliers, s.mild_outliers, series.mild_outlier),
     (BoxplotLayer.extreme_outliers, s.extreme_outliers, series.extreme_outlier)):
      inside = [v for v in values if v in y_range]
      if not inside: continue
      g = doc.layer(layer).g(**style.svg_style().attrs())
      for v in inside: draw_point(g, x, ty(v), style)

    if series.values_on:
      g = doc.layer(BoxplotLayer.data_values).g()
      for v in s.values:
        if v in y_range: draw_point_value(g, x + half, ty(v), series.values_style, series.mild_outlier, Unc(v))


  def render_str(self) -> str:
    'Render the plot and return the complete SVG text.'
    self.render()
    return self.doc.render_str()


  def write(self, dst:str|PathLike|TextIO) -> None:
    'Render the plot and write it to a path (".svg" is appended if missing) or a text stream.'
    self.render()
    self.doc.write(dst)
