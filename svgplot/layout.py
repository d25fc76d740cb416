# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
The plot window layout engine.

Starting from the whole image, each layout function reserves space for the image border, the title,
the axis labels, the legend, and the tick value labels, and then maps the axis ranges onto what remains.
The result is an immutable `LayoutResult`, recomputed on every render.
'''

import logging
from dataclasses import dataclass, replace
from typing import Callable, Protocol, Sequence

from .axis import AxisPosition, AxisRange, axis_position, longest_tick_label, Side, TicksPosition, TicksStyle
from .geometry import Box, Transform
from .legend import LegendEntry, LegendSize, LegendStyle, place_legend, size_legend
from .markers import PointStyle
from .style import AxisLineStyle, BoxStyle, TextStyle
from .text import aspect_ratio, rotated_extent, Rotation, sin45


__all__ = [
  'Box',
  'compute_layout_1d',
  'compute_layout_2d',
  'compute_layout_boxplot',
  'LayoutResult',
  'Transform',
]

logger = logging.getLogger(__name__)


class FramedPlot(Protocol):
  'The configuration that the layout and frame functions read from a plot.'
  width:float
  height:float
  title:str
  title_style:TextStyle
  text_margin:float
  image_border:BoxStyle
  plot_window_on:bool
  plot_window_border:BoxStyle
  x_axis:AxisLineStyle
  x_label_style:TextStyle
  x_ticks:TicksStyle
  legend:LegendStyle

  def x_range(self) -> AxisRange: ...

  def legend_entries(self) -> Sequence[LegendEntry]: ...


class LinePlot(FramedPlot, Protocol):
  'A 1D plot: values along a single horizontal axis.'
  x_axis_vertical:float
  nan_style:PointStyle
  pos_inf_style:PointStyle
  neg_inf_style:PointStyle


class XYPlot(FramedPlot, Protocol):
  'A plot with a vertical Y axis.'
  y_axis:AxisLineStyle
  y_label_style:TextStyle
  y_ticks:TicksStyle

  def y_range(self) -> AxisRange: ...


@dataclass(frozen=True)
class LayoutResult:
  '''
  The computed geometry of one render.
  `x_axis_y` is the output y coordinate of the horizontal axis line; `y_axis_x` the output x of the vertical one.
  The ticks positions are the effective ones: an axis that the orthogonal range does not cross
  moves its ticks to the nearer plot window edge.
  `x_label_space` and `y_label_space` are the room reserved for the tick value labels.
  '''
  plot:Box
  transform:Transform
  legend:Box|None
  legend_size:LegendSize|None
  x_axis_y:float
  y_axis_x:float|None
  x_axis_position:AxisPosition
  y_axis_position:AxisPosition|None
  x_ticks_position:TicksPosition
  y_ticks_position:TicksPosition|None
  x_label_space:float
  y_label_space:float
  title_y:float


def title_y(plot:FramedPlot) -> float:
  'The baseline of the title: one text margin of the title font below the top of the image.'
  return plot.title_style.font_size * plot.text_margin


def title_space(plot:FramedPlot) -> float:
  return plot.title_style.font_size * (plot.text_margin + 0.5) if plot.title else 0


def _layout_legend(plot:FramedPlot, box:Box, spacing:float) -> tuple[Box|None,LegendSize|None,Box]:
  'Size and place the legend if it is on, returning the legend box, its size, and the shrunk plot window.'
  if not plot.legend.on: return None, None, box
  style = plot.legend
  size = size_legend(plot.legend_entries(), style.header, style.text_style, style.box, style.lines_on)
  border_inset = plot.image_border.border_width + plot.image_border.margin
  legend, box = place_legend(style.place, box, size, image_width=plot.width, image_height=plot.height,
    spacing=spacing, border_inset=border_inset, title_bottom=plot.image_border.border_width + title_space(plot),
    position=style.position)
  if legend is None: return None, None, box
  return legend, size, box


def x_label_space_1d(ticks:TicksStyle, x_range:AxisRange) -> float:
  'Space below a 1D axis for its tick value labels, which depends on their rotation.'
  if not ticks.labels_on: return 0
  longest = longest_tick_label(x_range.min, x_range.max, ticks)
  return rotated_extent(longest, ticks.label_style.font_size, ticks.label_rotation)


def x_label_space_2d(ticks:TicksStyle, x_range:AxisRange) -> float:
  'Space below (or above) a 2D plot window for the X tick value labels.'
  if not ticks.labels_on: return 0
  rotation = ticks.label_rotation
  if rotation.is_vertical or rotation.is_sloped:
    longest = longest_tick_label(x_range.min, x_range.max, ticks)
    return longest if rotation.is_vertical else longest * sin45
  return 1.5 * ticks.label_style.font_size


def y_label_space(ticks:TicksStyle, y_range:AxisRange) -> float:
  'Space left (or right) of the plot window for the Y tick value labels.'
  if not ticks.labels_on: return 0
  rotation = ticks.label_rotation
  if rotation.is_vertical: return 2 * ticks.label_style.font_size
  longest = longest_tick_label(y_range.min, y_range.max, ticks)
  return longest * sin45 if rotation.is_sloped else longest


def _reserve_tick_labels(box:Box, ticks:TicksStyle, position:TicksPosition, space:float, vertical:bool) -> Box:
  'Shrink the plot window on the edge that carries the tick value labels.'
  if position == TicksPosition.bottom_left and ticks.label_side == Side.bottom_left:
    return replace(box, left=box.left + space) if vertical else replace(box, bottom=box.bottom - space)
  if position == TicksPosition.top_right and ticks.label_side == Side.top_right:
    return replace(box, right=box.right - space) if vertical else replace(box, top=box.top + space)
  return box


def _effective_ticks_position(ticks:TicksStyle, position:AxisPosition) -> TicksPosition:
  match position:
    case AxisPosition.bottom_left: return TicksPosition.bottom_left
    case AxisPosition.top_right: return TicksPosition.top_right
    case _: return ticks.position


def compute_layout_1d(plot:LinePlot) -> LayoutResult:
  '''
  Lay out a 1D plot.
  The horizontal margins hold the infinity markers; the X axis line is placed `x_axis_vertical` of the way
  down the plot window; the y transform is the identity, because only x carries data.
  '''
  x_range = plot.x_range()
  ticks = plot.x_ticks
  box = Box(0, 0, plot.width, plot.height).inset(plot.image_border.border_width)
  box = replace(box, left=box.left + plot.neg_inf_style.size, right=box.right - plot.pos_inf_style.size)
  box = replace(box, top=box.top + title_space(plot))
  if plot.x_axis.label_on:
    box = replace(box, bottom=box.bottom - plot.x_label_style.font_size * plot.text_margin)
  if plot.plot_window_on:
    box = box.inset(plot.image_border.margin)

  legend, legend_size, box = _layout_legend(plot, box, spacing=plot.x_label_style.font_size)

  label_space = x_label_space_1d(ticks, x_range)
  if plot.plot_window_on:
    if ticks.position == TicksPosition.bottom_left and ticks.outward_ticks_on:
      box = replace(box, bottom=box.bottom - ticks.max_tick_length)
    box = _reserve_tick_labels(box, ticks, ticks.position, label_space, vertical=False)

  axis_y = box.top + (box.bottom - box.top) * plot.x_axis_vertical
  box.check_positive()
  transform = Transform.for_box(box, x_range)
  layout = LayoutResult(
    plot=box,
    transform=transform,
    legend=legend,
    legend_size=legend_size,
    x_axis_y=axis_y,
    y_axis_x=transform.x(0) if 0 in x_range else None,
    x_axis_position=AxisPosition.crosses,
    y_axis_position=None,
    x_ticks_position=ticks.position,
    y_ticks_position=None,
    x_label_space=label_space,
    y_label_space=0,
    title_y=title_y(plot))
  logger.debug('1D layout: %s', layout)
  return layout


def compute_layout_2d(plot:XYPlot) -> LayoutResult:
  '''
  Lay out a 2D plot.
  Axes whose orthogonal range excludes zero are drawn on the nearer plot window edge, and carry their ticks there.
  '''
  x_range = plot.x_range()
  y_range = plot.y_range()
  x_ticks = plot.x_ticks
  y_ticks = plot.y_ticks
  box = Box(0, 0, plot.width, plot.height).inset(plot.image_border.border_width)
  box = replace(box, top=box.top + title_space(plot))
  if plot.x_axis.label_on:
    box = replace(box, bottom=box.bottom - plot.x_label_style.font_size * plot.text_margin)
  if plot.y_axis.label_on:
    box = replace(box, left=box.left + plot.y_label_style.font_size * plot.text_margin)

  if plot.plot_window_on:
    # Ends of the axes need room for half of the end tick value labels.
    x_font = x_ticks.label_style.font_size
    x_value_space = x_font * 2 if x_ticks.label_rotation is Rotation.horizontal else x_font / 2
    margin = max(plot.image_border.margin, x_value_space)
    box = replace(box, left=box.left + margin, right=box.right - margin)
    y_font = y_ticks.label_style.font_size
    y_value_space = y_font * 2 if y_ticks.label_rotation.is_vertical else y_font / 2
    margin = max(plot.image_border.margin, y_value_space)
    box = replace(box, top=box.top + margin, bottom=box.bottom - margin)

  legend, legend_size, box = _layout_legend(plot, box, spacing=plot.y_label_style.font_size)

  x_axis_pos = axis_position(y_range)
  y_axis_pos = axis_position(x_range)
  x_ticks_pos = _effective_ticks_position(x_ticks, x_axis_pos)
  y_ticks_pos = _effective_ticks_position(y_ticks, y_axis_pos)

  y_space = y_label_space(y_ticks, y_range)
  box = _reserve_tick_labels(box, y_ticks, y_ticks_pos, y_space, vertical=True)
  x_space = x_label_space_2d(x_ticks, x_range)
  box = _reserve_tick_labels(box, x_ticks, x_ticks_pos, x_space, vertical=False)
  if y_ticks.outward_ticks_on: box = replace(box, left=box.left + y_ticks.max_tick_length)
  if x_ticks.outward_ticks_on: box = replace(box, bottom=box.bottom - x_ticks.max_tick_length)

  box.check_positive()
  transform = Transform.for_box(box, x_range, y_range)
  layout = LayoutResult(
    plot=box,
    transform=transform,
    legend=legend,
    legend_size=legend_size,
    x_axis_y=_axis_line(x_axis_pos, box.bottom, box.top, transform.y),
    y_axis_x=_axis_line(y_axis_pos, box.left, box.right, transform.x),
    x_axis_position=x_axis_pos,
    y_axis_position=y_axis_pos,
    x_ticks_position=x_ticks_pos,
    y_ticks_position=y_ticks_pos,
    x_label_space=x_space,
    y_label_space=y_space,
    title_y=title_y(plot))
  logger.debug('2D layout: %s', layout)
  return layout


def compute_layout_boxplot(plot:XYPlot) -> LayoutResult:
  '''
  Lay out a box plot. The X axis is categorical: its tick labels are the series titles,
  so the X range only spaces the boxes evenly. The Y axis is always drawn on the left window edge.
  '''
  x_range = plot.x_range()
  y_range = plot.y_range()
  x_ticks = plot.x_ticks
  y_ticks = plot.y_ticks
  box = Box(0, 0, plot.width, plot.height).inset(plot.image_border.border_width)
  if plot.plot_window_on: box = box.inset(plot.image_border.margin)
  box = replace(box, top=box.top + title_space(plot))
  if plot.x_axis.label_on:
    box = replace(box, bottom=box.bottom - plot.x_label_style.font_size * (plot.text_margin + 0.5))
  if plot.y_axis.label_on:
    box = replace(box, left=box.left + plot.y_label_style.font_size * plot.text_margin)

  x_axis_pos = axis_position(y_range)
  x_ticks_pos = _effective_ticks_position(x_ticks, x_axis_pos)
  y_ticks_pos = TicksPosition.bottom_left

  y_space = y_label_space(y_ticks, y_range)
  if y_ticks.label_rotation.is_vertical: y_space = 2 * y_ticks.label_style.font_size * aspect_ratio
  box = _reserve_tick_labels(box, y_ticks, y_ticks_pos, y_space, vertical=True)
  x_space = 2 * x_ticks.label_style.font_size * aspect_ratio if x_ticks.labels_on else 0
  box = _reserve_tick_labels(box, x_ticks, x_ticks_pos, x_space, vertical=False)
  if y_ticks.outward_ticks_on: box = replace(box, left=box.left + y_ticks.max_tick_length)
  if x_ticks.outward_ticks_on: box = replace(box, bottom=box.bottom - x_ticks.max_tick_length)

  box.check_positive()
  transform = Transform.for_box(box, x_range, y_range)
  layout = LayoutResult(
    plot=box,
    transform=transform,
    legend=None,
    legend_size=None,
    x_axis_y=_axis_line(x_axis_pos, box.bottom, box.top, transform.y),
    y_axis_x=box.left,
    x_axis_position=x_axis_pos,
    y_axis_position=AxisPosition.bottom_left,
    x_ticks_position=x_ticks_pos,
    y_ticks_position=y_ticks_pos,
    x_label_space=x_space,
    y_label_space=y_space,
    title_y=title_y(plot))
  logger.debug('box plot layout: %s', layout)
  return layout


def _axis_line(position:AxisPosition, low_edge:float, high_edge:float, transform:Callable[[float],float]) -> float:
  'Output coordinate of an axis line: a window edge, or the transformed zero of the orthogonal axis.'
  match position:
    case AxisPosition.bottom_left: return low_edge
    case AxisPosition.top_right: return high_edge
    case _: return transform(0)
