# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Drawing of the plot frame: backgrounds, title, axis lines, ticks, grids, tick value labels and axis labels.

These functions are shared by the plot classes. Each takes the plot as a read-only source of configuration,
the computed `LayoutResult`, and the layer groups to draw into.
'''

from enum import Enum
from typing import NamedTuple
from warnings import warn

from .axis import AxisRange, iter_ticks, fmt_tick_label, Side, TicksPosition, TicksStyle
from .exceptions import SvgPlotWarning
from .layout import FramedPlot, LayoutResult, XYPlot
from .style import AxisLineStyle, SvgStyle
from .svg import G, PathData
from .svg.document import SvgDocument
from .text import check_text_length, Rotation, sin45


window_tolerance = 0.01 # Output units by which a tick may lie outside the plot window and still be drawn.


class AxisLayers(NamedTuple):
  'The layer groups that one axis draws into.'
  line:G
  major_ticks:G
  minor_ticks:G
  major_grid:G
  minor_grid:G
  values:G


def style_axis(doc:SvgDocument, axis:AxisLineStyle, ticks:TicksStyle, *, line:Enum, major_ticks:Enum, minor_ticks:Enum,
 major_grid:Enum, minor_grid:Enum, values:Enum) -> AxisLayers:
  'Set the presentation attributes of the layers of one axis, and return the layer groups.'
  return AxisLayers(
    line=doc.set_layer_style(line, SvgStyle(stroke=axis.color, width=axis.width)),
    major_ticks=doc.set_layer_style(major_ticks, SvgStyle(stroke=ticks.major_tick_color, width=ticks.major_tick_width)),
    minor_ticks=doc.set_layer_style(minor_ticks, SvgStyle(stroke=ticks.minor_tick_color, width=ticks.minor_tick_width)),
    major_grid=doc.set_layer_style(major_grid, SvgStyle(stroke=ticks.major_grid_color, width=ticks.major_grid_width)),
    minor_grid=doc.set_layer_style(minor_grid, SvgStyle(stroke=ticks.minor_grid_color, width=ticks.minor_grid_width)),
    values=doc.set_layer_style(values, text_style=ticks.label_style, fill=str(ticks.label_color)))


def draw_backgrounds(doc:SvgDocument, plot:FramedPlot, layout:LayoutResult, *, image:Enum, window:Enum) -> None:
  'Draw the image background and border, and the plot window rectangle if the window is on.'
  doc.set_layer_style(image, plot.image_border.svg_style())
  doc.layer(image).rect(0, 0, plot.width, plot.height)
  if plot.plot_window_on:
    box = layout.plot
    doc.set_layer_style(window, plot.plot_window_border.svg_style())
    doc.layer(window).rect(box.left, box.top, box.width, box.height)


def draw_title(doc:SvgDocument, plot:FramedPlot, layout:LayoutResult, *, layer:Enum) -> None:
  if not plot.title: return
  check_text_length(plot.title, plot.title_style, plot.width)
  g = doc.set_layer_style(layer, text_style=plot.title_style)
  g.add_text(plot.width / 2, layout.title_y, plot.title, anchor='middle')


def add_path(g:G, d:PathData) -> None:
  'Append a path to `g`, unless it has no commands.'
  if len(d): g.path(d)


# Offsets of X tick value labels, in font sizes: rotation -> (dx, (dy, anchor) below the ticks, (dy, anchor) above them).
x_label_offsets:dict[Rotation,tuple[float,tuple[float,str],tuple[float,str]]] = {
  Rotation.horizontal: (0, (1.3, 'middle'), (-0.7, 'middle')),
  Rotation.upward: (0.2, (0.6, 'end'), (-0.5, 'start')),
  Rotation.downward: (-0.3, (0.5, 'start'), (-0.5, 'end')),
  Rotation.steepup: (-0.3, (0.5, 'start'), (-0.5, 'end')),
  Rotation.steepdown: (-0.3, (0.5, 'start'), (-0.5, 'end')),
  Rotation.uphill: (0.5, (sin45, 'end'), (-0.3, 'start')),
  Rotation.slopeup: (0.5, (sin45, 'end'), (-0.2, 'start')),
  Rotation.downhill: (-0.3, (0.7, 'start'), (-0.3, 'end')),
  Rotation.slopedownhill: (-0.3, (0.7, 'start'), (-0.3, 'end')),
}

# Offsets of Y tick value labels, in font sizes: rotation -> ((dx, dy, anchor) left of the ticks, (dx, dy, anchor) right).
y_label_offsets:dict[Rotation,tuple[tuple[float,float,str],tuple[float,float,str]]] = {
  Rotation.horizontal: ((-0.5, 0.2, 'end'), (0.5, 0.2, 'start')),
  Rotation.upsidedown: ((-0.5, -0.1, 'start'), (0.5, -0.1, 'end')),
  Rotation.uphill: ((-0.2, -0.2, 'end'), (0.7, 0.2, 'start')),
  Rotation.slopeup: ((-0.2, -0.2, 'end'), (0.7, 0.2, 'start')),
  Rotation.downhill: ((-0.7, 0.3, 'end'), (0.1, -0.3, 'start')),
  Rotation.slopedownhill: ((-0.7, 0.3, 'end'), (0.1, -0.3, 'start')),
  Rotation.steepdown: ((-0.5, 0.3, 'end'), (0.1, -0.3, 'start')),
  Rotation.upward: ((-0.7, -0.1, 'middle'), (1.5, -0.1, 'middle')),
  Rotation.steepup: ((-0.5, -0.1, 'middle'), (1.5, -0.1, 'middle')),
  Rotation.downward: ((-1.2, -0.1, 'middle'), (0.7, -0.1, 'middle')),
}


def _check_label_rotation(ticks:TicksStyle, offsets:dict, axis_name:str) -> bool:
  if not ticks.labels_on: return False
  if ticks.label_rotation in offsets: return True
  warn(f'{axis_name} tick value labels are not drawn at rotation {ticks.label_rotation.name}', SvgPlotWarning, stacklevel=3)
  return False


def draw_x_axis(layers:AxisLayers, plot:FramedPlot, layout:LayoutResult, x_range:AxisRange, *,
 orthogonal_line_on:bool=False) -> None:
  '''
  Draw the horizontal axis line with its ticks, grid lines and tick value labels.
  With ticks on the axis and `orthogonal_line_on`, the zero tick and its label are omitted,
  because the vertical axis line passes through them.
  '''
  box = layout.plot
  ticks = plot.x_ticks
  position = layout.x_ticks_position
  if plot.x_axis.axis_line_on:
    layers.line.line(box.left, layout.x_axis_y, box.right, layout.x_axis_y)
    if position == TicksPosition.bottom_left and layout.x_axis_y != box.bottom:
      layers.line.line(box.left, box.bottom, box.right, box.bottom)
    elif position == TicksPosition.top_right and layout.x_axis_y != box.top:
      layers.line.line(box.left, box.top, box.right, box.top)

  match position:
    case TicksPosition.bottom_left: base = box.bottom
    case TicksPosition.top_right: base = box.top
    case _: base = layout.x_axis_y
  if plot.plot_window_on:
    grid_top = box.top
    grid_bottom = box.bottom
  else:
    grid_top = plot.title_style.font_size * plot.text_margin if plot.title else 0
    grid_bottom = plot.height - (plot.x_label_style.font_size * plot.text_margin if plot.x_axis.label_on else 0)

  labels_on = _check_label_rotation(ticks, x_label_offsets, 'X')
  skip_zero = position == TicksPosition.on_axis and orthogonal_line_on
  font = ticks.label_style.font_size
  tick_paths = {True: PathData(), False: PathData()}
  grid_paths = {True: PathData(), False: PathData()}
  for value, major in iter_ticks(x_range.min, x_range.max, ticks):
    if skip_zero and value == 0: continue
    x = layout.transform.x(value)
    if not (box.left - window_tolerance <= x <= box.right + window_tolerance): continue
    if (ticks.major_grid_on if major else ticks.minor_grid_on):
      grid_paths[major].M(x, grid_top).L(x, grid_bottom)
    length = ticks.major_tick_length if major else ticks.minor_tick_length
    y_up = base - length if ticks.inward_ticks_on else base
    y_down = base + length if ticks.outward_ticks_on else base
    if y_up != y_down: tick_paths[major].M(x, y_up).L(x, y_down)
    if not (major and labels_on): continue
    dx, below, above = x_label_offsets[ticks.label_rotation]
    if ticks.label_side == Side.bottom_left: y, anchor = y_down + below[0] * font, below[1]
    else: y, anchor = y_up + above[0] * font, above[1]
    layers.values.add_text(x + dx * font, y, fmt_tick_label(value, ticks), anchor=anchor,
      rotation=ticks.label_rotation.degrees)

  add_path(layers.major_ticks, tick_paths[True])
  add_path(layers.minor_ticks, tick_paths[False])
  add_path(layers.major_grid, grid_paths[True])
  add_path(layers.minor_grid, grid_paths[False])


def draw_y_axis(layers:AxisLayers, plot:XYPlot, layout:LayoutResult, y_range:AxisRange, *,
 orthogonal_line_on:bool=False) -> None:
  'Draw the vertical axis line with its ticks, grid lines and tick value labels.'
  box = layout.plot
  ticks = plot.y_ticks
  position = layout.y_ticks_position
  axis_x = box.left if layout.y_axis_x is None else layout.y_axis_x
  if plot.y_axis.axis_line_on:
    layers.line.line(axis_x, box.top, axis_x, box.bottom)
    if position == TicksPosition.bottom_left and axis_x != box.left:
      layers.line.line(box.left, box.top, box.left, box.bottom)
    elif position == TicksPosition.top_right and axis_x != box.right:
      layers.line.line(box.right, box.top, box.right, box.bottom)

  match position:
    case TicksPosition.bottom_left: base = box.left
    case TicksPosition.top_right: base = box.right
    case _: base = axis_x

  labels_on = _check_label_rotation(ticks, y_label_offsets, 'Y')
  skip_zero = position == TicksPosition.on_axis and orthogonal_line_on
  font = ticks.label_style.font_size
  tick_paths = {True: PathData(), False: PathData()}
  grid_paths = {True: PathData(), False: PathData()}
  for value, major in iter_ticks(y_range.min, y_range.max, ticks):
    if skip_zero and value == 0: continue
    y = layout.transform.y(value)
    if not (box.top - window_tolerance <= y <= box.bottom + window_tolerance): continue
    if (ticks.major_grid_on if major else ticks.minor_grid_on):
      grid_paths[major].M(box.left, y).L(box.right, y)
    length = ticks.major_tick_length if major else ticks.minor_tick_length
    x_left = base - length if ticks.outward_ticks_on else base
    x_right = base + length if ticks.inward_ticks_on else base
    if x_left != x_right: tick_paths[major].M(x_left, y).L(x_right, y)
    if not (major and labels_on): continue
    left, right = y_label_offsets[ticks.label_rotation]
    if ticks.label_side == Side.bottom_left:
      dx, dy, anchor = left
      x = x_left + dx * font
    else:
      dx, dy, anchor = right
      x = x_right + dx * font
    layers.values.add_text(x, y + dy * font, fmt_tick_label(value, ticks), anchor=anchor,
      rotation=ticks.label_rotation.degrees)

  add_path(layers.major_ticks, tick_paths[True])
  add_path(layers.minor_ticks, tick_paths[False])
  add_path(layers.major_grid, grid_paths[True])
  add_path(layers.minor_grid, grid_paths[False])


def draw_x_label(doc:SvgDocument, plot:FramedPlot, layout:LayoutResult, *, layer:Enum) -> None:
  'Draw the X axis label, centered below the plot window and clear of the ticks and their value labels.'
  if not plot.x_axis.label_on: return
  box = layout.plot
  ticks = plot.x_ticks
  label_font = plot.x_label_style.font_size
  y = box.bottom
  if layout.x_ticks_position == TicksPosition.bottom_left:
    if ticks.label_side == Side.bottom_left:
      y += ticks.label_style.font_size if ticks.label_rotation is Rotation.horizontal else layout.x_label_space
    y += label_font * 1.3
    if ticks.outward_ticks_on: y += 1.1 * ticks.max_tick_length
  else:
    y += label_font * 1.7
  text = plot.x_axis.label_text()
  check_text_length(text, plot.x_label_style, box.width)
  g = doc.set_layer_style(layer, text_style=plot.x_label_style)
  g.add_text(box.center_x, y, text, anchor='middle')


def draw_y_label(doc:SvgDocument, plot:XYPlot, layout:LayoutResult, *, layer:Enum) -> None:
  'Draw the Y axis label vertically, centered to the left of the plot window and clear of the tick value labels.'
  if not plot.y_axis.label_on: return
  box = layout.plot
  ticks = plot.y_ticks
  label_font = plot.y_label_style.font_size
  value_font = ticks.label_style.font_size
  if layout.y_ticks_position == TicksPosition.bottom_left:
    x = box.left
    if ticks.outward_ticks_on: x -= 1.1 * ticks.max_tick_length
    if ticks.label_side == Side.bottom_left:
      if ticks.label_rotation.is_vertical: x -= value_font * 1.3
      else: x -= layout.y_label_space
      x -= 0.6 * (label_font + value_font)
    else:
      x -= label_font * 1.7
  else:
    x = plot.image_border.border_width + plot.image_border.margin + label_font
  text = plot.y_axis.label_text()
  check_text_length(text, plot.y_label_style, box.height)
  g = doc.set_layer_style(layer, text_style=plot.y_label_style)
  g.add_text(x, (box.top + box.bottom) / 2, text, anchor='middle', rotation=Rotation.upward.degrees)
