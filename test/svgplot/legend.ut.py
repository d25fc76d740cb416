# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

import warnings

from svgplot.exceptions import ConfigError, SvgPlotWarning
from svgplot.geometry import Box
from svgplot.legend import LegendEntry, LegendPlace, legend_spacing, place_legend, size_legend
from svgplot.markers import PointShape, PointStyle
from svgplot.style import BoxStyle, LineStyle, TextStyle
from utest import utest, utest_exc, utest_val, utest_val_approx


text_style = TextStyle(font_size=10)
box_style = BoxStyle(width=1, margin=2)
entries = [
  LegendEntry('a', PointStyle(size=5)),
  LegendEntry('bbbb', PointStyle(size=5), LineStyle()),
]

utest(10, legend_spacing, entries, text_style)
utest(20, legend_spacing, [LegendEntry('big', PointStyle(size=20))], text_style)

size = size_legend(entries, '', text_style, box_style, lines_on=True)
# Frame 2 * (2 + 1); row: spacing, marker, line, title of four glyphs (24), spacing.
utest_val_approx(6 + 10 + 15 + 15 + 24 + 10, size.width, 'legend width')
utest_val_approx(10 + 2 * 10 * 2, size.height, 'legend height')
utest_val(True, size.lines_on, 'lines are on when a series draws its line')

size_no_lines = size_legend(entries, '', text_style, box_style, lines_on=False)
utest_val_approx(size.width - 15, size_no_lines.width, 'legend width without line samples')

size_header = size_legend(entries, 'Header', text_style, box_style)
utest_val_approx(size.height + 20, size_header.height, 'a header adds two font sizes')


# Placement.

plot = Box(10, 40, 480, 380)
spacing = 10

legend, window = place_legend(LegendPlace.outside_right, plot, size, image_width=500, image_height=400, spacing=spacing,
  border_inset=3, title_bottom=30)
assert legend is not None
utest_val_approx(plot.right - size.width - spacing, window.right, 'outside_right shrinks the plot window')
utest_val_approx(window.right + spacing, legend.left, 'outside_right legend is one spacing right of the window')
utest_val_approx(size.width, legend.width, 'legend box width')
utest_val(plot.top, legend.top, 'legend aligns with the window top')

legend, window = place_legend(LegendPlace.outside_left, plot, size, image_width=500, image_height=400, spacing=spacing,
  border_inset=3, title_bottom=30)
assert legend is not None
utest_val(3, legend.left, 'outside_left legend starts at the border inset')
utest_val_approx(plot.left + size.width + spacing / 2, window.left, 'outside_left shrinks the plot window')

legend, window = place_legend(LegendPlace.outside_top, plot, size, image_width=500, image_height=400, spacing=spacing,
  border_inset=3, title_bottom=30)
assert legend is not None
utest_val(40, legend.top, 'outside_top legend is below the title')
utest_val_approx(250, legend.center_x, 'outside_top legend is centered')

legend, window = place_legend(LegendPlace.nowhere, plot, size, image_width=500, image_height=400, spacing=spacing,
  border_inset=3, title_bottom=30)
utest_val(None, legend, 'no legend box for nowhere')
utest_val(plot, window, 'nowhere leaves the window unchanged')

legend, window = place_legend(LegendPlace.somewhere, plot, size, image_width=500, image_height=400, spacing=spacing,
  border_inset=3, title_bottom=30, position=(100, 100))
utest_val(Box(100, 100, 100 + size.width, 100 + size.height), legend, 'somewhere places the legend at its position')
utest_val(plot, window, 'somewhere overlays the window')

utest_exc(ConfigError, place_legend, LegendPlace.somewhere, plot, size, image_width=500, image_height=400,
  spacing=spacing, border_inset=3, title_bottom=30, position=(600, 100))
utest_exc(ConfigError, place_legend, LegendPlace.somewhere, plot, size, image_width=500, image_height=400,
  spacing=spacing, border_inset=3, title_bottom=30)

# A legend that does not fit only warns.
with warnings.catch_warnings(record=True) as caught:
  warnings.simplefilter('always')
  place_legend(LegendPlace.somewhere, plot, size, image_width=500, image_height=400, spacing=spacing,
    border_inset=3, title_bottom=30, position=(490, 100))
utest_val(True, any(issubclass(w.category, SvgPlotWarning) for w in caught), 'overflowing legend warns')

utest_val(False, LegendEntry('x', PointStyle(shape=PointShape.none)).draws_line, 'no line style means no line')
