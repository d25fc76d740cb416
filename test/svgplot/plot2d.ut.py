# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

import warnings
from math import inf, nan

from svgplot.exceptions import SvgPlotWarning
from svgplot.layout import compute_layout_2d
from svgplot.markers import PointShape, PointStyle
from svgplot.plot2d import bezier_path, BarOption, BarStyle, Plot2D, Series2D, straight_path
from svgplot.style import LineStyle
from svgplot.svg import Circle, ClipPath, G, Line, Path, Polygon
from svgplot.svg.document import Layer
from svgplot.svg.loader import parse_svg
from utest import utest, utest_val, utest_val_approx


# Paths.

utest_val([('M', 0, 5), ('L', 0, 0), ('L', 1, 1), ('L', 1, 5), ('Z',)],
  straight_path([(0, 0), (1, 1)], y0=5).commands, 'filled straight path is closed along y0')
utest_val([('M', 0, 0), ('L', 1, 1), ('L', 2, 0)],
  straight_path([(0, 0), (1, 1), (2, 0)]).commands, 'open straight path')
utest_val([], straight_path([]).commands, 'no points, no path')

d = bezier_path([(0, 0), (1, 1), (2, 0)])
utest_val(['M', 'S', 'S'], [c[0] for c in d.commands], 'bezier path commands')
utest_val_approx(('S', 0.8, 1.0, 1, 1), d.commands[1], 'control point lies along the neighbors of the end point')
utest_val_approx(('S', 2, -0.1, 2, 0), d.commands[2], 'last control point continues the last segment')
utest_val(straight_path([(0, 0), (1, 1)]).commands, bezier_path([(0, 0), (1, 1)]).commands,
  'two points are joined straight')

d = bezier_path([(0, 0), (1, 1), (2, 0)], y0=3)
utest_val([('M', 0, 3), ('L', 0, 0)], d.commands[:2], 'filled bezier path starts on y0')
utest_val([('L', 2, 3), ('Z',)], d.commands[-2:], 'filled bezier path ends on y0')


# Series.

s = Series2D({3: 1, 1: 2, 2: nan})
utest_val([1.0, 3.0], [x.value for x, _ in s.points], 'points are sorted by x')
utest_val(1, len(s.limits), 'limit points are kept apart')


# Rendering.

p = Plot2D(title='Smoke')
p.plot([(-5, -5), (0, 2), (5, 4), (8, 1)], 'line', line=LineStyle())
p.plot([(-8, 1), (-4, 6), (2, -3), (6, 5)], 'curve', line=LineStyle(bezier_on=True, line_on=False),
  point=PointStyle(shape=PointShape.square))
p.plot([(1, 2), (3, 4)], 'sticks', bar=BarStyle(BarOption.x_stick), point=PointStyle(shape=PointShape.none))
p.plot([(0, 2), (2, 4), (4, 0)], 'histogram', bar=BarStyle(BarOption.histogram), point=PointStyle(shape=PointShape.none))
p.plot([(nan, 3), (inf, 3)], 'limits')
doc = p.render()
layout = compute_layout_2d(p)

paths = list(doc.layer(Layer.data_lines).find_all(Path))
utest_val(2, len(paths), 'one path per line')
utest_val(True, all(c[0] in 'ML' for c in paths[0].data.commands), 'straight line')
utest_val(True, any(c[0] == 'S' for c in paths[1].data.commands), 'bezier curve')

points = doc.layer(Layer.data_points)
utest_val(4, len(list(points.find_all(Circle))), 'circlets of the first series')
utest_val(2, len(list(points.find_all(Line))), 'one stick per point')
histogram = list(points.find_all(Path))
utest_val(1, len(histogram), 'histogram path')
utest_val(2, sum(c[0] == 'Z' for c in histogram[0].data.commands), 'one closed column per interval')
utest_val_approx(layout.transform.y(1), histogram[0].data.commands[1][2], 'column height is area over width')

cones = list(doc.layer(Layer.limit_points).find_all(Polygon))
utest_val(2, len(cones), 'one cone per limit point')
utest_val_approx((layout.transform.x(0), layout.transform.y(3)), cones[0].attrs['points'].points[-1],
  'NaN x is drawn at zero')
utest_val_approx((layout.plot.right, layout.transform.y(3)), cones[1].attrs['points'].points[-1],
  'infinite x is drawn at the window edge')

svg = parse_svg(p.render_str())
clip = svg.find(ClipPath, id='plot_window')
utest_val(1, len(list(clip.pick_all('rect'))), 'plot window clip rectangle')
utest_val(True, all(not g.is_empty for g in svg.find_all(G)), 'no empty groups')


# A zero width histogram column is skipped with a warning.

p = Plot2D()
p.plot([(1, 1), (1, 2), (3, 2)], bar=BarStyle(BarOption.histogram))
with warnings.catch_warnings(record=True) as caught:
  warnings.simplefilter('always')
  doc = p.render()
utest_val(True, any(issubclass(w.category, SvgPlotWarning) for w in caught), 'zero width column warns')
utest(1, lambda: sum(c[0] == 'Z' for c in doc.layer(Layer.data_points).find(Path).data.commands))


# Autoscaling.

p = Plot2D(x_autoscale=True, y_autoscale=True)
p.plot([(1, 100), (9, 200), (nan, 1e6)])
p.render()
utest_val(True, p.x_min <= 1 and p.x_max >= 9, f'autoscaled x: {p.x_min}..{p.x_max}')
utest_val(True, p.y_min <= 100 and 200 <= p.y_max < 1e6, f'autoscaled y: {p.y_min}..{p.y_max}')
