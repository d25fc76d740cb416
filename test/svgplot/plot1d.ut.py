# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

import warnings
from dataclasses import replace
from io import StringIO
from math import inf, nan

from svgplot.exceptions import LayoutError, RangeError, SvgPlotWarning
from svgplot.layout import compute_layout_1d
from svgplot.markers import PointShape, PointStyle
from svgplot.plot1d import Plot1D, Series1D
from svgplot.svg import Circle, Ellipse, G, Line, Polygon, Text
from svgplot.svg.document import Layer
from svgplot.svg.loader import parse_svg
from svgplot.uncertain import Unc
from utest import utest_exc, utest_val, utest_val_approx


def layer(svg, layer:Layer) -> G:
  return svg.find(G, id=layer.value)


# Race times.

p = Plot1D(title='Race Times')
p.set_x_range(-1, 11)
p.legend = replace(p.legend, on=True)
p.plot([3.1, 4.2], 'Dan')
p.plot([2.1, 7.8], 'Elaine')
text = p.render_str()
svg = parse_svg(text)

utest_val(4, len(list(layer(svg, Layer.data_points).find_all(Line))), 'one marker per value')
utest_val(2, len(list(layer(svg, Layer.legend_points).pick_all(G))), 'one legend row per series')
utest_val(['Dan', 'Elaine'], [t.text for t in layer(svg, Layer.legend_text).find_all(Text)], 'legend titles')
utest_val('Race Times', layer(svg, Layer.title).find(Text).text, 'title text')
utest_val(True, all(not g.is_empty for g in svg.find_all(G)), 'no empty groups')
utest_val(text, p.render_str(), 'rendering twice gives the same document')

buf = StringIO()
p.write(buf)
utest_val(text, buf.getvalue(), 'write renders the same document')


# Values outside the range are not drawn; limits are.

p = Plot1D()
p.set_x_range(1, 10)
p.plot([1, 20, nan, inf, -inf], 'limits')
svg = p.render()
utest_val(1, len(list(svg.layer(Layer.data_points).find_all(Line))), 'out of range value is skipped')
cones = list(svg.layer(Layer.limit_points).find_all(Polygon))
utest_val(3, len(cones), 'one cone per limit value')

layout = compute_layout_1d(p)
box = layout.plot
limit_y = layout.x_axis_y + 3
tips = [c.attrs['points'].points[-1] for c in cones]
utest_val_approx((box.left, limit_y), tips[0], 'NaN is marked at zero, clamped to the window')
utest_val_approx((box.right + p.pos_inf_style.size / 2, limit_y), tips[1], 'positive infinity is marked beyond the right edge')
utest_val_approx((box.left - p.neg_inf_style.size / 2, limit_y), tips[2], 'negative infinity is marked beyond the left edge')

p.set_x_range(-10, 10)
nan_tip = next(p.render().layer(Layer.limit_points).find_all(Polygon)).attrs['points'].points[-1]
utest_val_approx(compute_layout_1d(p).transform.x(0), nan_tip[0], 'NaN is marked at zero when zero is in range')

s = Series1D([1, nan, 2])
utest_val(2, len(s.values), 'normal values')
utest_val(1, len(s.limits), 'limit values')


# An overflowing title warns.

p = Plot1D(title='x' * 100)
with warnings.catch_warnings(record=True) as caught:
  warnings.simplefilter('always')
  p.render()
utest_val(True, any(issubclass(w.category, SvgPlotWarning) for w in caught), 'overflowing title warns')

with warnings.catch_warnings(record=True) as caught:
  warnings.simplefilter('always')
  Plot1D(title='Short').render()
utest_val([], [w for w in caught if 'Short' in str(w.message)], 'short title does not warn')


# Autoscaling.

p = Plot1D(x_autoscale=True)
p.plot([5, 20])
p.render()
utest_val((5.0, 20.0), (p.x_min, p.x_max), 'autoscaled range')
utest_val(2.5, p.x_ticks.major_interval, 'autoscaled tick interval')

p.set_x_range(0, 30)
utest_val(False, p.x_autoscale, 'setting the range turns autoscaling off')
utest_exc(RangeError, p.set_x_range, 3, 3)


# Uncertainty ellipses.

p = Plot1D()
p.plot([Unc(1, sd=0.5)], point=PointStyle(shape=PointShape.unc_ellipse))
doc = p.render()
utest_val(1, len(list(doc.layer(Layer.unc1).find_all(Ellipse))), 'one standard deviation ellipse')
utest_val(1, len(list(doc.layer(Layer.unc3).find_all(Ellipse))), 'three standard deviation ellipse')
utest_val(1, len(list(doc.layer(Layer.data_points).find_all(Circle))), 'center dot')


# The axis line must lie inside the window.

p = Plot1D(x_axis_vertical=1.5)
p.plot([1])
utest_exc(LayoutError, p.render)
