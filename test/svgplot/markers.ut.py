# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from svgplot.exceptions import ConfigError
from svgplot.markers import CustomGlyph, draw_legend_marker, draw_point, PointShape, PointStyle, unc_radius
from svgplot.svg import Circle, G, Line, Polygon, Rect, Text, TSpan
from svgplot.text import Rotation
from svgplot.uncertain import Unc
from svgplot.values import draw_point_value, fmt_point_value, label_anchor, ValueStyle
from utest import utest, utest_approx, utest_exc, utest_val


def drawn(shape, size=10) -> G:
  g = G()
  draw_point(g, 50, 50, PointStyle(shape=shape, size=size))
  return g


# Markers.

c = drawn(PointShape.circlet).pick(Circle)
utest_val((50, 50, 5), (c.attrs['cx'], c.attrs['cy'], c.attrs['r']), 'circlet diameter is the size')
r = drawn(PointShape.square).pick(Rect)
utest_val((45, 45, 10, 10), (r.attrs['x'], r.attrs['y'], r.attrs['width'], r.attrs['height']), 'square side is the size')

l = drawn(PointShape.horizontal_line).pick(Line)
utest_val(l.attrs['y1'], l.attrs['y2'], 'horizontal line is horizontal')
l = drawn(PointShape.vertical_line).pick(Line)
utest_val(l.attrs['x1'], l.attrs['x2'], 'vertical line is vertical')
utest_val(2, len(list(drawn(PointShape.outside_window).pick_all(Line))), 'outside window marker is a cross')

cone = drawn(PointShape.cone).pick(Polygon)
utest_val((50.0, 50.0), cone.attrs['points'].points[-1], 'cone tip is on the point')
utest_val(True, all(y < 50 for _, y in cone.attrs['points'].points[:2]), 'cone points down at the point')

utest_val([], list(drawn(PointShape.none).child_nodes()), 'no marker')
utest_val('&#x2605;', drawn(PointShape.star).pick(Text).text, 'star glyph')
utest_val('&#x3A9;', drawn(CustomGlyph('&#x3A9;')).pick(Text).text, 'custom glyph')

utest_exc(ValueError, draw_point, G(), 0, 0, PointStyle(shape=PointShape.unc_ellipse))
utest_exc(ConfigError, PointStyle, size=-1)
utest_exc(ConfigError, PointStyle, shape='circle')

g = G()
draw_legend_marker(g, 10, 10, PointStyle(shape=PointShape.unc_ellipse, size=8))
utest(4, lambda: g.pick(Circle).attrs['r'])

utest(5, unc_radius, lambda v: v * 10, 1, 0.5)
utest(1.0, unc_radius, lambda v: v * 10, 1, 0)


# Value labels.

utest('1.23', fmt_point_value, Unc(1.23456), ValueStyle())
utest('x=1.23', fmt_point_value, Unc(1.23456), ValueStyle(prefix='x='))
utest('1.235', fmt_point_value, Unc(1.23456, sd=0.0123), ValueStyle(precision=0))
utest('1.23', fmt_point_value, Unc(1.23456), ValueStyle(precision=0))
utest_exc(ConfigError, ValueStyle, rotation='up')

utest_approx((43.5, 23.0, 'end', Rotation.horizontal), label_anchor, 50, 20, Rotation.leftward, 5, 10)
utest((50, 10, 'middle', Rotation.horizontal), label_anchor, 50, 20, Rotation.horizontal, 5, 10)

g = G()
t = draw_point_value(g, 50, 20, ValueStyle(plusminus_on=True, df_on=True), PointStyle(size=5),
  Unc(1.5, sd=0.5, df=10))
utest_val('1.5', t._[0], 'value text comes first')
utest_val(3, len(list(t.pick_all(TSpan))), 'plus-minus sign, uncertainty and degrees of freedom')
utest_val('middle', t.attrs['text-anchor'], 'horizontal labels are centered')
utest_val(10, t.attrs['y'], 'horizontal labels are above the marker')

t = draw_point_value(G(), 50, 20, ValueStyle(), PointStyle(), Unc(1.5, sd=0.5, df=10))
utest_val([], list(t.pick_all(TSpan)), 'annotations are off by default')

u = Unc(1.5, sd=0.0123)
t = draw_point_value(G(), 50, 20, ValueStyle(plusminus_on=True), PointStyle(), u)
utest_val('0.012', list(t.pick_all(TSpan))[1].text, 'uncertainty is rounded to two significant digits')
t = draw_point_value(G(), 50, 20, ValueStyle(plusminus_on=True), PointStyle(), u, unc_sig_digits=1)
utest_val('0.01', list(t.pick_all(TSpan))[1].text, 'uncertainty is rounded to one significant digit')
t = draw_point_value(G(), 50, 20, ValueStyle(plusminus_on=True), PointStyle(), u, text_plusminus=2)
utest_val('0.025', list(t.pick_all(TSpan))[1].text, 'uncertainty is scaled before rounding')
