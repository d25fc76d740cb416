# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from svgplot.autoscale import (AutoScale, mnmx, rounddown10, rounddown2, roundup10, roundup2, roundup5, scale_axis,
  scale_points, scale_values, Steps)
from svgplot.axis import AxisRange
from svgplot.exceptions import ConfigError, DegenerateRangeError, RangeError
from svgplot.uncertain import Unc
from utest import utest, utest_exc, utest_val


# Axis ranges.

utest_exc(RangeError, AxisRange, 1, 1)
utest_exc(RangeError, AxisRange, 2, 1)
utest_exc(RangeError, AxisRange, 1.0, 1.0 + 1e-15)
utest_exc(RangeError, AxisRange, 0, 1e-306)
utest(AxisRange(0, 1e-300), AxisRange, 0, 1e-300)

r = AxisRange(-1.5, 2.5)
utest_val(-1.5, r.min, 'min is stored exactly')
utest_val(2.5, r.max, 'max is stored exactly')
utest_val(4.0, r.span, 'span')
utest_val(True, 0 in r, 'zero in range')
utest_val(False, 3 in r, 'three not in range')


# Step rounding.

utest(5.0, roundup10, 3.7)
utest(2.0, rounddown10, 3.7)
utest(500.0, roundup10, 370)
utest(-2.0, roundup10, -3.7)
utest(-5.0, rounddown10, -3.7)
utest(8.0, roundup2, 7)
utest(6.0, rounddown2, 7)
utest(10.0, roundup5, 6)
utest(0.0, roundup10, 0)


# Scaling.

utest(AutoScale(1.0, 9.0, 1.0, 9), scale_axis, 1, 9)
utest(AutoScale(0.0, 20.0, 2.5, 9), scale_axis, 5, 20, include_zero=True)
utest(AutoScale(0.0, 20.0, 2.5, 9), scale_values, [5, 20], include_zero=True)
utest(AutoScale(5.0, 20.0, 2.5, 7), scale_values, [5, 20], tight=1e-6)

for lo, hi in [(0, 1), (1, 9), (-3.7, 12.2), (1000, 1001), (-0.002, 0.0035), (5, 20), (-1e6, 3e6)]:
  for n in (2, 4, 6, 10):
    s = scale_axis(lo, hi, min_ticks=n)
    utest_val(True, s.tick_count >= n, f'tick count of {lo}..{hi} is at least {n}: {s}')
    utest_val(True, s.axis_min <= lo and s.axis_max >= hi, f'axis {lo}..{hi} covers the data: {s}')

for lo, hi in [(5, 20), (0.1, 0.3), (3, 3000)]:
  s = scale_axis(lo, hi, include_zero=True)
  utest_val(True, s.axis_min <= 0, f'axis of {lo}..{hi} includes zero: {s}')

s = scale_axis(-20, -5, include_zero=True)
utest_val(True, s.axis_max >= 0, f'negative axis includes zero: {s}')

utest_exc(DegenerateRangeError, scale_axis, 1, 1)
utest_exc(DegenerateRangeError, scale_axis, 0, float('inf'))
utest_exc(ConfigError, scale_axis, 0, 1, tight=2)
utest_exc(ConfigError, scale_axis, 0, 1, min_ticks=1)


# Limits and uncertainty.

utest((1.0, 3.0), mnmx, [float('nan'), 3.0, 1.0, float('inf'), 2.0])
utest_exc(DegenerateRangeError, mnmx, [1.0, float('nan')])

# Values are widened by three standard deviations.
s = scale_values([Unc(10, sd=1), Unc(20, sd=1)])
utest_val(True, s.axis_min <= 7 and s.axis_max >= 23, f'uncertain values are widened: {s}')

x_scale, y_scale = scale_points([(1, 100), (9, 200), (float('nan'), 1e6)])
utest_val(True, x_scale.axis_min <= 1 and x_scale.axis_max >= 9, f'x scale: {x_scale}')
utest_val(True, y_scale.axis_max < 1e6, f'limit points are skipped: {y_scale}')

s = scale_axis(3, 37, steps=Steps.base10)
utest_val(True, s.axis_min <= 2 and s.axis_max >= 50, f'base 10 steps: {s}')
