# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from svgplot.axis import (axis_position, AxisPosition, AxisRange, fmt_tick_label, iter_ticks, longest_tick_label,
  major_tick_values, minor_tick_values, Side, TicksStyle)
from svgplot.exceptions import ConfigError
from svgplot.text import estimate_width
from utest import utest, utest_approx, utest_exc, utest_val


utest(list(range(-10, 11, 2)), major_tick_values, -10, 10, 2)
utest_approx([0.1, 0.2, 0.3], major_tick_values, 0.1, 0.35, 0.1)
utest([0.0, 2.5, 5.0], major_tick_values, -1, 6, 2.5)
utest([0.5, 1.5], minor_tick_values, 0, 2, 1, 1)
utest([], minor_tick_values, 0, 2, 1, 0)
utest_approx([-0.75, -0.5, -0.25], minor_tick_values, -1, 0, 1, 3)

utest([(0, True), (1, True), (2, True), (0.5, False), (1.5, False)],
  lambda: list(iter_ticks(0, 2, TicksStyle(major_interval=1, num_minor=1))))

ticks = TicksStyle()
utest('0', fmt_tick_label, -0.0, ticks)
utest('2.5', fmt_tick_label, 2.5, ticks)
utest('1e6', fmt_tick_label, 1e6, ticks)

utest(estimate_width('-10', ticks.label_style), longest_tick_label, -10, 10, ticks)
utest(0, longest_tick_label, -10, 10, TicksStyle(label_side=Side.none))

utest_val(5, ticks.max_tick_length, 'longest tick')
utest_val(0, TicksStyle(outward_ticks_on=False).max_tick_length, 'no ticks drawn')
utest_val(0.4, ticks.minor_interval, 'minor interval')
utest_exc(ConfigError, TicksStyle, major_interval=0)
utest_exc(ConfigError, TicksStyle, num_minor=-1)

utest(AxisPosition.bottom_left, axis_position, AxisRange(1, 2))
utest(AxisPosition.top_right, axis_position, AxisRange(-2, -1))
utest(AxisPosition.crosses, axis_position, AxisRange(-1, 1))
utest(AxisPosition.crosses, axis_position, AxisRange(0, 1))
utest_val(True, 0 in AxisRange(-1, 1), 'range contains zero')
utest_val(False, 2 in AxisRange(-1, 1), 'range excludes values beyond max')
