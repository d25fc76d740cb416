# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from svgplot.color import blank, Color, named, red, rgb, to_color, white, yellow
from svgplot.exceptions import ConfigError
from svgplot.style import AxisLineStyle, BoxStyle, LineStyle, SvgStyle, TextStyle
from utest import utest, utest_exc, utest_val


# Colors.

utest('red', str, red)
utest('rgb(1,2,3)', str, rgb(1, 2, 3))
utest('none', str, blank)
utest((255, 255, 0), lambda: named('yellow').rgb)
utest(blank, to_color, None)
utest(blank, to_color, 'none')
utest(Color(1, 2, 3), to_color, (1, 2, 3))
utest(red, to_color, 'red')
utest_exc(ConfigError, named, 'nocolor')
utest_exc(ConfigError, Color, 256, 0, 0)


# Styles emit only the attributes that are set.

utest({}, SvgStyle().attrs)
utest({'stroke': 'red', 'stroke-width': 2}, SvgStyle(stroke=red, width=2).attrs)
utest({'fill': 'none'}, SvgStyle(fill=blank).attrs)
utest_exc(ConfigError, SvgStyle, width=-1)

utest({'font-size': 10, 'font-family': 'Verdana'}, TextStyle(font_size=10).attrs)
utest({'font-size': 10, 'font-weight': 'bold', 'text-decoration': 'underline'},
  TextStyle(font_size=10, font_family='', font_weight='bold', font_decoration='underline').attrs)
utest_exc(ConfigError, TextStyle, font_size=0)

utest(SvgStyle(stroke=yellow, fill=white, width=1), BoxStyle().svg_style)
utest(SvgStyle(fill=white), BoxStyle(border_on=False).svg_style)
utest_val(0, BoxStyle(border_on=False, width=3).border_width, 'no border, no border width')

utest_val(False, LineStyle(line_on=False).drawn, 'line off')
utest_val(True, LineStyle(line_on=False, bezier_on=True).drawn, 'a bezier curve is drawn even with the line off')

utest_val(False, AxisLineStyle().label_on, 'an empty label is off')
utest('Time', AxisLineStyle(label='Time', units='(s)').label_text)
utest('Time (s)', AxisLineStyle(label='Time', units='(s)', label_units_on=True).label_text)
