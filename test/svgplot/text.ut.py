# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from svgplot.style import TextStyle
from svgplot.text import estimate_width, fmt_value, glyph_units, NumFormat, rotated_extent, Rotation, strip_e0s
from utest import utest, utest_approx, utest_val


style = TextStyle(font_size=10)

utest(0, estimate_width, '', style)
utest_approx(6.0, estimate_width, 'a', style)
utest_approx(7.2, estimate_width, 'A', 10)

# Width increases strictly with the number of characters.
widths = [estimate_width('x' * n, style) for n in range(12)]
utest_val(True, all(a < b for a, b in zip(widths, widths[1:])), 'width is strictly increasing')

# A numeric character reference is one glyph, whatever its length.
utest(1.0, glyph_units, '&#x3A9;')
utest(1.0, glyph_units, '&#937;')
utest(2.0, glyph_units, '&#x00B1;x')
utest(estimate_width('a', style), estimate_width, '&#x3A9;', style)
utest(estimate_width('ab', style), estimate_width, 'a&#x00A0;', style)

# Markup is not counted; unterminated references and tags are literal text.
utest(2.0, glyph_units, 'a<tspan>b')
utest(3.0, glyph_units, 'a&b')
utest(2.0, glyph_units, 'a<')


# Exponent stripping.

utest('1.2', strip_e0s, '1.2e+000')
utest('1.2e5', strip_e0s, '1.2e+005')
utest('1e-5', strip_e0s, '1e-05')
utest('1.5e-5', strip_e0s, '1.5e-005')
utest('1e5', strip_e0s, '1e+05')
utest('1e10', strip_e0s, '1e+10')
utest('12.5', strip_e0s, '12.5')

utest('0.5', fmt_value, 0.5)
utest('1e-5', fmt_value, 1e-5)
utest('1.23e5', fmt_value, 123456.0)
utest('1.23e+05', fmt_value, 123456.0, strip=False)
utest('2.500', fmt_value, 2.5, 3, NumFormat.fixed)
utest('-10', fmt_value, -10.0)


# Rotation.

utest(-90, lambda: Rotation.upward.degrees)
utest(0, lambda: Rotation.rightward.degrees)
utest_val(True, Rotation.downward.is_vertical, 'downward is vertical')
utest_val(True, Rotation.uphill.is_sloped, 'uphill is sloped')
utest_val(False, Rotation.upsidedown.is_sloped, 'upside down is not sloped')

utest(30, rotated_extent, 30, 10, Rotation.upward)
utest_approx(21.21, rotated_extent, 30, 10, Rotation.uphill)
utest_approx(12.0, rotated_extent, 30, 10, Rotation.horizontal)
