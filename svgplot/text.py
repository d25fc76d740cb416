# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Text metrics and number formatting.

SVG renderers do the actual text shaping, so the layout engine can only estimate text widths.
The estimate assumes every glyph is `aspect_ratio` times the font size wide, with uppercase ASCII letters a fifth wider.
A character reference like `&#x3A9;` stands for a single glyph, and embedded markup like `<tspan>` has no width.
Where the estimate matters, the `textLength` attribute lets the renderer compress or stretch the run to fit.
'''

import re
from enum import Enum
from warnings import warn

from .exceptions import SvgPlotWarning
from .style import TextStyle


aspect_ratio = 0.6 # Average glyph width as a fraction of font size.
uppercase_factor = 1.2
max_compression = 1.5 # Estimated width to allotted width ratio above which a text run is reported as overflowing.
sin45 = 0.707


def glyph_units(text:str) -> float:
  '''
  Count the glyphs of `text` in units of an average lowercase glyph.
  The scan always advances, so unterminated references and tags are counted as literal characters.
  '''
  units = 0.0
  i = 0
  n = len(text)
  while i < n:
    c = text[i]
    if c == '&':
      if m := _char_ref_re.match(text, i):
        units += 1
        i = m.end()
        continue
    elif c == '<':
      end = text.find('>', i + 1)
      if end >= 0:
        i = end + 1
        continue
    units += uppercase_factor if 'A' <= c <= 'Z' else 1.0
    i += 1
  return units


def estimate_width(text:str, style:TextStyle|float) -> float:
  'Estimate the rendered width of `text` in output units.'
  font_size = style.font_size if isinstance(style, TextStyle) else float(style)
  return glyph_units(text) * aspect_ratio * font_size


def check_text_length(text:str, style:TextStyle|float, allotted:float) -> float:
  'Return the estimated width of `text`, warning if it overflows `allotted` by more than the compression threshold.'
  width = estimate_width(text, style)
  if allotted > 0 and width > allotted * max_compression:
    warn(f'text {text!r} estimated width {width:.1f} overflows allotted width {allotted:.1f}', SvgPlotWarning, stacklevel=2)
  return width


class NumFormat(Enum):
  'Numeric formats for tick and value labels, following the C stream conventions.'
  general = 'g' # Shortest of fixed and scientific, `precision` significant digits.
  fixed = 'f' # `precision` digits after the decimal point.
  scientific = 'e' # One digit before the point, `precision` after.


def fmt_value(value:float, precision:int=3, fmt:NumFormat=NumFormat.general, strip:bool=True) -> str:
  'Format a number for display, optionally stripping redundant exponent padding with `strip_e0s`.'
  s = f'{value:.{precision}{fmt.value}}'
  return strip_e0s(s) if strip else s


def strip_e0s(s:str) -> str:
  '''
  Remove a redundant sign and leading zeros from the exponent of a formatted number.
  A zero exponent is removed entirely: "1.2e+000" becomes "1.2"; "1.2e+005" becomes "1.2e5"; "1e-05" becomes "1e-5".
  '''
  for zero_exp in ('e+000', 'e-000'):
    j = s.find(zero_exp)
    if j >= 0: return s[:j] + s[j+5:]
  j = s.find('e+00')
  if j >= 0:
    if s[j+4:j+5] == '0' or j + 4 == len(s): return s[:j] + s[j+4:] # Zero exponent.
    return s[:j+1] + s[j+4:]
  j = s.find('e-00')
  if j >= 0: return s[:j+2] + s[j+4:]
  j = s.find('e+0')
  if j >= 0:
    if j + 3 == len(s) or s[j+3:] == '0': return s[:j] # "e+0" or "e+00".
    return s[:j+1] + s[j+3:]
  j = s.find('e-0')
  if j >= 0: return s[:j+2] + s[j+3:]
  j = s.find('e+')
  if j >= 0: return s[:j+1] + s[j+2:]
  return s


_char_ref_re = re.compile(r'&(?:#[0-9]+|#[xX][0-9A-Fa-f]+|[A-Za-z][A-Za-z0-9]*);')


class Rotation(Enum):
  'Text rotations, in degrees clockwise from horizontal as SVG measures them.'
  horizontal = 0
  slopeup = -30
  uphill = -45
  steepup = -60
  upward = -90
  backup = -135
  leftward = -180
  rightward = 360
  slopedownhill = 30
  downhill = 45
  steepdown = 60
  downward = 90
  backdown = 135
  upsidedown = 180

  @property
  def degrees(self) -> int:
    'The angle to write in a `rotate` transform.'
    return self.value % 360 if self is Rotation.rightward else self.value

  @property
  def is_vertical(self) -> bool: return self in (Rotation.upward, Rotation.downward)

  @property
  def is_sloped(self) -> bool:
    return self not in (Rotation.horizontal, Rotation.leftward, Rotation.rightward, Rotation.upsidedown) and not self.is_vertical


def rotated_extent(width:float, font_size:float, rotation:Rotation) -> float:
  '''
  The space a text run of estimated `width` needs perpendicular to the axis it labels, for a horizontal axis.
  Horizontal text needs about two lines; vertical text its full width; sloped text its width times sin 45°.
  '''
  if rotation.is_vertical: return width
  if rotation.is_sloped: return width * sin45
  return 2 * font_size * aspect_ratio
