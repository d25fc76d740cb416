# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Data point value labels: the formatted value written beside a marker,
optionally followed by its uncertainty, confidence interval, degrees of freedom, id, timestamp and sequence number.
'''

from dataclasses import dataclass

from .color import black, Color
from .exceptions import ConfigError
from .markers import PointStyle
from .stats import conf_interval, round_m, round_ms
from .style import TextStyle
from .svg import SvgBranch, Text
from .text import fmt_value, NumFormat, Rotation
from .uncertain import Unc


annotation_font_ratio = 0.9 # Font size of the annotations relative to the value.
plusminus_glyph = '&#x00A0;&#x00B1;' # No-break space and plus-minus sign.


@dataclass(frozen=True)
class ValueStyle:
  '''
  Style of data point value labels.
  A `precision` of zero or less rounds the value to match its uncertainty instead.
  '''
  rotation:Rotation = Rotation.horizontal
  precision:int = 3
  num_format:NumFormat = NumFormat.general
  strip_e0s:bool = True
  text_style:TextStyle = TextStyle(font_size=10)
  color:Color = black
  prefix:str = ''
  suffix:str = ''
  plusminus_on:bool = False
  plusminus_color:Color = black
  addlimits_on:bool = False # Confidence interval.
  addlimits_color:Color = black
  df_on:bool = False
  df_color:Color = black
  id_on:bool = False
  id_color:Color = black
  datetime_on:bool = False
  datetime_color:Color = black
  order_on:bool = False
  order_color:Color = black

  def __post_init__(self) -> None:
    if not isinstance(self.rotation, Rotation): raise ConfigError(f'invalid value label rotation: {self.rotation!r}')


def fmt_point_value(u:Unc, vs:ValueStyle, unc_sig_digits:int=2) -> str:
  'Format the value part of a label, including the prefix.'
  if vs.precision <= 0 and u.sd > 0:
    s = round_ms(u.value, round_m(u.sd, unc_sig_digits))
  else:
    s = fmt_value(u.value, vs.precision if vs.precision > 0 else 3, vs.num_format, strip=vs.strip_e0s)
  return vs.prefix + s


def label_anchor(x:float, y:float, rotation:Rotation, marker_size:float, font_size:float) -> tuple[float,float,str,Rotation]:
  '''
  Position a value label relative to a marker at (x, y).
  Return the text position, its anchor, and the rotation to draw it with
  (leftward and rightward labels are drawn horizontally; backward labels are drawn at the mirrored slope).
  '''
  m = marker_size
  f = font_size
  match rotation:
    case Rotation.horizontal: return x, y - m * 2, 'middle', rotation
    case Rotation.leftward: return x - m * 1.3, y + f * 0.3, 'end', Rotation.horizontal
    case Rotation.rightward: return x + m * 1.1, y + f * 0.3, 'start', Rotation.horizontal
    case Rotation.upsidedown: return x, y + m, 'middle', rotation
    case Rotation.slopeup | Rotation.uphill | Rotation.steepup: return x + f / 3, y - m * 0.6, 'start', rotation
    case Rotation.upward: return x + f / 3, y - m * 0.9, 'start', rotation
    case Rotation.backup: return x - m * 1.5, y - m * 0.8, 'end', Rotation.downhill
    case Rotation.slopedownhill | Rotation.downhill | Rotation.steepdown: return x + m * 0.4, y + m * 0.9, 'start', rotation
    case Rotation.downward: return x - m, y + m, 'start', rotation
    case Rotation.backdown: return x - m * 0.5, y + m * 1.5, 'end', Rotation.uphill
  raise ValueError(rotation)


def draw_point_value(g:SvgBranch, x:float, y:float, vs:ValueStyle, ps:PointStyle, u:Unc, *, alpha:float=0.05,
 unc_sig_digits:int=2, text_plusminus:float=1.0) -> Text:
  '''
  Write the value label of the data point drawn at (x, y), and return the text element.
  The annotations are appended as separately colored `tspan` runs in a slightly smaller font.
  '''
  tx, ty, anchor, rot = label_anchor(x, y, vs.rotation, ps.size, vs.text_style.font_size)
  t = g.add_text(tx, ty, fmt_point_value(u, vs, unc_sig_digits), anchor=anchor, rotation=rot.degrees,
    fill=str(vs.color), **vs.text_style.attrs())
  small = int(vs.text_style.font_size * annotation_font_ratio)

  if vs.plusminus_on and u.sd > 0:
    t.tspan(plusminus_glyph, fill=str(vs.plusminus_color))
    t.tspan(round_ms(u.sd * text_plusminus, round_m(u.sd, unc_sig_digits)), fill=str(vs.plusminus_color), font_size=small)
  if vs.addlimits_on and u.sd > 0:
    lo, hi = conf_interval(u.value, u.sd, u.df, alpha, u.distribution)
    m = round_m(u.sd, unc_sig_digits)
    t.tspan(f' &lt;{round_ms(lo, m)}, {round_ms(hi, m)}&gt;', fill=str(vs.addlimits_color), font_size=small)
  if vs.df_on and u.has_df:
    t.tspan(f'&#x00A0;({u.df})', fill=str(vs.df_color), font_size=small)
  if vs.id_on and u.id:
    t.tspan(f' "{u.id}" ', fill=str(vs.id_color), font_size=small)
  if vs.datetime_on and u.timestamp is not None:
    t.tspan(' ' + u.timestamp.isoformat(sep=' '), fill=str(vs.datetime_color), font_size=small)
  if vs.order_on and u.order >= 0:
    t.tspan(f' #{u.order}', fill=str(vs.order_color), font_size=small)
  if vs.suffix:
    t.tspan(vs.suffix, fill=str(vs.color))
  return t
