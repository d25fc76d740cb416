# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
SVG types based on Markup (`Mu` class family).
SVG elements reference: https://developer.mozilla.org/en-US/docs/Web/SVG/Element.
'''

import re
from typing import Any, ClassVar, Iterable, Self

from ..markup import fmt_num, Mu, MuAttrs, NoMatchError


Vec = tuple[float,float]
VecOrNum = Vec|float
PathCommand = tuple[Any,...]


class SvgNode(Mu):
  '''
  Abstract class for SVG elements.
  '''

  tag_types:ClassVar[dict[str,type['Mu']]] = {} # Dispatch table mapping tag names to Mu subtypes.
  inline_tags = frozenset({'tspan'})
  ws_sensitive_tags = frozenset({'text', 'tspan', 'title', 'desc'})


  def __init__(self, *args, title:str|None=None, **kwargs) -> None:
    '''
    SvgNode constructor.
    The `title` parameter is treated as a special attribute that is converted into a `title` child element.
    '''
    super().__init__(*args, **kwargs)
    if title is not None:
      self.title = title


  @property
  def title(self) -> str|None:
    'Get the title text from the title child element. If it does not exist return None.'
    try: return self.pick('title').text
    except NoMatchError: return None

  @title.setter
  def title(self, title:str|None):
    'Add a title child element to the head of the children list.'
    try:
      title_el = self.pick('title')
    except NoMatchError:
      if title is not None:
        self._.insert(0, Title(_=title))
    else:
      if title is None:
        self._.remove(title_el)
      else:
        title_el._ = [title]


  @classmethod
  def etree_name(cls, name:str) -> str:
    'Reduce a Clark notation name to a local name, or a prefixed name for the metadata namespaces.'
    if not name.startswith('{'): return name
    ns, _, local = name[1:].partition('}')
    prefix = ns_prefixes.get(ns)
    return f'{prefix}:{local}' if prefix else local


  @staticmethod
  def esc_text(text:str) -> str:
    '''
    Escape text content, leaving well-formed character and entity references intact.
    Plot text uses references such as `&#x00B1;` for glyphs that are awkward to type.
    '''
    text = _bare_amp_re.sub('&amp;', text)
    return text.replace('<', '&lt;')


SvgNode.generic_tag_type = SvgNode # Note: this creates a circular reference.


def _tag(Subclass:type[SvgNode]) -> type[SvgNode]:
  'Decorator for associating a concrete subclass with the lowercase tag matching its name.'
  assert issubclass(Subclass, Mu)
  Subclass.tag = Subclass.__name__.lower()
  SvgNode.tag_types[Subclass.tag] = Subclass
  return Subclass


class Comment(SvgNode):
  'An XML comment. The text must not contain "--".'

  tag = '!--'

  def __init__(self, text:str) -> None:
    if '--' in text: raise ValueError(f'XML comment text cannot contain "--": {text!r}')
    super().__init__(_=text)

  def _render(self, precision:int):
    yield f'<!-- {self.text} -->'


# SVG leaf elements.

@_tag
class Circle(SvgNode):
  'SVG Circle element.'


@_tag
class Desc(SvgNode):
  'SVG Desc element.'


@_tag
class Ellipse(SvgNode):
  'SVG Ellipse element.'


@_tag
class Line(SvgNode):
  'SVG Line element.'


class PathData:
  '''
  Path data: a sequence of commands, each a code letter followed by numbers.
  Numbers are formatted at render time with the document precision.
  '''

  def __init__(self, commands:Iterable[PathCommand]=()) -> None:
    self.commands:list[PathCommand] = []
    for c in commands: self.add(*c)

  def __len__(self) -> int: return len(self.commands)

  def add(self, code:str, *args:float) -> Self:
    try: exp_len = _path_command_lens[code]
    except KeyError as e: raise ValueError(f'bad path command code: {code!r}; received command: {(code, *args)!r}') from e
    if len(args) != exp_len:
      raise ValueError(f'path command code {code!r} requires {exp_len} arguments; received command: {(code, *args)!r}')
    self.commands.append((code, *args))
    return self

  def M(self, x:float, y:float) -> Self: return self.add('M', x, y)
  def L(self, x:float, y:float) -> Self: return self.add('L', x, y)
  def S(self, x2:float, y2:float, x:float, y:float) -> Self: return self.add('S', x2, y2, x, y)
  def Z(self) -> Self: return self.add('Z')

  def fmt(self, precision:int) -> str:
    return ' '.join(c[0] + ','.join(fmt_num(n, precision) for n in c[1:]) for c in self.commands)


@_tag
class Path(SvgNode):
  'SVG Path element.'

  def __init__(self, *args, d:PathData|Iterable[PathCommand]|str|None=None, **kw_attrs) -> None:
    if d is not None and not isinstance(d, (str, PathData)): d = PathData(d)
    super().__init__(*args, d=d, **kw_attrs)

  @property
  def data(self) -> PathData:
    d = self.attrs['d']
    if not isinstance(d, PathData): raise TypeError(f'path data is not structured: {d!r}')
    return d


class PointsData:
  'A list of points for `polygon` and `polyline`, formatted at render time.'

  def __init__(self, points:Iterable[Vec]) -> None:
    self.points = [(float(x), float(y)) for x, y in points]

  def __len__(self) -> int: return len(self.points)

  def fmt(self, precision:int) -> str:
    return ' '.join(f'{fmt_num(x, precision)},{fmt_num(y, precision)}' for x, y in self.points)


class SvgPoly(SvgNode):
  'Abstract class for SVG polygon and polyline elements.'

  def __init__(self, *args, points:Iterable[Vec]|str|None=None, **kw_attrs) -> None:
    if points is not None and not isinstance(points, str): points = PointsData(points)
    super().__init__(*args, points=points, **kw_attrs)


@_tag
class Polygon(SvgPoly):
  'SVG Polygon element.'


@_tag
class Polyline(SvgPoly):
  'SVG Polyline element.'


@_tag
class Rect(SvgNode):
  'SVG Rect element.'


@_tag
class Text(SvgNode):
  'SVG Text element.'

  def tspan(self, text:str, **kw_attrs:Any) -> 'TSpan':
    'Append a `tspan` child, for independently styled runs of text.'
    return self.append(TSpan(_=text, **kw_attrs))


@_tag
class Title(SvgNode):
  'SVG Title element.'


@_tag
class TSpan(SvgNode):
  'SVG TSpan element.'


class SvgBranch(SvgNode):
  'An abstract class for SVG nodes that can contain other nodes.'

  def circle(self, cx:float, cy:float, r:float, **kw_attrs:Any) -> Circle:
    'Create a child `circle` element.'
    return self.append(Circle(cx=cx, cy=cy, r=r, **kw_attrs))

  def comment(self, text:str) -> Comment:
    return self.append(Comment(text))

  def defs(self, **kw_attrs:Any) -> 'Defs':
    'Create a child `defs` element.'
    return self.append(Defs(**kw_attrs))

  def ellipse(self, cx:float, cy:float, rx:float, ry:float, **kw_attrs:Any) -> Ellipse:
    'Create a child `ellipse` element.'
    return self.append(Ellipse(cx=cx, cy=cy, rx=rx, ry=ry, **kw_attrs))

  def g(self, **kw_attrs:Any) -> 'G':
    'Create child `g` element.'
    return self.append(G(**kw_attrs))

  def line(self, x1:float, y1:float, x2:float, y2:float, **kw_attrs:Any) -> Line:
    'Create a child `line` element.'
    return self.append(Line(x1=x1, y1=y1, x2=x2, y2=y2, **kw_attrs))

  def path(self, d:PathData|Iterable[PathCommand], **kw_attrs:Any) -> Path:
    'Create a child `path` element.'
    return self.append(Path(d=d, **kw_attrs))

  def polygon(self, points:Iterable[Vec], **kw_attrs:Any) -> Polygon:
    'Create a child `polygon` element.'
    return self.append(Polygon(points=points, **kw_attrs))

  def polyline(self, points:Iterable[Vec], **kw_attrs:Any) -> Polyline:
    'Create a child `polyline` element.'
    return self.append(Polyline(points=points, **kw_attrs))

  def rect(self, x:float, y:float, width:float, height:float, **kw_attrs:Any) -> Rect:
    'Create a child `rect` element.'
    return self.append(Rect(x=x, y=y, width=width, height=height, **kw_attrs))

  def add_text(self, x:float, y:float, text:str, *, anchor:str='', rotation:float=0, **kw_attrs:Any) -> Text:
    '''
    Create a child `text` element at (x, y).
    `anchor` is one of 'start', 'middle', 'end' (omitted when empty).
    A nonzero `rotation` (degrees, clockwise as in SVG) rotates the text about its anchor point.
    '''
    if anchor:
      if anchor not in text_anchors: raise ValueError(f'invalid text anchor: {anchor!r}')
      kw_attrs['text_anchor'] = anchor
    if rotation: kw_attrs['transform'] = rotate(rotation, x, y)
    return self.append(Text(_=text, x=x, y=y, **kw_attrs))


@_tag
class Svg(SvgBranch):
  'SVG root element.'

  def __init__(self, *args, attrs:MuAttrs|None=None, **kw_attrs) -> None:
    '''
    Add the xmlns as the first attribute.
    If the user wants to override this, they can do so by passing `xmlns` as a keyword argument.
    '''
    kw_attrs.setdefault('xmlns', svg_ns)
    super().__init__(*args, attrs=attrs, **kw_attrs)


# SVG branch elements.

class ClipPath(SvgBranch):
  'SVG ClipPath element.'
  tag = 'clipPath'

SvgNode.tag_types['clipPath'] = ClipPath


@_tag
class Defs(SvgBranch):
  'SVG Defs element.'


@_tag
class G(SvgBranch):
  'SVG Group element.'


@_tag
class Metadata(SvgBranch):
  'SVG Metadata element; holds the RDF license block.'


# Transforms.

class RotateAttr:
  'A `rotate(degrees,x,y)` transform, formatted at render time.'

  def __init__(self, degrees:float, x:float=0, y:float=0) -> None:
    self.degrees = degrees
    self.x = x
    self.y = y

  def fmt(self, precision:int) -> str:
    d = fmt_num(self.degrees, precision)
    if self.x == 0 and self.y == 0: return f'rotate({d})'
    return f'rotate({d},{fmt_num(self.x, precision)},{fmt_num(self.y, precision)})'


def rotate(degrees:float, x:float=0, y:float=0) -> RotateAttr:
  return RotateAttr(degrees, x, y)


# Miscellaneous.

svg_ns = 'http://www.w3.org/2000/svg'
rdf_ns = 'http://www.w3.org/1999/02/22-rdf-syntax-ns#'
cc_ns = 'http://web.resource.org/cc/'
dc_ns = 'http://purl.org/dc/elements/1.1/'

ns_prefixes = {
  svg_ns: '',
  rdf_ns: 'rdf',
  cc_ns: 'cc',
  dc_ns: 'dc',
}

_path_command_lens = {
  'A' : 7,
  'C' : 6,
  'H' : 1,
  'L' : 2,
  'l' : 2,
  'M' : 2,
  'm' : 2,
  'Q' : 4,
  'S' : 4,
  'V' : 1,
  'Z' : 0,
  'z' : 0,
}

text_anchors = frozenset({'start', 'middle', 'end'})

_bare_amp_re = re.compile(r'&(?!#[0-9]+;|#x[0-9A-Fa-f]+;|[A-Za-z][A-Za-z0-9]*;)')
