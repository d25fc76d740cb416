# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
`markup` provides the `Mu` class, the base class for the SVG document tree.

A `Mu` node holds a tag, an attribute dictionary and an interleaved list of text and child nodes.
Numeric attribute values are kept as numbers until rendering,
so that the output precision can be chosen when the document is serialized.
'''

import re
from itertools import chain
from typing import Any, Callable, cast, ClassVar, Iterable, Iterator, overload, Protocol, TypeVar, Union

from .exceptions import ConflictingValues, MultipleMatchesError, NoMatchError


MuAttrs = dict[str,Any]
MuChild = Union[str,'Mu']
MuChildren = list[MuChild]
MuChildLax = MuChild|int|float

_Mu = TypeVar('_Mu', bound='Mu')
_MuChild = TypeVar('_MuChild', bound=MuChild)

MuPred = Callable[['Mu'],bool]


class AttrVal(Protocol):
  'Protocol for structured attribute values (path data, point lists) that format themselves at render time.'
  def fmt(self, precision:int) -> str: ...


class Mu:
  '''
  Base markup type for SVG and XML document trees.

  Unlike xml.etree.ElementTree.Element, child nodes and text are interleaved.

  Every node has a tag string, usually provided as a static override by a subclass.
  For example, the `Rect` subclass defines `tag = 'rect'`.
  A parser can instead return generic nodes with tags set per node.
  '''

  tag = '' # Subclasses can override the class tag, or give each instance its own tag attribute.

  tag_types:ClassVar[dict[str,type['Mu']]] = {} # Dispatch table mapping tag names to Mu subtypes.
  generic_tag_type:ClassVar[type['Mu']] # The subtype to use for tags that are not in `tag_types`. Set to `Mu` below.
  inline_tags:ClassVar[frozenset[str]] = frozenset() # Set of tags that should be rendered inline.
  ws_sensitive_tags:ClassVar[frozenset[str]] = frozenset() # Set of tags that are whitespace sensitive.

  attr_sort_ranks = {
    'id': -2,
    'class': -1,
  }

  # Instance attributes.
  attrs:MuAttrs
  _:list[MuChild]

  def __init__(self,
   *_mu_positional_children:MuChildLax, # Additional children can be passed as positional arguments.
   _:MuChildLax|Iterable[MuChildLax]=(),
   tag:str='',
   cl:Iterable[str]|None=None,
   attrs:MuAttrs|None=None,
   **kw_attrs:Any # Additional attrs can be passed as keyword arguments. These take precedence over keys in `attrs`.
   ) -> None:
    '''
    Keyword attribute names have underscores replaced with hyphens, so that `stroke_width=2` renders as `stroke-width`.
    Attribute values of None are dropped.
    The `cl` argument is shorthand for the `class` attribute; an iterable of strings is joined with spaces.
    '''
    if tag:
      if cls_tag := getattr(self, 'tag', None):
        if cls_tag != tag:
           raise ValueError(f'Mu subclass {type(self)!r} already has tag: {self.tag!r}; instance tag: {tag!r}')
      else:
        self.tag = tag

    if attrs is None: attrs = {}
    for k, v in kw_attrs.items():
      if v is None: continue
      attrs[k.replace('_', '-')] = v
    self.attrs = attrs

    if cl is not None:
      if not isinstance(cl, str): cl = ' '.join(filter(None, cl))
      if cl != attrs.setdefault('class', cl):
        raise ConflictingValues(key='class', existing=attrs['class'], incoming=cl)

    if isinstance(_, (str, Mu, int, float)): # Single child argument; wrap it in a list.
      children:list = [_]
    else:
      children = list(_)
    children.extend(_mu_positional_children)
    for i, c in enumerate(children):
      if isinstance(c, (str, Mu)): continue
      if isinstance(c, (int, float)):
        children[i] = str(prefer_int(c))
      else:
        raise TypeError(f'Invalid child type: {type(c)!r}; value: {_repr_lim(c)}')
    self._ = cast(list[MuChild], children)


  def __repr__(self) -> str: return f'{type(self).__name__}{self}'


  def __str__(self) -> str:
    try: # `__str__` may get called during exception handling during initialization, when attributes are not yet set.
      words = ''.join(chain(
        (f' {k}={_repr_lim(v)}' for k, v in self.attrs.items()),
        (f' {c.tag}' if isinstance(c, Mu) else f' {_repr_lim(c)}' for c in self._)))
      return f'<{self.tag}:{words}>'
    except AttributeError:
      return super().__repr__()


  def __delitem__(self, key:str) -> Any: del self.attrs[key]

  def __getitem__(self, key:str) -> Any: return self.attrs[key]

  def __setitem__(self, key:str, val:Any) -> Any: self.attrs[key] = val

  def get(self, key:str, default=None) -> Any: return self.attrs.get(key, default)

  def __iter__(self) -> Iterator[MuChild]: return iter(self._)


  @classmethod
  def from_etree(cls:type[_Mu], el:Any) -> _Mu:
    '''
    Create a Mu object (possibly a subclass chosen by tag) from an lxml or standard library element.
    Comments and processing instructions are dropped; their tail text is kept.
    '''
    tag = cls.etree_name(el.tag)
    children:MuChildren = []
    text = el.text
    if text: children.append(text)
    TagClass = cls.tag_types.get(tag, cls.generic_tag_type)
    for child in el:
      if isinstance(child.tag, str):
        children.append(TagClass.from_etree(child))
        #^ Note: we use the dynamically chosen TagClass when recursing.
      text = child.tail
      if text: children.append(text)
    return cast(_Mu, TagClass(tag=tag, attrs={cls.etree_name(k): v for k, v in el.attrib.items()}, _=children))


  @classmethod
  def etree_name(cls, name:str) -> str:
    'Convert an lxml tag or attribute name, possibly in Clark notation `{ns}local`, to a Mu name.'
    return name


  def children(self) -> Iterator[MuChild]:
    'Yield child nodes and text, skipping text that is purely whitespace.'
    for c in self._:
      if isinstance(c, str) and ws_re.fullmatch(c): continue
      yield c


  def child_nodes(self) -> Iterator['Mu']:
    'Yield child Mu nodes.'
    return (c for c in self._ if isinstance(c, Mu))


  @property
  def texts(self) -> Iterator[str]:
    'Yield the text of the tree sequentially.'
    for c in self._:
      if isinstance(c, str): yield c
      else: yield from c.texts


  @property
  def text(self) -> str:
    'Return the text of the tree joined as a single string.'
    return ''.join(self.texts)


  @property
  def cl(self) -> str:
    '`cl` is shortand for the `class` attribute.'
    return str(self.attrs.get('class', ''))

  @cl.setter
  def cl(self, val:str) -> None: self.attrs['class'] = val


  @property
  def classes(self) -> list[str]:
    'The `class` attribute split into individual words.'
    return cast(str, self.attrs.get('class', '')).split()


  @property
  def id(self) -> str: return str(self.attrs.get('id', ''))

  @id.setter
  def id(self, val:str) -> None: self.attrs['id'] = val


  def append(self, child:_MuChild) -> _MuChild:
    if not isinstance(child, (str, Mu)): raise TypeError(child)
    self._.append(child)
    return child


  def extend(self, *child_or_children:MuChildLax|Iterable[MuChildLax]) -> None:
    for c in child_or_children:
      if isinstance(c, (str, Mu)):
        self.append(c)
      elif isinstance(c, (int, float)):
        self.append(str(prefer_int(c)))
      else:
        for el in c:
          if isinstance(el, (int, float)): el = str(prefer_int(el))
          self.append(el)


  def clear(self) -> None:
    'Remove all children, keeping attributes.'
    self._.clear()


  @property
  def is_empty(self) -> bool:
    'True if the node has no child nodes and no text.'
    return not self._


  # Picking and finding.

  @overload
  def pick_all(self, type_or_tag:type[_Mu], *, cl:str='', text:str='', **attrs:Any) -> Iterator[_Mu]: ...

  @overload
  def pick_all(self, type_or_tag:str='', *, cl:str='', text:str='', **attrs:Any) -> Iterator['Mu']: ...

  def pick_all(self, type_or_tag='', *, cl:str='', text:str='', **attrs:Any):
    'Pick all matching children of this node.'
    pred = xml_pred(type_or_tag=type_or_tag, cl=cl, text=text, attrs=attrs)
    return (c for c in self._ if isinstance(c, Mu) and pred(c))


  @overload
  def find_all(self, type_or_tag:type[_Mu], *, cl:str='', text:str='', **attrs:Any) -> Iterator[_Mu]: ...

  @overload
  def find_all(self, type_or_tag:str='', *, cl:str='', text:str='', **attrs:Any) -> Iterator['Mu']: ...

  def find_all(self, type_or_tag='', *, cl:str='', text:str='', **attrs:Any):
    'Find matching nodes in the subtree rooted at this node, in document order.'
    pred = xml_pred(type_or_tag=type_or_tag, cl=cl, text=text, attrs=attrs)
    return self._find_all(pred)

  def _find_all(self, pred:MuPred) -> Iterator['Mu']:
    for c in self._:
      if isinstance(c, Mu):
        if pred(c): yield c
        yield from c._find_all(pred)


  @overload
  def pick(self, type_or_tag:type[_Mu], *, cl:str='', text:str='', **attrs:Any) -> _Mu: ...

  @overload
  def pick(self, type_or_tag:str='', *, cl:str='', text:str='', **attrs:Any) -> 'Mu': ...

  def pick(self, type_or_tag='', *, cl:str='', text:str='', **attrs:Any):
    '''
    Pick the matching child of this node.
    Raises NoMatchError if no matching node is found, and MultipleMatchesError if multiple matching nodes are found.
    '''
    return _single_match(self, self.pick_all(type_or_tag, cl=cl, text=text, **attrs), type_or_tag, cl, text, attrs)


  @overload
  def find(self, type_or_tag:type[_Mu], *, cl:str='', text:str='', **attrs:Any) -> _Mu: ...

  @overload
  def find(self, type_or_tag:str='', *, cl:str='', text:str='', **attrs:Any) -> 'Mu': ...

  def find(self, type_or_tag='', *, cl:str='', text:str='', **attrs:Any):
    '''
    Find the matching node of this node's subtree.
    Raises NoMatchError if no matching node is found, and MultipleMatchesError if multiple matching nodes are found.
    '''
    return _single_match(self, self.find_all(type_or_tag, cl=cl, text=text, **attrs), type_or_tag, cl, text, attrs)


  # Rendering.

  @staticmethod
  def esc_text(text:str) -> str:
    text = text.replace("&", "&amp;") # Ampersand must be replaced first, because escapes use ampersands.
    text = text.replace("<", "&lt;")
    # Note: we do not replace ">" because it is not required.
    return text


  @staticmethod
  def quote_attr_val(text:str) -> str:
    text = text.replace("&", "&amp;") # Ampersand must be replaced first, because escapes use ampersands.
    text = text.replace("<", "&lt;")
    if "'" in text:
      text = text.replace('"', "&quot;")
      return f'"{text}"'
    else:
      return f"'{text}'"


  def fmt_attr_val(self, v:Any, precision:int) -> str:
    if v is True or v is False: return str(v).lower()
    if isinstance(v, float): return fmt_num(v, precision)
    if isinstance(v, int): return str(v)
    if isinstance(v, str): return v
    if hasattr(v, 'fmt'): return cast(AttrVal, v).fmt(precision)
    return str(v)


  def fmt_attr_items(self, items:Iterable[tuple[str,Any]], precision:int) -> str:
    'Return a string that is either empty or with a leading space, containing all of the formatted items.'
    parts:list[str] = []
    for k, v in sorted(items, key=lambda item: self.attr_sort_ranks.get(item[0], 0)):
      parts.append(f' {k}={self.quote_attr_val(self.fmt_attr_val(v, precision))}')
    return ''.join(parts)


  def render(self, newline=True, precision:int=3) -> Iterator[str]:
    'Render the tree as a stream of text fragments, writing numeric attributes with `precision` decimal digits.'
    yield from self._render(precision)
    if newline: yield '\n'


  def _render(self, precision:int) -> Iterator[str]:
    'Recursive helper to `render`.'
    self_closing = not self._
    attrs_str = self.fmt_attr_items(self.attrs.items(), precision)
    head_slash = '/' if self_closing else ''
    yield f'<{self.tag}{attrs_str}{head_slash}>'
    if self_closing: return
    yield from self.render_children(precision)
    yield f'</{self.tag}>'


  def render_children(self, precision:int) -> Iterator[str]:
    child_newlines = (
      len(self._) > 1 and
      (self.tag not in self.ws_sensitive_tags) and
      (self.tag not in self.inline_tags))

    def is_block(el:MuChild|None) -> bool: return isinstance(el, Mu) and (el.tag not in self.inline_tags)

    if child_newlines:
      yield '\n'
    for i, child in enumerate(self._):
      next_child = self._[i+1] if i+1 < len(self._) else None
      if isinstance(child, str):
        yield self.esc_text(child)
      else:
        yield from child._render(precision)
      if child_newlines and (is_block(child) or next_child is None or is_block(next_child)):
        yield '\n'


  def render_str(self, newline=True, precision:int=3) -> str:
    'Render the tree into a single string.'
    return ''.join(self.render(newline=newline, precision=precision))


Mu.generic_tag_type = Mu # Note: this creates a circular reference.


def xml_pred(type_or_tag:str|type['Mu']='', *, cl:str='', text:str='', attrs:dict[str,Any]={}) -> MuPred:
  'Construct a predicate that tests Mu nodes by type or tag, class, attributes and contained text.'

  tag_pred:Callable
  if not type_or_tag: tag_pred = lambda node: True
  elif isinstance(type_or_tag, type): tag_pred = lambda node: isinstance(node, type_or_tag)
  else: tag_pred = lambda node: node.tag == type_or_tag

  def predicate(node:Mu) -> bool:
    return (
      tag_pred(node) and
      (not cl or cl in node.classes) and
      all(node.attrs.get(k.replace('_', '-')) == v for k, v in attrs.items()) and
      (not text or text in node.text))

  return predicate


def fmt_xml_predicate_args(type_or_tag:type|str, cl:str, text:str, attrs:dict[str,Any]) -> str:
  'Format the arguments of a predicate function for an error message.'
  words:list[str] = []
  if type_or_tag: words.append(f'`{type_or_tag.__name__}`' if isinstance(type_or_tag, type) else repr(type_or_tag))
  if cl: words.append(f'cl={cl!r}')
  for k, v in attrs.items(): words.append(f'{k}={v!r}')
  if text: words.append(f'…{text!r}…')
  return ' '.join(words)


def _single_match(node:Mu, matches:Iterator[Mu], type_or_tag:type|str, cl:str, text:str, attrs:dict[str,Any]) -> Mu:
  first_match:Mu|None = None
  for c in matches:
    if first_match is None: first_match = c
    else:
      args_msg = fmt_xml_predicate_args(type_or_tag, cl, text, attrs)
      subsequent_match = c # Alias improves readablity of the following line in stack traces.
      raise MultipleMatchesError(node, args_msg, first_match, subsequent_match)
  if first_match is None:
    raise NoMatchError(node, fmt_xml_predicate_args(type_or_tag, cl, text, attrs))
  return first_match


@overload
def prefer_int(v:int) -> int: ...
@overload
def prefer_int(v:float) -> int|float: ...

def prefer_int(v:float|int) -> float|int:
  'Convert integral floats to int.'
  if isinstance(v, float) and v.is_integer():
    return int(v)
  return v


def fmt_num(v:float, precision:int=3) -> str:
  'Format a number rounded to `precision` decimal digits, dropping any trailing ".0" and negative zero.'
  r = round(float(v), precision)
  if r == 0: return '0'
  return str(prefer_int(r))


def _repr_lim(v:Any, limit:int=32) -> str:
  r = repr(v)
  return r if len(r) <= limit else r[:limit-1] + '…'


ws_re = re.compile(r'[\t\n\f\r ]+')
