# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
The plot document: an SVG image made of a fixed sequence of layers.

Each layer is a `g` group with an id; the order of the layer enumeration is the paint order.
Layers are cleared and redrawn on every render, and only layers with content are written.
'''

import logging
from dataclasses import dataclass
from enum import Enum
from os import PathLike, fspath
from typing import Any, TextIO

from ..exceptions import ConfigError
from ..style import SvgStyle, TextStyle
from . import cc_ns, ClipPath, dc_ns, Desc, G, Metadata, rdf_ns, Svg, SvgNode, Title


logger = logging.getLogger(__name__)

xml_declaration = '<?xml version="1.0" encoding="UTF-8" standalone="no"?>'


class Layer(Enum):
  'Layers of 1D and 2D plots, in paint order. Values are the group ids.'
  image_background = 'imageBackground'
  plot_background = 'plotBackground'
  y_minor_grid = 'yMinorGrid'
  y_major_grid = 'yMajorGrid'
  x_minor_grid = 'xMinorGrid'
  x_major_grid = 'xMajorGrid'
  y_axis = 'yAxis'
  x_axis = 'xAxis'
  y_minor_ticks = 'yMinorTicks'
  x_minor_ticks = 'xMinorTicks'
  y_major_ticks = 'yMajorTicks'
  x_major_ticks = 'xMajorTicks'
  x_ticks_values = 'xTicksValues'
  y_ticks_values = 'yTicksValues'
  y_label = 'yLabel'
  x_label = 'xLabel'
  data_lines = 'plotLines'
  unc3 = 'plotUnc3'
  unc2 = 'plotUnc2'
  unc1 = 'plotUnc1'
  data_points = 'plotPoints'
  limit_points = 'limitPoints'
  legend_background = 'legendBackground'
  legend_points = 'legendPoints'
  legend_text = 'legendText'
  title = 'title'
  x_point_values = 'plotXValues'
  y_point_values = 'plotYValues'
  functions = 'plotFunctions'
  notes = 'plotNotes'


class BoxplotLayer(Enum):
  'Layers of box plots, in paint order.'
  image_background = 'imageBackground'
  plot_background = 'plotBackground'
  x_axis = 'xAxis'
  y_axis = 'yAxis'
  x_ticks = 'xMajorTicks'
  y_major_ticks = 'yMajorTicks'
  y_minor_ticks = 'yMinorTicks'
  y_major_grid = 'yMajorGrid'
  y_minor_grid = 'yMinorGrid'
  value_labels = 'valueLabels'
  y_label = 'yLabel'
  x_label = 'xLabel'
  box_axis = 'boxAxis'
  box = 'box'
  median = 'median'
  whisker = 'whisker'
  mild_outliers = 'mildOutliers'
  extreme_outliers = 'extremeOutliers'
  data_values = 'dataValues'
  title = 'title'
  notes = 'plotNotes'


license_terms = frozenset({'permits', 'requires', 'prohibits'})


@dataclass(frozen=True)
class License:
  'Creative Commons license terms, written as RDF metadata. Each term is "permits", "requires" or "prohibits".'
  reproduction:str = 'permits'
  distribution:str = 'permits'
  attribution:str = 'requires'
  commercial_use:str = 'permits'
  derivative_works:str = 'permits'

  def __post_init__(self) -> None:
    for k, v in self.__dict__.items():
      if v not in license_terms: raise ConfigError(f'invalid license term for {k}: {v!r}')


class SvgDocument:
  '''
  An SVG image of `width` by `height` pixels, with one group per member of the `layers` enumeration.
  Numeric attributes are written with `precision` decimal digits.
  '''

  def __init__(self, width:float, height:float, *, layers:type[Enum]=Layer, precision:int=3, title:str='',
   description:str='', author:str='', copyright_holder:str='', copyright_date:str='', license:License|None=None,
   filename:str='') -> None:

    if width <= 0 or height <= 0: raise ConfigError(f'image size must be positive: {width!r} x {height!r}')
    if precision < 0: raise ConfigError(f'negative precision: {precision!r}')
    self.width = width
    self.height = height
    self.layers = layers
    self.precision = precision
    self.title = title
    self.description = description
    self.author = author
    self.copyright_holder = copyright_holder
    self.copyright_date = copyright_date
    self.license = license
    self._filename = filename
    self._filename_fixed = bool(filename) # A configured file name is kept; otherwise each write records its path.
    self.groups:dict[Enum,G] = {layer: G(id=layer.value) for layer in layers}
    self.clip_paths:list[ClipPath] = []


  @property
  def filename(self) -> str: return self._filename

  @filename.setter
  def filename(self, filename:str) -> None:
    self._filename = filename
    self._filename_fixed = bool(filename)


  def layer(self, layer:Enum) -> G:
    'Return the group for `layer`.'
    try: return self.groups[layer]
    except KeyError as e: raise KeyError(f'layer {layer!r} is not a member of {self.layers.__name__}') from e


  def set_layer_style(self, layer:Enum, style:SvgStyle|None=None, text_style:TextStyle|None=None, **attrs:Any) -> G:
    'Set the inherited presentation attributes of a layer group. Existing attributes other than the id are replaced.'
    g = self.layer(layer)
    g.attrs = {'id': layer.value}
    if style is not None: g.attrs.update(style.attrs())
    if text_style is not None: g.attrs.update(text_style.attrs())
    for k, v in attrs.items():
      if v is not None: g.attrs[k.replace('_', '-')] = v
    return g


  def clear(self) -> None:
    'Remove all content from every layer, along with any clip paths.'
    for g in self.groups.values(): g.clear()
    self.clip_paths.clear()


  def add_clip_rect(self, id:str, x:float, y:float, width:float, height:float) -> str:
    'Define a rectangular clip path; return the `url(#id)` reference for use as a `clip-path` attribute.'
    cp = ClipPath(id=id)
    cp.rect(x, y, width, height)
    self.clip_paths.append(cp)
    return f'url(#{id})'


  def build(self) -> Svg:
    'Assemble the root `svg` element: header comments, description, title, metadata, clip paths and non-empty layers.'
    svg = Svg(width=self.width, height=self.height, version='1.1',
      attrs={'xmlns:rdf': rdf_ns, 'xmlns:cc': cc_ns, 'xmlns:dc': dc_ns})

    author = self.author or self.copyright_holder
    holder = self.copyright_holder or self.author
    if self.author and self.copyright_holder and self.author != self.copyright_holder:
      svg.comment(_comment_text(self.author))
    if holder:
      svg.comment(_comment_text(f'SVG plot copyright {holder} {self.copyright_date}'.rstrip()))
    if self.description:
      svg.comment(_comment_text(self.description))
      svg.append(Desc(_=self.description))
    if self.title:
      svg.append(Title(_=self.title))
    if self.filename:
      svg.comment(_comment_text(f'File {self.filename}'))
    if self.license is not None:
      svg.append(self.build_metadata(author=author, holder=holder))
    if self.clip_paths:
      defs = svg.defs()
      defs.extend(self.clip_paths)
    for g in self.groups.values():
      if not g.is_empty: svg.append(g)
    return svg


  def build_metadata(self, author:str, holder:str) -> Metadata:
    'Build the RDF/Dublin Core metadata block describing the work and its license terms.'
    assert self.license is not None
    lic = self.license
    license_url = 'http://creativecommons.org/licenses/'

    def agent(name:str) -> SvgNode:
      return _node('cc:Agent', _node('dc:title', name))

    work = _node('cc:Work', attrs={'rdf:about': self.filename},
      _=[
        _node('dc:format', 'image/svg+xml'),
        _node('dc:type', attrs={'rdf:resource': 'http://purl.org/dc/dcmitype/StillImage'}),
        _node('dc:title', self.title or self.filename),
        _node('dc:creator', agent('svgplot')),
        _node('dc:author', agent(author)),
        _node('dc:rights', agent(holder)),
        _node('dc:date', self.copyright_date),
        _node('dc:identifier', self.filename),
        _node('dc:publisher', agent(holder)),
        _node('dc:language', 'en_US'),
        _node('dc:description', self.description),
        _node('dc:contributor', agent(author)),
        _node('cc:license', attrs={'rdf:resource': license_url}),
      ])
    terms = [
      (lic.reproduction, 'Reproduction'),
      (lic.distribution, 'Distribution'),
      ('requires', 'Notice'),
      (lic.attribution, 'Attribution'),
      (lic.commercial_use, 'CommercialUse'),
      (lic.derivative_works, 'DerivativeWorks'),
    ]
    cc_license = _node('cc:License', attrs={'rdf:about': license_url},
      _=[_node(f'cc:{term}', attrs={'rdf:resource': cc_ns + name}) for term, name in terms])
    return Metadata(id='metadata', _=_node('rdf:RDF', work, cc_license))


  def render_str(self) -> str:
    'Render the complete document, starting with the XML declaration.'
    return xml_declaration + '\n' + self.build().render_str(precision=self.precision)


  def write(self, dst:str|PathLike|TextIO) -> None:
    '''
    Write the document to a path or text stream.
    A path without the `.svg` extension has it appended. I/O errors propagate to the caller.
    '''
    if isinstance(dst, (str, PathLike)):
      path = fspath(dst)
      if not path.endswith('.svg'): path += '.svg'
      if not self._filename_fixed: self._filename = path
      text = self.render_str()
      with open(path, 'w', encoding='utf-8') as f: f.write(text)
      logger.debug('wrote %s (%d characters).', path, len(text))
    else:
      dst.write(self.render_str())


def _node(tag:str, *children:Any, attrs:dict[str,Any]|None=None, _:Any=()) -> SvgNode:
  'Create a generic (metadata) node.'
  return SvgNode(*children, tag=tag, attrs=attrs, _=_)


def _comment_text(text:str) -> str:
  'XML comments cannot contain "--".'
  while '--' in text: text = text.replace('--', '- -')
  return text
