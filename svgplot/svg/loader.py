# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from io import BytesIO
from os import PathLike
from typing import Any, BinaryIO, cast

from lxml import etree

from . import Svg, SvgNode


FileOrPath = str|PathLike|BinaryIO


def load_svg(file_or_path:FileOrPath, **kwargs:Any) -> Svg:
  '''
  Parse an SVG document into an `Svg` tree. Keyword arguments are passed to the lxml `XMLParser`.
  Namespaced names are reduced (see `SvgNode.etree_name`), so the result can be queried with the tags used to build it.
  '''
  parser = etree.XMLParser(**kwargs)
  tree = etree.parse(cast(Any, file_or_path), parser)
  root = tree.getroot()
  node = SvgNode.from_etree(root)
  if not isinstance(node, Svg): raise ValueError(f'root element is not `svg`: {node.tag!r}')
  return node


def parse_svg(source:bytes|str, **kwargs:Any) -> Svg:
  'Parse SVG text. Strings are encoded first, because lxml rejects strings that carry an encoding declaration.'
  if isinstance(source, str): source = source.encode('utf-8')
  return load_svg(BytesIO(source), **kwargs)
