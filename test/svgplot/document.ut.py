# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

import os
from io import StringIO
from tempfile import TemporaryDirectory

from svgplot.exceptions import ConfigError
from svgplot.markers import draw_point, PointShape, PointStyle
from svgplot.svg import Ellipse, G, Line, Path, Polygon
from svgplot.svg.document import Layer, License, SvgDocument
from svgplot.svg.loader import parse_svg
from utest import utest_exc, utest_val


doc = SvgDocument(200, 100, title='Empty layers')
doc.layer(Layer.data_points).line(0, 0, 10, 10)
svg = doc.build()
utest_val(['plotPoints'], [g.id for g in svg.pick_all(G)], 'only layers with content are written')

text = doc.render_str()
utest_val(True, text.startswith('<?xml version="1.0"'), 'xml declaration comes first')
parsed = parse_svg(text)
utest_val(True, all(not g.is_empty for g in parsed.find_all(G)), 'every group in the output has content')
utest_val('10', parsed.find(Line).attrs['x2'], 'line survives parsing')
utest_val('Empty layers', parsed.pick('title').text, 'document title')

doc.clear()
utest_val([], list(doc.build().pick_all(G)), 'clearing empties every layer')


# Uncertainty ellipses are written widest first, and the one standard deviation ellipse is painted last.

doc = SvgDocument(200, 100)
unc_groups = (doc.layer(Layer.unc3), doc.layer(Layer.unc2), doc.layer(Layer.unc1))
draw_point(doc.layer(Layer.data_points), 50, 50, PointStyle(shape=PointShape.unc_ellipse),
  unc_groups=unc_groups, x_radius=2, y_radius=3)
ellipses = list(doc.build().find_all(Ellipse))
utest_val([6, 4, 2], [e.attrs['rx'] for e in ellipses], 'ellipse x radii in paint order')
utest_val([9, 6, 3], [e.attrs['ry'] for e in ellipses], 'ellipse y radii in paint order')


# Writing.

doc = SvgDocument(200, 100, description='A test image.')
doc.layer(Layer.title).add_text(100, 20, 'T')
buf = StringIO()
doc.write(buf)
utest_val(doc.render_str(), buf.getvalue(), 'writing to a stream')
utest_val(True, '<desc>A test image.</desc>' in buf.getvalue(), 'description element')

with TemporaryDirectory() as tmp:
  doc.write(os.path.join(tmp, 'plot'))
  path = os.path.join(tmp, 'plot.svg')
  utest_val(True, os.path.exists(path), 'the .svg extension is appended')
  with open(path, encoding='utf-8') as f: written = f.read()
  utest_val(True, '<!-- File ' in written, 'the file name is recorded')
  utest_val(path, doc.filename, 'document takes the written file name')
  doc.write(os.path.join(tmp, 'other.svg'))
  other = os.path.join(tmp, 'other.svg')
  utest_val(other, doc.filename, 'each write records its own file name')
  with open(other, encoding='utf-8') as f: utest_val(True, f'File {other}' in f.read(), 'the comment names the latest file')

  named = SvgDocument(200, 100, filename='named.svg')
  named.write(os.path.join(tmp, 'plot'))
  utest_val('named.svg', named.filename, 'a configured file name is kept')


# License metadata.

doc = SvgDocument(200, 100, author='A. Author', copyright_date='2024', license=License(commercial_use='prohibits'))
doc.layer(Layer.title).add_text(100, 20, 'T')
svg = parse_svg(doc.render_str())
metadata = svg.pick('metadata')
utest_val(True, any(n.tag == 'cc:prohibits' and n.attrs.get('rdf:resource', '').endswith('CommercialUse')
  for n in metadata.find_all()), 'license term is written')
utest_val('A. Author', metadata.find('dc:author').text.strip(), 'author metadata')

utest_exc(ConfigError, License, reproduction='maybe')
utest_exc(ConfigError, SvgDocument, 0, 100)


# Paths and polygons parse back with their attribute text.

svg = parse_svg("<svg xmlns='http://www.w3.org/2000/svg'><path d='M0,0 L1,1'/><polygon points='0,0 1,0 1,1'/></svg>")
utest_val('M0,0 L1,1', svg.find(Path).attrs['d'], 'parsed path data')
utest_val('0,0 1,0 1,1', svg.find(Polygon).attrs['points'], 'parsed polygon points')
utest_val("<path d='M0,0 L1,1'/>\n", svg.find(Path).render_str(), 'parsed path renders unchanged')
