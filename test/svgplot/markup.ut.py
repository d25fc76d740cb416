# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from svgplot.exceptions import ConflictingValues, MultipleMatchesError, NoMatchError
from svgplot.markup import fmt_num, Mu, prefer_int
from svgplot.svg import Circle, G, Path, PathData, rotate, Svg, Text
from utest import utest, utest_exc, utest_val


utest('<div/>\n', Mu(tag='div').render_str)
utest("<p class='c'>x</p>\n", Mu('x', tag='p', cl='c').render_str)
utest("<p id='i' class='c' a='1'/>\n", Mu(tag='p', cl='c', a=1, id='i').render_str)
utest_exc(ConflictingValues, Mu, tag='p', cl='c', attrs={'class': 'd'})
utest_exc(TypeError, Mu, None)

m = Mu(tag='g', stroke_width=2, fill=None)
utest_val({'stroke-width': 2}, m.attrs, 'underscores become hyphens and None values are dropped')
utest_val(['1', '2.5'], Mu(1, 2.5, tag='x')._, 'numeric children become text')


# Numbers are formatted at render time.

utest('1.235', fmt_num, 1.23456)
utest('1.2', fmt_num, 1.23456, 1)
utest('2', fmt_num, 2.0)
utest('0', fmt_num, -0.0001)
utest(3, prefer_int, 3.0)
utest(3.5, prefer_int, 3.5)

c = Circle(cx=1.23456, cy=2, r=0.5)
utest("<circle cx='1.23' cy='2' r='0.5'/>\n", c.render_str, precision=2)
utest("<path d='M0,0 L1.5,2 Z'/>\n", Path(d=PathData().M(0, 0).L(1.5, 2).Z()).render_str)
utest_exc(ValueError, PathData().add, 'X', 1)
utest_exc(ValueError, PathData().add, 'M', 1)
utest("<text x='10' y='20' transform='rotate(-90,10,20)'>up</text>\n",
  Text(_='up', x=10, y=20, transform=rotate(-90, 10, 20)).render_str)


# Text escaping keeps character references.

utest("<text>a &amp; b &#x3A9; &lt;</text>\n", Text(_='a & b &#x3A9; <').render_str)


# Queries.

svg = Svg(width=10, height=10)
g = svg.g(id='layer')
g.circle(1, 1, 1, cl='a')
g.circle(2, 2, 1, cl='b')
g.add_text(0, 0, 'hello')
utest_val(2, len(list(svg.find_all(Circle))), 'find all circles')
utest_val(0, len(list(svg.pick_all(Circle))), 'pick only searches children')
utest_val(2, svg.find(Circle, cl='b').attrs['cx'], 'find by class')
utest_val('hello', svg.find(Text, text='hell').text, 'find by text')
utest_val(g, svg.find(G, id='layer'), 'find by attribute')
utest_exc(MultipleMatchesError, svg.find, Circle)
utest_exc(NoMatchError, svg.find, 'rect')
utest_val(None, svg.title, 'no title')
svg.title = 'T'
utest_val('T', svg.title, 'title element')

g.clear()
utest_val(True, g.is_empty, 'clear removes children')
utest_val('layer', g.id, 'clear keeps attributes')

c = Circle(cx=1, cy=2, r=3)
utest_val(1, c['cx'], 'attribute access')
c['fill'] = 'red'
del c['r']
utest_val({'cx': 1, 'cy': 2, 'fill': 'red'}, c.attrs, 'attribute assignment and deletion')
utest_val(['a', 'b'], list(Text('a', 'b')), 'iteration yields children')
