# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
svgplot renders 1D, 2D and box plots of numeric data series as SVG documents.
'''

import logging

from .__about__ import __version__
from .autoscale import AutoScale, scale_axis, scale_points, scale_values, Steps
from .axis import AxisRange, Side, TicksPosition, TicksStyle
from .boxplot import BoxPlot, BoxSeries
from .color import blank, Color, named, rgb, to_color
from .exceptions import *
from .legend import LegendPlace, LegendStyle
from .markers import CustomGlyph, PointShape, PointStyle
from .plot1d import Plot1D, Series1D
from .plot2d import BarOption, BarStyle, Plot2D, Series2D
from .style import AxisLineStyle, BoxStyle, LineStyle, SvgStyle, TextStyle
from .svg.document import License
from .text import NumFormat, Rotation
from .uncertain import Distribution, Unc
from .values import ValueStyle


logging.getLogger(__name__).addHandler(logging.NullHandler())
