# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from svgplot.exceptions import ConfigError, DataError
from svgplot.stats import box_stats, conf_interval, median, quantile, round_m, round_ms
from svgplot.uncertain import Distribution
from utest import utest, utest_approx, utest_exc, utest_val


data = [float(i) for i in range(1, 11)]

utest_approx(2.916666666666667, quantile, data, 0.25)
utest_approx(3.25, quantile, data, 0.25, 7)
utest_approx(2.75, quantile, data, 0.25, 6)
utest_approx(5.5, quantile, data, 0.5)
utest(1.0, quantile, data, 0)
utest(10.0, quantile, data, 1)
utest_exc(ConfigError, quantile, data, 0.5, 3)
utest_exc(ConfigError, quantile, data, 1.5)
utest_exc(DataError, quantile, [], 0.5)

utest(5.5, median, data)
utest(3.0, median, [1.0, 3.0, 7.0])


# Box statistics.

s = box_stats(data + [20.0, 100.0])
utest_val(12, len(s.values), 'all values are kept')
utest_val(6.5, s.median, 'median')
utest_val(True, abs(s.q1 - 3.4166666666666665) < 1e-9, f'first quartile: {s.q1}')
utest_val(True, abs(s.q3 - 9.583333333333334) < 1e-9, f'third quartile: {s.q3}')
utest_val(1.0, s.whisker_min, 'lower whisker')
utest_val(10.0, s.whisker_max, 'upper whisker')
utest_val((20.0,), s.mild_outliers, 'mild outliers')
utest_val((100.0,), s.extreme_outliers, 'extreme outliers')

s = box_stats(reversed(data))
utest_val(tuple(data), s.values, 'values are sorted')
utest_val((), s.mild_outliers + s.extreme_outliers, 'no outliers')

utest_exc(DataError, box_stats, [1, 2, 3, 4, 5, 6, 7])
utest_exc(DataError, box_stats, data + [float('nan')])


# Confidence intervals.

utest_approx((8.040036015459947, 11.959963984540053), conf_interval, 10, 1, _rel_tol=1e-7)
utest_approx((7.771861384, 12.228138616), conf_interval, 10, 1, 10, _rel_tol=1e-7)
utest((5.0, 5.0), conf_interval, 5.0, 0)
utest_approx((10 - 3 ** 0.5 * 0.95, 10 + 3 ** 0.5 * 0.95), conf_interval, 10, 1, distribution=Distribution.uniform)
utest_exc(ConfigError, conf_interval, 10, 1, alpha=0)


# Rounding to the uncertainty.

utest(-3, round_m, 0.0123)
utest(-2, round_m, 0.0123, 1)
utest(0, round_m, 12.3)
utest('3.14', round_ms, 3.14159, -2)
utest('1200', round_ms, 1234.5, 2)
utest_exc(DataError, round_m, 0)
utest_exc(ConfigError, round_m, 1.0, 0)
