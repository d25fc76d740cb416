# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from math import inf, nan

from svgplot.exceptions import DataError
from svgplot.uncertain import Category, classify, is_limit, partition, partition_points, to_unc, Unc
from utest import utest, utest_exc, utest_val


utest(Unc(2.0), to_unc, 2)
utest(Unc(1.5, sd=0.1), to_unc, Unc(1.5, sd=0.1))
utest_exc(DataError, Unc, 1.0, sd=-1)
utest_val(False, Unc(1.0).has_sd, 'no uncertainty')
utest_val(False, Unc(1.0).has_df, 'unknown degrees of freedom')
utest_val(True, Unc(1.0, df=0).has_df, 'zero degrees of freedom are known')
utest_val(1.5, float(Unc(1.5, sd=0.1)), 'float conversion drops the uncertainty')

utest(Category.normal, classify, 1.0)
utest(Category.nan, classify, nan)
utest(Category.pos_inf, classify, inf)
utest(Category.neg_inf, classify, -inf)
utest(Category.neg_inf, classify, Unc(-inf))
utest(True, is_limit, nan)
utest(False, is_limit, -1e308)

values = [1.0, nan, inf, 2, -inf, Unc(3.0, sd=0.5)]
normal, limits = partition(values)
utest_val([1.0, 2.0, 3.0], [u.value for u in normal], 'normal values in order')
utest_val([Category.nan, Category.pos_inf, Category.neg_inf], [classify(u) for u in limits], 'limit values in order')
utest_val(len(values), len(normal) + len(limits), 'partition is total')
utest_val(True, all(classify(u) is Category.normal for u in normal), 'no limit value is normal')
utest_val(True, all(classify(u) is not Category.normal for u in limits), 'no normal value is a limit')

normal_points, limit_points = partition_points([(1, 2), (nan, 2), (1, inf), (3, 4)])
utest_val([(1.0, 2.0), (3.0, 4.0)], [(x.value, y.value) for x, y in normal_points], 'normal points')
utest_val(2, len(limit_points), 'a point is a limit if either coordinate is')
