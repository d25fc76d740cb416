# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Statistics for plot annotations: sample quantiles and box plot summaries,
confidence intervals of uncertain values, and uncertainty-driven rounding.
'''

from dataclasses import dataclass
from math import floor, isfinite, log10, sqrt
from typing import Iterable, Sequence

from scipy import stats as sps

from .exceptions import ConfigError, DataError
from .uncertain import Distribution


min_box_values = 8 # Fewer values do not give useful quartiles.
k_outlier = 1.5 # Fence distance in interquartile ranges beyond which values are outliers.
k_extreme = 3.0


def quantile(data:Sequence[float], p:float, definition:int=8) -> float:
  '''
  Estimate the `p` quantile of `data`, which must be sorted ascending,
  using sample quantile definition 4 to 9 of Hyndman and Fan,
  "Sample Quantiles in Statistical Packages", The American Statistician 50(4), 1996.
  Definition 8 (the default) is approximately median-unbiased; 7 is the spreadsheet convention; 6 is Minitab's.
  '''
  n = len(data)
  if n == 0: raise DataError('quantile of empty data')
  if not 0 <= p <= 1: raise ConfigError(f'quantile fraction must be in the range 0 to 1: {p!r}')
  match definition:
    case 4: m = 0.0
    case 5: m = 0.5
    case 6: m = p
    case 7: m = 1 - p
    case 8: m = (p + 1) / 3
    case 9: m = (p + 1.5) / 4
    case _: raise ConfigError(f'quantile definition must be 4 to 9: {definition!r}')
  h = n * p + m # One-based position.
  j = floor(h)
  g = h - j
  if j < 1: return float(data[0])
  if j >= n: return float(data[-1])
  return (1 - g) * data[j-1] + g * data[j]


def median(data:Sequence[float]) -> float:
  'Median of `data`, which must be sorted ascending.'
  n = len(data)
  if n == 0: raise DataError('median of empty data')
  if n % 2: return float(data[n // 2])
  return (data[n//2 - 1] + data[n//2]) / 2


@dataclass(frozen=True)
class BoxStats:
  '''
  The five-number summary of a box plot series, and its outliers.
  Mild outliers lie between 1.5 and 3 interquartile ranges beyond the quartiles; extreme outliers lie further out.
  The whiskers reach the most extreme values that are not outliers.
  '''
  values:tuple[float,...] # Sorted.
  q1:float
  median:float
  q3:float
  whisker_min:float
  whisker_max:float
  mild_outliers:tuple[float,...]
  extreme_outliers:tuple[float,...]

  @property
  def iqr(self) -> float: return self.q3 - self.q1


def box_stats(values:Iterable[float], definition:int=8) -> BoxStats:
  'Compute box plot statistics. Raises `DataError` for fewer than eight values or non-finite values.'
  data = sorted(float(v) for v in values)
  if len(data) < min_box_values:
    raise DataError(f'box plot series has {len(data)} values; at least {min_box_values} are required')
  if not all(isfinite(v) for v in data): raise DataError('box plot series contains non-finite values')
  q1 = quantile(data, 0.25, definition)
  q3 = quantile(data, 0.75, definition)
  iqr = q3 - q1
  lo_fence = q1 - k_outlier * iqr
  hi_fence = q3 + k_outlier * iqr
  lo_extreme = q1 - k_extreme * iqr
  hi_extreme = q3 + k_extreme * iqr
  mild = [v for v in data if lo_extreme <= v < lo_fence or hi_fence < v <= hi_extreme]
  extreme = [v for v in data if v < lo_extreme or v > hi_extreme]
  inside = [v for v in data if lo_fence <= v <= hi_fence]
  return BoxStats(
    values=tuple(data),
    q1=q1,
    median=median(data),
    q3=q3,
    whisker_min=inside[0],
    whisker_max=inside[-1],
    mild_outliers=tuple(mild),
    extreme_outliers=tuple(extreme))


def conf_interval(value:float, sd:float, df:int=-1, alpha:float=0.05,
 distribution:Distribution=Distribution.gaussian) -> tuple[float,float]:
  '''
  Two-sided `1 - alpha` confidence interval of a value with standard deviation `sd`.
  A Gaussian value uses Student's t distribution when the degrees of freedom `df` are known (positive),
  and the normal distribution otherwise.
  Uniform and triangular values use the closed forms for their half-widths.
  '''
  if not 0 < alpha < 1: raise ConfigError(f'alpha must be in the open range 0 to 1: {alpha!r}')
  if sd <= 0: return (value, value)
  if distribution == Distribution.gaussian:
    if df > 0: k = float(sps.t.ppf(1 - alpha / 2, df))
    else: k = float(sps.norm.ppf(1 - alpha / 2))
    half = k * sd
  elif distribution == Distribution.uniform:
    half = sd * sqrt(3) * (1 - alpha)
  else:
    half = sd * sqrt(6) * (1 - sqrt(alpha))
  return (value - half, value + half)


def round_m(sd:float, sig_digits:int=2) -> int:
  '''
  The decimal digit position (power of ten) to which a value with standard deviation `sd` should be rounded,
  so that the uncertainty shows `sig_digits` significant digits. For sd=0.0123 and two digits this is -3.
  '''
  if sig_digits < 1: raise ConfigError(f'significant digits must be positive: {sig_digits!r}')
  if not sd > 0 or not isfinite(sd): raise DataError(f'rounding requires a positive finite uncertainty: {sd!r}')
  return floor(log10(sd)) - sig_digits + 1


def round_ms(value:float, m:int) -> str:
  'Format `value` rounded to the digit at position `m` (a power of ten): round_ms(3.14159, -2) == "3.14".'
  if m < 0: return f'{value:.{-m}f}'
  scale = 10 ** m
  return str(int(round(value / scale)) * scale)
