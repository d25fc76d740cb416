# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from utest import utest, utest_approx, utest_call, utest_exc, utest_seq, utest_val, utest_val_approx


utest(True, lambda: True)
utest(True, lambda b: b, True)

def raise_expected(*args): raise Exception('expected')

utest_exc(Exception('expected'), raise_expected)
utest_exc(Exception, raise_expected)
utest_exc("Exception('expected')", raise_expected)

utest_seq([0, 1], range, 2)
utest_seq([0, 1, 2], lambda: {2, 0, 1}, _sort=True)

utest_val(True, True, 'boolean test')
utest_val((0, 1), (0, 1), 'tuple test')


# Approximate comparisons.

utest_approx(0.3, lambda: 0.1 + 0.2)
utest_approx((1.0, 2.0), lambda: (1.0 + 1e-12, 2.0))
utest_approx([('S', 0.3)], lambda: [('S', 0.1 + 0.2)])
utest_approx(1.0, lambda x: x, 1.001, _rel_tol=1e-2)

utest_val_approx(0.3, 0.1 + 0.2, 'float sum')
utest_val_approx(0.0, 1e-12, 'near zero uses the absolute tolerance')
utest_val_approx(100, 101, 'relative tolerance', rel_tol=0.05)


calls = []

@utest_call
def test_call() -> None:
  calls.append(1)

utest_val([1], calls, 'utest_call invokes the function immediately')
