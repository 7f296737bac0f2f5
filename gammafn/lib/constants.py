"""Constant tables shared by all the evaluators.

Everything in this module is computed once at import time and never mutated afterwards.
"""
import numpy as np

__author__ = 'Robbert Harms'
__date__ = '2020-05-12'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert@xkls.nl'
__licence__ = 'LGPL v3'


"""The maximum number of terms we evaluate of any series or continued fraction, fixed for the whole process."""
SERIES_MAX = 250

TWO_PI = 2.0 * np.pi
SQRT_TWO_PI = np.sqrt(TWO_PI)
LOG_TWO_PI = np.log(TWO_PI)

# 2*pi split in a high and a low part, for reducing large angles without losing the low order bits
TWO_PI_HIGH = 6.283185307179586
TWO_PI_LOW = 2.4492935982947064e-16


"""The Bernoulli numbers B_{2k} for k = 0, ..., 20.

Index k of this table holds B_{2k}, so ``BERNOULLI[1]`` is B_2 = 1/6. This is enough to let the Stirling series
converge to full double precision for all arguments x >= 16.
"""
BERNOULLI = (
    1.0,
    1.0 / 6.0,
    -1.0 / 30.0,
    1.0 / 42.0,
    -1.0 / 30.0,
    5.0 / 66.0,
    -691.0 / 2730.0,
    7.0 / 6.0,
    -3617.0 / 510.0,
    43867.0 / 798.0,
    -174611.0 / 330.0,
    854513.0 / 138.0,
    -236364091.0 / 2730.0,
    8553103.0 / 6.0,
    -23749461029.0 / 870.0,
    8615841276005.0 / 14322.0,
    -7709321041217.0 / 510.0,
    2577687858367.0 / 6.0,
    -26315271553053477373.0 / 1919190.0,
    2929993913841559.0 / 6.0,
    -261082718496449122051.0 / 13530.0
)


"""Godfrey's Lanczos coefficients, with g = 607/128.

These claim a relative error below 1e-15, measured deviations at the integers are a few units in the last place.
Also listed in Numerical Recipes (3rd edition), section 6.1.
"""
LANCZOS_G = 607.0 / 128.0

LANCZOS_C = (
    0.99999999999999709182,
    57.156235665862923517,
    -59.597960355475491248,
    14.136097974741747174,
    -0.49191381609762019978,
    3.3994649984811888699e-5,
    4.6523628927048575665e-5,
    -9.8374475304879564677e-5,
    1.5808870322491248884e-4,
    -2.1026444172410488319e-4,
    2.1743961811521264320e-4,
    -1.6431810653676389022e-4,
    8.4418223983852743293e-5,
    -2.6190838401581408670e-5,
    3.6899182659531622704e-6
)

LANCZOS_GP = LANCZOS_G - 0.5
LANCZOS_EXP_G = np.exp(-LANCZOS_G)
LANCZOS_EXP_GP = np.exp(-LANCZOS_GP)


"""Temme's coefficients for the uniform asymptotic expansion of the incomplete Gamma function.

Row i holds the coefficients of 1/a^i, column j the coefficient of u^j, with u = log(x/a). These are obtained by
expanding the inverse odd powers of eta in powers of (x - a)/a, dropping the singular terms and converting to powers
of u. The table holds enough terms for full double precision when a > 100 and |x/a - 1| < 0.25, and only there.
"""
TEMME_D = (
    (-1.0 / 3.0, 1.0 / 12.0, -1.0 / 1080.0, -19.0 / 12960.0, 1.0 / 181440.0, 47.0 / 1360800.0,
     1.0 / 32659200.0, -221.0 / 261273600.0, -281.0 / 155196518400.0, 857.0 / 40739086080.0,
     1553.0 / 40351094784000.0),
    (-1.0 / 540.0, -1.0 / 288.0, 25.0 / 12096.0, -223.0 / 1088640.0, -89.0 / 1088640.0,
     757.0 / 52254720.0, 445331.0 / 155196518400.0, -1482119.0 / 2172751257600.0,
     -7921307.0 / 84737299046400.0),
    (25.0 / 6048.0, -139.0 / 51840.0, 101.0 / 311040.0, 1379.0 / 7464960.0, -384239.0 / 7390310400.0,
     -1007803.0 / 155196518400.0, 88738171.0 / 24210656870400.0, 48997651.0 / 484213137408000.0),
    (101.0 / 155520.0, 571.0 / 2488320.0, -3184811.0 / 7390310400.0, 36532751.0 / 310393036800.0,
     10084279.0 / 504388684800.0, -82273493.0 / 5977939968000.0),
    (-3184811.0 / 3695155200.0, 163879.0 / 209018880.0, -2745493.0 / 16303472640.0,
     -232938227.0 / 2934625075200.0, 256276123.0 / 5869250150400.0),
    (-2745493.0 / 8151736320.0, -5246819.0 / 75246796800.0, 119937661.0 / 451480780800.0,
     -294828209.0 / 2708884684800.0),
    (119937661.0 / 225740390400.0, -534703531.0 / 902961561600.0),
    (8325705316049.0 / 24176795811840000.0, 4483131259.0 / 86684309913600.0)
)
