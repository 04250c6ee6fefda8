# -*- coding: utf-8 -*-

"""
Module for the representation and simulation of rational transfer functions
"""

import enum
import inspect
import warnings

import numpy as np
import scipy.integrate as integrate
import sympy as sp


def mainprint(*args, **kwargs):
    """
    This function wraps pythons print function such that it is
    only executed if the calling module is the main module.

    This is relevant to the examples which are imported as modules in the
    test suite where we dont want all the output which is generated
    by the actual example
    """

    frame_up = inspect.currentframe().f_back
    module_name = frame_up.f_globals['__name__']

    if module_name == '__main__':
        print(*args, **kwargs)


# The laplace variable
s = sp.Symbol('s')

# The time variable
t = sp.Symbol('t')


class Domain(enum.Enum):
    CONTINUOUS = "continuous"
    DISCRETE = "discrete"


# names of the variables for which we do not warn when deriving the domain
CONVENTIONAL_VARIABLES = {"s": Domain.CONTINUOUS, "z": Domain.DISCRETE, "k": Domain.DISCRETE}


def degree(expr, var=s):
    return sp.Poly(expr, var, domain='EX').degree()


def expr2coeffs(expr, var=s, lead_test=True):
    """ returns a numpy array of the coeffs (highest last)
    """

    p = sp.Poly(expr, var, domain="EX")

    c_dict = p.as_dict()
    coeffs = [c_dict.get((i,), 0) for i in range(p.degree()+1)]

    try:
        coeffs = np.array(list(map(float, coeffs)))
    except TypeError:
        msg = "Non-numeric coefficient in {}: {}".format(expr, coeffs)
        raise TypeError(msg)

    # check if leading coeff == 1
    if lead_test:
        assert coeffs[-1] == 1
    return coeffs


def _get_domain(var, domain):
    if domain is None:
        domain = CONVENTIONAL_VARIABLES.get(var.name)
        if domain is None:
            msg = "Unconventional variable '{0}': the model is treated as time discrete. "\
                  "Pass `domain` explicitly to avoid this warning."
            warnings.warn(msg.format(var))
            domain = Domain.DISCRETE
    return Domain(domain)


def roots_of(poly_expr, var):
    """
    Return the flat list of roots (with multiplicity) of a polynomial expression.

    If sympy can not find all roots in closed form we resort to numerical root finding.
    This is only possible for numeric coefficients.
    """
    poly = sp.Poly(poly_expr, var)
    res = sp.roots(poly, multiple=True)

    if len(res) == poly.degree():
        return res

    if poly.free_symbols - {var}:
        msg = "Could not compute all roots of {} w.r.t. {}.".format(poly_expr, var)
        raise ValueError(msg)

    warnings.warn("Using numerical root finding for {}".format(poly_expr))
    return poly.nroots()


class TransferFunction(object):
    """
    Rational transfer function of one variable (s for time continuous systems,
    usually z for time discrete systems).

    The domain is fixed at construction time. If it is not given it is derived
    from the name of the variable.
    """

    def __init__(self, expr, var=None, domain=None, name=None):
        expr = sp.sympify(expr)

        if var is None:
            symbs = expr.free_symbols
            if len(symbs) != 1:
                msg = "Expected exactly one free symbol in {}, got {}. "\
                      "Pass `var` explicitly.".format(expr, sorted(symbs, key=str))
                raise ValueError(msg)
            var, = symbs
        elif not isinstance(var, sp.Symbol):
            raise TypeError("invalid variable: {}".format(var))

        if name is None:
            name = "G"

        # common factors of numerator and denominator are kept (no cancellation)
        num, den = sp.together(expr).as_numer_denom()

        highest_den_coeff = sp.Poly(den, var).LC()
        num = sp.expand(num/highest_den_coeff)
        den = sp.expand(den/highest_den_coeff)

        self.expr = expr
        self.var = var
        self.domain = _get_domain(var, domain)
        self.num = num
        self.den = den
        self.name = name

    def __repr__(self):
        return "{}:{}({})".format(type(self).__name__, self.name, self.expr)

    @property
    def is_continuous(self):
        return self.domain is Domain.CONTINUOUS

    @property
    def relative_degree(self):
        return degree(self.den, self.var) - degree(self.num, self.var)

    def poles(self):
        return roots_of(self.den, self.var)

    def zeros(self):
        if not self.num.has(self.var):
            return []
        return roots_of(self.num, self.var)

    def coeffs(self):
        """
        :return: numerator and denominator coefficients as numpy arrays (highest last)
        """
        numc = expr2coeffs(self.num, self.var, lead_test=False)
        denc = expr2coeffs(self.den, self.var)
        return numc, denc

    def dc_gain(self):
        """
        static gain: H(0) for time continuous and H(1) for time discrete systems
        """
        if self.is_continuous:
            value = 0
        else:
            value = 1
        return sp.simplify(self.num.subs(self.var, value)/self.den.subs(self.var, value))

    def is_stable(self):
        """
        :return:    True, False or None (if stability can not be decided)
        """

        if self.is_continuous:
            conditions = [sp.re(p).is_negative for p in self.poles()]
        else:
            conditions = [(sp.Abs(p) - 1).is_negative for p in self.poles()]

        if False in conditions:
            return False
        if None in conditions:
            return None
        return True


def stepfnc(tup, amp1=1, tdown=np.inf, amp0=0):
    """
    returns a callable of 1 arg which is a step function
    """
    assert float(tup) == tup
    assert float(tdown) == tdown
    assert float(amp1) == amp1
    assert float(amp0) == amp0

    assert tdown > tup

    def fnc(t):
        if t < tup:
            u = amp0
        elif t < tdown:
            u = amp1
        else:
            u = amp0
        return u

    return fnc


def get_linear_ct_model(tf):
    """
    Return Matrices A, B, C, D of the controller canonical form

    :param tf:  TransferFunction (proper, time continuous)
    """

    numc, denc = tf.coeffs()
    n = len(denc) - 1

    if len(numc) > len(denc):
        raise NotImplementedError("Improper transfer function: {}".format(tf.expr))

    numc = np.concatenate((numc, np.zeros(n + 1 - len(numc))))

    # direct feedthrough of biproper transfer functions
    D = np.array([[numc[n]]])
    numc = numc[:n] - D[0, 0]*denc[:n]

    # handle integrator chains like xdot1 = x2
    A = np.eye(n, k=1)
    if n > 0:
        # create the last line of the controller canonical form
        A[-1, :] = -denc[:n]

    B = np.zeros((n, 1))
    if n > 0:
        B[-1, 0] = 1

    C = numc.reshape(1, n)

    return A, B, C, D


def ct_step_response(tf, tend, n_points=500, input_fnc=None):
    """
    Simulate the response of a time continuous transfer function.

    :param tf:          TransferFunction
    :param tend:        final time
    :param n_points:    number of time points in [0, tend]
    :param input_fnc:   callable of time; defaults to the unit step

    :return:    tt, yy (1d-arrays)
    """

    if input_fnc is None:
        input_fnc = stepfnc(0, 1)

    A, B, C, D = get_linear_ct_model(tf)

    tt = np.linspace(0, float(tend), n_points)
    n = A.shape[0]

    if n == 0:
        # static gain
        uu = np.array([input_fnc(t) for t in tt])
        return tt, D[0, 0]*uu

    def rhs(x, t):
        return A.dot(x) + B[:, 0]*input_fnc(t)

    xx = integrate.odeint(rhs, np.zeros(n), tt)
    uu = np.array([input_fnc(t) for t in tt])

    yy = xx.dot(C[0, :]) + D[0, 0]*uu

    return tt, yy
