"""
This module contains the tools to simulate time discrete transfer functions
"""

import numpy as np
import sympy as sp

import symbtools as st

from .core import Domain, TransferFunction

# discrete time

k = sp.Symbol("k")

# shift variable of the z-transform
z = sp.Symbol("z")


def td_step(k, k_step, value1=1, value0=0):
    return sp.Piecewise((value0, k < k_step), (value1, True))


def dt_tf(expr, var=z, name=None) -> TransferFunction:
    """
    shortcut to create a time discrete transfer function
    """
    return TransferFunction(expr, var=var, domain=Domain.DISCRETE, name=name)


def difference_equation_coeffs(tf: TransferFunction):
    """
    :return:    b, a (numerator and denominator coefficients, highest first)
                such that a[0]*y[k] + a[1]*y[k-1] + ... = b[0]*u[k] + b[1]*u[k-1] + ...
    """
    numc, denc = tf.coeffs()

    if len(numc) > len(denc):
        msg = "Non-causal (improper) transfer function: {}".format(tf.expr)
        raise NotImplementedError(msg)

    n = len(denc) - 1

    # pad the numerator such that both polynomials have degree n
    numc = np.concatenate((numc, np.zeros(n + 1 - len(numc))))

    return numc[::-1], denc[::-1]


def dt_step_response(tf: TransferFunction, k_end, input_expr=None):
    """
    Simulate the response of a time discrete transfer function
    for the sample indices 0, 1, ..., floor(k_end).

    :param tf:          TransferFunction (in the shift variable)
    :param k_end:       last sample index
    :param input_expr:  sympy expression of k; defaults to the unit step

    :return:    kk, yy (1d-arrays)
    """

    if input_expr is None:
        input_expr = td_step(k, 0)

    b, a = difference_equation_coeffs(tf)

    kk = np.arange(int(np.floor(k_end)) + 1)
    input_fnc = st.expr_to_func(k, input_expr)
    uu = np.array([float(input_fnc(k_num)) for k_num in kk])
    yy = np.zeros(len(kk))

    # a[0] == 1 due to normalization
    for k_num in kk:
        acc = 0
        for i, b_i in enumerate(b):
            if k_num - i >= 0:
                acc += b_i*uu[k_num - i]
        for i, a_i in enumerate(a[1:], start=1):
            if k_num - i >= 0:
                acc -= a_i*yy[k_num - i]
        yy[k_num] = acc

    return kk, yy
