# -*- coding: utf-8 -*-

"""
Step response and pole-zero plots of transfer functions
"""

import copy

import numpy as np
import sympy as sp
from matplotlib import pyplot as plt

from .core import Domain, ct_step_response
from . import td


# sentinel for automatic choice of the plot duration
AUTO = "auto"

# horizon (time units or steps) if no reasonable estimate is available
DEFAULT_HORIZON = 100

# number of time constants of the slowest stable mode to be shown (~98% settled)
SETTLING_FACTOR = 4

# number of time points for time continuous simulation
N_POINTS = 500

STEP_STYLE = {
    "color": "tab:blue",
    "linewidth": 1.5,
    "title": "Step Response",
    "ylabel": "Response",
    "xlabel": {Domain.CONTINUOUS: "Time", Domain.DISCRETE: "Sample index"},
    "grid": True,
    "frame": True,
    "figsize": (6.4, 4.0),
}

PZ_STYLE = {
    "pole_color": "tab:red",
    "zero_color": "tab:blue",
    "markersize": 60,
    "title": "Pole-Zero Map",
    "xlabel": "Re",
    "ylabel": "Im",
    "grid": True,
    "frame": True,
    "figsize": (5.0, 5.0),
}


class ResponsePlot(object):
    """
    Container for the results of plot_step_response
    """

    def __init__(self, fig, ax, model, domain, horizon, xx, yy, style):
        self.fig = fig
        self.ax = ax
        self.model = model
        self.domain = domain
        self.horizon = horizon
        self.xx = xx
        self.yy = yy
        self.style = style

    def __repr__(self):
        return "{}:{}(horizon={})".format(type(self).__name__, self.domain.value, self.horizon)


class PZPlot(object):
    """
    Container for the results of pzmap
    """

    def __init__(self, fig, ax, model, poles, zeros, style):
        self.fig = fig
        self.ax = ax
        self.model = model
        self.poles = poles
        self.zeros = zeros
        self.style = style


def _is_numeric_horizon(value):
    value = sp.sympify(value)
    return bool(value.is_number and value.is_extended_real and value.is_finite)


def estimate_horizon(model):
    """
    Estimate a suitable simulation horizon from the slowest stable pole:
    four time constants of the dominant mode.

    Poles with undecidable real part are not considered to be stable.
    This function never raises for any set of poles.

    :param model:   TransferFunction
    :return:        float
    """

    stable_real_parts = []
    for p in model.poles():
        re_p = sp.re(p)
        if re_p.is_negative:
            stable_real_parts.append(re_p)

    if not stable_real_parts:
        return DEFAULT_HORIZON

    # the slowest mode is the one closest to the imaginary axis
    slowest = sp.Max(*stable_real_parts)
    horizon = SETTLING_FACTOR*sp.Abs(1/slowest)

    # might be symbolic (e.g. for parameterized models)
    if not _is_numeric_horizon(horizon):
        return DEFAULT_HORIZON

    return float(horizon)


def plan_step_response(model, duration=AUTO):
    """
    :return:    domain, horizon
    """

    if duration is None or (isinstance(duration, str) and duration == AUTO):
        horizon = estimate_horizon(model)
    else:
        # explicitly given values are used as they are
        horizon = duration

    return model.domain, horizon


def _new_axes(ax, figsize):
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure
    return fig, ax


def _apply_common_style(ax, style, xlabel):
    ax.autoscale(enable=True)
    ax.grid(style["grid"])
    ax.set_frame_on(style["frame"])
    ax.set_xlabel(xlabel)
    ax.set_ylabel(style["ylabel"])
    ax.set_title(style["title"])


def plot_step_response(model, duration=AUTO, ax=None, n_points=N_POINTS, color=None, show=False):
    """
    Plot the unit step response of a transfer function.

    For time continuous models the response is drawn as a line over time,
    for time discrete models as zero-order-hold steps over the sample index.

    :param model:       TransferFunction
    :param duration:    AUTO or explicit horizon (time units resp. number of steps)
    :param ax:          optional matplotlib axes to draw into
    :param n_points:    number of time points (time continuous models only)
    :param color:       line color (overrides STEP_STYLE)
    :param show:        whether to call plt.show()

    :return:    ResponsePlot
    """

    domain, horizon = plan_step_response(model, duration)

    style = copy.deepcopy(STEP_STYLE)
    if color is not None:
        style["color"] = color

    fig, ax = _new_axes(ax, style["figsize"])

    if domain is Domain.CONTINUOUS:
        xx, yy = ct_step_response(model, horizon, n_points=n_points)
        ax.plot(xx, yy, color=style["color"], linewidth=style["linewidth"])
    else:
        xx, yy = td.dt_step_response(model, horizon)
        # zero order hold: hold each value until the next sample
        ax.step(xx, yy, where="post", color=style["color"], linewidth=style["linewidth"])

    _apply_common_style(ax, style, style["xlabel"][domain])

    if show:
        plt.show()

    return ResponsePlot(fig, ax, model, domain, horizon, xx, yy, style)


def _to_complex_array(values):
    try:
        return np.array([complex(sp.N(v)) for v in values], dtype=complex)
    except TypeError:
        msg = "Can not plot symbolic values: {}".format(values)
        raise TypeError(msg)


def pzmap(model, ax=None, show=False):
    """
    Print the poles and zeros of a transfer function and plot them
    into the complex plane (poles: x, zeros: o).

    :return:    PZPlot
    """

    poles = model.poles()
    zeros = model.zeros()

    print("Poles:", poles)
    print("Zeros:", zeros)

    pp = _to_complex_array(poles)
    zz = _to_complex_array(zeros)

    style = copy.deepcopy(PZ_STYLE)
    fig, ax = _new_axes(ax, style["figsize"])

    # coordinate axes
    ax.axhline(0, color="0.5", linewidth=0.8)
    ax.axvline(0, color="0.5", linewidth=0.8)

    if model.domain is Domain.DISCRETE:
        # stability boundary
        phi = np.linspace(0, 2*np.pi, 200)
        ax.plot(np.cos(phi), np.sin(phi), "k--", linewidth=0.8)
        ax.set_aspect("equal", adjustable="datalim")

    ax.scatter(pp.real, pp.imag, marker="x", s=style["markersize"],
               color=style["pole_color"], label="poles")
    ax.scatter(zz.real, zz.imag, marker="o", s=style["markersize"],
               facecolors="none", edgecolors=style["zero_color"], label="zeros")

    _apply_common_style(ax, style, style["xlabel"])
    ax.legend()

    if show:
        plt.show()

    return PZPlot(fig, ax, model, poles, zeros, style)
