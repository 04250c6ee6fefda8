# -*- coding: utf-8 -*-

from tfplot import *


mainprint(
    """
Example1:

step response of a first order linear transfer function (PT1)
"""
)

PT1 = TransferFunction(1 / (3 * s + 1))  # gain: 1, time constant: 3

res = plot_step_response(PT1)  # horizon: 4 time constants

mainprint("horizon:", res.horizon)

if __name__ == "__main__":
    plt.show()
