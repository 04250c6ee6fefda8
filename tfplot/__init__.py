"""
intermediate module for convenient importing of all needed and useful objects
"""

from .release import __version__

# the package is imported during installation (to obtain the version)
# however installation happens in an isolated build environment
# where no dependencies are installed.


try:
    # this might fail during installation (which is uncritical)
    import numpy as np
    import sympy as sp
    from matplotlib import pyplot as plt

    from .core import (
        s,
        t,
        Domain,
        TransferFunction,
        degree,
        expr2coeffs,
        roots_of,
        stepfnc,
        get_linear_ct_model,
        ct_step_response,
        mainprint,
    )
    from .td import z, k, td_step, dt_tf, dt_step_response
    from .plotting import (
        AUTO,
        DEFAULT_HORIZON,
        ResponsePlot,
        PZPlot,
        estimate_horizon,
        plan_step_response,
        plot_step_response,
        pzmap,
    )
    from . import td

except ImportError:
    import os
    if "PIP_BUILD_TRACKER" in os.environ:
        pass
    else:
        # raise the original exception
        raise
