# -*- coding: utf-8 -*-

from tfplot import *

mainprint("""
Example2 : second order system with a pair of complex poles

 automatic and explicit plot duration
""")

G = TransferFunction(5 / (s**2 + s + 5))

res_auto = plot_step_response(G)  # poles: -0.5 +/- 2.18j -> horizon 8
res_15 = plot_step_response(G, duration=15)

mainprint("horizons:", res_auto.horizon, res_15.horizon)

if __name__ == "__main__":
    plt.show()
