# -*- coding: utf-8 -*-

from tfplot import *

mainprint("""
Example3 : time discrete PT1 (zero order hold plot over the sample index)
""")

E1 = sp.Rational(1, 2)
K = 2

G = dt_tf(K*(1 - E1) / (z - E1))

# the pole 0.5 has a positive real part -> default horizon (100 steps)
res_auto = plot_step_response(G)
res_20 = plot_step_response(G, duration=20)

mainprint("final value:", res_20.yy[-1], "dc gain:", G.dc_gain())

if __name__ == "__main__":
    plt.show()
