# -*- coding: utf-8 -*-

from tfplot import *

mainprint("""
Example4 : pole-zero maps of a time continuous and a time discrete system
""")

G1 = TransferFunction((s + 3) / ((s + 1) * (s**2 + 4*s + 13)))
res1 = pzmap(G1)

G2 = dt_tf((z - sp.Rational(1, 3)) / (z**2 - z + sp.Rational(1, 2)))
res2 = pzmap(G2)

if __name__ == "__main__":
    plt.show()
