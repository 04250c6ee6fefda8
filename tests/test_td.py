import unittest

import numpy as np
import sympy as sp

import tfplot as tfp
from tfplot import td


class TestTD1(unittest.TestCase):

    def test_01__td_step(self):
        expr = td.td_step(td.k, 3, 10)
        fnc = td.st.expr_to_func(td.k, expr)

        self.assertEqual(fnc(2), 0)
        self.assertEqual(fnc(3), 10)
        self.assertEqual(fnc(50), 10)

    def test_02__difference_equation_coeffs(self):
        z = td.z
        G = td.dt_tf((2*z + 1)/(z**2 - 0.5*z + 0.25))
        b, a = td.difference_equation_coeffs(G)

        self.assertTrue(np.allclose(b, [0, 2, 1]))
        self.assertTrue(np.allclose(a, [1, -0.5, 0.25]))

        G = td.dt_tf((z**2 + 1)/(z - 0.5))
        with self.assertRaises(NotImplementedError):
            td.difference_equation_coeffs(G)

    def test_03__pt1_step_response(self):
        # time discrete PT1 like it results from zero order hold discretization
        K = 2
        # sampling period 0.1, time constant 1
        E1 = np.exp(-0.1/1.0)
        G = td.dt_tf(K*(1 - E1)/(td.z - E1))

        kk, yy = td.dt_step_response(G, 30)

        self.assertEqual(len(kk), 31)
        self.assertEqual(kk[-1], 30)

        # one step delay due to relative degree 1
        self.assertEqual(yy[0], 0)
        yy_ref = K*(1 - E1**kk)
        self.assertTrue(np.allclose(yy, yy_ref))

    def test_04__biproper_and_fractional_horizon(self):
        z = td.z
        G = td.dt_tf(z/(z - sp.Rational(1, 2)))

        kk, yy = td.dt_step_response(G, 5.7)
        self.assertEqual(list(kk), [0, 1, 2, 3, 4, 5])

        # direct feedthrough: y[k] = 0.5*y[k-1] + 1
        self.assertTrue(np.allclose(yy, [1, 1.5, 1.75, 1.875, 1.9375, 1.96875]))

    def test_05__custom_input(self):
        z = td.z
        G = td.dt_tf(1/z)

        # pure delay: the input shows up one step later
        kk, yy = td.dt_step_response(G, 6, input_expr=td.td_step(td.k, 2, 3))
        self.assertTrue(np.allclose(yy, [0, 0, 0, 3, 3, 3, 3]))

    def test_06__dt_tf(self):
        q = sp.Symbol("q")
        G = td.dt_tf(1/(q - 1), var=q, name="integrator")

        self.assertIs(G.domain, tfp.Domain.DISCRETE)
        self.assertEqual(G.name, "integrator")
        self.assertIn("integrator", repr(G))
