# -*- coding: utf-8 -*-

from setuptools import setup
from tfplot.release import __version__

with open("requirements.txt") as requirements_file:
    requirements = requirements_file.read()

setup(
    name='tfplot',
    version=__version__,
    packages=['tfplot'],
    license='GPL3',
    description='Step response and pole-zero plots for symbolic transfer functions',
    long_description="""tfplot plots the step response and the pole-zero map of rational
transfer functions which are given as sympy expressions in the laplace variable s
(time continuous) or the shift variable z (time discrete). If no duration is given,
the plot horizon is estimated from the slowest stable pole.
    """,
    keywords='control theory, transfer function, step response, pole-zero map',
    install_requires=requirements,
    extras_require={
        "test": ["pytest", "ipydex"],
    },
)
