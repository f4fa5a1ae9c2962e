"""
rootfind: Iterative Root Finding for Scalar Functions

Interval bisection and fixed-point iteration for F(x) = 0, with:
1. Functionals turning F(x) = 0 into x = f(x) (frac, Newton-Raphson)
2. Tagged results for invalid brackets and non-convergence
3. Aitken-accelerated and divergence-guarded iteration
4. Convergence diagnostics: contraction rate, order, oscillation
5. Iterate tables and cobweb plots
"""

from setuptools import setup, find_packages

setup(
    name="rootfind",
    version="1.0.0",
    description="Bisection and fixed-point root finding with convergence diagnostics",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="rootfind developers",
    python_requires=">=3.10",
    packages=find_packages(include=["rootfind", "rootfind.*"]),
    install_requires=[
        "numpy>=1.24.0",
        "tabulate>=0.9",
    ],
    extras_require={
        "plot": [
            "matplotlib>=3.7",
        ],
        "dev": [
            "pytest>=7.0",
            "matplotlib>=3.7",
        ],
    },
    entry_points={
        "console_scripts": [
            "rootfind=rootfind.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Education",
    ],
)
