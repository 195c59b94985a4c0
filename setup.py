# setup.py
from setuptools import setup, find_packages

setup(
    name="strategy_lab",
    version="0.1.0",
    description="Strategy pattern demos: swappable book sorting and function graphing",
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.10",
    install_requires=[
        "sympy",
        "matplotlib",
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "strategy-lab-books = strategy_lab.cli:books_main",
            "strategy-lab-graph = strategy_lab.cli:graph_main",
        ],
    },
)
