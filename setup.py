# setup.py
from setuptools import setup, find_packages

setup(
    name="simple-symbol",
    version="0.1.0",
    description="Naive string interning: small, cheap-to-compare symbols for repeated strings",
    packages=find_packages(include=["simple_symbol", "simple_symbol.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    zip_safe=False,
)
