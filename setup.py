# setup.py
from setuptools import setup, find_packages

setup(
    name="felisp",
    version="0.1.0",
    description="A small Lisp with paged in-memory tables",
    packages=find_packages(include=["felisp", "felisp.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["felisp=felisp.repl:main"],
    },
    zip_safe=False,
)
