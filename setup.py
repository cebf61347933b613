# setup.py
from setuptools import setup, find_packages

setup(
    name="hoagie",
    version="0.0.0.1",
    description="HoagieLisp: a tiny S-expression / Q-expression evaluator",
    packages=find_packages(include=["hoagie", "hoagie.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["hoagie=hoagie.repl:main"],
    },
    zip_safe=False,
)
