# setup.py
from setuptools import setup, find_packages

setup(
    name="conslisp",
    version="0.1.0",
    description="A small lexically scoped Lisp: reader, tree-walking evaluator and builtin kernel",
    python_requires=">=3.10",
    packages=find_packages(include=["conslisp", "conslisp.*"]),
    # The prelude is written in conslisp itself and loaded at interpreter start
    package_data={"conslisp": ["prelude/*.lisp"]},
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["conslisp=conslisp.__main__:main"],
    },
    zip_safe=False,
)
