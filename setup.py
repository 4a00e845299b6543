from mypyc.build import mypycify
from setuptools import setup

setup(
    name="eisenint",
    version="0.1.0",

    # mypyc docs say to just set packages simply like this:
    #   packages=['eisenint'],
    #
    # However: When I do that, eisenint/__init__.py *itself* is included in the wheel which we don't want,
    #   because then the python version will be used instead of the mypyc-compiled version.
    # utils.py only feeds the test suite and is left out of the wheel.
    packages=["eisenint-stubs"],
    include_package_data=True,
    package_data={'eisenint-stubs': ["*.pyi"]},

    ext_modules=mypycify([
        "eisenint/__init__.py",
        "eisenint/stein.py",
    ]),

    python_requires=">=3.9",
    extras_require={
        "test": ["pytest", "sympy"],
    },

    license="MIT",
)
