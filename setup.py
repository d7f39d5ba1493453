#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import sys
import os
from setuptools import setup
from pathlib import Path
this_dir = Path(__file__).absolute().parent

version = {}
exec((this_dir / "letcalc" / "version.py").read_text(), version)

if sys.argv[-1].startswith('publish'):
    if os.system("pip list | grep wheel"):
        print("wheel not installed.\nUse `pip install wheel`.\nExiting.")
        sys.exit()
    if os.system("pip list | grep twine"):
        print("twine not installed.\nUse `pip install twine`.\nExiting.")
        sys.exit()
    os.system("python setup.py sdist bdist_wheel")
    if sys.argv[-1] == 'publishtest':
        os.system("twine upload -r test dist/*")
    else:
        os.system("twine upload dist/*")
    sys.exit()

if __name__ == "__main__":
    setup(
        name="letcalc",
        version=version["__version__"],
        description="Interactive calculator with variables, built on a "
                    "recursive descent evaluator.",
        packages=["letcalc"],
        python_requires=">=3.8",
        install_requires=["click"],
        extras_require={
            "test": ["pytest"],
        },
        entry_points={
            "console_scripts": [
                "letcalc = letcalc.cli:letcalc",
            ],
        },
    )
