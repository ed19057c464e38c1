#! /usr/bin/env python3

import os
import sys

from setuptools import setup

if sys.version_info < (3, 8, 0):
    print("ERROR: pawnchess requires Python >= 3.8.0")
    sys.exit(1)

import importlib.util
import importlib.machinery

spec = importlib.machinery.PathFinder().find_spec(
    "pawnchess", [os.path.join(os.path.dirname(os.path.abspath(__file__)), "lib")])
pawnchess = importlib.util.module_from_spec(spec)
spec.loader.exec_module(pawnchess)

VERSION = pawnchess.VERSION

NAME = "pawnchess"

DESC = "Pawns-only chess for two players on the console"

LONG_DESC = """pawnchess is a two player chess variant played with pawns only, in a
terminal. Pawns move and capture as in normal chess, including the double step
from the start rank and en passant captures.

A player wins by getting a pawn to the last rank or by capturing all of the
opponent's pawns. If the player to move has no legal move the game ends in a
stalemate.

Moves are entered in coordinate notation, like e2e4, and "exit" ends the
game."""

CLASSIFIERS = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3.8",
    "Programming Language :: Python :: 3.9",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Topic :: Games/Entertainment :: Board Games",
]

PACKAGES = [
    "pawnchess",
    "pawnchess.Players",
    "pawnchess.System",
    "pawnchess.Utils",
]

setup(
    name=NAME,
    version=VERSION,
    author="pawnchess team",
    classifiers=CLASSIFIERS,
    keywords="python chess pawns console game",
    description=DESC,
    long_description=LONG_DESC,
    license="GPL3",
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": [
            "pexpect",
            "pytest",
        ],
    },
    package_dir={"": "lib"},
    packages=PACKAGES,
    scripts=["pawnchess"],
)
