from pathlib import Path
from typing import NamedTuple

import pytest


class Point(NamedTuple):
    x: int
    y: int


class Vector(NamedTuple):
    x: int
    y: int
    z: int


@pytest.fixture(scope="session")
def points():
    return [
        Point(x=1, y=2),
        Point(x=1, y=3),
        Point(x=2, y=2),
        Point(x=2, y=2),
    ]


@pytest.fixture(scope="session")
def vectors():
    return [
        Vector(x=1, y=2, z=4),
        Vector(x=1, y=3, z=3),
        Vector(x=2, y=2, z=2),
        Vector(x=2, y=2, z=1),
    ]


@pytest.fixture(scope="session")
def numbers():
    return [-1, -2, 1, 2]


@pytest.fixture()
def datadir():
    return Path(__file__).parent.resolve() / "data"
