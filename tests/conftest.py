from pathlib import Path

import pytest

from stewartplatform.configuration import HexagonalPlatformParameters
from stewartplatform.kinematics import InverseKinematicsSolver, build_hexagonal_platform

DEFAULT_CONFIG = Path(__file__).resolve().parent.parent / 'config' / 'stewartplatform.default.json'


class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def hexagonal_geometry():
    return build_hexagonal_platform(HexagonalPlatformParameters())


@pytest.fixture
def solver(hexagonal_geometry):
    return InverseKinematicsSolver(hexagonal_geometry)


@pytest.fixture
def default_config_path():
    return DEFAULT_CONFIG
