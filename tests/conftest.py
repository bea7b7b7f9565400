"""
Shared pytest fixtures for simulator tests.
"""

import pytest

from npusim.hal.simulator import DeviceSimulator
from npusim.runtime.buffer_pool import BufferPool
from npusim.testing.fixtures import fake_hef


@pytest.fixture
def hef():
    return fake_hef()


@pytest.fixture
def device():
    """Fresh, closed simulator."""
    return DeviceSimulator()


@pytest.fixture
def open_device(device):
    device.open()
    yield device
    device.close()


@pytest.fixture
def configured_device(open_device, hef):
    open_device.configure(hef)
    return open_device


@pytest.fixture
def pool():
    return BufferPool(1024, 2)
