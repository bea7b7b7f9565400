"""
Software Simulator HAL - CPU-based stand-in for an NPU device.

Models only the open -> configure -> infer lifecycle and its error paths.
No computation is performed: infer() returns a zeroed output tensor.

Failure injection:
    sim = DeviceSimulator()
    sim.set_fail_on_config(True)
    sim.open()
    sim.configure(fake_hef())   # raises InjectedFailure, device stays open
"""

import logging
import threading
from typing import Optional

import numpy as np

from npusim.runtime.device import NPUDevice, DeviceProperties, DeviceState
from npusim.runtime.errors import NotOpenError, NotConfiguredError, InjectedFailure

logger = logging.getLogger(__name__)

# Mock output: fixed-shape tensor of 1000 float32 values
OUTPUT_ELEMENTS = 1000
OUTPUT_DTYPE = np.float32
OUTPUT_SIZE = OUTPUT_ELEMENTS * np.dtype(OUTPUT_DTYPE).itemsize   # 4000 bytes


class DeviceSimulator(NPUDevice):
    """
    Simulated NPU device.

    All state lives on the instance and is guarded by one lock, so a single
    simulator can be shared by tests running in parallel threads.
    """

    def __init__(self, properties: Optional[DeviceProperties] = None):
        self._lock = threading.Lock()
        self._properties = properties or DeviceProperties()
        self._open = False
        self._configured = False
        self._inferences = 0
        self._fail_on_open = False
        self._fail_on_config = False
        self._fail_on_infer = False

    @property
    def properties(self) -> DeviceProperties:
        with self._lock:
            return self._properties

    @property
    def inference_count(self) -> int:
        with self._lock:
            return self._inferences

    @property
    def is_open(self) -> bool:
        with self._lock:
            return self._open

    @property
    def is_configured(self) -> bool:
        with self._lock:
            return self._configured

    @property
    def state(self) -> DeviceState:
        with self._lock:
            if self._configured:
                return DeviceState.CONFIGURED
            if self._open:
                return DeviceState.OPEN
            return DeviceState.CLOSED

    def open(self) -> None:
        with self._lock:
            if self._fail_on_open:
                logger.info("[Simulation] Injecting open failure")
                raise InjectedFailure("open")
            self._open = True
            logger.debug("device opened")

    def close(self) -> None:
        with self._lock:
            self._open = False
            self._configured = False
            logger.debug("device closed")

    def configure(self, hef: bytes) -> None:
        # The HEF payload is opaque here; parsing belongs to the real driver.
        with self._lock:
            if not self._open:
                logger.warning("configure rejected: device not open")
                raise NotOpenError("configure")
            if self._fail_on_config:
                logger.info("[Simulation] Injecting configure failure")
                raise InjectedFailure("configure")
            logger.debug("device configured")
            self._configured = True

    def infer(self, data: bytes) -> bytes:
        with self._lock:
            if not self._open:
                logger.warning("infer rejected: device not open")
                raise NotOpenError("infer")
            if not self._configured:
                logger.warning("infer rejected: device not configured")
                raise NotConfiguredError("infer")
            if self._fail_on_infer:
                logger.info("[Simulation] Injecting infer failure")
                raise InjectedFailure("infer")

            self._inferences += 1
            return np.zeros(OUTPUT_ELEMENTS, dtype=OUTPUT_DTYPE).tobytes()

    def set_fail_on_open(self, fail: bool) -> None:
        with self._lock:
            self._fail_on_open = bool(fail)

    def set_fail_on_config(self, fail: bool) -> None:
        with self._lock:
            self._fail_on_config = bool(fail)

    def set_fail_on_infer(self, fail: bool) -> None:
        with self._lock:
            self._fail_on_infer = bool(fail)

    def __repr__(self):
        return (
            f"DeviceSimulator(board={self._properties.board_type.name}, "
            f"open={self._open}, configured={self._configured}, "
            f"inferences={self._inferences})"
        )
