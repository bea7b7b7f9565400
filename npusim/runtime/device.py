"""
NPU Device - Abstract hardware interface (HAL boundary).

Driver code is written against NPUDevice; the simulator in
npusim.hal.simulator is the reference implementation used in tests.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, IntEnum


class BoardType(IntEnum):
    """Accelerator SKU identifiers, numbered as the driver reports them."""
    HAILO8         = 0
    HAILO15        = 1
    HAILO15L       = 2
    HAILO10H       = 3
    HAILO10_LEGACY = 4
    MARS           = 5


class DeviceState(Enum):
    CLOSED     = "closed"
    OPEN       = "open"
    CONFIGURED = "configured"  # open with a HEF loaded


@dataclass(frozen=True)
class DeviceProperties:
    """Static descriptor reported by the device."""
    board_type: BoardType = BoardType.HAILO8
    desc_max_page_size: int = 4096
    dma_engine_count: int = 1
    firmware_loaded: bool = True

    def __post_init__(self):
        if not 0 <= self.desc_max_page_size <= 0xFFFF:
            raise ValueError(
                f"desc_max_page_size {self.desc_max_page_size} does not fit in 16 bits"
            )
        if self.dma_engine_count < 0:
            raise ValueError("dma_engine_count must be non-negative")
        object.__setattr__(self, "board_type", BoardType(self.board_type))


class NPUDevice(ABC):
    """
    Abstract NPU device interface.

    Lifecycle: closed -> open() -> configure(hef) -> infer(input)...
    close() is valid from any state and always succeeds.

    Usable as a context manager: the device is opened on entry
    and closed on exit.
    """

    @property
    @abstractmethod
    def properties(self) -> DeviceProperties:
        """Static device descriptor."""
        pass

    @abstractmethod
    def open(self) -> None:
        """Open the device."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Close the device, dropping any configured network."""
        pass

    @abstractmethod
    def configure(self, hef: bytes) -> None:
        """Load a compiled model (HEF) onto an open device."""
        pass

    @abstractmethod
    def infer(self, data: bytes) -> bytes:
        """Run one inference and return the raw output tensor."""
        pass

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
