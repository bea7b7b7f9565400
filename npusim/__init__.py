# npusim
# Simulated NPU device and DMA buffer pool for exercising driver code

from npusim.runtime.device import NPUDevice, DeviceProperties, DeviceState, BoardType
from npusim.runtime.buffer_pool import BufferPool, BufferHandle
from npusim.runtime.executor import NPUExecutor
from npusim.runtime.errors import (
    NPUSimError, DeviceError, NotOpenError, NotConfiguredError, InjectedFailure,
    PoolError, PoolExhausted, UnknownBufferError, BufferNotAcquiredError,
)
from npusim.hal.simulator import DeviceSimulator, OUTPUT_ELEMENTS, OUTPUT_SIZE

__all__ = [
    'NPUDevice', 'DeviceProperties', 'DeviceState', 'BoardType',
    'DeviceSimulator', 'OUTPUT_ELEMENTS', 'OUTPUT_SIZE',
    'BufferPool', 'BufferHandle', 'NPUExecutor',
    'NPUSimError', 'DeviceError', 'NotOpenError', 'NotConfiguredError', 'InjectedFailure',
    'PoolError', 'PoolExhausted', 'UnknownBufferError', 'BufferNotAcquiredError',
]
