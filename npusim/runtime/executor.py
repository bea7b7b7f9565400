"""
NPU Executor - drives a device and a buffer pool for one inference round.

The device and the pool never talk to each other; the executor is the
external control flow that ties them together:
1. Run inference on the device
2. Acquire an output buffer from the pool
3. Copy the output into the buffer and hand it to the caller
"""

import logging

import numpy as np

from npusim.runtime.device import NPUDevice
from npusim.runtime.buffer_pool import BufferPool, BufferHandle

logger = logging.getLogger(__name__)


class NPUExecutor:
    """
    Runs inferences on a device, staging outputs in pool buffers.

    The caller owns each returned handle and must release it.
    """

    def __init__(self, device: NPUDevice, pool: BufferPool, output_size: int = None):
        self.device = device
        self.pool = pool
        self.output_size = output_size

    def run(self, data: bytes) -> BufferHandle:
        """
        Execute one inference.

        Args:
            data: Raw input tensor bytes

        Returns:
            BufferHandle whose first len(output) bytes hold the device output
        """
        if self.output_size is not None and self.output_size > self.pool.buffer_size:
            raise ValueError(
                f"output of {self.output_size} bytes does not fit "
                f"in {self.pool.buffer_size}-byte pool buffers"
            )

        output = self.device.infer(data)
        if len(output) > self.pool.buffer_size:
            raise ValueError(
                f"output of {len(output)} bytes does not fit "
                f"in {self.pool.buffer_size}-byte pool buffers"
            )

        handle = self.pool.acquire()
        handle.buffer[:len(output)] = np.frombuffer(output, dtype=np.uint8)
        logger.debug(f"staged {len(output)}-byte output in buffer {handle.index}")
        return handle
