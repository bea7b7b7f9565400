"""
Error types raised by the simulated NPU device and buffer pool.

Device errors split into two families:
- state violations (NotOpenError, NotConfiguredError)
- injected failures (InjectedFailure), armed through the set_fail_on_* switches

Pool errors cover exhaustion and invalid releases.
"""


class NPUSimError(Exception):
    """Base class for all simulator errors."""
    pass


class DeviceError(NPUSimError):
    pass


class NotOpenError(DeviceError):
    """Operation requires an open device but the device is closed."""

    def __init__(self, operation: str):
        super().__init__(f"device not open: cannot {operation}")
        self.operation = operation


class NotConfiguredError(DeviceError):
    """Inference attempted on an open device with no HEF configured."""

    def __init__(self, operation: str = "infer"):
        super().__init__(f"device not configured: cannot {operation}")
        self.operation = operation


class InjectedFailure(DeviceError):
    """Raised when a failure-injection switch is armed for the operation."""

    def __init__(self, operation: str):
        super().__init__(f"injected {operation} failure")
        self.operation = operation


class PoolError(NPUSimError):
    pass


class PoolExhausted(PoolError, MemoryError):
    """No buffer is available for acquire()."""

    def __init__(self, capacity: int, buffer_size: int):
        super().__init__(
            f"buffer pool exhausted: all {capacity} buffers "
            f"of {buffer_size} bytes are in use"
        )
        self.capacity = capacity
        self.buffer_size = buffer_size


class UnknownBufferError(PoolError):
    """release() was given something this pool never issued."""
    pass


class BufferNotAcquiredError(UnknownBufferError):
    """release() was given a slot that is not currently held (double release)."""

    def __init__(self, index: int):
        super().__init__(f"buffer {index} is not acquired (double release?)")
        self.index = index
