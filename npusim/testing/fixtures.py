"""
Synthetic inputs for driver tests: HEF headers, input frames and byte patterns.
"""

import numpy as np

# Minimal V2 HEF header
HEF_MAGIC = 0x01484546      # "FEH\x01" little-endian
HEF_VERSION = 2
HEF_PROTO_SIZE = 60
HEF_SIZE = 100

_HEADER = np.dtype([("magic", "<u4"), ("version", "<u4"), ("proto_size", "<u4")])


def fake_hef() -> bytes:
    """
    Build a minimal HEF blob: 12-byte header (magic, version, proto size),
    zero-padded to HEF_SIZE bytes. Only usable as opaque configure() input.
    """
    data = np.zeros(HEF_SIZE, dtype=np.uint8)
    header = np.array([(HEF_MAGIC, HEF_VERSION, HEF_PROTO_SIZE)], dtype=_HEADER)
    data[:_HEADER.itemsize] = header.view(np.uint8)
    return data.tobytes()


def fake_input(height: int, width: int, channels: int) -> bytes:
    """Zeroed input frame of height*width*channels bytes."""
    return bytes(height * width * channels)


def make_test_image(width: int, height: int, channels: int) -> bytes:
    """Image buffer whose byte i is i % 256."""
    size = width * height * channels
    return (np.arange(size) % 256).astype(np.uint8).tobytes()


def make_random_bytes(size: int) -> bytes:
    """Deterministic pseudo-random bytes: byte i is (i*17 + 11) % 256."""
    return ((np.arange(size) * 17 + 11) % 256).astype(np.uint8).tobytes()
