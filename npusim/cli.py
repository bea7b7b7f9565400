#!/usr/bin/env python3
import sys
import argparse
import logging

from npusim.hal.simulator import DeviceSimulator, OUTPUT_SIZE
from npusim.runtime.buffer_pool import BufferPool
from npusim.runtime.executor import NPUExecutor
from npusim.runtime.errors import NPUSimError
from npusim.testing.fixtures import fake_hef, fake_input

FAIL_SWITCHES = {
    "open":   DeviceSimulator.set_fail_on_open,
    "config": DeviceSimulator.set_fail_on_config,
    "infer":  DeviceSimulator.set_fail_on_infer,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Simulated NPU smoke run (open, configure, infer)")
    parser.add_argument("-n", "--iterations", type=int, default=10, help="Number of inferences to run")
    parser.add_argument("--buffer-size", type=int, default=OUTPUT_SIZE, help="Pool buffer size in bytes")
    parser.add_argument("--pool-size", type=int, default=4, help="Number of pool buffers")
    parser.add_argument("--fail-on", action="append", choices=sorted(FAIL_SWITCHES), default=[],
                        help="Arm a failure-injection switch (repeatable)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    device = DeviceSimulator()
    for name in args.fail_on:
        FAIL_SWITCHES[name](device, True)

    try:
        pool = BufferPool(args.buffer_size, args.pool_size)
        executor = NPUExecutor(device, pool, output_size=OUTPUT_SIZE)

        with device:
            print(f"Device: {device.properties}")
            device.configure(fake_hef())
            frame = fake_input(224, 224, 3)
            for _ in range(args.iterations):
                with executor.run(frame):
                    pass
            print(f"Ran {device.inference_count} inferences.")
    except (NPUSimError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    print(f"Pool: {pool.available()}/{pool.capacity} buffers available")
    return 0


if __name__ == "__main__":
    sys.exit(main())
