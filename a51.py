# A5/1 keystream engine: three LFSRs with majority-vote irregular clocking
import logging
import threading

import numpy as np
from numba import jit

from LFSR import LFSR
from config import Config

logger = logging.getLogger(__name__)


@jit(nopython=True)
def _parity(v):
    # Manual popcount compatible with Numba
    c = 0
    while v > 0:
        v &= (v - 1)
        c += 1
    return c & 1


# JIT-compiled kernel for the bulk byte path
@jit(nopython=True)
def _keystream_jit(data, states, lengths, tap_masks, clock_bits):
    n = len(data)
    out = np.empty(n, dtype=np.uint8)
    ctrl = np.empty(3, dtype=np.int64)

    for i in range(n):
        byte_val = 0
        for _ in range(8):
            # Control bits are sampled before any register moves
            for r in range(3):
                ctrl[r] = (states[r] >> clock_bits[r]) & 1
            maj = 1 if ctrl[0] + ctrl[1] + ctrl[2] >= 2 else 0

            for r in range(3):
                if ctrl[r] == maj:
                    fb = _parity(states[r] & tap_masks[r])
                    states[r] = ((states[r] << 1) & ((1 << lengths[r]) - 1)) | fb

            output_bit = 0
            for r in range(3):
                output_bit ^= (states[r] >> (lengths[r] - 1)) & 1

            # MSB first packing
            byte_val = (byte_val << 1) | output_bit

        out[i] = data[i] ^ byte_val

    return out


def pack_bits(bits) -> bytes:
    """Pack bits into bytes, first bit of each group of 8 in bit 7."""
    assert len(bits) % 8 == 0, "Bit count must be a multiple of 8"
    return np.packbits(np.asarray(bits, dtype=np.uint8)).tobytes()


class A51:
    """
    A5/1 keystream generator.

    Registers start zeroed. Call initialize(key, frame) before pulling
    keystream; the engine keeps no "initialized" flag, so generating from
    zeroed registers is allowed and simply deterministic.
    """
    def __init__(self, cfg=None):
        self.cfg = cfg if cfg is not None else Config()
        self.r1, self.r2, self.r3 = (
            LFSR(length, taps, clock_bit)
            for length, taps, clock_bit in zip(self.cfg.register_lengths, self.cfg.register_taps, self.cfg.clock_bits)
        )

        # Flat copies of the register geometry for the jit kernel
        self._lengths = np.array([r.length for r in self.registers], dtype=np.int64)
        self._tap_masks = np.array([r.tap_mask for r in self.registers], dtype=np.int64)
        self._clock_bits = np.array([r.clock_bit for r in self.registers], dtype=np.int64)

    @property
    def registers(self):
        return (self.r1, self.r2, self.r3)

    def clock_register(self, register):
        register.clock()

    @staticmethod
    def majority(a, b, c) -> bool:
        return bool(a) + bool(b) + bool(c) >= 2

    def clock_irregular(self):
        """
        One majority step. Returns which registers were clocked.
        At least two of the three always clock.
        """
        control = [bool(r.control()) for r in self.registers]
        maj = self.majority(*control)

        clocked = []
        for register, bit in zip(self.registers, control):
            if bit == maj:
                self.clock_register(register)
                clocked.append(True)
            else:
                clocked.append(False)
        return tuple(clocked)

    def clock_all(self):
        for register in self.registers:
            self.clock_register(register)

    def output_bit(self) -> bool:
        return bool(self.r1.msb() ^ self.r2.msb() ^ self.r3.msb())

    def _mix(self, value, n_bits):
        # XOR each bit into bit 0 of every register, then clock all of them
        for i in range(n_bits):
            bit = (value >> i) & 1
            for register in self.registers:
                register.xor_lsb(bit)
            self.clock_all()

    def initialize(self, key: int, frame: int):
        """
        Reset and load a 64-bit session key and a 22-bit frame number.

        Both values are masked to their widths first, so wider ints
        (including negative ones) contribute only their low-order bits.
        """
        key &= self.cfg.key_mask
        frame &= self.cfg.frame_mask

        for register in self.registers:
            register.zero()

        self._mix(key, self.cfg.key_bits)
        self._mix(frame, self.cfg.frame_bits)

        for _ in range(self.cfg.warmup_cycles):
            self.clock_irregular()

        logger.debug(f"Engine initialized for frame {frame} after {self.cfg.warmup_cycles} warm-up cycles")

    def generate_keystream_bits(self, n: int) -> list[bool]:
        assert n >= 0, "Bit count cannot be negative"
        bits = []
        for _ in range(n):
            self.clock_irregular()
            bits.append(self.output_bit())
        return bits

    def generate_keystream_bytes(self, count: int) -> bytes:
        assert count >= 0, "Byte count cannot be negative"
        return self._run_kernel(bytes(count))

    def generate_burst(self) -> list[bool]:
        return self.generate_keystream_bits(self.cfg.burst_bits)

    def encrypt(self, data) -> bytes:
        return self._run_kernel(bytes(data))

    # XOR with the keystream is its own inverse
    decrypt = encrypt

    def _run_kernel(self, data: bytes) -> bytes:
        data_np = np.frombuffer(data, dtype=np.uint8)
        states = np.array([r.state for r in self.registers], dtype=np.int64)

        result_np = _keystream_jit(data_np, states, self._lengths, self._tap_masks, self._clock_bits)

        # Update the register objects from the kernel's final state
        for register, state in zip(self.registers, states):
            register.state = int(state)

        logger.debug(f"Generated {len(data)} keystream bytes")
        return result_np.tobytes()


class LockedA51:
    """
    Serializes access to one A51 instance shared between threads.
    Each call holds the lock for its whole duration.
    """
    def __init__(self, engine=None):
        self.engine = engine if engine is not None else A51()
        self._lock = threading.Lock()

    def initialize(self, key: int, frame: int):
        with self._lock:
            self.engine.initialize(key, frame)

    def generate_keystream_bits(self, n: int) -> list[bool]:
        with self._lock:
            return self.engine.generate_keystream_bits(n)

    def generate_keystream_bytes(self, count: int) -> bytes:
        with self._lock:
            return self.engine.generate_keystream_bytes(count)

    def generate_burst(self) -> list[bool]:
        with self._lock:
            return self.engine.generate_burst()

    def encrypt(self, data) -> bytes:
        with self._lock:
            return self.engine.encrypt(data)

    decrypt = encrypt


if __name__ == "__main__":
    from keyframe import parse_key
    import hexcodec

    key = parse_key("0123456789ABCDEF")
    engine = A51()
    engine.initialize(key, 0)
    print(f"Keystream (15 bytes): {hexcodec.encode(engine.generate_keystream_bytes(15))}")

    # Kernel and bit path must agree
    a, b = A51(), A51()
    a.initialize(key, 0)
    b.initialize(key, 0)
    assert a.generate_keystream_bytes(64) == pack_bits(b.generate_keystream_bits(64 * 8))
    print("Kernel matches reference bit path.")

    plaintext = b"HELLO"
    engine.initialize(key, 0)
    ciphertext = engine.encrypt(plaintext)
    engine.initialize(key, 0)
    assert engine.decrypt(ciphertext) == plaintext
    print(f"Encrypted {plaintext!r} -> {hexcodec.encode(ciphertext)}, round trip successful!")

    from time import time
    print("Starting performance test with 1 MB of data...")
    large_data = b"\xFF" * 1_000_000
    engine.initialize(key, 0)
    start_time = time()
    encrypted_large_data = engine.encrypt(large_data)
    end_time = time()
    print(f"Encrypted 1 MB of data in {end_time - start_time:.2f} seconds.")
    engine.initialize(key, 0)
    assert engine.decrypt(encrypted_large_data) == large_data
    print("Large data round trip successful!")
