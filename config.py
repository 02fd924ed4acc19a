class Config:
    def __init__(self, **overrides):
        # A5/1 register geometry, index 0 = LSB
        self.register_lengths = (19, 22, 23)
        self.register_taps = ((13, 16, 17, 18), (20, 21), (7, 20, 21, 22))

        # Majority clocking looks at one fixed bit per register
        self.clock_bits = (8, 10, 10)

        # Only the low-order bits of key and frame are mixed in
        self.key_bits = 64
        self.frame_bits = 22

        # Irregular clocks run after mixing, output discarded
        self.warmup_cycles = 100

        # One GSM burst uses 114 bits, the demo front end shows 15 bytes
        self.burst_bits = 114
        self.display_bytes = 15

        for name, value in overrides.items():
            assert hasattr(self, name), f"Unknown config option '{name}'"
            setattr(self, name, value)

        assert len(self.register_lengths) == 3, "A5/1 uses exactly three registers"
        assert len(self.register_taps) == 3, "Need one tap set per register"
        assert len(self.clock_bits) == 3, "Need one clock bit per register"

        for length, taps, clock_bit in zip(self.register_lengths, self.register_taps, self.clock_bits):
            assert length > 0, "Register length must be positive"
            assert len(taps) > 0, "Tap set must not be empty"
            assert all(0 <= t < length for t in taps), f"Taps {taps} out of range for length {length}"
            assert 0 <= clock_bit < length, f"Clock bit {clock_bit} out of range for length {length}"

        assert self.key_bits > 0, "Key width must be positive"
        assert self.frame_bits > 0, "Frame width must be positive"
        assert self.warmup_cycles >= 0, "Warm-up cycles cannot be negative"
        assert self.burst_bits >= 0, "Burst length cannot be negative"
        assert self.display_bytes >= 0, "Display length cannot be negative"

        self.key_mask = (1 << self.key_bits) - 1
        self.frame_mask = (1 << self.frame_bits) - 1
