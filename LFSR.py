class LFSR:
    """
    Fixed-length shift register stored as a packed int.
    Bit 0 is the LSB, bit length-1 the MSB. Clocking shifts towards the MSB,
    drops the old MSB and feeds the tap parity back into bit 0.
    """
    def __init__(self, length: int, taps: list[int], clock_bit: int, state: int = 0):
        assert length > 0, "Register length must be positive"
        assert all(0 <= t < length for t in taps), f"Taps {taps} out of range for length {length}"
        assert 0 <= clock_bit < length, f"Clock bit {clock_bit} out of range for length {length}"

        self.length = length
        self.taps = list(taps)
        self.clock_bit = clock_bit
        self.mask = (1 << length) - 1
        self.state = state & self.mask

        # Pre-calculate tap mask for O(1) feedback calculation
        self.tap_mask = 0
        for t in self.taps:
            self.tap_mask |= (1 << t)

    def feedback(self) -> int:
        # Requires Python 3.10+
        return (self.state & self.tap_mask).bit_count() & 1

    def clock(self):
        fb = self.feedback()
        self.state = ((self.state << 1) & self.mask) | fb

    def bit(self, index: int) -> int:
        return (self.state >> index) & 1

    def control(self) -> int:
        return self.bit(self.clock_bit)

    def msb(self) -> int:
        return self.bit(self.length - 1)

    def xor_lsb(self, value: int):
        self.state ^= value & 1

    def zero(self):
        self.state = 0

    def bits(self) -> list[bool]:
        """Boolean view of the register, index 0 = LSB."""
        return [bool((self.state >> i) & 1) for i in range(self.length)]

    def __repr__(self):
        return f"LFSR(length={self.length}, taps={self.taps}, state=0x{self.state:0{(self.length + 3) // 4}X})"
