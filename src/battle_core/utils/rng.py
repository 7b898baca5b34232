class BattleRng:
    """Seedable 32-bit LCG shared by every randomness consumer in a session.

    seed = (seed * 1664525 + 1013904223) mod 2^32
    """

    def __init__(self, seed: int = 0):
        self.seed = seed & 0xFFFFFFFF

    def advance(self) -> int:
        """Advance the LCG and return the new 32-bit seed."""
        self.seed = (self.seed * 1664525 + 1013904223) & 0xFFFFFFFF
        return self.seed

    def rand16(self) -> int:
        """Advance RNG and return upper 16 bits (0..65535)."""
        self.advance()
        return (self.seed >> 16) & 0xFFFF

    def rand32(self) -> int:
        """Two 16-bit draws, high half first (0..2^32-1)."""
        high = self.rand16()
        return (high << 16) | self.rand16()

    def choice_index(self, count: int) -> int:
        """Return a random index in range [0, count) using rand16 modulo.

        Caller must ensure count > 0.
        """
        if count <= 0:
            return -1
        return self.rand16() % count

    def rand_range(self, low: int, high: int) -> int:
        """Inclusive integer draw in [low, high]."""
        return low + self.choice_index(high - low + 1)
