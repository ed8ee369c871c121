from dataclasses import dataclass
from typing import Sequence, TypeVar

T = TypeVar("T")

MASK32 = 0xFFFFFFFF
GOLDEN = 0x6D2B79F5  # Mulberry32 state increment
TWO_32 = 4294967296


def imul32(a: int, b: int) -> int:
    # 32-bit wrapping multiply; signedness does not matter once masked.
    return (a * b) & MASK32


def mulberry_mix(state: int) -> int:
    """Mix one (already incremented) state word into a uniform uint32."""
    t = state & MASK32
    t = imul32(t ^ (t >> 15), t | 1)
    t ^= (t + imul32(t ^ (t >> 7), t | 61)) & MASK32
    return (t ^ (t >> 14)) & MASK32


@dataclass
class Mulberry32:
    state: int

    def __post_init__(self) -> None:
        self.state &= MASK32

    def next32(self) -> int:
        self.state = (self.state + GOLDEN) & MASK32
        return mulberry_mix(self.state)

    def random(self) -> float:
        # [0, 1) with 32 bits of resolution
        return self.next32() / TWO_32

    def pick_index(self, n: int) -> int:
        """Return floor(random() * n), computed exactly in integers."""
        assert n > 0
        return (self.next32() * n) >> 32

    def choice(self, seq: Sequence[T]) -> T:
        return seq[self.pick_index(len(seq))]
