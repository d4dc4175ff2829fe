"""The bit-per-signal wire format.

A message travels as its bytes followed by a zero byte. Each byte is sent
as eight signals, most significant bit first: SIGUSR2 carries a 1 bit and
SIGUSR1 a 0 bit. The receiver answers the zero byte with SIGUSR1.
"""

from dataclasses import dataclass
from typing import List, Optional, Union

_BITS_PER_BYTE = 8


def encode_byte(value: int) -> List[int]:
    """The eight bits of a byte, most significant first."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte out of range: {value}")
    return [(value >> shift) & 1 for shift in reversed(range(_BITS_PER_BYTE))]


def encode_message(message: Union[str, bytes]) -> List[int]:
    """The bits of a message up to its first NUL, then of the zero terminator.

    Text is sent as UTF-8.
    """
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    data = data.partition(b"\0")[0] + b"\0"
    return [bit for byte in data for bit in encode_byte(byte)]


@dataclass
class BitDecoder:
    """Collects bits, most significant first, into bytes."""

    bits: int = 0
    value: int = 0

    def feed(self, bit: Union[int, bool]) -> Optional[int]:
        """Take one bit; return the byte it completes, or None."""
        if bit:
            self.value += 1 << (_BITS_PER_BYTE - 1 - self.bits)
        self.bits += 1
        if self.bits < _BITS_PER_BYTE:
            return None
        byte = self.value
        self.bits = 0
        self.value = 0
        return byte