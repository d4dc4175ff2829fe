"""Receive messages sent one signal per bit and write them to output."""

import os
import signal
import sys
from dataclasses import dataclass, field
from typing import BinaryIO, Callable, Optional, Sequence

from sigtalk.printf import printf
from sigtalk.protocol import BitDecoder


def _acknowledge(sender_pid: int) -> None:
    os.kill(sender_pid, signal.SIGUSR1)


@dataclass
class Receiver:
    """Turns incoming signals into bytes on a binary stream.

    Each finished byte is written at once. A zero byte ends a message and is
    acknowledged to the process that sent its last bit.
    """

    stream: Optional[BinaryIO] = None
    acknowledge: Callable[[int], None] = _acknowledge
    decoder: BitDecoder = field(default_factory=BitDecoder)

    def _output(self) -> BinaryIO:
        return sys.stdout.buffer if self.stream is None else self.stream

    def handle(self, signum: int, sender_pid: int) -> Optional[int]:
        """Take one signal; return the byte it completes, or None."""
        byte = self.decoder.feed(signum == signal.SIGUSR2)
        if byte is None:
            return None
        out = self._output()
        out.write(bytes([byte]))
        out.flush()
        if byte == 0:
            self.acknowledge(sender_pid)
        return byte


def serve(stream: Optional[BinaryIO] = None) -> None:
    """Announce this process and receive messages until interrupted."""
    receiver = Receiver(stream=stream)
    printf("\033[38;5;112;1mStarted Process!\033[m\n")
    printf("PID: \033[38;5;112;1m%d\033[m\n", os.getpid())
    sys.stdout.flush()
    watched = {signal.SIGUSR1, signal.SIGUSR2}
    previous = signal.pthread_sigmask(signal.SIG_BLOCK, watched)
    try:
        while True:
            info = signal.sigwaitinfo(watched)
            receiver.handle(info.si_signo, info.si_pid)
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the server; it stops only when interrupted."""
    try:
        serve()
    except KeyboardInterrupt:
        pass
    return 1


if __name__ == "__main__":
    sys.exit(main())