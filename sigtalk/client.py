"""Send a text message to a server process, one signal per bit."""

import os
import signal
import sys
import time
from typing import Optional, Sequence

from sigtalk.chars import isdigit
from sigtalk.numbers import atoi
from sigtalk.printf import printf
from sigtalk.protocol import encode_message

_BIT_DELAY = 250e-6


class _Reply(Exception):
    def __init__(self, success: bool) -> None:
        super().__init__(success)
        self.success = success


def _on_reply(signum: int, frame: object) -> None:
    raise _Reply(signum == signal.SIGUSR1)


def is_all_digits(text: str) -> bool:
    """True when every character of text is a decimal digit; true for ""."""
    return all(isdigit(ch) for ch in text)


def send_message(pid: int, message: str, delay: float = _BIT_DELAY) -> None:
    """Signal each bit of message and its terminator to pid, pausing after each."""
    for bit in encode_message(message):
        os.kill(pid, signal.SIGUSR2 if bit else signal.SIGUSR1)
        time.sleep(delay)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the client: sigtalk-client <PID> <STR>. Returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    watched = (signal.SIGUSR1, signal.SIGUSR2)
    previous = {signum: signal.signal(signum, _on_reply) for signum in watched}
    try:
        if len(args) != 2 or not is_all_digits(args[0]):
            printf("\033[38;5;196mERROR: \033[mincorrect argument!\033[38;5;87m\n")
            printf("NOTE: \033[mCorrect Argument format [client <PID> <STR>]\n")
            return 1
        send_message(atoi(args[0]), args[1])
        # Without an acknowledgement by now, the message counts as lost.
        signal.raise_signal(signal.SIGUSR2)
        success = False
    except _Reply as reply:
        success = reply.success
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)
    if success:
        printf("Success sending message!\n")
        return 0
    printf("Failed to send message!\n")
    return 1


if __name__ == "__main__":
    sys.exit(main())