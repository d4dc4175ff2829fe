# sigtalk

A small messaging pair for POSIX systems: a server writes out whatever
text a client sends it, and the only channel between them is a stream of
`SIGUSR1` and `SIGUSR2` signals.

Each byte of the message (text is sent as UTF-8) travels as eight
signals, most significant bit first: `SIGUSR1` stands for a 0 bit and
`SIGUSR2` for a 1 bit. A zero byte ends the message. When the server has
received that terminating byte it replies to the sender with `SIGUSR1`.

The server waits for signals with `signal.sigwaitinfo`, so it needs a
platform where Python provides that function, such as Linux.

## Installation

```
pip install .
```

## Usage

Start the server in one terminal. It prints `Started Process!` and its
process id, then writes every byte it receives to standard output as soon
as the byte is complete, the terminating zero byte included:

```
sigtalk-server
```

It runs until interrupted (Ctrl-C).

Then, in another terminal, send it a message:

```
sigtalk-client <PID> "hello there"
```

The client expects exactly two arguments, and the PID must consist of
digits only. Otherwise it prints an error with the correct argument
format and exits with status 1.

After each signal the client pauses for 250 microseconds. If the server's
`SIGUSR1` acknowledgement arrives while the message is being sent, the
client prints `Success sending message!` and exits with status 0. If no
acknowledgement has arrived by the time the last bit and its pause are
done, it prints `Failed to send message!` and exits with status 1.

Both commands can also be started as `python -m sigtalk.server` and
`python -m sigtalk.client`.

## Library use

The bit encoding can be used without sending any signals:

```python
from sigtalk.protocol import BitDecoder, encode_byte, encode_message

encode_byte(ord("A"))          # [0, 1, 0, 0, 0, 0, 0, 1]

decoder = BitDecoder()
for bit in encode_message("hi"):
    byte = decoder.feed(bit)   # a completed byte, or None
    if byte is not None:
        print(byte)            # 104, 105, 0
```

`encode_message` stops at the first NUL in the message and always adds
the zero terminator.

`sigtalk.server.Receiver` turns signal numbers into bytes. It writes each
completed byte to its `stream` (standard output's binary buffer by
default) and calls its `acknowledge` callable with the sender's pid when a
zero byte completes; by default that sends `SIGUSR1` to the sender.
`Receiver.handle(signum, sender_pid)` returns the byte a signal
completes, or `None`. `sigtalk.server.serve(stream)` runs the receive loop
that the `sigtalk-server` command uses.

`sigtalk.client.send_message(pid, message, delay)` signals every bit of
a message and its terminator to a process, and
`sigtalk.client.is_all_digits(text)` is the check applied to the PID
argument.

## Helper modules

The package also holds small text helpers that the commands build on:

- `sigtalk.chars`: ASCII classification (`isdigit`, `isalpha`, `isalnum`,
  `isascii`, `isprint`) and case conversion (`toupper`, `tolower`).
- `sigtalk.numbers`: `atoi`, `itoa` and `nbrlen`.
- `sigtalk.search`: `strchr`, `strrchr`, `strnstr`, `strncmp`, `memchr`,
  `memcmp`.
- `sigtalk.strings`: `strlen`, `strlcpy`, `strlcat`, `strdup`, `strjoin`,
  `strtrim`, `striteri`, `strmapi`, `substr`, `split`.
- `sigtalk.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`, each
  returning the number of characters written.
- `sigtalk.printf`: `printf(fmt, *args, stream=None)` with the
  conversions `%c %s %p %d %i %u %x %X %%`, plus `put_unsigned`,
  `put_hex` and `put_pointer`.

The string helpers treat a NUL character as the end of a string.

## What it does not do

The transfer has no retries, no checksums and no flow control beyond the
fixed pause after each signal. Signals that arrive too close together may
be merged by the operating system, and the message then arrives garbled
or incomplete; the client only learns of this by not receiving the
acknowledgement.

## Running the tests

```
pip install .[test]
pytest
```