import signal
from unittest.mock import patch

from sigtalk.client import is_all_digits, main, send_message
from sigtalk.protocol import BitDecoder


def test_all_digits():
    assert is_all_digits("12345") is True


def test_not_all_digits():
    assert is_all_digits("12a") is False
    assert is_all_digits("-1") is False


def test_empty_counts_as_digits():
    assert is_all_digits("") is True


def test_send_message_signals_every_bit():
    calls = []
    with patch("os.kill", side_effect=lambda pid, sig: calls.append((pid, sig))):
        send_message(4242, "hi", delay=0)
    assert {pid for pid, _ in calls} == {4242}
    decoder = BitDecoder()
    received = bytes(
        b for b in (decoder.feed(sig == signal.SIGUSR2) for _, sig in calls) if b is not None
    )
    assert received == b"hi\x00"


def test_send_message_uses_only_user_signals():
    calls = []
    with patch("os.kill", side_effect=lambda pid, sig: calls.append(sig)):
        send_message(4242, "x", delay=0)
    assert set(calls) <= {signal.SIGUSR1, signal.SIGUSR2}
    assert len(calls) == 8 * (len("x") + 1)
    decoder = BitDecoder()
    decoded = [decoder.feed(sig == signal.SIGUSR2) for sig in calls]
    assert [b for b in decoded if b is not None] == [ord("x"), 0]


def test_main_wrong_argument_count(capsys):
    with patch("os.kill") as kill:
        assert main(["4242"]) == 1
        assert kill.call_count == 0
    assert "incorrect argument!" in capsys.readouterr().out


def test_main_non_numeric_pid(capsys):
    with patch("os.kill") as kill:
        assert main(["42x", "hello"]) == 1
        assert kill.call_count == 0
    assert "Correct Argument format" in capsys.readouterr().out


def test_main_success_when_acknowledged(capsys):
    decoder = BitDecoder()
    targets = []

    def fake_kill(pid, sig):
        targets.append(pid)
        if decoder.feed(sig == signal.SIGUSR2) == 0:
            signal.raise_signal(signal.SIGUSR1)

    with patch("os.kill", side_effect=fake_kill):
        status = main(["4242", "ok"])
    assert status == 0
    assert set(targets) == {4242}
    assert "Success sending message!" in capsys.readouterr().out


def test_main_failure_without_acknowledgement(capsys):
    with patch("os.kill"):
        status = main(["4242", "ok"])
    assert status == 1
    assert "Failed to send message!" in capsys.readouterr().out


def test_main_restores_signal_handlers():
    before = signal.getsignal(signal.SIGUSR1)
    with patch("os.kill"):
        status = main(["4242", "a"])
    assert status == 1
    assert signal.getsignal(signal.SIGUSR1) is before