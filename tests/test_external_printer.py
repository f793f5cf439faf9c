import queue

import pytest

from lineedit.external_printer import (
    EXTERNAL_PRINTER_DEFAULT_CAPACITY,
    ExternalPrinter,
)


def test_default_capacity_is_twenty():
    printer = ExternalPrinter()
    assert printer.max_cap == EXTERNAL_PRINTER_DEFAULT_CAPACITY == 20


def test_print_then_get_line_round_trip():
    printer = ExternalPrinter(5)
    printer.print("hello")
    assert printer.get_line() == "hello"


def test_get_line_on_empty_returns_none():
    printer = ExternalPrinter(3)
    assert printer.get_line() is None


def test_lines_come_out_in_order():
    printer = ExternalPrinter(4)
    for line in ["a", "b", "c"]:
        printer.print(line)
    assert [printer.get_line() for _ in range(4)] == ["a", "b", "c", None]


def test_sender_feeds_the_same_channel():
    printer = ExternalPrinter(2)
    printer.sender().put("from sender")
    assert printer.get_line() == "from sender"


def test_channel_is_bounded_by_capacity():
    printer = ExternalPrinter(2)
    printer.print("one")
    printer.print("two")
    with pytest.raises(queue.Full):
        printer.sender().put_nowait("three")
    assert printer.get_line() == "one"


@pytest.mark.parametrize("cap", [0, -1])
def test_non_positive_capacity_rejected(cap):
    with pytest.raises(ValueError):
        ExternalPrinter(cap)


def test_non_integer_capacity_rejected():
    with pytest.raises(TypeError):
        ExternalPrinter("5")