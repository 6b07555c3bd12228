"""Console input helpers.

Each helper prints a prompt, reads one line and reprompts until the line is valid.
``read`` and ``write`` default to ``input``/``print`` and are injectable for tests.
"""
from datetime import date, datetime
from typing import Callable

from foodsaver.utilities.constants import DATE_FORMAT

Reader = Callable[[str], str]
Writer = Callable[[str], None]


def take_int_input(prompt: str, read: Reader = input, write: Writer = print) -> int:
    while True:
        raw = read(f"{prompt}: ")
        try:
            return int(raw.strip())
        except ValueError:
            write("Invalid input. Please enter a valid integer.")


def take_positive_int_input(prompt: str, read: Reader = input, write: Writer = print) -> int:
    while True:
        value = take_int_input(prompt, read, write)
        if value > 0:
            return value
        write("Invalid input. Please enter a number greater than zero.")


def take_float_input(prompt: str, read: Reader = input, write: Writer = print) -> float:
    while True:
        raw = read(f"{prompt}: ")
        try:
            return float(raw.strip())
        except ValueError:
            write("Invalid input. Please enter a valid number.")


def take_non_negative_float_input(prompt: str, read: Reader = input, write: Writer = print) -> float:
    while True:
        value = take_float_input(prompt, read, write)
        if value >= 0:
            return value
        write("Invalid input. The number cannot be negative.")


def take_date_input(prompt: str, read: Reader = input, write: Writer = print) -> date:
    """Read a dd-mm-YYYY date that is today or later."""
    while True:
        raw = read(f"{prompt} (dd-MM-yyyy): ")
        try:
            value = datetime.strptime(raw.strip(), DATE_FORMAT).date()
        except ValueError:
            write("Invalid date format. Please use dd-MM-yyyy.")
            continue
        if value < date.today():
            write("The date cannot be in the past.")
            continue
        return value


def _is_number(raw: str) -> bool:
    try:
        float(raw)
    except ValueError:
        return False
    return True


def take_string_input(prompt: str, read: Reader = input, write: Writer = print) -> str:
    """Read a non-blank line that is not just a number."""
    while True:
        raw = read(f"{prompt}: ")
        if not raw.strip():
            write("Input cannot be blank.")
            continue
        if _is_number(raw.strip()):
            write("Input cannot be a number.")
            continue
        return raw.strip()
