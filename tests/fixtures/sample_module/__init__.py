"""Loadable module used by the require:/exec: tests."""

ANSWER = 42


def my_function():
    return "myFunction"


def __call__():
    return "myModule"
