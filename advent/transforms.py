"""
Helpers for massaging raw puzzle input into something more useful. Every function
here accepts the input text as its one positional argument.
"""

__all__ = ["blocks", "lines", "numbers"]

import re


def lines(data):
    return data.splitlines()


def blocks(data):
    # sections of the input separated by blank lines
    return [block for block in re.split(r"\n\s*\n", data.strip("\n")) if block]


def numbers(data):
    result = []
    for line in data.splitlines():
        matches = [int(n) for n in re.findall(r"-?\d+", line)]
        if matches:
            result.append(matches)
    if all(len(n) == 1 for n in result):
        # flatten the list if there is always 1 number per line
        result = [n for [n] in result]
    return result
