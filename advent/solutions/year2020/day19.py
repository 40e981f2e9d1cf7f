import re

from advent.catalog import puzzle
from advent.models import Solution
from advent.transforms import blocks
from advent.transforms import lines
from advent.types import NOT_SOLVED


def expand(rule, rules):
    if rule in ("a", "b"):
        return rule
    if "|" in rule:
        options = [expand(option, rules) for option in rule.split(" | ")]
        return "(?:" + "|".join(options) + ")"
    return "".join(expand(rules[id_], rules) for id_ in rule.split())


@puzzle(2020, 19)
class Day19(Solution):
    """Monster Messages"""

    def part_one(self, data):
        rule_block, message_block = blocks(data)
        rules = {}
        for line in lines(rule_block):
            id_, _, rule = line.partition(":")
            rules[id_] = rule.strip().strip('"')
        pattern = re.compile(expand(rules["0"], rules))
        return sum(bool(pattern.fullmatch(msg)) for msg in lines(message_block))

    def part_two(self, data):
        return NOT_SOLVED
