import re
from collections import defaultdict
from functools import cache

from advent.catalog import puzzle
from advent.models import Solution
from advent.transforms import lines


TARGET = "shiny gold"


def parse(data):
    rules = {}
    for line in lines(data):
        container, _, contents = line.partition(" bags contain ")
        rules[container] = {
            colour: int(n) for n, colour in re.findall(r"(\d+) (\w+ \w+) bags?", contents)
        }
    return rules


@puzzle(2020, 7)
class Day07(Solution):
    """Handy Haversacks"""

    def part_one(self, data):
        containers = defaultdict(set)
        for container, contents in parse(data).items():
            for colour in contents:
                containers[colour].add(container)
        seen = set()
        todo = [TARGET]
        while todo:
            for container in containers[todo.pop()] - seen:
                seen.add(container)
                todo.append(container)
        return len(seen)

    def part_two(self, data):
        rules = parse(data)

        @cache
        def count(colour):
            return sum(n + n * count(inner) for inner, n in rules.get(colour, {}).items())

        return count(TARGET)
