from textwrap import dedent

from advent.solutions.year2020.day07 import Day07
from advent.solutions.year2020.day19 import Day19
from advent.solutions.year2021.day01 import Day01
from advent.types import NOT_SOLVED


def test_2021_01():
    data = "199\n200\n208\n210\n200\n207\n240\n269\n260\n263\n"
    assert Day01().part_one(data) == 7
    assert Day01().part_two(data) == 5


def test_2020_07():
    data = dedent(
        """\
        light red bags contain 1 bright white bag, 2 muted yellow bags.
        dark orange bags contain 3 bright white bags, 4 muted yellow bags.
        bright white bags contain 1 shiny gold bag.
        muted yellow bags contain 2 shiny gold bags, 9 faded blue bags.
        shiny gold bags contain 1 dark olive bag, 2 vibrant plum bags.
        dark olive bags contain 3 faded blue bags, 4 dotted black bags.
        vibrant plum bags contain 5 faded blue bags, 6 dotted black bags.
        faded blue bags contain no other bags.
        dotted black bags contain no other bags.
        """
    )
    assert Day07().part_one(data) == 4
    assert Day07().part_two(data) == 32


def test_2020_19():
    data = dedent(
        """\
        0: 4 1 5
        1: 2 3 | 3 2
        2: 4 4 | 5 5
        3: 4 5 | 5 4
        4: "a"
        5: "b"

        ababbb
        bababa
        abbbab
        aaabbb
        aaaabbb
        """
    )
    assert Day19().part_one(data) == 2
    assert Day19().part_two(data) is NOT_SOLVED
