from advent.catalog import puzzle
from advent.models import Solution
from advent.transforms import numbers


@puzzle(2021, 1)
class Day01(Solution):
    """Sonar Sweep"""

    def part_one(self, data):
        depths = numbers(data)
        return sum(b > a for a, b in zip(depths, depths[1:]))

    def part_two(self, data):
        depths = numbers(data)
        # consecutive windows share two readings, so only the ends matter
        return sum(b > a for a, b in zip(depths, depths[3:]))
