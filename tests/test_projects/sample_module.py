"""
Sample module for parser tests. Never imported.
"""

import math
from typing import Dict, List


def calculate_hypotenuse(a, b):
    """Calculates the hypotenuse of a right-angled triangle."""
    return math.sqrt(a**2 + b**2)


def process_data(data: List[int], threshold: int = 10) -> List[int]:
    return [x for x in data if x > threshold]


class Inventory:
    '''
    Keeps item counts.
    '''

    def __init__(self):
        self.items: Dict[str, int] = {}

    def add(self, name, count=1):
        self.items[name] = self.items.get(name, 0) + count


@staticmethod
def configure(*args: str, **kwargs) -> str:
    def helper():
        return "nested"
    return helper()


async def fetch(url: str, timeout: float = 5.0):
    """
    Fetch a URL.

    Args:
        url: Address to fetch
        timeout: Seconds to wait
    """
    return url
