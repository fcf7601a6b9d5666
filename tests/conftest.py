import matplotlib

matplotlib.use("Agg")

import pytest

from graph_source import from_weighted_edges


class RecordingSink:
    """Collects color events and pauses in call order."""

    def __init__(self):
        self.events = []
        self.pauses = 0

    def set_color(self, item, category):
        self.events.append((item, category))

    def pause(self):
        self.pauses += 1

    def last_color(self, item):
        for recorded, category in reversed(self.events):
            if recorded == item:
                return category
        return None


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def triangle():
    return from_weighted_edges([("A", "B", 1.0), ("B", "C", 2.0), ("A", "C", 3.0)])


@pytest.fixture
def two_components():
    return from_weighted_edges([("A", "B", 1.0), ("C", "D", 2.0)])
