import pytest

from mobagen.catchthecat.agent import Agent
from mobagen.point2d import Point2D


class FixedAgent(Agent):
    def __init__(self, target):
        self.target = target

    def move(self, world):
        return self.target


def test_agent_is_abstract():
    with pytest.raises(TypeError):
        Agent()


def test_subclass_move_is_used():
    agent = FixedAgent(Point2D(1, 2))
    assert agent.move(None) == Point2D(1, 2)
    assert isinstance(agent, Agent)