"""
Shared pytest fixtures for the TicTacToe tests.
"""

import pytest


@pytest.fixture
def scripted_input():
    """
    Build a stand-in for input() that returns the given lines in order.

    The returned function records every line it handed out in .calls and
    fails the test if the game asks for more lines than were scripted.
    """
    def make(lines):
        remaining = list(lines)
        calls = []

        def read(prompt=""):
            if not remaining:
                raise AssertionError("Asked for more input than was scripted")
            line = remaining.pop(0)
            calls.append(line)
            return line

        read.calls = calls
        return read

    return make
