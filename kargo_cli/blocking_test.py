import click
import pytest

from .blocking import blocking


def test_blocking_returns_result():
    @blocking
    async def answer(value):
        return value * 2

    assert answer(21) == 42


def test_blocking_interrupt_aborts():
    @blocking
    async def interrupted():
        raise KeyboardInterrupt

    with pytest.raises(click.Abort):
        interrupted()
