import pytest
import letcalc.termui as t


@pytest.fixture(autouse=True)
def no_colors():
    """
    CLI invocations switch colors on globally. Keep each test independent.
    """
    t.colors = False
    yield
    t.colors = False
