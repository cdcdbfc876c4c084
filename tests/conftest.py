import pytest

from accrete.base.star import Star


@pytest.fixture
def sol():
    return Star({"name": "Sol", "mass": 1.0, "luminosity": 1.0})


def check_bands(bands):
    """
    Sorted, non-overlapping and no equal-flag neighbours
    """
    for band in bands:
        assert band.inner_edge < band.outer_edge
    for prev, band in zip(bands[:-1], bands[1:]):
        assert prev.outer_edge <= band.inner_edge
        if prev.outer_edge == band.inner_edge:
            assert prev.flags != band.flags
