import pytest

from structgeom import tolerance


@pytest.fixture(autouse=True)
def default_tolerance():
    """every test starts, and finishes, with the stock tolerance"""
    tolerance.set_tolerance(tolerance.DEFAULT)
    yield tolerance.DEFAULT
    tolerance.set_tolerance(tolerance.DEFAULT)
