import pytest


@pytest.fixture(scope="function")
def map_settings():
    from elmap import settings

    yield settings
    settings.reset()


@pytest.fixture
def cubic_cell():
    from elmap import UnitCell

    return UnitCell(10, 10, 10, 90, 90, 90)
