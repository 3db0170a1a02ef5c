from datetime import timedelta

import pytest

from tests.fakes import T0, FakeStatusWriter


@pytest.fixture
def writer():
    return FakeStatusWriter()


@pytest.fixture
def now():
    return T0


@pytest.fixture
def later():
    return T0 + timedelta(minutes=5)
