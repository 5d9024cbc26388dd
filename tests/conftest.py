import pytest

from cliquenet import config
from cliquenet.core.graph import CompleteGraph


@pytest.fixture(autouse=True)
def _checked_by_default():
    # tests assume checked mode regardless of CLIQUENET_CHECKED
    with config.checked_mode(True):
        yield


@pytest.fixture
def small_graph():
    return CompleteGraph(4)


@pytest.fixture
def tmpdir_fixture(tmp_path):
    return tmp_path
