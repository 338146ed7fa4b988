import pytest

from dungeonlab import puzzle_handler as pz

from tests.board_test_utils import VALID_SAMPLES


@pytest.fixture
def load():
    """Loader for the bundled sample boards."""
    return pz.load_puzzle


@pytest.fixture(params=VALID_SAMPLES)
def valid_board(request):
    return pz.load_puzzle(request.param)


@pytest.fixture
def treasure_board():
    return pz.load_puzzle("treasure_room")
