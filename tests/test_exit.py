import pytest

from cogwire.exit import ExitCode


@pytest.mark.parametrize("member", list(ExitCode))
def test_round_trip_through_status(member):
    assert ExitCode.from_status(int(member)) is member


def test_known_statuses():
    assert ExitCode.from_status(0) is ExitCode.OK
    assert ExitCode.from_status(5) is ExitCode.NOT_FOUND
    assert ExitCode.from_status(130) is ExitCode.CANCELLED


@pytest.mark.parametrize("status", [9, 11, 255, -1])
def test_unknown_status_is_error(status):
    assert ExitCode.from_status(status) is ExitCode.ERROR


def test_values_are_integers():
    assert int(ExitCode.from_status(10)) == 10
    assert ExitCode.from_status(7) == 7