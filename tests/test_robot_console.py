import pytest

from tools.dev.robot_console import build_parser, build_request


def _request(*argv: str):
    return build_request(build_parser().parse_args(list(argv)))


def test_move_request() -> None:
    assert _request("move", "1", "up") == ("POST", "/robot/1/move", {"direction": "up"}, None)


def test_state_request_with_energy_and_position() -> None:
    method, path, body, params = _request("state", "2", "--energy", "90", "--x", "3", "--y", "-2")

    assert (method, path, params) == ("PATCH", "/robot/2/state", None)
    assert body == {"energy": 90, "position": {"x": 3, "y": -2}}


@pytest.mark.parametrize("argv", [("state", "1"), ("state", "1", "--x", "3")])
def test_state_request_needs_complete_fields(argv) -> None:
    with pytest.raises(ValueError):
        _request(*argv)


def test_actions_request_params() -> None:
    assert _request("actions", "1") == ("GET", "/robot/1/actions", None, None)
    assert _request("actions", "1", "--page", "2", "--size", "3") == (
        "GET",
        "/robot/1/actions",
        None,
        {"page": 2, "size": 3},
    )


def test_other_requests() -> None:
    assert _request("status", "4")[:2] == ("GET", "/robot/4/status")
    assert _request("pickup", "1", "2")[:2] == ("POST", "/robot/1/pickup/2")
    assert _request("putdown", "1", "2")[:2] == ("POST", "/robot/1/putdown/2")
    assert _request("attack", "1", "2")[:2] == ("POST", "/robot/1/attack/2")
    assert _request("item", "7")[:2] == ("GET", "/items/7")


def test_invalid_direction_is_rejected_by_parser() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["move", "1", "north"])
