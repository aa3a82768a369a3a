import pytest

from robot_api.models.action_model import (
    AttackAction,
    MoveAction,
    PickupAction,
    PutdownAction,
    StateUpdateAction,
)
from robot_api.models.position_model import Position
from robot_api.models.robot_model import (
    ATTACK_DAMAGE,
    ATTACK_ENERGY_COST,
    InsufficientEnergyError,
    Robot,
)


@pytest.mark.parametrize(
    "direction, expected",
    [
        ("up", (0, 1)),
        ("down", (0, -1)),
        ("left", (-1, 0)),
        ("right", (1, 0)),
    ],
)
def test_move_changes_one_coordinate_by_one(robot: Robot, direction: str, expected) -> None:
    robot.move(direction)

    assert robot.position.as_tuple() == expected
    assert robot.actions == [MoveAction(direction=direction)]


def test_move_up_then_right_from_origin(robot: Robot) -> None:
    robot.move("up")
    assert robot.position.as_tuple() == (0, 1)

    robot.move("right")
    assert robot.position.as_tuple() == (1, 1)
    assert len(robot.actions) == 2


def test_move_has_no_bounds() -> None:
    robot = Robot(id=7, position=Position(x=-1000, y=-1000))
    robot.move("down")
    robot.move("left")
    assert robot.position.as_tuple() == (-1001, -1001)


def test_move_rejects_unknown_direction_without_logging(robot: Robot) -> None:
    with pytest.raises(ValueError):
        robot.move("north")

    assert robot.position.as_tuple() == (0, 0)
    assert robot.actions == []


def test_pickup_appends_in_order_without_dedup(robot: Robot) -> None:
    robot.pickup(3)
    robot.pickup(1)
    robot.pickup(3)

    assert robot.inventory == [3, 1, 3]
    assert robot.actions == [PickupAction(item=3), PickupAction(item=1), PickupAction(item=3)]


def test_putdown_removes_first_occurrence(robot: Robot) -> None:
    robot.pickup(3)
    robot.pickup(1)
    robot.pickup(3)

    robot.putdown(3)

    assert robot.inventory == [1, 3]
    assert robot.actions[-1] == PutdownAction(item=3)


def test_putdown_of_absent_item_is_silent_noop(robot: Robot) -> None:
    robot.pickup(1)

    robot.putdown(42)

    assert robot.inventory == [1]
    assert len(robot.actions) == 1


def test_attack_exchanges_energy_and_logs_on_attacker_only() -> None:
    a = Robot(id=1, energy=100)
    b = Robot(id=2, energy=100)

    a.attack(b)

    assert a.energy == 100 - ATTACK_ENERGY_COST == 95
    assert b.energy == 100 - ATTACK_DAMAGE == 90
    assert a.actions == [AttackAction(target_id=2)]
    assert b.actions == []


def test_repeated_attacks_floor_target_and_drain_attacker() -> None:
    a = Robot(id=1, energy=100)
    b = Robot(id=2, energy=100)

    previous = b.energy
    for _ in range(20):
        a.attack(b)
        assert b.energy <= previous
        assert b.energy >= 0
        previous = b.energy

    assert b.energy == 0
    assert a.energy == 0

    with pytest.raises(InsufficientEnergyError):
        a.attack(b)

    assert a.energy == 0
    assert b.energy == 0
    assert len(a.actions) == 20


def test_failed_attack_leaves_both_robots_untouched() -> None:
    a = Robot(id=1, energy=ATTACK_ENERGY_COST - 1)
    b = Robot(id=2, energy=50)

    with pytest.raises(InsufficientEnergyError) as excinfo:
        a.attack(b)

    assert excinfo.value.robot_id == 1
    assert excinfo.value.energy == ATTACK_ENERGY_COST - 1
    assert str(excinfo.value) == "Not enough energy to attack"
    assert (a.energy, b.energy) == (ATTACK_ENERGY_COST - 1, 50)
    assert a.actions == []


def test_attack_with_exactly_the_cost_succeeds() -> None:
    a = Robot(id=1, energy=ATTACK_ENERGY_COST)
    b = Robot(id=2, energy=3)

    a.attack(b)

    assert a.energy == 0
    assert b.energy == 0
    assert not a.can_attack()


def test_update_state_overwrites_without_clamping(robot: Robot) -> None:
    robot.update_state(energy=150)

    assert robot.energy == 150
    assert robot.actions == [StateUpdateAction(new_state={"energy": 150})]


def test_update_state_logs_only_supplied_fields(robot: Robot) -> None:
    robot.update_state(position=Position(x=3, y=4))
    robot.update_state(energy=10, position=Position(x=-1, y=0))

    assert robot.actions[0].new_state == {"position": {"x": 3, "y": 4}}
    assert robot.actions[1].new_state == {"energy": 10, "position": {"x": -1, "y": 0}}
    assert robot.energy == 10
    assert robot.position.as_tuple() == (-1, 0)


def test_logged_state_patch_is_not_aliased_to_robot_position(robot: Robot) -> None:
    patch = Position(x=3, y=4)
    robot.update_state(position=patch)

    robot.move("up")
    patch.x = 99

    assert robot.position.as_tuple() == (3, 5)
    assert robot.actions[0].new_state == {"position": {"x": 3, "y": 4}}


def test_action_records_serialize_with_camel_case_keys() -> None:
    a = Robot(id=1)
    b = Robot(id=2)
    a.attack(b)
    a.update_state(energy=50)

    dumped = a.model_dump(by_alias=True)

    assert dumped["actions"] == [
        {"action": "attack", "targetId": 2},
        {"action": "stateUpdate", "newState": {"energy": 50}},
    ]
