import dataclasses

import pytest

from rustlings.structs import (
    ChangeColor,
    ColorClassicStruct,
    ColorTupleStruct,
    Echo,
    Move,
    Package,
    Point,
    Quit,
    State,
    UnitLikeStruct,
    create_order_template,
)


def test_classic_c_structs():
    green = ColorClassicStruct(red=0, green=255, blue=0)
    assert green.red == 0
    assert green.green == 255
    assert green.blue == 0


def test_tuple_structs():
    green = ColorTupleStruct(0, 255, 0)
    assert green[0] == 0
    assert green[1] == 255
    assert green[2] == 0


def test_unit_structs():
    message = f"{UnitLikeStruct()!r}s are fun!"
    assert message == "UnitLikeStructs are fun!"


def test_your_order():
    template = create_order_template()
    your_order = dataclasses.replace(template, name="Hacker in Rust", count=1)
    assert your_order.name == "Hacker in Rust"
    assert your_order.year == template.year
    assert your_order.made_by_phone == template.made_by_phone
    assert your_order.made_by_mobile == template.made_by_mobile
    assert your_order.made_by_email == template.made_by_email
    assert your_order.item_number == template.item_number
    assert your_order.count == 1


def test_order_template_values():
    template = create_order_template()
    assert template.name == "Bob"
    assert template.year == 2019
    assert template.item_number == 123
    assert template.count == 0


def test_fail_creating_weightless_package():
    with pytest.raises(ValueError):
        Package("Spain", "Austria", 5)


def test_create_international_package():
    assert Package("Spain", "Russia", 1200).is_international()


def test_create_local_package():
    assert not Package("Canada", "Canada", 1200).is_international()


def test_calculate_transport_fees():
    package = Package("Spain", "Spain", 1500)
    cents_per_gram = 3
    assert package.get_fees(cents_per_gram) == 4500
    assert package.get_fees(cents_per_gram * 2) == 9000


def test_match_message_call(capsys):
    state = State(color=(0, 0, 0), position=Point(0, 0), quit_requested=False)
    state.process(ChangeColor(255, 0, 255))
    state.process(Echo("hello world"))
    state.process(Move(x=10, y=15))
    state.process(Quit())

    assert state.color == (255, 0, 255)
    assert state.position.x == 10
    assert state.position.y == 15
    assert state.quit_requested is True
    assert capsys.readouterr().out == "hello world\n"


def test_process_rejects_unknown_message():
    with pytest.raises(TypeError):
        State().process("jump")