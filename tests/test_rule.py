import pytest

from fast_rules import RuleFrozenException, configure, configure_each, describe, rule


def check(ctx):
    pass


def other_check(ctx):
    pass


def test_validate_sets_macros_and_check():
    built = rule("nums").validate("filled", {"min_size": 3}, check=check).build()
    assert built.keys == ("nums",)
    assert built.check is check
    assert built.normalized_macros == [("filled", []), ("min_size", [3])]
    assert not built.each_mode


def test_validate_last_call_wins_and_keeps_check():
    builder = rule("nums").validate("a", check=check).validate("b")
    built = builder.build()
    assert built.normalized_macros == [("b", [])]
    assert built.check is check


def test_each_resets_visible_keys():
    built = rule("addr", "city").each(check=check).build()
    assert built.each_mode
    assert built.keys == ()
    assert built.base_keys == ("addr", "city")
    assert describe(built) == "<Rule keys=[]>"


def test_each_twice_keeps_base_keys():
    built = rule("nums").each("a").each("b", check=check).build()
    assert built.base_keys == ("nums",)
    assert built.normalized_macros == [("b", [])]


def test_describe_shows_top_level_keys():
    assert describe(rule({"address": "city"})) == "<Rule keys=[{'address': 'city'}]>"
    assert repr(rule("nums").build()) == "<Rule keys=['nums']>"


def test_equality_ignores_macros():
    first = rule("nums").validate("a", check=check).build()
    second = rule("nums").validate("b", check=check).build()
    third = rule("nums").validate("a", check=other_check).build()
    assert first == second
    assert hash(first) == hash(second)
    assert first != third


def test_build_freezes_builder():
    builder = rule("nums").validate(check=check)
    built = builder.build()
    assert builder.build() is built
    with pytest.raises(RuleFrozenException):
        builder.validate("a")
    with pytest.raises(RuleFrozenException):
        builder.each()


def test_functional_aliases():
    assert configure(rule("x"), "a", check=check).build().normalized_macros == [("a", [])]
    assert configure_each(rule("x"), check=check).build().each_mode


def test_equal_rules_hash_equal():
    assert rule(1).build() == rule(True).build()
    assert hash(rule(1).build()) == hash(rule(True).build())

    first = rule({"a": 1, "b": 2}).validate(check=check).build()
    second = rule({"b": 2, "a": 1}).validate(check=check).build()
    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1
