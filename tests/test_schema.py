from typing import List, Optional

import pytest
from pydantic import BaseModel

from fast_rules import MacroRegistry, Schema, ValidationRuleException, default_macros, rule

order_macros = MacroRegistry(parent=default_macros)


@order_macros.register("positive")
def positive(ctx):
    if ctx.value is not None and ctx.value <= 0:
        ctx.failure("must be greater than 0")


class Item(BaseModel):
    sku: str
    qty: int


def check_city(ctx):
    if ctx.value != "Munich":
        ctx.failure("we only ship to Munich")


class OrderSchema(Schema):
    items: List[Item]
    nums: List[int] = []
    city: Optional[str] = None

    class Meta:
        rules = [
            rule("items[].qty").validate("positive"),
            rule("nums").each("positive"),
            rule("city").validate(check=check_city),
        ]
        macros = order_macros


@pytest.mark.asyncio
async def test_valid_payload_returns_values():
    values = await OrderSchema.avalidate({"items": [{"sku": "a", "qty": 2}], "nums": [1], "city": "Munich"})
    assert values["items"][0]["qty"] == 2


@pytest.mark.asyncio
async def test_rule_failures_follow_declaration_and_path_order():
    outcome = await OrderSchema.acheck(
        {"items": [{"sku": "a", "qty": 0}, {"sku": "b", "qty": -1}], "nums": [3, -2], "city": "Oslo"}
    )
    assert not outcome.schema_errors
    assert [(f.path, f.message) for f in outcome.failures] == [
        (("items", 0, "qty"), "must be greater than 0"),
        (("items", 1, "qty"), "must be greater than 0"),
        (("nums", 1), "must be greater than 0"),
        (("city",), "we only ship to Munich"),
    ]


@pytest.mark.asyncio
async def test_shape_failures_are_not_reported_twice():
    outcome = await OrderSchema.acheck(
        {"items": [{"sku": "a", "qty": "many"}, {"sku": "b", "qty": -1}], "nums": [-1, "x"], "city": 5}
    )
    failed_locs = {tuple(error["loc"]) for error in outcome.schema_errors}
    assert ("items", 0, "qty") in failed_locs
    assert ("nums", 1) in failed_locs
    assert ("city",) in failed_locs
    # element 0 of items and element 1 of nums failed the shape, the city rule is skipped entirely
    assert [f.path for f in outcome.failures] == [("items", 1, "qty"), ("nums", 0)]


@pytest.mark.asyncio
async def test_avalidate_raises_with_pydantic_style_errors():
    with pytest.raises(ValidationRuleException) as exc:
        await OrderSchema.avalidate({"items": [{"sku": "a", "qty": -4}], "city": "Munich"})
    assert exc.value.errors == [{"loc": ("items", 0, "qty"), "msg": "must be greater than 0", "type": "rule_error"}]
    assert "items[0].qty" in exc.value.message


@pytest.mark.asyncio
async def test_context_is_shared_between_rules():
    def remember(ctx):
        ctx.context.setdefault("seen", []).append(ctx.path)

    class Tagged(Schema):
        tags: List[str]

        class Meta:
            rules = [rule("tags").each(check=remember), rule("tags").validate(check=remember)]

    context = {}
    outcome = await Tagged.acheck({"tags": ["a", "b"]}, context=context)
    assert outcome.success
    assert context["seen"] == [("tags", 0), ("tags", 1), ("tags",)]
