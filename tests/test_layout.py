from pagefetch.layout import (
    FlexOrder,
    ItemExtent,
    LineContext,
    LineItemType,
    PositionStack,
)


def test_line_context_width():
    ctx = LineContext(top=5, left=2, right=10)
    assert ctx.width() == 8


def test_line_context_fix_top_copies_top():
    ctx = LineContext(top=17)
    ctx.fix_top()
    assert ctx.calculated_top == 17


def test_line_context_defaults_are_zero():
    ctx = LineContext()
    assert (ctx.calculated_top, ctx.top, ctx.left, ctx.right) == (0, 0, 0, 0)
    assert ctx.width() == 0


def test_item_extent_tracks_min_and_max():
    extent = ItemExtent()
    extent.add(-3, 8)
    extent.add(-1, 12)
    extent.add(-6, 2)
    assert extent.items_top == -6
    assert extent.items_bottom == 12


def test_item_extent_starts_from_zero():
    extent = ItemExtent()
    extent.add(4, -2)
    assert (extent.items_top, extent.items_bottom) == (0, 0)


def test_item_extent_reset():
    extent = ItemExtent()
    extent.add(-5, 5)
    extent.reset()
    assert (extent.items_top, extent.items_bottom) == (0, 0)


def test_flex_order_sorts_by_order_then_source():
    items = [FlexOrder(1, 0), FlexOrder(0, 2), FlexOrder(0, 1), FlexOrder(-1, 3)]
    assert sorted(items) == [
        FlexOrder(-1, 3),
        FlexOrder(0, 1),
        FlexOrder(0, 2),
        FlexOrder(1, 0),
    ]


def test_flex_order_equal_is_not_less():
    same_a = FlexOrder(2, 2)
    same_b = FlexOrder(2, 2)
    assert (same_a < same_b) is False
    assert (same_b < same_a) is False
    assert (FlexOrder(2, 1) < same_a) is True


def test_position_stack_push_pop_restores():
    stack = PositionStack()
    stack.push(10, 20)
    stack.push(3, 4)
    assert (stack.current_left, stack.current_top) == (13, 24)
    stack.pop(3, 4)
    stack.pop(10, 20)
    assert (stack.current_left, stack.current_top) == (0, 0)


def test_line_item_types_round_trip_by_value():
    members = list(LineItemType)
    assert len(members) == 4
    assert [LineItemType(member.value) for member in members] == members
    assert len({member.value for member in members}) == 4