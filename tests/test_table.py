import pytest

from hookable import HookTable, Phase


def first() -> None: ...


def second() -> None: ...


def test_lazy_lists() -> None:
    table = HookTable()
    assert not table.is_hooked("save")

    assert table.hooks(Phase.BEFORE, "save") == []
    assert table.hooks("after", "save") == []
    assert table.is_hooked("save")
    assert list(table.names()) == ["save"]


def test_register_keeps_order() -> None:
    table = HookTable()
    table.register(Phase.BEFORE, "save", first)
    table.register("before", "save", second)
    table.register(Phase.AFTER, "save", second)

    assert table.hooks(Phase.BEFORE, "save") == [first, second]
    assert table.count(Phase.AFTER, "save") == 1
    assert table.has_hooks(Phase.AFTER, "save")
    assert not table.has_hooks(Phase.AFTER, "load")


def test_register_rejects_non_callable() -> None:
    table = HookTable()
    with pytest.raises(TypeError, match="must be callable"):
        table.register(Phase.BEFORE, "save", "not a hook")  # pyright: ignore[reportArgumentType]


def test_unknown_phase() -> None:
    table = HookTable()
    with pytest.raises(ValueError, match="during"):
        _ = table.hooks("during", "save")


def test_remove_by_identity() -> None:
    table = HookTable()
    for fn in (first, second, first):
        table.register(Phase.BEFORE, "save", fn)

    table.remove(Phase.BEFORE, "save", first)
    assert table.hooks(Phase.BEFORE, "save") == [second, first]

    table.remove(Phase.BEFORE, "save", print)
    assert table.hooks(Phase.BEFORE, "save") == [second, first]


def test_remove_all() -> None:
    table = HookTable()
    table.register(Phase.BEFORE, "save", first)
    table.register(Phase.AFTER, "save", second)

    table.remove(Phase.BEFORE, "save")

    assert table.hooks(Phase.BEFORE, "save") == []
    assert table.hooks(Phase.AFTER, "save") == [second]


def test_discard_and_clear() -> None:
    table = HookTable()
    table.register(Phase.BEFORE, "save", first)
    table.register(Phase.BEFORE, "load", first)

    table.discard("save")
    assert list(table.names()) == ["load"]
    assert repr(table) == "HookTable('load')"

    table.clear()
    assert list(table.names()) == []


def test_lookups_do_not_create_lists() -> None:
    table = HookTable()

    assert table.snapshot(Phase.BEFORE, "save") == ()
    assert table.count("after", "save") == 0
    assert not table.has_hooks(Phase.BEFORE, "save")
    table.remove(Phase.BEFORE, "save", first)
    table.remove(Phase.AFTER, "save")

    assert not table.is_hooked("save")
    assert list(table.names()) == []


def test_snapshot_is_detached() -> None:
    table = HookTable()
    table.register(Phase.BEFORE, "save", first)

    hooks = table.snapshot(Phase.BEFORE, "save")
    table.register(Phase.BEFORE, "save", second)

    assert hooks == (first,)
    assert table.snapshot("before", "save") == (first, second)
