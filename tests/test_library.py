from mockledger.ledger import BehaviorRegister, CallRegister, Library, RegisterID


def test_call_register_counts_from_zero() -> None:
    r = CallRegister()
    assert r.get_count("k") == 0
    r.increase("k")
    r.increase("k")
    assert r.get_count("k") == 2
    assert r.get_count("other") == 0


def test_behavior_register_last_write_wins() -> None:
    r: BehaviorRegister[object] = BehaviorRegister(object)
    assert r.fetch_value("k") is None
    r.record(1, "k")
    r.record(2, "k")
    assert r.fetch_value("k") == 2
    assert "k" in r


def test_behavior_register_ignores_wrong_type() -> None:
    r: BehaviorRegister[BaseException] = BehaviorRegister(BaseException)
    r.record("boom", "k")  # type: ignore[arg-type]
    assert r.fetch_value("k") is None
    err = ValueError("boom")
    r.record(err, "k")
    assert r.fetch_value("k") is err


def test_library_routes_counts_to_call_register() -> None:
    lib = Library()
    lib.increase("k", RegisterID.CALLS)
    assert lib.get_count("k", RegisterID.CALLS) == 1


def test_library_cross_kind_operations_are_noops() -> None:
    lib = Library()
    lib.increase("k", RegisterID.RETURNS)
    assert lib.get_count("k", RegisterID.RETURNS) == 0
    lib.set_value(5, "k", RegisterID.CALLS)
    assert lib.get_value("k", RegisterID.CALLS) is None
    assert lib.get_count("k", RegisterID.CALLS) == 0
    assert not lib.has_value("k", RegisterID.CALLS)


def test_library_keeps_behaviors_apart() -> None:
    lib = Library()
    err = RuntimeError("x")
    lib.set_value(203, "k", RegisterID.RETURNS)
    lib.set_value(err, "k", RegisterID.RAISES)
    lib.set_value("not an error", "j", RegisterID.RAISES)
    assert lib.get_value("k", RegisterID.RETURNS) == 203
    assert lib.get_value("k", RegisterID.RAISES) is err
    assert lib.get_value("j", RegisterID.RAISES) is None


def test_library_snapshot() -> None:
    lib = Library()
    lib.increase("b")
    lib.increase("a")
    lib.increase("b")
    lib.set_value(None, "r", RegisterID.RETURNS)
    assert lib.snapshot() == {"calls": {"a": 1, "b": 2}, "returns": ["r"], "raises": []}
