'''
Handle registry tests
'''

from threading import Thread

from rpncalc.registry import HandleRegistry
from rpncalc.util import ErrorKind, RPNError

from pytest import raises


def test_handles_count_up_from_zero(registry):
    assert [registry.create() for _ in range(3)] == [0, 1, 2]
    assert registry.handles() == [0, 1, 2]
    assert len(registry) == 3


def test_handles_never_reused(registry):
    first = registry.create()
    registry.delete(first)
    assert registry.create() == first + 1


def test_lookup(registry):
    h = registry.create()
    calculator = registry.lookup(h)
    assert calculator.handle == h
    assert h in registry
    assert registry.lookup(h + 1) is None
    assert registry.lookup('0') is None


def test_resolve_unknown(registry):
    with raises(RPNError) as e:
        registry.resolve(42)
    assert e.value.kind is ErrorKind.INVALID_ARGUMENT


def test_delete_closes_calculator(registry):
    h = registry.create()
    calculator = registry.lookup(h)
    registry.delete(h)
    assert calculator.closed
    assert h not in registry
    assert len(registry) == 0


def test_delete_twice(registry):
    h = registry.create()
    registry.delete(h)
    with raises(RPNError) as e:
        registry.delete(h)
    assert e.value.kind is ErrorKind.INVALID_ARGUMENT


def test_handle_exhaustion():
    registry = HandleRegistry(max_handle=1)
    assert registry.create() == 0
    assert registry.create() == 1
    with raises(RPNError) as e:
        registry.create()
    assert e.value.kind is ErrorKind.NO_MEMORY
    assert registry.handles() == [0, 1]
    # Freeing a handle doesn't make room: handles aren't reused.
    registry.delete(0)
    with raises(RPNError):
        registry.create()


def test_default_handle_space():
    assert HandleRegistry().max_handle == HandleRegistry.MAX_HANDLE


def test_clear(registry):
    handles = [registry.create() for _ in range(4)]
    calculators = [registry.lookup(h) for h in handles]
    assert registry.clear() == 4
    assert len(registry) == 0
    assert all(c.closed for c in calculators)
    assert registry.create() == 4


def test_concurrent_creates_are_unique(registry):
    created = [[] for _ in range(8)]

    def worker(out):
        for _ in range(200):
            out.append(registry.create())

    threads = [Thread(target=worker, args=(out,)) for out in created]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    handles = [h for out in created for h in out]
    assert sorted(handles) == list(range(1600))
    assert len(registry) == 1600
