from pytest import fixture

from rpncalc.engine import Engine
from rpncalc.registry import HandleRegistry


@fixture
def registry():
    '''
    Fresh registry; torn down so no calculator outlives its test.
    '''
    registry = HandleRegistry()
    yield registry
    registry.clear()


@fixture
def engine(registry):
    return Engine(registry)


@fixture
def handle(engine):
    '''
    Handle of an empty calculator on the engine fixture.
    '''
    h, _ = engine.create()
    return h
