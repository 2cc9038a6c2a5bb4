import logging

import pytest

from priority_heap import PriorityHeap, by_attr, init_logger
from priority_heap import heap as heap_module
from priority_heap.config import HeapConfig


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("PRIORITY_HEAP_LOG_LEVEL", "debug")
    monkeypatch.setenv("PRIORITY_HEAP_CHECK_INVARIANTS", "yes")
    config = HeapConfig.from_env()
    assert config.log_level == "DEBUG"
    assert config.check_invariants is True


def test_config_defaults(monkeypatch):
    monkeypatch.delenv("PRIORITY_HEAP_LOG_LEVEL", raising=False)
    monkeypatch.delenv("PRIORITY_HEAP_CHECK_INVARIANTS", raising=False)
    config = HeapConfig.from_env()
    assert config.log_level == "INFO"
    assert config.check_invariants is False


class Box:
    def __init__(self, value):
        self.value = value


def test_invariant_check_catches_external_mutation(monkeypatch):
    monkeypatch.setattr(heap_module, "config", HeapConfig(check_invariants=True))
    boxes = [Box(v) for v in (1, 2, 3)]
    heap = PriorityHeap(by_attr("value"), boxes)
    heap.peek().value = 100
    with pytest.raises(AssertionError):
        heap.insert(Box(50))


def test_init_logger():
    logger = init_logger("priority_heap.heap")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "priority_heap.heap"
    assert logging.getLogger("priority_heap").propagate is False


def test_unknown_log_level_falls_back(monkeypatch):
    monkeypatch.setenv("PRIORITY_HEAP_LOG_LEVEL", "verbose")
    with pytest.warns(UserWarning, match="verbose"):
        config = HeapConfig.from_env()
    assert config.log_level == "INFO"
    logging.getLogger("priority_heap.test").setLevel(config.log_level)
