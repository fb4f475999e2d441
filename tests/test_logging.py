"""Tests for package logging and the records adapters emit."""

import logging
from io import StringIO

import networkx as nx
import pytest

from graphfinder import GraphAdapter, SpatialGraphAdapter, UnknownNode
from graphfinder.logging import (
    ROOT_LOGGER_NAME,
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
)


@pytest.fixture(autouse=True)
def _detach_debug_handlers():
    """Leave no debug handler behind to avoid cross-test bleed."""
    disable_debug_logging()
    yield
    disable_debug_logging()


def test_package_installs_only_a_null_handler():
    handlers = logging.getLogger(ROOT_LOGGER_NAME).handlers
    assert any(isinstance(handler, logging.NullHandler) for handler in handlers)
    assert not any(type(handler) is logging.StreamHandler for handler in handlers)


def test_get_logger_stays_below_package_root():
    assert get_logger("graphfinder.adapters").name == "graphfinder.adapters"
    assert get_logger("graphfinder").name == "graphfinder"
    assert get_logger("tests.helper").name == "graphfinder.tests.helper"


def test_enable_then_disable_debug_logging():
    capture = StringIO()
    handler = enable_debug_logging(
        logging.StreamHandler(capture), "%(levelname)s|%(message)s"
    )
    logger = get_logger("graphfinder.test")

    logger.debug("debug-1")
    assert "DEBUG|debug-1" in capture.getvalue()

    disable_debug_logging()
    logger.debug("debug-2")
    assert "debug-2" not in capture.getvalue()
    assert handler not in logging.getLogger(ROOT_LOGGER_NAME).handlers


def test_enable_debug_logging_defaults_to_stdout(capsys):
    enable_debug_logging()
    get_logger("graphfinder.test").debug("to-stdout")
    assert "to-stdout" in capsys.readouterr().out


def test_adapters_log_construction(caplog):
    g = nx.MultiDiGraph()
    g.add_edge("A", "B", cost=1)
    with caplog.at_level(logging.DEBUG, logger=ROOT_LOGGER_NAME):
        GraphAdapter(g)
        SpatialGraphAdapter.spatial(g).position_of("A")

    messages = [record.getMessage() for record in caplog.records]
    assert (
        "Adapting MultiDiGraph as network: 2 nodes, 1 edges, cost attribute 'cost'"
        in messages
    )
    assert any("3D environment" in message for message in messages)
    assert any("Cached position of 'A'" in message for message in messages)


def test_construction_skips_edge_count_when_debug_is_off(monkeypatch):
    """The edge count is only computed when the record will be emitted."""
    g = nx.MultiDiGraph()
    g.add_edge("A", "B")

    def _fail():
        raise AssertionError("number_of_edges called with DEBUG off")

    logging.getLogger(ROOT_LOGGER_NAME).setLevel(logging.INFO)
    monkeypatch.setattr(g, "number_of_edges", _fail)
    GraphAdapter(g)
    SpatialGraphAdapter.planar(g)


def test_unknown_node_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger=ROOT_LOGGER_NAME):
        with pytest.raises(UnknownNode):
            GraphAdapter(nx.MultiDiGraph()).movement_cost_between("X", "Y")

    assert any("'X' not found" in record.getMessage() for record in caplog.records)
