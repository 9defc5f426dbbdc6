"""Tests for logging configuration."""

from __future__ import annotations

import logging

import pytest

from mdtree.utils.logging_config import ExtraFieldsFormatter, configure_logging


def _record(**extra: object) -> logging.LogRecord:
    record = logging.LogRecord("mdtree.tree", logging.INFO, __file__, 1, "Built tree", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestExtraFieldsFormatter:
    def test_plain_record(self) -> None:
        assert ExtraFieldsFormatter("%(message)s").format(_record()) == "Built tree"

    def test_extra_fields_are_sorted(self) -> None:
        line = ExtraFieldsFormatter("%(message)s").format(_record(tokens=3, preset="zero"))
        assert line == "Built tree | preset='zero' tokens=3"


class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def _restore_root(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_handler_is_installed_once(self) -> None:
        configure_logging("DEBUG")
        configure_logging("WARNING")

        root = logging.getLogger()
        named = [handler for handler in root.handlers if handler.get_name() == "mdtree"]
        assert len(named) == 1
        assert root.level == logging.WARNING
