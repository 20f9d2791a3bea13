import logging

import structlog

from app.infrastructure.observability import configure_structlog


def test_configure_structlog_installs_json_formatter():
    root = logging.getLogger()
    previous_handlers = root.handlers[:]
    previous_level = root.level
    try:
        configure_structlog("DEBUG")
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)
        assert root.level == logging.DEBUG
    finally:
        root.handlers = previous_handlers
        root.setLevel(previous_level)
        structlog.reset_defaults()
