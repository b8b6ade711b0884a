from __future__ import annotations

import io
import logging

from textbringer_plugin_generator.log import configure_logging


def test_configure_logging_is_idempotent():
    stream = io.StringIO()
    configure_logging(stream=stream)
    logger = configure_logging(stream=stream)

    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING


def test_verbose_logging_shows_debug_trail():
    stream = io.StringIO()
    configure_logging(verbose=True, stream=stream)

    logging.getLogger("textbringer_plugin_generator.plan").debug("planned %d files", 3)

    assert stream.getvalue() == "[textbringer-plugin-generator] DEBUG planned 3 files\n"
