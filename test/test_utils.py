"""
Tests for miscellaneous utilities.
"""

import logging
import os
import tempfile
import unittest

from tfocs_prox import get_prox
from tfocs_prox.utils import get_logger


class RecordCollector(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


class TestGetLogger(unittest.TestCase):
    """Test configuring the package logger."""

    def setUp(self):
        self.logger = logging.getLogger("tfocs_prox")
        self.collector = RecordCollector()

    def tearDown(self):
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()
        self.logger.setLevel(logging.NOTSET)

    def test_levels(self):
        self.assertEqual(get_logger().level, logging.WARNING)
        self.assertEqual(get_logger(verbose=True).level, logging.INFO)
        self.assertEqual(get_logger(verbose=True, debug=True).level, logging.DEBUG)

    def test_package_logger(self):
        """The default logger is the parent of the operator module loggers."""
        logger = get_logger()

        self.assertIs(logger, self.logger)
        self.assertEqual(
            logging.getLogger("tfocs_prox.prox.proximal_ops").getEffectiveLevel(),
            logging.WARNING,
        )

    def test_single_handler(self):
        get_logger()
        get_logger(debug=True)

        self.assertEqual(len(self.logger.handlers), 1, "Repeated calls added handlers.")

    def test_module_records(self):
        """Records from operator modules are emitted at the configured level only."""
        get_logger()
        self.logger.addHandler(self.collector)

        get_prox({"name": "box", "lower": [1.0], "upper": [0.0]})
        names = [record.name for record in self.collector.records]
        self.assertIn("tfocs_prox.prox.proximal_ops", names)
        self.assertNotIn(
            "tfocs_prox.prox.factory", names, "Debug record emitted at the WARNING level."
        )

        get_logger(debug=True)
        self.collector.records.clear()

        get_prox({"name": "zero"})
        self.assertEqual(
            [(r.name, r.levelno) for r in self.collector.records],
            [("tfocs_prox.prox.factory", logging.DEBUG)],
        )

    def test_log_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "prox.log")
            get_logger(verbose=True, log_file=path)

            get_prox({"name": "box", "lower": [1.0], "upper": [0.0]})

            for handler in self.logger.handlers:
                handler.flush()
            with open(path) as f:
                contents = f.read()

            # close the file handler before the directory is removed.
            self.tearDown()

        self.assertIn("feasible set is empty", contents)


if __name__ == "__main__":
    unittest.main()
