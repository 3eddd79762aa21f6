# ==============================================================================
# File: tests/test_setup_logging.py
# Purpose: Logging configuration helper.
# ==============================================================================
import logging
import tempfile
import unittest

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from palette_kit.setup_logging import setup_logging


class TestSetupLogging(unittest.TestCase):
    """Handlers, format and quieted third-party loggers."""

    def tearDown(self):
        root = logging.getLogger()
        for h in list(root.handlers):
            h.close()
            root.removeHandler(h)

    def test_file_and_console(self):
        print("\n[TEST] Running test_file_and_console...")
        with tempfile.TemporaryDirectory() as tmp:
            log_file = Path(tmp) / "logs" / "palette_kit.log"
            setup_logging(logging.DEBUG, log_file=log_file)
            logging.getLogger("palette_kit.test").info("hello from the test")
            for h in logging.getLogger().handlers:
                h.flush()
            text = log_file.read_text(encoding="utf-8")
            self.tearDown()
        self.assertIn("[INFO] palette_kit.test:", text)
        self.assertIn("| hello from the test", text)
        self.assertEqual(logging.getLogger("numba").level, logging.WARNING)
        print("[TEST] test_file_and_console: OK")

    def test_console_only(self):
        setup_logging()
        handlers = logging.getLogger().handlers
        self.assertEqual(len(handlers), 1)
        self.assertIsInstance(handlers[0], logging.StreamHandler)
        self.assertEqual(logging.getLogger("palette_kit").level, logging.INFO)


if __name__ == "__main__":
    unittest.main()
