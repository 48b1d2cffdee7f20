"""Unit tests for entry classification, errors and configuration."""

import logging
import os
import stat
import sys
import tempfile
import unittest
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from treewalklib import (
    EntryMetadata,
    EntryType,
    LoggingConfig,
    NavigationError,
    PrintConfig,
    RemovalError,
    StatError,
    WalkConfig,
    WalkError,
    classify_mode,
    configure_logging,
)


class TestClassifyMode(unittest.TestCase):
    """Mode bits map to the expected entry type and label."""

    def test_every_type(self):
        cases = {
            stat.S_IFBLK: (EntryType.BLOCK_DEVICE, "b"),
            stat.S_IFCHR: (EntryType.CHAR_DEVICE, "c"),
            stat.S_IFDIR: (EntryType.DIRECTORY, "d"),
            stat.S_IFIFO: (EntryType.FIFO, "F"),
            stat.S_IFLNK: (EntryType.SYMLINK, "l"),
            stat.S_IFREG: (EntryType.REGULAR_FILE, "f"),
            stat.S_IFSOCK: (EntryType.SOCKET, "s"),
        }
        for mode, (entry_type, label) in cases.items():
            with self.subTest(entry_type=entry_type):
                self.assertIs(classify_mode(mode | 0o644), entry_type)
                self.assertEqual(entry_type.value, label)

    def test_unknown(self):
        self.assertIs(classify_mode(0), EntryType.UNKNOWN)
        self.assertEqual(EntryMetadata.from_mode(0).label, "X")

    def test_metadata_from_stat(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "file.bin"
            path.write_bytes(b"12345")
            os.chmod(path, 0o640)

            metadata = EntryMetadata.from_stat(os.lstat(path))
            dir_metadata = EntryMetadata.from_stat(os.lstat(tmpdir))

        self.assertEqual(metadata.size, 5)
        self.assertEqual(metadata.permissions, 0o640)
        self.assertEqual(metadata.label, "f")
        self.assertFalse(metadata.is_dir)
        self.assertTrue(dir_metadata.is_dir)

    def test_permissions_mask(self):
        metadata = EntryMetadata.from_mode(stat.S_IFREG | stat.S_ISUID | 0o755)
        self.assertEqual(metadata.permissions, 0o755)


class TestErrors(unittest.TestCase):
    """The error taxonomy keeps the failing name and the OS cause."""

    def test_hierarchy(self):
        for cls in (NavigationError, StatError, RemovalError):
            self.assertTrue(issubclass(cls, WalkError))

    def test_message_and_cause(self):
        cause = FileNotFoundError(2, "No such file or directory")
        error = NavigationError("x", cause)

        self.assertEqual(str(error), "chdir failed for 'x': No such file or directory")
        self.assertIs(error.cause, cause)
        self.assertEqual(error.path, "x")

    def test_message_without_cause(self):
        self.assertEqual(str(RemovalError("gone")), "remove failed for 'gone'")


class TestConfig(unittest.TestCase):
    """Configuration validation and logging setup."""

    def test_default_configs_valid(self):
        self.assertEqual(WalkConfig().validate(), [])
        self.assertEqual(PrintConfig().validate(), [])

    def test_walk_config_errors(self):
        errors = WalkConfig(follow_symlinks=1, restore_cwd=None).validate()
        self.assertEqual(len(errors), 2)

    def test_print_config_errors(self):
        errors = PrintConfig(separator="", escape="ab").validate()
        self.assertIn("separator must be a single character", errors)
        self.assertIn("escape must be a single character", errors)

    def test_configure_logging_replaces_handler(self):
        logger = configure_logging(LoggingConfig(level="debug"))
        configure_logging(LoggingConfig(level="INFO"))
        try:
            self.assertEqual(len(logger.handlers), 1)
            self.assertEqual(logger.level, logging.INFO)
        finally:
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
            logger.setLevel(logging.NOTSET)


if __name__ == '__main__':
    unittest.main()
