"""
Unit tests for the FileService facade and the adapter registry.
"""

import os
import unittest
import tempfile
import shutil

from Events import EventDispatcher
from FileSystem import (
    AbstractFileService,
    AdapterConfigurationError,
    AdapterNotFoundError,
    FileService,
    FileServiceNotInitialisedError,
    LocalFileService,
    create_file_service,
    register_file_service,
    resolve_file_service,
)


class RecordingFileService(AbstractFileService):
    """Adapter that records the calls it receives."""

    def __init__(self, prefix: str = "", **extra) -> None:
        self.prefix = prefix
        self.extra = extra
        self.calls = []
        self.initialized_with = None

    def initialize(self) -> None:
        self.initialized_with = (self.prefix, dict(self.extra))

    def _record(self, name, *args):
        self.calls.append((name, args))
        return (name, args)

    def write(self, data, filename='', upload_dir=''):
        return self._record("write", data, filename, upload_dir)

    def exists(self, path):
        return self._record("exists", path)

    def read(self, path):
        return self._record("read", path)

    def delete(self, path):
        return self._record("delete", path)

    def is_dir(self, path):
        return self._record("is_dir", path)

    def mkdir(self, path):
        return self._record("mkdir", path)

    def dir(self, path, restrict=None):
        return self._record("dir", path, restrict)

    def copy_path(self, src, dst):
        return self._record("copy_path", src, dst)


class NotAFileService:
    pass


register_file_service("recording", RecordingFileService)


class TestFileService(unittest.TestCase):
    """Test cases for the FileService facade."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = os.path.realpath(tempfile.mkdtemp())
        self.errors = []
        self.dispatcher = EventDispatcher()
        self.dispatcher.subscribe("error", lambda source, message: self.errors.append((source, message)))

    def tearDown(self):
        """Tear down test fixtures."""
        shutil.rmtree(self.temp_dir)

    def test_init_with_default_adapter(self):
        """Test that the local adapter is used by default."""
        service = FileService(dispatcher=self.dispatcher)

        self.assertTrue(service.init())
        self.assertTrue(service.is_initialized)
        self.assertIsInstance(service.file_service, LocalFileService)
        self.assertEqual(self.errors, [])

    def test_init_with_dotted_class_path(self):
        service = FileService("FileSystem.local.LocalFileService", dispatcher=self.dispatcher)

        self.assertTrue(service.init())
        self.assertIsInstance(service.file_service, LocalFileService)

    def test_init_with_unknown_adapter_fires_error(self):
        """Test that an unknown adapter fires an error event and leaves the facade unusable."""
        service = FileService("FileSystem.test", dispatcher=self.dispatcher)

        self.assertFalse(service.init())
        self.assertEqual(
            self.errors,
            [(service, "Cannot initialize file system adapter[FileSystem.test]")]
        )
        self.assertFalse(service.is_initialized)

        with self.assertRaises(FileServiceNotInitialisedError):
            service.exists(self.temp_dir)

    def test_failed_init_then_normal_init(self):
        """Test that the facade can be initialized again with a valid adapter."""
        service = FileService(dispatcher=self.dispatcher)
        service.file_service_class_name = "FileSystem.test"
        self.assertFalse(service.init())

        service.file_service_class_name = "local"
        self.assertTrue(service.init())
        self.assertTrue(service.exists(self.temp_dir))
        self.assertEqual(len(self.errors), 1)

    def test_malformed_class_path_fires_error(self):
        """Test that a name the import system rejects is reported, not raised."""
        service = FileService("..Adapter", dispatcher=self.dispatcher)

        self.assertFalse(service.init())
        self.assertEqual(self.errors, [(service, "Cannot initialize file system adapter[..Adapter]")])

    def test_class_that_is_not_an_adapter_is_rejected(self):
        service = FileService(f"{__name__}.NotAFileService", dispatcher=self.dispatcher)

        self.assertFalse(service.init())
        self.assertEqual(len(self.errors), 1)

    def test_unknown_option_fires_error(self):
        """Test that options the adapter does not accept fail the setup."""
        service = FileService("local", {"root": "/tmp"}, dispatcher=self.dispatcher)

        self.assertFalse(service.init())
        self.assertEqual(self.errors, [(service, "Cannot initialize file system adapter[local]")])

    def test_invalid_option_value_fires_error(self):
        service = FileService("local", {"dir_mode": "rwx"}, dispatcher=self.dispatcher)

        self.assertFalse(service.init())
        self.assertEqual(len(self.errors), 1)

    def test_configure_selects_adapter_and_options(self):
        """Test that configuration values reach the adapter before initialization."""
        service = FileService(dispatcher=self.dispatcher)
        service.configure({"file_service_class_name": "recording", "prefix": "p", "flag": True})

        self.assertTrue(service.init())
        adapter = service.file_service
        self.assertIsInstance(adapter, RecordingFileService)
        self.assertEqual(adapter.initialized_with, ("p", {"flag": True}))

    def test_configure_without_class_name_keeps_adapter(self):
        service = FileService("recording", dispatcher=self.dispatcher)
        service.configure({"file_service_class_name": "", "prefix": "x"})

        self.assertEqual(service.file_service_class_name, "recording")
        self.assertEqual(service.configuration, {"prefix": "x"})

    def test_local_options_are_applied(self):
        service = FileService(configuration={"dir_mode": 0o700}, dispatcher=self.dispatcher)

        self.assertTrue(service.init())
        self.assertEqual(service.file_service.dir_mode, 0o700)

    def test_calls_are_forwarded_verbatim(self):
        """Test that every operation is passed to the adapter unchanged."""
        service = FileService("recording", dispatcher=self.dispatcher)
        self.assertTrue(service.init())

        self.assertEqual(service.write(b"1", "a.txt", "/d"), ("write", (b"1", "a.txt", "/d")))
        self.assertEqual(service.exists("/p"), ("exists", ("/p",)))
        self.assertEqual(service.read("/p"), ("read", ("/p",)))
        self.assertEqual(service.delete("/p"), ("delete", ("/p",)))
        self.assertEqual(service.is_dir("/p"), ("is_dir", ("/p",)))
        self.assertEqual(service.mkdir("/p"), ("mkdir", ("/p",)))
        self.assertEqual(service.dir("/p", ["/p/x"]), ("dir", ("/p", ["/p/x"])))
        self.assertEqual(service.copy_path("/a", "/b"), ("copy_path", ("/a", "/b")))
        self.assertEqual(service.extension("/a/b/file.php"), "php")
        self.assertEqual(service.relative_path("/tmp/testDir/", "x", "/tmp"), "testDir/")
        self.assertEqual(len(service.file_service.calls), 8)

    def test_local_round_trip_through_facade(self):
        """Test write, read, copy and delete against the local disk."""
        service = FileService(dispatcher=self.dispatcher)
        service.init()

        self.assertEqual(service.write("123", "test.txt", self.temp_dir), self.temp_dir + "/")
        file_path = os.path.join(self.temp_dir, "test.txt")
        self.assertEqual(service.read(file_path), b"123")

        target_dir = os.path.join(self.temp_dir, "testDir")
        self.assertTrue(service.mkdir(target_dir))
        self.assertTrue(service.copy_path(file_path, os.path.join(target_dir, "test.txt")))
        self.assertEqual(service.dir(self.temp_dir), sorted([os.path.join(target_dir, "test.txt"), file_path]))

        self.assertTrue(service.delete(file_path))
        self.assertFalse(service.exists(file_path))


class TestRegistry(unittest.TestCase):
    """Test cases for adapter resolution."""

    def test_resolve_registered_name(self):
        self.assertIs(resolve_file_service("local"), LocalFileService)

    def test_resolve_unknown_names(self):
        for name in ["", "nothing", "..Adapter", "a..b", "FileSystem.local.Missing", "no.such.module.Adapter", "collections.OrderedDict"]:
            with self.assertRaises(AdapterNotFoundError):
                resolve_file_service(name)

    def test_create_rejects_unknown_options(self):
        with self.assertRaises(AdapterConfigurationError) as ctx:
            create_file_service("local", {"root": "/", "bucket": "b"})
        self.assertIn("bucket, root", str(ctx.exception))

    def test_create_accepts_any_option_for_var_keyword_adapter(self):
        service = create_file_service("recording", {"anything": 1})
        self.assertEqual(service.initialized_with, ("", {"anything": 1}))


if __name__ == "__main__":
    unittest.main()
