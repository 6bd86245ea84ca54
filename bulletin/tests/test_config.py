import importlib
import logging
import os
import tempfile
import unittest

from mock import patch

from bulletin import config


class ConfigureLoggingTests(unittest.TestCase):
    def test_defaults(self):
        with patch.object(logging, 'basicConfig') as basic_config:
            config.configure_logging()

        basic_config.assert_called_once_with(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

    def test_explicit_level(self):
        with patch.object(logging, 'basicConfig') as basic_config:
            config.configure_logging(logging.DEBUG)

        basic_config.assert_called_once_with(level=logging.DEBUG, format=config.LOG_FORMAT)


class EnvironmentOverrideTests(unittest.TestCase):
    def tearDown(self):
        importlib.reload(config)

    def test_log_level_from_environment(self):
        with patch.dict(os.environ, {'BULLETIN_LOG_LEVEL': 'DEBUG'}):
            importlib.reload(config)

        self.assertEqual('DEBUG', config.LOG_LEVEL)

    def test_graph_folder_from_environment(self):
        folder = tempfile.mkdtemp()
        with patch.dict(os.environ, {'BULLETIN_GRAPH_FOLDER': folder}):
            importlib.reload(config)

        self.assertEqual(folder, config.GRAPH_FOLDER)

    def test_defaults_without_environment(self):
        with patch.dict(os.environ):
            os.environ.pop('BULLETIN_LOG_LEVEL', None)
            os.environ.pop('BULLETIN_GRAPH_FOLDER', None)
            importlib.reload(config)

        self.assertEqual('WARNING', config.LOG_LEVEL)
        self.assertEqual(tempfile.gettempdir(), config.GRAPH_FOLDER)


if __name__ == '__main__':
    unittest.main()
