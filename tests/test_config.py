"""Layer configuration tests."""

import os
import unittest

from otel_lambda_layer.config import DEFAULT_TASK_ROOT, LayerConfig


class TestLayerConfig(unittest.TestCase):
    """Tests for reading configuration from the environment."""

    def test_defaults(self):
        config = LayerConfig.from_env({})
        self.assertEqual(config.package_roots, ())
        self.assertIsNone(config.handler_identifier)
        self.assertEqual(config.task_root, DEFAULT_TASK_ROOT)
        self.assertEqual(config.log_level, "info")

    def test_orig_handler_wins(self):
        config = LayerConfig.from_env({"ORIG_HANDLER": "app.handler", "_HANDLER": "otel_wrapper.lambda_handler"})
        self.assertEqual(config.handler_identifier, "app.handler")

    def test_empty_orig_handler_falls_back(self):
        """Should use the first non-empty handler variable."""
        config = LayerConfig.from_env({"ORIG_HANDLER": "", "_HANDLER": "app.handler"})
        self.assertEqual(config.handler_identifier, "app.handler")

    def test_package_path_list(self):
        """Should split the package path and drop duplicates."""
        value = os.pathsep.join(["/opt/python", "/opt/extra", "/opt/python", ""])
        config = LayerConfig.from_env({"LAYER_PACKAGE_PATH": value, "LAYER_PACKAGE_HOME": "/opt/home"})
        self.assertEqual(config.package_roots, ("/opt/python", "/opt/extra"))

    def test_package_home_fallback(self):
        config = LayerConfig.from_env({"LAYER_PACKAGE_HOME": "/opt/home"})
        self.assertEqual(config.package_roots, ("/opt/home",))

    def test_task_root_and_log_level(self):
        config = LayerConfig.from_env({"LAMBDA_TASK_ROOT": "/tmp/task", "OTEL_LOG_LEVEL": "debug"})
        self.assertEqual(config.task_root, "/tmp/task")
        self.assertEqual(config.log_level, "debug")


if __name__ == "__main__":
    unittest.main()
