"""SDK configuration tests."""

import unittest
from unittest.mock import MagicMock, patch

from otel_lambda_layer.sdk import configure_sdk


class TestConfigureSdk(unittest.TestCase):
    """Tests for configuring OpenTelemetry."""

    @patch("otel_lambda_layer.sdk._load_instrumentors")
    @patch("otel_lambda_layer.sdk._load_configurators")
    @patch("otel_lambda_layer.sdk._load_distro")
    def test_loads_everything(self, mock_distro, mock_configurators, mock_instrumentors):
        """Should configure the distro and install all instrumentors."""
        distro = MagicMock()
        mock_distro.return_value = distro
        configure_sdk()
        distro.configure.assert_called_once_with()
        mock_configurators.assert_called_once_with()
        mock_instrumentors.assert_called_once_with(distro)

    @patch("otel_lambda_layer.sdk._load_instrumentors")
    @patch("otel_lambda_layer.sdk._load_configurators")
    @patch("otel_lambda_layer.sdk._load_distro")
    def test_without_instrumentors(self, mock_distro, mock_configurators, mock_instrumentors):
        configure_sdk(use_all=False)
        mock_configurators.assert_called_once_with()
        mock_instrumentors.assert_not_called()

    @patch("otel_lambda_layer.sdk._load_configurators")
    @patch("otel_lambda_layer.sdk._load_distro")
    def test_errors_propagate(self, mock_distro, mock_configurators):
        """Should not swallow configuration errors."""
        mock_configurators.side_effect = RuntimeError("bad exporter")
        with self.assertRaises(RuntimeError):
            configure_sdk()


if __name__ == "__main__":
    unittest.main()
