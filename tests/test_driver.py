import logging
from unittest.mock import Mock, patch

import pytest

from seleneasy.browser import driver as driver_module
from seleneasy.browser.driver import create_webdriver, quit_driver, register_shutdown_hook


class TestCreateWebdriver:

    @patch('seleneasy.browser.driver.webdriver.Firefox')
    def test_firefox_is_default(self, mock_firefox):
        result = create_webdriver({})

        mock_firefox.assert_called_once()
        assert result is mock_firefox.return_value

    @patch('seleneasy.browser.driver.webdriver.Firefox')
    def test_firefox_headless_and_binary(self, mock_firefox):
        create_webdriver({"browser": "firefox", "headless": True, "binary_path": "/opt/firefox/firefox"})

        options = mock_firefox.call_args[1]['options']
        assert "-headless" in options.arguments
        assert options.binary_location == "/opt/firefox/firefox"

    @patch('seleneasy.browser.driver.webdriver.Chrome')
    def test_chrome_headless(self, mock_chrome):
        create_webdriver({"browser": "chrome", "headless": True})

        mock_chrome.assert_called_once()
        options = mock_chrome.call_args[1]['options']
        assert "--headless=new" in options.arguments

    @patch('seleneasy.browser.driver.webdriver.Firefox')
    def test_capabilities_applied_to_options(self, mock_firefox):
        create_webdriver({}, {"acceptInsecureCerts": True})

        options = mock_firefox.call_args[1]['options']
        assert options.capabilities["acceptInsecureCerts"] is True

    @patch('selenium.webdriver.firefox.service.Service')
    @patch('seleneasy.browser.driver.webdriver.Firefox')
    def test_driver_log_path(self, mock_firefox, mock_service, tmp_path):
        log_file = str(tmp_path / "geckodriver.log")
        create_webdriver({"driver_log_path": log_file})

        mock_service.assert_called_once_with(log_output=log_file)
        assert mock_firefox.call_args[1]['service'] is mock_service.return_value

    @patch('selenium.webdriver.firefox.service.Service')
    @patch('seleneasy.browser.driver.webdriver.Firefox')
    def test_no_driver_log_by_default(self, mock_firefox, mock_service):
        create_webdriver({})
        mock_service.assert_called_once_with()

    @patch('seleneasy.browser.driver.webdriver.Firefox')
    def test_unsupported_browser_raises(self, mock_firefox):
        with pytest.raises(EnvironmentError):
            create_webdriver({"browser": "safari"})
        mock_firefox.assert_not_called()


class TestShutdownHelpers:

    def test_quit_driver(self):
        d = Mock()
        assert quit_driver(d) is True
        d.quit.assert_called_once()

    def test_quit_driver_logs_failure(self, caplog):
        d = Mock()
        d.quit.side_effect = Exception("gone")

        with caplog.at_level(logging.WARNING, logger="seleneasy.browser.driver"):
            assert quit_driver(d) is False
        assert "Error shutting down the driver" in caplog.text

    @patch('seleneasy.browser.driver.atexit.register')
    def test_register_shutdown_hook(self, mock_register):
        d = Mock()
        register_shutdown_hook(d)
        mock_register.assert_called_once_with(driver_module._quit_on_exit, d)

    def test_exit_hook_swallows_errors(self):
        d = Mock()
        d.quit.side_effect = Exception("already closed")
        driver_module._quit_on_exit(d)
        d.quit.assert_called_once()
