import logging
import threading

from seleneasy.actions import navigation


class TestNavigation:

    def test_open_url(self, driver, caplog):
        """open_url delegates to driver.get and logs the URL."""
        with caplog.at_level(logging.INFO, logger="seleneasy.actions.navigation"):
            navigation.open_url(driver, "https://example.com")
        driver.get.assert_called_once_with("https://example.com")
        assert "Navigating to [https://example.com]" in caplog.text

    def test_get_page_source_current_page(self, driver):
        assert navigation.get_page_source(driver) == driver.page_source
        driver.get.assert_not_called()

    def test_get_page_source_with_url(self, driver):
        source = navigation.get_page_source(driver, "https://example.com/a")
        driver.get.assert_called_once_with("https://example.com/a")
        assert source == driver.page_source

    def test_refresh_and_url(self, driver):
        navigation.refresh(driver)
        driver.refresh.assert_called_once()
        assert navigation.get_url(driver) == "https://example.com/"


class TestOpenWithTimeout:

    def test_fast_load_returns_true(self, driver):
        assert navigation.open_with_timeout(driver, "https://example.com", 2.0) is True
        driver.get.assert_called_once_with("https://example.com")

    def test_slow_load_returns_false(self, driver, caplog):
        release = threading.Event()
        driver.get.side_effect = lambda url: release.wait(5)

        with caplog.at_level(logging.WARNING, logger="seleneasy.actions.navigation"):
            loaded = navigation.open_with_timeout(driver, "https://slow.example.com", 0.05)
        release.set()

        assert loaded is False
        assert "Timeout on loading page https://slow.example.com" in caplog.text

    def test_errors_in_worker_are_swallowed(self, driver):
        driver.get.side_effect = RuntimeError("connection refused")
        assert navigation.open_with_timeout(driver, "https://down.example.com", 2.0) is True
