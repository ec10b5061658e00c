from contextlib import contextmanager
from unittest.mock import Mock

import pytest
from selenium.common.exceptions import TimeoutException


def symbol_elements(texts):
    elements = []
    for text in texts:
        el = Mock()
        el.text = text
        elements.append(el)
    return elements


class FakeBrowser:
    """Stands in for browser_session: a mocked driver and wait, plus a record of teardown."""

    def __init__(self, title="Google Finance - Stock Market Prices", symbols=(), section_visible=True):
        self.driver = Mock(title=title)
        self.driver.find_elements.return_value = symbol_elements(symbols)
        self.wait = Mock()
        if not section_visible:
            self.wait.until.side_effect = TimeoutException("section never rendered")
        self.closed = False

    @contextmanager
    def session(self, **kwargs):
        try:
            yield self.driver, self.wait
        finally:
            self.closed = True


@pytest.fixture
def fake_browser():
    return FakeBrowser
