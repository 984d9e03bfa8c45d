"""
单元测试用的 Locator / Page 替身（不启动浏览器），以及 ui 用例的页面对象 fixture
"""
import time

import pytest
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from config.pages import ENV, URLS
from config.settings import Settings
from pages.account_page import AccountPage
from pages.auth_page import AuthPage
from pages.cart_page import CartPage
from pages.checkout_page import CheckoutPage
from pages.home_page import HomePage
from pages.product_page import ProductPage
from pages.search_results_page import SearchResultsPage
from utils.common_utils import cleanup_test_session


class FakeLocator:
    """
    count/visible 描述当前 DOM 状态；
    click_errors 依次在每次 click 时抛出，用完后 click 成功；
    appear_after_ms 为 None 表示元素永远不出现（count=0 时）
    """

    def __init__(self, name="fake", count=1, visible=True, text="", click_errors=None, fill_error=None,
                 appear_after_ms=0, visible_error=None, sleep=True, value="", select_error=None,
                 wait_error=None, count_error=None):
        self.name = name
        self._count = count
        self._visible = visible
        self._text = text
        self._click_errors = list(click_errors or [])
        self._fill_error = fill_error
        self._appear_after_ms = appear_after_ms
        self._visible_error = visible_error
        self._sleep = sleep  # False 时立即给出结果，不真正等待
        self._value = value
        self._select_error = select_error
        self._wait_error = wait_error
        self._count_error = count_error  # 页面关闭后 count 也会失败
        self.selected = []
        self.filters = []
        self.click_calls = []
        self.filled = []

    def __repr__(self):
        return f"<FakeLocator {self.name}>"

    @property
    def first(self):
        return self

    def nth(self, index):
        return self

    def filter(self, has_text=None):
        self.filters.append(has_text)
        return self

    def count(self):
        if self._count_error:
            raise self._count_error
        return self._count

    def is_visible(self):
        if self._visible_error:
            raise self._visible_error
        return self._count > 0 and self._visible

    def click(self, force=False, timeout=None):
        self.click_calls.append({"force": force, "timeout": timeout})
        if self._click_errors:
            raise self._click_errors.pop(0)

    def fill(self, value, timeout=None):
        if self._fill_error:
            raise self._fill_error
        self.filled.append(value)

    def select_option(self, value, timeout=None):
        if self._select_error:
            raise self._select_error
        if self._count == 0:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded.")
        self.selected.append(value)

    def input_value(self, timeout=None):
        if self._count == 0:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded.")
        return self._value

    def text_content(self, timeout=None):
        if self._count == 0:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded.")
        return self._text

    def wait_for(self, state="visible", timeout=None):
        if self._wait_error:
            raise self._wait_error
        if self._appear_after_ms is not None and self._appear_after_ms <= timeout:
            if self._sleep:
                time.sleep(self._appear_after_ms / 1000)
            return
        if self._sleep:
            time.sleep(timeout / 1000)
        raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded.")

    def or_(self, other):
        either = [loc for loc in (self, other) if loc.is_visible()]
        return FakeLocator(f"{self.name}|{other.name}", count=len(either),
                           appear_after_ms=0 if either else None, sleep=False)


class FakePage:
    """locators: selector -> FakeLocator；未登记的 selector 视为不存在"""

    def __init__(self, url="https://shop.test/", locators=None, load_state_error=None):
        self.url = url
        self._locators = locators or {}
        self._load_state_error = load_state_error
        self.load_states = []
        self.goto_calls = []

    def locator(self, selector):
        return self._locators.get(selector) or FakeLocator(selector, count=0, appear_after_ms=None)

    def get_by_role(self, role, name=None, exact=None):
        return ("role", role, name)

    def get_by_text(self, text, exact=None):
        return ("text", text)

    def goto(self, url, timeout=None):
        self.goto_calls.append((url, timeout))
        self.url = url

    def wait_for_url(self, pattern, timeout=None):
        """轮询 url 直到匹配或超时；url 可被其它线程修改（模拟前端路由跳转）"""
        deadline = time.monotonic() + timeout / 1000
        while not pattern.search(self.url):
            if time.monotonic() >= deadline:
                raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded.")
            time.sleep(0.02)

    def wait_for_load_state(self, state, timeout=None):
        self.load_states.append((state, timeout))
        if self._load_state_error:
            raise self._load_state_error


@pytest.fixture
def fast_settings():
    return Settings(action_timeout_ms=300, navigation_timeout_ms=400)


@pytest.fixture
def make_locator():
    return FakeLocator


@pytest.fixture
def make_page():
    return FakePage


@pytest.fixture
def overlay_error():
    return PlaywrightError(
        "Locator.click: Timeout 300ms exceeded.\n<div class=\"loading-mask\"></div> intercepts pointer events")


@pytest.fixture
def timeout_error():
    return PlaywrightTimeoutError("Locator.click: Timeout 300ms exceeded.")


# ================== 页面对象（ui 用例，依赖根目录的 page fixture） ==================
@pytest.fixture(scope="function")
def home_page(page):
    """每个用例从首页开始，结束后清理 session"""
    home = HomePage(page)
    home.open_home(URLS[ENV]["home"])
    yield home
    cleanup_test_session(page)


@pytest.fixture(scope="function")
def auth_page(page):
    return AuthPage(page)


@pytest.fixture(scope="function")
def account_page(page):
    return AccountPage(page)


@pytest.fixture(scope="function")
def search_results_page(page):
    return SearchResultsPage(page)


@pytest.fixture(scope="function")
def product_page(page):
    return ProductPage(page)


@pytest.fixture(scope="function")
def cart_page(page):
    return CartPage(page)


@pytest.fixture(scope="function")
def checkout_page(page):
    return CheckoutPage(page)
