import re
from pathlib import Path

from loguru import logger
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from config.settings import Settings
from config.settings import settings as default_settings
from utils.exceptions import (ElementNotFound, ElementNotInteractable, ElementNotVisible, InteractionFailed,
                              WaitTimeout)


class BasePage:
    """所有页面对象的基类：定位、带兜底的动作、等待"""
    SCREENSHOT_DIR = Path("screenshots")

    def __init__(self, page: Page, settings: Settings | None = None):
        self.page = page
        self.settings = settings or default_settings
        self.action_timeout = self.settings.action_timeout_ms
        self.navigation_timeout = self.settings.navigation_timeout_ms

    # ========= 定位 =========
    def locate(self, query) -> Locator:
        """
        locator 表里的一项 -> Locator（惰性，每次操作都重新解析）
            "css/xpath/text= 选择器"        -> page.locator
            {"role": ..., "name": ...}     -> page.get_by_role
            {"text": ...}                  -> page.get_by_text
        """
        if isinstance(query, str):
            return self.page.locator(query)
        if "role" in query:
            return self.page.get_by_role(query["role"], name=query.get("name"), exact=query.get("exact"))
        if "text" in query:
            return self.page.get_by_text(query["text"], exact=query.get("exact"))
        raise ValueError(f"无法识别的定位描述：{query}")

    # ========= 基础动作 =========
    def open(self, url: str):
        self.page.goto(url, timeout=self.navigation_timeout)

    def get_title(self) -> str:
        return self.page.title()

    def click(self, locator: Locator, force: bool = False, timeout: float | None = None):
        """
        普通点击失败（遮罩、动画、未稳定）时，只用 force=True 再点一次；
        第二次仍失败则抛出分类后的异常，元素真的不存在时不会被掩盖。
        """
        budget = timeout if timeout is not None else self.action_timeout
        try:
            locator.click(force=force, timeout=budget)
            return
        except PlaywrightError as e:
            logger.warning("点击失败，force 重试一次：{} | {}", locator, _first_line(e))

        try:
            locator.click(force=True, timeout=budget)
        except PlaywrightError as e:
            raise self._classify(locator, e) from e

    def fill(self, locator: Locator, value: str, timeout: float | None = None):
        # fill 会先清空原有内容
        try:
            locator.fill(value, timeout=timeout if timeout is not None else self.action_timeout)
        except PlaywrightError as e:
            raise self._classify(locator, e) from e

    def select_option(self, locator: Locator, value: str, timeout: float | None = None):
        """下拉框按 value/label 选择"""
        try:
            locator.select_option(value, timeout=timeout if timeout is not None else self.action_timeout)
        except PlaywrightError as e:
            raise self._classify(locator, e) from e

    def get_value(self, locator: Locator, timeout: float | None = None) -> str:
        """输入框当前值（input_value）"""
        try:
            return locator.input_value(timeout=timeout if timeout is not None else self.action_timeout)
        except PlaywrightError as e:
            raise self._classify(locator, e) from e

    def get_text(self, locator: Locator, timeout: float | None = None) -> str:
        """文本为空返回 ""；只有元素不存在才失败"""
        try:
            content = locator.text_content(timeout=timeout if timeout is not None else self.action_timeout)
        except PlaywrightError as e:
            raise self._classify(locator, e) from e
        return content or ""

    def get_texts(self, locator: Locator) -> list[str]:
        return [self.get_text(locator.nth(i)) for i in range(locator.count())]

    def get_count(self, locator: Locator) -> int:
        return locator.count()

    def is_visible(self, locator: Locator) -> bool:
        """不抛异常：找不到、多匹配等都按不可见处理"""
        try:
            return locator.is_visible()
        except PlaywrightError as e:
            logger.debug("is_visible 按不可见处理：{} | {}", locator, _first_line(e))
            return False

    # ========= 等待 =========
    def wait_for(self, locator: Locator, state: str = "visible", timeout: float | None = None):
        budget = timeout if timeout is not None else self.action_timeout
        logger.debug("等待 {} -> {} ({}ms)", locator, state, budget)
        try:
            locator.wait_for(state=state, timeout=budget)
        except PlaywrightTimeoutError as e:
            raise WaitTimeout(str(locator), budget, f"{budget}ms 内未达到 {state}") from e
        except PlaywrightError as e:
            # 非超时（如 strict mode 多匹配）同样按 DOM 状态归类
            raise self._classify(locator, e) from e

    def wait_for_navigation_idle(self):
        """整页跳转后使用：等到网络空闲"""
        self._wait_for_load_state("networkidle")

    def wait_for_dom_ready(self):
        """前端轻量切换后使用：DOM 解析完成即可，不等网络"""
        self._wait_for_load_state("domcontentloaded")

    def wait_for_url_matching(self, pattern: str):
        """当前 url 包含匹配 pattern 的片段即可（忽略大小写）"""
        try:
            self.page.wait_for_url(re.compile(pattern, re.IGNORECASE), timeout=self.navigation_timeout)
        except PlaywrightTimeoutError as e:
            raise WaitTimeout(self.page.url, self.navigation_timeout, f"url 未匹配 {pattern!r}") from e

    def _wait_for_load_state(self, state: str):
        try:
            self.page.wait_for_load_state(state, timeout=self.navigation_timeout)
        except PlaywrightTimeoutError as e:
            raise WaitTimeout(self.page.url, self.navigation_timeout, f"页面未达到 {state}") from e

    # ========= 辅助 =========
    def take_screenshot(self, name: str) -> Path:
        path = self.SCREENSHOT_DIR / self.__class__.__name__
        path.mkdir(parents=True, exist_ok=True)
        file = path / f"{name}.png"
        self.page.screenshot(path=file, full_page=True)
        return file

    @staticmethod
    def _classify(locator: Locator, error: PlaywrightError) -> InteractionFailed:
        """最后一次尝试失败后，按当前 DOM 状态归类"""
        target, message = str(locator), _first_line(error)
        try:
            if locator.count() == 0:
                return ElementNotFound(target, message)
            if not locator.first.is_visible():
                return ElementNotVisible(target, message)
        except PlaywrightError as inner:
            # 页面已关闭等情况下无法归类，保留原始失败信息
            logger.debug("无法归类失败原因：{} | {}", target, _first_line(inner))
            return InteractionFailed(target, message)
        return ElementNotInteractable(target, message)


def _first_line(error: PlaywrightError) -> str:
    lines = (error.message or "").strip().splitlines()
    return lines[0] if lines else type(error).__name__
