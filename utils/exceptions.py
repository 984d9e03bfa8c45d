"""交互层的失败类型

所有页面动作失败都抛出 InteractionFailed 的子类，底层 Playwright 异常保留在 __cause__ 中。
"""


class InteractionFailed(Exception):
    """页面交互失败基类"""

    def __init__(self, target: str, message: str = ""):
        self.target = target
        super().__init__(f"{target}: {message}" if message else target)


class ElementNotFound(InteractionFailed):
    """locator 没有匹配到任何元素"""


class ElementNotVisible(InteractionFailed):
    """匹配到元素但未渲染/不可见"""


class ElementNotInteractable(InteractionFailed):
    """元素可见但不可操作（disabled、非输入框等）"""


class WaitTimeout(InteractionFailed):
    """等待超出时间预算"""

    def __init__(self, target: str, timeout_ms: float, message: str = ""):
        self.timeout_ms = timeout_ms
        super().__init__(target, message or f"等待超时 {timeout_ms}ms")
