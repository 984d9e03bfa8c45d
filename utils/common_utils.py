import random
import re
from decimal import Decimal

from loguru import logger
from playwright.sync_api import Page


def parse_money(text: str) -> Decimal:
    """
        从 '$45.99'、'Subtotal $1,234.50' 提取 Decimal
        """
    match = re.search(r"\$?\s*(\d[\d,]*(?:\.\d+)?)", text)
    assert match, f"无法从文本中解析金额：{text}"
    return Decimal(match.group(1).replace(",", ""))


def random_item(items: list):
    assert items, "候选列表为空"
    return random.choice(items)


def cleanup_test_session(page: Page):
    """清空当前 session 的 cookies、localStorage、sessionStorage"""
    page.context.clear_cookies()
    if page.url.startswith("http"):
        page.evaluate("() => { localStorage.clear(); sessionStorage.clear(); }")
    logger.debug("session 已清理：{}", page.url)
