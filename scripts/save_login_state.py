import json
from pathlib import Path

from loguru import logger
from playwright.sync_api import sync_playwright

from config.pages import ENV, URLS
from config.settings import settings
from data.auth_data import SUCCESS_MESSAGES
from pages.auth_page import AuthPage
from utils.test_data import generate_customer


def customer_file(state_path: str = settings.storage_state_path) -> Path:
    """与登录态文件同目录，记录这次注册的顾客信息"""
    return Path(state_path).with_name("customer.json")


def save_login_state(state_path: str = settings.storage_state_path) -> dict:
    """生成登录态：注册一个新顾客，注册成功即为登录状态
        单独执行该脚本命令：python -m scripts.save_login_state
    """
    customer = generate_customer()
    with sync_playwright() as p:
        browser = getattr(p, settings.browser).launch(headless=settings.headless)
        context = browser.new_context()
        context.set_default_timeout(settings.action_timeout_ms)
        context.set_default_navigation_timeout(settings.navigation_timeout_ms)
        page = context.new_page()

        # 使用 Page Object 注册
        auth_page = AuthPage(page)
        auth_page.open_register(URLS[ENV]["register"])
        auth_page.register_customer(customer)
        auth_page.verify_registration_success(SUCCESS_MESSAGES["registration"])

        login_path = Path(state_path)
        login_path.parent.mkdir(parents=True, exist_ok=True)  # 确保storage目录一直存在
        context.storage_state(path=login_path)  # 保存登录态

        context.close()
        browser.close()

    # 再次校验文件
    if not login_path.exists() or login_path.stat().st_size == 0:
        raise RuntimeError(f"‼️ 登录态生成失败：{login_path}，请检查浏览器或站点")
    customer_file(state_path).write_text(json.dumps(customer, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info("✅ 登录态已生成 -> {} ({})", login_path, customer["email"])
    return customer


if __name__ == "__main__":
    save_login_state()
