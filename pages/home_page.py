from playwright.sync_api import Page

from config.locators import HOME_LOCATORS
from pages.base_page import BasePage


class HomePage(BasePage):
    def __init__(self, page: Page, settings=None):
        super().__init__(page, settings)
        self.sign_in_link = self.locate(HOME_LOCATORS["sign_in_link"])  # 登录入口
        self.create_account_link = self.locate(HOME_LOCATORS["create_account_link"])  # 注册入口
        self.search_input = self.locate(HOME_LOCATORS["search_input"])  # 搜索框
        self.search_button = self.locate(HOME_LOCATORS["search_button"])  # 搜索按钮
        self.cart_icon = self.locate(HOME_LOCATORS["cart_icon"])  # 购物车icon
        self.cart_counter = self.locate(HOME_LOCATORS["cart_counter"])  # 购物车角标
        self.welcome_message = self.locate(HOME_LOCATORS["welcome_message"])  # 登录后欢迎语

    # ================= 页面行为 =================
    def open_home(self, home_url: str):
        self.open(home_url)
        self.wait_for_navigation_idle()

    def click_sign_in(self):
        self.click(self.sign_in_link)
        self.wait_for_navigation_idle()

    def click_create_account(self):
        self.click(self.create_account_link)
        self.wait_for_navigation_idle()

    def search_product(self, search_term: str):
        self.fill(self.search_input, search_term)
        self.click(self.search_button)
        self.wait_for_navigation_idle()

    def open_cart(self):
        self.click(self.cart_icon)

    # ================= 数据获取 =================
    def is_user_logged_in(self) -> bool:
        return self.is_visible(self.welcome_message)

    def get_cart_counter(self) -> int:
        """购物车角标数字；角标不显示时为 0"""
        if not self.is_visible(self.cart_counter):
            return 0
        text = self.get_text(self.cart_counter).strip()
        return int(text) if text else 0
