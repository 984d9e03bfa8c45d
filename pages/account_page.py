from playwright.sync_api import Page

from assertions.account_assert import AccountAssert
from config.locators import ACCOUNT_LOCATORS
from pages.base_page import BasePage

ORDER_LOAD_TIMEOUT = 5_000


class AccountPage(BasePage):
    def __init__(self, page: Page, settings=None):
        super().__init__(page, settings)
        # dashboard
        self.page_title = self.locate(ACCOUNT_LOCATORS["page_title"])
        self.welcome_message = self.locate(ACCOUNT_LOCATORS["welcome_message"])  # 联系人信息

        # 左侧导航
        self.my_account_link = self.locate(ACCOUNT_LOCATORS["my_account_link"])
        self.my_orders_link = self.locate(ACCOUNT_LOCATORS["my_orders_link"])
        self.my_wishlist_link = self.locate(ACCOUNT_LOCATORS["my_wishlist_link"])
        self.address_book_link = self.locate(ACCOUNT_LOCATORS["address_book_link"])
        self.account_info_link = self.locate(ACCOUNT_LOCATORS["account_info_link"])
        self.newsletter_link = self.locate(ACCOUNT_LOCATORS["newsletter_link"])

        # 订单
        self.order_rows = self.locate(ACCOUNT_LOCATORS["order_rows"])
        self.no_orders_message = self.locate(ACCOUNT_LOCATORS["no_orders_msg"])

        # 编辑账户信息
        self.first_name_input = self.locate(ACCOUNT_LOCATORS["first_name_input"])
        self.change_password_checkbox = self.locate(ACCOUNT_LOCATORS["change_password_checkbox"])
        self.current_password_input = self.locate(ACCOUNT_LOCATORS["current_password_input"])
        self.new_password_input = self.locate(ACCOUNT_LOCATORS["new_password_input"])
        self.confirm_new_password_input = self.locate(ACCOUNT_LOCATORS["confirm_new_password_input"])
        self.save_button = self.locate(ACCOUNT_LOCATORS["save_button"])
        self.success_message = self.locate(ACCOUNT_LOCATORS["success_msg"])

    # ================= 页面行为 =================
    def open_account_dashboard(self, account_url: str):
        self.open(account_url)
        self.wait_for_navigation_idle()

    def navigate_to_my_orders(self):
        self.click(self.my_orders_link)
        self.wait_for_navigation_idle()

    def navigate_to_account_information(self):
        self.click(self.account_info_link)
        self.wait_for_navigation_idle()

    def navigate_to_address_book(self):
        self.click(self.address_book_link)
        self.wait_for_navigation_idle()

    def navigate_to_my_wishlist(self):
        self.click(self.my_wishlist_link)
        self.wait_for_navigation_idle()

    def navigate_to_newsletter_subscriptions(self):
        self.click(self.newsletter_link)
        self.wait_for_navigation_idle()

    def update_first_name(self, first_name: str):
        """需已在 Account Information 页面"""
        self.fill(self.first_name_input, first_name)
        self.click(self.save_button)
        self.wait_for(self.success_message)

    def change_password(self, current_password: str, new_password: str):
        self.navigate_to_account_information()
        self.click(self.change_password_checkbox)
        self.fill(self.current_password_input, current_password)
        self.fill(self.new_password_input, new_password)
        self.fill(self.confirm_new_password_input, new_password)
        self.click(self.save_button)
        self.wait_for(self.success_message)

    # ================= 数据获取 =================
    def get_page_title(self) -> str:
        return self.get_text(self.page_title).strip()

    def get_welcome_message(self) -> str:
        return self.get_text(self.welcome_message)

    def get_success_message(self) -> str:
        return self.get_text(self.success_message)

    def get_order_count(self) -> int:
        """
        订单数：页面显示"没有订单"提示才返回 0；
        订单行和提示都没出现时抛 WaitTimeout，不把加载失败当成 0 单
        """
        self.wait_for(self.order_rows.first.or_(self.no_orders_message), timeout=ORDER_LOAD_TIMEOUT)
        if self.is_visible(self.no_orders_message):
            return 0
        return self.get_count(self.order_rows)

    # ========== 校验 ==========
    def verify_page_title(self, expect_title: str):
        AccountAssert.title_contains(self.get_page_title(), expect_title)

    def verify_success_message(self, expect_msg: str):
        AccountAssert.title_contains(self.get_success_message(), expect_msg)

    def verify_navigation_links_visible(self):
        for link in (self.my_orders_link, self.address_book_link, self.account_info_link):
            AccountAssert.visible(self.is_visible(link), str(link))
