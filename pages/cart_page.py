from decimal import Decimal

from playwright.sync_api import Page

from assertions.cart_assert import CartAssert
from config.locators import CART_LOCATORS
from pages.base_page import BasePage
from pages.home_page import HomePage
from pages.product_page import ProductPage
from pages.search_results_page import SearchResultsPage
from utils.common_utils import parse_money

CART_LOAD_TIMEOUT = 10_000
CONFIRM_DIALOG_TIMEOUT = 5_000


class CartPage(BasePage):
    def __init__(self, page: Page, settings=None):
        super().__init__(page, settings)
        # 商品行
        self.cart_items = self.locate(CART_LOCATORS["cart_items"])
        self.cart_item_names = self.locate(CART_LOCATORS["item_name"])
        self.cart_item_qty = self.locate(CART_LOCATORS["item_qty"])
        self.remove_item_button = self.locate(CART_LOCATORS["remove_item_button"])
        self.update_cart_button = self.locate(CART_LOCATORS["update_cart_button"])
        self.empty_cart_button = self.locate(CART_LOCATORS["empty_cart_button"])

        # 汇总
        self.cart_subtotal = self.locate(CART_LOCATORS["cart_subtotal"])
        self.proceed_to_checkout_button = self.locate(CART_LOCATORS["proceed_to_checkout"])
        self.empty_cart_message = self.locate(CART_LOCATORS["empty_cart_msg"])  # 空购物车提示

        # 折扣码
        self.discount_code_input = self.locate(CART_LOCATORS["discount_code_input"])
        self.apply_discount_button = self.locate(CART_LOCATORS["apply_discount_button"])
        self.page_message = self.locate(CART_LOCATORS["page_message"])

    # ========== 前提条件准备 ==========
    def add_product_from_search(self, search_term: str, result_index: int = 0) -> dict:
        """
        搜索 -> 打开商品详情 -> 选默认尺码/颜色 -> 加购
        返回加购商品的名称、价格和加购提示
        """
        HomePage(self.page, self.settings).search_product(search_term)
        SearchResultsPage(self.page, self.settings).click_product(result_index)
        product_page = ProductPage(self.page, self.settings)
        product_page.select_first_available_options()
        added = {"product_name": product_page.get_product_title(),
                 "product_price": product_page.get_product_price_as_number()}
        product_page.add_to_cart()
        added["message"] = product_page.get_success_message()
        return added

    # ================= 页面行为 =================
    def open_cart(self, cart_url: str):
        self.open(cart_url)
        self.wait_for_navigation_idle()

    def update_item_quantity(self, index: int, quantity: int) -> str:
        self.fill(self.cart_item_qty.nth(index), str(quantity))
        self.click(self.update_cart_button.first)
        self.wait_for_navigation_idle()
        return self.get_item_quantity(index)

    def remove_item(self, index: int = 0):
        self.click(self.remove_item_button.nth(index))
        self.wait_for_navigation_idle()

    def empty_cart(self):
        """清空购物车需要确认弹窗；按钮不存在说明已经是空的"""
        if not self.is_visible(self.empty_cart_button):
            return
        with self.page.expect_event("dialog", timeout=CONFIRM_DIALOG_TIMEOUT) as dialog_info:
            self.click(self.empty_cart_button)
        dialog_info.value.accept()
        self.wait_for_navigation_idle()

    def proceed_to_checkout(self):
        self.click(self.proceed_to_checkout_button)
        self.wait_for_url_matching("checkout")
        self.wait_for_navigation_idle()

    def apply_discount_code(self, code: str):
        self.fill(self.discount_code_input, code)
        self.click(self.apply_discount_button)
        self.wait_for_navigation_idle()

    # ================= 数据获取 =================
    def get_cart_items_count(self) -> int:
        """
        购物车商品行数：页面显示空购物车提示才返回 0；
        两者都未出现时抛 WaitTimeout
        """
        self.wait_for(self.cart_items.first.or_(self.empty_cart_message), timeout=CART_LOAD_TIMEOUT)
        if self.is_visible(self.empty_cart_message):
            return 0
        return self.get_count(self.cart_items)

    def get_item_quantity(self, index: int = 0) -> str:
        return self.get_value(self.cart_item_qty.nth(index)).strip()

    def get_cart_item_names(self) -> list[str]:
        return [n.strip() for n in self.get_texts(self.cart_item_names)]

    def get_cart_subtotal(self) -> str:
        return self.get_text(self.cart_subtotal.first).strip()

    def get_cart_subtotal_as_number(self) -> Decimal:
        return parse_money(self.get_cart_subtotal())

    def get_page_message(self) -> str:
        self.wait_for(self.page_message.first)
        return self.get_text(self.page_message.first).strip()

    def is_cart_empty(self) -> bool:
        return self.is_visible(self.empty_cart_message)

    # ================= 基础验证 =================
    def verify_items_count(self, expect_count: int):
        CartAssert.items_count(self.get_cart_items_count(), expect_count)

    def verify_item_quantity(self, index: int, expect_qty: int):
        CartAssert.item_quantity(self.get_item_quantity(index), expect_qty)

    def verify_cart_empty(self):
        CartAssert.cart_empty(self.is_cart_empty())

    def verify_subtotal_equals(self, prices: list[Decimal]):
        CartAssert.subtotal(self.get_cart_subtotal_as_number(), prices)

    def verify_added_message(self, added: dict, expect_msg: str):
        CartAssert.added_message(added["message"], expect_msg, added["product_name"])
