from decimal import Decimal

from playwright.sync_api import Page

from config.locators import PRODUCT_LOCATORS
from pages.base_page import BasePage
from utils.common_utils import parse_money

ADD_TO_CART_TIMEOUT = 10_000


class ProductPage(BasePage):
    def __init__(self, page: Page, settings=None):
        super().__init__(page, settings)
        self.product_title = self.locate(PRODUCT_LOCATORS["product_title"])  # 商品名称
        self.product_price = self.locate(PRODUCT_LOCATORS["product_price"])  # 商品价格
        self.add_to_cart_button = self.locate(PRODUCT_LOCATORS["add_to_cart_button"])
        self.quantity_input = self.locate(PRODUCT_LOCATORS["quantity_input"])
        self.option_groups = self.locate(PRODUCT_LOCATORS["option_groups"])  # 尺码/颜色属性组
        self.size_options = self.locate(PRODUCT_LOCATORS["size_options"])
        self.color_options = self.locate(PRODUCT_LOCATORS["color_options"])
        self.success_message = self.locate(PRODUCT_LOCATORS["success_msg"])  # 加购成功提示

    # ================= 页面行为 =================
    def set_quantity(self, quantity: int):
        self.fill(self.quantity_input, str(quantity))

    def select_size(self, size: str):
        self.click(self.size_options.filter(has_text=size).first)

    def select_color(self, color_index: int = 0):
        self.click(self.color_options.nth(color_index))

    def select_first_available_options(self):
        """可配置商品（衣服等）必须先选尺码和颜色才能加购"""
        if self.get_count(self.option_groups) == 0:
            return
        if self.get_count(self.size_options) > 0:
            self.click(self.size_options.first)
        if self.get_count(self.color_options) > 0:
            self.click(self.color_options.first)

    def add_to_cart(self, quantity: int | None = None, size: str | None = None, color_index: int | None = None):
        if quantity and quantity > 1:
            self.set_quantity(quantity)
        if size and self.get_count(self.size_options) > 0:
            self.select_size(size)
        if color_index is not None and self.get_count(self.color_options) > 0:
            self.select_color(color_index)

        self.click(self.add_to_cart_button)
        self.wait_for(self.success_message, timeout=ADD_TO_CART_TIMEOUT)

    # ================= 数据获取 =================
    def get_product_title(self) -> str:
        return self.get_text(self.product_title).strip()

    def get_product_price(self) -> str:
        return self.get_text(self.product_price.first).strip()

    def get_product_price_as_number(self) -> Decimal:
        return parse_money(self.get_product_price())

    def get_success_message(self) -> str:
        return self.get_text(self.success_message)
