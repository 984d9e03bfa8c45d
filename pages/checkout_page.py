from playwright.sync_api import Page

from assertions.check_out_assert import CheckOutAssert
from config.locators import CHECKOUT_LOCATORS
from pages.base_page import BasePage
from pages.cart_page import CartPage

PAYMENT_METHODS_TIMEOUT = 10_000
ORDER_CONFIRMATION_TIMEOUT = 30_000


class CheckoutPage(BasePage):
    def __init__(self, page: Page, settings=None):
        super().__init__(page, settings)
        # 收货信息
        self.email_input = self.locate(CHECKOUT_LOCATORS["email_input"])
        self.first_name_input = self.locate(CHECKOUT_LOCATORS["first_name_input"])
        self.last_name_input = self.locate(CHECKOUT_LOCATORS["last_name_input"])
        self.street_input = self.locate(CHECKOUT_LOCATORS["street_input"])
        self.city_input = self.locate(CHECKOUT_LOCATORS["city_input"])
        self.state_select = self.locate(CHECKOUT_LOCATORS["state_select"])
        self.zip_code_input = self.locate(CHECKOUT_LOCATORS["zip_code_input"])
        self.country_select = self.locate(CHECKOUT_LOCATORS["country_select"])
        self.phone_input = self.locate(CHECKOUT_LOCATORS["phone_input"])
        self.shipping_methods = self.locate(CHECKOUT_LOCATORS["shipping_methods"])  # 运费方式
        self.next_button = self.locate(CHECKOUT_LOCATORS["next_button"])

        # 支付
        self.payment_methods = self.locate(CHECKOUT_LOCATORS["payment_methods"])
        self.place_order_button = self.locate(CHECKOUT_LOCATORS["place_order_button"])

        # 下单成功
        self.order_confirmation = self.locate(CHECKOUT_LOCATORS["order_confirmation"])
        self.success_title = self.locate(CHECKOUT_LOCATORS["success_title"])
        self.order_number = self.locate(CHECKOUT_LOCATORS["order_number"])

    # ========== 前提条件准备 ==========
    def prepare(self, search_term: str, cart_url: str) -> dict:
        """
               checkout 模块前置条件：
               - 搜索商品并加购
               - 进入 cart
               - 进入 checkout 收货信息步骤
               """
        cart_page = CartPage(self.page, self.settings)
        added = cart_page.add_product_from_search(search_term)
        cart_page.open_cart(cart_url)
        cart_page.proceed_to_checkout()
        return added

    # ========== 页面行为 ==========
    def fill_shipping_info(self, info: dict):
        """info 字段见 utils.test_data.generate_checkout_info"""
        self.wait_for(self.email_input)
        self.fill(self.email_input, info["email"])
        self.fill(self.first_name_input, info["first_name"])
        self.fill(self.last_name_input, info["last_name"])
        self.fill(self.street_input, info["street"])
        self.fill(self.city_input, info["city"])
        # 先选国家，州下拉框的选项随国家刷新
        self.select_option(self.country_select, info["country_id"])
        self.select_option(self.state_select, info["state_id"])
        self.fill(self.zip_code_input, info["zip_code"])
        self.fill(self.phone_input, info["phone_number"])

    def select_shipping_method(self, index: int = 0):
        self.wait_for(self.shipping_methods.first)
        self.click(self.shipping_methods.nth(index))

    def go_to_payment_method(self):
        self.click(self.next_button)
        self.wait_for_url_matching("#payment")

    def select_payment_method(self, index: int = 0):
        self.wait_for(self.payment_methods.first, timeout=PAYMENT_METHODS_TIMEOUT)
        self.click(self.payment_methods.nth(index))

    def place_order(self):
        self.click(self.place_order_button)
        self.wait_for(self.order_confirmation, timeout=ORDER_CONFIRMATION_TIMEOUT)

    def complete_checkout(self, info: dict, shipping_method_index: int = 0, payment_method_index: int | None = None):
        """填写收货信息 -> 选运费 -> 支付页 ->（可选）选支付方式 -> 下单"""
        self.fill_shipping_info(info)
        self.select_shipping_method(shipping_method_index)
        self.go_to_payment_method()
        if payment_method_index is not None:
            self.select_payment_method(payment_method_index)
        self.place_order()

    # ================= 数据获取 =================
    def get_order_number(self) -> str:
        return self.get_text(self.order_number).strip()

    def get_success_title(self) -> str:
        return self.get_text(self.success_title.first).strip()

    def is_order_confirmed(self) -> bool:
        return self.is_visible(self.order_confirmation)

    # ========== 下单结果校验 ==========
    def verify_order_placed(self, expect_title: str, min_order_number_length: int = 6):
        CheckOutAssert.order_confirmed(self.is_order_confirmed())
        CheckOutAssert.success_title(self.get_success_title(), expect_title)
        CheckOutAssert.order_number(self.get_order_number(), min_order_number_length)
