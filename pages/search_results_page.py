import re
from decimal import Decimal

from playwright.sync_api import Page

from assertions.search_assert import SearchAssert
from config.locators import SEARCH_LOCATORS
from pages.base_page import BasePage
from utils.common_utils import parse_money


class SearchResultsPage(BasePage):
    def __init__(self, page: Page, settings=None):
        super().__init__(page, settings)
        # 商品列表
        self.product_items = self.locate(SEARCH_LOCATORS["product_items"])
        self.product_titles = self.locate(SEARCH_LOCATORS["product_titles"])
        self.product_prices = self.locate(SEARCH_LOCATORS["product_prices"])

        # 排序、筛选
        self.sort_by_dropdown = self.locate(SEARCH_LOCATORS["sort_by"])
        self.filter_titles = self.locate(SEARCH_LOCATORS["filter_titles"])  # 筛选分组标题
        self.filter_links = self.locate(SEARCH_LOCATORS["filter_links"])  # 筛选项链接

        self.no_results_message = self.locate(SEARCH_LOCATORS["no_results_msg"])
        self.page_title = self.locate(SEARCH_LOCATORS["page_title"])
        self.items_count = self.locate(SEARCH_LOCATORS["items_count"])

    # ================= 页面行为 =================
    def sort_products_by(self, option: str):
        """option 为下拉框的 value，例如 price / name"""
        self.select_option(self.sort_by_dropdown.first, option)
        self.wait_for_url_matching(f"product_list_order={re.escape(option)}")

    def apply_filter(self, category: str, value: str):
        filter_category = self.filter_titles.filter(has_text=category)
        if self.is_visible(filter_category):
            self.click(filter_category)

        self.click(self.filter_links.filter(has_text=value).first)
        self.wait_for_navigation_idle()

    def click_product(self, index: int = 0):
        self.click(self.product_titles.nth(index))
        self.wait_for_navigation_idle()

    # ================= 数据获取 =================
    def get_results_count(self) -> int:
        self.wait_for(self.product_items.first)
        return self.get_count(self.product_items)

    def get_search_results_title(self) -> str:
        return self.get_text(self.page_title).strip()

    def has_no_results(self) -> bool:
        return self.is_visible(self.no_results_message)

    def get_total_items_count(self) -> str:
        return self.get_text(self.items_count.first).strip()

    def get_product_titles(self) -> list[str]:
        return [t.strip() for t in self.get_texts(self.product_titles)]

    def get_product_prices(self) -> list[Decimal]:
        return [parse_money(p) for p in self.get_texts(self.product_prices)]

    # ========== 校验 ==========
    def verify_results_relevant(self, search_term: str):
        SearchAssert.has_results(self.get_results_count())
        SearchAssert.title_mentions_term(self.get_search_results_title(), search_term)
        SearchAssert.any_title_contains(self.get_product_titles(), search_term)

    def verify_price_asc(self):
        SearchAssert.sort_asc(self.get_product_prices())

    def verify_prices_in_range(self, low: Decimal, high: Decimal):
        SearchAssert.prices_in_range(self.get_product_prices(), low, high)
