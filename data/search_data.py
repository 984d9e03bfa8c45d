"""search 功能测试数据"""
from decimal import Decimal

SEARCH_TERMS = ["shirt", "jacket", "pants", "shoes", "bag", "watch", "hoodie"]

FILTER_TERM = "shirt"
PRICE_FILTER = {"category": "Price", "value": "$40.00 - $49.99", "low": Decimal("40"), "high": Decimal("49.99")}

SORT_TERM = "jacket"
SORT_OPTIONS = {"price": "price", "name": "name", "relevance": "relevance"}

DETAIL_TERM = "bag"
