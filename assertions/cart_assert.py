from decimal import Decimal


class CartAssert:

    @staticmethod
    def items_count(actual: int, expect: int):
        """购物车商品行数"""
        assert actual == expect, f"购物车商品数量错误：{actual}!={expect}"

    @staticmethod
    def item_quantity(actual: str, expect: int):
        assert actual == str(expect), f"商品数量未更新：{actual}!={expect}"

    @staticmethod
    def cart_counter(actual: int):
        """购物车图标显示数字"""
        assert actual > 0, f"购物车角标数字应大于 0，实际：{actual}"

    @staticmethod
    def cart_empty(is_empty: bool):
        assert is_empty, "购物车未显示空购物车提示"

    @staticmethod
    def added_message(message: str, expect_msg: str, product_name: str):
        """加购成功提示包含商品名称"""
        assert expect_msg in message, f"加购提示{message!r}中不包含：{expect_msg}"
        assert product_name in message, f"加购提示{message!r}中不包含商品名称：{product_name}"

    @staticmethod
    def subtotal(actual: Decimal, prices: list[Decimal]):
        # 显式指定 sum 初始值="0"
        expect = sum(prices, Decimal("0"))
        assert actual == expect, f"购物车小计{actual}!=商品单价之和{expect}"
