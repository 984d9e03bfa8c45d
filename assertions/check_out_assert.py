class CheckOutAssert:

    @staticmethod
    def order_confirmed(is_confirmed: bool):
        assert is_confirmed, "未进入下单成功页面"

    @staticmethod
    def order_number(order_number: str, min_length: int):
        """订单号非空且有一定长度"""
        assert order_number.strip() != "", "订单号为空！"
        assert len(order_number) >= min_length, f"订单号{order_number}长度不足{min_length}"

    @staticmethod
    def success_title(actual: str, expect: str):
        assert actual == expect, f"下单成功页标题错误：{actual!r}!={expect!r}"
