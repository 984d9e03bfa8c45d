class AccountAssert:

    @staticmethod
    def title_contains(actual: str, expect: str):
        assert expect in actual, f"页面文案{actual!r}中不包含：{expect}"

    @staticmethod
    def visible(is_visible: bool, name: str):
        assert is_visible, f"{name} 未显示"

    @staticmethod
    def order_count(actual: int, expect: int):
        assert actual == expect, f"订单数量错误：{actual}!={expect}"
