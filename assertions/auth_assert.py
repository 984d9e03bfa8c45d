class AuthAssert:

    @staticmethod
    def message_contains(actual_msg: str, expect_msg: str):
        assert expect_msg in actual_msg, f"期望提示信息：{expect_msg}，实际提示信息：{actual_msg}"

    @staticmethod
    def logged_in(is_logged_in: bool, expect: bool = True):
        """登录态：欢迎语是否可见"""
        state = "已登录" if expect else "未登录"
        assert is_logged_in is expect, f"用户登录态不符合预期，期望{state}"

    @staticmethod
    def welcome_contains(welcome: str, *names: str):
        for name in names:
            assert name in welcome, f"欢迎信息{welcome!r}中不包含 {name}"

    @staticmethod
    def field_error_present(errors: list[str], expect_msg: str):
        assert errors, "表单没有出现任何字段校验提示"
        assert expect_msg in errors, f"字段校验提示{errors}中不包含：{expect_msg}"
