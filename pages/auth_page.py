from playwright.sync_api import Page

from assertions.auth_assert import AuthAssert
from config.locators import AUTH_LOCATORS
from pages.base_page import BasePage


class AuthPage(BasePage):
    def __init__(self, page: Page, settings=None):
        super().__init__(page, settings)
        # 登录表单
        self.email_input = self.locate(AUTH_LOCATORS["email_input"])  # 邮箱输入框
        self.password_input = self.locate(AUTH_LOCATORS["password_input"])  # 密码输入框
        self.sign_in_button = self.locate(AUTH_LOCATORS["sign_in_button"])  # 登录按钮
        self.login_error_message = self.locate(AUTH_LOCATORS["login_error_msg"])  # 登录失败提示

        # 注册表单
        self.first_name_input = self.locate(AUTH_LOCATORS["first_name_input"])
        self.last_name_input = self.locate(AUTH_LOCATORS["last_name_input"])
        self.reg_email_input = self.locate(AUTH_LOCATORS["reg_email_input"])
        self.reg_password_input = self.locate(AUTH_LOCATORS["reg_password_input"])
        self.confirm_password_input = self.locate(AUTH_LOCATORS["confirm_password_input"])
        self.create_account_button = self.locate(AUTH_LOCATORS["create_account_button"])
        self.registration_success_message = self.locate(AUTH_LOCATORS["success_msg"])  # 注册成功提示
        self.field_error_messages = self.locate(AUTH_LOCATORS["field_error_msg"])  # 字段校验提示

    # ================= 页面行为 =================
    def open_login(self, login_url: str):
        self.open(login_url)
        self.wait_for(self.email_input)

    def open_register(self, register_url: str):
        self.open(register_url)
        self.wait_for(self.first_name_input)

    def login(self, email: str, password: str):
        self.fill(self.email_input, email)
        self.fill(self.password_input, password)
        self.click(self.sign_in_button)
        self.wait_for_dom_ready()

    def register(self, first_name: str, last_name: str, email: str, password: str):
        self.fill(self.first_name_input, first_name)
        self.fill(self.last_name_input, last_name)
        self.fill(self.reg_email_input, email)
        self.fill(self.reg_password_input, password)
        self.fill(self.confirm_password_input, password)
        self.click(self.create_account_button)
        self.wait_for_navigation_idle()

    def register_customer(self, customer: dict):
        self.register(customer["first_name"], customer["last_name"], customer["email"], customer["password"])

    # ================= 数据获取 =================
    def get_login_error_message(self) -> str:
        self.wait_for(self.login_error_message)
        return self.get_text(self.login_error_message)

    def get_registration_success_message(self) -> str:
        self.wait_for(self.registration_success_message)
        return self.get_text(self.registration_success_message)

    def get_field_error_messages(self) -> list[str]:
        return [t.strip() for t in self.get_texts(self.field_error_messages)]

    # ========== 校验 ==========
    def verify_registration_success(self, expect_msg: str):
        AuthAssert.message_contains(self.get_registration_success_message(), expect_msg)

    def verify_login_fail(self, expect_msg: str):
        AuthAssert.message_contains(self.get_login_error_message(), expect_msg)

    def verify_field_error(self, expect_msg: str):
        AuthAssert.field_error_present(self.get_field_error_messages(), expect_msg)
