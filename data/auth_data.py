"""auth/account 功能测试数据：提示文案、账户页标题
注册新用户
正确账号登录
错误账号登录
修改账户信息、修改密码
"""

DEFAULT_PASSWORD = "Test@123456"

INVALID_LOGIN = {"email": "invalid_email@example.com", "password": "invalid_password"}

ERROR_MESSAGES = {
    "required_field": "This is a required field.",
    "invalid_email": "Please enter a valid email address.",
    "invalid_password": "Minimum length of this field must be equal or greater than 8 symbols.",
    "login_failed": "The account sign-in was incorrect or your account is disabled temporarily. "
                    "Please wait and try again later.",
}

SUCCESS_MESSAGES = {
    "registration": "Thank you for registering with",
    "account_saved": "You saved the account information",
}

ACCOUNT_PAGE_TITLES = {
    "dashboard": "My Account",
    "address_book": "Add New Address",
    "account_info": "Edit Account Information",
    "orders": "My Orders",
}

NEW_PASSWORD_SUFFIX = "New!"
