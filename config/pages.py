from config.settings import settings

ENV = settings.env

BASE_URLS = {
    "demo": "https://magento.softwaretestingboard.com",
    "local": "http://localhost:8080",
}

if settings.base_url:
    BASE_URLS[ENV] = settings.base_url.rstrip("/")

PATHS = {
    "home": "/",
    "login": "/customer/account/login/",
    "register": "/customer/account/create/",
    "account": "/customer/account/",
    "account_edit": "/customer/account/edit/",
    "orders": "/sales/order/history/",
    "cart": "/checkout/cart/",
    "checkout": "/checkout/",
}

URLS = {env: {name: base + path for name, path in PATHS.items()} for env, base in BASE_URLS.items()}
