"""cart/checkout 功能测试数据"""

ADD_PRODUCT_TERMS = {
    "single": "tee",
    "update_remove": "shirt",
    "checkout": "jacket",
    "subtotal_first": "tshirt",
    "subtotal_second": "shorts",
}

UPDATED_QUANTITY = 2

ADDED_TO_CART_MSG = "You added"
ORDER_PLACED_MSG = "Thank you for your purchase!"

MIN_ORDER_NUMBER_LENGTH = 6
