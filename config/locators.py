"""页面元素定位表
字符串 -> page.locator；{"role", "name"} -> get_by_role；{"text"} -> get_by_text
"""

HOME_LOCATORS = {
    "sign_in_link": ".authorization-link a",  # 顶部 Sign In
    "create_account_link": "a:has-text('Create an Account')",  # 顶部注册入口
    "search_input": "#search",  # 搜索框
    "search_button": "button[title='Search']",  # 搜索按钮
    "cart_icon": ".minicart-wrapper .action.showcart",  # 迷你购物车
    "cart_counter": ".minicart-wrapper .counter-number",  # 购物车角标数字
    "welcome_message": ".greet.welcome .logged-in",  # 登录后欢迎语
}

AUTH_LOCATORS = {
    # 登录
    "email_input": "#email",
    "password_input": "[title='Password']",
    "sign_in_button": {"role": "button", "name": "Sign In"},
    "login_error_msg": {"text": "The account sign-in was"},  # 登录失败提示
    # 注册
    "first_name_input": "#firstname",
    "last_name_input": "#lastname",
    "reg_email_input": "#email_address",
    "reg_password_input": "#password",
    "confirm_password_input": "#password-confirmation",
    "create_account_button": "button[title='Create an Account']",
    "success_msg": ".message-success",  # 注册成功提示
    "field_error_msg": ".mage-error[generated]",  # 表单字段校验提示
}

ACCOUNT_LOCATORS = {
    "page_title": ".page-title",
    "welcome_message": ".box-information .box-content p",  # 联系人信息：姓名 + 邮箱
    # 左侧导航
    "my_account_link": ".nav.item:has-text('My Account')",
    "my_orders_link": ".nav.item:has-text('My Orders')",
    "my_wishlist_link": ".nav.item:has-text('My Wish List')",
    "address_book_link": ".nav.item:has-text('Address Book')",
    "account_info_link": ".nav.item:has-text('Account Information')",
    "newsletter_link": ".nav.item:has-text('Newsletter Subscriptions')",
    # 订单
    "order_rows": ".table-order-items tbody tr",
    "no_orders_msg": ".message.info.empty",  # You have placed no orders.
    # 编辑账户
    "first_name_input": "#firstname",
    "change_password_checkbox": "#change-password",
    "current_password_input": "#current-password",
    "new_password_input": "#password",
    "confirm_new_password_input": "#password-confirmation",
    "save_button": "button.save",
    "success_msg": ".message-success",
}

SEARCH_LOCATORS = {
    "product_items": ".product-item",  # 搜索结果商品卡片
    "product_titles": ".product-item-link",  # 商品名称链接
    "product_prices": ".price-wrapper .price",  # 商品价格
    "sort_by": "#sorter",  # 排序下拉框
    "filter_titles": ".filter-options-item [data-role='title']",  # 左侧筛选分组标题
    "filter_links": ".filter-options-content a",  # 筛选项
    "no_results_msg": ".message.notice",  # 无结果提示
    "page_title": ".page-title",
    "items_count": ".toolbar-number",
}

PRODUCT_LOCATORS = {
    "product_title": ".page-title",
    "product_price": ".product-info-price .price",
    "add_to_cart_button": "#product-addtocart-button",
    "quantity_input": "#qty",
    "option_groups": ".swatch-attribute",  # 可配置商品的属性组
    "size_options": ".swatch-attribute.size .swatch-option",
    "color_options": ".swatch-attribute.color .swatch-option",
    "success_msg": "[data-ui-id='message-success']",  # 加购成功提示
}

CART_LOCATORS = {
    "cart_items": ".cart.item",
    "item_name": ".product-item-name",
    "item_qty": "input.input-text.qty",
    "remove_item_button": ".action-delete",
    "update_cart_button": ".update",
    "empty_cart_button": "#empty_cart_button",
    "cart_subtotal": ".cart-totals .sub .price",
    "proceed_to_checkout": {"role": "button", "name": "Proceed to Checkout"},
    "empty_cart_msg": ".cart-empty",
    "discount_code_input": "#coupon_code",
    "apply_discount_button": ".action.apply.primary",
    "page_message": "[data-ui-id^='message-']",  # 页面顶部操作结果提示
}

CHECKOUT_LOCATORS = {
    # 收货信息
    "email_input": "#customer-email",
    "first_name_input": "input[name='firstname']",
    "last_name_input": "input[name='lastname']",
    "street_input": "input[name='street[0]']",
    "city_input": "input[name='city']",
    "state_select": "select[name='region_id']",
    "zip_code_input": "input[name='postcode']",
    "country_select": "select[name='country_id']",
    "phone_input": "input[name='telephone']",
    "shipping_methods": ".table-checkout-shipping-method input[type='radio']",
    "next_button": ".button.action.continue.primary",
    # 支付
    "payment_methods": ".payment-method-title input[type='radio']",
    "place_order_button": ".payment-method._active .action.primary.checkout",
    # 下单成功
    "order_confirmation": ".checkout-success",
    "success_title": ".page-title",  # Thank you for your purchase!
    "order_number": ".checkout-success .order-number",
}
