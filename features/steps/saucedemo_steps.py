"""Step definitions for the Sauce Demo highest-priced item scenarios."""

# pylint: disable=no-member,not-callable
# The behave decorators (@given, @when, @then) are not recognized by pylint
# but they work correctly at runtime

from __future__ import annotations

from behave import given, when, then

from saucedemo.pages import LoginPage

PRODUCTS_PAGE_TITLE = "Products"
CART_PAGE_TITLE = "Your Cart"


@given("I navigate to the login page")
def step_impl_navigate_to_login(context):
    login_page = context.login_page
    login_page.navigate_to_base_url()

    assert login_page.is_login_logo_displayed(), \
        "Login logo is not visible - login page may not be loaded."
    logo_text = login_page.get_login_logo_text()
    assert logo_text == LoginPage.EXPECTED_LOGIN_LOGO_TEXT, \
        f"Unexpected login logo text {logo_text!r} - user may not be on the login page."


@when('I login with username "{username}" and password "{password}"')
def step_impl_login(context, username, password):
    context.login_page.login(username, password)

    products_page = context.products_page
    assert products_page.is_products_page_displayed(), \
        "Products page was not displayed after login."
    title = products_page.get_products_page_title()
    assert title == PRODUCTS_PAGE_TITLE, f"Unexpected Products page title: {title!r}"


@when("I select the highest priced item without using sort")
def step_impl_select_highest_priced(context):
    products_page = context.products_page
    item = products_page.find_highest_priced_item()

    assert item is not None, "Highest item was null."
    assert item.position > 0, "Highest item index was invalid."
    assert item.name, "Highest item name was empty."
    context.selected_item = item

    products_page.open_item_details(item)

    details_name = products_page.get_details_item_name()
    assert details_name == item.name, \
        f"Details page item name {details_name!r} does not match selected item {item.name!r}."
    details_price = products_page.get_details_item_price()
    assert details_price == item.price, \
        f"Details page item price {details_price} does not match selected item {item.price}."


@when("I add the selected item to the cart")
def step_impl_add_to_cart(context):
    products_page = context.products_page
    products_page.add_to_cart_from_details()

    count = products_page.get_cart_badge_count()
    assert count == 1, f"Cart badge count is {count}, expected 1 after adding item."


@then("the cart should contain the selected highest priced item")
def step_impl_cart_contains_item(context):
    item = context.selected_item
    assert item is not None, "No item was selected before checking the cart."
    products_page = context.products_page
    products_page.open_cart()

    title = products_page.get_cart_page_title()
    assert title == CART_PAGE_TITLE, f"Cart page title mismatch: {title!r}"
    assert products_page.is_remove_button_visible(), \
        "Remove button not visible (cart may be empty)."

    cart_name = products_page.get_cart_item_name()
    assert cart_name == item.name, \
        f"Cart item name {cart_name!r} does not match selected item {item.name!r}."
    cart_price = products_page.get_cart_item_price()
    assert cart_price == item.price, \
        f"Cart item price {cart_price} does not match selected item {item.price}."
