######################################################################
# Copyright 2016, 2024 John J. Rofrano. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
######################################################################
"""
Products listing, product details and cart pages

The highest priced item is found with a single pass over the listing, no
sorting. Ties keep the item listed first.
"""
from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Iterable, NamedTuple

from selenium.webdriver.common.by import By

from saucedemo.common.errors import PriceFormatError
from saucedemo.pages.base import BasePage

logger = logging.getLogger(__name__)

CURRENCY_SYMBOL = "$"

ITEM_CSS = ".inventory_list > .inventory_item:nth-child({position})"


class ProductInfo(NamedTuple):
    """The catalog item picked on the listing page"""

    position: int
    name: str
    price: Decimal


def parse_price(text) -> Decimal:
    """Converts "$29.99" to Decimal("29.99")"""
    if text is None:
        raise PriceFormatError("Price text was None")
    trimmed = str(text).strip()
    if not trimmed.startswith(CURRENCY_SYMBOL):
        raise PriceFormatError(f"Unexpected price format: {trimmed!r}")
    try:
        price = Decimal(trimmed[len(CURRENCY_SYMBOL):])
    except InvalidOperation as error:
        raise PriceFormatError(f"Unexpected price format: {trimmed!r}") from error
    if not price.is_finite():
        raise PriceFormatError(f"Unexpected price format: {trimmed!r}")
    return price


def select_highest(prices: Iterable[Decimal]) -> tuple[int, Decimal] | None:
    """Returns (1-based position, price) of the maximum, or None when empty"""
    best = None
    for position, price in enumerate(prices, start=1):
        if best is None or price > best[1]:
            best = (position, price)
    return best


def parse_badge_count(text) -> int:
    """An empty badge means an empty cart"""
    text = (text or "").strip()
    if not text:
        return 0
    return int(text)


class ProductsPage(BasePage):
    """Inventory listing, single product details and the cart"""

    # inventory
    PRODUCTS_TITLE = (By.CLASS_NAME, "title")
    INVENTORY_ITEMS = (By.CSS_SELECTOR, ".inventory_list > .inventory_item")

    # product details
    DETAILS_NAME = (By.CSS_SELECTOR, ".inventory_details_name")
    DETAILS_PRICE = (By.CSS_SELECTOR, ".inventory_details_price")
    ADD_TO_CART = (By.CSS_SELECTOR, ".inventory_details_desc_container button#add-to-cart")

    # cart
    CART_LINK = (By.CLASS_NAME, "shopping_cart_link")
    CART_BADGE = (By.CLASS_NAME, "shopping_cart_badge")  # absent when the cart is empty
    CART_TITLE = (By.CLASS_NAME, "title")
    CART_ITEM_NAME = (By.CLASS_NAME, "inventory_item_name")
    CART_ITEM_PRICE = (By.CLASS_NAME, "inventory_item_price")
    REMOVE_BUTTON = (By.XPATH, "//button[contains(text(), 'Remove')]")

    @staticmethod
    def item_price_locator(position: int):
        return (
            By.CSS_SELECTOR,
            ITEM_CSS.format(position=position) + " div.pricebar .inventory_item_price",
        )

    @staticmethod
    def item_name_locator(position: int):
        return (
            By.CSS_SELECTOR,
            ITEM_CSS.format(position=position)
            + " .inventory_item_name[data-test='inventory-item-name']",
        )

    ######################################################################
    # INVENTORY
    ######################################################################
    def is_products_page_displayed(self) -> bool:
        return self.actions.is_displayed(self.PRODUCTS_TITLE)

    def get_products_page_title(self) -> str:
        return self.getters.get_text(self.PRODUCTS_TITLE).strip()

    def count_items(self) -> int:
        return len(self.driver.find_elements(*self.INVENTORY_ITEMS))

    def find_highest_priced_item(self) -> ProductInfo | None:
        """Scans every listed price once and returns the most expensive item"""
        size = self.count_items()
        prices = (
            parse_price(self.getters.get_text(self.item_price_locator(position)))
            for position in range(1, size + 1)
        )
        best = select_highest(prices)
        if best is None:
            logger.warning("No inventory items listed")
            return None

        position, price = best
        name = self.getters.get_text(self.item_name_locator(position)).strip()
        logger.info(
            "Highest priced item found: position=%d, name='%s', price=%s",
            position,
            name,
            price,
        )
        return ProductInfo(position, name, price)

    def open_item_details(self, item: ProductInfo):
        self.actions.click(self.item_name_locator(item.position))

    ######################################################################
    # PRODUCT DETAILS
    ######################################################################
    def get_details_item_name(self) -> str:
        return self.getters.get_text(self.DETAILS_NAME).strip()

    def get_details_item_price(self) -> Decimal:
        return parse_price(self.getters.get_text(self.DETAILS_PRICE))

    def add_to_cart_from_details(self):
        self.actions.click(self.ADD_TO_CART)

    ######################################################################
    # CART
    ######################################################################
    def get_cart_badge_count(self) -> int:
        badges = self.driver.find_elements(*self.CART_BADGE)
        if not badges:
            return 0
        return parse_badge_count(badges[0].text)

    def open_cart(self):
        self.actions.click(self.CART_LINK)

    def get_cart_page_title(self) -> str:
        return self.getters.get_text(self.CART_TITLE).strip()

    def is_remove_button_visible(self) -> bool:
        return self.actions.is_displayed(self.REMOVE_BUTTON)

    def get_cart_item_name(self) -> str:
        return self.getters.get_text(self.CART_ITEM_NAME).strip()

    def get_cart_item_price(self) -> Decimal:
        return parse_price(self.getters.get_text(self.CART_ITEM_PRICE))
