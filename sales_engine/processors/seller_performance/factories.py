"""Builders for sales test data."""


def make_item(sku, quantity, sale_price, discount=0):
    return {"sku": sku, "quantity": quantity, "sale_price": sale_price, "discount": discount}
