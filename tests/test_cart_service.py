from dataclasses import replace

import pytest


def _by_code(pos, cod):
    return pos.catalog.find_product_by_code(cod)


def test_add_new_line_copies_product(logged_in_pos):
    pos = logged_in_pos
    cafe = _by_code(pos, "PROD-0001")

    assert pos.cart.add_to_cart(cafe, 2)

    item = pos.cart.find_item(cafe.id)
    assert item.quantity == 2
    assert item.product == cafe
    assert item.product is not cafe


def test_adding_same_product_merges_lines(logged_in_pos):
    pos = logged_in_pos
    cafe = _by_code(pos, "PROD-0001")

    pos.cart.add_to_cart(cafe, 2)
    pos.cart.add_to_cart(cafe, 3)

    assert len(pos.cart.items) == 1
    assert pos.cart.find_item(cafe.id).quantity == 5


def test_discrete_quantity_is_floored(logged_in_pos):
    pos = logged_in_pos
    pao = _by_code(pos, "PROD-0002")

    assert pos.cart.add_to_cart(pao, 2.9)
    assert pos.cart.find_item(pao.id).quantity == 2


def test_discrete_quantity_below_one_is_rejected(logged_in_pos):
    pos = logged_in_pos
    pao = _by_code(pos, "PROD-0002")

    assert not pos.cart.add_to_cart(pao, 0.5)
    assert pos.cart.is_empty()


def test_weighed_quantity_keeps_three_decimals(logged_in_pos):
    pos = logged_in_pos
    maca = _by_code(pos, "PROD-0004")

    assert pos.cart.add_to_cart(maca, 0.3333)
    assert pos.cart.add_to_cart(maca, 0.25)

    assert pos.cart.find_item(maca.id).quantity == pytest.approx(0.583)


def test_out_of_stock_product_is_rejected(logged_in_pos):
    pos = logged_in_pos
    cafe = _by_code(pos, "PROD-0001")
    pos.catalog.update_product(replace(cafe, stock=0))

    assert not pos.cart.add_to_cart(cafe)
    assert pos.cart.is_empty()


def test_total_in_cart_cannot_exceed_stock(logged_in_pos):
    pos = logged_in_pos
    queijo = _by_code(pos, "PROD-0005")  # 8.25 KG

    assert pos.cart.add_to_cart(queijo, 8)
    assert not pos.cart.add_to_cart(queijo, 0.5)
    assert pos.cart.add_to_cart(queijo, 0.25)
    assert pos.cart.find_item(queijo.id).quantity == pytest.approx(8.25)


def test_new_line_above_stock_is_rejected(logged_in_pos):
    pos = logged_in_pos
    leite = _by_code(pos, "PROD-0006")  # 10 CX

    assert not pos.cart.add_to_cart(leite, 11)
    assert pos.cart.is_empty()


def test_stock_check_uses_current_catalog_product(logged_in_pos):
    pos = logged_in_pos
    bolo = _by_code(pos, "PROD-0003")
    pos.catalog.update_product(replace(bolo, stock=2))

    # Cópia antiga do produto ainda diz 30 em estoque
    assert not pos.cart.add_to_cart(bolo, 3)
    assert pos.cart.add_to_cart(bolo, 2)


def test_adding_to_cart_does_not_touch_stock(logged_in_pos):
    pos = logged_in_pos
    cafe = _by_code(pos, "PROD-0001")

    pos.cart.add_to_cart(cafe, 10)

    assert pos.catalog.find_product(cafe.id).stock == 100


def test_update_quantity(logged_in_pos):
    pos = logged_in_pos
    cafe = _by_code(pos, "PROD-0001")
    pos.cart.add_to_cart(cafe, 1)

    assert pos.cart.update_cart_item_quantity(cafe.id, 4)
    assert pos.cart.find_item(cafe.id).quantity == 4


def test_update_quantity_above_stock_keeps_previous(logged_in_pos):
    pos = logged_in_pos
    leite = _by_code(pos, "PROD-0006")
    pos.cart.add_to_cart(leite, 3)

    assert not pos.cart.update_cart_item_quantity(leite.id, 50)
    assert pos.cart.find_item(leite.id).quantity == 3


def test_update_quantity_to_zero_removes_line(logged_in_pos):
    pos = logged_in_pos
    cafe = _by_code(pos, "PROD-0001")
    pao = _by_code(pos, "PROD-0002")
    pos.cart.add_to_cart(cafe)
    pos.cart.add_to_cart(pao)

    assert pos.cart.update_cart_item_quantity(cafe.id, 0)
    assert [i.product_id for i in pos.cart.items] == [pao.id]


def test_update_missing_line_is_rejected(logged_in_pos):
    assert not logged_in_pos.cart.update_cart_item_quantity("prod-1", 2)


def test_remove_and_clear(logged_in_pos):
    pos = logged_in_pos
    cafe = _by_code(pos, "PROD-0001")
    pao = _by_code(pos, "PROD-0002")
    pos.cart.add_to_cart(cafe)
    pos.cart.add_to_cart(pao)

    assert pos.cart.remove_from_cart(cafe.id)
    assert not pos.cart.remove_from_cart(cafe.id)
    pos.cart.clear_cart()
    assert pos.cart.is_empty()
