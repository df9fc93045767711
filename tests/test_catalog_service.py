from dataclasses import replace

from models.product import Unit


def test_seeded_catalog_next_product_code(pos):
    assert pos.catalog.next_product_code() == "PROD-0007"


def test_add_product_assigns_next_code(pos):
    created = pos.catalog.add_product("Arroz 5kg", 24.9, 40)

    assert created.cod == "PROD-0007"
    assert pos.catalog.find_product(created.id) == created
    assert pos.catalog.next_product_code() == "PROD-0008"


def test_deleting_a_product_does_not_reuse_codes(pos):
    middle = pos.catalog.find_product_by_code("PROD-0003")

    assert pos.catalog.delete_product(middle.id)
    assert pos.catalog.next_product_code() == "PROD-0007"


def test_add_product_accepts_barcode(pos):
    created = pos.catalog.add_product("Feijão", 8.5, 10, cod=" 7891000315507 ")

    assert created.cod == "7891000315507"
    assert pos.catalog.find_product_by_code("7891000315507") == created


def test_add_product_normalizes_stock_by_unit(pos):
    weighed = pos.catalog.add_product("Banana", 4.5, 12.34567, "kg")
    counted = pos.catalog.add_product("Sabonete", 2.0, 7.9, "UN")

    assert weighed.unit is Unit.KG
    assert weighed.stock == 12.346
    assert counted.stock == 7


def test_update_product_keeps_code(pos):
    cafe = pos.catalog.find_product_by_code("PROD-0001")

    assert pos.catalog.update_product(replace(cafe, cod="OUTRO", price=6.0))
    updated = pos.catalog.find_product(cafe.id)
    assert updated.cod == "PROD-0001"
    assert updated.price == 6.0


def test_update_unknown_product_is_rejected(pos):
    cafe = pos.catalog.find_product_by_code("PROD-0001")

    assert not pos.catalog.update_product(replace(cafe, id="nope"))


def test_find_product_by_code_misses(pos):
    assert pos.catalog.find_product_by_code("") is None
    assert pos.catalog.find_product_by_code("PROD-9999") is None


def test_supplier_codes_and_weak_reference(pos):
    first = pos.catalog.add_supplier("Laticínios Serra", contact_person="Ana")
    second = pos.catalog.add_supplier("Hortifruti Vale")
    assert (first.cod, second.cod) == ("FOR-001", "FOR-002")

    queijo = pos.catalog.find_product_by_code("PROD-0005")
    pos.catalog.update_product(replace(queijo, supplier_id=first.id))
    assert pos.catalog.delete_supplier(first.id)

    assert pos.catalog.find_supplier(first.id) is None
    assert pos.catalog.find_product(queijo.id).supplier_id == first.id


def test_role_in_use_cannot_be_deleted(pos):
    assert not pos.catalog.can_delete_role("role-gerente")
    assert not pos.catalog.delete_role("role-gerente")
    assert pos.catalog.find_role("role-gerente") is not None


def test_unused_role_can_be_deleted(pos):
    role = pos.catalog.add_role("Estoquista", "est")

    assert role.prefix == "EST"
    assert pos.catalog.can_delete_role(role.id)
    assert pos.catalog.delete_role(role.id)
    assert pos.catalog.find_role(role.id) is None


def test_role_prefix_is_letters_only_and_three_chars(pos):
    role = pos.catalog.add_role("Caixa", "cx12a")

    assert role.prefix == "CXA"


def test_catalog_mutations_are_persisted(pos, repository):
    pos.catalog.add_product("Arroz 5kg", 24.9, 40)

    saved = repository.load(pos.storage_key)
    assert "PROD-0007" in [p["cod"] for p in saved["products"]]


def test_update_theme_ignores_unknown_font(pos):
    theme = pos.update_theme(10, 80, 45, "Comic Sans")

    assert theme.primary_color.css() == "hsl(10, 80%, 45%)"
    assert theme.font_family == "font-inter"


def test_role_prefix_without_letters_is_rejected(pos):
    before = list(pos.state.roles)

    assert pos.catalog.add_role("Caixa", "12") is None
    assert pos.catalog.add_role("Caixa", "-") is None
    assert pos.state.roles == before


def test_update_role_keeps_prefix_when_new_one_has_no_letters(pos):
    gerente = pos.catalog.find_role("role-gerente")

    assert not pos.catalog.update_role(replace(gerente, prefix="99"))
    assert pos.catalog.find_role("role-gerente").prefix == "G"
