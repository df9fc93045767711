from dataclasses import replace


def test_login_without_password_set(pos):
    assert pos.auth.login("G-001", "")

    user = pos.auth.get_current_user()
    assert user.cod == "G-001"
    assert user.role_name == "Gerente"


def test_login_passwordless_ignores_supplied_password(pos):
    assert pos.auth.login("V-001", "qualquer")
    assert pos.auth.get_current_user().role_name == "Vendedor"


def test_login_wrong_password_fails(pos):
    assert not pos.auth.login("ADM-001", "wrong")
    assert not pos.auth.login("ADM-001")
    assert pos.auth.get_current_user() is None


def test_login_correct_password(pos):
    assert pos.auth.login("ADM-001", "2026")
    assert pos.auth.get_current_user().role_name == "Administrador"


def test_login_unknown_code_fails(pos):
    assert not pos.auth.login("X-999", "")
    assert not pos.auth.is_authenticated()


def test_login_code_is_case_insensitive(pos):
    assert pos.auth.login(" g-001 ")


def test_successful_login_clears_cart(pos):
    assert pos.auth.login("G-001")
    cafe = pos.catalog.find_product_by_code("PROD-0001")
    assert pos.cart.add_to_cart(cafe, 2)

    assert pos.auth.login("V-001")
    assert pos.cart.items == []
    assert pos.auth.get_current_user().cod == "V-001"


def test_failed_login_keeps_current_operator_and_cart(pos):
    pos.auth.login("G-001")
    cafe = pos.catalog.find_product_by_code("PROD-0001")
    pos.cart.add_to_cart(cafe)

    assert not pos.auth.login("ADM-001", "errada")
    assert pos.auth.get_current_user().cod == "G-001"
    assert len(pos.cart.items) == 1


def test_logout_clears_user_and_cart(logged_in_pos):
    pos = logged_in_pos
    pos.cart.add_to_cart(pos.catalog.find_product_by_code("PROD-0002"))

    pos.auth.logout()

    assert pos.auth.get_current_user() is None
    assert pos.cart.items == []


def test_add_employee_generates_code_from_role(pos):
    created = pos.auth.add_employee("Joana", "role-gerente", phone="11 99999-0000")

    assert created.cod == "G-002"
    assert created.phone == "11 99999-0000"
    assert not created.has_password


def test_add_employee_with_password_can_login(pos):
    created = pos.auth.add_employee("Caio", "role-vendedor", password="1234")

    assert created.cod == "V-002"
    assert created.password_hash != "1234"
    assert not pos.auth.login("V-002", "4321")
    assert pos.auth.login("V-002", "1234")


def test_add_employee_unknown_role_is_rejected(pos):
    before = list(pos.state.employees)

    assert pos.auth.add_employee("Ninguém", "role-inexistente") is None
    assert pos.state.employees == before


def test_new_role_prefix_drives_employee_code(pos):
    role = pos.catalog.add_role("Açougueiro", "ac")

    assert pos.catalog.next_employee_code(role.id) == "AC-001"
    assert pos.auth.add_employee("Rui", role.id).cod == "AC-001"
    assert pos.catalog.next_employee_code(role.id) == "AC-002"


def test_update_employee_password_semantics(pos):
    adm = pos.auth.find_employee_by_code("ADM-001")

    # Sem `password`: mantém a senha atual e o código
    assert pos.auth.update_employee(replace(adm, name="Admin", cod="OUTRO"))
    kept = pos.auth.find_employee(adm.id)
    assert kept.cod == "ADM-001"
    assert kept.name == "Admin"
    assert pos.auth.login("ADM-001", "2026")

    # Vazio: remove a senha
    assert pos.auth.update_employee(kept, password="")
    assert pos.auth.login("ADM-001", "")


def test_delete_employee_frees_role(pos):
    role = pos.catalog.add_role("Fiscal", "F")
    employee = pos.auth.add_employee("Bia", role.id)
    assert not pos.catalog.can_delete_role(role.id)

    assert pos.auth.delete_employee(employee.id)
    assert pos.catalog.delete_role(role.id)


def test_role_change_recomputes_employee_code(pos):
    vendedor = pos.auth.find_employee_by_code("V-001")

    assert pos.auth.update_employee(replace(vendedor, role_id="role-gerente"))

    moved = pos.auth.find_employee(vendedor.id)
    assert moved.cod == "G-002"
    assert pos.auth.find_employee_by_code("V-001") is None
    assert pos.auth.login("G-002")
    assert pos.auth.get_current_user().role_name == "Gerente"


def test_role_change_to_unknown_role_is_rejected(pos):
    vendedor = pos.auth.find_employee_by_code("V-001")

    assert not pos.auth.update_employee(replace(vendedor, role_id="role-inexistente"))
    assert pos.auth.find_employee(vendedor.id) == vendedor
