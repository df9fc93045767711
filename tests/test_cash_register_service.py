from datetime import datetime

from models.cash_session import STATUS_CLOSED, STATUS_OPEN
from models.transaction import PaymentMethod


def test_open_requires_logged_in_user(pos):
    assert pos.cash_register.open(100.0) is None
    assert not pos.cash_register.is_open()


def test_open_records_operator_and_time(logged_in_pos, clock):
    session = logged_in_pos.cash_register.open(150.0)

    assert session.status == STATUS_OPEN
    assert session.opening_balance == 150.0
    assert session.opening_time == clock()
    assert session.operator_name == "Administrador"
    assert session.transactions == []
    assert logged_in_pos.cash_register.is_open()


def test_cannot_open_twice(open_pos):
    first = open_pos.cash_register.current

    assert open_pos.cash_register.open(10.0) is None
    assert open_pos.cash_register.current is first


def test_close_without_open_session(logged_in_pos):
    assert logged_in_pos.cash_register.close() is None


def test_close_moves_session_to_history(open_pos, clock):
    clock.advance(hours=8)

    closed = open_pos.cash_register.close()

    assert closed.status == STATUS_CLOSED
    assert closed.closing_time == datetime(2026, 3, 14, 18, 30, 0)
    assert closed.closing_balance == 300.0
    assert open_pos.cash_register.current is None
    assert open_pos.state.cash_register_history[0] is closed


def test_closing_balance_counts_only_cash_sales(open_pos):
    pos = open_pos
    cafe = pos.catalog.find_product_by_code("PROD-0001")

    pos.cart.add_to_cart(cafe, 2)
    pos.sales.finalize_sale(PaymentMethod.CASH, 10.0)
    pos.cart.add_to_cart(cafe, 4)
    pos.sales.finalize_sale(PaymentMethod.CARD, 20.0)
    pos.cart.add_to_cart(cafe, 1)
    pos.sales.finalize_sale(PaymentMethod.PIX, 5.0, pix_payload="000201...")

    closed = pos.cash_register.close()

    assert len(closed.transactions) == 3
    assert closed.closing_balance == 310.0


def test_history_is_newest_first(open_pos, clock):
    pos = open_pos
    first = pos.cash_register.close()
    clock.advance(days=1)
    pos.cash_register.open(50.0)
    second = pos.cash_register.close()

    assert [s.id for s in pos.reports.history()] == [second.id, first.id]


def test_open_session_survives_logout(open_pos):
    open_pos.auth.logout()

    assert open_pos.cash_register.is_open()
