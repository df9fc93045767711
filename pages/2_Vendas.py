import sys
from pathlib import Path

_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import streamlit as st
import streamlit.components.v1 as components

from models.transaction import PaymentMethod
from services.ai_service import AIService
from services.sale_service import cart_subtotal, compute_change, compute_total
from services.scanner import ManualScanner, lookup_scanned_product, scan_pix_payload
from utils import permissions
from utils.formatters import format_currency, format_quantity
from utils.navigation import show_sidebar
from utils.receipt_builder import build_receipt_html
from utils.session import require_access
from utils.ui_helpers import page_header


st.set_page_config(page_title="Vendas", page_icon="🧾", layout="wide")

pos = require_access(permissions.CAIXA)
show_sidebar()

page_header(
    "Vendas",
    "🧾",
    "Adicione os produtos ao carrinho e finalize a venda. Caixa precisa estar aberto.",
    color=pos.state.theme.primary_color,
)

if not pos.cash_register.is_open():
    st.error("Não há caixa aberto. Abra o caixa em **Caixa** antes de vender.")
    st.stop()


@st.cache_data(ttl=300, show_spinner=False)
def _suggestions(names: tuple) -> list:
    return AIService().suggest(list(names))


# Recibo da última venda
last = pos.sales.last_transaction
if last is not None:
    st.success(f"Venda registrada. Total: {format_currency(last.total)} ({last.payment_method.value}).")
    with st.expander("🧾 Recibo da última venda", expanded=True):
        components.html(build_receipt_html(last), height=520, scrolling=True)
        if st.button("Nova venda"):
            pos.sales.clear_last_transaction()
            st.rerun()

col_prod, col_cart = st.columns([1, 2])

with col_prod:
    st.subheader("Passo 1: Adicionar itens")
    with st.form("scanner_form", clear_on_submit=True):
        codigo = st.text_input("Código de barras / código do produto")
        qtd_scan = st.number_input("Quantidade", min_value=0.001, value=1.0, step=1.0)
        ler = st.form_submit_button("Adicionar", type="primary")
    if ler:
        produto = lookup_scanned_product(ManualScanner(codigo), pos.catalog)
        if produto is None:
            st.error("Produto não encontrado.")
        elif not pos.cart.add_to_cart(produto, qtd_scan):
            st.error(f"Estoque insuficiente para {produto.name}.")
        else:
            st.rerun()

    st.markdown("---")
    for produto in pos.state.products:
        c1, c2 = st.columns([3, 1])
        with c1:
            st.markdown(f"**{produto.name}**  \n{format_currency(produto.price)} / {produto.unit.value}")
            st.caption(f"{produto.cod} · Estoque: {format_quantity(produto.stock, produto.unit)}")
        with c2:
            if st.button("➕", key=f"add_{produto.id}", disabled=produto.stock <= 0):
                if not pos.cart.add_to_cart(produto):
                    st.toast(f"Estoque insuficiente para {produto.name}.")
                st.rerun()

with col_cart:
    st.subheader("Passo 2: Carrinho e finalizar")
    itens = pos.cart.items
    if not itens:
        st.info("Nenhum item no carrinho. Adicione produtos na coluna à esquerda.")
    else:
        for item in itens:
            p = item.product
            c1, c2, c3, c4 = st.columns([3, 2, 2, 1])
            with c1:
                st.markdown(f"**{p.name}**  \n{format_currency(p.price)} / {p.unit.value}")
            with c2:
                step = 0.001 if p.rule.is_weighed else 1.0
                nova = st.number_input(
                    "Qtd", value=float(item.quantity), step=step, min_value=0.0,
                    key=f"qty_{p.id}", label_visibility="collapsed",
                )
                if p.rule.normalize(nova) != item.quantity:
                    if not pos.cart.update_cart_item_quantity(p.id, nova):
                        st.toast("Quantidade acima do estoque disponível.")
                    st.rerun()
            with c3:
                st.markdown(format_currency(item.line_total))
            with c4:
                if st.button("🗑️", key=f"rm_{p.id}"):
                    pos.cart.remove_from_cart(p.id)
                    st.rerun()

        st.markdown("---")
        subtotal = cart_subtotal(itens)
        c1, c2 = st.columns(2)
        with c1:
            desconto = st.number_input("Desconto (R$)", min_value=0.0, step=0.5, value=0.0)
        with c2:
            acrescimo = st.number_input("Acréscimo (R$)", min_value=0.0, step=0.5, value=0.0)
        total = compute_total(subtotal, desconto, acrescimo)
        st.markdown(f"Subtotal: **{format_currency(subtotal)}**")
        st.markdown(f"### Total: {format_currency(total)}")

        metodo = st.radio(
            "Forma de pagamento", [m.value for m in PaymentMethod], horizontal=True
        )
        pix_payload = None
        if metodo == PaymentMethod.CASH.value:
            pago = st.number_input("Valor recebido (R$)", min_value=0.0, step=1.0, value=float(total))
            troco = compute_change(total, pago)
            if troco is None:
                st.warning("Valor recebido menor que o total.")
            else:
                st.markdown(f"Troco: **{format_currency(troco)}**")
        elif metodo == PaymentMethod.PIX.value:
            pix_payload = scan_pix_payload(ManualScanner(st.text_input("Payload do QR PIX (opcional)")))

        c1, c2 = st.columns(2)
        with c1:
            pode_finalizar = metodo != PaymentMethod.CASH.value or troco is not None
            if st.button("Finalizar venda", type="primary", use_container_width=True, disabled=not pode_finalizar):
                if pos.sales.finalize_sale(metodo, total, pix_payload=pix_payload) is None:
                    st.error("Não foi possível finalizar a venda.")
                st.rerun()
        with c2:
            if st.button("Limpar carrinho", use_container_width=True):
                pos.cart.clear_cart()
                st.rerun()

        sugestoes = _suggestions(tuple(sorted(i.product.name for i in itens)))
        if sugestoes:
            st.markdown("---")
            st.markdown("#### ✨ Sugestões para o cliente")
            for s in sugestoes:
                st.markdown(f"- {s}")
