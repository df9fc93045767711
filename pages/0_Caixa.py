import sys
from pathlib import Path

_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import streamlit as st

from utils import permissions
from utils.formatters import format_currency, format_date
from utils.navigation import show_sidebar
from utils.session import require_access
from utils.ui_helpers import page_header, status_box


st.set_page_config(page_title="Caixa", page_icon="💰", layout="wide")

pos = require_access(permissions.CAIXA)
show_sidebar()

page_header(
    "Caixa",
    "💰",
    "Abra o caixa no início do expediente e feche ao encerrar. Vendas ficam vinculadas à sessão.",
    color=pos.state.theme.primary_color,
)

session = pos.cash_register.current
summary = pos.reports.current_session_summary()

# Status em destaque no topo
if session:
    status_box(
        f"Caixa aberto desde {format_date(session.opening_time)} por {session.operator_name}. "
        f"Troco inicial: {format_currency(session.opening_balance)}. "
        f"Vendas nesta sessão: {format_currency(summary.total_sales)}",
        "ok",
    )
else:
    status_box("Nenhum caixa aberto no momento. Abra o caixa para permitir vendas.", "atencao")

st.markdown("---")
col1, col2 = st.columns(2)

with col1:
    st.subheader("1. Abrir caixa")
    st.caption("Defina o valor de troco inicial (dinheiro na gaveta).")
    if session:
        st.info("Já existe uma sessão aberta. Feche-a antes de abrir outra.")
    else:
        with st.form("abrir_caixa"):
            valor_abertura = st.number_input(
                "Valor de abertura (troco inicial)", min_value=0.0, value=0.0, step=1.0
            )
            abrir = st.form_submit_button("Abrir caixa", type="primary")
        if abrir:
            if pos.cash_register.open(valor_abertura):
                st.success("Caixa aberto com sucesso.")
                st.rerun()
            else:
                st.error("Não foi possível abrir o caixa.")

with col2:
    st.subheader("2. Fechar caixa")
    st.caption("O saldo final é o troco inicial mais as vendas em dinheiro.")
    if not session:
        st.info("Não há caixa aberto no momento.")
    else:
        st.markdown(f"**Dinheiro:** {format_currency(summary.cash_total)}")
        st.markdown(f"**Cartão:** {format_currency(summary.card_total)}")
        st.markdown(f"**PIX:** {format_currency(summary.pix_total)}")
        st.markdown(f"**Esperado na gaveta:** {format_currency(summary.expected_cash)}")
        if pos.cart.items:
            st.warning("Há itens no carrinho. Finalize ou limpe a venda antes de fechar.")
        if st.button("Fechar caixa", type="primary"):
            closed = pos.cash_register.close()
            if closed:
                st.success(f"Caixa fechado. Saldo final: {format_currency(closed.closing_balance)}")
                st.rerun()

st.markdown("---")
with st.expander("📋 Ver histórico de sessões de caixa"):
    history = pos.reports.history()
    if not history:
        st.info("Nenhuma sessão de caixa registrada ainda.")
    else:
        linhas = []
        for s in history[:50]:
            resumo = pos.reports.session_summary(s)
            linhas.append(
                {
                    "Operador": s.operator_name,
                    "Abertura": format_date(s.opening_time),
                    "Fechamento": format_date(s.closing_time) if s.closing_time else "-",
                    "Valor abertura": format_currency(s.opening_balance),
                    "Valor fechamento": format_currency(s.closing_balance)
                    if s.closing_balance is not None
                    else "-",
                    "Vendas": resumo.transaction_count,
                    "Total vendas": format_currency(resumo.total_sales),
                }
            )
        st.dataframe(linhas, use_container_width=True, hide_index=True)
