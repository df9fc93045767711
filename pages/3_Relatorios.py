import sys
from datetime import date, timedelta
from pathlib import Path

_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import pandas as pd
import streamlit as st

from models.product import Unit
from models.transaction import PaymentMethod
from utils import permissions
from utils.formatters import format_currency, format_date, format_quantity
from utils.navigation import show_sidebar
from utils.session import require_access
from utils.ui_helpers import page_header


st.set_page_config(page_title="Relatórios", page_icon="📈", layout="wide")

pos = require_access(permissions.RELATORIOS)
show_sidebar()

page_header(
    "Relatórios",
    "📈",
    "Vendas por período, produtos mais vendidos e sessões de caixa.",
    color=pos.state.theme.primary_color,
)

st.subheader("Filtros")
col1, col2, col3 = st.columns(3)
with col1:
    data_inicio = st.date_input("Data inicial", value=date.today() - timedelta(days=30))
with col2:
    data_fim = st.date_input("Data final", value=date.today())
with col3:
    forma = st.selectbox("Forma de pagamento", ["Todos", *[m.value for m in PaymentMethod]])

vendas = pos.reports.filter_transactions(
    data_inicio, data_fim, None if forma == "Todos" else forma
)

st.markdown("---")
total = sum(t.total for t in vendas)
c1, c2, c3 = st.columns(3)
c1.metric("Total vendido", format_currency(total))
c2.metric("Vendas", len(vendas))
c3.metric("Ticket médio", format_currency(total / len(vendas)) if vendas else "-")

st.subheader("Vendas nos últimos 7 dias")
serie = pos.reports.sales_by_day(7)
df_dias = pd.DataFrame(
    {"Dia": [d.strftime("%d/%m") for d in serie], "Total": list(serie.values())}
).set_index("Dia")
st.bar_chart(df_dias)

st.subheader("Histórico de vendas")
if vendas:
    st.dataframe(
        [
            {
                "Data": format_date(t.date),
                "Operador": t.operator,
                "Pagamento": t.payment_method.value,
                "Itens": len(t.items),
                "Total": format_currency(t.total),
            }
            for t in vendas
        ],
        use_container_width=True,
        hide_index=True,
    )
else:
    st.info("Nenhuma venda no período.")

st.subheader("Produtos mais vendidos")
mais_vendidos = pos.reports.top_products(10)
if not mais_vendidos:
    st.info("Nenhuma venda registrada ainda.")
else:
    df_top = pd.DataFrame(
        [
            {
                "Código": p["cod"],
                "Produto": p["name"],
                "Quantidade": format_quantity(p["quantity"], Unit(p["unit"])),
                "Faturamento": p["revenue"],
            }
            for p in mais_vendidos
        ]
    )
    df_top["Faturamento"] = df_top["Faturamento"].apply(format_currency)
    st.dataframe(df_top, use_container_width=True, hide_index=True)

st.subheader("Sessões de caixa")
historico = pos.reports.history()
if not historico:
    st.info("Nenhuma sessão fechada ainda.")
for s in historico[:20]:
    resumo = pos.reports.session_summary(s)
    with st.expander(f"{format_date(s.opening_time)} · {s.operator_name} · {format_currency(resumo.total_sales)}"):
        st.markdown(
            f"Dinheiro: **{format_currency(resumo.cash_total)}** · "
            f"Cartão: **{format_currency(resumo.card_total)}** · "
            f"PIX: **{format_currency(resumo.pix_total)}**"
        )
        st.markdown(
            f"Troco inicial: {format_currency(resumo.opening_balance)} · "
            f"Esperado na gaveta: {format_currency(resumo.expected_cash)} · "
            f"Saldo de fechamento: {format_currency(resumo.closing_balance or 0)}"
        )
