import sys
from datetime import datetime
from pathlib import Path

# Garante que o diretório raiz do projeto esteja no path (para rodar de qualquer cwd)
_ROOT = Path(__file__).resolve().parents[0]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import streamlit as st

from utils.formatters import format_currency, format_date
from utils.navigation import show_sidebar, storage_warning
from utils.session import get_pos


st.set_page_config(
    page_title="PDV - Mercadinho",
    page_icon="🛒",
    layout="wide",
    initial_sidebar_state="expanded",
    menu_items={
        "Get Help": None,
        "Report a bug": None,
        "About": None,
    },
)


def login_page(pos):
    st.markdown("# 🔐 PDV - Mercadinho")
    st.caption("Ponto de venda de caixa único")
    storage_warning(pos)
    st.markdown("---")

    col1, col2, col3 = st.columns([1, 2, 1])
    with col2:
        st.subheader("Entrar no caixa")
        st.caption("Digite seu código de funcionário. A senha só é exigida se estiver cadastrada.")
        with st.form("login_form"):
            code = st.text_input("Código", placeholder="Ex: ADM-001")
            password = st.text_input("Senha", type="password", placeholder="••••")
            submit = st.form_submit_button("Entrar", use_container_width=True, type="primary")

        if submit:
            if not code:
                st.error("Por favor, informe o código do funcionário.")
            elif pos.auth.login(code, password):
                st.success(f"Bem-vindo, {pos.auth.get_current_user().name}!")
                st.rerun()
            else:
                st.error("Código ou senha inválidos.")


def home_page(pos):
    user = pos.auth.get_current_user()

    st.markdown("# 🏠 Início")
    st.markdown(f"Olá, **{user.name}**! Use o menu ao lado para navegar.")
    st.markdown("---")

    summary = pos.reports.current_session_summary()
    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Hoje", format_date(datetime.now()))
    with col2:
        st.metric("Cargo", user.role_name or "-")
    with col3:
        st.metric(
            "Caixa",
            "Aberto" if summary else "Fechado",
            help=f"Vendas na sessão: {format_currency(summary.total_sales)}" if summary else None,
        )

    st.markdown("### Próximos passos")
    st.markdown(
        "1. Abra o **Caixa** com o troco inicial.  \n"
        "2. Use **Vendas** para montar o carrinho (leitor de código ou grade) e finalizar.  \n"
        "3. Feche o caixa ao final do expediente e acompanhe em **Relatórios**."
    )


def main():
    pos = get_pos()

    if not pos.auth.is_authenticated():
        login_page(pos)
    else:
        show_sidebar()
        home_page(pos)


if __name__ == "__main__":
    main()
