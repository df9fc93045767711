import streamlit as st

from models.theme import FONT_STACKS
from utils import permissions
from utils.session import get_pos


def apply_theme() -> None:
    """Aplica a cor primária e a fonte escolhidas em Configurações."""
    theme = get_pos().state.theme
    st.markdown(
        f"""
    <style>
      html, body, [class*="css"] {{ font-family: {FONT_STACKS.get(theme.font_family, "sans-serif")}; }}
      .stButton button[kind="primary"] {{ background-color: {theme.primary_color.css()}; border-color: {theme.primary_color.css()}; }}
    </style>
    """,
        unsafe_allow_html=True,
    )


def storage_warning(pos) -> None:
    """Aviso quando o armazenamento não pôde ser lido; nada é gravado até recarregar."""
    if not pos.read_only:
        return
    st.error("Não foi possível ler os dados salvos. Alterações não serão gravadas até recarregar.")
    if st.button("Tentar recarregar", key="reload_storage"):
        if pos.reload():
            st.rerun()
        st.error("Leitura falhou novamente. Verifique o banco de dados.")


def show_sidebar() -> None:
    """
    Sidebar com o operador logado, status do caixa e links para as páginas do PDV.
    """
    pos = get_pos()
    user = pos.auth.get_current_user()
    role = user.role_name if user else None
    apply_theme()

    with st.sidebar:
        st.markdown("## 🛒 PDV")
        if user:
            st.markdown(f"**{user.name}** ({user.cod})")
            st.caption(f"Cargo: {role}")
        st.caption("Caixa aberto" if pos.cash_register.is_open() else "Caixa fechado")
        storage_warning(pos)

        st.markdown("---")
        st.markdown("### Menu")
        st.page_link("app.py", label="Início", icon="🏠")
        if permissions.has_access(role, permissions.CAIXA):
            st.page_link("pages/0_Caixa.py", label="Caixa", icon="💰")
            st.page_link("pages/2_Vendas.py", label="Vendas", icon="🧾")
        if permissions.has_access(role, permissions.PRODUTOS):
            st.page_link("pages/1_Produtos.py", label="Produtos", icon="📦")
        if permissions.has_access(role, permissions.RELATORIOS):
            st.page_link("pages/3_Relatorios.py", label="Relatórios", icon="📈")
        if permissions.has_access(role, permissions.FUNCIONARIOS):
            st.page_link("pages/4_Funcionarios.py", label="Funcionários", icon="👥")
        if permissions.has_access(role, permissions.CONFIGURACOES):
            st.page_link("pages/5_Configuracoes.py", label="Configurações", icon="⚙️")

        st.markdown("---")
        if st.button("Trocar usuário", use_container_width=True):
            pos.auth.logout()
            if hasattr(st, "switch_page"):
                st.switch_page("app.py")
            else:
                st.rerun()
