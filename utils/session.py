"""
Ligação entre o Streamlit e o controlador do PDV.
Cada sessão do navegador mantém o seu próprio PointOfSale em st.session_state.
"""
import streamlit as st

from config.database import init_db
from services.point_of_sale import PointOfSale
from utils.permissions import has_access


@st.cache_resource
def initialize_app() -> None:
    """
    Cria as tabelas do armazenamento (uma vez por processo).
    """
    init_db()


def get_pos() -> PointOfSale:
    initialize_app()
    if "pos" not in st.session_state:
        st.session_state.pos = PointOfSale()
    return st.session_state.pos


def require_auth() -> PointOfSale:
    """
    Garante que há um operador logado.
    Se não houver, mostra mensagem e interrompe a execução da página.
    """
    pos = get_pos()
    if not pos.auth.is_authenticated():
        st.warning("Você precisa fazer login para acessar esta página.")
        st.stop()
    return pos


def require_access(feature: str) -> PointOfSale:
    """
    Garante que o cargo do operador tem acesso à funcionalidade.
    """
    pos = require_auth()
    user = pos.auth.get_current_user()
    if not has_access(user.role_name, feature):
        st.error("Você não tem permissão para acessar esta funcionalidade.")
        st.stop()
    return pos
