import sys
from pathlib import Path

_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import streamlit as st

from models.theme import FONT_FAMILIES
from utils import permissions
from utils.navigation import show_sidebar
from utils.receipt_config import load_receipt_config, save_receipt_config
from utils.session import require_access
from utils.ui_helpers import page_header


st.set_page_config(page_title="Configurações", page_icon="⚙️", layout="wide")

pos = require_access(permissions.CONFIGURACOES)
show_sidebar()

page_header(
    "Configurações",
    "⚙️",
    "Aparência do sistema e layout do recibo.",
    color=pos.state.theme.primary_color,
)

st.subheader("Aparência")
theme = pos.state.theme
with st.form("tema_form"):
    h = st.slider("Matiz", 0, 360, theme.primary_color.h, step=1)
    s = st.slider("Saturação", 0, 100, theme.primary_color.s, step=1)
    l = st.slider("Luminosidade", 0, 100, theme.primary_color.l, step=1)  # noqa: E741
    fonte = st.selectbox("Fonte", FONT_FAMILIES, index=FONT_FAMILIES.index(theme.font_family))
    salvar_tema = st.form_submit_button("Salvar aparência", type="primary")
if salvar_tema:
    pos.update_theme(h, s, l, fonte)
    st.success("Aparência salva.")
    st.rerun()

st.markdown("---")
st.subheader("Layout do recibo")
config = load_receipt_config()
with st.form("recibo_form"):
    largura = st.number_input("Largura do papel (mm)", min_value=40, max_value=120, value=int(config["paper_width_mm"]))
    colunas = st.number_input("Caracteres por linha", min_value=24, max_value=64, value=int(config["line_width"]))
    cabecalho = st.text_input("Cabeçalho", value=config["header_text"])
    endereco = st.text_input("Endereço", value=config["address_text"])
    documento = st.text_input("Documento (CNPJ)", value=config["document_text"])
    rodape = st.text_input("Rodapé", value=config["footer_text"])
    salvar_recibo = st.form_submit_button("Salvar recibo", type="primary")
if salvar_recibo:
    config.update(
        paper_width_mm=largura,
        line_width=colunas,
        header_text=cabecalho,
        address_text=endereco,
        document_text=documento,
        footer_text=rodape,
    )
    save_receipt_config(config)
    st.success("Layout do recibo salvo.")
