"""
Blocos visuais reaproveitados pelas páginas do PDV.
"""
import streamlit as st

from models.theme import HSLColor

# (fundo, borda, ícone) por tipo de aviso
_BOX_STYLES = {
    "ok": ("#e8f5e9", "#43a047", "✅"),
    "atencao": ("#fff3e0", "#fb8c00", "⚠️"),
}


def page_header(title: str, icon: str, subtitle: str = "", color: HSLColor = None):
    """Título da página na cor primária do tema, com subtítulo opcional."""
    accent = (color or HSLColor()).css()
    html = (
        f"<p style='margin:0 0 0.25rem 0; font-size:1.25rem; color:{accent};'>"
        f"<strong>{icon} {title}</strong></p>"
    )
    if subtitle:
        html += f"<p style='margin:0; font-size:0.8rem; color:#666;'>{subtitle}</p>"
    st.markdown(html, unsafe_allow_html=True)
    st.markdown("---")


def status_box(message: str, kind: str = "ok"):
    """Faixa de status do caixa: 'ok' (aberto) ou 'atencao' (fechado)."""
    background, border, icon = _BOX_STYLES.get(kind, _BOX_STYLES["atencao"])
    st.markdown(
        f"<div style='background-color:{background}; border-left:4px solid {border}; "
        f"padding:14px 18px; margin:12px 0; border-radius:0 8px 8px 0; font-weight:500;'>"
        f"{icon} {message}</div>",
        unsafe_allow_html=True,
    )
