import sys
from dataclasses import replace
from pathlib import Path

_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import streamlit as st

from models.product import Unit
from utils import permissions
from utils.formatters import format_currency, format_quantity
from utils.navigation import show_sidebar
from utils.session import require_access
from utils.ui_helpers import page_header


st.set_page_config(page_title="Produtos", page_icon="📦", layout="wide")

pos = require_access(permissions.PRODUTOS)
show_sidebar()

user = pos.auth.get_current_user()
can_suppliers = permissions.has_access(user.role_name, permissions.FORNECEDORES)

page_header(
    "Produtos",
    "📦",
    "Catálogo, estoque e fornecedores.",
    color=pos.state.theme.primary_color,
)

tab_lista, tab_form, tab_fornecedores = st.tabs(["Lista", "Cadastrar / editar", "Fornecedores"])

suppliers = {s.id: s for s in pos.state.suppliers}

with tab_lista:
    busca = st.text_input("Buscar por código ou nome", key="busca_produto")
    termo = (busca or "").strip().lower()
    linhas = [
        {
            "Código": p.cod,
            "Nome": p.name,
            "Preço": f"{format_currency(p.price)} / {p.unit.value}",
            "Estoque": format_quantity(p.stock, p.unit),
            "Fornecedor": suppliers[p.supplier_id].name if p.supplier_id in suppliers else "-",
        }
        for p in pos.state.products
        if not termo or termo in p.cod.lower() or termo in p.name.lower()
    ]
    if linhas:
        st.dataframe(linhas, use_container_width=True, hide_index=True)
    else:
        st.info("Nenhum produto encontrado.")

with tab_form:
    produtos = {f"{p.cod} - {p.name}": p for p in pos.state.products}
    escolha = st.selectbox("Produto", ["(novo produto)", *produtos.keys()])
    produto = produtos.get(escolha)
    unidades = [u.value for u in Unit]
    fornecedor_ids = ["", *suppliers.keys()]

    with st.form("produto_form"):
        st.text_input("Código", value=produto.cod if produto else pos.catalog.next_product_code(), disabled=True)
        codigo_barras = st.text_input("Código de barras (opcional, só no cadastro)", disabled=produto is not None)
        nome = st.text_input("Nome", value=produto.name if produto else "")
        preco = st.number_input("Preço", min_value=0.0, step=0.01, value=float(produto.price) if produto else 0.0)
        unidade = st.selectbox(
            "Unidade", unidades, index=unidades.index(produto.unit.value) if produto else 0
        )
        estoque = st.number_input(
            "Estoque", min_value=0.0, step=0.001, value=float(produto.stock) if produto else 0.0
        )
        fornecedor = st.selectbox(
            "Fornecedor",
            fornecedor_ids,
            index=fornecedor_ids.index(produto.supplier_id)
            if produto and produto.supplier_id in fornecedor_ids
            else 0,
            format_func=lambda sid: suppliers[sid].name if sid else "Nenhum",
        )
        salvar = st.form_submit_button("Salvar", type="primary")

    if salvar:
        if not nome.strip():
            st.error("Informe o nome do produto.")
        elif produto:
            pos.catalog.update_product(
                replace(
                    produto,
                    name=nome.strip(),
                    price=preco,
                    unit=Unit(unidade),
                    stock=estoque,
                    supplier_id=fornecedor or None,
                )
            )
            st.success("Produto atualizado.")
            st.rerun()
        else:
            novo = pos.catalog.add_product(
                nome.strip(), preco, estoque, unidade, fornecedor or None, cod=codigo_barras
            )
            st.success(f"Produto {novo.cod} cadastrado.")
            st.rerun()

    if produto and st.button("Excluir produto"):
        pos.catalog.delete_product(produto.id)
        st.success("Produto excluído.")
        st.rerun()

with tab_fornecedores:
    if not can_suppliers:
        st.info("Cadastro de fornecedores disponível apenas para gerente/administrador.")
    else:
        if pos.state.suppliers:
            st.dataframe(
                [
                    {"Código": s.cod, "Nome": s.name, "Contato": s.contact_person or "",
                     "Telefone": s.phone or "", "E-mail": s.email or ""}
                    for s in pos.state.suppliers
                ],
                use_container_width=True,
                hide_index=True,
            )
        with st.form("fornecedor_form"):
            st.text_input("Código", value=pos.catalog.next_supplier_code(), disabled=True)
            f_nome = st.text_input("Nome")
            f_contato = st.text_input("Pessoa de contato")
            f_tel = st.text_input("Telefone")
            f_email = st.text_input("E-mail")
            f_end = st.text_input("Endereço")
            f_salvar = st.form_submit_button("Cadastrar fornecedor", type="primary")
        if f_salvar:
            if not f_nome.strip():
                st.error("Informe o nome do fornecedor.")
            else:
                pos.catalog.add_supplier(
                    f_nome.strip(), f_contato or None, f_tel or None, f_email or None, f_end or None
                )
                st.success("Fornecedor cadastrado.")
                st.rerun()
