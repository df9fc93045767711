import sys
from dataclasses import replace
from pathlib import Path

_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import streamlit as st

from utils import permissions
from utils.formatters import format_currency
from utils.navigation import show_sidebar
from utils.session import require_access
from utils.ui_helpers import page_header


st.set_page_config(page_title="Funcionários", page_icon="👥", layout="wide")

pos = require_access(permissions.FUNCIONARIOS)
show_sidebar()

page_header(
    "Funcionários",
    "👥",
    "Cadastro de funcionários e cargos. O código segue o prefixo do cargo.",
    color=pos.state.theme.primary_color,
)

roles = {r.id: r for r in pos.state.roles}
tab_func, tab_cargos = st.tabs(["Funcionários", "Cargos"])

with tab_func:
    if pos.state.employees:
        st.dataframe(
            [
                {
                    "Código": e.cod,
                    "Nome": e.name,
                    "Cargo": roles[e.role_id].name if e.role_id in roles else "-",
                    "Senha": "sim" if e.has_password else "não",
                    "Telefone": e.phone or "",
                    "Salário": format_currency(e.salary) if e.salary is not None else "",
                }
                for e in pos.state.employees
            ],
            use_container_width=True,
            hide_index=True,
        )

    funcionarios = {f"{e.cod} - {e.name}": e for e in pos.state.employees}
    escolha = st.selectbox("Funcionário", ["(novo funcionário)", *funcionarios.keys()])
    funcionario = funcionarios.get(escolha)
    role_ids = list(roles.keys())
    if not role_ids:
        st.warning("Cadastre um cargo antes de cadastrar funcionários.")
        st.stop()

    # Fora do form para recalcular o código ao trocar o cargo
    role_id = st.selectbox(
        "Cargo",
        role_ids,
        index=role_ids.index(funcionario.role_id) if funcionario and funcionario.role_id in role_ids else 0,
        format_func=lambda rid: f"{roles[rid].name} ({roles[rid].prefix})",
    )
    if funcionario and funcionario.role_id == role_id:
        codigo = funcionario.cod
    else:
        codigo = pos.catalog.next_employee_code(role_id)
    st.text_input("Código", value=codigo, disabled=True)

    with st.form("funcionario_form"):
        nome = st.text_input("Nome", value=funcionario.name if funcionario else "")
        senha = st.text_input("Senha (vazio = sem senha)", type="password")
        manter_senha = st.checkbox("Manter senha atual", value=True, disabled=funcionario is None)
        cpf = st.text_input("CPF", value=(funcionario.cpf or "") if funcionario else "")
        rg = st.text_input("RG", value=(funcionario.rg or "") if funcionario else "")
        telefone = st.text_input("Telefone", value=(funcionario.phone or "") if funcionario else "")
        endereco = st.text_input("Endereço", value=(funcionario.address or "") if funcionario else "")
        admissao = st.text_input("Data de admissão", value=(funcionario.admission_date or "") if funcionario else "")
        salario = st.number_input(
            "Salário", min_value=0.0, step=50.0,
            value=float(funcionario.salary or 0.0) if funcionario else 0.0,
        )
        salvar = st.form_submit_button("Salvar", type="primary")

    if salvar:
        dados = dict(
            cpf=cpf or None,
            rg=rg or None,
            phone=telefone or None,
            address=endereco or None,
            admission_date=admissao or None,
            salary=salario or None,
        )
        if not nome.strip():
            st.error("Informe o nome.")
        elif funcionario:
            atualizado = replace(funcionario, name=nome.strip(), role_id=role_id, **dados)
            if manter_senha:
                pos.auth.update_employee(atualizado)
            else:
                pos.auth.update_employee(atualizado, password=senha or None)
            st.success("Funcionário atualizado.")
            st.rerun()
        else:
            novo = pos.auth.add_employee(nome.strip(), role_id, password=senha or None, **dados)
            st.success(f"Funcionário {novo.cod} cadastrado.")
            st.rerun()

    if funcionario and st.button("Excluir funcionário"):
        pos.auth.delete_employee(funcionario.id)
        st.rerun()

with tab_cargos:
    for role in pos.state.roles:
        c1, c2, c3 = st.columns([3, 1, 1])
        c1.markdown(f"**{role.name}**")
        c2.markdown(role.prefix)
        if c3.button("Excluir", key=f"del_role_{role.id}", disabled=not pos.catalog.can_delete_role(role.id)):
            pos.catalog.delete_role(role.id)
            st.rerun()
    st.caption("Cargos com funcionários vinculados não podem ser excluídos.")

    with st.form("cargo_form", clear_on_submit=True):
        cargo_nome = st.text_input("Nome do cargo")
        cargo_prefixo = st.text_input("Prefixo do código (1-3 letras)", max_chars=3)
        criar = st.form_submit_button("Adicionar cargo", type="primary")
    if criar:
        if not cargo_nome.strip():
            st.error("Informe o nome do cargo.")
        elif pos.catalog.add_role(cargo_nome.strip(), cargo_prefixo) is None:
            st.error("O prefixo precisa ter de 1 a 3 letras.")
        else:
            st.rerun()
