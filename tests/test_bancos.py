"""Testes de core.bancos: tabela de códigos de banco."""

import json

from core.bancos import BANCOS_PADRAO, carregar_bancos

CODIGOS_OBRIGATORIOS = {
    "001", "033", "104", "237", "341", "356", "389",
    "399", "422", "453", "633", "652", "745",
}


def test_tabela_padrao_tem_bancos_conhecidos() -> None:
    assert CODIGOS_OBRIGATORIOS <= set(BANCOS_PADRAO)
    assert BANCOS_PADRAO["001"] == "Banco do Brasil"
    assert BANCOS_PADRAO["341"] == "Itaú"


def test_carrega_arquivo_externo(tmp_path) -> None:
    caminho = tmp_path / "bancos.json"
    caminho.write_text(json.dumps({"1": "Banco Um", "260": "Nu Pagamentos"}), encoding="utf-8")

    tabela = carregar_bancos(str(caminho))

    assert tabela == {"001": "Banco Um", "260": "Nu Pagamentos"}
