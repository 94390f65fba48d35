import json
import os

from core.config import Config

BANCOS_JSON = os.path.join(os.path.dirname(os.path.abspath(__file__)), "bancos.json")


def carregar_bancos(caminho=None):
    """
    Lê a tabela de bancos (código de 3 dígitos -> nome de exibição).
    Sem caminho explícito, usa Config.BANCOS_PATH e, na falta dele, o bancos.json do pacote.
    """
    caminho = caminho or Config.BANCOS_PATH or BANCOS_JSON
    with open(caminho, encoding="utf-8") as f:
        tabela = json.load(f)

    # Normaliza as chaves para 3 dígitos ("1" -> "001")
    return {str(codigo).zfill(3): nome for codigo, nome in tabela.items()}


BANCOS_PADRAO = carregar_bancos()
