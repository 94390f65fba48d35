"""Códigos de referência e estratégias Hypothesis compartilhados pelos testes."""

import pytest
from hypothesis import HealthCheck, settings
from hypothesis import strategies as st

from core.parser_boleto import calcular_dv_modulo11

settings.register_profile(
    "dev",
    max_examples=100,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.load_profile("dev")

# Boleto real da Caixa: R$ 583,33 com vencimento em 28/02/2001 (fator 1240)
LINHA_CAIXA = "10491212034100010004400000042499112400000058333"
LINHA_CAIXA_FORMATADA = "10491.21203 41000.100044 00000.042499 1 12400000058333"
CODIGO_CAIXA = "10491124000000583331212041000100040000004249"

# Bradesco sem valor e sem vencimento (fator 0)
CODIGO_BRADESCO_SEM_VALOR = "23793000000000000000123456789012345678901234"
LINHA_BRADESCO_SEM_VALOR = "23790123435678901234356789012343300000000000000"

# Bradesco com fator 100 e R$ 1.234,56
CODIGO_BRADESCO_FATOR_100 = "23791010000001234561234567890123456789012345"
LINHA_BRADESCO_FATOR_100 = "23791234546789012345767890123457101000000123456"

# Banco fora da tabela
CODIGO_BANCO_DESCONHECIDO = "99991000000000000000000000000000000000000001"


@st.composite
def codigos_barras_validos(draw):
    """43 dígitos de informação + DV geral módulo 11 na posição 4."""
    corpo = draw(st.text(alphabet="0123456789", min_size=43, max_size=43))
    return corpo[:4] + str(calcular_dv_modulo11(corpo)) + corpo[4:]


@pytest.fixture
def bancos_custom():
    return {"999": "Banco de Teste"}


TEXTO_PDF_CAIXA = """CAIXA ECONOMICA FEDERAL 104-0
Beneficiário: EMPRESA EXEMPLO LTDA 12.345.678/0001-90
Vencimento: 28/02/2001
Nº do Documento: 55501
10491.21203 41000.100044 00000.042499 1 12400000058333
"""


class PaginaFalsa:
    def __init__(self, texto):
        self.texto = texto

    def extract_text(self):
        return self.texto


class PDFFalso:
    def __init__(self, paginas):
        self.pages = [PaginaFalsa(t) for t in paginas]

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


@pytest.fixture
def pdf_em_disco(tmp_path):
    """Arquivo .pdf com conteúdo qualquer; o pdfplumber é substituído pelo fixture pdfplumber_falso."""
    caminho = tmp_path / "boleto.pdf"
    caminho.write_bytes(b"%PDF-1.4 conteudo de teste")
    return str(caminho)


@pytest.fixture
def pdfplumber_falso(monkeypatch):
    """Faz pdfplumber.open devolver as páginas configuradas em `paginas`."""
    estado = {"paginas": [TEXTO_PDF_CAIXA], "chamadas": []}

    def abrir(caminho, password=None):
        estado["chamadas"].append((caminho, password))
        return PDFFalso(estado["paginas"])

    monkeypatch.setattr("utils.parser_pdf.pdfplumber.open", abrir)
    return estado
