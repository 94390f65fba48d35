"""Testes de main: ponto de entrada da linha de comando."""

from conftest import CODIGO_CAIXA, LINHA_CAIXA_FORMATADA
from main import executar, processar_entrada


def test_sem_argumentos() -> None:
    assert executar([]) == 2


def test_codigos_validos() -> None:
    assert executar([CODIGO_CAIXA, LINHA_CAIXA_FORMATADA]) == 0


def test_algum_invalido() -> None:
    assert executar([CODIGO_CAIXA, "123"]) == 1


def test_pdf(pdf_em_disco, pdfplumber_falso) -> None:
    assert processar_entrada(pdf_em_disco)


def test_pdf_sem_codigo(pdf_em_disco, pdfplumber_falso) -> None:
    pdfplumber_falso["paginas"] = ["sem código"]
    assert not processar_entrada(pdf_em_disco)


def test_pdf_inexistente(tmp_path) -> None:
    assert not processar_entrada(str(tmp_path / "nao_existe.pdf"))
