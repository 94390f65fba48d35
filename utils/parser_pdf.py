import os

import pdfplumber

from core.config import Config
from core.logger import logger
from core.models import ErroLeituraPDF
from utils.extractor import extrair_dados_de_texto


def validar_arquivo_pdf(pdf_path, tamanho_maximo=None):
    """Confere extensão, existência e tamanho antes de abrir o arquivo. Retorna (valido, erro)."""
    if tamanho_maximo is None:
        tamanho_maximo = Config.PDF_TAMANHO_MAXIMO

    if not str(pdf_path).lower().endswith('.pdf'):
        return False, "O arquivo deve ser um PDF"
    if not os.path.isfile(pdf_path):
        return False, f"Arquivo não encontrado: {pdf_path}"

    tamanho = os.path.getsize(pdf_path)
    if tamanho == 0:
        return False, "O arquivo está vazio"
    if tamanho > tamanho_maximo:
        return False, f"O arquivo é muito grande. Máximo: {tamanho_maximo // (1024 * 1024)}MB"

    return True, None


def extrair_texto_pdf(pdf_path, password=None):
    """Consolida o texto de todas as páginas do documento, uma página por linha."""
    try:
        with pdfplumber.open(pdf_path, password=password) as pdf:
            paginas = [p.extract_text() for p in pdf.pages]
    except Exception as e:
        logger.error(f"❌ Erro ao ler PDF {pdf_path}: {e}")
        raise ErroLeituraPDF(f"Não foi possível ler o PDF {pdf_path}") from e

    return "\n".join(texto for texto in paginas if texto)


def extrair_dados_pdf(pdf_path, password=None):
    """
    Abre o PDF, extrai o conteúdo textual e utiliza o extrator universal
    para identificar Linha Digitável, código de barras, PIX, valor e demais campos.
    Só levanta ErroLeituraPDF quando o arquivo não é um PDF legível; campos ausentes
    simplesmente ficam como None.
    """
    valido, erro = validar_arquivo_pdf(pdf_path)
    if not valido:
        raise ErroLeituraPDF(erro)

    texto = extrair_texto_pdf(pdf_path, password=password or Config.PDF_SENHA)
    if not texto.strip():
        raise ErroLeituraPDF("Não foi possível extrair texto do PDF. O arquivo pode estar vazio ou protegido.")

    dados = extrair_dados_de_texto(texto)
    logger.info(f"📄 PDF {os.path.basename(pdf_path)}: "
                f"código={'sim' if dados.encontrou_codigo() else 'não'}, valor={dados.valor}, "
                f"vencimento={dados.vencimento}")
    return dados
