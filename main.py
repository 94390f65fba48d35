import sys

from core.logger import logger
from core.models import ErroLeituraPDF
from core.parser_boleto import parse_boleto
from services.boleto_service import processar_pdf
from utils.helpers import exibir_resultado


def processar_entrada(entrada):
    """
    Processa um argumento: arquivos .pdf passam pelo extrator, o resto é tratado como código.
    Retorna True quando o código foi validado.
    """
    if entrada.lower().endswith(".pdf"):
        try:
            dados, resultado = processar_pdf(entrada)
        except ErroLeituraPDF as e:
            logger.error(f"❌ {e}")
            return False

        if resultado is None:
            logger.warning("⚠️ Atenção: Nenhum código de boleto identificado. Preencha manualmente.")
            return False
        if dados.beneficiario:
            logger.info(f"🏢 BENEFICIÁRIO: {dados.beneficiario}")
    else:
        resultado = parse_boleto(entrada)

    exibir_resultado(resultado, origem=entrada)
    return resultado.valido


def executar(argumentos):
    if not argumentos:
        logger.error("Uso: python main.py <código de barras | linha digitável | arquivo.pdf> ...")
        return 2

    validos = [processar_entrada(entrada) for entrada in argumentos]
    logger.info(f"✅ {sum(validos)} de {len(validos)} boleto(s) válido(s).")
    return 0 if all(validos) else 1


if __name__ == "__main__":
    sys.exit(executar(sys.argv[1:]))
