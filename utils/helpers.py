from core.logger import logger
from core.parser_boleto import formatar_linha_digitavel


def formatar_moeda_brasileira(valor):
    """Auxiliar simples para exibir valores formatados no console ou logs."""
    if valor is None:
        return "---"
    return "R$ " + "{:,.2f}".format(valor).replace(',', 'v').replace('.', ',').replace('v', '.')


def formatar_data(data):
    return data.strftime("%d/%m/%Y") if data else "---"


def exibir_resultado(resultado, origem=None):
    """
    Exibe um resumo no log sempre que um código é processado.
    Útil para debug e acompanhamento manual.
    """
    logger.info("═" * 60)
    if origem:
        logger.info(f"📂 ORIGEM: {origem}")

    if not resultado.valido:
        logger.warning(f"⚠️ Código recusado ({resultado.erro.value}): {resultado.motivo}")
        logger.warning("✍️ Preencha os dados manualmente.")
    else:
        logger.info(f"🏦 BANCO: {resultado.banco or 'Não identificado'}")
        logger.info(f"💸 VALOR: {formatar_moeda_brasileira(resultado.valor)}")
        logger.info(f"📅 VENCIMENTO: {formatar_data(resultado.vencimento)}")
        logger.info(f"🔢 LINHA: {formatar_linha_digitavel(resultado.linha_digitavel)}")
        logger.info(f"▮ CÓDIGO DE BARRAS: {resultado.codigo_barras}")

    logger.info("═" * 60)


def formatar_mensagem_boleto(boleto, hoje=None):
    """Texto de uma linha por campo com os dados principais do boleto cadastrado."""
    return (
        f"📝 {boleto.descricao}\n"
        f"🏦 Banco: {boleto.banco or 'Não identificado'}\n"
        f"💰 Valor: {formatar_moeda_brasileira(boleto.valor)}\n"
        f"📅 Vencimento: {formatar_data(boleto.vencimento)}\n"
        f"📌 Status: {boleto.status_atual(hoje).value}\n"
        f"🔢 {formatar_linha_digitavel(boleto.linha_digitavel)}"
    )
