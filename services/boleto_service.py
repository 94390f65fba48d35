from dataclasses import replace
from datetime import date
from decimal import Decimal

from core.logger import logger
from core.models import Boleto
from core.parser_boleto import parse_boleto
from utils.parser_pdf import extrair_dados_pdf

BANCO_NAO_IDENTIFICADO = "Não identificado"


def processar_pdf(pdf_path, password=None, bancos=None):
    """
    Extrai os dados do PDF e valida o código encontrado.
    Retorna (dados, resultado); resultado é None quando o PDF não trouxe código algum
    e o usuário precisa digitar os dados manualmente.
    """
    dados = extrair_dados_pdf(pdf_path, password=password)

    # A linha digitável carrega os DVs dos campos; o código de barras só é usado na falta dela
    codigo = dados.linha_digitavel or dados.codigo_barras
    if not codigo:
        logger.warning(f"⚠️ Nenhum código de boleto identificado em {pdf_path}")
        return dados, None

    resultado = parse_boleto(codigo, bancos=bancos)
    if not resultado.valido:
        logger.warning(f"⚠️ Código encontrado em {pdf_path} é inválido: {resultado.motivo}")
    return dados, resultado


def descricao_sugerida(dados):
    if dados and dados.numero_documento:
        return f"Boleto {dados.numero_documento}"
    return None


def montar_boleto(descricao, resultado, dados=None, observacoes=None):
    """
    Monta o boleto a partir de um código validado.
    Valor e vencimento lidos do PDF têm prioridade sobre os embutidos no código.
    """
    if not descricao or not descricao.strip():
        raise ValueError("Descrição é obrigatória")
    if not resultado.valido:
        raise ValueError(f"Código inválido: {resultado.motivo}")

    valor = dados.valor if dados and dados.valor is not None else resultado.valor
    vencimento = dados.vencimento if dados and dados.vencimento else resultado.vencimento

    return Boleto(
        descricao=descricao.strip(),
        codigo_barras=resultado.codigo_barras,
        linha_digitavel=resultado.linha_digitavel,
        valor=valor if valor is not None else Decimal("0"),
        vencimento=vencimento,
        banco=resultado.banco or BANCO_NAO_IDENTIFICADO,
        beneficiario=dados.beneficiario if dados else None,
        numero_documento=dados.numero_documento if dados else None,
        observacoes=observacoes.strip() if observacoes else None,
    )


def montar_boleto_manual(descricao, valor=None, vencimento=None, codigo_barras=None,
                         linha_digitavel=None, banco=None, beneficiario=None,
                         numero_documento=None, observacoes=None):
    """Cadastro manual, usado quando o código não pôde ser validado."""
    if not descricao or not descricao.strip():
        raise ValueError("Descrição é obrigatória")

    return Boleto(
        descricao=descricao.strip(),
        codigo_barras=codigo_barras or "0" * 44,
        linha_digitavel=linha_digitavel or "0" * 47,
        valor=valor if valor is not None else Decimal("0"),
        vencimento=vencimento or date.today(),
        banco=banco or BANCO_NAO_IDENTIFICADO,
        beneficiario=beneficiario,
        numero_documento=numero_documento,
        observacoes=observacoes,
    )


def atualizar_status(boletos, hoje=None):
    """Marca como vencidos os boletos pendentes cujo vencimento já passou."""
    atualizados = []
    for boleto in boletos:
        status = boleto.status_atual(hoje)
        if status != boleto.status:
            logger.info(f"⏰ Boleto vencido: {boleto.descricao}")
            boleto = replace(boleto, status=status)
        atualizados.append(boleto)
    return atualizados
