import re
from datetime import date
from decimal import Decimal, InvalidOperation

from core.logger import logger
from core.models import DadosExtraidos
from core.parser_boleto import linha_para_codigo_barras

# Linha digitável bancária: AAAAA.AAAAA BBBBB.BBBBBB CCCCC.CCCCCC D EEEEEEEEEEEEEE
REGEX_LINHA = r'\d{5}[\.\s]+\d{5}[\.\s]+\d{5}[\.\s]+\d{6}[\.\s]+\d{5}[\.\s]+\d{6}[\.\s]+\d[\.\s]+\d{14}'
REGEX_LINHA_SIMPLES = r'\d{5}\.?\d{5}\s+\d{5}\.?\d{6}\s+\d{5}\.?\d{6}\s+\d\s+\d{14}'
# Linha digitável sem pontuação, desde que não faça parte de uma sequência maior
REGEX_LINHA_CORRIDA = r'(?<!\d)\d{47}(?!\d)'
REGEX_CODIGO_BARRAS = r'(?<!\d)\d{44}(?!\d)'

# Pix Copia e Cola (BRCode completo)
REGEX_PIX = r'000201[\s\S]*?6304[A-Fa-f0-9]{4}'

REGEX_MOEDA = r'\d{1,3}(?:\.\d{3})*,\d{2}'
REGEXES_VALOR = [
    r'\(=\)\s*Valor\s+(?:do\s+Documento|Cobrado)[\s:]*(' + REGEX_MOEDA + ')',
    r'Valor\s+(?:do\s+Documento|Cobrado)[\s:]*(' + REGEX_MOEDA + ')',
    r'(?:Valor|VALOR)[\s:=]*R?\$?\s*(' + REGEX_MOEDA + ')',
    r'R\$\s*(' + REGEX_MOEDA + ')',
]

REGEXES_VENCIMENTO = [
    r'(?:Data\s+d[eo]\s+)?Vencimento[\s:]*(\d{2}[/\-]\d{2}[/\-]\d{4})',
    r'Vencimento[\s:]*(\d{2}[/\-]\d{2}[/\-]\d{2})\b',
    # Qualquer data dd/mm/aaaa no texto
    r'(\d{2}/\d{2}/\d{4})',
]

REGEX_EMPRESA_CNPJ = r'([A-ZÇÃÕÁÉÍÓÚ][A-Za-zÇÃÕÁÉÍÓÚçãõáéíóú \t\.]+?)[ \t]+(\d{2}\.\d{3}\.\d{3}/\d{4}-\d{2})'
REGEX_BENEFICIARIO = r'Benefici[aá]rio[\s:]+([^\n]{10,100}?)(?=\s+(?:Local|Endere[çc]o|CEP|Ag[êe]ncia|Vencimento|\d{2}/)|\n|$)'
REGEX_PAGADOR = r'(?:Pagador|Sacado)[\s:/]*([A-ZÇÃÕÁÉÍÓÚ][^\n\d]{4,100})'
REGEX_DOCUMENTO = (r'(?:Nosso\s+N[uú]mero|N[º°]\s*do\s+Documento|N[º°]\s*Documento|'
                   r'Nr\.\s*do\s+Documento|N[uú]mero\s+do\s+Documento)[\s:]*(\d+[\-/]?\d*)')

# Trechos que a heurística de beneficiário costuma confundir com nomes
RUIDO_BENEFICIARIO = ("Local de Pagamento", "Endereço", "Agência")


def _para_decimal(valor_br):
    """'1.367,30' -> Decimal('1367.30')"""
    try:
        return Decimal(valor_br.replace('.', '').replace(',', '.'))
    except InvalidOperation:
        return None


def extrair_linha_digitavel(texto):
    for regex in (REGEX_LINHA, REGEX_LINHA_SIMPLES, REGEX_LINHA_CORRIDA):
        for match in re.finditer(regex, texto):
            linha = re.sub(r'\D', '', match.group(0))
            if len(linha) == 47:
                logger.debug(f"🔍 Linha digitável encontrada: {match.group(0)} -> {linha}")
                return linha
    return None


def extrair_codigo_barras(texto):
    """
    Procura exatamente 44 dígitos seguidos, primeiro no texto original e depois
    no texto sem espaços (códigos impressos em blocos).
    """
    for candidato in (texto, re.sub(r'\s+', '', texto)):
        match = re.search(REGEX_CODIGO_BARRAS, candidato)
        if match:
            return match.group(0)
    return None


def extrair_valor_da_linha(linha):
    """
    Decodifica o valor diretamente da linha digitável (últimos 10 dígitos).
    Zero significa que o boleto não traz o valor embutido.
    """
    if not linha or len(linha) != 47:
        return None

    centavos = int(linha[37:47])
    if centavos > 0:
        return Decimal(centavos) / 100
    return None


def extrair_valor_do_texto(texto):
    for regex in REGEXES_VALOR:
        match = re.search(regex, texto, re.IGNORECASE)
        if match:
            valor = _para_decimal(match.group(1))
            if valor is not None:
                logger.debug(f"💰 Valor extraído do texto: {match.group(0)} -> {valor}")
                return valor
    return None


def extrair_vencimento_do_texto(texto):
    for regex in REGEXES_VENCIMENTO:
        for match in re.finditer(regex, texto, re.IGNORECASE):
            dia, mes, ano = re.split(r'[/\-]', match.group(1))
            if len(ano) == 2:
                ano = f"19{ano}" if int(ano) > 50 else f"20{ano}"
            try:
                return date(int(ano), int(mes), int(dia))
            except ValueError:
                # 31/02/2024 e afins: tenta a próxima ocorrência
                continue
    return None


def extrair_beneficiario(texto):
    for match in re.finditer(REGEX_EMPRESA_CNPJ, texto):
        nome = ' '.join(match.group(1).split())
        if len(nome) >= 10 and not any(ruido in nome for ruido in RUIDO_BENEFICIARIO):
            return f"{nome} {match.group(2)}"

    match = re.search(REGEX_BENEFICIARIO, texto, re.IGNORECASE)
    if match:
        # Limpa números isolados no final
        nome = re.sub(r'\s+\d+[\s\d\-/]*$', '', match.group(1)).strip()
        if 10 <= len(nome) <= 100 and "Local de Pagamento" not in nome:
            return nome
    return None


def extrair_pagador(texto):
    match = re.search(REGEX_PAGADOR, texto, re.IGNORECASE)
    if not match:
        return None

    nome = match.group(1).strip()
    # Remove CPF/CNPJ colados ao nome
    nome = re.sub(r'\s+\d{3}\.\d{3}\.\d{3}-\d{2}.*$', '', nome)
    nome = re.sub(r'\s+\d{2}\.\d{3}\.\d{3}/\d{4}-\d{2}.*$', '', nome).strip()
    if 5 <= len(nome) <= 100:
        return nome
    return None


def extrair_numero_documento(texto):
    for match in re.finditer(REGEX_DOCUMENTO, texto, re.IGNORECASE):
        doc = match.group(1).strip()
        # Descarta datas e números curtos demais
        if len(doc) >= 3 and '/' not in doc:
            return doc

    for linha in texto.split('\n'):
        if 'Documento' in linha and 'Valor do Documento' not in linha:
            match = re.search(r'\b(\d{5,})\b', linha)
            if match:
                return match.group(1)
    return None


def extrair_dados_de_texto(texto):
    """
    Inteligência central: recebe qualquer string (corpo de e-mail ou texto de PDF)
    e retorna os campos que conseguir identificar. Nada aqui é validado:
    os códigos encontrados precisam passar pelo parse_boleto.
    """
    res = DadosExtraidos()

    if not texto:
        return res

    # 1. Busca Linha Digitável e, a partir dela, o código de barras
    res.linha_digitavel = extrair_linha_digitavel(texto)
    if res.linha_digitavel:
        res.codigo_barras = linha_para_codigo_barras(res.linha_digitavel)
        res.valor = extrair_valor_da_linha(res.linha_digitavel)
    else:
        res.codigo_barras = extrair_codigo_barras(texto)

    # 2. Busca Pix Copia e Cola
    m_pix = re.search(REGEX_PIX, texto)
    if m_pix:
        res.pix = re.sub(r'\s+', '', m_pix.group(0))

    # 3. Valor por extenso (R$) se a linha digitável não informou o valor
    if res.valor is None:
        res.valor = extrair_valor_do_texto(texto)

    res.vencimento = extrair_vencimento_do_texto(texto)
    res.beneficiario = extrair_beneficiario(texto)
    res.pagador = extrair_pagador(texto)
    res.numero_documento = extrair_numero_documento(texto)

    return res
