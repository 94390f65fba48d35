import re
from datetime import date, timedelta
from decimal import Decimal

from core.bancos import BANCOS_PADRAO
from core.logger import logger
from core.models import ErroBoleto, ResultadoBoleto

TAMANHO_CODIGO_BARRAS = 44
TAMANHO_LINHA_DIGITAVEL = 47

# Data base do fator de vencimento (FEBRABAN)
DATA_BASE_VENCIMENTO = date(1997, 10, 7)


def limpar_codigo(codigo):
    """Remove tudo que não for dígito (pontos, espaços, hífens)."""
    return re.sub(r'[^0-9]', '', codigo or '')


def calcular_dv_modulo10(numero):
    """
    Dígito verificador módulo 10, usado nos três campos da linha digitável.
    Pesos 2,1,2,1... da direita para a esquerda; produtos acima de 9 somam os próprios dígitos.
    """
    soma = 0
    peso = 2
    for digito in reversed(numero):
        multiplicacao = int(digito) * peso
        soma += multiplicacao - 9 if multiplicacao > 9 else multiplicacao
        peso = 1 if peso == 2 else 2

    return (10 - soma % 10) % 10


def calcular_dv_modulo11(numero):
    """
    Dígito verificador geral do código de barras.
    Pesos 2 a 9 (cíclicos) da direita para a esquerda; resultados 0, 10 e 11 viram 1.
    """
    soma = 0
    multiplicador = 2
    for digito in reversed(numero):
        soma += int(digito) * multiplicador
        multiplicador = 2 if multiplicador == 9 else multiplicador + 1

    dv = 11 - soma % 11
    if dv in (0, 10, 11):
        return 1
    return dv


def _campos_linha(limpa):
    # (campo, dv informado) dos três blocos verificados por módulo 10
    return [
        (limpa[0:9], int(limpa[9])),
        (limpa[10:20], int(limpa[20])),
        (limpa[21:31], int(limpa[31])),
    ]


def validar_linha_digitavel(linha):
    limpa = limpar_codigo(linha)
    if len(limpa) != TAMANHO_LINHA_DIGITAVEL:
        return False

    for i, (campo, dv) in enumerate(_campos_linha(limpa), start=1):
        dv_calculado = calcular_dv_modulo10(campo)
        if dv_calculado != dv:
            logger.debug(f"🔐 Campo {i} da linha digitável: DV {dv}, esperado {dv_calculado}")
            return False
    return True


def validar_codigo_barras(codigo):
    limpa = limpar_codigo(codigo)
    if len(limpa) != TAMANHO_CODIGO_BARRAS:
        return False

    dv = int(limpa[4])
    dv_calculado = calcular_dv_modulo11(limpa[:4] + limpa[5:])
    logger.debug(f"🔐 Validação DV do código de barras {limpa}: encontrado={dv} calculado={dv_calculado}")
    return dv == dv_calculado


def linha_para_codigo_barras(linha):
    limpa = limpar_codigo(linha)
    if len(limpa) != TAMANHO_LINHA_DIGITAVEL:
        raise ValueError(f"Linha digitável deve ter {TAMANHO_LINHA_DIGITAVEL} dígitos, recebeu {len(limpa)}")

    return (
        limpa[0:4]      # banco + moeda
        + limpa[32]     # DV geral
        + limpa[33:47]  # fator de vencimento + valor
        + limpa[4:9]    # campo livre, parte 1
        + limpa[10:20]  # campo livre, parte 2
        + limpa[21:31]  # campo livre, parte 3
    )


def codigo_barras_para_linha(codigo):
    limpa = limpar_codigo(codigo)
    if len(limpa) != TAMANHO_CODIGO_BARRAS:
        raise ValueError(f"Código de barras deve ter {TAMANHO_CODIGO_BARRAS} dígitos, recebeu {len(limpa)}")

    campo1 = limpa[0:4] + limpa[19:24]
    campo2 = limpa[24:34]
    campo3 = limpa[34:44]

    return (
        f"{campo1}{calcular_dv_modulo10(campo1)}"
        f"{campo2}{calcular_dv_modulo10(campo2)}"
        f"{campo3}{calcular_dv_modulo10(campo3)}"
        f"{limpa[4]}{limpa[5:19]}"
    )


def identificar_banco(codigo, bancos=None):
    limpa = limpar_codigo(codigo)
    if len(limpa) < 3:
        return None
    tabela = BANCOS_PADRAO if bancos is None else bancos
    return tabela.get(limpa[0:3])


def extrair_valor(codigo):
    """Valor em reais das posições 9-19 do código de barras. Zero significa valor não informado."""
    limpa = limpar_codigo(codigo)
    if len(limpa) != TAMANHO_CODIGO_BARRAS:
        return None

    centavos = int(limpa[9:19])
    if centavos == 0:
        return None
    return Decimal(centavos) / 100


def extrair_vencimento(codigo):
    """Vencimento a partir do fator (posições 5-9). Fator zero significa sem vencimento."""
    limpa = limpar_codigo(codigo)
    if len(limpa) != TAMANHO_CODIGO_BARRAS:
        return None

    fator = int(limpa[5:9])
    if fator == 0:
        return None
    return DATA_BASE_VENCIMENTO + timedelta(days=fator)


def formatar_linha_digitavel(linha):
    """AAAAA.AAAAA BBBBB.BBBBBB CCCCC.CCCCCC D EEEEEEEEEEEEEE; qualquer outra coisa volta intacta."""
    limpa = limpar_codigo(linha)
    if len(limpa) != TAMANHO_LINHA_DIGITAVEL:
        return linha

    return (
        f"{limpa[0:5]}.{limpa[5:10]} "
        f"{limpa[10:15]}.{limpa[15:21]} "
        f"{limpa[21:26]}.{limpa[26:32]} "
        f"{limpa[32]} "
        f"{limpa[33:47]}"
    )


def _motivo_tamanho(tamanho):
    if tamanho < TAMANHO_CODIGO_BARRAS:
        return (f"Código muito curto ({tamanho} dígitos). "
                f"Use 44 dígitos (código de barras) ou 47 dígitos (linha digitável)")
    if tamanho > TAMANHO_LINHA_DIGITAVEL:
        return (f"Código muito longo ({tamanho} dígitos). "
                f"Use 44 dígitos (código de barras) ou 47 dígitos (linha digitável)")
    return (f"Código com {tamanho} dígitos não corresponde a nenhum formato. "
            f"Use 44 dígitos (código de barras) ou 47 dígitos (linha digitável)")


def _resultado_valido(codigo_barras, linha_digitavel, bancos):
    return ResultadoBoleto(
        valido=True,
        codigo_barras=codigo_barras,
        linha_digitavel=linha_digitavel,
        banco=identificar_banco(codigo_barras, bancos),
        valor=extrair_valor(codigo_barras),
        vencimento=extrair_vencimento(codigo_barras),
    )


def parse_boleto(codigo, bancos=None):
    """
    Ponto de entrada: aceita código de barras (44) ou linha digitável (47) em qualquer
    formatação e devolve um ResultadoBoleto. Entradas malformadas nunca geram exceção.
    """
    limpa = limpar_codigo(codigo)

    if len(limpa) == TAMANHO_LINHA_DIGITAVEL:
        if not validar_linha_digitavel(limpa):
            return ResultadoBoleto.invalido(ErroBoleto.LINHA_DIGITAVEL_INVALIDA, "Linha digitável inválida")

        codigo_barras = linha_para_codigo_barras(limpa)
        # Os campos podem estar corretos e o código reconstruído não fechar o DV geral
        if not validar_codigo_barras(codigo_barras):
            logger.debug(f"⚠️ Linha {limpa} passou nos campos mas gerou código de barras inválido")
            return ResultadoBoleto.invalido(
                ErroBoleto.CODIGO_DERIVADO_INCONSISTENTE,
                "Código de barras derivado da linha digitável é inválido",
            )

        return _resultado_valido(codigo_barras, limpa, bancos)

    if len(limpa) == TAMANHO_CODIGO_BARRAS:
        if not validar_codigo_barras(limpa):
            return ResultadoBoleto.invalido(ErroBoleto.CODIGO_BARRAS_INVALIDO, "Código de barras inválido")

        return _resultado_valido(limpa, codigo_barras_para_linha(limpa), bancos)

    return ResultadoBoleto.invalido(ErroBoleto.TAMANHO_INVALIDO, _motivo_tamanho(len(limpa)))
