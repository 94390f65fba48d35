from dataclasses import dataclass, replace
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional
import re


class ErroBoleto(str, Enum):
    """Motivos pelos quais um código de boleto é recusado."""
    TAMANHO_INVALIDO = "InvalidLength"
    LINHA_DIGITAVEL_INVALIDA = "InvalidTypeableLineChecksum"
    CODIGO_BARRAS_INVALIDO = "InvalidBarcodeChecksum"
    CODIGO_DERIVADO_INCONSISTENTE = "InconsistentDerivedBarcode"


class ErroLeituraPDF(Exception):
    """O arquivo não é um PDF legível (ou não contém texto)."""


def _data_ou_none(valor):
    return date.fromisoformat(valor) if valor else None


def _decimal_ou_none(valor):
    return Decimal(valor) if valor is not None else None


@dataclass(frozen=True)
class ResultadoBoleto:
    """
    Resultado de uma chamada a parse_boleto.
    Quando inválido, os códigos ficam vazios e `erro`/`motivo` explicam a recusa.
    """
    valido: bool
    codigo_barras: str = ""
    linha_digitavel: str = ""
    banco: Optional[str] = None
    valor: Optional[Decimal] = None
    vencimento: Optional[date] = None
    erro: Optional[ErroBoleto] = None
    motivo: Optional[str] = None

    @classmethod
    def invalido(cls, erro, motivo):
        return cls(valido=False, erro=erro, motivo=motivo)

    def to_dict(self):
        return {
            "valido": self.valido,
            "codigo_barras": self.codigo_barras,
            "linha_digitavel": self.linha_digitavel,
            "banco": self.banco,
            "valor": str(self.valor) if self.valor is not None else None,
            "vencimento": self.vencimento.isoformat() if self.vencimento else None,
            "erro": self.erro.value if self.erro else None,
            "motivo": self.motivo,
        }

    @classmethod
    def from_dict(cls, dados):
        return cls(
            valido=bool(dados["valido"]),
            codigo_barras=dados.get("codigo_barras") or "",
            linha_digitavel=dados.get("linha_digitavel") or "",
            banco=dados.get("banco"),
            valor=_decimal_ou_none(dados.get("valor")),
            vencimento=_data_ou_none(dados.get("vencimento")),
            erro=ErroBoleto(dados["erro"]) if dados.get("erro") else None,
            motivo=dados.get("motivo"),
        )


@dataclass
class DadosExtraidos:
    """
    Saco de campos encontrados por heurística em texto livre (corpo de e-mail, PDF).
    Qualquer campo pode faltar; os códigos ainda precisam passar pelo parse_boleto.
    """
    codigo_barras: Optional[str] = None
    linha_digitavel: Optional[str] = None
    valor: Optional[Decimal] = None
    vencimento: Optional[date] = None
    beneficiario: Optional[str] = None
    pagador: Optional[str] = None
    numero_documento: Optional[str] = None
    pix: Optional[str] = None

    def encontrou_codigo(self):
        return bool(self.codigo_barras or self.linha_digitavel)


class BoletoStatus(str, Enum):
    PENDENTE = "PENDENTE"
    PAGO = "PAGO"
    VENCIDO = "VENCIDO"
    CANCELADO = "CANCELADO"


@dataclass
class Boleto:
    """
    Representação padronizada de um boleto cadastrado pelo usuário.
    Responsável por garantir que os dados básicos estejam limpos.
    """
    descricao: str
    codigo_barras: str
    linha_digitavel: str
    valor: Decimal = Decimal("0")
    vencimento: Optional[date] = None
    banco: Optional[str] = None
    beneficiario: Optional[str] = None
    numero_documento: Optional[str] = None
    status: BoletoStatus = BoletoStatus.PENDENTE
    data_pagamento: Optional[date] = None
    observacoes: Optional[str] = None

    def __post_init__(self):
        """
        Executado automaticamente após a criação do objeto.
        Limpa os códigos para manter apenas números.
        """
        # Mesma regra de core.parser_boleto.limpar_codigo (importá-la aqui criaria ciclo)
        self.codigo_barras = re.sub(r'[^0-9]', '', self.codigo_barras or '')
        self.linha_digitavel = re.sub(r'[^0-9]', '', self.linha_digitavel or '')

    def status_atual(self, hoje=None):
        """Boletos pendentes com vencimento anterior a `hoje` contam como vencidos."""
        hoje = hoje or date.today()
        if self.status == BoletoStatus.PENDENTE and self.vencimento and self.vencimento < hoje:
            return BoletoStatus.VENCIDO
        return self.status

    def marcar_como_pago(self, quando=None):
        return replace(self, status=BoletoStatus.PAGO, data_pagamento=quando or date.today())

    def to_dict(self):
        return {
            "descricao": self.descricao,
            "codigo_barras": self.codigo_barras,
            "linha_digitavel": self.linha_digitavel,
            "valor": str(self.valor),
            "vencimento": self.vencimento.isoformat() if self.vencimento else None,
            "banco": self.banco,
            "beneficiario": self.beneficiario,
            "numero_documento": self.numero_documento,
            "status": self.status.value,
            "data_pagamento": self.data_pagamento.isoformat() if self.data_pagamento else None,
            "observacoes": self.observacoes,
        }

    @classmethod
    def from_dict(cls, dados):
        return cls(
            descricao=dados["descricao"],
            codigo_barras=dados.get("codigo_barras", ""),
            linha_digitavel=dados.get("linha_digitavel", ""),
            valor=Decimal(dados.get("valor") or "0"),
            vencimento=_data_ou_none(dados.get("vencimento")),
            banco=dados.get("banco"),
            beneficiario=dados.get("beneficiario"),
            numero_documento=dados.get("numero_documento"),
            status=BoletoStatus(dados.get("status", BoletoStatus.PENDENTE.value)),
            data_pagamento=_data_ou_none(dados.get("data_pagamento")),
            observacoes=dados.get("observacoes"),
        )
