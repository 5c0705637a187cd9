"""
Entity: Registration Record

Uma inscrição completa, pronta para ser anexada à tabela de inscrições.
Modelo puro — sem dependência de framework ou banco.

A ordem de REGISTRATION_COLUMNS é contratual: define a posição de cada
coluna no store persistido. Não reordenar sem migração coordenada.
"""

import re
from dataclasses import dataclass, astuple, fields
from datetime import datetime


REGISTRATION_COLUMNS: tuple[str, ...] = (
    "cpf",
    "data_nascimento",
    "nome_completo",
    "nome_social",
    "documento_url",
    "rg",
    "rg_uf",
    "rg_orgao_emissor",
    "telefone",
    "email",
    "possui_deficiencia",
    "necessita_atendimento",
    "tipo_deficiencia",
    "tea",
    "escola_publica",
    "ensino_medio_concluido",
    "cep",
    "endereco",
    "bairro",
    "cidade",
    "estado",
    "numero",
    "complemento",
    "curso_opcao_1",
    "curso_opcao_2",
    "aceite_termos",
    "aceite_lgpd",
    "aceite_imagem",
    "data_envio",
)

_TRUTHY = {"1", "true", "sim", "s", "yes", "y", "on"}


def only_digits(value) -> str:
    """Remove tudo que não é dígito ("123.456.789-09" → "12345678909")."""
    if value is None:
        return ""
    return re.sub(r"\D", "", str(value))


def to_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in _TRUTHY


def _text(value) -> str:
    if value is None:
        return ""
    return str(value).strip()


def mask_cpf(cpf: str) -> str:
    """Mascara o CPF para logs (***.***.789-09)."""
    digits = only_digits(cpf)
    if len(digits) != 11:
        return "***"
    return f"***.***.{digits[6:9]}-{digits[9:]}"


@dataclass(frozen=True)
class RegistrationRecord:
    """Entidade de domínio: Inscrição (imutável depois de anexada)."""
    cpf: str
    data_nascimento: str
    nome_completo: str
    nome_social: str
    documento_url: str                   # URL do anexo ou "" quando ausente
    rg: str
    rg_uf: str
    rg_orgao_emissor: str
    telefone: str
    email: str
    possui_deficiencia: bool
    necessita_atendimento: bool
    tipo_deficiencia: str
    tea: bool
    escola_publica: bool
    ensino_medio_concluido: bool
    cep: str
    endereco: str
    bairro: str
    cidade: str
    estado: str
    numero: str
    complemento: str
    curso_opcao_1: str
    curso_opcao_2: str
    aceite_termos: bool
    aceite_lgpd: bool
    aceite_imagem: bool
    data_envio: datetime                 # atribuído pelo servidor, sempre a última coluna

    @classmethod
    def from_form(cls, form: dict, documento_url: str, data_envio: datetime) -> "RegistrationRecord":
        """Monta o registro a partir do formulário bruto do cliente."""
        values = {}
        for f in fields(cls):
            if f.name == "documento_url":
                values[f.name] = documento_url or ""
            elif f.name == "data_envio":
                values[f.name] = data_envio
            elif f.name in ("cpf", "cep"):
                values[f.name] = only_digits(form.get(f.name))
            elif f.type is bool:
                values[f.name] = to_bool(form.get(f.name))
            else:
                values[f.name] = _text(form.get(f.name))
        return cls(**values)

    def to_row(self) -> list:
        """Valores na ordem contratual de REGISTRATION_COLUMNS."""
        return list(astuple(self))

    def as_dict(self) -> dict:
        return dict(zip(REGISTRATION_COLUMNS, self.to_row()))
