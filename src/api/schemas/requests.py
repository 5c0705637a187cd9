"""
Pydantic schemas — Request models para a API.

Só valida forma (tipos, presença). Normalização (CPF/CEP só dígitos,
booleanos "sim"/"on") fica na entidade RegistrationRecord.
"""

from pydantic import BaseModel, Field


class AttachmentRequest(BaseModel):
    content_base64: str
    mime_type: str = "application/octet-stream"
    filename: str = "documento"


class RegistrationRequest(BaseModel):
    model_config = {"extra": "ignore"}

    cpf: str = Field(..., min_length=1)
    data_nascimento: str = ""
    nome_completo: str = Field(..., min_length=1)
    nome_social: str = ""
    rg: str = ""
    rg_uf: str = ""
    rg_orgao_emissor: str = ""
    telefone: str = ""
    email: str = ""

    possui_deficiencia: bool | str = False
    necessita_atendimento: bool | str = False
    tipo_deficiencia: str = ""
    tea: bool | str = False
    escola_publica: bool | str = False
    ensino_medio_concluido: bool | str = False

    cep: str = ""
    endereco: str = ""
    bairro: str = ""
    cidade: str = ""
    estado: str = ""
    numero: str = ""
    complemento: str = ""

    curso_opcao_1: str = ""
    curso_opcao_2: str = ""

    aceite_termos: bool | str = False
    aceite_lgpd: bool | str = False
    aceite_imagem: bool | str = False

    arquivo: AttachmentRequest | None = None
