"""
Database Models — SQLAlchemy.

Tables:
  - inscricoes: uma linha por inscrição, colunas na ordem contratual
    de REGISTRATION_COLUMNS (id autoincremental = posição da linha).
"""

from sqlalchemy import Column, String, Boolean, DateTime, Integer, Text, MetaData, Table
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


class RegistrationRow(Base):
    """
    Linha persistida de uma inscrição. Só recebe INSERT.

    Colunas de texto sem tamanho fixo: o formato dos campos não é
    validado, então o banco também não trunca nem rejeita valores.
    """
    __tablename__ = "inscricoes"

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Identificação
    cpf = Column(String, nullable=False)      # sem índice nem UNIQUE: unicidade é best-effort
    data_nascimento = Column(String, default="")
    nome_completo = Column(String, nullable=False)
    nome_social = Column(String, default="")
    documento_url = Column(Text, default="")          # "" quando não há anexo
    rg = Column(String, default="")
    rg_uf = Column(String, default="")
    rg_orgao_emissor = Column(String, default="")

    # Contato
    telefone = Column(String, default="")
    email = Column(String, default="")

    # Acessibilidade / escolaridade
    possui_deficiencia = Column(Boolean, default=False)
    necessita_atendimento = Column(Boolean, default=False)
    tipo_deficiencia = Column(String, default="")
    tea = Column(Boolean, default=False)
    escola_publica = Column(Boolean, default=False)
    ensino_medio_concluido = Column(Boolean, default=False)

    # Endereço
    cep = Column(String, default="")
    endereco = Column(String, default="")
    bairro = Column(String, default="")
    cidade = Column(String, default="")
    estado = Column(String, default="")
    numero = Column(String, default="")
    complemento = Column(String, default="")

    # Cursos
    curso_opcao_1 = Column(String, default="")
    curso_opcao_2 = Column(String, default="")

    # Consentimentos
    aceite_termos = Column(Boolean, default=False)
    aceite_lgpd = Column(Boolean, default=False)
    aceite_imagem = Column(Boolean, default=False)

    data_envio = Column(DateTime, nullable=False)

    def __repr__(self):
        return f"<Inscricao #{self.id} cpf=***{(self.cpf or '')[-2:]}>"


def registrations_table(metadata: MetaData, name: str) -> Table:
    """Cópia da tabela de inscrições com outro nome (tabela configurável)."""
    return RegistrationRow.__table__.to_metadata(metadata, name=name)
