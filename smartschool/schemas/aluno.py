# smartschool/schemas/aluno.py
from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import date, datetime

from smartschool.schemas.disciplina import DisciplinaAlunoDto

class AlunoRegistrarDto(BaseModel):
    id: int = 0  # Ignorado na escrita
    matricula: int = 0
    nome: str = Field("", max_length=100)
    sobrenome: Optional[str] = Field(None, max_length=100)
    telefone: Optional[str] = Field(None, max_length=20)
    data_nasc: Optional[date] = None
    data_ini: datetime = Field(default_factory=datetime.now)
    data_fim: Optional[datetime] = None
    ativo: bool = True
    class Config: from_attributes = True

class AlunoDto(BaseModel):
    id: int
    matricula: int
    nome: str  # Nome completo
    telefone: Optional[str] = None
    idade: Optional[int] = None
    data_ini: datetime
    ativo: bool
    disciplinas: List[DisciplinaAlunoDto] = []
    class Config: from_attributes = True

class TrocaEstadoDto(BaseModel):
    estado: bool = Field(..., alias="Estado")

    class Config:
        populate_by_name = True

class MensagemDto(BaseModel):
    message: str
