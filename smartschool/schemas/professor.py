# -*- coding: utf-8 -*-
"""
Schemas Pydantic para a entidade Professor.
"""

from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime

from smartschool.schemas.disciplina import DisciplinaResumoDto

# Schema de cadastro/alteração (também devolvido por GET /getRegister)
class ProfessorRegistrarDto(BaseModel):
    id: int = 0  # Ignorado na escrita: o id vem sempre do banco
    registro: int = 0
    nome: str = Field("", max_length=100)
    sobrenome: Optional[str] = Field(None, max_length=100)
    telefone: Optional[str] = Field(None, max_length=20)
    data_ini: datetime = Field(default_factory=datetime.now)
    data_fim: Optional[datetime] = None
    ativo: bool = True

    class Config:
        from_attributes = True

# Schema de leitura (versão 1)
class ProfessorDto(BaseModel):
    id: int
    registro: int
    nome: str  # Nome completo (nome + sobrenome)
    telefone: Optional[str] = None
    ativo: bool
    data_ini: datetime
    disciplinas: List[DisciplinaResumoDto] = []

    class Config:
        from_attributes = True

# Schema de leitura (versão 2): separa nome e sobrenome e lista os alunos
class ProfessorCompletoDto(BaseModel):
    id: int
    registro: int
    nome: str
    sobrenome: Optional[str] = None
    telefone: Optional[str] = None
    ativo: bool
    data_ini: datetime
    data_fim: Optional[datetime] = None
    disciplinas: List[DisciplinaResumoDto] = []
    alunos: List[str] = []

    class Config:
        from_attributes = True
