# -*- coding: utf-8 -*-
"""
Schemas Pydantic resumidos de Disciplina, usados dentro dos DTOs de Aluno e Professor.
"""

from pydantic import BaseModel
from typing import Optional

class DisciplinaResumoDto(BaseModel):
    id: int
    nome: str
    class Config: from_attributes = True

class DisciplinaAlunoDto(DisciplinaResumoDto):
    professor: Optional[str] = None  # Nome completo do professor da disciplina
    nota: Optional[float] = None
