# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para a entidade Curso.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from smartschool.database import Base

class Curso(Base):
    __tablename__ = 'cursos'

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(100), nullable=False)

    disciplinas = relationship("Disciplina", back_populates="curso")
    alunos_cursos = relationship("AlunoCurso", back_populates="curso", cascade="all, delete-orphan")
