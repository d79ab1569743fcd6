# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para a entidade Disciplina.
"""

from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from smartschool.database import Base

class Disciplina(Base):
    __tablename__ = 'disciplinas'

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(100), nullable=False)
    carga_horaria = Column(Integer, nullable=True)
    professor_id = Column(Integer, ForeignKey('professores.id'), nullable=True)
    curso_id = Column(Integer, ForeignKey('cursos.id'), nullable=True)
    prerequisito_id = Column(Integer, ForeignKey('disciplinas.id'), nullable=True)

    professor = relationship("Professor", back_populates="disciplinas")
    curso = relationship("Curso", back_populates="disciplinas")
    prerequisito = relationship("Disciplina", remote_side=[id])
    alunos_disciplinas = relationship(
        "AlunoDisciplina", back_populates="disciplina", cascade="all, delete-orphan",
        order_by="AlunoDisciplina.aluno_id",
    )
