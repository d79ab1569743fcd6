# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para a entidade Aluno.
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, Date, DateTime, Boolean
from sqlalchemy.orm import relationship
from smartschool.database import Base

class Aluno(Base):
    __tablename__ = "alunos"

    id = Column(Integer, primary_key=True, index=True)
    matricula = Column(Integer, index=True, nullable=False)
    nome = Column(String(100), index=True, nullable=False)
    sobrenome = Column(String(100), nullable=True)
    telefone = Column(String(20), nullable=True)
    data_nasc = Column(Date, nullable=True)
    data_ini = Column(DateTime, default=datetime.now, nullable=False)
    data_fim = Column(DateTime, nullable=True)
    ativo = Column(Boolean, default=True, nullable=False)

    # Exclusão física do aluno remove também as matrículas
    alunos_disciplinas = relationship(
        "AlunoDisciplina", back_populates="aluno", cascade="all, delete-orphan",
        order_by="AlunoDisciplina.disciplina_id",
    )
    alunos_cursos = relationship("AlunoCurso", back_populates="aluno", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Aluno id={self.id} matricula={self.matricula} nome='{self.nome}'>"
