# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para a entidade Professor.
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Boolean
from sqlalchemy.orm import relationship
from smartschool.database import Base

class Professor(Base):
    __tablename__ = 'professores'

    id = Column(Integer, primary_key=True, index=True)
    registro = Column(Integer, index=True, nullable=False)  # Registro interno na instituição
    nome = Column(String(100), nullable=False)
    sobrenome = Column(String(100), nullable=True)
    telefone = Column(String(20), nullable=True)
    data_ini = Column(DateTime, default=datetime.now, nullable=False)
    data_fim = Column(DateTime, nullable=True)  # None = professor em atividade
    ativo = Column(Boolean, default=True, nullable=False)

    # Disciplinas lecionadas
    disciplinas = relationship("Disciplina", back_populates="professor", order_by="Disciplina.id")

    def __repr__(self):
        return f"<Professor id={self.id} registro={self.registro} nome='{self.nome}'>"
