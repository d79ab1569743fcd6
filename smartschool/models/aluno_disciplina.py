# smartschool/models/aluno_disciplina.py
from sqlalchemy import Column, Integer, Float, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from smartschool.database import Base

class AlunoDisciplina(Base):
    """Matrícula de um aluno em uma disciplina."""
    __tablename__ = "alunos_disciplinas"

    aluno_id = Column(Integer, ForeignKey("alunos.id"), primary_key=True)
    disciplina_id = Column(Integer, ForeignKey("disciplinas.id"), primary_key=True)
    nota = Column(Float, nullable=True)
    data_ini = Column(DateTime, default=datetime.now)
    data_fim = Column(DateTime, nullable=True)

    aluno = relationship("Aluno", back_populates="alunos_disciplinas")
    disciplina = relationship("Disciplina", back_populates="alunos_disciplinas")
