# smartschool/models/aluno_curso.py
from sqlalchemy import Column, Integer, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from smartschool.database import Base

class AlunoCurso(Base):
    __tablename__ = "alunos_cursos"

    aluno_id = Column(Integer, ForeignKey("alunos.id"), primary_key=True)
    curso_id = Column(Integer, ForeignKey("cursos.id"), primary_key=True)
    data_ini = Column(DateTime, default=datetime.now)
    data_fim = Column(DateTime, nullable=True)

    aluno = relationship("Aluno", back_populates="alunos_cursos")
    curso = relationship("Curso", back_populates="alunos_cursos")
