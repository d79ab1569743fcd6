"""
Configurações de teste compartilhadas.
"""

import os

# Banco em memória e sem carga inicial; precisa vir antes de importar a aplicação
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_DATABASE"] = "false"

import pytest
from fastapi.testclient import TestClient

from main import app
from smartschool.database import Base, SessionLocal, engine
from smartschool.models.aluno import Aluno
from smartschool.models.aluno_disciplina import AlunoDisciplina
from smartschool.models.disciplina import Disciplina
from smartschool.models.professor import Professor


@pytest.fixture(autouse=True)
def reset_database():
    """Recria as tabelas a cada teste."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def db_session():
    """Fornece uma sessão de banco de dados para testes."""
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def test_client():
    with TestClient(app) as client:
        yield client


@pytest.fixture
def escola(db_session):
    """
    Dois professores, três disciplinas e dois alunos:
    - Lauro leciona Matemática e Física; Roberto leciona Inglês.
    - Marta cursa Matemática e Inglês; Paula cursa Física.
    Retorna um dicionário com os ids criados.
    """
    lauro = Professor(registro=101, nome="Lauro", sobrenome="Oliveira", telefone="1111")
    roberto = Professor(registro=102, nome="Roberto", sobrenome="Soares", telefone="2222")
    matematica = Disciplina(nome="Matemática", carga_horaria=60, professor=lauro)
    fisica = Disciplina(nome="Física", carga_horaria=40, professor=lauro)
    ingles = Disciplina(nome="Inglês", carga_horaria=30, professor=roberto)
    marta = Aluno(matricula=1, nome="Marta", sobrenome="Kent", telefone="3333")
    paula = Aluno(matricula=2, nome="Paula", sobrenome="Isabela", telefone="4444")
    marta.alunos_disciplinas.append(AlunoDisciplina(disciplina=matematica, nota=8.5))
    marta.alunos_disciplinas.append(AlunoDisciplina(disciplina=ingles))
    paula.alunos_disciplinas.append(AlunoDisciplina(disciplina=fisica))

    db_session.add_all([lauro, roberto, matematica, fisica, ingles, marta, paula])
    db_session.commit()

    ids = {
        "lauro": lauro.id,
        "roberto": roberto.id,
        "matematica": matematica.id,
        "fisica": fisica.id,
        "ingles": ingles.id,
        "marta": marta.id,
        "paula": paula.id,
    }
    db_session.expunge_all()
    return ids
