import logging
from datetime import date

from smartschool.database import SessionLocal

# Importação de todos os modelos para garantir que o SQLAlchemy registre tudo
from smartschool.models.professor import Professor
from smartschool.models.aluno import Aluno
from smartschool.models.curso import Curso
from smartschool.models.disciplina import Disciplina
from smartschool.models.aluno_disciplina import AlunoDisciplina
from smartschool.models.aluno_curso import AlunoCurso

logger = logging.getLogger(__name__)

PROFESSORES = [
    (1, "Lauro", "Oliveira"),
    (2, "Roberto", "Soares"),
    (3, "Ronaldo", "Marconi"),
    (4, "Rodrigo", "Carvalho"),
    (5, "Alexandre", "Montanha"),
]

CURSOS = ["Tecnologia da Informação", "Sistemas de Informação", "Ciência da Computação"]

# (nome, índice do professor, índice do curso)
DISCIPLINAS = [
    ("Matemática", 0, 0),
    ("Matemática", 0, 1),
    ("Física", 1, 2),
    ("Português", 2, 0),
    ("Inglês", 3, 1),
    ("Inglês", 3, 2),
    ("Programação", 4, 1),
    ("Programação", 4, 2),
]

ALUNOS = [
    (1, "Marta", "Kent", "33225555", date(2005, 11, 28)),
    (2, "Paula", "Isabela", "3354288", date(2005, 4, 18)),
    (3, "Laura", "Antonia", "55668899", date(2005, 1, 12)),
    (4, "Luiza", "Maria", "6565659", date(2005, 9, 3)),
    (5, "Lucas", "Machado", "565685415", date(2005, 7, 21)),
    (6, "Pedro", "Alvares", "456454545", date(2005, 6, 30)),
    (7, "Paulo", "José", "9874512", date(2005, 2, 14)),
]

# (índice do aluno, índices das disciplinas)
MATRICULAS = [
    (0, [1, 2, 4, 5, 6]),
    (1, [1, 3, 4]),
    (2, [1, 3, 5, 6]),
    (3, [0, 4, 6]),
    (4, [0, 3, 4, 6]),
    (5, [0, 2, 4, 5, 6]),
    (6, [0, 1, 2, 3, 4, 5, 6]),
]


def seed_database():
    """Popula o banco com dados de demonstração se ainda não houver professores."""
    db = SessionLocal()

    try:
        if db.query(Professor).first():
            logger.info("Banco já possui dados; carga inicial ignorada.")
            return

        professores = [Professor(registro=r, nome=n, sobrenome=s) for r, n, s in PROFESSORES]
        cursos = [Curso(nome=nome) for nome in CURSOS]
        disciplinas = [
            Disciplina(nome=nome, carga_horaria=60, professor=professores[p], curso=cursos[c])
            for nome, p, c in DISCIPLINAS
        ]
        alunos = [
            Aluno(matricula=m, nome=n, sobrenome=s, telefone=t, data_nasc=nasc)
            for m, n, s, t, nasc in ALUNOS
        ]
        for indice_aluno, indices in MATRICULAS:
            for indice in indices:
                alunos[indice_aluno].alunos_disciplinas.append(
                    AlunoDisciplina(disciplina=disciplinas[indice])
                )
            alunos[indice_aluno].alunos_cursos.append(AlunoCurso(curso=cursos[indice_aluno % len(cursos)]))

        db.add_all(professores + cursos + disciplinas + alunos)
        db.commit()
        logger.info(f"Carga inicial concluída: {len(professores)} professores, {len(alunos)} alunos.")
    except Exception:
        db.rollback()
        logger.exception("Erro na carga inicial de dados")
        raise
    finally:
        db.close()
