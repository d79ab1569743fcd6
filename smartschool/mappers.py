# -*- coding: utf-8 -*-
"""
Conversões explícitas entre os modelos SQLAlchemy e os DTOs Pydantic.

Regras:
- Leitura (modelo -> DTO) desnormaliza relações: nomes, não só ids.
- Escrita (DTO -> modelo) sobrepõe todos os campos do DTO, mas nunca o id
  da entidade já carregada.
- Coleções são convertidas elemento a elemento, na ordem de origem.
"""

from datetime import date
from typing import Callable, Iterable, List, Optional, TypeVar

from smartschool.models.aluno import Aluno
from smartschool.models.professor import Professor
from smartschool.schemas.aluno import AlunoDto, AlunoRegistrarDto
from smartschool.schemas.disciplina import DisciplinaAlunoDto, DisciplinaResumoDto
from smartschool.schemas.professor import ProfessorCompletoDto, ProfessorDto, ProfessorRegistrarDto

S = TypeVar("S")
D = TypeVar("D")


def map_list(mapper: Callable[[S], D], items: Iterable[S]) -> List[D]:
    return [mapper(item) for item in items]


def nome_completo(nome: str, sobrenome: Optional[str]) -> str:
    return f"{nome} {sobrenome}".strip() if sobrenome else nome


def calcular_idade(data_nasc: Optional[date], hoje: Optional[date] = None) -> Optional[int]:
    """Idade em anos completos, ou None quando a data de nascimento é desconhecida."""
    if data_nasc is None:
        return None
    hoje = hoje or date.today()
    idade = hoje.year - data_nasc.year
    if (hoje.month, hoje.day) < (data_nasc.month, data_nasc.day):
        idade -= 1
    return idade


# --- Professor ---

def professor_to_dto(professor: Professor) -> ProfessorDto:
    return ProfessorDto(
        id=professor.id,
        registro=professor.registro,
        nome=nome_completo(professor.nome, professor.sobrenome),
        telefone=professor.telefone,
        ativo=professor.ativo,
        data_ini=professor.data_ini,
        disciplinas=[DisciplinaResumoDto(id=d.id, nome=d.nome) for d in professor.disciplinas],
    )


def professor_to_completo_dto(professor: Professor) -> ProfessorCompletoDto:
    alunos = []
    for disciplina in professor.disciplinas:
        for matricula in disciplina.alunos_disciplinas:
            nome = nome_completo(matricula.aluno.nome, matricula.aluno.sobrenome)
            if nome not in alunos:
                alunos.append(nome)

    return ProfessorCompletoDto(
        id=professor.id,
        registro=professor.registro,
        nome=professor.nome,
        sobrenome=professor.sobrenome,
        telefone=professor.telefone,
        ativo=professor.ativo,
        data_ini=professor.data_ini,
        data_fim=professor.data_fim,
        disciplinas=[DisciplinaResumoDto(id=d.id, nome=d.nome) for d in professor.disciplinas],
        alunos=alunos,
    )


def professor_to_registrar_dto(professor: Professor) -> ProfessorRegistrarDto:
    return ProfessorRegistrarDto(
        id=professor.id,
        registro=professor.registro,
        nome=professor.nome,
        sobrenome=professor.sobrenome,
        telefone=professor.telefone,
        data_ini=professor.data_ini,
        data_fim=professor.data_fim,
        ativo=professor.ativo,
    )


def apply_professor_registrar(dto: ProfessorRegistrarDto, professor: Professor) -> Professor:
    professor.registro = dto.registro
    professor.nome = dto.nome
    professor.sobrenome = dto.sobrenome
    professor.telefone = dto.telefone
    professor.data_ini = dto.data_ini
    professor.data_fim = dto.data_fim
    professor.ativo = dto.ativo
    return professor


def professor_from_registrar(dto: ProfessorRegistrarDto) -> Professor:
    return apply_professor_registrar(dto, Professor())


# --- Aluno ---

def aluno_to_dto(aluno: Aluno) -> AlunoDto:
    disciplinas = []
    for matricula in aluno.alunos_disciplinas:
        disciplina = matricula.disciplina
        professor = disciplina.professor
        disciplinas.append(DisciplinaAlunoDto(
            id=disciplina.id,
            nome=disciplina.nome,
            professor=nome_completo(professor.nome, professor.sobrenome) if professor else None,
            nota=matricula.nota,
        ))

    return AlunoDto(
        id=aluno.id,
        matricula=aluno.matricula,
        nome=nome_completo(aluno.nome, aluno.sobrenome),
        telefone=aluno.telefone,
        idade=calcular_idade(aluno.data_nasc),
        data_ini=aluno.data_ini,
        ativo=aluno.ativo,
        disciplinas=disciplinas,
    )


def aluno_to_registrar_dto(aluno: Aluno) -> AlunoRegistrarDto:
    return AlunoRegistrarDto(
        id=aluno.id,
        matricula=aluno.matricula,
        nome=aluno.nome,
        sobrenome=aluno.sobrenome,
        telefone=aluno.telefone,
        data_nasc=aluno.data_nasc,
        data_ini=aluno.data_ini,
        data_fim=aluno.data_fim,
        ativo=aluno.ativo,
    )


def apply_aluno_registrar(dto: AlunoRegistrarDto, aluno: Aluno) -> Aluno:
    aluno.matricula = dto.matricula
    aluno.nome = dto.nome
    aluno.sobrenome = dto.sobrenome
    aluno.telefone = dto.telefone
    aluno.data_nasc = dto.data_nasc
    aluno.data_ini = dto.data_ini
    aluno.data_fim = dto.data_fim
    aluno.ativo = dto.ativo
    return aluno


def aluno_from_registrar(dto: AlunoRegistrarDto) -> Aluno:
    return apply_aluno_registrar(dto, Aluno())
