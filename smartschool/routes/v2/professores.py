# -*- coding: utf-8 -*-
"""
Rotas FastAPI da versão 2.0 do CRUD de Professores.

Mesmas operações da versão 1.0, mas a leitura devolve ProfessorCompletoDto
(nome e sobrenome separados, data de término e os alunos atendidos).
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from smartschool.exceptions import CommitError, NotFoundError
from smartschool.mappers import (
    apply_professor_registrar, map_list, professor_from_registrar, professor_to_completo_dto,
)
from smartschool.pagination import PageParamsProf, add_pagination
from smartschool.repository import Repository, get_repo
from smartschool.schemas.professor import ProfessorCompletoDto, ProfessorRegistrarDto

logger = logging.getLogger(__name__)

BASE_URL = "/api/v2/professor"

router = APIRouter(
    tags=["Professores v2"],
    responses={400: {"description": "Professor não encontrado ou não salvo"}},
)


@router.get("", response_model=List[ProfessorCompletoDto])
def get_professores(
    response: Response,
    page_params: PageParamsProf = Depends(),
    repo: Repository = Depends(get_repo),
):
    professores = repo.get_all_professores_paged(page_params, True)
    add_pagination(response, professores)
    return map_list(professor_to_completo_dto, professores)


@router.get("/getRegister", response_model=ProfessorRegistrarDto)
def get_register():
    return ProfessorRegistrarDto()


@router.get("/byaluno/{aluno_id}", response_model=List[ProfessorCompletoDto])
def get_by_aluno_id(aluno_id: int, repo: Repository = Depends(get_repo)):
    professores = repo.get_professores_by_aluno_id(aluno_id, True)
    if not professores:
        raise NotFoundError("Professores não encontrados")
    return map_list(professor_to_completo_dto, professores)


@router.get("/bydisciplina/{disciplina_id}", response_model=List[ProfessorCompletoDto])
def get_by_disciplina_id(disciplina_id: int, repo: Repository = Depends(get_repo)):
    professores = repo.get_all_professores_by_disciplina_id(disciplina_id, True)
    if not professores:
        raise NotFoundError("Professores não encontrados")
    return map_list(professor_to_completo_dto, professores)


@router.get("/{professor_id}", response_model=ProfessorCompletoDto)
def get_by_id(professor_id: int, repo: Repository = Depends(get_repo)):
    professor = repo.get_professor_by_id(professor_id, True)
    if professor is None:
        raise NotFoundError(f"Professor(a) {professor_id} não foi encontrado(a)")
    return professor_to_completo_dto(professor)


@router.post("", response_model=ProfessorCompletoDto, status_code=status.HTTP_201_CREATED)
def post_professor(model: ProfessorRegistrarDto, response: Response, repo: Repository = Depends(get_repo)):
    professor = professor_from_registrar(model)

    repo.add(professor)
    if not repo.save_changes():
        raise CommitError(f"Professor(a) {model.nome} não foi cadastrado(a)")

    logger.info(f"Professor {professor.id} cadastrado")
    response.headers["Location"] = f"{BASE_URL}/{professor.id}"
    return professor_to_completo_dto(professor)


def _atualizar(professor_id: int, model: ProfessorRegistrarDto, response: Response, repo: Repository) -> ProfessorCompletoDto:
    professor = repo.get_professor_by_id(professor_id)
    if professor is None:
        raise NotFoundError(f"Professor(a) {professor_id} não foi encontrado(a)")

    apply_professor_registrar(model, professor)

    repo.update(professor)
    if not repo.save_changes():
        raise CommitError(f"Professor(a) {professor_id} não foi atualizado(a)")

    logger.info(f"Professor {professor_id} atualizado")
    response.headers["Location"] = f"{BASE_URL}/{professor.id}"
    return professor_to_completo_dto(professor)


@router.put("/{professor_id}", response_model=ProfessorCompletoDto, status_code=status.HTTP_201_CREATED)
def put_professor(professor_id: int, model: ProfessorRegistrarDto, response: Response, repo: Repository = Depends(get_repo)):
    return _atualizar(professor_id, model, response, repo)


@router.patch("/{professor_id}", response_model=ProfessorCompletoDto, status_code=status.HTTP_201_CREATED)
def patch_professor(professor_id: int, model: ProfessorRegistrarDto, response: Response, repo: Repository = Depends(get_repo)):
    return _atualizar(professor_id, model, response, repo)


@router.delete("/{professor_id}")
def delete_professor(professor_id: int, repo: Repository = Depends(get_repo)):
    professor = repo.get_professor_by_id(professor_id)
    if professor is None:
        raise NotFoundError(f"Professor(a) {professor_id} não foi encontrado(a)")

    nome = professor.nome
    repo.delete(professor)
    if not repo.save_changes():
        raise CommitError(f"Professor(a) {nome} não deletado(a)")

    logger.info(f"Professor {professor_id} excluído")
    return f"Professor(a) {professor_id} deletado(a)"
