# -*- coding: utf-8 -*-
"""
Rotas FastAPI da versão 1.0 do CRUD de Professores.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from smartschool.exceptions import CommitError, NotFoundError
from smartschool.mappers import (
    apply_professor_registrar, map_list, professor_from_registrar, professor_to_dto,
)
from smartschool.pagination import PageParamsProf, add_pagination
from smartschool.repository import Repository, get_repo
from smartschool.schemas.professor import ProfessorDto, ProfessorRegistrarDto

logger = logging.getLogger(__name__)

BASE_URL = "/api/v1/professor"

router = APIRouter(
    tags=["Professores v1"],
    responses={400: {"description": "Professor não encontrado ou não salvo"}},
)


@router.get("", response_model=List[ProfessorDto])
def get_professores(
    response: Response,
    page_params: PageParamsProf = Depends(),
    repo: Repository = Depends(get_repo),
):
    """
    Lista os professores de forma paginada; os metadados vão no header `Pagination`.
    """
    professores = repo.get_all_professores_paged(page_params)
    add_pagination(response, professores)
    return map_list(professor_to_dto, professores)


@router.get("/getRegister", response_model=ProfessorRegistrarDto)
def get_register():
    """
    Retorna um ProfessorRegistrarDto vazio, usado para montar formulários de cadastro.
    """
    return ProfessorRegistrarDto()


@router.get("/byaluno/{aluno_id}", response_model=List[ProfessorDto])
def get_by_aluno_id(aluno_id: int, repo: Repository = Depends(get_repo)):
    """
    Lista os professores das disciplinas em que o aluno está matriculado.
    """
    professores = repo.get_professores_by_aluno_id(aluno_id, True)
    if not professores:
        raise NotFoundError("Professores não encontrados")
    return map_list(professor_to_dto, professores)


@router.get("/bydisciplina/{disciplina_id}", response_model=List[ProfessorDto])
def get_by_disciplina_id(disciplina_id: int, repo: Repository = Depends(get_repo)):
    """
    Lista os professores que lecionam a disciplina.
    """
    professores = repo.get_all_professores_by_disciplina_id(disciplina_id, True)
    if not professores:
        raise NotFoundError("Professores não encontrados")
    return map_list(professor_to_dto, professores)


@router.get("/{professor_id}", response_model=ProfessorDto)
def get_by_id(professor_id: int, repo: Repository = Depends(get_repo)):
    """
    Obtém um professor pelo ID.
    """
    professor = repo.get_professor_by_id(professor_id, True)
    if professor is None:
        raise NotFoundError(f"Professor(a) {professor_id} não foi encontrado(a)")
    return professor_to_dto(professor)


@router.post("", response_model=ProfessorDto, status_code=status.HTTP_201_CREATED)
def post_professor(model: ProfessorRegistrarDto, response: Response, repo: Repository = Depends(get_repo)):
    """
    Cadastra um novo professor. O id é sempre atribuído pelo banco.
    """
    professor = professor_from_registrar(model)

    repo.add(professor)
    if not repo.save_changes():
        raise CommitError(f"Professor(a) {model.nome} não foi cadastrado(a)")

    logger.info(f"Professor {professor.id} cadastrado")
    response.headers["Location"] = f"{BASE_URL}/{professor.id}"
    return professor_to_dto(professor)


def _atualizar(professor_id: int, model: ProfessorRegistrarDto, response: Response, repo: Repository) -> ProfessorDto:
    professor = repo.get_professor_by_id(professor_id)
    if professor is None:
        raise NotFoundError(f"Professor(a) {professor_id} não foi encontrado(a)")

    apply_professor_registrar(model, professor)

    repo.update(professor)
    if not repo.save_changes():
        raise CommitError(f"Professor(a) {professor_id} não foi atualizado(a)")

    logger.info(f"Professor {professor_id} atualizado")
    response.headers["Location"] = f"{BASE_URL}/{professor.id}"
    return professor_to_dto(professor)


@router.put("/{professor_id}", response_model=ProfessorDto, status_code=status.HTTP_201_CREATED)
def put_professor(professor_id: int, model: ProfessorRegistrarDto, response: Response, repo: Repository = Depends(get_repo)):
    """
    Altera todos os dados de um professor.
    """
    return _atualizar(professor_id, model, response, repo)


@router.patch("/{professor_id}", response_model=ProfessorDto, status_code=status.HTTP_201_CREATED)
def patch_professor(professor_id: int, model: ProfessorRegistrarDto, response: Response, repo: Repository = Depends(get_repo)):
    """
    Altera um professor. Mesmo comportamento do PUT: o corpo inteiro sobrepõe o registro.
    """
    return _atualizar(professor_id, model, response, repo)


@router.delete("/{professor_id}")
def delete_professor(professor_id: int, repo: Repository = Depends(get_repo)):
    """
    Exclui um professor do banco de dados.
    """
    professor = repo.get_professor_by_id(professor_id)
    if professor is None:
        raise NotFoundError(f"Professor(a) {professor_id} não foi encontrado(a)")

    nome = professor.nome
    repo.delete(professor)
    if not repo.save_changes():
        raise CommitError(f"Professor(a) {nome} não deletado(a)")

    logger.info(f"Professor {professor_id} excluído")
    return f"Professor(a) {professor_id} deletado(a)"
