# -*- coding: utf-8 -*-
"""
Rotas FastAPI da versão 1.0 do CRUD de Alunos.

A versão 1.0 não tem a troca de estado; PATCH /{id} se comporta como o PUT.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from smartschool.exceptions import CommitError, NotFoundError
from smartschool.mappers import aluno_from_registrar, aluno_to_dto, apply_aluno_registrar, map_list
from smartschool.pagination import PageParamsAluno, add_pagination
from smartschool.repository import Repository, get_repo
from smartschool.schemas.aluno import AlunoDto, AlunoRegistrarDto

logger = logging.getLogger(__name__)

BASE_URL = "/api/v1/aluno"

router = APIRouter(
    tags=["Alunos v1"],
    responses={400: {"description": "Aluno não encontrado ou não salvo"}},
)


@router.get("", response_model=List[AlunoDto])
def get_alunos(
    response: Response,
    page_params: PageParamsAluno = Depends(),
    repo: Repository = Depends(get_repo),
):
    alunos = repo.get_all_alunos_paged(page_params, True)
    add_pagination(response, alunos)
    return map_list(aluno_to_dto, alunos)


@router.get("/getRegister", response_model=AlunoRegistrarDto)
def get_register():
    return AlunoRegistrarDto()


@router.get("/ByDisciplina/{disciplina_id}", response_model=List[AlunoDto])
def get_by_disciplina_id(disciplina_id: int, repo: Repository = Depends(get_repo)):
    alunos = repo.get_all_alunos_by_disciplina_id(disciplina_id, True)
    if not alunos:
        raise NotFoundError(f"Nenhum aluno encontrado na disciplina {disciplina_id}")
    return map_list(aluno_to_dto, alunos)


@router.get("/{aluno_id}", response_model=AlunoDto)
def get_by_id(aluno_id: int, repo: Repository = Depends(get_repo)):
    aluno = repo.get_aluno_by_id(aluno_id, True)
    if aluno is None:
        raise NotFoundError(f"Aluno(a) {aluno_id} não foi encontrado(a)")
    return aluno_to_dto(aluno)


@router.post("", response_model=AlunoDto, status_code=status.HTTP_201_CREATED)
def post_aluno(model: AlunoRegistrarDto, response: Response, repo: Repository = Depends(get_repo)):
    aluno = aluno_from_registrar(model)

    repo.add(aluno)
    if not repo.save_changes():
        raise CommitError(f"Aluno(a) {model.nome} não cadastrado")

    logger.info(f"Aluno {aluno.id} cadastrado")
    response.headers["Location"] = f"{BASE_URL}/{aluno.id}"
    return aluno_to_dto(aluno)


def _atualizar(aluno_id: int, model: AlunoRegistrarDto, response: Response, repo: Repository) -> AlunoDto:
    aluno = repo.get_aluno_by_id(aluno_id)
    if aluno is None:
        raise NotFoundError(f"Aluno(a) {aluno_id} não encontrado")

    apply_aluno_registrar(model, aluno)

    repo.update(aluno)
    if not repo.save_changes():
        raise CommitError(f"Aluno(a) {aluno_id} não atualizado")

    logger.info(f"Aluno {aluno_id} atualizado")
    response.headers["Location"] = f"{BASE_URL}/{aluno.id}"
    return aluno_to_dto(aluno)


@router.put("/{aluno_id}", response_model=AlunoDto, status_code=status.HTTP_201_CREATED)
def put_aluno(aluno_id: int, model: AlunoRegistrarDto, response: Response, repo: Repository = Depends(get_repo)):
    return _atualizar(aluno_id, model, response, repo)


@router.patch("/{aluno_id}", response_model=AlunoDto, status_code=status.HTTP_201_CREATED)
def patch_aluno(aluno_id: int, model: AlunoRegistrarDto, response: Response, repo: Repository = Depends(get_repo)):
    return _atualizar(aluno_id, model, response, repo)


@router.delete("/{aluno_id}")
def delete_aluno(aluno_id: int, repo: Repository = Depends(get_repo)):
    aluno = repo.get_aluno_by_id(aluno_id)
    if aluno is None:
        raise NotFoundError(f"Aluno(a) {aluno_id} não encontrado(a)")

    nome = aluno.nome
    repo.delete(aluno)
    if not repo.save_changes():
        raise CommitError(f"Aluno(a) {nome} não deletado(a)")

    logger.info(f"Aluno {aluno_id} excluído")
    return f"Aluno(a) {aluno_id} deletado com sucesso"
