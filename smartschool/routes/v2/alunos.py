# -*- coding: utf-8 -*-
"""
Rotas FastAPI da versão 2.0 do CRUD de Alunos.
"""
import logging
from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, Response, status

from smartschool.exceptions import CommitError, NotFoundError
from smartschool.mappers import (
    aluno_from_registrar, aluno_to_dto, aluno_to_registrar_dto, apply_aluno_registrar, map_list,
)
from smartschool.pagination import PageParamsAluno, add_pagination
from smartschool.repository import Repository, get_repo
from smartschool.schemas.aluno import AlunoDto, AlunoRegistrarDto, MensagemDto, TrocaEstadoDto

logger = logging.getLogger(__name__)

BASE_URL = "/api/v2/aluno"

router = APIRouter(
    tags=["Alunos v2"],
    responses={400: {"description": "Aluno não encontrado ou não salvo"}},
)


@router.get("", response_model=List[AlunoDto])
def get_alunos(
    response: Response,
    page_params: PageParamsAluno = Depends(),
    repo: Repository = Depends(get_repo),
):
    """
    Lista os alunos de forma paginada, com disciplinas e professores.
    """
    alunos = repo.get_all_alunos_paged(page_params, True)
    add_pagination(response, alunos)
    return map_list(aluno_to_dto, alunos)


@router.get("/getAllAlunos", response_model=List[AlunoDto])
def get_all_alunos(repo: Repository = Depends(get_repo)):
    """
    Lista todos os alunos, sem paginação, com disciplinas e professores.
    """
    return map_list(aluno_to_dto, repo.get_all_alunos(True))


@router.get("/ByDisciplina/{disciplina_id}", response_model=List[AlunoDto])
def get_by_disciplina_id(disciplina_id: int, repo: Repository = Depends(get_repo)):
    """
    Lista os alunos matriculados na disciplina.
    """
    alunos = repo.get_all_alunos_by_disciplina_id(disciplina_id, False)
    if not alunos:
        raise NotFoundError(f"Nenhum aluno encontrado na disciplina {disciplina_id}")
    return map_list(aluno_to_dto, alunos)


@router.get("/{aluno_id}", response_model=AlunoRegistrarDto)
def get_by_id(aluno_id: int, repo: Repository = Depends(get_repo)):
    """
    Obtém os dados cadastrais de um aluno pelo ID.
    """
    aluno = repo.get_aluno_by_id(aluno_id, False)
    if aluno is None:
        raise NotFoundError(f"Aluno(a) {aluno_id} não foi encontrado(a)")
    return aluno_to_registrar_dto(aluno)


@router.post("", response_model=AlunoDto, status_code=status.HTTP_201_CREATED)
def post_aluno(model: AlunoRegistrarDto, response: Response, repo: Repository = Depends(get_repo)):
    """
    Cadastra um novo aluno.
    """
    aluno = aluno_from_registrar(model)

    repo.add(aluno)
    if not repo.save_changes():
        raise CommitError(f"Aluno(a) {model.nome} não cadastrado")

    logger.info(f"Aluno {aluno.id} cadastrado")
    response.headers["Location"] = f"{BASE_URL}/{aluno.id}"
    return aluno_to_dto(aluno)


@router.put("/{aluno_id}", response_model=AlunoDto, status_code=status.HTTP_201_CREATED)
def put_aluno(aluno_id: int, model: AlunoRegistrarDto, response: Response, repo: Repository = Depends(get_repo)):
    """
    Altera todos os dados de um aluno.
    """
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


@router.patch("/{aluno_id}/trocarEstado", response_model=MensagemDto)
def trocar_estado(aluno_id: int, troca_estado: TrocaEstadoDto, repo: Repository = Depends(get_repo)):
    """
    Ativa ou desativa um aluno. Desativar registra a data de término; ativar a limpa.
    """
    aluno = repo.get_aluno_by_id(aluno_id)
    if aluno is None:
        raise NotFoundError(f"Aluno(a) {aluno_id} não encontrado")

    nome = aluno.nome
    aluno.ativo = troca_estado.estado
    aluno.data_fim = None if aluno.ativo else datetime.now()

    repo.update(aluno)
    if not repo.save_changes():
        raise CommitError(f"Aluno(a) {nome} não atualizado")

    situacao = "ativado(a)" if troca_estado.estado else "desativado(a)"
    logger.info(f"Aluno {aluno_id} {situacao}")
    return {"message": f"Aluno(a) {nome}, {situacao} com sucesso!"}


@router.delete("/{aluno_id}")
def delete_aluno(aluno_id: int, repo: Repository = Depends(get_repo)):
    """
    Exclui um aluno e suas matrículas do banco de dados.
    """
    aluno = repo.get_aluno_by_id(aluno_id)
    if aluno is None:
        raise NotFoundError(f"Aluno(a) {aluno_id} não encontrado(a)")

    nome = aluno.nome
    repo.delete(aluno)
    if not repo.save_changes():
        raise CommitError(f"Aluno(a) {nome} não deletado(a)")

    logger.info(f"Aluno {aluno_id} excluído")
    return f"Aluno(a) {aluno_id} deletado com sucesso"
