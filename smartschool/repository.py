# -*- coding: utf-8 -*-
"""
Repositório de acesso a dados da API SmartSchool.

As rotas nunca falam direto com a Session: consultam e preparam alterações
através do `Repository` e confirmam tudo com `save_changes()`.
"""

import logging
from typing import List, Optional

from fastapi import Depends
from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from smartschool.database import get_db
from smartschool.models.aluno import Aluno
from smartschool.models.aluno_disciplina import AlunoDisciplina
from smartschool.models.disciplina import Disciplina
from smartschool.models.professor import Professor
from smartschool.pagination import PagedList, PageParamsAluno, PageParamsProf

logger = logging.getLogger(__name__)


class Repository:
    def __init__(self, db: Session):
        self.db = db
        self._staged = 0

    # --- Alterações ---

    def add(self, entity) -> None:
        self.db.add(entity)
        self._staged += 1

    def update(self, entity):
        """Prepara a alteração e devolve a instância acompanhada pela sessão."""
        if entity not in self.db:
            # Instância desanexada: a sessão passa a acompanhar a cópia do merge
            entity = self.db.merge(entity)
        self._staged += 1
        return entity

    def delete(self, entity) -> None:
        self.db.delete(entity)
        self._staged += 1

    def save_changes(self) -> bool:
        """
        Confirma as alterações preparadas.

        Retorna False quando não há nada preparado ou quando o commit falha
        (a transação é desfeita).
        """
        if self._staged == 0:
            return False
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Falha ao salvar alterações: {e}")
            return False
        finally:
            self._staged = 0
        return True

    # --- Alunos ---

    def _alunos_query(self, include_professor: bool):
        query = self.db.query(Aluno)
        if include_professor:
            query = query.options(
                selectinload(Aluno.alunos_disciplinas)
                .joinedload(AlunoDisciplina.disciplina)
                .joinedload(Disciplina.professor)
            )
        return query

    def get_all_alunos(self, include_professor: bool = False) -> List[Aluno]:
        return self._alunos_query(include_professor).order_by(Aluno.id).all()

    def get_all_alunos_paged(self, page_params: PageParamsAluno, include_professor: bool = False) -> PagedList:
        query = self._alunos_query(include_professor)

        if page_params.nome:
            termo = f"%{page_params.nome}%"
            query = query.filter(or_(Aluno.nome.ilike(termo), Aluno.sobrenome.ilike(termo)))
        if page_params.matricula:
            query = query.filter(Aluno.matricula == page_params.matricula)
        if page_params.ativo is not None:
            query = query.filter(Aluno.ativo == page_params.ativo)

        return PagedList.create(query.order_by(Aluno.id), page_params.page_number, page_params.page_size)

    def get_all_alunos_by_disciplina_id(self, disciplina_id: int, include_professor: bool = False) -> List[Aluno]:
        return (
            self._alunos_query(include_professor)
            .join(Aluno.alunos_disciplinas)
            .filter(AlunoDisciplina.disciplina_id == disciplina_id)
            .order_by(Aluno.id)
            .all()
        )

    def get_aluno_by_id(self, aluno_id: int, include_professor: bool = False) -> Optional[Aluno]:
        return self._alunos_query(include_professor).filter(Aluno.id == aluno_id).first()

    # --- Professores ---

    def _professores_query(self, include_alunos: bool):
        query = self.db.query(Professor).options(selectinload(Professor.disciplinas))
        if include_alunos:
            query = query.options(
                selectinload(Professor.disciplinas)
                .selectinload(Disciplina.alunos_disciplinas)
                .joinedload(AlunoDisciplina.aluno)
            )
        return query

    def get_all_professores(self, include_alunos: bool = False) -> List[Professor]:
        return self._professores_query(include_alunos).order_by(Professor.id).all()

    def get_all_professores_paged(self, page_params: PageParamsProf, include_alunos: bool = False) -> PagedList:
        query = self._professores_query(include_alunos)

        if page_params.nome:
            termo = f"%{page_params.nome}%"
            query = query.filter(or_(Professor.nome.ilike(termo), Professor.sobrenome.ilike(termo)))
        if page_params.registro:
            query = query.filter(Professor.registro == page_params.registro)
        if page_params.ativo is not None:
            query = query.filter(Professor.ativo == page_params.ativo)

        return PagedList.create(query.order_by(Professor.id), page_params.page_number, page_params.page_size)

    def get_professor_by_id(self, professor_id: int, include_alunos: bool = False) -> Optional[Professor]:
        return self._professores_query(include_alunos).filter(Professor.id == professor_id).first()

    def get_professores_by_aluno_id(self, aluno_id: int, include_alunos: bool = False) -> List[Professor]:
        """Professores que lecionam alguma disciplina em que o aluno está matriculado."""
        return (
            self._professores_query(include_alunos)
            .filter(Professor.disciplinas.any(
                Disciplina.alunos_disciplinas.any(AlunoDisciplina.aluno_id == aluno_id)
            ))
            .order_by(Professor.id)
            .all()
        )

    def get_all_professores_by_disciplina_id(self, disciplina_id: int, include_alunos: bool = False) -> List[Professor]:
        return (
            self._professores_query(include_alunos)
            .filter(Professor.disciplinas.any(Disciplina.id == disciplina_id))
            .order_by(Professor.id)
            .all()
        )


# Função para obter o repositório da requisição (usada com Depends)
def get_repo(db: Session = Depends(get_db)) -> Repository:
    return Repository(db)
