# -*- coding: utf-8 -*-
"""
Parâmetros de paginação e lista paginada usados pelas listagens.
"""

import json
import math
from typing import Generic, List, Optional, TypeVar

from fastapi import Query, Response

T = TypeVar("T")

MAX_PAGE_SIZE = 50


class PageParams:
    """Parâmetros de query das listagens paginadas (page_number, page_size e filtros)."""

    def __init__(
        self,
        page_number: int = Query(1, ge=1, alias="pageNumber"),
        page_size: int = Query(10, ge=1, alias="pageSize"),
        nome: Optional[str] = None,
        ativo: Optional[bool] = None,
    ):
        self.page_number = page_number
        self.page_size = min(page_size, MAX_PAGE_SIZE)
        self.nome = nome
        self.ativo = ativo


class PageParamsAluno(PageParams):
    def __init__(
        self,
        page_number: int = Query(1, ge=1, alias="pageNumber"),
        page_size: int = Query(10, ge=1, alias="pageSize"),
        nome: Optional[str] = None,
        ativo: Optional[bool] = None,
        matricula: Optional[int] = None,
    ):
        super().__init__(page_number, page_size, nome, ativo)
        self.matricula = matricula


class PageParamsProf(PageParams):
    def __init__(
        self,
        page_number: int = Query(1, ge=1, alias="pageNumber"),
        page_size: int = Query(10, ge=1, alias="pageSize"),
        nome: Optional[str] = None,
        ativo: Optional[bool] = None,
        registro: Optional[int] = None,
    ):
        super().__init__(page_number, page_size, nome, ativo)
        self.registro = registro


class PagedList(Generic[T]):
    """Uma página de resultados junto com os metadados de paginação."""

    def __init__(self, items: List[T], total_count: int, page_number: int, page_size: int):
        self.items = items
        self.total_count = total_count
        self.current_page = page_number
        self.page_size = page_size
        self.total_pages = math.ceil(total_count / page_size) if page_size else 0

    @classmethod
    def create(cls, query, page_number: int, page_size: int) -> "PagedList":
        """Executa `query` (já ordenada) contando o total e buscando só a página pedida."""
        total_count = query.count()
        items = query.offset((page_number - 1) * page_size).limit(page_size).all()
        return cls(items, total_count, page_number, page_size)

    def __iter__(self):
        return iter(self.items)

    def __len__(self):
        return len(self.items)


def add_pagination(response: Response, paged: PagedList) -> None:
    """Anexa os metadados da página ao header `Pagination` da resposta."""
    header = {
        "currentPage": paged.current_page,
        "itemsPerPage": paged.page_size,
        "totalItems": paged.total_count,
        "totalPages": paged.total_pages,
    }
    response.headers["Pagination"] = json.dumps(header)
    response.headers["Access-Control-Expose-Headers"] = "Pagination"
