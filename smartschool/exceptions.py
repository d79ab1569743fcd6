# -*- coding: utf-8 -*-
"""
Exceções de domínio da API SmartSchool.

Os handlers registrados em main.py convertem estas exceções em respostas
400 com o texto da mensagem como corpo.
"""


class SmartSchoolError(Exception):
    """Erro base da aplicação."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(SmartSchoolError):
    """Entidade (ou relação) solicitada não existe."""


class CommitError(SmartSchoolError):
    """O repositório não conseguiu persistir as alterações."""
