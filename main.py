# -*- coding: utf-8 -*-
"""
Arquivo principal da aplicação FastAPI da API SmartSchool.
"""

import logging
import os
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from smartschool.models import aluno, aluno_curso, aluno_disciplina, curso, disciplina, professor
from smartschool.routes.v1 import alunos as alunos_v1, professores as professores_v1
from smartschool.routes.v2 import alunos as alunos_v2, professores as professores_v2
from smartschool.database import engine, Base
from smartschool.exceptions import SmartSchoolError
import seed_data

log_file = os.getenv("LOG_FILE")
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    filename=log_file or None,
)
logger = logging.getLogger(__name__)

# Cria as tabelas no banco de dados
try:
    Base.metadata.create_all(bind=engine)
    logger.info("Tabelas criadas com sucesso!")
except Exception:
    logger.exception("Erro ao criar tabelas")
    raise

if os.getenv("SEED_DATABASE", "false").lower() == "true":
    seed_data.seed_database()

env = os.getenv("ENVIRONMENT", "development")

docs_url = "/docs" if env != "production" else None
redoc_url = "/redoc" if env != "production" else None

# Inicializa a aplicação FastAPI
app = FastAPI(
    title="SmartSchool API",
    description="API para gerenciamento de professores e alunos",
    version="2.0.0",
    docs_url=docs_url,   # Será None em produção (desativa /docs)
    redoc_url=redoc_url, # Será None em produção (desativa /redoc)
    openapi_url="/openapi.json" if env != "production" else None
)

frontend_url = os.getenv("FRONTEND_URL", "http://localhost:4200")

origins = [
    frontend_url,
    "http://localhost",
    "http://localhost:8080",
    "http://127.0.0.1",
    "http://127.0.0.1:8080",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Pagination", "Location"],
)

# Erros de domínio viram 400 com a mensagem em texto puro
@app.exception_handler(SmartSchoolError)
async def smartschool_error_handler(request: Request, exc: SmartSchoolError):
    logger.info(f"{request.method} {request.url.path} -> 400: {exc.message}")
    return JSONResponse(status_code=400, content=exc.message)

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    campos = "; ".join(
        f"{'.'.join(str(parte) for parte in erro['loc'])}: {erro['msg']}" for erro in exc.errors()
    )
    return JSONResponse(status_code=400, content=f"Requisição inválida: {campos}")

@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception(f"Erro inesperado em {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content="Erro interno do servidor")

# Montagem dos routers
app.include_router(professores_v1.router, prefix="/api/v1/professor")
app.include_router(alunos_v1.router, prefix="/api/v1/aluno")
app.include_router(professores_v2.router, prefix="/api/v2/professor")
app.include_router(alunos_v2.router, prefix="/api/v2/aluno")


@app.get("/", tags=["Root"])
async def root():
    return {
        "mensagem": "SmartSchool API - Gestão Escolar",
        "documentacao": docs_url,
        "endpoints": [
            {"professores_v1": "/api/v1/professor"},
            {"alunos_v1": "/api/v1/aluno"},
            {"professores_v2": "/api/v2/professor"},
            {"alunos_v2": "/api/v2/aluno"},
        ]
    }
