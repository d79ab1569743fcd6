# -*- coding: utf-8 -*-
"""
Configuração do banco de dados SQLAlchemy para a API SmartSchool.
"""

import os
from sqlalchemy import create_engine
from sqlalchemy.ext.declarative import declarative_base
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Usa variável de ambiente ou default para SQLite
DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./smartschool.db")

# Se for PostgreSQL no Render, ajusta o prefixo se necessário
if DATABASE_URL and DATABASE_URL.startswith("postgres://"):
    DATABASE_URL = DATABASE_URL.replace("postgres://", "postgresql://", 1)

# Configuração de argumentos de conexão
engine_args = {}
if DATABASE_URL.startswith("sqlite"):
    engine_args["connect_args"] = {"check_same_thread": False}
    if DATABASE_URL in ("sqlite://", "sqlite:///:memory:"):
        # Banco em memória: todas as sessões precisam da mesma conexão
        engine_args["poolclass"] = StaticPool
else:
    # pool_pre_ping=True: Verifica se a conexão está viva antes de usar
    engine_args["pool_pre_ping"] = True
    # pool_recycle: Recicla conexões a cada hora para evitar timeouts do banco
    engine_args["pool_recycle"] = 3600

engine = create_engine(DATABASE_URL, **engine_args)

# Cria uma SessionLocal class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Cria uma Base class
Base = declarative_base()

# Função para obter uma sessão do banco de dados (usada com Depends)
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
