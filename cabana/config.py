"""
Configuração da aplicação
"""
import os
from pathlib import Path
from dotenv import load_dotenv

# Diretório base do projeto
BASE_DIR = Path(__file__).resolve().parent.parent

# Carregar .env do diretório do projeto
load_dotenv(BASE_DIR / '.env')


def _engine_options(database_uri):
    """Opções do engine: pool limitado, com fila, fora do SQLite"""
    options = {"pool_pre_ping": True}
    if not database_uri.startswith("sqlite"):
        options.update({
            "pool_size": int(os.getenv("DB_POOL_SIZE", "10")),
            "max_overflow": 0,
            # Requisições esperam por uma conexão livre em vez de falhar
            "pool_timeout": int(os.getenv("DB_POOL_TIMEOUT", "30")),
            "pool_recycle": 1800,
        })
    return options


class Config:
    """Configuração base"""

    # Flask
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key-change-in-production")
    FLASK_ENV = os.getenv("FLASK_ENV", "development")
    PORT = int(os.getenv("PORT", "3000"))

    # Banco de dados com path absoluto
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL") or f"sqlite:///{BASE_DIR}/instance/cabana.db"
    SQLALCHEMY_ENGINE_OPTIONS = _engine_options(SQLALCHEMY_DATABASE_URI)
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ECHO = False

    # Ping periódico para o banco não derrubar conexões ociosas (0 desativa)
    KEEPALIVE_INTERVAL = int(os.getenv("KEEPALIVE_INTERVAL", "30"))

    # Senha compartilhada do painel admin
    ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD") or os.getenv("ADMIN_PASS")
    ADMIN_HEADER = "X-Admin-Password"

    # Link enviado ao cliente para avaliar a festa
    REVIEW_LINK_BASE = os.getenv("REVIEW_LINK_BASE", "/avaliar.html")

    # Google Cloud Storage (galeria)
    GCS_BUCKET_NAME = os.getenv("GCS_BUCKET_NAME")
    GOOGLE_APPLICATION_CREDENTIALS = os.getenv("GOOGLE_APPLICATION_CREDENTIALS")
    GALLERY_PREFIX = os.getenv("GALLERY_PREFIX", "cabana/galeria/")
    GALLERY_PAGE_SIZE = int(os.getenv("GALLERY_PAGE_SIZE", "30"))
    MEDIA_TIMEOUT = float(os.getenv("MEDIA_TIMEOUT", "10"))

    # Aviso de novo orçamento
    NOTIFY_WEBHOOK_URL = os.getenv("NOTIFY_WEBHOOK_URL")
    NOTIFY_TIMEOUT = float(os.getenv("NOTIFY_TIMEOUT", "5"))

    # CORS
    ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")


class DevelopmentConfig(Config):
    """Configuração de desenvolvimento"""
    DEBUG = True


class ProductionConfig(Config):
    """Configuração de produção"""
    DEBUG = False
    SQLALCHEMY_ECHO = False


class TestingConfig(Config):
    """Configuração dos testes: SQLite em memória, sem serviços externos"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_ENGINE_OPTIONS = {}
    KEEPALIVE_INTERVAL = 0
    ADMIN_PASSWORD = "segredo-de-teste"
    GCS_BUCKET_NAME = "cabana-test"
    NOTIFY_WEBHOOK_URL = None
    ALLOWED_ORIGINS = ["*"]


# Mapeamento de configurações
config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}


def get_config(name=None):
    """Obtém a configuração conforme o ambiente"""
    env = name or os.getenv("FLASK_ENV", "development")
    return config_by_name.get(env, DevelopmentConfig)
