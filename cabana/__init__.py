"""
Cabana - Backend de orçamentos, avaliações e painel admin
Aluguel de cabanas para festas infantis
"""
import os
from flask import Flask
from flask_cors import CORS
from sqlalchemy.engine import make_url
from .config import BASE_DIR, get_config
from .db import init_db
from .errors import register_error_handlers


def create_app(config_name=None):
    """Factory para criar a aplicação Flask"""
    app = Flask(__name__)

    # Carregar configuração
    app.config.from_object(get_config(config_name))

    database_uri = make_url(app.config["SQLALCHEMY_DATABASE_URI"])
    print(f"📍 Database URI: {database_uri.render_as_string(hide_password=True)}")

    # CORS só nas rotas da API; o painel envia a senha por header
    origins = app.config["ALLOWED_ORIGINS"]
    cors_options = {
        "origins": "*" if "*" in origins else origins,
        "methods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        "allow_headers": ["Content-Type", app.config["ADMIN_HEADER"]],
    }
    CORS(app, resources={r"/api/*": cors_options})

    # Criar pasta instance se não existir (SQLite local)
    os.makedirs(BASE_DIR / "instance", exist_ok=True)

    # Inicializar banco de dados
    init_db(app)

    register_error_handlers(app)

    # Registrar blueprints das APIs
    from .api import (
        auth_bp, orders_bp, reviews_bp, prices_bp, finance_bp, gallery_bp
    )

    app.register_blueprint(auth_bp, url_prefix="/api/admin")
    app.register_blueprint(orders_bp, url_prefix="/api")
    app.register_blueprint(reviews_bp, url_prefix="/api")
    app.register_blueprint(prices_bp, url_prefix="/api")
    app.register_blueprint(finance_bp, url_prefix="/api")
    app.register_blueprint(gallery_bp, url_prefix="/api")

    # Rota de health check
    @app.route("/health")
    def health():
        return {"status": "ok", "message": "Cabana is running! 🎪"}

    # Ping periódico do banco
    from .services.keepalive import start_keepalive
    app.extensions["cabana_keepalive"] = start_keepalive(app)

    return app
