"""
Configuração do banco de dados
"""
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()


def init_db(app):
    """Inicializa o banco de dados com a app Flask"""
    db.init_app(app)

    with app.app_context():
        from . import models  # noqa: F401  registra as tabelas
        db.create_all()
        print("✅ Banco de dados inicializado")
