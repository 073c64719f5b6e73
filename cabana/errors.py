"""
Erros da API
Cada erro carrega o status HTTP e a mensagem devolvida ao cliente
"""
import traceback
from flask import jsonify
from sqlalchemy.exc import SQLAlchemyError


class APIError(Exception):
    status_code = 500
    message = "Erro interno"

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message

    def to_response(self):
        return jsonify({"error": self.message}), self.status_code


class AuthorizationError(APIError):
    status_code = 401
    message = "Senha incorreta."


class ValidationError(APIError):
    status_code = 400
    message = "Dados inválidos"


class NotFoundError(APIError):
    status_code = 404
    message = "Registro não encontrado"


class InvalidTransitionError(APIError):
    """Mudança de status fora da ordem pending -> approved -> completed"""
    status_code = 409
    message = "Transição de status inválida"


class StorageError(APIError):
    """Falha do banco; a mensagem do driver nunca vai para o cliente"""
    status_code = 500
    message = "Erro ao acessar o banco de dados"


class ExternalServiceError(APIError):
    """Falha do serviço de mídia; tratada localmente, nunca devolvida"""
    status_code = 502
    message = "Serviço externo indisponível"


def register_error_handlers(app):
    """Registra os handlers que transformam erros em JSON"""
    from .db import db

    @app.errorhandler(APIError)
    def handle_api_error(error):
        return error.to_response()

    @app.errorhandler(SQLAlchemyError)
    def handle_storage_error(error):
        db.session.rollback()
        print(f"❌ Erro de banco: {error.__class__.__name__}")
        traceback.print_exc()
        return StorageError().to_response()

    @app.errorhandler(404)
    def handle_not_found(error):
        return jsonify({"error": "Rota não encontrada"}), 404

    @app.errorhandler(405)
    def handle_method_not_allowed(error):
        return jsonify({"error": "Método não permitido"}), 405
