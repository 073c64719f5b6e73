"""
API: Autenticação do painel admin
Senha única compartilhada, enviada em cada requisição por header
"""
import hmac
from functools import wraps
from flask import Blueprint, current_app, jsonify, request
from ..errors import AuthorizationError

bp = Blueprint("auth", __name__)


def check_admin_password():
    """Compara o header com a senha do .env; lança AuthorizationError se não bater"""
    expected = current_app.config.get("ADMIN_PASSWORD")
    received = request.headers.get(current_app.config["ADMIN_HEADER"], "")

    # Sem senha configurada ninguém entra
    if not expected or not received:
        raise AuthorizationError()

    if not hmac.compare_digest(received.encode("utf-8"), expected.encode("utf-8")):
        raise AuthorizationError()


def admin_required(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        check_admin_password()
        return f(*args, **kwargs)
    return decorated_function


@bp.route("/verificar", methods=["GET"])
@admin_required
def verify():
    """Permite ao painel validar a senha antes de carregar os dados"""
    return jsonify({"valid": True})
