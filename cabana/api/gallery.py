"""
API: Galeria
Fotos do carrossel servidas a partir do Cloud Storage
"""
from flask import Blueprint, current_app, jsonify
from ..errors import ExternalServiceError
from ..utils.cloud_storage import list_public_urls

bp = Blueprint("gallery", __name__)


@bp.route("/galeria", methods=["GET"])
def get_gallery():
    """URLs das fotos; se o storage falhar o site recebe lista vazia"""
    try:
        urls = list_public_urls(
            current_app.config["GALLERY_PREFIX"],
            current_app.config["GALLERY_PAGE_SIZE"],
            current_app.config["MEDIA_TIMEOUT"],
        )
    except ExternalServiceError as e:
        print(f"❌ Erro na galeria: {e}")
        return jsonify([])

    return jsonify(urls)
