"""
API: Avaliações
Depoimentos públicos e envio pelo link do cliente
"""
from flask import Blueprint, jsonify
from sqlalchemy.exc import IntegrityError
from ..db import db
from ..errors import NotFoundError, ValidationError
from ..models import Order, Review
from ..models.order import STATUS_COMPLETED
from ..utils.validation import get_json, optional_str, required_bool, str_list
from .auth import admin_required

bp = Blueprint("reviews", __name__)

MIN_RATING = 1
MAX_RATING = 5


def parse_rating(data):
    rating = data.get("rating")
    if isinstance(rating, str) and rating.strip().isdigit():
        rating = int(rating.strip())
    if isinstance(rating, bool) or not isinstance(rating, int):
        raise ValidationError("rating deve ser um número inteiro")
    if not MIN_RATING <= rating <= MAX_RATING:
        raise ValidationError(f"rating deve estar entre {MIN_RATING} e {MAX_RATING}")
    return rating


@bp.route("/depoimentos", methods=["GET"])
def get_public_reviews():
    """Depoimentos visíveis, mais recentes primeiro"""
    reviews = (
        Review.query.filter_by(visible=True)
        .order_by(Review.created_at.desc(), Review.id.desc())
        .all()
    )
    return jsonify([r.to_dict() for r in reviews])


@bp.route("/cliente/avaliar", methods=["POST"])
def submit_review():
    """
    Registra a avaliação enviada pelo link do cliente

    O token vale uma única avaliação e só depois que a festa foi concluída.
    O nome gravado é sempre o do pedido.
    """
    data = get_json()

    token = data.get("token")
    if not isinstance(token, str) or not token:
        raise ValidationError("Token inválido")

    order = Order.query.filter_by(review_token=token).first()
    if not order:
        raise ValidationError("Token inválido")

    if order.status != STATUS_COMPLETED:
        raise ValidationError("A avaliação fica disponível depois da festa concluída")

    if Review.query.filter_by(order_id=order.id).first():
        raise ValidationError("Este link de avaliação já foi utilizado")

    review = Review(
        order_id=order.id,
        customer_name=order.customer_name,
        rating=parse_rating(data),
        comment=optional_str(data, "comentario"),
        photo_urls=str_list(data, "fotos"),
        visible=True,
    )

    db.session.add(review)
    try:
        db.session.commit()
    except IntegrityError:
        # Outra requisição com o mesmo token gravou primeiro
        db.session.rollback()
        raise ValidationError("Este link de avaliação já foi utilizado")

    return jsonify({"success": True})


@bp.route("/admin/avaliacoes", methods=["GET"])
@admin_required
def get_all_reviews():
    """Todas as avaliações, inclusive as ocultas"""
    reviews = Review.query.order_by(Review.created_at.desc(), Review.id.desc()).all()
    return jsonify([r.to_dict() for r in reviews])


@bp.route("/admin/avaliacoes/<int:id>/visibilidade", methods=["PUT"])
@admin_required
def set_review_visibility(id):
    """Mostra ou oculta um depoimento no site"""
    review = db.session.get(Review, id)
    if not review:
        raise NotFoundError(f"Avaliação #{id} não encontrada")

    review.visible = required_bool(get_json(), "visivel")
    db.session.commit()

    return jsonify(review.to_dict())
