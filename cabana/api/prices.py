"""
API: Tabela de preços
Listagem pública dos itens disponíveis e CRUD do admin
"""
import time
import uuid
from flask import Blueprint, jsonify
from ..db import db
from ..errors import NotFoundError
from ..models import PriceItem
from ..utils.validation import get_json, non_negative_number, required_bool, required_str
from .auth import admin_required

bp = Blueprint("prices", __name__)


def get_item_or_404(id):
    item = db.session.get(PriceItem, id)
    if not item:
        raise NotFoundError(f"Item #{id} não encontrado")
    return item


def generate_item_key():
    """Chave derivada do horário de criação, única na tabela"""
    key = f"custom_{int(time.time() * 1000)}"
    if PriceItem.query.filter_by(key=key).first():
        key = f"{key}_{uuid.uuid4().hex[:6]}"
    return key


@bp.route("/itens-disponiveis", methods=["GET"])
def get_available_items():
    """Itens disponíveis, por categoria e descrição"""
    items = (
        PriceItem.query.filter_by(available=True)
        .order_by(PriceItem.category, PriceItem.description)
        .all()
    )
    return jsonify([i.to_dict() for i in items])


@bp.route("/admin/precos", methods=["GET"])
@admin_required
def get_all_items():
    """Todos os itens, inclusive indisponíveis"""
    items = PriceItem.query.order_by(PriceItem.category, PriceItem.description).all()
    return jsonify([i.to_dict() for i in items])


@bp.route("/admin/precos", methods=["POST"])
@admin_required
def create_item():
    """Cria um item novo, já disponível"""
    data = get_json()

    item = PriceItem(
        description=required_str(data, "descricao", max_length=200),
        unit_price=non_negative_number(data, "valor"),
        category=required_str(data, "categoria", max_length=80),
        key=generate_item_key(),
        available=True,
    )

    db.session.add(item)
    db.session.commit()

    return jsonify({"success": True, "item": item.to_dict()}), 201


@bp.route("/admin/precos/<int:id>/toggle", methods=["PUT"])
@admin_required
def toggle_item(id):
    """Define a disponibilidade do item (repetir o mesmo valor não muda nada)"""
    item = get_item_or_404(id)

    item.available = required_bool(get_json(), "disponivel")
    db.session.commit()

    return jsonify({"success": True, "item": item.to_dict()})


@bp.route("/admin/precos/<int:id>", methods=["DELETE"])
@admin_required
def delete_item(id):
    """Remove o item da tabela"""
    item = get_item_or_404(id)

    db.session.delete(item)
    db.session.commit()

    return jsonify({"success": True})
