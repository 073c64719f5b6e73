"""
API: Orçamentos
Criação pública e ciclo de aprovação pelo admin
"""
import secrets
from flask import Blueprint, current_app, jsonify, request
from ..db import db
from ..errors import NotFoundError, ValidationError
from ..models import Order
from ..models.order import STATUS_APPROVED, TRANSITIONS, STATUS_PENDING
from ..services.notifications import send_new_quote_notification
from ..utils.validation import (
    get_json, non_negative_number, optional_int, optional_str,
    required_date, required_str, str_list,
)
from .auth import admin_required

bp = Blueprint("orders", __name__)

ORDER_STATUSES = {STATUS_PENDING, *TRANSITIONS.values()}


def get_order_or_404(id):
    order = db.session.get(Order, id)
    if not order:
        raise NotFoundError(f"Pedido #{id} não encontrado")
    return order


def generate_review_token():
    """Token opaco e único entre todos os já emitidos"""
    while True:
        token = secrets.token_hex(16)
        if not Order.query.filter_by(review_token=token).first():
            return token


@bp.route("/orcamento", methods=["POST"])
def create_order():
    """Recebe o pedido de orçamento do site"""
    data = get_json()

    order = Order(
        status=STATUS_PENDING,
        customer_name=required_str(data, "nome", max_length=120),
        phone=required_str(data, "whatsapp", max_length=40),
        address=optional_str(data, "endereco"),
        child_count=optional_int(data, "qtd_criancas"),
        age_range=optional_str(data, "faixa_etaria"),
        tent_model=optional_str(data, "modelo_barraca"),
        tent_count=optional_int(data, "qtd_barracas"),
        colors=optional_str(data, "cores"),
        theme=optional_str(data, "tema"),
        standard_items=str_list(data, "itens_padrao"),
        extra_items=optional_str(data, "itens_adicionais"),
        event_date=required_date(data, "data_festa"),
        event_time=optional_str(data, "horario"),
        dietary=str_list(data, "alimentacao"),
        allergies=optional_str(data, "alergias"),
    )

    db.session.add(order)
    db.session.commit()

    # O aviso não pode derrubar o pedido do cliente
    send_new_quote_notification(order)

    return jsonify({"success": True}), 201


@bp.route("/admin/pedidos", methods=["GET"])
@admin_required
def get_orders():
    """Lista todos os pedidos, mais recentes primeiro"""
    status = request.args.get("status")

    query = Order.query

    if status:
        if status not in ORDER_STATUSES:
            raise ValidationError(f"status deve ser um de: {', '.join(sorted(ORDER_STATUSES))}")
        query = query.filter_by(status=status)

    orders = query.order_by(Order.created_at.desc(), Order.id.desc()).all()
    return jsonify([o.to_dict() for o in orders])


@bp.route("/admin/pedidos/<int:id>/aprovar", methods=["PUT"])
@admin_required
def approve_order(id):
    """Aprova o pedido e gera o link de avaliação do cliente"""
    order = get_order_or_404(id)
    data = get_json()

    token = generate_review_token()
    order.approve(token, final_value=non_negative_number(data, "valor_final", required=False))

    db.session.commit()

    link_base = current_app.config["REVIEW_LINK_BASE"]
    return jsonify({
        "success": True,
        "token": token,
        "link": f"{link_base}?t={token}",
    })


@bp.route("/admin/pedidos/<int:id>/concluir", methods=["PUT"])
@admin_required
def complete_order(id):
    """Marca o pedido como concluído"""
    order = get_order_or_404(id)
    data = get_json()

    order.complete(final_value=non_negative_number(data, "valor_final", required=False))

    db.session.commit()

    return jsonify({"success": True})


@bp.route("/admin/pedidos/<int:id>", methods=["DELETE"])
@admin_required
def delete_order(id):
    """Exclui o pedido (e suas avaliações) em qualquer status"""
    order = get_order_or_404(id)

    db.session.delete(order)
    db.session.commit()

    return jsonify({"success": True})


@bp.route("/admin/agenda", methods=["GET"])
@admin_required
def get_agenda():
    """Festas aprovadas no formato do calendário"""
    orders = (
        Order.query.filter_by(status=STATUS_APPROVED)
        .order_by(Order.event_date, Order.id)
        .all()
    )
    return jsonify([o.to_event() for o in orders])
