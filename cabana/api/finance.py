"""
API: Financeiro
Relatório (festas concluídas + lançamentos) e lançamentos manuais
"""
from flask import Blueprint, jsonify
from ..db import db
from ..errors import ValidationError
from ..models import LedgerEntry
from ..models.ledger_entry import ENTRY_TYPES
from ..services.finance import build_report, summarize
from ..utils.validation import get_json, non_negative_number, optional_str, required_str
from .auth import admin_required

bp = Blueprint("finance", __name__)


@bp.route("/admin/financeiro", methods=["GET"])
@admin_required
def get_report():
    return jsonify(build_report())


@bp.route("/admin/financeiro/resumo", methods=["GET"])
@admin_required
def get_summary():
    return jsonify(summarize(build_report()))


@bp.route("/admin/financeiro", methods=["POST"])
@admin_required
def create_entry():
    """Lança uma entrada ou saída manual"""
    data = get_json()

    entry_type = data.get("tipo")
    if entry_type not in ENTRY_TYPES:
        raise ValidationError(f"tipo deve ser um de: {', '.join(ENTRY_TYPES)}")

    entry = LedgerEntry(
        type=entry_type,
        title=required_str(data, "titulo", max_length=200),
        value=non_negative_number(data, "valor"),
        description=optional_str(data, "descricao"),
    )

    db.session.add(entry)
    db.session.commit()

    return jsonify({"success": True, "lancamento": entry.to_dict()}), 201
