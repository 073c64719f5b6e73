"""
Serviço: Relatório financeiro
Junta as festas concluídas com os lançamentos manuais, a cada leitura
"""
from datetime import datetime, time
from typing import Dict, List
from ..models import LedgerEntry, Order
from ..models.order import STATUS_COMPLETED

SOURCE_ORDER = "pedido"
SOURCE_LEDGER = "lancamento"


def _order_line(order: Order) -> Dict:
    return {
        "id": order.id,
        "origem": SOURCE_ORDER,
        "tipo": "entrada",
        "titulo": f"Festa: {order.customer_name}",
        "valor": order.final_value or 0,
        "data": datetime.combine(order.event_date, time.min),
    }


def _ledger_line(entry: LedgerEntry) -> Dict:
    return {
        "id": entry.id,
        "origem": SOURCE_LEDGER,
        "tipo": entry.type,
        "titulo": entry.title,
        "valor": entry.value,
        "descricao": entry.description,
        "data": entry.posted_at,
    }


def build_report() -> List[Dict]:
    """
    Linhas do relatório, da data mais recente para a mais antiga

    Cada festa concluída aparece uma vez como entrada, com o valor final e a
    data da festa; cada lançamento manual aparece uma vez como foi gravado.
    """
    lines = [_order_line(o) for o in Order.query.filter_by(status=STATUS_COMPLETED).all()]
    lines += [_ledger_line(e) for e in LedgerEntry.query.all()]

    lines.sort(key=lambda line: line["data"], reverse=True)

    for line in lines:
        line["data"] = line["data"].isoformat()

    return lines


def summarize(lines: List[Dict]) -> Dict:
    """Totais de entradas, saídas e saldo"""
    income = sum(line["valor"] for line in lines if line["tipo"] == "entrada")
    expenses = sum(line["valor"] for line in lines if line["tipo"] == "saida")
    return {
        "entradas": round(income, 2),
        "saidas": round(expenses, 2),
        "saldo": round(income - expenses, 2),
        "lancamentos": len(lines),
    }
