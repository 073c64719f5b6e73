"""
Modelo: Lançamento financeiro
Entradas e saídas lançadas à mão pelo admin
"""
from datetime import datetime
from ..db import db

ENTRY_TYPES = ("entrada", "saida")


class LedgerEntry(db.Model):
    __tablename__ = "financeiro"

    id = db.Column(db.Integer, primary_key=True)
    type = db.Column(db.String(20), nullable=False)
    # entrada | saida
    title = db.Column(db.String(200), nullable=False)
    value = db.Column(db.Float, nullable=False)
    description = db.Column(db.Text, nullable=True)
    posted_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "tipo": self.type,
            "titulo": self.title,
            "valor": self.value,
            "descricao": self.description,
            "data_lancamento": self.posted_at.isoformat() if self.posted_at else None,
        }
