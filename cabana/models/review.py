"""
Modelo: Avaliação
Depoimento do cliente ligado a um pedido concluído
"""
from datetime import datetime
from ..db import db


class Review(db.Model):
    __tablename__ = "avaliacoes"

    id = db.Column(db.Integer, primary_key=True)
    # Um token vale uma única avaliação: no máximo uma por pedido
    order_id = db.Column(
        db.Integer, db.ForeignKey("orcamentos.id", ondelete="CASCADE"), nullable=False, unique=True
    )

    # Copiado do pedido, não do formulário
    customer_name = db.Column(db.String(120), nullable=False)

    rating = db.Column(db.Integer, nullable=False)
    comment = db.Column(db.Text, nullable=True)
    photo_urls = db.Column(db.JSON, nullable=False, default=list)
    visible = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "id_orcamento": self.order_id,
            "cliente_nome": self.customer_name,
            "rating": self.rating,
            "comentario": self.comment,
            "fotos_urls": self.photo_urls or [],
            "visivel": self.visible,
            "data_avaliacao": self.created_at.isoformat() if self.created_at else None,
        }
