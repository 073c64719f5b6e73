"""
Modelo: Item da tabela de preços
Itens vendáveis usados no orçamento e na listagem pública
"""
from ..db import db


class PriceItem(db.Model):
    __tablename__ = "tabela_precos"

    id = db.Column(db.Integer, primary_key=True)
    key = db.Column(db.String(64), nullable=False, unique=True)
    description = db.Column(db.String(200), nullable=False)
    category = db.Column(db.String(80), nullable=False)
    unit_price = db.Column(db.Float, nullable=False)

    # Itens indisponíveis somem da listagem pública
    available = db.Column(db.Boolean, nullable=False, default=True)

    def to_dict(self):
        return {
            "id": self.id,
            "item_chave": self.key,
            "descricao": self.description,
            "categoria": self.category,
            "valor": self.unit_price,
            "disponivel": self.available,
        }
