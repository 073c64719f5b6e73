"""
Modelo: Orçamento (pedido de festa)
Guarda o pedido do cliente e seu ciclo de aprovação
"""
from datetime import datetime
from ..db import db
from ..errors import InvalidTransitionError

STATUS_PENDING = "pending"
STATUS_APPROVED = "approved"
STATUS_COMPLETED = "completed"

# Único caminho permitido: pending -> approved -> completed
TRANSITIONS = {
    STATUS_PENDING: STATUS_APPROVED,
    STATUS_APPROVED: STATUS_COMPLETED,
}


class Order(db.Model):
    __tablename__ = "orcamentos"

    id = db.Column(db.Integer, primary_key=True)

    # Cliente
    customer_name = db.Column(db.String(120), nullable=False)
    phone = db.Column(db.String(40), nullable=False)
    address = db.Column(db.Text, nullable=True)

    # Festa
    child_count = db.Column(db.Integer, nullable=True)
    age_range = db.Column(db.String(40), nullable=True)
    tent_model = db.Column(db.String(80), nullable=True)
    tent_count = db.Column(db.Integer, nullable=True)
    colors = db.Column(db.String(200), nullable=True)
    theme = db.Column(db.String(200), nullable=True)
    standard_items = db.Column(db.JSON, nullable=False, default=list)
    extra_items = db.Column(db.Text, nullable=True)
    event_date = db.Column(db.Date, nullable=False)
    event_time = db.Column(db.String(20), nullable=True)
    dietary = db.Column(db.JSON, nullable=False, default=list)
    allergies = db.Column(db.Text, nullable=True)

    # Ciclo de vida
    status = db.Column(db.String(20), nullable=False)
    # pending | approved | completed
    review_token = db.Column(db.String(64), nullable=True, unique=True, index=True)
    final_value = db.Column(db.Float, nullable=True)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    approved_at = db.Column(db.DateTime, nullable=True)
    completed_at = db.Column(db.DateTime, nullable=True)

    reviews = db.relationship(
        "Review", backref="order", cascade="all, delete-orphan"
    )

    def __init__(self, **kwargs):
        kwargs.setdefault("status", STATUS_PENDING)
        kwargs.setdefault("standard_items", [])
        kwargs.setdefault("dietary", [])
        super().__init__(**kwargs)

    def _advance(self, target):
        if TRANSITIONS.get(self.status) != target:
            raise InvalidTransitionError(
                f"Pedido #{self.id} está '{self.status}' e não pode passar para '{target}'"
            )
        self.status = target

    def approve(self, token, final_value=None):
        """pending -> approved, guardando o token de avaliação"""
        self._advance(STATUS_APPROVED)
        self.review_token = token
        self.approved_at = datetime.utcnow()
        if final_value is not None:
            self.final_value = final_value

    def complete(self, final_value=None):
        """approved -> completed; o pedido entra no financeiro"""
        self._advance(STATUS_COMPLETED)
        self.completed_at = datetime.utcnow()
        if final_value is not None:
            self.final_value = final_value

    def to_dict(self):
        return {
            "id": self.id,
            "nome": self.customer_name,
            "whatsapp": self.phone,
            "endereco": self.address,
            "qtd_criancas": self.child_count,
            "faixa_etaria": self.age_range,
            "modelo_barraca": self.tent_model,
            "qtd_barracas": self.tent_count,
            "cores": self.colors,
            "tema": self.theme,
            "itens_padrao": self.standard_items or [],
            "itens_adicionais": self.extra_items,
            "data_festa": self.event_date.isoformat() if self.event_date else None,
            "horario": self.event_time,
            "alimentacao": self.dietary or [],
            "alergias": self.allergies,
            "status": self.status,
            "token_avaliacao": self.review_token,
            "valor_final": self.final_value,
            "data_pedido": self.created_at.isoformat() if self.created_at else None,
            "aprovado_em": self.approved_at.isoformat() if self.approved_at else None,
            "concluido_em": self.completed_at.isoformat() if self.completed_at else None,
        }

    def to_event(self):
        """Formato usado pela agenda do painel"""
        return {
            "id": self.id,
            "title": self.customer_name,
            "start": self.event_date.isoformat() if self.event_date else None,
            "whatsapp": self.phone,
            "endereco": self.address,
            "horario": self.event_time,
            "modelo_barraca": self.tent_model,
            "qtd_barracas": self.tent_count,
        }
