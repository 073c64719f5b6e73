import pytest

from cabana import create_app
from cabana.db import db


ADMIN_PASSWORD = "segredo-de-teste"


@pytest.fixture
def app():
    app = create_app("testing")
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_headers():
    return {"X-Admin-Password": ADMIN_PASSWORD}


@pytest.fixture
def quote_payload():
    return {
        "nome": "Ana",
        "whatsapp": "+551199999999",
        "endereco": "Rua das Flores, 10",
        "qtd_criancas": 6,
        "faixa_etaria": "5-8",
        "modelo_barraca": "Tradicional",
        "qtd_barracas": 3,
        "cores": "rosa e branco",
        "tema": "Unicórnio",
        "itens_padrao": ["colchão", "travesseiro"],
        "itens_adicionais": "balões",
        "data_festa": "2025-03-01",
        "horario": "19:00",
        "alimentacao": ["pizza"],
        "alergias": "amendoim",
    }


@pytest.fixture
def create_order(client, quote_payload):
    """Cria um orçamento pela API e devolve o id"""
    from cabana.models import Order

    def _create(**overrides):
        payload = {**quote_payload, **overrides}
        response = client.post("/api/orcamento", json=payload)
        assert response.status_code == 201
        return Order.query.order_by(Order.id.desc()).first().id

    return _create


@pytest.fixture
def completed_order(client, admin_headers, create_order):
    """Pedido aprovado e concluído; devolve (id, token)"""
    order_id = create_order(nome="Beatriz")
    approved = client.put(f"/api/admin/pedidos/{order_id}/aprovar", headers=admin_headers)
    token = approved.get_json()["token"]
    client.put(
        f"/api/admin/pedidos/{order_id}/concluir",
        json={"valor_final": 850},
        headers=admin_headers,
    )
    return order_id, token
