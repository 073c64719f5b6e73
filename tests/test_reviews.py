import pytest
from sqlalchemy.exc import IntegrityError

from cabana.api import reviews as reviews_api
from cabana.db import db
from cabana.models import Review


def test_invalid_token_creates_nothing(client):
    response = client.post(
        "/api/cliente/avaliar",
        json={"token": "nao-existe", "rating": 5, "comentario": "Ótimo"},
    )

    assert response.status_code == 400
    assert response.get_json() == {"error": "Token inválido"}
    assert Review.query.count() == 0


@pytest.mark.parametrize("body", [{}, {"token": ""}, {"token": 123, "rating": 5}])
def test_missing_token_is_invalid(client, body):
    response = client.post("/api/cliente/avaliar", json=body)
    assert response.status_code == 400
    assert Review.query.count() == 0


def test_valid_token_creates_one_review(client, completed_order):
    order_id, token = completed_order

    response = client.post(
        "/api/cliente/avaliar",
        json={
            "token": token,
            "rating": 5,
            "comentario": "As crianças amaram!",
            "fotos": ["https://example.com/a.jpg"],
            "nome": "Outro Nome",
        },
    )

    assert response.status_code == 200
    assert response.get_json() == {"success": True}

    review = Review.query.one()
    assert review.order_id == order_id
    assert review.customer_name == "Beatriz"
    assert review.rating == 5
    assert review.comment == "As crianças amaram!"
    assert review.photo_urls == ["https://example.com/a.jpg"]
    assert review.visible is True


def test_token_is_single_use(client, completed_order):
    _, token = completed_order
    client.post("/api/cliente/avaliar", json={"token": token, "rating": 4})

    response = client.post("/api/cliente/avaliar", json={"token": token, "rating": 1})

    assert response.status_code == 400
    assert Review.query.count() == 1
    assert Review.query.one().rating == 4


def test_review_requires_completed_order(client, admin_headers, create_order):
    order_id = create_order()
    token = client.put(f"/api/admin/pedidos/{order_id}/aprovar", headers=admin_headers).get_json()["token"]

    response = client.post("/api/cliente/avaliar", json={"token": token, "rating": 5})

    assert response.status_code == 400
    assert Review.query.count() == 0


@pytest.mark.parametrize("rating", [0, 6, 4.5, "cinco", None, True])
def test_rating_must_be_between_one_and_five(client, completed_order, rating):
    _, token = completed_order

    response = client.post("/api/cliente/avaliar", json={"token": token, "rating": rating})

    assert response.status_code == 400
    assert Review.query.count() == 0


def test_photos_must_be_a_list_of_urls(client, completed_order):
    _, token = completed_order

    response = client.post(
        "/api/cliente/avaliar", json={"token": token, "rating": 5, "fotos": "a.jpg"}
    )

    assert response.status_code == 400


def test_public_list_shows_only_visible(client, admin_headers, completed_order):
    _, token = completed_order
    client.post("/api/cliente/avaliar", json={"token": token, "rating": 5})
    review_id = Review.query.one().id

    assert len(client.get("/api/depoimentos").get_json()) == 1

    response = client.put(
        f"/api/admin/avaliacoes/{review_id}/visibilidade",
        json={"visivel": False},
        headers=admin_headers,
    )
    assert response.status_code == 200
    assert response.get_json()["visivel"] is False

    assert client.get("/api/depoimentos").get_json() == []
    all_reviews = client.get("/api/admin/avaliacoes", headers=admin_headers).get_json()
    assert [r["id"] for r in all_reviews] == [review_id]


def test_visibility_requires_boolean(client, admin_headers, completed_order):
    _, token = completed_order
    client.post("/api/cliente/avaliar", json={"token": token, "rating": 5})
    review_id = Review.query.one().id

    response = client.put(
        f"/api/admin/avaliacoes/{review_id}/visibilidade",
        json={"visivel": "sim"},
        headers=admin_headers,
    )

    assert response.status_code == 400
    assert db.session.get(Review, review_id).visible is True


def test_visibility_unknown_review(client, admin_headers):
    response = client.put(
        "/api/admin/avaliacoes/42/visibilidade", json={"visivel": True}, headers=admin_headers
    )
    assert response.status_code == 404


def test_schema_allows_one_review_per_order(app, completed_order):
    order_id, _ = completed_order
    db.session.add(Review(order_id=order_id, customer_name="Beatriz", rating=5))
    db.session.commit()

    db.session.add(Review(order_id=order_id, customer_name="Beatriz", rating=1))
    with pytest.raises(IntegrityError):
        db.session.commit()
    db.session.rollback()

    assert Review.query.count() == 1


def test_concurrent_submission_with_same_token(client, completed_order, monkeypatch):
    order_id, token = completed_order
    real_parse_rating = reviews_api.parse_rating

    def parse_rating_after_other_request(data):
        # Outra requisição grava entre a checagem e o commit
        db.session.add(Review(order_id=order_id, customer_name="Beatriz", rating=3))
        db.session.commit()
        return real_parse_rating(data)

    monkeypatch.setattr(reviews_api, "parse_rating", parse_rating_after_other_request)

    response = client.post("/api/cliente/avaliar", json={"token": token, "rating": 5})

    assert response.status_code == 400
    assert response.get_json() == {"error": "Este link de avaliação já foi utilizado"}
    assert Review.query.count() == 1
    assert Review.query.one().rating == 3
