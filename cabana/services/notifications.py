"""
Serviço: Aviso de novo orçamento
Envia uma mensagem curta para o webhook do admin (WhatsApp, Slack, etc)
"""
import requests
from flask import current_app


def send_new_quote_notification(order):
    """
    Avisa o admin que chegou um orçamento novo

    Args:
        order: Order recém criado

    Returns:
        bool: True se o webhook aceitou a mensagem
    """
    message = f"""
🎪 Novo orçamento #{order.id}

Cliente: {order.customer_name} ({order.phone})
Festa: {order.event_date.isoformat()} {order.event_time or ''}
Barracas: {order.tent_count or '-'} {order.tent_model or ''}
    """.strip()

    return send_message(message)


def send_message(message):
    """Posta a mensagem no webhook configurado; nunca lança erro"""
    url = current_app.config.get("NOTIFY_WEBHOOK_URL")

    if not url:
        print(f"⚠️ Webhook de aviso não configurado. Mensagem: {message}")
        return False

    try:
        response = requests.post(
            url,
            json={"text": message},
            timeout=current_app.config.get("NOTIFY_TIMEOUT", 5),
        )
        response.raise_for_status()
    except requests.RequestException as e:
        print(f"❌ Erro enviando aviso: {e}")
        return False

    print("📱 Aviso de novo orçamento enviado")
    return True
