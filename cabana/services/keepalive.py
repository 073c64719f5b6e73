"""
Serviço: Ping periódico do banco
Evita que o banco derrube conexões ociosas do pool
"""
import threading
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from ..db import db


def ping(app):
    """Executa SELECT 1; falhas só vão para o log"""
    with app.app_context():
        try:
            db.session.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            print(f"❌ Ping DB Error: {e.__class__.__name__}")
            return False
        finally:
            db.session.remove()


def start_keepalive(app, interval=None):
    """
    Inicia a thread do ping

    Args:
        app: App Flask
        interval: Segundos entre pings (padrão: KEEPALIVE_INTERVAL)

    Returns:
        threading.Event para parar a thread, ou None se desativado
    """
    interval = app.config.get("KEEPALIVE_INTERVAL", 0) if interval is None else interval
    if not interval:
        return None

    stop = threading.Event()

    def run():
        while not stop.wait(interval):
            ping(app)

    thread = threading.Thread(target=run, name="db-keepalive", daemon=True)
    thread.start()
    return stop
