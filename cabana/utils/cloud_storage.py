"""
Utilidade: Google Cloud Storage
Cliente do bucket de mídia e listagem das fotos da galeria
"""
import json
import os
from itertools import islice
from flask import current_app
from google.cloud import storage
from ..errors import ExternalServiceError


def get_storage_client():
    """
    Obtém o cliente do Cloud Storage

    GOOGLE_APPLICATION_CREDENTIALS pode ser o JSON da service account (deploy)
    ou a rota do arquivo (desenvolvimento local).

    Returns:
        storage.Client ou None se não estiver configurado
    """
    creds = (current_app.config.get("GOOGLE_APPLICATION_CREDENTIALS") or "").strip()

    if not creds:
        print("⚠️ GOOGLE_APPLICATION_CREDENTIALS não está configurado")
        return None

    if creds.startswith("{"):
        try:
            creds_data = json.loads(creds)
        except json.JSONDecodeError as e:
            print(f"⚠️ GOOGLE_APPLICATION_CREDENTIALS não é um JSON válido: {e}")
            return None
        return storage.Client.from_service_account_info(creds_data)

    if os.path.exists(creds):
        return storage.Client.from_service_account_json(creds)

    print("⚠️ GOOGLE_APPLICATION_CREDENTIALS não é válido (nem JSON nem arquivo existente)")
    return None


def list_public_urls(prefix, max_results, timeout):
    """
    Lista as URLs públicas dos arquivos de uma "pasta" do bucket

    Args:
        prefix: Prefixo da pasta (ex: cabana/galeria/)
        max_results: Máximo de fotos devolvidas
        timeout: Timeout da chamada, em segundos

    Returns:
        list[str]: URLs públicas

    Raises:
        ExternalServiceError: Storage não configurado ou falha na chamada
    """
    bucket_name = current_app.config.get("GCS_BUCKET_NAME")
    if not bucket_name:
        raise ExternalServiceError("GCS_BUCKET_NAME não configurado")

    try:
        client = get_storage_client()
    except Exception as e:
        raise ExternalServiceError(f"Erro criando cliente do Cloud Storage: {e}") from e

    if client is None:
        raise ExternalServiceError("Cloud Storage não configurado")

    try:
        blobs = client.list_blobs(
            bucket_name, prefix=prefix, page_size=max_results, timeout=timeout
        )
        # Objetos terminados em "/" são marcadores de pasta e não contam no limite
        photos = (blob for blob in blobs if not blob.name.endswith("/"))
        return [blob.public_url for blob in islice(photos, max_results)]
    except Exception as e:
        raise ExternalServiceError(f"Erro listando {prefix}: {e}") from e
