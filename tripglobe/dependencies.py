import os
import json
import logging
from typing import Optional, Dict, Any

from fastapi import Header, HTTPException
from firebase_admin import credentials, initialize_app, get_app, _apps, auth, firestore as admin_firestore
from google.cloud import secretmanager
from google.api_core import exceptions as gapi_exceptions

from tripglobe.config import settings

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


SERVICE_ACCOUNT_SECRET = os.getenv("SERVICE_ACCOUNT_SECRET")  # e.g. projects/PROJECT_ID/secrets/SA_KEY/versions/latest
GOOGLE_APPLICATION_CREDENTIALS = os.getenv("GOOGLE_APPLICATION_CREDENTIALS")  # local path (dev)


def _access_secret_from_sm(resource_name: str) -> str:
    """
    Given a full Secret Manager resource name (projects/.../secrets/.../versions/...),
    retrieve the secret payload (string).
    """
    try:
        client = secretmanager.SecretManagerServiceClient()
        response = client.access_secret_version(request={"name": resource_name})
        return response.payload.data.decode("UTF-8")
    except gapi_exceptions.GoogleAPIError as e:
        logger.exception("Unable to access secret %s: %s", resource_name, e)
        raise


def _init_firebase(cred=None):
    """Initialize firebase_admin once; later calls return the existing app."""
    if _apps:
        return get_app()
    app = initialize_app(cred) if cred is not None else initialize_app()
    logger.info("Initialized firebase_admin (%s)", "service account" if cred is not None else "ADC")
    return app


def init_firebase_admin():
    """
    Initialize firebase_admin and return a Firestore client.
    Order of preference:
      1) SERVICE_ACCOUNT_SECRET env var -> fetch JSON from Secret Manager
      2) GOOGLE_APPLICATION_CREDENTIALS env var -> local file path (dev)
      3) ADC (Cloud Run) -> initialize_app() without args
    """
    if SERVICE_ACCOUNT_SECRET:
        secret_res_name = SERVICE_ACCOUNT_SECRET
        # support shorthand secret ID (e.g., "SA_KEY") by turning it into a resource name if project id provided
        if not secret_res_name.startswith("projects/") and settings.project_id:
            secret_res_name = f"projects/{settings.project_id}/secrets/{SERVICE_ACCOUNT_SECRET}/versions/latest"
        logger.info("Loading service account from Secret Manager: %s", secret_res_name)
        sa_dict = json.loads(_access_secret_from_sm(secret_res_name))
        _init_firebase(credentials.Certificate(sa_dict))
        return admin_firestore.client(database_id=settings.database)

    if GOOGLE_APPLICATION_CREDENTIALS and os.path.exists(GOOGLE_APPLICATION_CREDENTIALS):
        logger.info("Loading service account from path: %s", GOOGLE_APPLICATION_CREDENTIALS)
        _init_firebase(credentials.Certificate(GOOGLE_APPLICATION_CREDENTIALS))
        return admin_firestore.client(database_id=settings.database)

    logger.info("No explicit service account provided, attempting Application Default Credentials (ADC)")
    _init_firebase()
    return admin_firestore.client()


# Lazily initialize a single global Firestore client to reuse across requests
_db_client = None


def get_firestore_client():
    global _db_client
    if _db_client is None:
        _db_client = init_firebase_admin()
    return _db_client


# ---------------------------
# FastAPI dependencies
# ---------------------------
def _extract_bearer_token(authorization_header: Optional[str]) -> str:
    if not authorization_header:
        raise HTTPException(status_code=401, detail="Missing Authorization header")
    parts = authorization_header.split(" ")
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise HTTPException(status_code=401, detail="Invalid Authorization header")
    return parts[1]


def verify_id_token(token: str) -> Dict[str, Any]:
    """
    Verify a Firebase ID token and return the decoded token dict (contains uid, claims).
    Raises HTTPException(401) on failure.
    """
    get_firestore_client()  # verification needs an initialized firebase app
    try:
        return auth.verify_id_token(token)
    except (ValueError, auth.InvalidIdTokenError, auth.ExpiredIdTokenError, auth.RevokedIdTokenError) as e:
        logger.warning("Invalid Firebase ID token: %s", e)
        raise HTTPException(status_code=401, detail="Invalid or expired ID token")


async def verify_id_token_dependency(authorization: Optional[str] = Header(None)) -> Dict[str, Any]:
    """
    FastAPI dependency that checks the Authorization header and verifies the ID token.
    Use it as a parameter:
        def endpoint(decoded_token = Depends(verify_id_token_dependency)):
            uid = decoded_token["uid"]
    """
    token = _extract_bearer_token(authorization)
    return verify_id_token(token)


async def optional_verify_id_token_dependency(authorization: Optional[str] = Header(None)) -> Optional[Dict[str, Any]]:
    """Like verify_id_token_dependency, but anonymous requests get None instead of a 401."""
    if not authorization:
        return None
    return verify_id_token(_extract_bearer_token(authorization))


def get_current_uid(decoded_token: Dict[str, Any]) -> str:
    uid = decoded_token.get("uid") if decoded_token else None
    if not uid:
        raise HTTPException(status_code=401, detail="Invalid UID in token")
    return uid
