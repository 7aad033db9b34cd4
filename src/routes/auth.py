import logging

from flask import Blueprint, current_app, g, jsonify, request
from sqlalchemy import select

from extensions import db
from src.models import User
from src.routes.schemas import LoginIn
from src.services.token_service import InvalidToken


logger = logging.getLogger("routes.auth")

auth_bp = Blueprint("auth", __name__)

PUBLIC_ENDPOINTS = {"auth.login", "static"}
BEARER_PREFIX = "Bearer "


class AuthenticationFailed(Exception):
    def __init__(self, message: str = "Authentication required"):
        self.message = message
        super().__init__(message)


def _token_service():
    return current_app.extensions["token_service"]


def _bearer_token() -> str | None:
    header = request.headers.get("Authorization")
    if not header or not header.startswith(BEARER_PREFIX):
        return None
    return header[len(BEARER_PREFIX):].strip() or None


@auth_bp.before_app_request
def load_authenticated_user():
    """
    Resolve the bearer token into `g.current_user` for every protected endpoint.
    Requests without a valid token never reach the view.
    """
    if request.endpoint in PUBLIC_ENDPOINTS or request.endpoint is None:
        return None

    token = _bearer_token()
    if token is None:
        raise AuthenticationFailed("Missing bearer token")

    try:
        login = _token_service().subject(token)
    except InvalidToken as e:
        raise AuthenticationFailed(str(e)) from e

    user = db.session.scalars(select(User).filter_by(login=login)).first()
    if user is None:
        logger.warning(f"[auth] token subject has no user login={login!r}")
        raise AuthenticationFailed("Unknown user")

    g.current_user = user
    return None


@auth_bp.route("/login", methods=["POST"])
def login():
    """Exchange login + password for a bearer token."""
    payload = LoginIn.model_validate(request.get_json(silent=True) or {})

    user = db.session.scalars(select(User).filter_by(login=payload.login)).first()
    if user is None or not user.check_password(payload.password):
        logger.warning(f"[login] bad credentials login={payload.login!r}")
        raise AuthenticationFailed("Invalid login or password")

    token = _token_service().issue(user.login)
    logger.info(f"[login] issued token login={user.login!r}")
    return jsonify({"token": token, "type": "Bearer"})
