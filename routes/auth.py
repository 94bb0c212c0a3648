"""Authentication blueprint providing signup, activation and login endpoints."""

from __future__ import annotations
from http import HTTPStatus

from flask import Blueprint, jsonify, request

from services import auth as auth_service
from utils.request_validation import parse_json_request, string_fields

auth_bp = Blueprint("auth", __name__)

SIGNUP_FIELDS = ("name", "surname", "email", "password")
LOGIN_FIELDS = ("email", "password")


@auth_bp.route("/signup", methods=["POST"])
def signup() -> tuple:
    """Register a team member and send them an activation link."""
    payload = parse_json_request(request, required_keys=SIGNUP_FIELDS)
    name, surname, email, password = string_fields(payload, *SIGNUP_FIELDS, raw=("password",))

    auth_service.signup(name, surname, email, password)

    return (
        jsonify({"message": "User registration successful. Check your inbox to activate the account."}),
        HTTPStatus.CREATED,
    )


@auth_bp.route("/accountVerification/<string:token>", methods=["GET"])
def verify_account(token: str) -> tuple:
    """Activate the account the token was issued for."""
    auth_service.verify_account(token)
    return jsonify({"message": "Account activated successfully."}), HTTPStatus.OK


@auth_bp.route("/login", methods=["POST"])
def login() -> tuple:
    """Authenticate a user and return a JWT."""
    payload = parse_json_request(request, required_keys=LOGIN_FIELDS)
    email, password = string_fields(payload, *LOGIN_FIELDS, raw=("password",))

    return jsonify(auth_service.login(email, password)), HTTPStatus.OK
