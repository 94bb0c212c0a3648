"""Sample content endpoints, one per access tier."""

from __future__ import annotations

from flask import Blueprint

from utils.access import Identity, roles_required

content_bp = Blueprint("content", __name__)

NEWBIE_TIER = ("NEWBIE", "USER", "MODERATOR", "ADMIN")
USER_TIER = ("USER", "MODERATOR", "ADMIN")
MODERATOR_TIER = ("MODERATOR", "ADMIN")
ADMIN_TIER = ("ADMIN",)


@content_bp.route("/all", methods=["GET"])
def all_access() -> str:
    return "Public Content."


@content_bp.route("/newbie", methods=["GET"])
@roles_required(*NEWBIE_TIER)
def newbie_access(identity: Identity) -> str:
    return "Newbie Content."


@content_bp.route("/user", methods=["GET"])
@roles_required(*USER_TIER)
def user_access(identity: Identity) -> str:
    return "User Content."


@content_bp.route("/moderator", methods=["GET"])
@roles_required(*MODERATOR_TIER)
def moderator_access(identity: Identity) -> str:
    return "Moderator Content."


@content_bp.route("/admin", methods=["GET"])
@roles_required(*ADMIN_TIER)
def admin_access(identity: Identity) -> str:
    return "Admin Content."
