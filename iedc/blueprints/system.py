"""Liveness endpoint."""

from flask import Blueprint, current_app, jsonify

system_bp = Blueprint("system", __name__)


@system_bp.route("/ping", methods=["GET"])
def ping():
    return jsonify({'message': current_app.config.get('PING_MESSAGE') or 'ping'})


__all__ = ["system_bp"]
