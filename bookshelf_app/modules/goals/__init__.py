"""Blueprint registration for the reading goals module."""

from flask import Blueprint


goals_bp = Blueprint('goals', __name__)

from . import routes  # noqa: E402  # isort:skip
