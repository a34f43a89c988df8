"""
前端入口
"""
from flask import Blueprint, current_app

bp = Blueprint('main', __name__)


@bp.route('/')
def index():
    """单页应用外壳"""
    return current_app.send_static_file('index.html')
