"""
异常类型与统一的 JSON 错误处理
"""
from flask import jsonify, request
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from mtg_market import db


class AppError(Exception):
    """应用级错误基类"""
    status_code = 500

    def __init__(self, message, field=None):
        super().__init__(message)
        self.message = message
        self.field = field


class ValidationError(AppError):
    """请求参数缺失或格式错误"""
    status_code = 400


NOT_FOUND_MESSAGE = 'Ruta no encontrada'
INTERNAL_ERROR_MESSAGE = 'Error interno del servidor'


def error_response(message, status):
    """错误信封 {success: false, error}"""
    return jsonify({'success': False, 'error': message}), status


def register_error_handlers(app):
    """注册错误处理器，所有错误都以 JSON 信封返回"""

    @app.errorhandler(AppError)
    def handle_app_error(err):
        logger.warning(f"{request.method} {request.path} -> {err.status_code}: {err.message}")
        return error_response(err.message, err.status_code)

    @app.errorhandler(SQLAlchemyError)
    def handle_persistence_error(err):
        db.session.rollback()
        # 优先返回驱动层的原始信息
        message = str(getattr(err, 'orig', None) or err)
        logger.error(f"{request.method} {request.path} 数据库错误: {message}")
        return error_response(message, 500)

    @app.errorhandler(404)
    @app.errorhandler(405)
    def handle_not_found(err):
        logger.warning(f"{request.method} {request.path} -> 404")
        return error_response(NOT_FOUND_MESSAGE, 404)

    @app.errorhandler(429)
    def handle_rate_limited(err):
        logger.warning(f"限流: {request.remote_addr} {request.path}")
        return error_response('Demasiadas solicitudes, inténtalo más tarde', 429)

    @app.errorhandler(Exception)
    def handle_unexpected(err):
        if isinstance(err, HTTPException):
            return error_response(err.description, err.code)
        logger.exception(f"未处理的错误: {request.method} {request.path}")
        return error_response(INTERNAL_ERROR_MESSAGE, 500)
