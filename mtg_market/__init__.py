"""
Magic: The Gathering 交易市场 - Flask 应用工厂
"""
from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from loguru import logger
from sqlalchemy import event
import os

db = SQLAlchemy()
limiter = Limiter(key_func=get_remote_address)


def create_app(config_name=None):
    """应用工厂函数"""
    app = Flask(__name__)

    # 加载配置
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    app.config.from_object(f'mtg_market.config.{config_name.capitalize()}Config')

    _configure_logging(app)

    # 初始化扩展
    db.init_app(app)
    limiter.init_app(app)

    # 注册蓝图
    from mtg_market.routes import main, api

    app.register_blueprint(main.bp)
    app.register_blueprint(api.bp)

    from mtg_market.errors import register_error_handlers
    register_error_handlers(app)

    @app.after_request
    def security_headers(resp):
        """安全相关响应头"""
        resp.headers.setdefault('Content-Security-Policy', app.config['CONTENT_SECURITY_POLICY'])
        resp.headers.setdefault('X-Content-Type-Options', 'nosniff')
        resp.headers.setdefault('X-Frame-Options', 'SAMEORIGIN')
        resp.headers.setdefault('Referrer-Policy', 'no-referrer')
        return resp

    with app.app_context():
        event.listen(db.engine, 'connect', _on_connect)

        # 创建数据库表
        if app.config['CREATE_TABLES']:
            db.create_all()

        logger.info(f"数据库: {db.engine.url.database} | 环境: {config_name}")

    return app


def _configure_logging(app):
    """日志写入 logs/，按大小轮转"""
    if not app.config['LOG_TO_FILE']:
        return

    log_dir = app.config['LOG_DIR']
    os.makedirs(log_dir, exist_ok=True)
    logger.add(
        os.path.join(log_dir, 'server_{time}.log'),
        rotation='10 MB',
        retention='7 days',
        level=app.config['LOG_LEVEL'],
    )


def _on_connect(dbapi_connection, connection_record):
    logger.debug("连接池新建数据库连接")
