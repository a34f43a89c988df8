"""
配置文件 - 开发/生产/测试环境分离
"""
import os
from urllib.parse import quote

from dotenv import load_dotenv

# 先加载 .env，再读取环境变量
load_dotenv()

basedir = os.path.abspath(os.path.dirname(__file__))


def build_database_uri():
    """DATABASE_URL 优先，否则由 DB_* 变量拼出 PostgreSQL 连接串"""
    url = os.environ.get('DATABASE_URL', '')
    # Render/Heroku 使用 postgres://，SQLAlchemy 只认 postgresql://
    if url.startswith('postgres://'):
        url = url.replace('postgres://', 'postgresql://', 1)
    if url:
        return url

    user = quote(os.environ.get('DB_USER', 'postgres'), safe='')
    password = quote(os.environ.get('DB_PASSWORD', 'password'), safe='')
    host = os.environ.get('DB_HOST', 'localhost')
    port = os.environ.get('DB_PORT', '5432')
    name = os.environ.get('DB_NAME', 'magic_the_gathering')

    url = f'postgresql+psycopg2://{user}:{password}@{host}:{port}/{name}'
    if os.environ.get('DB_SSL') == 'true':
        url += '?sslmode=require'
    return url


def engine_options(uri):
    """连接池参数 (SQLite 内存库使用 StaticPool，不能设置池大小)"""
    if uri.startswith('sqlite'):
        return {}
    return {
        'pool_size': int(os.environ.get('DB_POOL_SIZE', 20)),
        'max_overflow': 0,
        'pool_timeout': 10,
        'pool_recycle': 30,
        'pool_pre_ping': True,
        'connect_args': {'connect_timeout': 10},
    }


class BaseConfig:
    """基础配置"""
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'mtg-market-secret-key-change-in-production'
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    SQLALCHEMY_DATABASE_URI = build_database_uri()
    SQLALCHEMY_ENGINE_OPTIONS = engine_options(SQLALCHEMY_DATABASE_URI)

    # 启动时自动建表
    CREATE_TABLES = True

    # 卡片筛选结果上限
    CARD_FILTER_LIMIT = 50

    PORT = int(os.environ.get('PORT', 3000))

    # 限流: 每个 IP 15 分钟内最多 100 次请求
    RATELIMIT_ENABLED = True
    RATELIMIT_DEFAULT = os.environ.get('RATELIMIT_DEFAULT', '100 per 15 minutes')
    RATELIMIT_STORAGE_URI = os.environ.get('RATELIMIT_STORAGE_URI', 'memory://')
    RATELIMIT_HEADERS_ENABLED = True

    CONTENT_SECURITY_POLICY = (
        "default-src 'self'; "
        "style-src 'self' 'unsafe-inline' https://cdnjs.cloudflare.com; "
        "font-src 'self' https://cdnjs.cloudflare.com; "
        "script-src 'self' 'unsafe-inline'"
    )

    # 日志
    LOG_DIR = os.environ.get('LOG_DIR', os.path.join(basedir, '..', 'logs'))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_TO_FILE = True


class DevelopmentConfig(BaseConfig):
    """开发环境配置"""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(BaseConfig):
    """生产环境配置"""
    DEBUG = False


class TestingConfig(BaseConfig):
    """测试环境配置"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    RATELIMIT_ENABLED = False
    LOG_TO_FILE = False
