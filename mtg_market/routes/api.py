"""
JSON API 路由 - 供前端异步调用

每个请求只执行一条 SQL：创建接口一条 INSERT，列表接口一条 SELECT
"""
from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify
from loguru import logger
from sqlalchemy.orm import aliased

from mtg_market import db
from mtg_market.filters import CardFilter
from mtg_market.models import User, Branch, Product, Deck, Transaction
from mtg_market.validation import (
    get_payload, require_fields, parse_positive_int, parse_optional_positive_int,
    parse_decimal, parse_bool, parse_str, parse_optional_str,
)

bp = Blueprint('api', __name__, url_prefix='/api')


@bp.route('/health')
def health():
    """健康检查"""
    return jsonify({
        'success': True,
        'message': 'Servidor funcionando correctamente',
        'timestamp': datetime.now(timezone.utc).isoformat(),
    })


# ===== 用户 =====

@bp.route('/usuarios', methods=['POST'])
def create_user():
    """创建用户"""
    data = get_payload()
    require_fields(data, ('id_usuario', 'username', 'email'), 'ID, username y email son requeridos')

    user = User(
        id_usuario=parse_positive_int(data['id_usuario'], 'id_usuario'),
        username=parse_str(data['username'], 'username', 50),
        email=parse_str(data['email'], 'email', 120),
        tlf=parse_optional_str(data.get('tlf'), 'tlf', 30),
        pais=parse_optional_str(data.get('pais'), 'pais', 60),
        ciudad=parse_optional_str(data.get('ciudad'), 'ciudad', 60),
        calle=parse_optional_str(data.get('calle'), 'calle', 120),
    )
    db.session.add(user)
    db.session.commit()

    logger.info(f"创建用户 {user.id_usuario} ({user.username})")
    return jsonify({
        'success': True,
        'id_usuario': user.id_usuario,
        'message': 'Usuario creado exitosamente',
    })


@bp.route('/usuarios', methods=['GET'])
def list_users():
    """用户列表，最新注册在前"""
    users = User.query.order_by(User.fecha_registro.desc()).all()
    return jsonify({'success': True, 'data': [u.to_dict() for u in users]})


# ===== 门店 =====

@bp.route('/sucursales', methods=['POST'])
def create_branch():
    """创建门店"""
    data = get_payload()
    require_fields(data, ('id_sucursal', 'pais', 'ciudad'), 'ID, país y ciudad son requeridos')

    branch = Branch(
        id_sucursal=parse_positive_int(data['id_sucursal'], 'id_sucursal'),
        pais=parse_str(data['pais'], 'pais', 60),
        ciudad=parse_str(data['ciudad'], 'ciudad', 60),
        calle=parse_optional_str(data.get('calle'), 'calle', 120),
        telefono=parse_optional_str(data.get('telefono'), 'telefono', 30),
    )
    db.session.add(branch)
    db.session.commit()

    logger.info(f"创建门店 {branch.id_sucursal} ({branch.ciudad})")
    return jsonify({
        'success': True,
        'id_sucursal': branch.id_sucursal,
        'message': 'Sucursal creada exitosamente',
    })


@bp.route('/sucursales', methods=['GET'])
def list_branches():
    """门店列表"""
    branches = Branch.query.order_by(Branch.id_sucursal.desc()).all()
    return jsonify({'success': True, 'data': [b.to_dict() for b in branches]})


# ===== 商品 =====

@bp.route('/productos', methods=['POST'])
def create_product():
    """登记商品"""
    data = get_payload()
    require_fields(data, ('id_productos', 'descripcion', 'coste'), 'ID, descripción y coste son requeridos')

    product = Product(
        id_productos=parse_positive_int(data['id_productos'], 'id_productos'),
        descr_producto=parse_str(data['descripcion'], 'descripcion', 255),
        coste_producto=parse_decimal(data['coste'], 'coste'),
        es_carta=parse_bool(data.get('es_carta'), 'es_carta'),
    )
    db.session.add(product)
    db.session.commit()

    logger.info(f"登记商品 {product.id_productos}")
    return jsonify({
        'success': True,
        'id_productos': product.id_productos,
        'message': 'Producto registrado exitosamente',
    })


@bp.route('/productos', methods=['GET'])
def list_products():
    """商品列表"""
    products = Product.query.order_by(Product.id_productos.desc()).all()
    return jsonify({'success': True, 'data': [p.to_dict() for p in products]})


# ===== 卡组 =====

@bp.route('/mazos', methods=['POST'])
def create_deck():
    """创建卡组"""
    data = get_payload()
    require_fields(data, ('id_mazo', 'nombre', 'formato'), 'ID, nombre y formato son requeridos')

    deck = Deck(
        id_mazo=parse_positive_int(data['id_mazo'], 'id_mazo'),
        nombre_mazo=parse_str(data['nombre'], 'nombre', 100),
        formato_mazo=parse_str(data['formato'], 'formato', 30),
        descripcion_mazo=parse_optional_str(data.get('descripcion'), 'descripcion'),
        id_creador=parse_optional_positive_int(data.get('id_creador'), 'id_creador'),
    )
    db.session.add(deck)
    db.session.commit()

    logger.info(f"创建卡组 {deck.id_mazo} ({deck.nombre_mazo})")
    return jsonify({
        'success': True,
        'id_mazo': deck.id_mazo,
        'message': 'Mazo creado exitosamente',
    })


@bp.route('/mazos', methods=['GET'])
def list_decks():
    """卡组列表，附带创建者用户名"""
    rows = db.session.query(Deck, User.username).outerjoin(
        User, Deck.id_creador == User.id_usuario
    ).order_by(Deck.fecha_subida.desc()).all()

    return jsonify({
        'success': True,
        'data': [deck.to_dict(creador=username) for deck, username in rows],
    })


# ===== 交易 =====

@bp.route('/transacciones', methods=['POST'])
def create_transaction():
    """登记交易"""
    data = get_payload()
    require_fields(
        data,
        ('ref_movimiento', 'tipo', 'id_emisor', 'id_receptor', 'cantidad'),
        'Todos los campos son requeridos',
    )

    transaction = Transaction(
        ref_movimiento=parse_positive_int(data['ref_movimiento'], 'ref_movimiento'),
        tipo_transaccion=parse_str(data['tipo'], 'tipo', 30),
        id_emisor=parse_positive_int(data['id_emisor'], 'id_emisor'),
        id_receptor=parse_positive_int(data['id_receptor'], 'id_receptor'),
        cantidad_productos=parse_positive_int(data['cantidad'], 'cantidad'),
    )
    db.session.add(transaction)
    db.session.commit()

    logger.info(f"登记交易 {transaction.ref_movimiento}: {transaction.id_emisor} -> {transaction.id_receptor}")
    return jsonify({
        'success': True,
        'ref_movimiento': transaction.ref_movimiento,
        'message': 'Transacción registrada exitosamente',
    })


@bp.route('/transacciones', methods=['GET'])
def list_transactions():
    """交易列表，附带双方用户名"""
    emisor = aliased(User)
    receptor = aliased(User)

    rows = db.session.query(Transaction, emisor.username, receptor.username).outerjoin(
        emisor, Transaction.id_emisor == emisor.id_usuario
    ).outerjoin(
        receptor, Transaction.id_receptor == receptor.id_usuario
    ).order_by(Transaction.fecha_transaccion.desc()).all()

    return jsonify({
        'success': True,
        'data': [t.to_dict(emisor=e, receptor=r) for t, e, r in rows],
    })


# ===== 卡牌 =====

@bp.route('/cartas/filtrar', methods=['POST'])
def filter_cards():
    """按名称/类型/法术力/稀有度筛选卡牌"""
    card_filter = CardFilter.from_payload(get_payload())
    limit = current_app.config['CARD_FILTER_LIMIT']

    cards = card_filter.build_query(limit).all()
    return jsonify({'success': True, 'data': [c.to_dict() for c in cards]})
