"""
交易模型
"""
from mtg_market import db
from datetime import datetime
import secrets
import string


def generate_token(length=16):
    """生成交易令牌 (大写字母+数字)"""
    alphabet = string.ascii_uppercase + string.digits
    return ''.join(secrets.choice(alphabet) for _ in range(length))


class Transaction(db.Model):
    """
    用户之间的交易记录
    ref_movimiento 由调用方提供
    """
    __tablename__ = 'transaccion'

    ref_movimiento = db.Column(db.Integer, primary_key=True, autoincrement=False)

    # 交易类型: compra / venta / intercambio
    tipo_transaccion = db.Column(db.String(30), nullable=False)

    # 发送方 / 接收方用户
    id_emisor = db.Column(db.Integer, nullable=False, index=True)
    id_receptor = db.Column(db.Integer, nullable=False, index=True)

    cantidad_productos = db.Column(db.Integer, nullable=False)

    fecha_transaccion = db.Column(db.DateTime, default=datetime.utcnow, index=True)

    token_transaccion = db.Column(db.String(32), default=generate_token)

    def __repr__(self):
        return f'<Transaction {self.ref_movimiento} {self.tipo_transaccion}>'

    def to_dict(self, emisor=None, receptor=None):
        """emisor/receptor 为 JOIN 得到的用户名，可能为 None"""
        return {
            'ref_movimiento': self.ref_movimiento,
            'tipo_transaccion': self.tipo_transaccion,
            'token_transaccion': self.token_transaccion,
            'fecha_transaccion': self.fecha_transaccion.isoformat() if self.fecha_transaccion else None,
            'cantidad_productos': self.cantidad_productos,
            'id_emisor': self.id_emisor,
            'id_receptor': self.id_receptor,
            'emisor': emisor,
            'receptor': receptor,
        }
