"""
商品模型
"""
from mtg_market import db


class Product(db.Model):
    """
    商品
    es_carta 区分单卡与其他商品 (卡包、卡套等)
    """
    __tablename__ = 'productos'

    id_productos = db.Column(db.Integer, primary_key=True, autoincrement=False)

    descr_producto = db.Column(db.String(255), nullable=False)

    # 价格，两位小数
    coste_producto = db.Column(db.Numeric(10, 2), nullable=False)

    es_carta = db.Column(db.Boolean, nullable=False, default=False)

    def __repr__(self):
        return f'<Product {self.id_productos} {self.descr_producto}>'

    def to_dict(self):
        return {
            'id_productos': self.id_productos,
            'descr_producto': self.descr_producto,
            'coste_producto': float(self.coste_producto) if self.coste_producto is not None else None,
            'es_carta': bool(self.es_carta),
        }
