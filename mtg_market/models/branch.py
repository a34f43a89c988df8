"""
门店模型
"""
from mtg_market import db


class Branch(db.Model):
    """实体门店"""
    __tablename__ = 'sucursal'

    id_sucursal = db.Column(db.Integer, primary_key=True, autoincrement=False)

    pais = db.Column(db.String(60), nullable=False)
    ciudad = db.Column(db.String(60), nullable=False)
    calle = db.Column(db.String(120))
    telefono = db.Column(db.String(30))

    def __repr__(self):
        return f'<Branch {self.id_sucursal} {self.ciudad}>'

    def to_dict(self):
        return {
            'id_sucursal': self.id_sucursal,
            'pais': self.pais,
            'ciudad': self.ciudad,
            'calle': self.calle,
            'telefono': self.telefono,
        }
