"""
卡组模型
"""
from mtg_market import db
from datetime import datetime


class Deck(db.Model):
    """
    用户上传的卡组
    id_creador 不加外键约束，列表查询时通过 LEFT JOIN 取创建者用户名
    """
    __tablename__ = 'mazo'

    id_mazo = db.Column(db.Integer, primary_key=True, autoincrement=False)

    nombre_mazo = db.Column(db.String(100), nullable=False)

    # 赛制: standard / modern / commander ...
    formato_mazo = db.Column(db.String(30), nullable=False)

    descripcion_mazo = db.Column(db.Text)

    # 创建者
    id_creador = db.Column(db.Integer, index=True)

    # 上传时间 (服务端写入)
    fecha_subida = db.Column(db.DateTime, default=datetime.utcnow, index=True)

    cant_cartas = db.Column(db.Integer, nullable=False, default=0)

    likes = db.Column(db.Integer, nullable=False, default=0)

    def __repr__(self):
        return f'<Deck {self.id_mazo} {self.nombre_mazo}>'

    def to_dict(self, creador=None):
        """creador 为 JOIN 得到的用户名，可能为 None"""
        return {
            'id_mazo': self.id_mazo,
            'nombre_mazo': self.nombre_mazo,
            'formato_mazo': self.formato_mazo,
            'cant_cartas': self.cant_cartas,
            'descripcion_mazo': self.descripcion_mazo,
            'fecha_subida': self.fecha_subida.isoformat() if self.fecha_subida else None,
            'likes': self.likes,
            'id_creador': self.id_creador,
            'creador': creador,
        }
