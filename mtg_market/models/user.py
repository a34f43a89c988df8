"""
用户模型
"""
from mtg_market import db
from datetime import datetime


class User(db.Model):
    """市场用户，ID 由调用方提供"""
    __tablename__ = 'usuario'

    id_usuario = db.Column(db.Integer, primary_key=True, autoincrement=False)

    username = db.Column(db.String(50), nullable=False, index=True)

    email = db.Column(db.String(120), nullable=False)

    # 注册时间 (服务端写入)
    fecha_registro = db.Column(db.DateTime, default=datetime.utcnow, index=True)

    # 联系方式与地址 (可选)
    tlf = db.Column(db.String(30))
    pais = db.Column(db.String(60))
    ciudad = db.Column(db.String(60))
    calle = db.Column(db.String(120))

    def __repr__(self):
        return f'<User {self.id_usuario} {self.username}>'

    def to_dict(self):
        return {
            'id_usuario': self.id_usuario,
            'username': self.username,
            'email': self.email,
            'fecha_registro': self.fecha_registro.isoformat() if self.fecha_registro else None,
            'tlf': self.tlf,
            'pais': self.pais,
            'ciudad': self.ciudad,
            'calle': self.calle,
        }
