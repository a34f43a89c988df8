"""
卡牌详情模型 - 只读参考数据，由导入脚本写入
"""
from mtg_market import db


class CardDetail(db.Model):
    """
    卡牌详情
    id_juego 为游戏内编号
    """
    __tablename__ = 'detalle_carta'

    id_juego = db.Column(db.Integer, primary_key=True, autoincrement=False)

    nombre_carta = db.Column(db.String(200), nullable=False, index=True)

    # 效果文本
    habilidades = db.Column(db.Text)

    # 稀有度: common / uncommon / rare / mythic rare
    rareza = db.Column(db.String(30), index=True)

    artista = db.Column(db.String(120))

    # 法术力费用，如 {2}{R}{R}
    mana = db.Column(db.String(50))

    # 主类型: Creature / Instant / Sorcery ...
    tipo_principal = db.Column(db.String(60), index=True)

    def __repr__(self):
        return f'<CardDetail {self.id_juego} {self.nombre_carta}>'

    def to_dict(self):
        return {
            'id_juego': self.id_juego,
            'nombre_carta': self.nombre_carta,
            'habilidades': self.habilidades,
            'rareza': self.rareza,
            'artista': self.artista,
            'mana': self.mana,
            'tipo_principal': self.tipo_principal,
        }
