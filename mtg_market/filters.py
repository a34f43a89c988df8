"""
卡牌筛选查询构建器
"""
from dataclasses import dataclass, fields
from typing import List, Optional, Tuple

from mtg_market.errors import ValidationError
from mtg_market.models.card import CardDetail

CARD_FILTER_LIMIT = 50

# 请求字段 -> 表列，顺序即谓词追加顺序
FILTER_COLUMNS = (
    ('nombre', 'nombre_carta'),
    ('tipo', 'tipo_principal'),
    ('mana', 'mana'),
    ('rareza', 'rareza'),
)


def _escape_like(value: str) -> str:
    """转义 LIKE 通配符，保证按字面子串匹配"""
    return value.replace('\\', '\\\\').replace('%', '\\%').replace('_', '\\_')


@dataclass
class CardFilter:
    """四个可选的子串条件，不区分大小写，空值不参与筛选"""
    nombre: Optional[str] = None
    tipo: Optional[str] = None
    mana: Optional[str] = None
    rareza: Optional[str] = None

    @classmethod
    def from_payload(cls, data: dict) -> 'CardFilter':
        values = {}
        for f in fields(cls):
            raw = data.get(f.name)
            if raw is None:
                continue
            # 数字按字符串匹配，如 mana: 3
            if isinstance(raw, (int, float)) and not isinstance(raw, bool):
                raw = str(raw)
            if not isinstance(raw, str):
                raise ValidationError(f'{f.name} debe ser texto', field=f.name)
            values[f.name] = raw.strip() or None
        return cls(**values)

    def clauses(self) -> List[Tuple[str, str, str]]:
        """按固定顺序返回 (列名, 运算符, 参数值)"""
        result = []
        for attr, column in FILTER_COLUMNS:
            value = getattr(self, attr)
            if value:
                result.append((column, 'ILIKE', f'%{_escape_like(value)}%'))
        return result

    def apply(self, query):
        # 每个条件单独绑定一个参数，参数序号随追加的谓词递增
        for column, _op, pattern in self.clauses():
            query = query.filter(getattr(CardDetail, column).ilike(pattern, escape='\\'))
        return query

    def build_query(self, limit: int = CARD_FILTER_LIMIT):
        query = self.apply(CardDetail.query)
        return query.order_by(CardDetail.nombre_carta.asc()).limit(limit)
