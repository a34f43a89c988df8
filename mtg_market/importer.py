"""
从 CSV 导入卡牌详情
"""
import csv

from loguru import logger

from mtg_market import db
from mtg_market.models.card import CardDetail

CARD_COLUMNS = ('id_juego', 'nombre_carta', 'habilidades', 'rareza', 'artista', 'mana', 'tipo_principal')


def _clean_row(row):
    """空值转 None，id_juego 转整数 (兼容 '1.0' 这样的字符串)"""
    clean = {}
    for col in CARD_COLUMNS:
        value = row.get(col)
        if value is None or value.strip() in ('', 'None'):
            clean[col] = None
        else:
            clean[col] = value.strip()
    if clean['id_juego'] is not None:
        clean['id_juego'] = int(float(clean['id_juego']))
    return clean


def import_cards_csv(csv_path):
    """
    导入 CSV 到 detalle_carta

    Args:
        csv_path: CSV 路径，表头需包含 id_juego 和 nombre_carta

    Returns:
        (新增行数, 跳过行数)
    """
    with open(csv_path, 'r', encoding='utf-8') as f:
        rows = list(csv.DictReader(f))

    if not rows:
        logger.warning(f"空文件: {csv_path}")
        return 0, 0

    existing = {i for (i,) in db.session.query(CardDetail.id_juego).all()}

    added = 0
    skipped = 0
    for line, row in enumerate(rows, start=2):
        try:
            clean = _clean_row(row)
        except (ValueError, OverflowError):
            logger.warning(f"第 {line} 行 id_juego 无效: {row.get('id_juego')}")
            skipped += 1
            continue

        if clean['id_juego'] is None or not clean['nombre_carta']:
            logger.warning(f"第 {line} 行缺少 id_juego 或 nombre_carta，跳过")
            skipped += 1
            continue

        # 已存在的卡牌不覆盖
        if clean['id_juego'] in existing:
            skipped += 1
            continue

        db.session.add(CardDetail(**clean))
        existing.add(clean['id_juego'])
        added += 1

    db.session.commit()
    logger.info(f"detalle_carta: 新增 {added} 行，跳过 {skipped} 行")
    return added, skipped
