"""
数据模型模块
"""
from mtg_market.models.user import User
from mtg_market.models.branch import Branch
from mtg_market.models.product import Product
from mtg_market.models.deck import Deck
from mtg_market.models.card import CardDetail
from mtg_market.models.transaction import Transaction

__all__ = [
    'User',
    'Branch',
    'Product',
    'Deck',
    'CardDetail',
    'Transaction',
]
