"""
卡牌筛选测试
"""
import pytest
from mtg_market import create_app, db
from mtg_market.errors import ValidationError
from mtg_market.filters import CardFilter, CARD_FILTER_LIMIT
from mtg_market.models import CardDetail


@pytest.fixture
def app():
    """创建测试应用，并写入几张测试卡牌"""
    app = create_app('testing')
    with app.app_context():
        db.create_all()
        _create_test_cards()
        yield app
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def _create_test_cards():
    cards = [
        CardDetail(id_juego=1, nombre_carta='Shivan Dragon', tipo_principal='Creature',
                   mana='{4}{R}{R}', rareza='Rare', artista='Melissa Benson'),
        CardDetail(id_juego=2, nombre_carta='Lightning Bolt', tipo_principal='Instant',
                   mana='{R}', rareza='Common'),
        CardDetail(id_juego=3, nombre_carta='Dragon Whelp', tipo_principal='Creature',
                   mana='{2}{R}{R}', rareza='Uncommon'),
        CardDetail(id_juego=4, nombre_carta='Ancestral Recall', tipo_principal='Instant',
                   mana='{U}', rareza='Rare'),
        CardDetail(id_juego=5, nombre_carta='Jace, the Mind Sculptor', tipo_principal='Planeswalker',
                   mana='{2}{U}{U}', rareza='Mythic Rare'),
    ]
    db.session.add_all(cards)
    db.session.commit()


def _names(response):
    return [c['nombre_carta'] for c in response.get_json()['data']]


class TestCardFilter:
    """查询构建器"""

    def test_no_clauses_when_empty(self):
        assert CardFilter().clauses() == []
        assert CardFilter(nombre='', rareza=None).clauses() == []

    def test_clause_order_follows_fields(self):
        f = CardFilter(rareza='rare', nombre='dragon')
        assert f.clauses() == [
            ('nombre_carta', 'ILIKE', '%dragon%'),
            ('rareza', 'ILIKE', '%rare%'),
        ]

    def test_wildcards_are_escaped(self):
        assert CardFilter(nombre='50%').clauses() == [('nombre_carta', 'ILIKE', '%50\\%%')]

    def test_bound_parameters_track_present_filters(self, app):
        statement = CardFilter(tipo='creature', rareza='rare').build_query().statement
        params = statement.compile().params
        patterns = [v for v in params.values() if isinstance(v, str)]
        assert patterns == ['%creature%', '%rare%']

    def test_from_payload_strips(self):
        f = CardFilter.from_payload({'nombre': '  bolt ', 'tipo': '', 'otro': 'x'})
        assert f.nombre == 'bolt'
        assert f.tipo is None

    def test_from_payload_numbers_as_text(self):
        f = CardFilter.from_payload({'mana': 3, 'nombre': 1.5})
        assert f.mana == '3'
        assert f.nombre == '1.5'

    @pytest.mark.parametrize('raw', [['x'], {'a': 1}, True])
    def test_from_payload_rejects_non_text(self, raw):
        with pytest.raises(ValidationError):
            CardFilter.from_payload({'mana': raw})


class TestFilterEndpoint:
    """POST /api/cartas/filtrar"""

    def test_no_filters_returns_all_by_name(self, client):
        response = client.post('/api/cartas/filtrar', json={})
        assert response.status_code == 200
        assert _names(response) == [
            'Ancestral Recall', 'Dragon Whelp', 'Jace, the Mind Sculptor',
            'Lightning Bolt', 'Shivan Dragon',
        ]

    def test_empty_body(self, client):
        response = client.post('/api/cartas/filtrar')
        assert response.status_code == 200
        assert len(response.get_json()['data']) == 5

    def test_rarity_substring_case_insensitive(self, client):
        response = client.post('/api/cartas/filtrar', json={'rareza': 'rare'})
        assert _names(response) == [
            'Ancestral Recall', 'Jace, the Mind Sculptor', 'Shivan Dragon',
        ]

    def test_filters_combine(self, client):
        response = client.post('/api/cartas/filtrar', json={'nombre': 'DRAGON', 'rareza': 'uncommon'})
        assert _names(response) == ['Dragon Whelp']

    def test_mana_and_type(self, client):
        response = client.post('/api/cartas/filtrar', json={'tipo': 'instant', 'mana': '{u}'})
        assert _names(response) == ['Ancestral Recall']

    def test_blank_filters_ignored(self, client):
        response = client.post('/api/cartas/filtrar', json={'nombre': '', 'tipo': '', 'mana': '', 'rareza': ''})
        assert len(response.get_json()['data']) == 5

    def test_no_match(self, client):
        response = client.post('/api/cartas/filtrar', json={'nombre': 'Black Lotus'})
        assert response.get_json() == {'success': True, 'data': []}

    def test_invalid_filter_type(self, client):
        response = client.post('/api/cartas/filtrar', json={'nombre': ['x']})
        assert response.status_code == 400

    def test_numeric_filter(self, client):
        db.session.add(CardDetail(id_juego=50, nombre_carta='Colossal Dreadmaw', mana='{4}{G}{G}', rareza='Common'))
        db.session.commit()

        response = client.post('/api/cartas/filtrar', json={'mana': 4})
        assert response.status_code == 200
        assert _names(response) == ['Colossal Dreadmaw', 'Shivan Dragon']

    def test_result_capped(self, client):
        db.session.add_all([
            CardDetail(id_juego=100 + i, nombre_carta=f'Goblin {i:03d}', rareza='Common')
            for i in range(60)
        ])
        db.session.commit()

        names = _names(client.post('/api/cartas/filtrar', json={'nombre': 'goblin'}))
        assert len(names) == CARD_FILTER_LIMIT
        assert names == sorted(names)
        assert names[0] == 'Goblin 000'

    def test_empty_body_capped(self, client):
        db.session.add_all([
            CardDetail(id_juego=200 + i, nombre_carta=f'Angel {i:03d}', rareza='Common')
            for i in range(60)
        ])
        db.session.commit()

        names = _names(client.post('/api/cartas/filtrar', json={}))
        assert len(names) == CARD_FILTER_LIMIT
        assert names == sorted(names)
        assert names[0] == 'Ancestral Recall'
