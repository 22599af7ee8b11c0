from datetime import timedelta

from scenelingo_app.modules.stats.schemas import UserStats

from fakes import TODAY, make_words


def test_get_stats_first_run(client, shell):
    response = client.get('/api/stats')

    assert response.status_code == 200
    data = response.get_json()['data']
    assert data['streak'] == 0
    assert data['points'] == 0
    assert data['goalToday'] == 10
    assert data['lastLoginDate'] == TODAY.isoformat()
    assert data['level'] == 0
    assert [a['name'] for a in data['achievements']] == ['Word Master', 'Week Warrior']


def test_check_in_same_day_only_celebrates(client, shell):
    response = client.post('/api/stats/check-in')

    data = response.get_json()['data']
    assert data['outcome'] == 'celebrate_only'
    assert data['celebrate'] is True
    assert data['stats']['points'] == 0


def test_check_in_on_new_day_awards_bonus_once(client, shell):
    shell.stats.store.save(UserStats(streak=2, last_login_date=TODAY - timedelta(days=1)))
    shell.stats.load()
    shell.stats.clock = lambda: TODAY + timedelta(days=1)

    first = client.post('/api/stats/check-in').get_json()['data']
    second = client.post('/api/stats/check-in').get_json()['data']

    assert first['outcome'] == 'awarded'
    assert first['stats']['streak'] == 3
    assert first['stats']['points'] == 10
    assert second['outcome'] == 'celebrate_only'
    assert second['stats']['points'] == 10


def test_check_in_after_learning_is_skipped(client, shell):
    shell.stats.record_completion(50, 5)

    data = client.post('/api/stats/check-in').get_json()['data']

    assert data['outcome'] == 'skipped'
    assert data['celebrate'] is False


def test_stats_follow_the_calendar_between_requests(client, shell, fake_provider):
    fake_provider.words = make_words(1)
    client.post('/api/learn/sessions', json={'scene_id': 'coffee-shop'})
    client.post('/api/learn/session/next')
    client.post('/api/learn/session/finish')
    shell.stats.clock = lambda: TODAY + timedelta(days=3)

    data = client.get('/api/stats').get_json()['data']

    assert data['streak'] == 0
    assert data['wordsToday'] == 0
    assert data['lastLoginDate'] == (TODAY + timedelta(days=3)).isoformat()
    assert data['points'] == 50

    outcome = client.post('/api/stats/check-in').get_json()['data']['outcome']
    assert outcome != 'skipped'


def test_check_in_is_first_request_of_new_day(client, shell, fake_provider):
    fake_provider.words = make_words(1)
    client.post('/api/learn/sessions', json={'scene_id': 'coffee-shop'})
    client.post('/api/learn/session/next')
    client.post('/api/learn/session/finish')
    shell.stats.clock = lambda: TODAY + timedelta(days=1)

    data = client.post('/api/stats/check-in').get_json()['data']

    assert data['outcome'] == 'awarded'
    assert data['stats']['streak'] == 2
    assert data['stats']['wordsToday'] == 0
    assert data['stats']['points'] == 60
