"""
HTTP API tests over the bundled starter dictionary and a stub fallback.
"""
import pytest
from fastapi.testclient import TestClient

from lexibridge.config.settings import FallbackSettings, Settings
from lexibridge.core.dependencies import ServiceContainer
from lexibridge.main import create_app
from lexibridge.services.dictionary_store import StaticDictionarySource

pytestmark = pytest.mark.integration


@pytest.fixture
def fallback(make_fallback):
    return make_fallback("traducción remota")


@pytest.fixture
def client(fallback):
    settings = Settings(environment="testing", fallback=FallbackSettings(base_url="http://fallback.test"))
    container = ServiceContainer(settings, source=StaticDictionarySource(), fallback=fallback)
    app = create_app(settings=settings, container=container)
    with TestClient(app) as test_client:
        yield test_client


def test_translate_text_from_dictionary(client, fallback):
    r = client.post('/api/v1/translation/text', json={'text': 'good morning', 'target_language': 'spanish'})
    assert r.status_code == 200, r.text
    body = r.json()
    assert body['status'] == 'ok'
    assert body['error'] is None
    data = body['data']
    assert data['translated_text'] == 'buenos días'
    assert data['method'] == 'dictionary-lookup'
    assert data['confidence'] == pytest.approx(0.95)
    assert data['source_language'] == 'english'
    assert fallback.calls == []
    assert 'X-Request-ID' in r.headers


def test_translate_text_uses_fallback_when_unsure(client, fallback):
    r = client.post('/api/v1/translation/text', json={'text': 'xylophone quartz', 'target_language': 'es'})
    assert r.status_code == 200, r.text
    data = r.json()['data']
    assert data['translated_text'] == 'traducción remota'
    assert data['method'] == 'fallback'
    assert data['fallback_used'] is True
    assert data['confidence'] == pytest.approx(0.85)
    assert fallback.calls == [('xylophone quartz', 'english', 'spanish')]


def test_translate_text_reports_disambiguation(client):
    r = client.post('/api/v1/translation/text', json={
        'text': 'I sat by the bank and watched the river',
        'target_language': 'spanish',
    })
    data = r.json()['data']
    assert data['was_disambiguated'] is True
    assert any(c['type'] == 'word-sense' for c in data['corrections'])


def test_unsupported_language_returns_error_envelope(client):
    r = client.post('/api/v1/translation/text', json={'text': 'hello', 'target_language': 'klingon'})
    assert r.status_code == 400
    body = r.json()
    assert body['status'] == 'error'
    assert body['data'] is None
    assert body['error'].startswith('UNSUPPORTED_LANGUAGE')


def test_validation_error_returns_error_envelope(client):
    r = client.post('/api/v1/translation/text', json={'text': 'hello'})
    assert r.status_code == 422
    body = r.json()
    assert body['status'] == 'error'
    assert body['error'].startswith('VALIDATION_ERROR')
    fields = [e['field'] for e in body['details']['validation_errors']]
    assert any('target_language' in f for f in fields)


def test_chat_translation(client):
    r = client.post('/api/v1/translation/chat', json={
        'text': 'सुप्रभात',
        'sender_language': 'hindi',
        'receiver_language': 'spanish',
    })
    assert r.status_code == 200, r.text
    data = r.json()['data']
    assert data['sender_view'] == 'सुप्रभात'
    assert data['english_core'] == 'good morning'
    assert data['receiver_view'] == 'buenos días'


def test_chat_same_language(client):
    r = client.post('/api/v1/translation/chat', json={
        'text': 'namaste',
        'sender_language': 'hi',
        'receiver_language': 'hindi',
    })
    data = r.json()['data']
    assert data['receiver_view'] == data['sender_view'] == 'नमस्ते'
    assert data['confidence'] == 1.0


def test_language_list(client):
    r = client.get('/api/v1/translation/languages')
    assert r.status_code == 200
    data = r.json()['data']
    assert data['count'] >= 200
    assert data['count'] == len(data['languages'])
    hindi = next(lang for lang in data['languages'] if lang['name'] == 'hindi')
    assert hindi['script'] == 'Devanagari'
    assert hindi['has_transliteration'] is True


def test_transliterate_both_directions(client):
    r = client.post('/api/v1/translation/transliterate', json={'text': 'namaste', 'language': 'hindi'})
    assert r.status_code == 200, r.text
    assert r.json()['data']['transliterated_text'] == 'नमस्ते'

    r = client.post('/api/v1/translation/transliterate', json={
        'text': 'नमस्ते', 'language': 'hindi', 'direction': 'to_latin',
    })
    assert r.json()['data']['transliterated_text'] == 'namaste'


def test_dictionary_status_refresh_and_cache(client):
    r = client.get('/api/v1/dictionary/status')
    assert r.status_code == 200
    data = r.json()['data']
    assert data['ready'] is True
    assert set(data['tables']) == {'phrases', 'idioms', 'grammar', 'word_senses'}
    assert data['tables']['phrases']['row_count'] > 0

    client.post('/api/v1/translation/text', json={'text': 'good night', 'target_language': 'french'})
    r = client.delete('/api/v1/dictionary/cache')
    assert r.json()['data']['message'] == 'Cleared 1 cached translations'

    r = client.post('/api/v1/dictionary/refresh')
    assert r.status_code == 200
    assert r.json()['data']['cache']['results'] == 0


def test_health(client):
    r = client.get('/api/v1/health')
    assert r.status_code == 200
    data = r.json()['data']
    assert data['status'] == 'healthy'
    assert data['fallback_configured'] is True
    assert 'phrases' in data['dictionary']['tables']
