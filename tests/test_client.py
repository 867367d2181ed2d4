import asyncio
import pytest
import httpx
from weatherunion import (
    WeatherUnion, LocalityId, LocalityWeatherData, InvalidLocalityId, NetworkError, InvalidResponse,
    TemporarilyUnavailable, ApiStatusError, NotSupported, CouldNotAuthenticate, ApiKeyLimitExhausted,
    ErrorRetrievingData, UnexpectedStatus, WeatherUnionError,
)

BODY = {
    "status": "200",
    "message": "",
    "device_type": 1,
    "locality_weather_data": {
        "temperature": 24.53,
        "humidity": 61.2,
        "wind_speed": 1.8,
        "wind_direction": 236.0,
        "rain_intensity": 0,
        "rain_accumulation": None,
    },
}

def make_resp(status_code, json_data=None, text=None):
    request = httpx.Request('GET', 'https://example.test')
    if text is not None:
        return httpx.Response(status_code, text=text, request=request)
    return httpx.Response(status_code, json=json_data, request=request)

class DummyHttpClient:
    def __init__(self, resp=None, exc=None):
        self.resp = resp
        self.exc = exc
        self.calls = []
    async def get(self, url, params=None, headers=None, **kwargs):
        self.calls.append((url, params, headers))
        if self.exc is not None:
            raise self.exc
        return self.resp

def fetch(client, locality_id='ZWL003467'):
    return asyncio.run(client.locality_id(locality_id))

def test_locality_id_parses_readings():
    http = DummyHttpClient(make_resp(200, BODY))
    wu = WeatherUnion('k', http=http)
    data = fetch(wu)
    assert isinstance(data, LocalityWeatherData)
    assert data.temperature == 24.53
    assert data.humidity == 61.2
    assert data.rain_intensity == 0
    assert isinstance(data.rain_intensity, float)
    assert data.rain_accumulation is None
    assert data.device_type == 1

def test_request_carries_key_and_locality():
    http = DummyHttpClient(make_resp(200, BODY))
    wu = WeatherUnion('secret', http=http)
    fetch(wu, 'ZWL008436')
    url, params, headers = http.calls[0]
    assert url == 'https://www.weatherunion.com/gw/weather/external/v0/get_locality_weather_data'
    assert params == {'locality_id': 'ZWL008436'}
    assert headers == {'x-zomato-api-key': 'secret'}

def test_locality_constant_resolves_to_id():
    http = DummyHttpClient(make_resp(200, BODY))
    wu = WeatherUnion('k', http=http)
    asyncio.run(wu.locality(LocalityId.ZWL006538))
    assert http.calls[0][1] == {'locality_id': 'ZWL006538'}

def test_lat_long_endpoint():
    http = DummyHttpClient(make_resp(200, BODY))
    wu = WeatherUnion('k', http=http, base_url='https://wu.test/v0/')
    data = asyncio.run(wu.lat_long(12.936787, 77.556079))
    url, params, _ = http.calls[0]
    assert url == 'https://wu.test/v0/get_weather_data'
    assert params == {'latitude': 12.936787, 'longitude': 77.556079}
    assert data.temperature == 24.53

def test_empty_locality_id_rejected_without_request():
    http = DummyHttpClient(make_resp(200, BODY))
    wu = WeatherUnion('k', http=http)
    with pytest.raises(InvalidLocalityId):
        fetch(wu, '')
    with pytest.raises(InvalidLocalityId):
        fetch(wu, '   ')
    assert http.calls == []

@pytest.mark.parametrize('status,error_cls', [
    (400, NotSupported),
    (403, CouldNotAuthenticate),
    (429, ApiKeyLimitExhausted),
    (500, ErrorRetrievingData),
    (502, UnexpectedStatus),
    (404, UnexpectedStatus),
])
def test_status_codes_map_to_errors(status, error_cls):
    # a valid body must not turn an error status into a reading
    http = DummyHttpClient(make_resp(status, BODY))
    wu = WeatherUnion('k', http=http)
    with pytest.raises(error_cls) as exc:
        fetch(wu)
    assert isinstance(exc.value, ApiStatusError)
    assert exc.value.status_code == status

def test_empty_key_constructs_then_fails_on_fetch():
    wu = WeatherUnion.from_key('')
    assert wu.api_key == ''
    http = DummyHttpClient(make_resp(403, {"message": "invalid api key"}))
    wu = WeatherUnion('', http=http)
    with pytest.raises(CouldNotAuthenticate):
        fetch(wu)
    assert http.calls[0][2] == {'x-zomato-api-key': ''}

def test_malformed_json_is_invalid_response():
    http = DummyHttpClient(make_resp(200, text='<html>oops</html>'))
    wu = WeatherUnion('k', http=http)
    with pytest.raises(InvalidResponse) as exc:
        fetch(wu)
    assert not isinstance(exc.value, NetworkError)

@pytest.mark.parametrize('body', [
    [],
    {"message": "", "device_type": 1},
    {"message": "", "locality_weather_data": {}},
    {"device_type": 1, "locality_weather_data": {}},
    {"message": "", "device_type": 1, "locality_weather_data": {"temperature": "hot"}},
])
def test_unexpected_shape_is_invalid_response(body):
    http = DummyHttpClient(make_resp(200, body))
    wu = WeatherUnion('k', http=http)
    with pytest.raises(InvalidResponse):
        fetch(wu)

def test_provider_message_is_temporarily_unavailable():
    body = dict(BODY, message="Data not available for this locality")
    http = DummyHttpClient(make_resp(200, body))
    wu = WeatherUnion('k', http=http)
    with pytest.raises(TemporarilyUnavailable) as exc:
        fetch(wu)
    assert exc.value.message == "Data not available for this locality"

def test_transport_failure_is_network_error():
    http = DummyHttpClient(exc=httpx.ConnectError('connection refused'))
    wu = WeatherUnion('k', http=http)
    with pytest.raises(NetworkError) as exc:
        fetch(wu)
    assert isinstance(exc.value.__cause__, httpx.ConnectError)

def test_concurrent_fetches_are_independent():
    def handler(request):
        locality = request.url.params['locality_id']
        temperature = 30.5 if locality == 'ZWL006538' else 21.25
        body = dict(BODY, locality_weather_data={"temperature": temperature})
        return httpx.Response(200, json=body)

    async def run():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
            wu = WeatherUnion('k', http=http)
            return await asyncio.gather(
                wu.locality(LocalityId.ZWL006538),
                wu.locality_id('ZWL003467'),
            )

    delhi, bengaluru = asyncio.run(run())
    assert delhi.temperature == 30.5
    assert bengaluru.temperature == 21.25
    assert delhi.humidity is None

def test_from_settings_uses_base_url_and_timeout():
    from weatherunion import WeatherUnionSettings
    seen = {}
    class RecordingHttp(DummyHttpClient):
        async def get(self, url, params=None, headers=None, **kwargs):
            seen.update(kwargs)
            return await super().get(url, params=params, headers=headers)
    http = RecordingHttp(make_resp(200, BODY))
    settings = WeatherUnionSettings(api_key='k', base_url='https://wu.test', timeout=2.5)
    wu = WeatherUnion.from_settings(settings, http=http)
    fetch(wu)
    assert http.calls[0][0] == 'https://wu.test/get_locality_weather_data'
    assert seen == {'timeout': 2.5}

def test_invalid_locality_is_weatherunion_error():
    wu = WeatherUnion.from_key('k')
    with pytest.raises(WeatherUnionError) as exc:
        fetch(wu, '')
    assert isinstance(exc.value, InvalidLocalityId)
    assert isinstance(exc.value, ValueError)

def test_default_transport_opens_client_per_call(monkeypatch):
    requests = []
    opened = []
    real_client = httpx.AsyncClient
    def handler(request):
        requests.append(request)
        return httpx.Response(200, json=BODY)
    def client_factory(**kwargs):
        opened.append(kwargs)
        return real_client(transport=httpx.MockTransport(handler), **kwargs)
    monkeypatch.setattr(httpx, 'AsyncClient', client_factory)

    wu = WeatherUnion('secret', timeout=4.0)
    first = fetch(wu, 'ZWL003467')
    fetch(wu, 'ZWL006538')
    assert first.temperature == 24.53
    assert opened == [{'timeout': 4.0}, {'timeout': 4.0}]
    assert len(requests) == 2
    assert requests[0].headers['x-zomato-api-key'] == 'secret'
    assert requests[0].url.path == '/gw/weather/external/v0/get_locality_weather_data'
    assert requests[0].url.params['locality_id'] == 'ZWL003467'
    assert requests[1].url.params['locality_id'] == 'ZWL006538'

    # no timeout configured leaves the httpx default alone
    fetch(WeatherUnion.from_key('k'))
    assert opened[-1] == {}
    assert len(requests) == 3

def test_invalid_url_is_network_error():
    http = DummyHttpClient(exc=httpx.InvalidURL('Invalid non-printable ASCII character in URL'))
    wu = WeatherUnion('k', http=http)
    with pytest.raises(NetworkError) as exc:
        fetch(wu)
    assert isinstance(exc.value.__cause__, httpx.InvalidURL)

def test_provider_message_wins_over_missing_readings():
    # bodies carrying only a message are reported as the provider's message
    http = DummyHttpClient(make_resp(200, {"status": "200", "message": "Locality data unavailable"}))
    wu = WeatherUnion('k', http=http)
    with pytest.raises(TemporarilyUnavailable) as exc:
        fetch(wu)
    assert exc.value.message == "Locality data unavailable"
