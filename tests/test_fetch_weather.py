import asyncio
import importlib.util
import os

import httpx

SCRIPT = os.path.join(os.path.dirname(__file__), '..', 'scripts', 'fetch_weather.py')

def load_script():
    spec = importlib.util.spec_from_file_location('fetch_weather', SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module

def test_empty_id_becomes_error_record(monkeypatch):
    monkeypatch.setenv('WEATHERUNION_API_KEY', 'k')
    fw = load_script()
    records = asyncio.run(fw.run(['']))
    assert records == [{'locality_id': '', 'error': 'InvalidLocalityId'}]

def test_one_failed_id_does_not_abort_run(monkeypatch):
    monkeypatch.setenv('WEATHERUNION_API_KEY', 'k')
    fw = load_script()
    real_client = httpx.AsyncClient
    def handler(request):
        body = {
            "message": "",
            "device_type": 1,
            "locality_weather_data": {"temperature": 27.5},
        }
        return httpx.Response(200, json=body)
    monkeypatch.setattr(httpx, 'AsyncClient',
                        lambda **kwargs: real_client(transport=httpx.MockTransport(handler), **kwargs))
    records = asyncio.run(fw.run(['ZWL003467', '']))
    assert records[0]['locality_id'] == 'ZWL003467'
    assert records[0]['name'] == 'Bengaluru Banashankari'
    assert records[0]['temperature'] == 27.5
    assert records[1] == {'locality_id': '', 'error': 'InvalidLocalityId'}
