"""
Fetch live WeatherUnion readings and print them as JSON lines.
Usage: python fetch_weather.py [LOCALITY_ID ...]
With no arguments the ids in WEATHERUNION_LOCALITIES are used.
"""
import asyncio
import dataclasses
import json
import logging
import os
import sys

from dotenv import load_dotenv

from weatherunion import InvalidLocalityId, LocalityId, WeatherUnion, WeatherUnionError, WeatherUnionSettings

load_dotenv(os.path.join(os.path.dirname(__file__), '..', '.env'))

async def fetch_one(client: WeatherUnion, locality_id: str) -> dict:
    try:
        known = LocalityId.from_str(locality_id)
    except InvalidLocalityId:
        known = None
    try:
        data = await client.locality_id(locality_id)
    except WeatherUnionError as e:
        logging.error(f"{locality_id}: {type(e).__name__}: {e}")
        return {'locality_id': locality_id, 'error': type(e).__name__}
    record = {'locality_id': locality_id, 'name': known.locality_name() if known else None}
    record.update(dataclasses.asdict(data))
    return record

async def run(ids):
    settings = WeatherUnionSettings.from_env()
    client = WeatherUnion.from_settings(settings)
    ids = ids or settings.localities
    if not ids:
        raise SystemExit("No locality ids given and WEATHERUNION_LOCALITIES is empty")
    records = await asyncio.gather(*(fetch_one(client, i) for i in ids))
    for record in records:
        print(json.dumps(record))
    return records

def main():
    logging.basicConfig(level=os.environ.get('LOG_LEVEL', 'INFO'))
    records = asyncio.run(run(sys.argv[1:]))
    if records and all('error' in r for r in records):
        sys.exit(1)

if __name__ == "__main__":
    main()
