import pytest
from weatherunion import LocalityId, InvalidLocalityId, resolve_locality

def test_every_locality_has_name_and_id():
    assert len(LocalityId) == 579
    for member in LocalityId:
        assert member.locality_name()
        assert member.locality_id == member.name
        assert member.locality_id.startswith('ZWL')

def test_known_names():
    assert LocalityId.ZWL003467.locality_name() == 'Bengaluru Banashankari'
    assert LocalityId.ZWL006538.locality_name() == 'Delhi NCR Connaught Place'

def test_lat_long():
    assert LocalityId.ZWL003467.locality_lat_long() == (12.936787, 77.556079)

def test_display():
    assert str(LocalityId.ZWL005764) == 'ZWL005764 Delhi NCR Sarita Vihar'

def test_from_str_round_trip():
    for member in LocalityId:
        assert LocalityId.from_str(member.locality_id) is member

@pytest.mark.parametrize('value', ['', 'ZWL000000', 'zwl003467'])
def test_from_str_rejects(value):
    with pytest.raises(InvalidLocalityId):
        LocalityId.from_str(value)

def test_invalid_locality_is_value_error():
    with pytest.raises(ValueError):
        LocalityId.from_str('nope')

def test_resolve_locality():
    assert resolve_locality(LocalityId.ZWL003467) == 'ZWL003467'
    # raw ids are passed through even when missing from the bundled table
    assert resolve_locality('ZWL008436') == 'ZWL008436'
    with pytest.raises(InvalidLocalityId):
        resolve_locality('')
