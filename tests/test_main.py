import json

import main


def test_main_writes_mocks_for_every_definition(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    definitions = tmp_path / 'openApiDefinitions'
    definitions.mkdir()
    (definitions / 'broken.yaml').write_text('paths: [unclosed')
    (definitions / 'store.json').write_text(json.dumps({
        'paths': {'/orders': {'delete': {'responses': {'204': {'content': {
            'application/json': {'schema': {'type': 'boolean'}},
        }}}}}},
    }))

    assert main.main() == 1

    with open(tmp_path / 'mocks' / 'store.json') as f:
        store = json.load(f)
    assert store['mocks'][0]['method'] == 'delete'
    assert isinstance(store['mocks'][0]['value'], bool)

    with open(tmp_path / 'mocks' / 'broken.json') as f:
        assert 'error' in json.load(f)


def test_main_with_example_definition(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    assert main.main() == 0

    with open(tmp_path / 'mocks' / 'example-api.json') as f:
        payload = json.load(f)
    (mock,) = payload['mocks']
    assert mock['endpoint'] == '/items'
    assert 1 <= len(mock['value']) <= 3
    assert all(item['tag'] in ('new', 'used') for item in mock['value'])


def test_main_keeps_going_after_yaml_dates(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    definitions = tmp_path / 'openApiDefinitions'
    definitions.mkdir()
    (definitions / 'a_dates.yaml').write_text(
        "paths:\n"
        "  /days:\n"
        "    get:\n"
        "      responses:\n"
        "        '200':\n"
        "          content:\n"
        "            application/json:\n"
        "              schema: {type: string, enum: [2024-01-01, 2024-02-01]}\n"
    )
    (definitions / 'b_ok.yaml').write_text(
        "paths:\n"
        "  /ok:\n"
        "    get:\n"
        "      responses:\n"
        "        '200':\n"
        "          content:\n"
        "            text/plain:\n"
        "              schema: {type: boolean}\n"
    )

    assert main.main() == 0

    with open(tmp_path / 'mocks' / 'a_dates.json') as f:
        assert json.load(f)['mocks'][0]['value'] in ('2024-01-01', '2024-02-01')
    with open(tmp_path / 'mocks' / 'b_ok.json') as f:
        assert isinstance(json.load(f)['mocks'][0]['value'], bool)
