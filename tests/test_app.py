from queenslab.partitioner import column_partition, region_sizes
from queenslab.solver import staircase_placement


def test_new_puzzle_default_size(client):
    response = client.get('/api/new_puzzle')

    assert response.status_code == 200
    data = response.get_json()
    assert data['size'] == 8
    counts = region_sizes(data['regionGrid'])
    assert len(counts) == 8 and min(counts) >= 1 and sum(counts) == 64
    assert data['task'].count(',') == 63


def test_new_puzzle_seed_is_reproducible(client):
    first = client.get('/api/new_puzzle?size=6&seed=3').get_json()
    second = client.get('/api/new_puzzle?size=6&seed=3').get_json()

    assert first == second


def test_new_puzzle_rejects_bad_size(client):
    assert client.get('/api/new_puzzle?size=2').status_code == 400
    assert client.get('/api/new_puzzle?size=40').status_code == 400
    assert client.get('/api/new_puzzle?size=big').status_code == 400
    assert client.get('/api/new_puzzle?seed=x').status_code == 400


def test_validate_reports_conflicts(client):
    player_grid = [[0] * 5 for _ in range(5)]
    player_grid[0][0] = player_grid[1][1] = 1

    response = client.post('/api/validate', json={'regionGrid': column_partition(5), 'playerGrid': player_grid})

    assert response.status_code == 200
    assert response.get_json() == {'isValid': False, 'conflicts': [[0, 0], [1, 1]]}


def test_validate_accepts_solution(client):
    player_grid = [[0] * 6 for _ in range(6)]
    for row, col in enumerate(staircase_placement(6)):
        player_grid[row][col] = 1

    response = client.post('/api/validate', json={'regionGrid': column_partition(6), 'playerGrid': player_grid})

    assert response.get_json() == {'isValid': True, 'conflicts': []}


def test_validate_rejects_missing_or_malformed_data(client):
    assert client.post('/api/validate', json={'regionGrid': column_partition(4)}).status_code == 400
    bad = {'regionGrid': [[0, 1, 2, 9]] * 4, 'playerGrid': [[0] * 4] * 4}
    response = client.post('/api/validate', json=bad)
    assert response.status_code == 400
    assert 'error' in response.get_json()


def test_solve_returns_solution_and_uniqueness(client):
    response = client.post('/api/solve', json={'regionGrid': column_partition(5)})

    data = response.get_json()
    assert response.status_code == 200
    assert len(data['solution']) == 5
    assert data['unique'] is False


def test_solve_unsolvable_layout(client, touching_layout):
    response = client.post('/api/solve', json={'regionGrid': touching_layout})

    assert response.get_json() == {'solution': None, 'unique': False}


def test_solve_requires_region_grid(client):
    assert client.post('/api/solve', json={}).status_code == 400
    assert client.post('/api/solve', data="not json").status_code == 400


def test_non_object_json_body_is_rejected(client):
    for endpoint, body in (('/api/validate', [1, 2]), ('/api/solve', [1]), ('/api/solve', "text")):
        response = client.post(endpoint, json=body)

        assert response.status_code == 400
        assert response.get_json() == {'error': 'Request body must be a JSON object'}


def test_boolean_cell_state_is_rejected(client):
    player_grid = [[0] * 4 for _ in range(4)]
    player_grid[0][1] = True

    response = client.post('/api/validate', json={'regionGrid': column_partition(4), 'playerGrid': player_grid})

    assert response.status_code == 400


def test_solve_accepts_task_string(client):
    task = ",".join(str(c) for _ in range(5) for c in range(5))

    response = client.post('/api/solve', json={'task': task})

    assert response.status_code == 200
    assert response.get_json()['solution'] == [[0, 0], [1, 2], [2, 4], [3, 1], [4, 3]]


def test_validate_accepts_task_string(client):
    task = ",".join(str(c) for _ in range(4) for c in range(4))
    player_grid = [[0] * 4 for _ in range(4)]
    player_grid[2][0] = player_grid[3][1] = 1

    response = client.post('/api/validate', json={'task': task, 'playerGrid': player_grid})

    assert response.get_json() == {'isValid': False, 'conflicts': [[2, 0], [3, 1]]}


def test_bad_task_string_is_rejected(client):
    assert client.post('/api/solve', json={'task': "0,1,2"}).status_code == 400
    assert client.post('/api/solve', json={'task': 12}).status_code == 400
