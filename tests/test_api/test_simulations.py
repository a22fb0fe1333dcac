"""
API integration tests for /simulations and /scheduler endpoints.

These use the test HTTP client from conftest.py, which talks to the
FastAPI app in-process. No server, no network.
"""

import pytest


FCFS_SCENARIO = {
    "num_cores": 1,
    "scheme": "fcfs",
    "jobs": [
        {"arrival_time": 0, "burst_time": 5},
        {"arrival_time": 2, "burst_time": 3},
    ],
}


@pytest.mark.asyncio
async def test_list_schemes(client):
    response = await client.get("/scheduler/schemes")

    assert response.status_code == 200
    schemes = {row["scheme"]: row for row in response.json()}
    assert set(schemes) == {"fcfs", "rr", "sjf", "psjf", "pri", "ppri"}
    assert schemes["psjf"]["preemptive"] is True
    assert schemes["sjf"]["preemptive"] is False
    assert schemes["rr"]["uses_quantum"] is True


@pytest.mark.asyncio
async def test_simulate_fcfs(client):
    response = await client.post("/simulations/", json=FCFS_SCENARIO)

    assert response.status_code == 200
    data = response.json()
    assert data["scheme"] == "fcfs"
    assert data["quantum"] is None
    assert data["average_waiting_time"] == 1.5
    assert data["average_response_time"] == 1.5
    assert data["average_turnaround_time"] == 5.5
    assert data["makespan"] == 8
    assert [job["job_id"] for job in data["jobs"]] == [0, 1]
    assert data["jobs"][1]["first_start_time"] == 5


@pytest.mark.asyncio
async def test_simulate_psjf_with_explicit_ids(client):
    response = await client.post("/simulations/", json={
        "num_cores": 1,
        "scheme": "psjf",
        "jobs": [
            {"job_id": 10, "arrival_time": 0, "burst_time": 5},
            {"job_id": 20, "arrival_time": 2, "burst_time": 2},
        ],
    })

    assert response.status_code == 200
    data = response.json()
    finish = {job["job_id"]: job["finish_time"] for job in data["jobs"]}
    assert finish == {10: 7, 20: 4}
    assert data["average_turnaround_time"] == 4.5


@pytest.mark.asyncio
async def test_round_robin_defaults_quantum_from_settings(client):
    response = await client.post("/simulations/", json={
        "scheme": "rr",
        "jobs": [{"arrival_time": 0, "burst_time": 5}, {"arrival_time": 1, "burst_time": 3}],
    })

    assert response.status_code == 200
    data = response.json()
    assert data["quantum"] == 2.0
    assert data["average_waiting_time"] == 3.0


@pytest.mark.asyncio
async def test_unknown_scheme_is_422(client):
    response = await client.post("/simulations/", json={**FCFS_SCENARIO, "scheme": "lottery"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_zero_cores_is_422(client):
    response = await client.post("/simulations/", json={**FCFS_SCENARIO, "num_cores": 0})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_non_positive_burst_is_422(client):
    response = await client.post("/simulations/", json={
        **FCFS_SCENARIO,
        "jobs": [{"arrival_time": 0, "burst_time": 0}],
    })
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_empty_workload_is_422(client):
    response = await client.post("/simulations/", json={**FCFS_SCENARIO, "jobs": []})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_duplicate_job_ids_are_400(client):
    response = await client.post("/simulations/", json={
        **FCFS_SCENARIO,
        "jobs": [
            {"job_id": 1, "arrival_time": 0, "burst_time": 1},
            {"job_id": 1, "arrival_time": 1, "burst_time": 1},
        ],
    })

    assert response.status_code == 400
    assert "already arrived" in response.json()["detail"]


@pytest.mark.asyncio
async def test_too_many_jobs_is_413(client):
    """The test settings cap simulations at 5 jobs."""
    jobs = [{"arrival_time": i, "burst_time": 1} for i in range(6)]
    response = await client.post("/simulations/", json={**FCFS_SCENARIO, "jobs": jobs})
    assert response.status_code == 413


@pytest.mark.asyncio
async def test_mixing_explicit_and_implicit_ids_is_422(client):
    """An implicit id of 1 would collide with the explicit one."""
    response = await client.post("/simulations/", json={
        **FCFS_SCENARIO,
        "jobs": [
            {"job_id": 1, "arrival_time": 0, "burst_time": 1},
            {"arrival_time": 1, "burst_time": 1},
        ],
    })

    assert response.status_code == 422
    assert "every job or for none" in response.text


@pytest.mark.asyncio
async def test_non_finite_quantum_is_422(client):
    """JSON has no NaN, but Python's encoder emits it and the app must refuse it."""
    response = await client.post(
        "/simulations/",
        content='{"scheme": "rr", "quantum": NaN, "jobs": [{"arrival_time": 0, "burst_time": 1}]}',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 422
