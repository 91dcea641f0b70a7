import pytest
from fastapi.testclient import TestClient

from keyword_grouper.main import app


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["default_threshold"] == 85
    assert body["threshold_range"] == [50, 95]


def test_group_reference_example(client, sample_text):
    response = client.post(
        "/api/group",
        json={"text": sample_text + "onlyonefield\nkeyword\tabc\n", "threshold": 85},
    )
    assert response.status_code == 200
    body = response.json()

    assert body["status"] == "ok"
    assert body["stats"] == {"total": 5, "groups": 3, "grouped": 3}
    assert body["skipped"] == 2
    assert body["result"].split("\n") == [
        "tarif coiffeur bayonne\t2800\t\ttarif d'un coiffeur bayonne\t1800"
        "\t\ttarif d'un coiffeur a bayonne\t800",
        "devis elagage a bayonne\t800",
        "banque en ligne\t600",
    ]
    assert body["groups"][0][0] == {"keyword": "tarif coiffeur bayonne", "value": 2800}


def test_group_uses_default_threshold(client, sample_text):
    body = client.post("/api/group", json={"text": sample_text}).json()
    assert body["threshold"] == 85
    assert body["stats"]["groups"] == 3


def test_group_empty_input_is_not_an_error(client):
    response = client.post("/api/group", json={"text": "   \nonlyonefield"})
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "empty"
    assert body["stats"] == {"total": 0, "groups": 0, "grouped": 0}
    assert body["skipped"] == 1


@pytest.mark.parametrize("threshold", [0, -5, 101])
def test_group_rejects_bad_threshold(client, sample_text, threshold):
    response = client.post("/api/group", json={"text": sample_text, "threshold": threshold})
    assert response.status_code == 400


def test_group_rejects_unknown_mode(client, sample_text):
    response = client.post("/api/group", json={"text": sample_text, "mode": "kmeans"})
    assert response.status_code == 400


def test_group_transitive_mode(client):
    text = "xbcde\t10\nabcde\t5\nabcdy\t1\n"
    anchor = client.post("/api/group", json={"text": text, "threshold": 80}).json()
    chained = client.post(
        "/api/group", json={"text": text, "threshold": 80, "mode": "transitive"}
    ).json()
    assert anchor["stats"]["groups"] == 2
    assert chained["stats"]["groups"] == 1


def test_preview_returns_merged_groups_only(client, sample_text):
    body = client.post("/api/group/preview", json={"text": sample_text, "threshold": 85}).json()
    assert body["status"] == "ok"
    assert len(body["groups"]) == 1
    assert [e["value"] for e in body["groups"][0]] == [2800, 1800, 800]


def test_preview_with_nothing_to_group(client):
    body = client.post("/api/group/preview", json={"text": ""}).json()
    assert body == {"status": "empty", "threshold": 85, "groups": []}


def test_export_csv(client, sample_text):
    response = client.post("/api/group/export", json={"text": sample_text, "threshold": 85})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert "mots-cles-groupes.csv" in response.headers["content-disposition"]

    lines = response.text.split("\n")
    assert lines[0].startswith("Mot-clé principal,Valeur principale")
    assert lines[1] == (
        '"tarif coiffeur bayonne",2800,"tarif d\'un coiffeur bayonne",1800,'
        '"tarif d\'un coiffeur a bayonne",800,,'
    )
    assert lines[3] == '"banque en ligne",600,,,,,,'


def test_export_without_keywords_is_rejected(client):
    response = client.post("/api/group/export", json={"text": "onlyonefield"})
    assert response.status_code == 400


def test_group_skips_keyword_with_lone_surrogate(client):
    # raw body: a lone surrogate is a legal JSON escape but not encodable as UTF-8
    body = b'{"text": "ab\\ud800c\\t1\\nabc\\t2", "threshold": 50}'
    response = client.post(
        "/api/group", content=body, headers={"content-type": "application/json"}
    )
    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["skipped"] == 1
    assert payload["result"] == "abc\t2"
    assert payload["stats"] == {"total": 1, "groups": 1, "grouped": 0}
