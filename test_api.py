import pytest
from fastapi.testclient import TestClient

from wordchain.config import DEFAULT_MODEL, MAX_SENTENCES
from wordchain.main import app

client = TestClient(app)


@pytest.fixture(autouse=True)
def default_corpus():
    """
    Give every test models trained on the default corpus.
    """
    client.post("/reset", json={"model": "both"})
    client.post("/train", json={"use_default_corpus": True})
    yield


def test_root():
    """
    Test the status route.
    """
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["models"] == ["graph", "trie"]


def test_model_status():
    """
    Test that both models are described.
    """
    body = client.get("/model/status").json()
    assert body["graph"].startswith("TransitionGraph(")
    assert body["trie"].startswith("TransitionTrie(")


@pytest.mark.parametrize("path", ["/generate", "/generate_text"])
def test_generate_with_graph(path):
    """
    Test graph generation through both route names.
    """
    response = client.post(path, json={"count": 3})
    assert response.status_code == 200
    body = response.json()
    assert body["model"] == DEFAULT_MODEL == "graph"
    assert len(body["sentences"]) == 3
    assert all(sentence[-1] in ".?!" for sentence in body["sentences"])


def test_generate_with_trie():
    """
    Test trie generation.
    """
    body = client.post("/generate_with_trie", json={}).json()
    assert body["model"] == "trie"
    assert len(body["sentences"]) == 1
    assert body["sentences"][0][0].isupper()


@pytest.mark.parametrize("count", [0, MAX_SENTENCES + 1])
def test_generate_count_is_validated(count):
    """
    Test that out-of-range counts are rejected.
    """
    assert client.post("/generate", json={"count": count}).status_code == 422


def test_train_with_text():
    """
    Test training one model on posted text.
    """
    response = client.post("/train", json={"text": "Zebras graze quietly.", "model": "trie"})
    assert response.status_code == 200
    assert response.json() == {"status": "trained", "model": "trie", "tokens": 3}
    client.post("/reset", json={"model": "trie"})
    client.post("/train", json={"text": "Zebras graze quietly.", "model": "trie"})
    assert client.post("/generate_with_trie", json={"count": 1}).json()["sentences"] == ["Zebras graze quietly."]


def test_train_requires_input():
    """
    Test that training without text or corpus is a 400.
    """
    assert client.post("/train", json={}).status_code == 400


def test_train_in_background():
    """
    Test that background training is accepted and applied.
    """
    client.post("/reset", json={"model": "graph"})
    response = client.post("/train", json={"text": "Owls hoot.", "model": "graph", "background": True})
    assert response.json()["status"] == "started"
    assert client.post("/generate", json={"count": 1}).json()["sentences"][0] in (
        "Owls hoot.", "hoot."
    )


def test_reset_one_model():
    """
    Test that resetting the trie empties it and leaves the graph alone.
    """
    response = client.post("/reset", json={"model": "trie"})
    assert response.json() == {"status": "reset", "model": "trie"}
    assert client.post("/generate_with_trie", json={"count": 2}).json()["sentences"] == ["", ""]
    assert client.post("/generate", json={"count": 1}).json()["sentences"][0] != ""


def test_reset_rejects_unknown_model():
    """
    Test request validation on the model selection.
    """
    assert client.post("/reset", json={"model": "lstm"}).status_code == 422


def test_generate_picks_model():
    """
    Test that /generate can be pointed at the trie, and rejects unknown models.
    """
    client.post("/reset", json={"model": "both"})
    client.post("/train", json={"text": "Zebras graze quietly."})
    body = client.post("/generate", json={"count": 2, "model": "trie"}).json()
    assert body == {"sentences": ["Zebras graze quietly.", "Zebras graze quietly."], "model": "trie"}
    assert client.post("/generate", json={"model": "both"}).status_code == 422


def test_train_long_text_without_sentence_end():
    """
    Test that a long run of words with no terminator trains and generates.
    """
    text = " ".join(f"word{i}" for i in range(1500))
    response = client.post("/train", json={"text": text, "model": "trie"})
    assert response.status_code == 200
    assert response.json()["tokens"] == 1500
    assert "nodes=" in client.get("/model/status").json()["trie"]
    assert client.post("/generate_with_trie", json={"count": 1}).status_code == 200
