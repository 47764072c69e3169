from config import MAX_CAPACITY


def test_index_lists_families(client):
    body = client.get("/").get_json()
    assert body["families"] == ["graph", "tree", "queue", "code"]


def test_algorithm_cards(client):
    body = client.get("/api/algorithms").get_json()
    assert any(card["key"] == "dijkstra" for card in body["graph"])
    assert any(card["key"] == "insert_avl" for card in body["tree"])
    assert {card["key"] for card in body["queue"]} >= {"enqueue", "hot_potato"}


def test_initial_state_is_ready(client):
    body = client.get("/api/graph/state").get_json()
    assert body["trace"] is None
    assert body["frame"]["description"] == "Ready"
    assert body["playback"]["state"] == "idle"


def test_run_then_playback(client):
    res = client.post("/api/graph/run/bfs", json={"start": "A"})
    assert res.status_code == 200
    total = len(res.get_json()["trace"]["timeline"])

    body = client.post("/api/graph/playback/step", json={"delta": 1}).get_json()
    assert body["playback"]["index"] == 1

    body = client.post("/api/graph/playback/seek", json={"index": total - 1}).get_json()
    assert body["playback"]["state"] == "finished"

    res = client.post("/api/graph/playback/seek", json={"index": total})
    assert res.status_code == 400
    assert res.get_json() == {"error": f"Frame index {total} is out of range."}

    body = client.post("/api/graph/playback/reset").get_json()
    assert body["playback"]["index"] == 0


def test_speed_validation(client):
    assert client.post("/api/graph/playback/speed", json={"speed": "2x"}).status_code == 200
    assert client.post("/api/graph/playback/speed", json={"speed": 0}).status_code == 400


def test_bad_start_node_is_400(client):
    res = client.post("/api/graph/run/bfs", json={"start": "Q"})
    assert res.status_code == 400
    assert "error" in res.get_json()


def test_unknown_algorithm_and_family_are_404(client):
    assert client.post("/api/graph/run/bogosort").status_code == 404
    assert client.get("/api/heap/state").status_code == 404
    assert client.post("/api/code/run/anything").status_code == 404
    assert client.post("/api/graph/playback/rewind").status_code == 404


def test_edit_discards_trace(client):
    client.post("/api/tree/run/inorder")
    body = client.post("/api/tree/edit/add_node", json={"x": 10, "y": 10, "value": 99}).get_json()
    assert body["trace"] is None
    assert body["frame"]["description"] == "Ready"


def test_tree_edit_rejection_is_400(client):
    res = client.post("/api/tree/edit/add_edge", json={"parent": 0, "child": 0})
    assert res.status_code == 400


def test_tree_insert_updates_structure(client):
    client.post("/api/tree/run/insert", json={"value": 45})
    body = client.get("/api/tree/state").get_json()
    assert 45 in [n["value"] for n in body["structure"]["nodes"]]


def test_queue_overflow_is_400(client):
    client.post("/api/queue/run/create", json={"size": MAX_CAPACITY,
                                               "values": ",".join(["1"] * MAX_CAPACITY)})
    res = client.post("/api/queue/run/enqueue", json={"value": 7})
    assert res.status_code == 400
    assert "Overflow" in res.get_json()["error"]
    body = client.get("/api/queue/state").get_json()
    assert len(body["structure"]["items"]) == MAX_CAPACITY
    assert body["trace"]["error"]


def test_code_run(client):
    res = client.post("/api/code/run", json={"source": "int a = 1;\nint* p = &a;"})
    body = res.get_json()
    assert res.status_code == 200
    assert len(body["trace"]["timeline"]) == 4
    assert body["state"]["structure"] == {"source": "int a = 1;\nint* p = &a;"}


def test_inconsistent_traversals_are_400(client):
    res = client.post("/api/tree/run/from_pre_in", json={"preorder": "2,3,1", "inorder": "1,2,3"})
    assert res.status_code == 400
    assert res.get_json() == {"error": "Preorder and inorder do not describe the same tree."}
    body = client.get("/api/tree/state").get_json()
    assert len(body["structure"]["nodes"]) == 7
