from infinite_wiki.services.content_store import ContentStore
from infinite_wiki.services.navigator import WikiState


def test_publish_reaches_every_subscriber_of_session():
    store = ContentStore()
    first = store.subscribe("s1")
    second = store.subscribe("s1")
    other = store.subscribe("s2")

    store.publish("s1", {"type": "ping"})

    assert first.get_nowait() == {"type": "ping"}
    assert second.get_nowait() == {"type": "ping"}
    assert other.empty()


def test_publish_state_wraps_snapshot():
    store = ContentStore()
    queue = store.subscribe("s1")

    store.publish_state("s1", WikiState(topic="Flux", epoch=3, is_loading=True))

    message = queue.get_nowait()
    assert message["type"] == "state"
    assert message["data"]["topic"] == "Flux"
    assert message["data"]["epoch"] == 3
    assert message["data"]["art"] is None


def test_unsubscribe_forgets_empty_sessions():
    store = ContentStore()
    queue = store.subscribe("s1")
    store.unsubscribe("s1", queue)
    store.unsubscribe("s1", queue)
    store.unsubscribe("missing", queue)

    assert store.subscriber_count("s1") == 0
    store.publish("s1", {"type": "ping"})
    assert queue.empty()
