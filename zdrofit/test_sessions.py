import threading
import time

from zdrofit.sessions import InMemorySessionStore


def test_tokens_are_kept_per_host():
    store = InMemorySessionStore()
    store.set("zdrofit.perfectgym.pl", "first")
    store.set("127.0.0.1:8080", "second")

    assert store.get("zdrofit.perfectgym.pl") == "first"
    assert store.get("127.0.0.1:8080") == "second"
    assert store.get("example.com") is None


def test_set_overwrites_previous_token():
    store = InMemorySessionStore()
    store.set("zdrofit.perfectgym.pl", "old")
    store.set("zdrofit.perfectgym.pl", "new")

    assert store.get("zdrofit.perfectgym.pl") == "new"


def test_expired_token_is_dropped():
    store = InMemorySessionStore()
    store.set("zdrofit.perfectgym.pl", "stale", expires_at=time.time() - 1)
    store.set("127.0.0.1:8080", "fresh", expires_at=time.time() + 3600)

    assert store.get("zdrofit.perfectgym.pl") is None
    assert store.get("127.0.0.1:8080") == "fresh"


def test_concurrent_access():
    store = InMemorySessionStore()

    def worker(i):
        for j in range(200):
            store.set(f"host-{i}", f"token-{j}")
            assert store.get(f"host-{i}") == f"token-{j}"

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert all(store.get(f"host-{i}") == "token-199" for i in range(8))
