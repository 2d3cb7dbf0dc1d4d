from django.core.cache import caches


class SnapshotCache:
    """Holds one list snapshot for a table in a Django cache, fresh for `ttl` seconds.

    The backend pickles on set, so every get() hands back a private copy.
    With the default LocMemCache each server process keeps its own snapshot.
    """

    def __init__(self, key: str, ttl: float, alias: str = "default"):
        self.key = key
        self.ttl = ttl
        self.alias = alias

    @property
    def backend(self):
        return caches[self.alias]

    def get(self):
        return self.backend.get(self.key)

    def set(self, value):
        self.backend.set(self.key, value, timeout=self.ttl)

    def invalidate(self):
        self.backend.delete(self.key)
