from cardstash.testing.fixtures import inventory, memory_app  # noqa: F401
