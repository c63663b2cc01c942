"""FlatBuffers tables used by the storage gateway (namespace ``schema``)."""
