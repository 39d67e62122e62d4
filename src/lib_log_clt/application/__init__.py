"""Application layer: ports the sink depends on."""
