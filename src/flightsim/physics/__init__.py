"""Physics: vector math, quaternions and flight models."""
