"""Core formatting pipeline: dispatch, coercion and framing."""
