"""Account types and finance display helpers."""
