"""Tools for testing distributed systems: a linearizability checker, a key/value model, value serialization, key/value message types and a MapReduce skeleton."""

__version__ = "0.1.0"