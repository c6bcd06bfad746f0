"""
Core services for searchmoji.

- record_store: the loaded record collection
- record_source: reading the record payload from a file or URL
- filtering: the search predicate
- clipboard: asynchronous clipboard writes
- notifications: the epoch-guarded toast state machine
"""
