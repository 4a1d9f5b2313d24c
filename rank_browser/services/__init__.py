from .record_source import InMemoryRecordSource, JsonRecordSource, RecordSource

__all__ = ["InMemoryRecordSource", "JsonRecordSource", "RecordSource"]
