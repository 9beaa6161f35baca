from tests.fakes.fake_record_source import FakeRecordSource, GatedRecordSource, make_record

__all__ = ["FakeRecordSource", "GatedRecordSource", "make_record"]
