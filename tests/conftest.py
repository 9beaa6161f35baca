from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from scentgraph.api import create_app
from scentgraph.catalog import CATALOG
from scentgraph.domain.record import FormulationRecord
from scentgraph.graph.builder import CooccurrenceGraphBuilder
from scentgraph.graph.layout import RadialLayoutEngine
from scentgraph.pipeline import GraphPipeline
from tests.fakes import FakeRecordSource, make_record


@pytest.fixture
def dior_records() -> list[FormulationRecord]:
    """23 identical dior perfumes plus one with a single note."""
    records = [make_record("dior", top="bergamot, lemon", middle="rose") for _ in range(23)]
    records.append(make_record("dior", top="bergamot"))
    return records


@pytest.fixture
def mixed_records() -> list[FormulationRecord]:
    return [
        make_record("chanel", top="Aldehydes, Neroli", middle="Rose, Jasmine", base="Vanilla"),
        make_record("chanel", top="aldehydes", middle="rose", base="sandalwood, vanilla"),
        make_record("dior", top="bergamot", middle="rose, iris", base="patchouli"),
        make_record("dior", top="Bergamot, pink pepper", middle="Rose", base="Patchouli, Musk"),
        make_record("gucci", top="mandarin orange", middle="jasmine", base="musk, vanilla"),
        make_record("Dior", top="bergamot", middle="rose"),
        make_record("tom-ford", top="", middle="", base=""),
    ]


@pytest.fixture
def builder() -> CooccurrenceGraphBuilder:
    return CooccurrenceGraphBuilder(CATALOG)


@pytest.fixture
def layout_engine() -> RadialLayoutEngine:
    return RadialLayoutEngine(CATALOG.ordered_ids(), label_offset=20.0)


@pytest.fixture
def pipeline(builder: CooccurrenceGraphBuilder, layout_engine: RadialLayoutEngine) -> GraphPipeline:
    return GraphPipeline(builder=builder, layout_engine=layout_engine)


@pytest.fixture
def fake_source(dior_records: list[FormulationRecord]) -> FakeRecordSource:
    return FakeRecordSource(dior_records)


@pytest.fixture
def test_client(fake_source: FakeRecordSource) -> TestClient:
    """Create test client serving the dior records."""
    app = create_app(source=fake_source)
    return TestClient(app)


@pytest.fixture
def csv_file(tmp_path: Path) -> Path:
    """Small perfume dataset in the source CSV layout."""
    csv_path = tmp_path / "perfumes.csv"
    lines = ["Brand,Top,Middle,Base"]
    lines += ['dior,"bergamot, lemon",rose,'] * 23
    lines += ["dior,bergamot,,"]
    lines += ['chanel," Aldehydes , Neroli","Rose, Jasmine",Vanilla']
    csv_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return csv_path
