"""End-to-end tests for the pugrun command with a fake HTTP session."""

# Third Party
import pytest
from typer.testing import CliRunner

# Local repo modules
import pugrun
from conftest import FakeResponse, FakeSession
from pugplot.query import PubChemClient


runner = CliRunner()


#============================================
@pytest.fixture
def use_session(monkeypatch):
    """Route every PubChemClient the CLI builds through the given fake session."""

    def install(session):
        monkeypatch.setattr(
            pugrun, "PubChemClient", lambda settings: PubChemClient(settings, session=session)
        )
        return session

    return install


#============================================
def test_no_arguments_prints_usage_without_network(monkeypatch):
    def no_network(*args, **kwargs):
        raise AssertionError("no request expected")

    monkeypatch.setattr(pugrun, "PubChemClient", no_network)
    result = runner.invoke(pugrun.app, [])
    assert result.exit_code == 0
    assert "usage ::" in result.output


#============================================
def test_all_numeric_arguments_is_reported(use_session, tmp_path):
    session = use_session(FakeSession())
    result = runner.invoke(pugrun.app, ["123", "4.5", "--out-dir", str(tmp_path / "png")])
    assert result.exit_code == 0
    assert "None of the compounds entered are names" in result.output
    assert session.calls == []


#============================================
def test_report_and_plot(use_session, tmp_path, aspirin_payload):
    out_dir = tmp_path / "png"
    session = use_session(FakeSession({"Aspirin": FakeResponse(aspirin_payload)}))

    result = runner.invoke(pugrun.app, ["123", "Aspirin", "--out-dir", str(out_dir)])

    assert result.exit_code == 0
    assert len(session.calls) == 1
    assert "Compound Information:" in result.output
    assert "CID: 2244" in result.output
    assert sorted(p.name for p in out_dir.iterdir()) == ["Aspirin.png"]


#============================================
def test_failures_do_not_stop_later_names(use_session, tmp_path, aspirin_payload):
    out_dir = tmp_path / "png"
    session = use_session(FakeSession({
        "Nothing": FakeResponse({"Fault": {"Message": "No CID found"}}),
        "Garbled": FakeResponse(b"{not json"),
        "Aspirin": FakeResponse(aspirin_payload),
    }))

    result = runner.invoke(
        pugrun.app, ["Missing", "Nothing", "Garbled", "Aspirin", "--out-dir", str(out_dir)]
    )

    assert result.exit_code == 0
    assert len(session.calls) == 4
    assert "Fetch failed for 'Missing'" in result.output
    assert "No result for 'Nothing'" in result.output
    assert "Could not decode response for 'Garbled'" in result.output
    assert "CID: 2244" in result.output
    assert sorted(p.name for p in out_dir.iterdir()) == ["Aspirin.png"]


#============================================
def test_plot_failure_is_reported_as_skip(use_session, tmp_path, aspirin_record):
    aspirin_record["bonds"] = [{"aid1": [1], "aid2": [77], "order": [1]}]
    out_dir = tmp_path / "png"
    use_session(FakeSession({"Aspirin": FakeResponse({"PC_Compounds": [aspirin_record]})}))

    result = runner.invoke(pugrun.app, ["Aspirin", "--out-dir", str(out_dir)])

    assert result.exit_code == 0
    assert "CID: 2244" in result.output
    assert "Plot failed for 'Aspirin'" in result.output
    assert list(out_dir.iterdir()) == []


#============================================
def test_compound_without_coordinates_is_not_plotted(use_session, tmp_path, aspirin_record):
    del aspirin_record["coords"]
    out_dir = tmp_path / "png"
    use_session(FakeSession({"Aspirin": FakeResponse({"PC_Compounds": [aspirin_record]})}))

    result = runner.invoke(pugrun.app, ["Aspirin", "--out-dir", str(out_dir)])

    assert result.exit_code == 0
    assert "Coordinates: None" in result.output
    assert list(out_dir.iterdir()) == []


#============================================
def test_skipped_collection_elements_are_reported(use_session, tmp_path, aspirin_record):
    payload = {"PC_Compounds": [{"cid": "x"}, aspirin_record]}
    use_session(FakeSession({"Aspirin": FakeResponse(payload)}))

    result = runner.invoke(pugrun.app, ["Aspirin", "--out-dir", str(tmp_path / "png")])

    assert result.exit_code == 0
    assert "Skipped 1 undecodable compound record(s) for 'Aspirin'" in result.output
    assert "CID: 2244" in result.output


#============================================
def test_dash_prefixed_numbers_are_filtered_not_parsed_as_options(use_session, tmp_path, aspirin_payload):
    out_dir = tmp_path / "png"
    session = use_session(FakeSession({"Aspirin": FakeResponse(aspirin_payload)}))

    result = runner.invoke(pugrun.app, ["-7", "Aspirin", "--out-dir", str(out_dir)])

    assert result.exit_code == 0
    assert len(session.calls) == 1
    assert "/Aspirin/" in session.calls[0][0]
    assert "CID: 2244" in result.output
    assert sorted(p.name for p in out_dir.iterdir()) == ["Aspirin.png"]


#============================================
def test_plot_render_error_does_not_stop_later_names(use_session, tmp_path, aspirin_payload, monkeypatch):
    from matplotlib.figure import Figure

    real_savefig = Figure.savefig

    def savefig(self, fname, *args, **kwargs):
        if "Broken" in str(fname):
            raise ValueError("cannot render")
        return real_savefig(self, fname, *args, **kwargs)

    monkeypatch.setattr(Figure, "savefig", savefig)
    out_dir = tmp_path / "png"
    use_session(FakeSession({
        "Broken": FakeResponse(aspirin_payload),
        "Aspirin": FakeResponse(aspirin_payload),
    }))

    result = runner.invoke(pugrun.app, ["Broken", "Aspirin", "--out-dir", str(out_dir)])

    assert result.exit_code == 0
    assert "Plot failed for 'Broken'" in result.output
    assert sorted(p.name for p in out_dir.iterdir()) == ["Aspirin.png"]
